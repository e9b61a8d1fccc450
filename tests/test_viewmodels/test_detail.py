"""Tests for the movie detail view-model."""

import pytest

from movieflix.schemas.movie import Movie
from movieflix.services.base import InvalidResponseError
from movieflix.viewmodels.detail import MovieDetailViewModel

FIGHT_CLUB = Movie.model_validate(
    {
        "id": 550,
        "title": "Fight Club",
        "release_date": "1999-10-05",
        "runtime": 139,
        "vote_average": 8.438,
        "genres": [{"id": 18, "name": "Drama"}, {"id": 53, "name": "Thriller"}],
    }
)


@pytest.fixture
def view_model(fake_service) -> MovieDetailViewModel:
    return MovieDetailViewModel(fake_service)


class TestFetchDetails:
    """Tests for loading details."""

    async def test_fetch_details(self, view_model, fake_service) -> None:
        fake_service.details[550] = FIGHT_CLUB

        await view_model.fetch_details(550)

        assert view_model.movie == FIGHT_CLUB
        assert view_model.is_loading is False
        assert view_model.error_message is None
        assert fake_service.calls == [("get_details", 550)]

    async def test_fetch_details_failure(self, view_model, fake_service) -> None:
        fake_service.details[550] = FIGHT_CLUB
        await view_model.fetch_details(550)

        fake_service.details[551] = InvalidResponseError(404)
        await view_model.fetch_details(551)

        assert view_model.movie == FIGHT_CLUB
        assert view_model.is_loading is False
        assert view_model.error_message == "Invalid response from the server"


class TestFormatting:
    """Tests for display text."""

    async def test_formatted_values(self, view_model, fake_service) -> None:
        fake_service.details[550] = FIGHT_CLUB
        await view_model.fetch_details(550)

        assert view_model.release_date_text == "Oct 5, 1999"
        assert view_model.runtime_text == "2h 19m"
        assert view_model.genres_text == "Drama, Thriller"
        assert view_model.rating_text == "8.4/10"

    def test_no_movie(self, view_model) -> None:
        assert view_model.release_date_text == "Release date unknown"
        assert view_model.runtime_text == "Runtime unknown"
        assert view_model.genres_text == "Genres unknown"
        assert view_model.rating_text == "Not rated"

    @pytest.mark.parametrize(("runtime", "expected"), [(45, "45m"), (60, "1h 0m"), (0, "0m")])
    def test_runtime_text(self, view_model, runtime: int, expected: str) -> None:
        view_model.movie = Movie(id=1, title="Short", runtime=runtime)
        assert view_model.runtime_text == expected

    def test_empty_genres(self, view_model) -> None:
        view_model.movie = Movie(id=1, title="Untagged", genres=[])
        assert view_model.genres_text == "Genres unknown"

    def test_malformed_release_date(self, view_model) -> None:
        view_model.movie = Movie(id=1, title="Undated", release_date="soon")
        assert view_model.release_date_text == "Release date unknown"
