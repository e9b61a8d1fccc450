"""Pytest fixtures and configuration."""

import asyncio
import os
from collections.abc import Iterator

import pytest

# Set test environment variables before importing settings
os.environ.setdefault("TMDB_API_KEY", "test-api-key")

from movieflix.config import get_settings
from movieflix.schemas.movie import Movie, MoviePage
from movieflix.services.base import InvalidResponseError
from movieflix.services.catalog import BaseMovieService


def make_movie(movie_id: int, **overrides) -> Movie:
    """Build a movie with sensible defaults."""
    data = {
        "id": movie_id,
        "title": f"Movie {movie_id}",
        "overview": f"Overview of movie {movie_id}",
        "poster_path": f"/poster{movie_id}.jpg",
        "release_date": "2024-03-01",
        "vote_average": 7.5,
        "vote_count": 100,
    }
    data.update(overrides)
    return Movie.model_validate(data)


def make_page(page: int, total_pages: int, count: int = 20, first_id: int | None = None) -> MoviePage:
    """Build a page of ``count`` movies with consecutive ids."""
    start = first_id if first_id is not None else (page - 1) * count + 1
    return MoviePage(
        page=page,
        results=[make_movie(i) for i in range(start, start + count)],
        total_pages=total_pages,
        total_results=total_pages * count,
    )


class FakeMovieService(BaseMovieService):
    """In-process movie service for view-model tests.

    Responses are looked up by page, query or id; an exception stored in
    place of a response is raised instead. Setting ``gate`` to an unset
    ``asyncio.Event`` holds every call until it is set.
    """

    def __init__(self) -> None:
        self.popular_pages: dict[int, MoviePage | Exception] = {}
        self.search_pages: dict[str, MoviePage | Exception] = {}
        self.details: dict[int, Movie | Exception] = {}
        self.calls: list[tuple] = []
        self.gate: asyncio.Event | None = None
        self.active = 0
        self.max_active = 0

    async def _respond(self, call: tuple, result):
        self.calls.append(call)
        self.active += 1
        self.max_active = max(self.max_active, self.active)
        try:
            if self.gate is not None:
                await self.gate.wait()
            if result is None:
                raise InvalidResponseError(status_code=404)
            if isinstance(result, Exception):
                raise result
            return result
        finally:
            self.active -= 1

    async def list_popular(self, page: int = 1) -> MoviePage:
        return await self._respond(("list_popular", page), self.popular_pages.get(page))

    async def get_details(self, movie_id: int) -> Movie:
        return await self._respond(("get_details", movie_id), self.details.get(movie_id))

    async def search(self, query: str, page: int = 1) -> MoviePage:
        return await self._respond(("search", query, page), self.search_pages.get(query))


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Iterator[None]:
    """Make every test read settings from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fake_service() -> FakeMovieService:
    return FakeMovieService()


@pytest.fixture
def movie_factory():
    return make_movie


@pytest.fixture
def page_factory():
    return make_page
