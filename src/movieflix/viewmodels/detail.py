"""Movie detail view-model."""

import logging

from movieflix.schemas.movie import Movie, parse_release_date
from movieflix.services.base import FetchError
from movieflix.services.catalog import BaseMovieService

logger = logging.getLogger(__name__)


class MovieDetailViewModel:
    """Loads one movie's details and formats them for display."""

    def __init__(self, service: BaseMovieService) -> None:
        self.service = service
        self.movie: Movie | None = None
        self.is_loading = False
        self.error_message: str | None = None

    async def fetch_details(self, movie_id: int) -> None:
        """Fetch details for ``movie_id``, keeping the previous movie on failure."""
        self.is_loading = True
        self.error_message = None
        try:
            self.movie = await self.service.get_details(movie_id)
        except FetchError as e:
            logger.warning("Fetching details for movie %s failed: %s", movie_id, e.message)
            self.error_message = e.message
        finally:
            self.is_loading = False

    @property
    def release_date_text(self) -> str:
        released = parse_release_date(self.movie.release_date if self.movie else None)
        if released is None:
            return "Release date unknown"
        return f"{released:%b} {released.day}, {released.year}"

    @property
    def runtime_text(self) -> str:
        if self.movie is None or self.movie.runtime is None:
            return "Runtime unknown"

        hours, minutes = divmod(self.movie.runtime, 60)
        if hours > 0:
            return f"{hours}h {minutes}m"
        return f"{minutes}m"

    @property
    def genres_text(self) -> str:
        if self.movie is None or not self.movie.genres:
            return "Genres unknown"
        return ", ".join(genre.name for genre in self.movie.genres)

    @property
    def rating_text(self) -> str:
        if self.movie is None or self.movie.vote_average is None:
            return "Not rated"
        return f"{self.movie.vote_average:.1f}/10"
