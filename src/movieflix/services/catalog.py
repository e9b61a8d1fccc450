"""Movie catalog service: TMDB operations used by the view-models."""

from abc import ABC, abstractmethod

from movieflix.schemas.movie import Movie, MoviePage
from movieflix.services.base import BaseAPIClient
from movieflix.services.tmdb import MOVIE_DETAILS, POPULAR_MOVIES, SEARCH_MOVIE


class BaseMovieService(ABC):
    """Movie operations the view-models depend on."""

    @abstractmethod
    async def list_popular(self, page: int = 1) -> MoviePage:
        """Return one page of popular movies."""
        ...

    @abstractmethod
    async def get_details(self, movie_id: int) -> Movie:
        """Return details for a single movie."""
        ...

    @abstractmethod
    async def search(self, query: str, page: int = 1) -> MoviePage:
        """Return one page of movies matching ``query``."""
        ...


class MovieService(BaseMovieService):
    """Maps catalog operations onto TMDB requests.

    Holds no state of its own. Arguments are forwarded as-is: the page number
    is not validated and the query is not trimmed. Fetch errors propagate
    unchanged.
    """

    def __init__(self, client: BaseAPIClient, language: str = "en-US") -> None:
        self.client = client
        self.language = language

    async def list_popular(self, page: int = 1) -> MoviePage:
        """Get one page of popular movies.

        Args:
            page: Page number (1-based), sent unvalidated.

        Returns:
            The page of movies.
        """
        params = {
            "page": str(page),
            "language": self.language,
        }
        return await self.client.fetch(POPULAR_MOVIES, params, MoviePage)

    async def get_details(self, movie_id: int) -> Movie:
        """Get detailed information about a specific movie.

        Args:
            movie_id: TMDB movie ID.

        Returns:
            Movie details. Appended credits and videos are not decoded.
        """
        params = {
            "language": self.language,
            "append_to_response": "videos,credits",
        }
        return await self.client.fetch(MOVIE_DETAILS.format(movie_id=movie_id), params, Movie)

    async def search(self, query: str, page: int = 1) -> MoviePage:
        """Search for movies by title.

        Args:
            query: Search query string, sent as-is.
            page: Page number (1-based).

        Returns:
            The page of matching movies, adult content excluded.
        """
        params = {
            "query": query,
            "page": str(page),
            "language": self.language,
            "include_adult": "false",
        }
        return await self.client.fetch(SEARCH_MOVIE, params, MoviePage)
