"""TMDB (The Movie Database) fetch client."""

from movieflix.config import get_settings
from movieflix.services.base import BaseAPIClient

# TMDB v3 endpoints
POPULAR_MOVIES = "/movie/popular"
MOVIE_DETAILS = "/movie/{movie_id}"
SEARCH_MOVIE = "/search/movie"


class TMDBClient(BaseAPIClient):
    """Fetch client for The Movie Database (TMDB) API.

    Authenticates with the v3 ``api_key`` query parameter, which is added
    to every request.
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
    ) -> None:
        """Initialize the TMDB client.

        Args:
            api_key: TMDB API key. If not provided, uses settings.
            base_url: TMDB base URL. If not provided, uses settings.
            timeout: Transport timeout in seconds. If not provided, uses settings.
        """
        settings = get_settings()
        self._api_key = api_key or settings.tmdb_api_key
        base = base_url or settings.tmdb_base_url

        if not self._api_key:
            raise ValueError("TMDB API key is required")

        super().__init__(
            base_url=base,
            timeout=timeout if timeout is not None else settings.tmdb_timeout,
        )

    @property
    def default_params(self) -> dict[str, str]:
        """Return the API key parameter."""
        return {"api_key": self._api_key}


def get_tmdb_client() -> TMDBClient:
    """Factory function to create a TMDB client from settings."""
    return TMDBClient()
