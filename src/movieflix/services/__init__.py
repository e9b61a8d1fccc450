"""External API clients and catalog services."""

from movieflix.services.base import (
    BaseAPIClient,
    FetchError,
    InvalidDataError,
    InvalidResponseError,
    InvalidURLError,
    RequestFailedError,
)
from movieflix.services.catalog import BaseMovieService, MovieService
from movieflix.services.tmdb import TMDBClient, get_tmdb_client

__all__ = [
    "BaseAPIClient",
    "FetchError",
    "InvalidURLError",
    "InvalidResponseError",
    "InvalidDataError",
    "RequestFailedError",
    "TMDBClient",
    "get_tmdb_client",
    "BaseMovieService",
    "MovieService",
]
