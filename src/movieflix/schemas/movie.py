"""Pydantic schemas for TMDB movie payloads."""

from datetime import datetime
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

# TMDB image CDN
IMAGE_BASE_URL = "https://image.tmdb.org/t/p"
POSTER_SIZE = "w500"
BACKDROP_SIZE = "w1280"

UNRATED = "N/A"

T = TypeVar("T")


def image_url(path: str | None, size: str) -> str | None:
    """Build a full image URL from a TMDB path fragment (e.g. "/abc123.jpg")."""
    if not path:
        return None
    return f"{IMAGE_BASE_URL}/{size}{path}"


def parse_release_date(value: str | None) -> datetime | None:
    """Parse a ``YYYY-MM-DD`` release date, returning None if it doesn't match."""
    if not value:
        return None
    try:
        return datetime.strptime(value, "%Y-%m-%d")
    except ValueError:
        return None


class Genre(BaseModel):
    """A genre attached to a movie."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: int = Field(description="TMDB genre ID")
    name: str = Field(description="Genre name")


class Movie(BaseModel):
    """A movie as returned by the TMDB list, search and details endpoints.

    Details responses carry ``genres`` and ``runtime``; list responses don't,
    so both are optional. Any extra fields (credits, videos, ...) are ignored.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: int = Field(description="TMDB movie ID")
    title: str = Field(description="Movie title")
    overview: str | None = Field(default=None, description="Movie overview/synopsis")
    poster_path: str | None = Field(default=None, description="Poster image path")
    backdrop_path: str | None = Field(default=None, description="Backdrop image path")
    release_date: str | None = Field(default=None, description="Release date (YYYY-MM-DD)")
    vote_average: float | None = Field(default=None, description="Average vote score")
    vote_count: int | None = Field(default=None, description="Number of votes")
    genres: tuple[Genre, ...] | None = Field(default=None, description="Genres")
    runtime: int | None = Field(default=None, description="Runtime in minutes")

    @property
    def poster_url(self) -> str | None:
        return image_url(self.poster_path, POSTER_SIZE)

    @property
    def backdrop_url(self) -> str | None:
        return image_url(self.backdrop_path, BACKDROP_SIZE)

    @property
    def release_year(self) -> str | None:
        """Four digit release year, or None when the date is missing or malformed."""
        released = parse_release_date(self.release_date)
        if released is None:
            return None
        return f"{released.year:04d}"

    @property
    def formatted_rating(self) -> str:
        if self.vote_average is None:
            return UNRATED
        return f"{self.vote_average:.1f}"


class Page(BaseModel, Generic[T]):
    """Paginated list envelope used by the list and search endpoints."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    page: int = Field(description="Current page number (1-based)")
    results: list[T] = Field(default_factory=list, description="Items on this page")
    total_pages: int = Field(description="Total number of pages")
    total_results: int = Field(description="Total number of results")

    @model_validator(mode="after")
    def check_page_bounds(self) -> "Page[T]":
        if self.total_results > 0 and not 1 <= self.page <= self.total_pages:
            raise ValueError(
                f"page {self.page} is outside 1..{self.total_pages} "
                f"for {self.total_results} results"
            )
        return self


MoviePage = Page[Movie]
