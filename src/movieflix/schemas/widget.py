"""Pydantic schemas for the home-screen widget snapshot."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from movieflix.schemas.movie import POSTER_SIZE, Movie, image_url

UNKNOWN_YEAR = "N/A"


class WidgetMovie(BaseModel):
    """The small subset of a movie that the widget displays."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: int = Field(description="TMDB movie ID")
    title: str = Field(description="Movie title")
    poster_path: str | None = Field(default=None, description="Poster image path")
    release_year: str = Field(default=UNKNOWN_YEAR, description="Release year")
    rating: float = Field(default=0.0, description="Average vote score")

    @property
    def poster_url(self) -> str | None:
        return image_url(self.poster_path, POSTER_SIZE)

    @classmethod
    def from_movie(cls, movie: Movie) -> "WidgetMovie":
        return cls(
            id=movie.id,
            title=movie.title,
            poster_path=movie.poster_path,
            release_year=movie.release_year or UNKNOWN_YEAR,
            rating=movie.vote_average or 0.0,
        )


class WidgetEntry(BaseModel):
    """What the widget shows at a given moment."""

    date: datetime = Field(description="Time the entry is valid from")
    movies: list[WidgetMovie] = Field(default_factory=list, description="Movies to display")


class WidgetTimeline(BaseModel):
    """Entries for the widget plus the time it should ask for a new timeline."""

    entries: list[WidgetEntry] = Field(default_factory=list, description="Timeline entries")
    next_update: datetime = Field(description="When to request the next timeline")
