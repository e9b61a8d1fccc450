"""Pydantic schemas for TMDB payloads and widget snapshots."""

from movieflix.schemas.movie import Genre, Movie, MoviePage, Page
from movieflix.schemas.widget import WidgetEntry, WidgetMovie, WidgetTimeline

__all__ = [
    "Genre",
    "Movie",
    "MoviePage",
    "Page",
    "WidgetEntry",
    "WidgetMovie",
    "WidgetTimeline",
]
