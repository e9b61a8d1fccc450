"""MovieFlix - paginated movie catalog core backed by TMDB."""

__version__ = "0.1.0"
