"""Widget data manager: the cached top movies shown by the widget."""

import logging
from collections.abc import Callable, Iterable

from pydantic import TypeAdapter, ValidationError

from movieflix.schemas.movie import Movie
from movieflix.schemas.widget import WidgetMovie
from movieflix.widget.store import SnapshotStore

logger = logging.getLogger(__name__)

_widget_movies = TypeAdapter(list[WidgetMovie])


class WidgetDataManager:
    """Keeps the widget's movie snapshot in a :class:`SnapshotStore`.

    Built once by the application and passed to whatever needs it. Cached
    records are loaded from the store on construction.
    """

    def __init__(self, store: SnapshotStore, key: str, limit: int = 5) -> None:
        """Initialize the manager.

        Args:
            store: Where the snapshot is persisted.
            key: Namespace key the snapshot is stored under.
            limit: Maximum number of movies kept.
        """
        self.store = store
        self.key = key
        self.limit = limit
        self._movies: list[WidgetMovie] = []
        self._reload_listeners: list[Callable[[], None]] = []
        self._load()

    def get_trending_movies(self) -> list[WidgetMovie]:
        return list(self._movies)

    def update_trending_movies(self, movies: Iterable[Movie]) -> list[WidgetMovie]:
        """Replace the snapshot with the first ``limit`` movies and save it.

        A failed save is logged; the new snapshot is still served and reload
        listeners still run.
        """
        snapshot = []
        for movie in movies:
            if len(snapshot) >= self.limit:
                break
            snapshot.append(WidgetMovie.from_movie(movie))

        self._movies = snapshot
        self._save()

        for listener in list(self._reload_listeners):
            listener()
        return self.get_trending_movies()

    def on_reload(self, listener: Callable[[], None]) -> None:
        """Register a callback run after every snapshot update."""
        self._reload_listeners.append(listener)

    def _save(self) -> None:
        # The in-memory snapshot stays current even if the store rejects it.
        try:
            self.store.set(self.key, _widget_movies.dump_json(self._movies))
        except OSError as e:
            logger.error("Failed to save widget data under %r: %s", self.key, e)
            return
        logger.debug("Saved %d widget movies under %r", len(self._movies), self.key)

    def _load(self) -> None:
        data = self.store.get(self.key)
        if data is None:
            return

        try:
            self._movies = _widget_movies.validate_json(data)
        except ValidationError as e:
            logger.error("Failed to load widget data from %r: %s", self.key, e)
