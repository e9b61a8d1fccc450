"""Widget timeline provider."""

from datetime import UTC, datetime, timedelta

from movieflix.schemas.widget import WidgetEntry, WidgetMovie, WidgetTimeline
from movieflix.widget.manager import WidgetDataManager

PLACEHOLDER_MOVIES = (
    WidgetMovie(id=1, title="The Shawshank Redemption", release_year="1994", rating=9.3),
    WidgetMovie(id=2, title="The Godfather", release_year="1972", rating=9.2),
    WidgetMovie(id=3, title="The Dark Knight", release_year="2008", rating=9.0),
)


class WidgetTimelineProvider:
    """Builds widget entries from the cached snapshot.

    Falls back to placeholder movies while nothing has been cached.
    """

    def __init__(
        self,
        manager: WidgetDataManager,
        refresh_interval: timedelta = timedelta(hours=1),
    ) -> None:
        self.manager = manager
        self.refresh_interval = refresh_interval

    def placeholder(self, now: datetime | None = None) -> WidgetEntry:
        return WidgetEntry(date=now or datetime.now(UTC), movies=list(PLACEHOLDER_MOVIES))

    def snapshot(self, now: datetime | None = None) -> WidgetEntry:
        now = now or datetime.now(UTC)
        movies = self.manager.get_trending_movies()
        if not movies:
            return self.placeholder(now)
        return WidgetEntry(date=now, movies=movies)

    def timeline(self, now: datetime | None = None) -> WidgetTimeline:
        """Return a single-entry timeline that expires after ``refresh_interval``."""
        now = now or datetime.now(UTC)
        return WidgetTimeline(
            entries=[self.snapshot(now)],
            next_update=now + self.refresh_interval,
        )
