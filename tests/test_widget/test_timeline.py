"""Tests for the widget timeline provider."""

from datetime import UTC, datetime, timedelta

from movieflix.widget.manager import WidgetDataManager
from movieflix.widget.store import InMemorySnapshotStore
from movieflix.widget.timeline import PLACEHOLDER_MOVIES, WidgetTimelineProvider

NOW = datetime(2025, 3, 2, 12, 0, tzinfo=UTC)


def make_provider(**kwargs) -> WidgetTimelineProvider:
    manager = WidgetDataManager(InMemorySnapshotStore(), "widget_trending_movies")
    return WidgetTimelineProvider(manager, **kwargs)


class TestWidgetTimelineProvider:
    """Tests for widget entries and timelines."""

    def test_placeholder(self) -> None:
        entry = make_provider().placeholder(NOW)
        assert entry.date == NOW
        assert [m.title for m in entry.movies] == [m.title for m in PLACEHOLDER_MOVIES]

    def test_snapshot_without_cache_uses_placeholders(self) -> None:
        entry = make_provider().snapshot(NOW)
        assert len(entry.movies) == 3
        assert entry.movies[0].title == "The Shawshank Redemption"

    def test_snapshot_uses_cached_movies(self, movie_factory) -> None:
        provider = make_provider()
        provider.manager.update_trending_movies([movie_factory(1), movie_factory(2)])

        entry = provider.snapshot(NOW)

        assert [m.id for m in entry.movies] == [1, 2]

    def test_timeline_refreshes_hourly(self, movie_factory) -> None:
        provider = make_provider()
        provider.manager.update_trending_movies([movie_factory(1)])

        timeline = provider.timeline(NOW)

        assert len(timeline.entries) == 1
        assert timeline.entries[0].date == NOW
        assert [m.id for m in timeline.entries[0].movies] == [1]
        assert timeline.next_update == NOW + timedelta(hours=1)

    def test_custom_refresh_interval(self) -> None:
        timeline = make_provider(refresh_interval=timedelta(minutes=15)).timeline(NOW)
        assert timeline.next_update == NOW + timedelta(minutes=15)

    def test_defaults_to_current_time(self) -> None:
        before = datetime.now(UTC)
        entry = make_provider().snapshot()
        assert entry.date >= before
