"""Home-screen widget snapshot and timeline."""

from movieflix.widget.manager import WidgetDataManager
from movieflix.widget.store import InMemorySnapshotStore, SnapshotStore
from movieflix.widget.timeline import PLACEHOLDER_MOVIES, WidgetTimelineProvider

__all__ = [
    "InMemorySnapshotStore",
    "SnapshotStore",
    "WidgetDataManager",
    "WidgetTimelineProvider",
    "PLACEHOLDER_MOVIES",
]
