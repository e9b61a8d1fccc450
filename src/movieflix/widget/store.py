"""Key-value storage for widget snapshots."""

from abc import ABC, abstractmethod


class SnapshotStore(ABC):
    """Byte storage shared between the app and the widget, keyed by name."""

    @abstractmethod
    def get(self, key: str) -> bytes | None:
        """Return the data stored under ``key``, or None."""
        ...

    @abstractmethod
    def set(self, key: str, data: bytes) -> None:
        """Store ``data`` under ``key``, replacing any previous value.

        Raises:
            OSError: If the data cannot be written.
        """
        ...


class InMemorySnapshotStore(SnapshotStore):
    """Snapshot store that lives for the lifetime of the process."""

    def __init__(self) -> None:
        self._data: dict[str, bytes] = {}

    def get(self, key: str) -> bytes | None:
        return self._data.get(key)

    def set(self, key: str, data: bytes) -> None:
        self._data[key] = data
