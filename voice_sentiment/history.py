"""
Voice Sentiment - Recent Results.

Bounded, most-recent-first list of analyses for display and
replay. This is the only mutable state around the core, so
inserts are serialized with a lock (single writer at a time).
"""

import threading
from collections import deque
from typing import Any, Deque, Iterator, List, Optional

from .models import AnalysisResult, HistoryEntry


DEFAULT_MAX_ENTRIES = 6


class RecentResults:
    """
    Most-recent-first history capped at max_entries.

    Inserting beyond capacity evicts the oldest entry.
    """

    def __init__(self, max_entries: int = DEFAULT_MAX_ENTRIES) -> None:
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        self._max_entries = max_entries
        self._entries: Deque[HistoryEntry] = deque(maxlen=max_entries)
        self._lock = threading.Lock()

    @property
    def max_entries(self) -> int:
        return self._max_entries

    def add(self, result: AnalysisResult) -> HistoryEntry:
        """Insert a result at the front, evicting the oldest if full."""
        entry = HistoryEntry.from_result(result)
        with self._lock:
            self._entries.appendleft(entry)
        return entry

    def latest(self) -> Optional[HistoryEntry]:
        """Most recent entry, or None when empty."""
        with self._lock:
            return self._entries[0] if self._entries else None

    def entries(self) -> List[HistoryEntry]:
        """Snapshot of all entries, newest first."""
        with self._lock:
            return list(self._entries)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def to_list(self) -> List[dict[str, Any]]:
        return [e.to_dict() for e in self.entries()]

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __iter__(self) -> Iterator[HistoryEntry]:
        return iter(self.entries())
