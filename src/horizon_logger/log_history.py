import threading
from contextlib import contextmanager
from typing import Iterator, List, Optional

from src.horizon_logger.log_config import HISTORY_CAPACITY
from src.horizon_logger.log_entry import LogEntry
from src.horizon_logger.log_exceptions import HistoryUnavailableError


class LogHistory:
    """
    Bounded, insertion-ordered buffer of recent log entries.

    Responsibilities:
      - Keep at most `capacity` entries, evicting the oldest first
      - Guard every read and write with one exclusive lock
      - Refuse access after a failure inside the critical section
    """

    def __init__(self, capacity: int = HISTORY_CAPACITY):
        if capacity < 1:
            raise ValueError(f"History capacity must be positive, got {capacity}")
        self._capacity = capacity
        self._lock = threading.Lock()
        self._entries: List[LogEntry] = []
        self._poisoned = False

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def is_poisoned(self) -> bool:
        return self._poisoned

    @contextmanager
    def _locked(self) -> Iterator[List[LogEntry]]:
        """
        Hold the history lock for the duration of the block.

        An exception escaping the block marks the history as poisoned;
        the entries may be half-updated and are not handed out again.
        """
        with self._lock:
            if self._poisoned:
                raise HistoryUnavailableError("history lock poisoned")
            try:
                yield self._entries
            except BaseException:
                self._poisoned = True
                raise

    # -------------------------------------------------
    # Writes
    # -------------------------------------------------
    def append(self, entry: LogEntry) -> None:
        with self._locked() as entries:
            entries.append(entry)
            if len(entries) > self._capacity:
                entries.pop(0)

    def clear(self) -> None:
        with self._locked() as entries:
            entries.clear()

    # -------------------------------------------------
    # Reads
    # -------------------------------------------------
    def snapshot(self) -> List[LogEntry]:
        """
        Return an independent copy of the entries, oldest first.
        """
        with self._locked() as entries:
            return list(entries)

    def __len__(self) -> int:
        with self._locked() as entries:
            return len(entries)


_shared_history: Optional[LogHistory] = None
_shared_history_lock = threading.Lock()


def get_shared_history() -> LogHistory:
    """
    Process-wide history, created on first access.
    """
    global _shared_history

    if _shared_history is None:
        with _shared_history_lock:
            if _shared_history is None:
                _shared_history = LogHistory()
    return _shared_history
