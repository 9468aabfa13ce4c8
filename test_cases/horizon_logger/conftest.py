import pytest

from src.horizon_logger.log_entry import LogEntry
from src.horizon_logger.log_history import LogHistory
from src.horizon_logger.log_severity import LogSeverity


class EvictionFailure(Exception):
    pass


class _FailingEvictionList(list):
    def pop(self, index=-1):
        raise EvictionFailure("eviction failed")


def make_entry(n: int) -> LogEntry:
    return LogEntry("2024-01-01 00:00:00.000", LogSeverity.INFO, "TEST", f"message {n}")


@pytest.fixture
def failing_history() -> LogHistory:
    """A capacity-1 history whose next eviction raises inside the lock."""
    history = LogHistory(capacity=1)
    history.append(make_entry(0))
    history._entries = _FailingEvictionList(history._entries)
    return history


@pytest.fixture
def poisoned_history(failing_history: LogHistory) -> LogHistory:
    with pytest.raises(EvictionFailure):
        failing_history.append(make_entry(1))
    return failing_history
