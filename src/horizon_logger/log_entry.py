from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional
import threading

from src.horizon_logger.log_config import TIMESTAMP_FORMAT
from src.horizon_logger.log_severity import LogSeverity


@dataclass(frozen=True)
class LogEntry:
    """
    Record of a single console log call, as kept in the history buffer.

    Entries are plain values: built once when the message is emitted,
    never mutated, compared structurally.
    """

    timestamp: str
    # Local wall-clock time, "YYYY-MM-DD HH:MM:SS.mmm".

    severity: LogSeverity
    # Importance of the event.

    component: str
    # Free-form tag naming the emitting subsystem
    # (e.g., NETWORK, GAME/COMBAT). Not validated.

    message: str
    # Human-readable text. Not validated, never truncated.

    def to_dict(self) -> Dict[str, Any]:
        return {
            "timestamp": self.timestamp,
            "severity": self.severity.name,
            "component": self.component,
            "message": self.message,
        }


def format_timestamp(now: Optional[datetime] = None) -> str:
    """
    Format a local timestamp with millisecond precision.

    Milliseconds are truncated from the microsecond field, not rounded.
    """
    if now is None:
        now = datetime.now()
    return f"{now.strftime(TIMESTAMP_FORMAT)}.{now.microsecond // 1000:03d}"


def current_thread_id() -> str:
    return f"ThreadId({threading.get_ident()})"
