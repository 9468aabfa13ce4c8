import sys
from typing import List, Optional, TextIO

from src.horizon_logger.log_entry import LogEntry, current_thread_id, format_timestamp
from src.horizon_logger.log_exceptions import HistoryUnavailableError
from src.horizon_logger.log_format import format_line
from src.horizon_logger.log_history import LogHistory, get_shared_history
from src.horizon_logger.log_severity import LogSeverity


class HorizonLogger:
    """
    Console logging façade with a bounded in-memory history.

    Each call prints one colored line and records a LogEntry.
    The logger holds no state of its own; entries go to the
    process-wide history unless another one is supplied.
    """

    def __init__(
        self,
        *,
        history: Optional[LogHistory] = None,
        stream: Optional[TextIO] = None,
    ):
        self._history = history
        self._stream = stream

    @property
    def history(self) -> LogHistory:
        if self._history is None:
            return get_shared_history()
        return self._history

    def debug(self, component: str, message: str) -> None:
        self.log(LogSeverity.DEBUG, component, message)

    def info(self, component: str, message: str) -> None:
        self.log(LogSeverity.INFO, component, message)

    def warn(self, component: str, message: str) -> None:
        self.log(LogSeverity.WARN, component, message)

    def error(self, component: str, message: str) -> None:
        self.log(LogSeverity.ERROR, component, message)

    def critical(self, component: str, message: str) -> None:
        self.log(LogSeverity.CRITICAL, component, message)

    def log(self, severity: LogSeverity, component: str, message: str) -> None:
        """
        Print a log line and store it in the history.

        Never raises because of the history: if it is unavailable
        the line is printed and the entry is dropped.
        """
        entry = LogEntry(
            timestamp=format_timestamp(),
            severity=severity,
            component=component,
            message=message,
        )
        thread_id = current_thread_id()

        stream = sys.stdout if self._stream is None else self._stream
        print(format_line(entry, thread_id), file=stream)

        try:
            self.history.append(entry)
        except Exception:
            # Covers HistoryUnavailableError and failures inside the
            # append itself, which leave the history poisoned.
            pass

    def get_history(self) -> List[LogEntry]:
        """
        Snapshot of the history, oldest first.

        Returns an empty list when the history is unavailable.
        """
        try:
            return self.history.snapshot()
        except HistoryUnavailableError:
            return []
