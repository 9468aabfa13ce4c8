from enum import Enum, auto
from functools import total_ordering

from colorama import Back, Fore, Style

from src.horizon_logger.log_config import LABEL_WIDTH


@total_ordering
class LogSeverity(Enum):
    """
    Severity level for console log entries.

    Members are ordered by increasing importance and each one
    maps to a fixed display label and color style.
    """

    DEBUG = auto()      # Developer-focused diagnostic information
    INFO = auto()       # Normal system operation
    WARN = auto()       # Unexpected but recoverable condition
    ERROR = auto()      # Operation failed, system continued
    CRITICAL = auto()   # System integrity or safety at risk

    def __lt__(self, other):
        if not isinstance(other, LogSeverity):
            return NotImplemented
        return self.value < other.value

    @property
    def label(self) -> str:
        """Centered, fixed-width label used on the console."""
        return f"{_LABEL_TEXT[self]:^{LABEL_WIDTH}}"

    @property
    def style(self) -> str:
        """ANSI style prefix (foreground, plus background for CRITICAL)."""
        return _STYLES[self]

    def colored_label(self) -> str:
        return f"{self.style}{self.label}{Style.RESET_ALL}"


_LABEL_TEXT = {
    LogSeverity.DEBUG: "DEBUG",
    LogSeverity.INFO: "INFO",
    LogSeverity.WARN: "WARN",
    LogSeverity.ERROR: "ERROR",
    LogSeverity.CRITICAL: "CRIT",
}

_STYLES = {
    LogSeverity.DEBUG: Fore.CYAN,
    LogSeverity.INFO: Fore.GREEN,
    LogSeverity.WARN: Fore.YELLOW,
    LogSeverity.ERROR: Fore.RED,
    LogSeverity.CRITICAL: Fore.WHITE + Back.RED,
}

for _table in (_LABEL_TEXT, _STYLES):
    _missing = set(LogSeverity) - set(_table)
    if _missing:
        raise RuntimeError(f"Severity table incomplete, missing: {sorted(m.name for m in _missing)}")
