import re

from colorama import Fore, Style, just_fix_windows_console

from src.horizon_logger.log_entry import LogEntry

# Enables ANSI handling on legacy Windows consoles; no-op elsewhere.
just_fix_windows_console()

TIMESTAMP_STYLE = Fore.WHITE
THREAD_STYLE = Fore.MAGENTA
COMPONENT_STYLE = Fore.BLUE

_ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")


def _paint(style: str, text: str) -> str:
    return f"{style}{text}{Style.RESET_ALL}"


def format_line(entry: LogEntry, thread_id: str) -> str:
    """
    Render one console line for a log entry:

        <timestamp> <severity-label> [<thread-id>] [<component>] <message>

    Each field except the message carries its own color.
    """
    return " ".join(
        (
            _paint(TIMESTAMP_STYLE, entry.timestamp),
            entry.severity.colored_label(),
            _paint(THREAD_STYLE, f"[{thread_id}]"),
            _paint(COMPONENT_STYLE, f"[{entry.component}]"),
            entry.message,
        )
    )


def strip_ansi(text: str) -> str:
    """Remove ANSI color sequences, leaving the plain line."""
    return _ANSI_ESCAPE.sub("", text)
