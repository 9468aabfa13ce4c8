"""
Module: tracing_init.py
Location: src/horizon_logger/

Optional process-wide setup of the standard `logging` framework.

This is a separate path from HorizonLogger: HorizonLogger writes its
own colored lines and does not require init() to have been called.
"""

from __future__ import annotations

import logging
import sys
import threading
from dataclasses import dataclass, field
from typing import Optional, TextIO


@dataclass(frozen=True)
class TracingConfig:
    """Switches for the root logging handler installed by init()."""

    level: str = "info"
    show_thread_ids: bool = True
    show_thread_names: bool = True
    show_file: bool = True
    show_line_number: bool = True
    show_level: bool = True
    show_target: bool = False       # logger name, e.g. "src.horizon_logger.x"
    stream: Optional[TextIO] = field(default=None, compare=False)


_initialized = False
_init_lock = threading.Lock()


def build_format(config: TracingConfig) -> str:
    """
    Build a logging.Formatter format string from the config switches.
    """
    parts = ["%(asctime)s"]

    if config.show_level:
        parts.append("%(levelname)s")

    if config.show_thread_names and config.show_thread_ids:
        parts.append("%(threadName)s(%(thread)d)")
    elif config.show_thread_names:
        parts.append("%(threadName)s")
    elif config.show_thread_ids:
        parts.append("%(thread)d")

    if config.show_target:
        parts.append("%(name)s")

    if config.show_file and config.show_line_number:
        parts.append("%(filename)s:%(lineno)d:")
    elif config.show_file:
        parts.append("%(filename)s:")
    elif config.show_line_number:
        parts.append("%(lineno)d:")

    parts.append("%(message)s")
    return " ".join(parts)


def _resolve_level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown logging level: {name!r}")
    return level


def init(config: Optional[TracingConfig] = None) -> logging.Logger:
    """
    Install a stream handler on the root logger.

    Only the first call configures anything; later calls return the
    root logger as is.
    """
    global _initialized

    config = config or TracingConfig()
    level = _resolve_level(config.level)
    root = logging.getLogger()

    with _init_lock:
        if _initialized:
            return root

        handler = logging.StreamHandler(config.stream or sys.stderr)
        handler.setFormatter(logging.Formatter(build_format(config)))
        root.addHandler(handler)
        root.setLevel(level)
        _initialized = True

    return root
