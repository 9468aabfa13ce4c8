import io
import logging

import pytest

from src.horizon_logger import tracing_init
from src.horizon_logger.tracing_init import TracingConfig, build_format, init


@pytest.fixture
def fresh_root(monkeypatch: pytest.MonkeyPatch):
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    monkeypatch.setattr(tracing_init, "_initialized", False)
    yield root
    for handler in list(root.handlers):
        if handler not in handlers and type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(level)


def test_default_format_shows_thread_file_and_line() -> None:
    fmt = build_format(TracingConfig())
    assert fmt == "%(asctime)s %(levelname)s %(threadName)s(%(thread)d) %(filename)s:%(lineno)d: %(message)s"
    assert "%(name)s" not in fmt


def test_format_switches() -> None:
    fmt = build_format(
        TracingConfig(show_thread_names=False, show_line_number=False, show_target=True)
    )
    assert fmt == "%(asctime)s %(levelname)s %(thread)d %(name)s %(filename)s: %(message)s"


def test_init_installs_info_handler(fresh_root: logging.Logger) -> None:
    stream = io.StringIO()
    root = init(TracingConfig(stream=stream))

    assert root is fresh_root
    assert root.level == logging.INFO

    logging.getLogger("demo").debug("hidden")
    logging.getLogger("demo").info("visible")
    output = stream.getvalue()
    assert "hidden" not in output
    assert "INFO" in output and "test_tracing_init.py:" in output and "visible" in output


def test_init_only_configures_once(fresh_root: logging.Logger) -> None:
    count = len(fresh_root.handlers)
    init(TracingConfig(stream=io.StringIO()))
    init(TracingConfig(stream=io.StringIO(), level="debug"))
    assert len(fresh_root.handlers) == count + 1
    assert fresh_root.level == logging.INFO


def test_unknown_level_rejected(fresh_root: logging.Logger) -> None:
    with pytest.raises(ValueError):
        init(TracingConfig(level="verbose"))
