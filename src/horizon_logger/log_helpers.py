"""
Template shorthands for HorizonLogger.

Each helper formats `template` with str.format() and hands the result
to the matching logger method:

    log_info(logger, "PLAYER", "Player {} joined the game", "John")
"""

from typing import Any

from src.horizon_logger.horizon_logger import HorizonLogger


def log_debug(logger: HorizonLogger, component: str, template: str, *args: Any, **kwargs: Any) -> None:
    logger.debug(component, template.format(*args, **kwargs))


def log_info(logger: HorizonLogger, component: str, template: str, *args: Any, **kwargs: Any) -> None:
    logger.info(component, template.format(*args, **kwargs))


def log_warn(logger: HorizonLogger, component: str, template: str, *args: Any, **kwargs: Any) -> None:
    logger.warn(component, template.format(*args, **kwargs))


def log_error(logger: HorizonLogger, component: str, template: str, *args: Any, **kwargs: Any) -> None:
    logger.error(component, template.format(*args, **kwargs))


def log_critical(logger: HorizonLogger, component: str, template: str, *args: Any, **kwargs: Any) -> None:
    logger.critical(component, template.format(*args, **kwargs))
