"""Logging built on top of loguru."""

from typing import Optional

from loguru import logger


def get_logger(name: Optional[str] = None):
    """Return a child logger with contextualized name."""

    if name:
        return logger.bind(component=name)
    return logger


_diagnostics = get_logger("lxd.diagnostics")


def log_sink(line: str) -> None:
    """Default diagnostic sink: forward one line to loguru at DEBUG level."""
    _diagnostics.debug(line)
