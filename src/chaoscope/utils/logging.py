"""Logging setup shared by the CLI, the viewer and headless runs."""

import logging
from contextvars import ContextVar
from typing import Optional, Union

_LEVELS = {
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}

# "viewer" or "headless" once the CLI has decided how to run
_component: ContextVar[str] = ContextVar("chaoscope_component", default="chaoscope")

LOG_FORMAT = "[%(component)s] %(levelname)s: %(message)s"


class _ComponentFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "component", None):
            record.component = _component.get()
        return True


def setup_logging(level: Union[str, int] = "WARNING") -> None:
    """
    Send log records to stderr with a component prefix.

    ``level`` is a level name ("debug", "INFO", ...) or a logging constant.
    Unknown names fall back to WARNING. The handler is installed only once,
    later calls just change the level.
    """
    if isinstance(level, str):
        level = _LEVELS.get(level.lower(), logging.WARNING)
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler.addFilter(_ComponentFilter())
        root.addHandler(handler)
    root.setLevel(level)
    logging.captureWarnings(True)


def set_component_context(component: str) -> None:
    _component.set(component)


def resolve_log_level(verbose: bool, debug: bool) -> str:
    """--debug wins over --verbose; neither means WARNING."""
    if debug:
        return "DEBUG"
    if verbose:
        return "INFO"
    return "WARNING"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    return logging.getLogger(name if name is not None else "chaoscope")
