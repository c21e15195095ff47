"""
Logger Utility
--------------

Provides :func:`get_logger`, which returns a logger nested under the
``browser_test_support`` namespace.  Only the namespace root receives a
stdout handler, so child loggers propagate to it instead of printing
twice.  The level is read from the ``LOG_LEVEL`` environment variable
the first time the root is configured.
"""

import logging
import os
from functools import lru_cache

ROOT_LOGGER_NAME = "browser_test_support"


@lru_cache(maxsize=None)
def _root_logger() -> logging.Logger:
    level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not root.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s – %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)
        root.addHandler(handler)
        root.setLevel(level)
    return root


def get_logger(name: str) -> logging.Logger:
    """Return a logger for ``name`` below the package namespace."""
    root = _root_logger()
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return root.getChild(name)


__all__ = ["get_logger", "ROOT_LOGGER_NAME"]
