"""Logger lookup for library code.

Services install their handlers through ``shared.logging.json``; code that
may run outside a service (the reader used as a plain library) calls
``get_logger`` and only gets a fallback text handler when the root logger
has none at all.
"""

from __future__ import annotations

import logging

_state = {"configured": False}


def mark_configured() -> None:
    _state["configured"] = True


def is_configured() -> bool:
    return _state["configured"]


def get_logger(name: str, auto_configure: bool = True) -> logging.Logger:
    if auto_configure and not is_configured():
        if not logging.getLogger().handlers:
            from shared.logging.json import TEXT_FORMAT

            logging.basicConfig(level=logging.INFO, format=TEXT_FORMAT)
        mark_configured()

    logger = logging.getLogger(name)
    logger.propagate = True
    return logger
