"""Reusable ChangeHandler implementations."""

from __future__ import annotations

import logging
from typing import Any

from ..config import DEFAULT_LOGGER_NAME
from ..ports.change_handler import ChangeHandler


class LoggingHandler:
    """Logs every cache addition, update and removal."""

    def __init__(self, logger: logging.Logger | None = None, level: int = logging.DEBUG):
        self.logger = logger or logging.getLogger(f"{DEFAULT_LOGGER_NAME}.events")
        self.level = level

    def added(self, key: Any, old: Any, new: Any, updated: bool) -> None:
        if updated:
            self.logger.log(self.level, f"Updated {key!r}: {old!r} -> {new!r}")
        else:
            self.logger.log(self.level, f"Added {key!r}: {new!r}")

    def removed(self, key: Any, value: Any) -> None:
        self.logger.log(self.level, f"Removed {key!r}: {value!r}")


class HandlerChain:
    """Fans notifications out to several handlers, in subscription order.

    An exception from one handler propagates immediately; handlers after it
    are not called for that notification.
    """

    def __init__(self, *handlers: ChangeHandler):
        self._handlers: list[ChangeHandler] = list(handlers)

    def subscribe(self, handler: ChangeHandler) -> None:
        self._handlers.append(handler)

    @property
    def handlers(self) -> tuple[ChangeHandler, ...]:
        return tuple(self._handlers)

    def added(self, key: Any, old: Any, new: Any, updated: bool) -> None:
        for handler in self._handlers:
            handler.added(key, old, new, updated)

    def removed(self, key: Any, value: Any) -> None:
        for handler in self._handlers:
            handler.removed(key, value)
