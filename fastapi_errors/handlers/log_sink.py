"""Destinations for diagnostic error log lines."""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable


@runtime_checkable
class LogSink(Protocol):
    """Accept one diagnostic string per handled error."""

    def write(self, message: str) -> None:
        ...


class LoggerSink:
    """Write diagnostic lines to a stdlib logger at ERROR level."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or logging.getLogger("fastapi_errors")

    def write(self, message: str) -> None:
        self.logger.error(message)
