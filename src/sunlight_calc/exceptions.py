"""Exceptions raised by sunlight-calc."""

from __future__ import annotations

from typing import Any


class SunlightCalcError(Exception):
    """Base exception for sunlight-calc errors."""

    pass


class InvalidArgumentError(SunlightCalcError, ValueError):
    """Raised when a caller passes an argument outside its valid domain.

    Covers out-of-range latitude/longitude, unknown ``keep`` field names,
    unknown timezone names and negative observer heights.
    """

    def __init__(self, message: str, argument: str, value: Any = None):
        super().__init__(message)
        self.argument = argument
        self.value = value
