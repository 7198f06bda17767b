"""Validation errors raised by the pricing calculator."""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    INVALID_RATE = "invalid_rate"
    INVALID_PRICE = "invalid_price"
    MARGIN_TOO_HIGH = "margin_too_high"


class PricingError(Exception):
    """Base class for every input rejected by the calculator."""

    kind: ErrorKind

    def __init__(self, message: str, field: str, value: Any) -> None:
        super().__init__(message)
        self.field = field
        self.value = value


class InvalidRateError(PricingError):
    kind = ErrorKind.INVALID_RATE


class InvalidPriceError(PricingError):
    kind = ErrorKind.INVALID_PRICE


class MarginTooHighError(PricingError):
    kind = ErrorKind.MARGIN_TOO_HIGH
