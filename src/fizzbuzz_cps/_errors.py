"""Error types for fizzbuzz-cps."""

from typing import Any


class FizzBuzzError(Exception):
    """Base exception for all fizzbuzz-cps errors."""


class InvalidRuleError(FizzBuzzError):
    """Raised when a rule cannot be used to test divisibility."""

    def __init__(self, message: str, divisor: Any = None):
        self.divisor = divisor
        super().__init__(message)
