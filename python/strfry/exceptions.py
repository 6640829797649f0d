"""Exceptions raised by strfry."""


class StrfryError(Exception):
    """Base exception for all strfry errors."""


class ValidationError(StrfryError, ValueError):
    """Raised when input validation fails (invalid parameters, out of range values)."""


class InvalidInputLength(ValidationError):
    """Raised when a metric requires equal-length strings and gets unequal ones.

    Attributes:
        len1: Length of the first string.
        len2: Length of the second string.
    """

    def __init__(self, len1: int, len2: int):
        self.len1 = len1
        self.len2 = len2
        super().__init__(
            f"strings must have equal length, got {len1} and {len2}"
        )


class AlgorithmError(StrfryError, ValueError):
    """Raised when an unknown or unsupported algorithm is specified."""


__all__ = ["StrfryError", "ValidationError", "InvalidInputLength", "AlgorithmError"]
