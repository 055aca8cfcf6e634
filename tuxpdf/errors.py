"""Errors raised while building or writing low-level PDF structures."""

from __future__ import annotations


class LowPdfError(Exception):
    """Base class for every error raised by the low-level PDF layer."""


class InvalidDictionaryTypeError(LowPdfError):
    """A dictionary's ``/Type`` entry holds a value of the wrong kind."""

    def __init__(self, actual: str, expected: str) -> None:
        self.actual = actual
        self.expected = expected
        super().__init__(
            f"Invalid dictionary type for dictionary: {actual}, expected: {expected}"
        )


class MissingDictionaryKeyError(LowPdfError):
    """A required key is absent from a dictionary."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Missing dictionary key: {key}")


class InvalidDictionaryValueError(LowPdfError):
    """A dictionary value has a type other than the one required."""

    def __init__(self, actual: str, expected: str) -> None:
        self.actual = actual
        self.expected = expected
        super().__init__("Invalid Type for Dictionary Value")