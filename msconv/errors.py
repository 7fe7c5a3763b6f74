"""Exceptions raised while converting durations."""

from typing import Any


class DurationError(ValueError):
    """Base class for every duration conversion failure."""


class EmptyInputError(DurationError):
    def __init__(self, value: Any) -> None:
        super().__init__("Value must be a non-empty string")
        self.value = value


class TooLongError(DurationError):
    def __init__(self, value: str, max_length: int) -> None:
        super().__init__(
            f"String too long. Maximum length is {max_length} characters"
        )
        self.value = value
        self.max_length = max_length


class InvalidFormatError(DurationError):
    def __init__(self, value: str) -> None:
        super().__init__(f'Invalid time format: "{value}"')
        self.value = value


class InvalidNumberError(DurationError):
    def __init__(self, literal: str) -> None:
        super().__init__(f'Invalid number: "{literal}"')
        self.literal = literal


class UnknownUnitError(DurationError):
    def __init__(self, unit: str) -> None:
        super().__init__(f'Unknown unit: "{unit}"')
        self.unit = unit


class NotFiniteError(DurationError):
    def __init__(self, value: Any) -> None:
        super().__init__("Value must be a finite number")
        self.value = value


class UnsupportedInputTypeError(DurationError, TypeError):
    def __init__(self, value: Any) -> None:
        super().__init__("Value must be a string or number")
        self.value = value
