"""Length validators: minimum and maximum length bounds."""

from typing import Any, Optional

from fieldguard.validators.base import BaseValidator
from fieldguard.validators.errors import ConfigurationError, ErrorCode
from fieldguard.validators.models import Message


def _check_bound(kind: str, bound: Any) -> int:
    """Bounds must be positive integers (bool is rejected)."""
    if isinstance(bound, bool) or not isinstance(bound, int) or bound <= 0:
        raise ConfigurationError(
            f"{kind} must be a positive integer greater than 0, got {bound!r}",
            ErrorCode.PARAM_INVALID_LENGTH,
        )
    return bound


def _length(value: Any) -> int:
    """Length of sized values; anything else is measured as text."""
    try:
        return len(value)
    except TypeError:
        return len(str(value))


class MinLengthValidator(BaseValidator):
    """Value length must be at least min_length."""

    def __init__(self, min_length: int, message: Optional[Message] = None):
        super().__init__(message)
        self._min_length = _check_bound("min_length", min_length)

    @property
    def min_length(self) -> int:
        return self._min_length

    def is_valid(self, value: Any, model: Any = None) -> bool:
        return _length(value) >= self._min_length

    def default_message(self, field_name: str) -> str:
        return f"{field_name} must be at least {self._min_length} characters long"

    def __repr__(self) -> str:
        return f"{self.name}({self._min_length})"


class MaxLengthValidator(BaseValidator):
    """Value length must not exceed max_length."""

    def __init__(self, max_length: int, message: Optional[Message] = None):
        super().__init__(message)
        self._max_length = _check_bound("max_length", max_length)

    @property
    def max_length(self) -> int:
        return self._max_length

    def is_valid(self, value: Any, model: Any = None) -> bool:
        return _length(value) <= self._max_length

    def default_message(self, field_name: str) -> str:
        return f"{field_name} can not exceed {self._max_length} characters in length"

    def __repr__(self) -> str:
        return f"{self.name}({self._max_length})"
