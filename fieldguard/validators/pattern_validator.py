"""Pattern Validator: the whole value must match a regular expression."""

import re
from typing import Any, Union

from fieldguard.validators.base import BaseValidator
from fieldguard.validators.errors import ConfigurationError, ErrorCode
from fieldguard.validators.models import Message, coerce_message, render_message


class PatternValidator(BaseValidator):
    """Matches with re.fullmatch, so anchors in the pattern are optional.

    The message is mandatory: a bare regex says nothing useful to a user.
    """

    def __init__(self, pattern: Union[str, re.Pattern], message: Message):
        super().__init__()
        if coerce_message(message) is None:
            raise ConfigurationError(
                "Pattern validator requires a message",
                ErrorCode.PARAM_MISSING_MESSAGE,
            )
        if isinstance(pattern, str):
            try:
                pattern = re.compile(pattern)
            except re.error as e:
                raise ConfigurationError(
                    f"Invalid pattern {pattern!r}: {e}",
                    ErrorCode.PARAM_INVALID_PATTERN,
                ) from e
        elif not isinstance(pattern, re.Pattern):
            raise ConfigurationError(
                f"Pattern must be a string or compiled regex, got {type(pattern).__name__}",
                ErrorCode.PARAM_INVALID_PATTERN,
            )
        self._pattern = pattern
        self._message = message

    @property
    def pattern(self) -> re.Pattern:
        return self._pattern

    def is_valid(self, value: Any, model: Any = None) -> bool:
        return self._pattern.fullmatch(str(value)) is not None

    def default_message(self, field_name: str) -> str:
        return render_message(self._message, field_name, None)

    def get_message(self, field_name: str, value: Any = None) -> str:
        return render_message(self._message, field_name, value)

    def __repr__(self) -> str:
        return f"{self.name}({self._pattern.pattern!r})"
