"""Predicate Validator: arbitrary (value, model) check for cross-field rules.

Example:
    PredicateValidator(
        "Passwords must match",
        lambda value, model: value == model.password,
    )
"""

from typing import Any, Callable

import structlog

from fieldguard.validators.base import BaseValidator
from fieldguard.validators.errors import ConfigurationError, ErrorCode
from fieldguard.validators.models import Message, coerce_message, render_message

logger = structlog.get_logger()

Predicate = Callable[[Any, Any], bool]


class PredicateValidator(BaseValidator):
    """Delegates to a user function; the function must be pure."""

    def __init__(self, message: Message, predicate: Predicate):
        super().__init__()
        if coerce_message(message) is None:
            raise ConfigurationError(
                "Predicate validator requires a message",
                ErrorCode.PARAM_MISSING_MESSAGE,
            )
        if not callable(predicate):
            raise ConfigurationError(
                f"Predicate must be callable, got {type(predicate).__name__}",
                ErrorCode.PARAM_NOT_CALLABLE,
            )
        self._message = message
        self._predicate = predicate

    def is_valid(self, value: Any, model: Any = None) -> bool:
        try:
            return bool(self._predicate(value, model))
        except Exception as e:
            logger.error(
                "validator_failed",
                validator=self.name,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise

    def default_message(self, field_name: str) -> str:
        return render_message(self._message, field_name, None)

    def get_message(self, field_name: str, value: Any = None) -> str:
        return render_message(self._message, field_name, value)
