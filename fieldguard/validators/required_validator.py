"""Required Validator: the value must be present and non-empty."""

from typing import Any

from fieldguard.validators.base import BaseValidator


class RequiredValidator(BaseValidator):
    """Fails on any falsy value: None, "", 0, False, empty collections."""

    def is_valid(self, value: Any, model: Any = None) -> bool:
        return bool(value)

    def default_message(self, field_name: str) -> str:
        return f"{field_name} is required"

    def validates_empty_value(self) -> bool:
        # The only rule that still runs on empty input
        return True
