"""FieldOptions: display name and ordered validator chain for one field."""

from typing import Any, Optional

from fieldguard.config import get_settings
from fieldguard.validators.base import BaseValidator


class FieldOptions:
    """Per-field configuration and evaluation routine.

    Validators run in registration order. Only RequiredValidator (or any
    validator whose validates_empty_value() is True) sees empty values; the
    rest are skipped, so they may assume non-empty input.
    """

    def __init__(self, field_name: Optional[str] = None):
        self._field_name = field_name or get_settings().DEFAULT_FIELD_NAME
        self._validators: list[BaseValidator] = []

    def get_field_name(self) -> str:
        return self._field_name

    def set_field_name(self, name: str) -> None:
        self._field_name = name

    def add_validator(self, validator: BaseValidator) -> None:
        self._validators.append(validator)

    def get_validators(self) -> list[BaseValidator]:
        return list(self._validators)

    def validate_value(self, value: Any, model: Any = None) -> list[str]:
        """Run the chain and collect one message per failing validator.

        Returns:
            Messages in validator order (empty if the value is valid)
        """
        errors: list[str] = []
        field_name = self._field_name
        is_empty = not value

        for validator in self._validators:
            if is_empty and not validator.validates_empty_value():
                continue

            if not validator.is_valid(value, model):
                errors.append(validator.resolve_message(field_name, value))

        return errors

    def __len__(self) -> int:
        return len(self._validators)

    def __repr__(self) -> str:
        return f"FieldOptions({self._field_name!r}, {self._validators!r})"
