"""Character class validators: alphabetic and alphanumeric content (ASCII only)."""

import re
from typing import Any

from fieldguard.validators.base import BaseValidator

ALPHA_PATTERN = re.compile(r"[A-Za-z]+")
ALPHANUMERIC_PATTERN = re.compile(r"[A-Za-z0-9]+")


class AlphaValidator(BaseValidator):
    """Every character must be an ASCII letter."""

    def is_valid(self, value: Any, model: Any = None) -> bool:
        return ALPHA_PATTERN.fullmatch(str(value)) is not None

    def default_message(self, field_name: str) -> str:
        return f"{field_name} must only contain alphabetic characters"


class AlphaNumericValidator(BaseValidator):
    """Every character must be an ASCII letter or digit."""

    def is_valid(self, value: Any, model: Any = None) -> bool:
        return ALPHANUMERIC_PATTERN.fullmatch(str(value)) is not None

    def default_message(self, field_name: str) -> str:
        return f"{field_name} must only contain alphanumeric characters"
