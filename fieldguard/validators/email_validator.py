"""Email Validator: local-part@domain with at least one dot in the domain."""

import re
from typing import Any

from fieldguard.validators.base import BaseValidator

# Dot-atom local part; domain of hyphenated labels, two or more of them
EMAIL_PATTERN = re.compile(
    r"[A-Za-z0-9!#$%&'*+/=?^_`{|}~-]+(?:\.[A-Za-z0-9!#$%&'*+/=?^_`{|}~-]+)*"
    r"@"
    r"(?:[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?\.)+"
    r"[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?"
)


class EmailValidator(BaseValidator):
    """Validates the address shape only; no DNS or deliverability checks."""

    def is_valid(self, value: Any, model: Any = None) -> bool:
        return EMAIL_PATTERN.fullmatch(str(value)) is not None

    def default_message(self, field_name: str) -> str:
        return f"{field_name} is not a valid email address"
