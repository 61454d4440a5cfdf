"""Configuration errors raised while building validation rules.

Validation failures are never raised; they are returned as data. Only a
broken rule definition is an exception.
"""

from enum import Enum
from typing import Optional


class ErrorCode(str, Enum):
    """Error codes for every configuration failure.

    Naming convention: CATEGORY_SPECIFIC_ISSUE
    """

    # Validator parameters
    PARAM_INVALID_LENGTH = "PARAM_INVALID_LENGTH"
    PARAM_INVALID_PATTERN = "PARAM_INVALID_PATTERN"
    PARAM_MISSING_MESSAGE = "PARAM_MISSING_MESSAGE"
    PARAM_NOT_CALLABLE = "PARAM_NOT_CALLABLE"

    # Registration
    REG_INVALID_FIELD = "REG_INVALID_FIELD"
    REG_INVALID_MODEL = "REG_INVALID_MODEL"
    REG_INVALID_VALIDATOR = "REG_INVALID_VALIDATOR"
    REG_FROZEN = "REG_FROZEN"


class ConfigurationError(ValueError):
    """A validation rule was defined with invalid parameters."""

    def __init__(self, message: str, code: Optional[ErrorCode] = None):
        super().__init__(message)
        self.code = code


class RegistryFrozenError(ConfigurationError):
    """Registration attempted after the model's rules were first read."""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.REG_FROZEN)
