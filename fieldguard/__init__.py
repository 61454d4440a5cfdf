"""fieldguard: declarative field validation for Python model classes."""

from fieldguard.validators import (
    ConfigurationError,
    ModelValidator,
    Schema,
    ValidationRegistry,
    ValidationResult,
    Validator,
    create_validator,
    register_validator,
    set_field_display_name,
)

__version__ = "1.0.0"

__all__ = [
    "ConfigurationError",
    "ModelValidator",
    "Schema",
    "ValidationRegistry",
    "ValidationResult",
    "Validator",
    "create_validator",
    "register_validator",
    "set_field_display_name",
]
