"""Field validators, per-type registry and the model validation engine.

Usage:
    from fieldguard.validators import Schema, create_validator

    Schema(Signup).field("email").named("Email address").required().email()
    result = create_validator(signup).validate()
"""

from fieldguard.validators.base import BaseValidator
from fieldguard.validators.character_validator import AlphaNumericValidator, AlphaValidator
from fieldguard.validators.email_validator import EmailValidator
from fieldguard.validators.engine import ModelValidator, Validator, create_validator
from fieldguard.validators.errors import ConfigurationError, ErrorCode, RegistryFrozenError
from fieldguard.validators.field_options import FieldOptions
from fieldguard.validators.length_validator import MaxLengthValidator, MinLengthValidator
from fieldguard.validators.manager import (
    ValidationManager,
    ValidationRegistry,
    default_registry,
    register_validator,
    set_field_display_name,
)
from fieldguard.validators.models import FieldErrors, MessageOpts, ValidationResult
from fieldguard.validators.pattern_validator import PatternValidator
from fieldguard.validators.predicate_validator import PredicateValidator
from fieldguard.validators.required_validator import RequiredValidator
from fieldguard.validators.schema import FieldBuilder, Schema

__all__ = [
    "BaseValidator",
    "RequiredValidator",
    "PatternValidator",
    "AlphaValidator",
    "AlphaNumericValidator",
    "EmailValidator",
    "MinLengthValidator",
    "MaxLengthValidator",
    "PredicateValidator",
    "FieldOptions",
    "ValidationManager",
    "ValidationRegistry",
    "default_registry",
    "register_validator",
    "set_field_display_name",
    "ModelValidator",
    "Validator",
    "create_validator",
    "Schema",
    "FieldBuilder",
    "ValidationResult",
    "FieldErrors",
    "MessageOpts",
    "ConfigurationError",
    "RegistryFrozenError",
    "ErrorCode",
]
