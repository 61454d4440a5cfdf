"""Fluent schema builder: declares a model's rules with method chaining.

Validators are appended in the order the builder methods are called, and
that order is the evaluation order.

Usage:
    schema = Schema(Signup)
    schema.field("email").named("Email address").required().email()
    schema.field("password").named("Password").min_length(10).max_length(30)
    schema.field("confirm_password").named("Confirm password").check(
        "Passwords must match",
        lambda value, model: value == model.password,
    )
"""

import re
from typing import Any, Optional, Union

from fieldguard.validators.base import BaseValidator
from fieldguard.validators.character_validator import AlphaNumericValidator, AlphaValidator
from fieldguard.validators.email_validator import EmailValidator
from fieldguard.validators.engine import create_validator
from fieldguard.validators.length_validator import MaxLengthValidator, MinLengthValidator
from fieldguard.validators.manager import ValidationManager, ValidationRegistry, get_registry
from fieldguard.validators.models import Message, ValidationResult
from fieldguard.validators.pattern_validator import PatternValidator
from fieldguard.validators.predicate_validator import Predicate, PredicateValidator
from fieldguard.validators.required_validator import RequiredValidator


class FieldBuilder:
    """Adds rules to one field; every method returns the builder."""

    def __init__(self, schema: "Schema", field: str):
        self._schema = schema
        self.field_name = field

    def named(self, name: str) -> "FieldBuilder":
        self._schema.manager.set_field_name(self.field_name, name)
        return self

    def use(self, validator: BaseValidator) -> "FieldBuilder":
        """Append any validator instance, including custom subclasses."""
        self._schema.manager.add_validator(self.field_name, validator)
        return self

    def required(self, message: Optional[Message] = None) -> "FieldBuilder":
        return self.use(RequiredValidator(message))

    def pattern(self, pattern: Union[str, re.Pattern], message: Message) -> "FieldBuilder":
        return self.use(PatternValidator(pattern, message))

    def alpha(self, message: Optional[Message] = None) -> "FieldBuilder":
        return self.use(AlphaValidator(message))

    def alphanumeric(self, message: Optional[Message] = None) -> "FieldBuilder":
        return self.use(AlphaNumericValidator(message))

    def email(self, message: Optional[Message] = None) -> "FieldBuilder":
        return self.use(EmailValidator(message))

    def min_length(self, min_length: int, message: Optional[Message] = None) -> "FieldBuilder":
        return self.use(MinLengthValidator(min_length, message))

    def max_length(self, max_length: int, message: Optional[Message] = None) -> "FieldBuilder":
        return self.use(MaxLengthValidator(max_length, message))

    def check(self, message: Message, predicate: Predicate) -> "FieldBuilder":
        """Cross-field rule: predicate(value, model) must return True."""
        return self.use(PredicateValidator(message, predicate))

    def field(self, name: str) -> "FieldBuilder":
        """Continue with another field of the same schema."""
        return self._schema.field(name)


class Schema:
    """Rule declarations for one model type, written into a registry."""

    def __init__(self, model_type: type, registry: Optional[ValidationRegistry] = None):
        self.model_type = model_type
        self.registry = get_registry(registry)
        self.manager: ValidationManager = self.registry.get(model_type)

    def field(self, name: str) -> FieldBuilder:
        return FieldBuilder(self, name)

    def validate(self, model: Any) -> ValidationResult:
        """Shortcut for create_validator(model, registry).validate()."""
        if not isinstance(model, self.model_type):
            raise TypeError(
                f"Schema for {self.model_type.__qualname__} cannot validate "
                f"{type(model).__qualname__}"
            )
        return create_validator(model, self.registry).validate()
