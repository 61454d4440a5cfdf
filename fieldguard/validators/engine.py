"""Model validator: runs a model type's registered rules against one instance.

This is the main entry point for evaluation. It looks up the manager for the
instance's type and produces per-field messages or a whole-model result.

Usage:
    validator = create_validator(signup)
    result = validator.validate()
    if not result.is_valid:
        # Show result.errors next to the form fields
"""

import inspect
import time
from collections.abc import Mapping
from typing import Any, Optional

import structlog

from fieldguard.validators.manager import ValidationManager, ValidationRegistry, get_registry
from fieldguard.validators.models import FieldErrors, ValidationResult

logger = structlog.get_logger()


def read_field(model: Any, name: str) -> Any:
    """Read a field from an object or mapping; a missing field reads as None.

    Errors raised inside a property getter propagate.
    """
    if isinstance(model, Mapping):
        return model.get(name)
    try:
        return getattr(model, name)
    except AttributeError:
        if isinstance(inspect.getattr_static(type(model), name, None), property):
            raise
        return None


class ModelValidator:
    """Runtime facade bound to one model instance.

    Holds no state beyond the model and its type's manager, and never
    mutates the model.
    """

    def __init__(self, model: Any, manager: ValidationManager):
        self.model = model
        self.manager = manager

    def validate_field(self, name: str) -> list[str]:
        """Messages for one field, in validator order (empty = valid).

        A field without registered rules is vacuously valid.
        """
        options = self.manager.get_field(name)
        if options is None:
            return []
        return options.validate_value(read_field(self.model, name), self.model)

    def validate(self) -> ValidationResult:
        """Validate every registered field in declaration order."""
        start_time = time.perf_counter()

        field_errors = [
            FieldErrors(field=name, errors=self.validate_field(name))
            for name in self.manager.field_names()
        ]
        result = ValidationResult.build(field_errors)

        logger.debug(
            "model_validated",
            model=type(self.model).__qualname__,
            is_valid=result.is_valid,
            fields=len(field_errors),
            failing_fields=[fe.field for fe in result.errors],
            duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
        )

        return result

    def is_valid(self) -> bool:
        return self.validate().is_valid


def create_validator(model: Any, registry: Optional[ValidationRegistry] = None) -> ModelValidator:
    """Bind a ModelValidator to a model instance.

    Freezes the type's rules on first use unless the registry is configured
    otherwise.
    """
    manager = get_registry(registry).resolve(type(model))
    return ModelValidator(model, manager)


class Validator:
    """Factory namespace: Validator.new(model)."""

    @staticmethod
    def new(model: Any, registry: Optional[ValidationRegistry] = None) -> ModelValidator:
        return create_validator(model, registry)
