"""ValidationManager and the registry that maps model types to managers.

Lifecycle of a manager:
    created on first registration for a type
    -> populated by register_validator / set_field_display_name
    -> frozen when the first ModelValidator binds to the type
    -> read-only for the rest of the registry's life

Usage:
    registry = ValidationRegistry()
    registry.register_validator(Signup, "email", RequiredValidator())
    registry.set_field_display_name(Signup, "email", "Email address")
"""

import threading
from typing import Optional

import structlog

from fieldguard.config import get_settings
from fieldguard.logging_config import ensure_logging_configured
from fieldguard.validators.base import BaseValidator
from fieldguard.validators.errors import ConfigurationError, ErrorCode, RegistryFrozenError
from fieldguard.validators.field_options import FieldOptions

logger = structlog.get_logger()


class ValidationManager:
    """Field name -> FieldOptions for one model type, in declaration order."""

    def __init__(self, model_type: Optional[type] = None):
        ensure_logging_configured()
        self.model_type = model_type
        self._fields: dict[str, FieldOptions] = {}
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        if not self._frozen:
            self._frozen = True
            logger.debug(
                "validation_manager_frozen",
                model=self._model_name,
                fields=len(self._fields),
            )

    def add_validator(self, field: str, validator: BaseValidator) -> None:
        """Append a validator to the field's chain, creating the field if needed."""
        if not isinstance(validator, BaseValidator):
            raise ConfigurationError(
                f"Expected a BaseValidator for field '{field}', got {type(validator).__name__}",
                ErrorCode.REG_INVALID_VALIDATOR,
            )
        self._field_options(field).add_validator(validator)
        logger.debug(
            "validator_registered",
            model=self._model_name,
            field=field,
            validator=validator.name,
        )

    def set_field_name(self, field: str, name: str) -> None:
        """Set the display name used in rendered messages (last write wins)."""
        if not isinstance(name, str) or not name:
            raise ConfigurationError(
                f"Display name for field '{field}' must be a non-empty string",
                ErrorCode.REG_INVALID_FIELD,
            )
        self._field_options(field).set_field_name(name)

    def get_field(self, field: str) -> Optional[FieldOptions]:
        return self._fields.get(field)

    def field_names(self) -> list[str]:
        return list(self._fields)

    def _field_options(self, field: str) -> FieldOptions:
        if self._frozen:
            raise RegistryFrozenError(
                f"Rules for {self._model_name} are frozen; "
                f"register validators before validating instances"
            )
        if not isinstance(field, str) or not field:
            raise ConfigurationError(
                f"Field name must be a non-empty string, got {field!r}",
                ErrorCode.REG_INVALID_FIELD,
            )
        options = self._fields.get(field)
        if options is None:
            options = FieldOptions()
            self._fields[field] = options
        return options

    @property
    def _model_name(self) -> str:
        return getattr(self.model_type, "__qualname__", repr(self.model_type))

    def __contains__(self, field: str) -> bool:
        return field in self._fields

    def __len__(self) -> int:
        return len(self._fields)


class ValidationRegistry:
    """Model type -> ValidationManager, keyed by type identity.

    Subclasses do not inherit their parent's rules: each type gets its own
    manager. Get-or-create is guarded by a lock; reads are lock-free.
    """

    def __init__(self, freeze_on_first_read: Optional[bool] = None):
        ensure_logging_configured()
        if freeze_on_first_read is None:
            freeze_on_first_read = get_settings().FREEZE_ON_FIRST_READ
        self.freeze_on_first_read = freeze_on_first_read
        self._managers: dict[type, ValidationManager] = {}
        self._lock = threading.Lock()

    def get(self, model_type: type) -> ValidationManager:
        """Return the manager for a type, creating it on first call."""
        if not isinstance(model_type, type):
            raise ConfigurationError(
                f"Rules are registered per class, got instance of {type(model_type).__name__}",
                ErrorCode.REG_INVALID_MODEL,
            )
        manager = self._managers.get(model_type)
        if manager is not None:
            return manager

        with self._lock:
            manager = self._managers.get(model_type)
            if manager is None:
                manager = ValidationManager(model_type)
                self._managers[model_type] = manager
                logger.debug("validation_manager_created", model=model_type.__qualname__)
        return manager

    def find(self, model_type: type) -> Optional[ValidationManager]:
        """Return the manager for a type without creating one."""
        return self._managers.get(model_type)

    def resolve(self, model_type: type) -> ValidationManager:
        """Manager used for evaluation; freezes it when configured to.

        A type with no rules gets a detached, empty manager so that later
        registration for it is still possible.
        """
        manager = self.find(model_type)
        if manager is None:
            return ValidationManager(model_type)
        if self.freeze_on_first_read:
            manager.freeze()
        return manager

    def register_validator(self, model_type: type, field: str, validator: BaseValidator) -> None:
        self.get(model_type).add_validator(field, validator)

    def set_field_display_name(self, model_type: type, field: str, name: str) -> None:
        self.get(model_type).set_field_name(field, name)

    def __contains__(self, model_type: type) -> bool:
        return model_type in self._managers

    def __len__(self) -> int:
        return len(self._managers)


# Module-level default registry
default_registry = ValidationRegistry()


def get_registry(registry: Optional[ValidationRegistry] = None) -> ValidationRegistry:
    """The given registry, or the module-level default."""
    return default_registry if registry is None else registry


def register_validator(
    model_type: type,
    field: str,
    validator: BaseValidator,
    registry: Optional[ValidationRegistry] = None,
) -> None:
    """Attach a validator to a field of a model class."""
    get_registry(registry).register_validator(model_type, field, validator)


def set_field_display_name(
    model_type: type,
    field: str,
    name: str,
    registry: Optional[ValidationRegistry] = None,
) -> None:
    """Set the name a field is referred to by in messages."""
    get_registry(registry).set_field_display_name(model_type, field, name)
