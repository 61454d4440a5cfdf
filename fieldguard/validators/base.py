"""Base validator: abstract class implementing the Strategy Pattern.

Each validator is one standalone check. New variants are added without
modifying FieldOptions or the engine.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from fieldguard.validators.models import Message, coerce_message, render_message


class BaseValidator(ABC):
    """Abstract base for all field validators.

    Contract:
        - is_valid() is deterministic: same (value, model) -> same output
        - is_valid() never mutates the value or the model
        - is_valid() may assume a non-empty value unless
          validates_empty_value() returns True
        - parameters are fixed at construction; invalid ones raise
          ConfigurationError immediately
    """

    def __init__(self, message: Optional[Message] = None):
        self._custom_message = coerce_message(message)

    @property
    def name(self) -> str:
        """Human-readable name for logging."""
        return type(self).__name__

    @abstractmethod
    def is_valid(self, value: Any, model: Any = None) -> bool:
        """Check the value.

        Args:
            value: The field value (never empty unless validates_empty_value())
            model: The whole model instance, for cross-field rules

        Returns:
            True if the value satisfies the rule
        """
        ...

    @abstractmethod
    def default_message(self, field_name: str) -> str:
        """Message template rendered with the field's display name."""
        ...

    def get_message(self, field_name: str, value: Any = None) -> str:
        return self.default_message(field_name)

    def validates_empty_value(self) -> bool:
        """Whether this validator must run when the value is empty."""
        return False

    @property
    def has_custom_message(self) -> bool:
        return self._custom_message is not None

    def get_custom_message(self, field_name: str = "", value: Any = None) -> str:
        """Return the override; literal strings come back verbatim."""
        if self._custom_message is None:
            raise LookupError(f"{self.name} has no custom message")
        return render_message(self._custom_message, field_name, value)

    def resolve_message(self, field_name: str, value: Any = None) -> str:
        """Custom message if present, otherwise the rendered default."""
        if self.has_custom_message:
            return self.get_custom_message(field_name, value)
        return self.get_message(field_name, value)

    def __repr__(self) -> str:
        return f"{self.name}()"
