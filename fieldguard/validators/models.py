"""Validation models: message render context, per-field errors, result structure.

Results are plain data. A failing field is an outcome, not an exception.
"""

from typing import Any, Callable, Optional, Union

from pydantic import BaseModel, Field


class MessageOpts(BaseModel):
    """Render context passed to callable messages, evaluated only on failure."""

    friendly_name: str = Field(description="Display name of the field")
    value: Any = Field(default=None, description="The value that failed validation")


# A message is either a literal string or built lazily from the render context
Message = Union[str, Callable[[MessageOpts], str]]


class FieldErrors(BaseModel):
    """All messages produced by one field, in validator order."""

    field: str
    errors: list[str] = Field(default_factory=list)


class ValidationResult(BaseModel):
    """Whole-model validation outcome, grouped by field in declaration order."""

    is_valid: bool = Field(description="True when no field produced a message")
    errors: list[FieldErrors] = Field(default_factory=list)

    @classmethod
    def build(cls, field_errors: list[FieldErrors]) -> "ValidationResult":
        """Build a result, dropping fields that produced no messages."""
        failing = [fe for fe in field_errors if fe.errors]
        return cls(is_valid=not failing, errors=failing)

    @property
    def error_count(self) -> int:
        return sum(len(fe.errors) for fe in self.errors)

    def errors_for(self, field: str) -> list[str]:
        """Messages for one field (empty if it passed or has no rules)."""
        for fe in self.errors:
            if fe.field == field:
                return list(fe.errors)
        return []

    def to_dict(self) -> dict:
        return self.model_dump()


def render_message(message: Message, friendly_name: str, value: Any) -> str:
    """Resolve a literal or callable message."""
    if callable(message):
        return message(MessageOpts(friendly_name=friendly_name, value=value))
    return message


def coerce_message(message: Optional[Message]) -> Optional[Message]:
    """Normalize an optional message override (empty string means none)."""
    if message is None or message == "":
        return None
    return message
