"""Shared fixtures: an isolated registry and a sign-up style model."""

import pytest
import structlog

from fieldguard.config import get_settings
from fieldguard.logging_config import configure_logging
from fieldguard.validators import Schema, ValidationRegistry, create_validator


class RegistrationModel:
    """Sign-up form with one field per built-in rule."""

    def __init__(self):
        self.username = ""
        self.email = ""
        self.password = ""
        self.confirm_password = ""
        self.slug = ""
        self.alpha_field = ""
        self.alpha_numeric_field = ""
        self._my_property = ""
        self.my_property = "foo"

    @property
    def my_property(self) -> str:
        return self._my_property

    @my_property.setter
    def my_property(self, value: str) -> None:
        self._my_property = value


def register_model_rules(registry: ValidationRegistry) -> Schema:
    schema = Schema(RegistrationModel, registry)
    schema.field("username").required()
    schema.field("email").named("Email address").required().email()
    schema.field("password").named("Password").min_length(10).max_length(30)
    schema.field("confirm_password").named("Confirm password").check(
        "Passwords must match",
        lambda value, model: value == model.password,
    )
    schema.field("slug").pattern(r"^[a-z0-9-]+$", "Must be a valid slug tag")
    schema.field("alpha_field").alpha()
    schema.field("alpha_numeric_field").named("Alpha numeric field").alphanumeric(
        lambda opts: f"{opts.friendly_name} is not alphanumeric!"
    )
    schema.field("my_property").max_length(3)
    return schema


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()


@pytest.fixture
def registry():
    return ValidationRegistry()


@pytest.fixture
def model(registry):
    register_model_rules(registry)
    return RegistrationModel()


@pytest.fixture
def validator(model, registry):
    return create_validator(model, registry)


@pytest.fixture
def debug_logging(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    get_settings.cache_clear()
    configure_logging()
