import threading

import pytest

from fieldguard.validators import (
    ConfigurationError,
    ErrorCode,
    RegistryFrozenError,
    RequiredValidator,
    ValidationManager,
    ValidationRegistry,
    create_validator,
    default_registry,
    register_validator,
    set_field_display_name,
)


class Account:
    def __init__(self, name=""):
        self.name = name


class AdminAccount(Account):
    pass


class TestValidationManager:
    """Test ValidationManager"""

    def test_add_validator_creates_field(self):
        manager = ValidationManager(Account)
        manager.add_validator("name", RequiredValidator())
        assert "name" in manager
        assert len(manager.get_field("name")) == 1

    def test_set_field_name_creates_field(self):
        manager = ValidationManager(Account)
        manager.set_field_name("name", "Account name")
        assert manager.get_field("name").get_field_name() == "Account name"
        assert len(manager.get_field("name")) == 0

    def test_field_names_keep_declaration_order(self):
        manager = ValidationManager(Account)
        for field in ["zeta", "alpha", "mid"]:
            manager.add_validator(field, RequiredValidator())
        manager.add_validator("alpha", RequiredValidator())
        assert manager.field_names() == ["zeta", "alpha", "mid"]

    def test_unknown_field_is_none(self):
        assert ValidationManager(Account).get_field("nope") is None

    def test_rejects_non_validators(self):
        with pytest.raises(ConfigurationError) as exc_info:
            ValidationManager(Account).add_validator("name", lambda v: True)
        assert exc_info.value.code == ErrorCode.REG_INVALID_VALIDATOR

    @pytest.mark.parametrize("field", ["", None, 3])
    def test_rejects_bad_field_names(self, field):
        with pytest.raises(ConfigurationError):
            ValidationManager(Account).add_validator(field, RequiredValidator())

    def test_rejects_empty_display_name(self):
        with pytest.raises(ConfigurationError):
            ValidationManager(Account).set_field_name("name", "")

    def test_frozen_manager_rejects_registration(self):
        manager = ValidationManager(Account)
        manager.add_validator("name", RequiredValidator())
        manager.freeze()

        with pytest.raises(RegistryFrozenError) as exc_info:
            manager.add_validator("name", RequiredValidator())
        assert exc_info.value.code == ErrorCode.REG_FROZEN
        with pytest.raises(RegistryFrozenError):
            manager.set_field_name("name", "Name")


class TestValidationRegistry:
    """Test ValidationRegistry"""

    def test_same_type_same_manager(self, registry):
        assert registry.get(Account) is registry.get(Account)

    def test_subclass_gets_its_own_manager(self, registry):
        assert registry.get(AdminAccount) is not registry.get(Account)

    def test_registrations_accumulate(self, registry):
        registry.register_validator(Account, "name", RequiredValidator())
        registry.set_field_display_name(Account, "name", "Account name")
        options = registry.get(Account).get_field("name")
        assert options.get_field_name() == "Account name"
        assert len(options) == 1

    def test_registries_are_isolated(self, registry):
        registry.register_validator(Account, "name", RequiredValidator())
        other = ValidationRegistry()
        assert Account in registry
        assert Account not in other

    def test_rejects_instances(self, registry):
        with pytest.raises(ConfigurationError) as exc_info:
            registry.get(Account())
        assert exc_info.value.code == ErrorCode.REG_INVALID_MODEL

    def test_find_does_not_create(self, registry):
        assert registry.find(Account) is None
        assert len(registry) == 0

    def test_concurrent_get_creates_one_manager(self, registry):
        managers = []
        barrier = threading.Barrier(8)

        def worker():
            barrier.wait()
            managers.append(registry.get(Account))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(managers) == 8
        assert all(m is managers[0] for m in managers)

    def test_first_read_freezes(self, registry):
        registry.register_validator(Account, "name", RequiredValidator())
        create_validator(Account(), registry)

        assert registry.get(Account).frozen is True
        with pytest.raises(RegistryFrozenError):
            registry.register_validator(Account, "name", RequiredValidator())

    def test_freeze_can_be_disabled(self):
        registry = ValidationRegistry(freeze_on_first_read=False)
        registry.register_validator(Account, "name", RequiredValidator())
        create_validator(Account(), registry)

        registry.register_validator(Account, "name", RequiredValidator("again"))
        assert len(registry.get(Account).get_field("name")) == 2

    def test_reading_unregistered_type_does_not_block_registration(self, registry):
        assert create_validator(Account(), registry).validate().is_valid is True

        registry.register_validator(Account, "name", RequiredValidator())
        assert create_validator(Account(), registry).validate_field("name") == ["Field is required"]


class TestModuleLevelRegistration:
    """Test register_validator / set_field_display_name entry points"""

    def test_explicit_registry(self, registry):
        register_validator(Account, "name", RequiredValidator(), registry=registry)
        set_field_display_name(Account, "name", "Name", registry=registry)
        assert create_validator(Account(), registry).validate_field("name") == ["Name is required"]

    def test_empty_registry_is_not_replaced_by_default(self, registry):
        register_validator(Account, "name", RequiredValidator(), registry=registry)
        assert Account in registry
        assert Account not in default_registry
