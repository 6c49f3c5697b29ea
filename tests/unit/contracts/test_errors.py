# tests/unit/contracts/test_errors.py
"""Tests for the configuration error taxonomy."""

import pytest

from elastisink.contracts.errors import (
    ConfigError,
    ConfigurationConflictError,
    ConfigValidationError,
    MissingRequiredFieldError,
    RegistryError,
    TypeCoercionError,
)


class TestConfigErrorHierarchy:
    """Every user-facing failure is catchable as ConfigError."""

    @pytest.mark.parametrize(
        "error_cls",
        [MissingRequiredFieldError, TypeCoercionError, ConfigValidationError, ConfigurationConflictError],
    )
    def test_subclasses_config_error(self, error_cls: type[ConfigError]) -> None:
        assert issubclass(error_cls, ConfigError)

    def test_registry_error_is_not_config_error(self) -> None:
        """Declaration mistakes are programming errors, not bad user input."""
        assert not issubclass(RegistryError, ConfigError)


class TestMissingRequiredFieldError:
    def test_names_the_key(self) -> None:
        error = MissingRequiredFieldError("type.name")

        assert error.key == "type.name"
        assert '"type.name"' in str(error)
        assert "no default value" in str(error)


class TestConfigurationConflictError:
    def test_carries_every_key(self) -> None:
        error = ConfigurationConflictError(("proxy.username", "proxy.password"), "both or neither")

        assert error.keys == ("proxy.username", "proxy.password")
        assert error.key == "proxy.username"
        assert str(error) == "both or neither"

    def test_keys_from_list_become_tuple(self) -> None:
        error = ConfigurationConflictError(["a", "b"], "conflict")

        assert error.keys == ("a", "b")


class TestValueAttribute:
    def test_value_defaults_to_none(self) -> None:
        assert TypeCoercionError("batch.size", "bad").value is None

    def test_value_is_kept(self) -> None:
        error = ConfigValidationError("write.method", "bad", "UPSERT")

        assert error.value == "UPSERT"
