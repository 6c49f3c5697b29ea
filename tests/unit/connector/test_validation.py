# tests/unit/connector/test_validation.py
"""Tests for cross-field proxy validation."""

from collections.abc import Callable

import pytest

from elastisink.connector.definitions import CONFIG
from elastisink.connector.validation import CROSS_FIELD_RULES, validate, validate_proxy_configs
from elastisink.contracts.errors import ConfigurationConflictError
from elastisink.core.parsing import resolve

PropsFactory = Callable[..., dict[str, str]]


class TestProxyCoherence:
    """Without a host, no proxy credential may be set."""

    def test_username_without_host_fails(self, props_with: PropsFactory) -> None:
        snapshot = resolve(CONFIG, props_with(**{"proxy.host": "", "proxy.username": "x"}))

        with pytest.raises(ConfigurationConflictError, match="cannot be set without proxy.host") as exc_info:
            validate_proxy_configs(snapshot)

        assert set(exc_info.value.keys) == {"proxy.username", "proxy.password", "proxy.host"}

    def test_password_without_host_fails(self, props_with: PropsFactory) -> None:
        snapshot = resolve(CONFIG, props_with(**{"proxy.password": "pw"}))

        with pytest.raises(ConfigurationConflictError):
            validate_proxy_configs(snapshot)

    def test_empty_password_still_counts_as_set(self, props_with: PropsFactory) -> None:
        """Presence, not content, is what matters for a secret."""
        snapshot = resolve(CONFIG, props_with(**{"proxy.password": ""}))

        with pytest.raises(ConfigurationConflictError):
            validate_proxy_configs(snapshot)

    def test_no_host_no_credentials_passes(self, props_with: PropsFactory) -> None:
        snapshot = resolve(CONFIG, props_with(**{"proxy.host": "", "proxy.username": ""}))

        validate_proxy_configs(snapshot)

    def test_defaults_pass(self, minimal_props: dict[str, str]) -> None:
        validate_proxy_configs(resolve(CONFIG, minimal_props))


class TestProxyCredentialPairing:
    """With a host, username and password are both set or both absent."""

    def test_username_without_password_fails(self, props_with: PropsFactory) -> None:
        snapshot = resolve(CONFIG, props_with(**{"proxy.host": "h", "proxy.username": "u"}))

        with pytest.raises(ConfigurationConflictError) as exc_info:
            validate_proxy_configs(snapshot)

        message = str(exc_info.value)
        assert "proxy.username" in message
        assert "proxy.password" in message
        assert exc_info.value.keys == ("proxy.username", "proxy.password")

    def test_password_without_username_fails(self, props_with: PropsFactory) -> None:
        snapshot = resolve(CONFIG, props_with(**{"proxy.host": "h", "proxy.password": "p"}))

        with pytest.raises(ConfigurationConflictError, match="must be set, or neither"):
            validate_proxy_configs(snapshot)

    def test_anonymous_proxy_passes(self, props_with: PropsFactory) -> None:
        validate_proxy_configs(resolve(CONFIG, props_with(**{"proxy.host": "h"})))

    def test_authenticated_proxy_passes(self, props_with: PropsFactory) -> None:
        props = props_with(**{"proxy.host": "h", "proxy.username": "u", "proxy.password": "p"})

        validate_proxy_configs(resolve(CONFIG, props))

    def test_whitespace_username_counts_as_empty(self, props_with: PropsFactory) -> None:
        """STRING values are trimmed before the rule sees them."""
        validate_proxy_configs(resolve(CONFIG, props_with(**{"proxy.host": "h", "proxy.username": "  "})))


class TestValidate:
    def test_runs_proxy_rule(self, props_with: PropsFactory) -> None:
        snapshot = resolve(CONFIG, props_with(**{"proxy.username": "x"}))

        with pytest.raises(ConfigurationConflictError):
            validate(snapshot)

    def test_proxy_rule_registered(self) -> None:
        assert validate_proxy_configs in CROSS_FIELD_RULES
