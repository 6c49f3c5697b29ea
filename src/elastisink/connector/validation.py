# src/elastisink/connector/validation.py
"""Cross-field validation of a resolved connector configuration.

Field-level checks (types, ranges, closed sets) happen during resolution.
The rules here need more than one field and run once, after resolution
has succeeded. This is the only place where one field's legality depends
on another field's value.
"""

from collections.abc import Callable
from typing import Final

from elastisink.connector.definitions import PROXY_HOST_CONFIG, PROXY_PASSWORD_CONFIG, PROXY_USERNAME_CONFIG
from elastisink.contracts.errors import ConfigurationConflictError
from elastisink.core.snapshot import ConfigSnapshot


def validate_proxy_configs(snapshot: ConfigSnapshot) -> None:
    """Proxy credentials must be coherent with the proxy host.

    - Without a host, neither username nor password may be set.
    - With a host, username and password are both set or both absent
      (anonymous proxy).

    Raises:
        ConfigurationConflictError: If either rule is violated
    """
    host = snapshot.get_string(PROXY_HOST_CONFIG)
    has_username = bool(snapshot.get_string(PROXY_USERNAME_CONFIG))
    has_password = snapshot.get_password(PROXY_PASSWORD_CONFIG) is not None

    if not host:
        if has_username or has_password:
            raise ConfigurationConflictError(
                (PROXY_USERNAME_CONFIG, PROXY_PASSWORD_CONFIG, PROXY_HOST_CONFIG),
                f"{PROXY_USERNAME_CONFIG} and {PROXY_PASSWORD_CONFIG} cannot be set without {PROXY_HOST_CONFIG}.",
            )
    elif has_username != has_password:
        raise ConfigurationConflictError(
            (PROXY_USERNAME_CONFIG, PROXY_PASSWORD_CONFIG),
            f"Both {PROXY_USERNAME_CONFIG} and {PROXY_PASSWORD_CONFIG} must be set, or neither.",
        )


CROSS_FIELD_RULES: Final[tuple[Callable[[ConfigSnapshot], None], ...]] = (validate_proxy_configs,)


def validate(snapshot: ConfigSnapshot) -> None:
    """Run every cross-field rule; the first violation is raised."""
    for rule in CROSS_FIELD_RULES:
        rule(snapshot)
