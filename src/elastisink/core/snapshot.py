# src/elastisink/core/snapshot.py
"""Resolved configuration snapshot.

A ConfigSnapshot is the typed result of resolving raw input against a
registry: one value per declared key, defaults filled in. It is immutable
and compares equal to any other snapshot holding the same values, so two
resolutions of the same input are interchangeable.

Secrets stay wrapped in pydantic SecretStr; use redacted() for anything
that ends up in logs or audit output.
"""

from __future__ import annotations

import types
from collections.abc import Iterator, Mapping
from typing import TYPE_CHECKING, Any, Final

from pydantic import SecretStr

from elastisink.contracts.enums import ConfigType

if TYPE_CHECKING:
    from elastisink.core.registry import ConfigRegistry

HIDDEN: Final[str] = "[hidden]"


class ConfigSnapshot(Mapping[str, Any]):
    """Immutable mapping from key to typed value.

    Typed getters check the declared type so a collaborator asking for an
    int where the registry declares a string fails loudly (TypeError)
    instead of silently misreading.
    """

    __slots__ = ("_registry", "_values")

    def __init__(self, registry: ConfigRegistry, values: Mapping[str, Any]) -> None:
        self._registry = registry
        self._values: Mapping[str, Any] = types.MappingProxyType(dict(values))

    def __getitem__(self, key: str) -> Any:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"ConfigSnapshot({self.redacted()!r})"

    @property
    def registry(self) -> ConfigRegistry:
        return self._registry

    def _typed(self, key: str, *expected: ConfigType) -> Any:
        declared = self._registry[key].type
        if declared not in expected:
            raise TypeError(f"Configuration {key} is declared as {declared.name}, not {'/'.join(t.name for t in expected)}")
        return self._values[key]

    def get_string(self, key: str) -> str | None:
        return self._typed(key, ConfigType.STRING)

    def get_int(self, key: str) -> int | None:
        return self._typed(key, ConfigType.INT)

    def get_long(self, key: str) -> int | None:
        return self._typed(key, ConfigType.LONG, ConfigType.INT)

    def get_boolean(self, key: str) -> bool | None:
        return self._typed(key, ConfigType.BOOLEAN)

    def get_list(self, key: str) -> tuple[str, ...] | None:
        return self._typed(key, ConfigType.LIST)

    def get_password(self, key: str) -> SecretStr | None:
        return self._typed(key, ConfigType.PASSWORD)

    def with_prefix(self, prefix: str, *, strip: bool = True) -> dict[str, Any]:
        """Values whose key starts with ``prefix``, optionally with it removed."""
        return {(key[len(prefix) :] if strip else key): value for key, value in self._values.items() if key.startswith(prefix)}

    def redacted(self) -> dict[str, Any]:
        """Plain dict safe for logging: secrets hidden, tuples as lists."""
        result: dict[str, Any] = {}
        for key, value in self._values.items():
            if isinstance(value, SecretStr):
                result[key] = HIDDEN
            elif isinstance(value, tuple):
                result[key] = list(value)
            else:
                result[key] = value
        return result
