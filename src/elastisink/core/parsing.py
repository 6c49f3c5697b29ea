# src/elastisink/core/parsing.py
"""Resolution of raw key/value input into a typed ConfigSnapshot.

Resolution is total over the registry: every declared key is supplied,
defaulted, or causes a failure. There is no partial result. Keys in the
input that the registry does not declare are ignored here; callers can
report them with unknown_keys().

This module is pure - no logging, no I/O - so it may run concurrently for
any number of connector tasks against the same shared registry.
"""

from collections.abc import Mapping
from typing import Any

from elastisink.contracts.errors import MissingRequiredFieldError
from elastisink.core.coercion import parse_type
from elastisink.core.registry import ConfigRegistry, FieldDefinition
from elastisink.core.snapshot import ConfigSnapshot


def parse_value(definition: FieldDefinition, value: Any) -> Any:
    """Coerce one raw value and run the field's validator.

    Raises:
        TypeCoercionError: Value does not fit the declared type or range
        ConfigValidationError: Field validator rejected the value
    """
    parsed = parse_type(definition.name, value, definition.type)
    if definition.validator is not None:
        definition.validator.validate(definition.name, parsed)
    return parsed


def resolve(registry: ConfigRegistry, raw: Mapping[str, Any]) -> ConfigSnapshot:
    """Resolve raw input against a registry.

    Args:
        registry: Declared fields (shared, read-only)
        raw: Flat mapping of dotted keys to raw (usually string) values

    Returns:
        Snapshot covering every key in the registry

    Raises:
        MissingRequiredFieldError: A field without a default is absent
        TypeCoercionError: A value cannot be parsed as its declared type
        ConfigValidationError: A field validator rejected a value
    """
    values: dict[str, Any] = {}
    for name, definition in registry.items():
        if name in raw:
            values[name] = parse_value(definition, raw[name])
        elif definition.required:
            raise MissingRequiredFieldError(name)
        else:
            # Defaults were coerced and validated when the field was declared
            values[name] = definition.default
    return ConfigSnapshot(registry, values)


def unknown_keys(registry: ConfigRegistry, raw: Mapping[str, Any]) -> tuple[str, ...]:
    """Keys present in ``raw`` that the registry does not declare, in input order."""
    return tuple(key for key in raw if key not in registry)


def originals_with_prefix(raw: Mapping[str, Any], prefix: str) -> dict[str, Any]:
    """Raw entries under ``prefix``, with the prefix stripped from each key."""
    return {key[len(prefix) :]: value for key, value in raw.items() if key.startswith(prefix)}
