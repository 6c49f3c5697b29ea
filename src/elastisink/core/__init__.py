# src/elastisink/core/__init__.py
"""Generic configuration machinery: registry, validators, resolution, docs.

Nothing here knows about Elasticsearch; the connector vocabulary lives in
elastisink.connector.
"""

from elastisink.core.parsing import originals_with_prefix, parse_value, resolve, unknown_keys
from elastisink.core.registry import (
    NO_DEFAULT,
    ConfigRegistry,
    FieldDefinition,
    RegistryBuilder,
    merge_registries,
)
from elastisink.core.snapshot import ConfigSnapshot
from elastisink.core.validators import ClosedSet, NonEmptyList, Range, Validator

__all__ = [
    "NO_DEFAULT",
    "ClosedSet",
    "ConfigRegistry",
    "ConfigSnapshot",
    "FieldDefinition",
    "NonEmptyList",
    "Range",
    "RegistryBuilder",
    "Validator",
    "merge_registries",
    "originals_with_prefix",
    "parse_value",
    "resolve",
    "unknown_keys",
]
