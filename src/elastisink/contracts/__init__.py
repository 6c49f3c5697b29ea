# src/elastisink/contracts/__init__.py
"""Shared contracts: error taxonomy and closed vocabularies.

Leaf module - imports nothing else from elastisink.
"""

from elastisink.contracts.enums import (
    BehaviorOnMalformedDocs,
    BehaviorOnNullValues,
    ConfigType,
    DocumentVersionType,
    Importance,
    SecurityProtocol,
    Width,
    WriteMethod,
)
from elastisink.contracts.errors import (
    ConfigError,
    ConfigurationConflictError,
    ConfigValidationError,
    MissingRequiredFieldError,
    RegistryError,
    TypeCoercionError,
)

__all__ = [
    "BehaviorOnMalformedDocs",
    "BehaviorOnNullValues",
    "ConfigError",
    "ConfigType",
    "ConfigValidationError",
    "ConfigurationConflictError",
    "DocumentVersionType",
    "Importance",
    "MissingRequiredFieldError",
    "RegistryError",
    "SecurityProtocol",
    "TypeCoercionError",
    "Width",
    "WriteMethod",
]
