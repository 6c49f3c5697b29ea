# src/elastisink/contracts/errors.py
"""Configuration error taxonomy.

Every failure raised while building a connector configuration is a
ConfigError subclass. They are raised synchronously during construction,
are never retried (resolution is deterministic), and propagate to the
hosting framework, which must refuse to start the task.

Hierarchy:
    ConfigError
    ├── MissingRequiredFieldError   - required key absent from input
    ├── TypeCoercionError           - raw value not parseable / out of range
    ├── ConfigValidationError       - field validator rejected the value
    └── ConfigurationConflictError  - cross-field invariant violated

RegistryError is separate: it signals a programming error while declaring
fields (duplicate key, invalid default), not bad user input.
"""

from collections.abc import Sequence
from typing import Any


class ConfigError(Exception):
    """Base class for user-facing configuration failures.

    Attributes:
        key: The offending configuration key (first key for conflicts)
        value: The offending value, if any (never a plaintext secret)
    """

    def __init__(self, key: str, message: str, value: Any = None) -> None:
        super().__init__(message)
        self.key = key
        self.value = value


class MissingRequiredFieldError(ConfigError):
    """Raised when a field without a default is absent from the input."""

    def __init__(self, key: str) -> None:
        super().__init__(key, f'Missing required configuration "{key}" which has no default value.')


class TypeCoercionError(ConfigError):
    """Raised when a raw value cannot be parsed as the field's declared type.

    Also covers numeric values outside a declared range (e.g. proxy.port).
    """

    pass


class ConfigValidationError(ConfigError):
    """Raised when a field-level validator rejects a parsed value.

    Covers closed-set (enum) membership and other single-field predicates.
    """

    pass


class ConfigurationConflictError(ConfigError):
    """Raised when an invariant spanning several fields is violated.

    Attributes:
        keys: All keys participating in the violated invariant
    """

    def __init__(self, keys: Sequence[str], message: str) -> None:
        super().__init__(keys[0], message)
        self.keys = tuple(keys)


class RegistryError(Exception):
    """Raised when a field registry is declared incorrectly.

    Happens at import time while the registry is being built, never during
    resolution of user input.
    """

    pass
