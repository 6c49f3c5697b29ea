# src/elastisink/contracts/enums.py
"""Closed vocabularies used by the configuration registry.

Two families live here:
- Registry metadata (ConfigType, Importance, Width): describe how a field
  is parsed and documented.
- Connector behaviors (WriteMethod, BehaviorOnNullValues, ...): the legal
  literal values of enum-typed fields. The literal spelling IS the wire
  format - matching is exact and case-sensitive.
"""

from enum import IntEnum, StrEnum


class ConfigType(StrEnum):
    """Declared type of a configuration field.

    Determines how a raw string is coerced during resolution.
    """

    STRING = "string"
    INT = "int"
    LONG = "long"
    BOOLEAN = "boolean"
    PASSWORD = "password"
    LIST = "list"


class Importance(IntEnum):
    """Documentation tier of a field. No effect on resolution.

    Ordered so that sorting puts HIGH first.
    """

    HIGH = 0
    MEDIUM = 1
    LOW = 2

    def __str__(self) -> str:
        return self.name.lower()


class Width(StrEnum):
    """Suggested display width of a field in configuration UIs."""

    NONE = "none"
    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"


class WriteMethod(StrEnum):
    """How a record becomes a document.

    Values:
        INSERT: Replace any existing document with the same ID
        UPSERT: Create the document, or merge fields into an existing one
    """

    INSERT = "insert"
    UPSERT = "upsert"


class BehaviorOnNullValues(StrEnum):
    """What to do with a record that has a non-null key and a null value."""

    IGNORE = "ignore"
    DELETE = "delete"
    FAIL = "fail"


class BehaviorOnMalformedDocs(StrEnum):
    """What to do when the store rejects a document as malformed."""

    IGNORE = "ignore"
    WARN = "warn"
    FAIL = "fail"


class SecurityProtocol(StrEnum):
    """Transport security used to reach the document store.

    PLAINTEXT ignores every ``elastic.https.*`` setting.
    """

    PLAINTEXT = "PLAINTEXT"
    SSL = "SSL"


class DocumentVersionType(StrEnum):
    """Source of the external version number attached to each document."""

    LEGACY = "legacy"
    UNUSED = "unused"
    MESSAGE_OFFSET = "message-offset"
    MESSAGE_TIMESTAMP = "message-timestamp"
    COMBINED_TIMESTAMP_OFFSET = "combined-timestamp-offset"
