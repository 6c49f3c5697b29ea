# src/elastisink/core/coercion.py
"""Raw value coercion for each ConfigType.

Raw configuration arrives as strings from the hosting framework. Values that
already have the declared Python type (e.g. defaults declared in code, or a
bool from a YAML loader) pass through unchanged, so a value can be coerced
any number of times with the same result.

Rules (strings are trimmed first):
- STRING:   the trimmed string
- INT:      signed 32-bit integer
- LONG:     signed 64-bit integer
- BOOLEAN:  "true" / "false", case-insensitive
- PASSWORD: wrapped in pydantic SecretStr so it never prints in plain text
- LIST:     comma-separated, each element trimmed; "" -> empty tuple
- None stays None for every type (a null default is legal).
"""

import re
from typing import Annotated, Any, Final

from pydantic import Field, SecretStr, TypeAdapter, ValidationError

from elastisink.contracts.enums import ConfigType
from elastisink.contracts.errors import TypeCoercionError

INT_MIN: Final[int] = -(2**31)
INT_MAX: Final[int] = 2**31 - 1
LONG_MIN: Final[int] = -(2**63)
LONG_MAX: Final[int] = 2**63 - 1

_INTEGER_ADAPTERS: Final[dict[ConfigType, TypeAdapter[int]]] = {
    ConfigType.INT: TypeAdapter(Annotated[int, Field(ge=INT_MIN, le=INT_MAX)]),
    ConfigType.LONG: TypeAdapter(Annotated[int, Field(ge=LONG_MIN, le=LONG_MAX)]),
}

_BOUND_ERROR_TYPES: Final[frozenset[str]] = frozenset({"greater_than_equal", "less_than_equal"})

# ASCII digits with an optional sign; no underscores, decimals or exponents
_INTEGER_LITERAL: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")


def _type_error(name: str, value: Any, reason: str) -> TypeCoercionError:
    shown = "[hidden]" if isinstance(value, SecretStr) else value
    return TypeCoercionError(name, f"Invalid value {shown} for configuration {name}: {reason}", value)


def _parse_integer(name: str, value: Any, config_type: ConfigType) -> int:
    label = config_type.name
    # bool is an int subclass; True is not a batch size
    if isinstance(value, bool) or not isinstance(value, int | str):
        raise _type_error(name, value, f"Expected an integer of type {label}, but it was a {type(value).__name__}")

    candidate = value.strip() if isinstance(value, str) else value
    if isinstance(candidate, str) and not _INTEGER_LITERAL.fullmatch(candidate):
        raise _type_error(name, value, f"Not a number of type {label}")
    try:
        return _INTEGER_ADAPTERS[config_type].validate_python(candidate)
    except ValidationError as e:
        if e.errors()[0]["type"] in _BOUND_ERROR_TYPES:
            raise _type_error(name, value, f"Value out of range for type {label}") from None
        raise _type_error(name, value, f"Not a number of type {label}") from None


def _parse_boolean(name: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered == "true":
            return True
        if lowered == "false":
            return False
    raise _type_error(name, value, "Expected value to be either true or false")


def _parse_list(name: str, value: Any) -> tuple[str, ...]:
    if isinstance(value, list | tuple):
        if not all(isinstance(item, str) for item in value):
            raise _type_error(name, value, "Expected every list element to be a string")
        return tuple(value)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return ()
        return tuple(part.strip() for part in text.split(","))
    raise _type_error(name, value, f"Expected a comma separated list, but it was a {type(value).__name__}")


def parse_type(name: str, value: Any, config_type: ConfigType) -> Any:
    """Coerce a raw value to the Python representation of ``config_type``.

    Args:
        name: Configuration key (for error messages)
        value: Raw value, usually a string
        config_type: Declared type of the field

    Returns:
        The coerced value (str, int, bool, SecretStr, tuple[str, ...]) or None

    Raises:
        TypeCoercionError: If the value cannot represent the declared type
    """
    if value is None:
        return None

    if config_type is ConfigType.STRING:
        if isinstance(value, str):
            return value.strip()
        raise _type_error(name, value, f"Expected value to be a string, but it was a {type(value).__name__}")
    if config_type is ConfigType.PASSWORD:
        if isinstance(value, SecretStr):
            return value
        if isinstance(value, str):
            return SecretStr(value.strip())
        raise _type_error(name, value, f"Expected value to be a string, but it was a {type(value).__name__}")
    if config_type is ConfigType.BOOLEAN:
        return _parse_boolean(name, value)
    if config_type is ConfigType.LIST:
        return _parse_list(name, value)
    return _parse_integer(name, value, config_type)
