# src/elastisink/core/validators.py
"""Field-level validators.

A validator is any object with ``validate(name, value) -> None`` that raises
a ConfigError subclass when the already-coerced value is unacceptable.
Validators run after type coercion, once per field, and never look at other
fields (multi-field rules live in elastisink.connector.validation).

``str(validator)`` is used as the "Valid Values" line in rendered docs.

Example:
    WRITE_METHOD = ClosedSet.of(WriteMethod, WriteMethod.INSERT)
    WRITE_METHOD.validate("write.method", "upsert")   # ok
    WRITE_METHOD.validate("write.method", "UPSERT")   # ConfigValidationError
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Protocol

from elastisink.contracts.errors import ConfigValidationError, TypeCoercionError


class Validator(Protocol):
    """Structural type for field validators."""

    def validate(self, name: str, value: Any) -> None: ...


@dataclass(frozen=True, slots=True)
class Range:
    """Inclusive numeric bounds. Either side may be open.

    Violations raise TypeCoercionError: an out-of-range number is treated
    the same as one that does not fit the declared type.
    """

    min: int | None = None
    max: int | None = None

    @classmethod
    def at_least(cls, min_value: int) -> Range:
        return cls(min=min_value)

    @classmethod
    def between(cls, min_value: int, max_value: int) -> Range:
        if min_value > max_value:
            raise ValueError(f"Range lower bound {min_value} exceeds upper bound {max_value}")
        return cls(min=min_value, max=max_value)

    def validate(self, name: str, value: Any) -> None:
        if value is None:
            raise TypeCoercionError(name, f"Invalid value None for configuration {name}: Value must be non-null")
        if self.min is not None and value < self.min:
            raise TypeCoercionError(
                name,
                f"Invalid value {value} for configuration {name}: Value must be at least {self.min}",
                value,
            )
        if self.max is not None and value > self.max:
            raise TypeCoercionError(
                name,
                f"Invalid value {value} for configuration {name}: Value must be no more than {self.max}",
                value,
            )

    def __str__(self) -> str:
        if self.min is None:
            return f"[...,{self.max}]"
        if self.max is None:
            return f"[{self.min},...]"
        return f"[{self.min},...,{self.max}]"


@dataclass(frozen=True, slots=True)
class ClosedSet:
    """A closed vocabulary of string literals with a designated default.

    One generic validator serves every enum-typed field. Matching is exact:
    no trimming beyond what the STRING parser already did, no case folding.

    Attributes:
        allowed: Legal literals, in documentation order
        default: The literal used when the field is omitted
    """

    allowed: tuple[str, ...]
    default: str

    def __post_init__(self) -> None:
        if not self.allowed:
            raise ValueError("ClosedSet requires at least one allowed value")
        if len(set(self.allowed)) != len(self.allowed):
            raise ValueError(f"ClosedSet has duplicate values: {list(self.allowed)}")
        if self.default not in self.allowed:
            raise ValueError(f"ClosedSet default {self.default!r} is not one of {list(self.allowed)}")

    @classmethod
    def of(cls, enum_cls: type[StrEnum], default: StrEnum) -> ClosedSet:
        """Build from a StrEnum, keeping member declaration order."""
        return cls(tuple(member.value for member in enum_cls), default.value)

    @classmethod
    def from_values(cls, values: Iterable[str], default: str) -> ClosedSet:
        return cls(tuple(values), default)

    def values(self) -> tuple[str, ...]:
        return self.allowed

    def default_value(self) -> str:
        return self.default

    def validate(self, name: str, value: Any) -> None:
        if not isinstance(value, str) or value not in self.allowed:
            raise ConfigValidationError(
                name,
                f"Invalid value {value!r} for configuration {name}: String must be one of: {', '.join(self.allowed)}",
                value,
            )

    def __str__(self) -> str:
        return f"[{', '.join(self.allowed)}]"


@dataclass(frozen=True, slots=True)
class NonEmptyList:
    """Requires a LIST field to hold at least one element."""

    def validate(self, name: str, value: Any) -> None:
        if not value:
            raise ConfigValidationError(
                name,
                f"Invalid value {value!r} for configuration {name}: At least one element is required",
                value,
            )

    def __str__(self) -> str:
        return "non-empty list"
