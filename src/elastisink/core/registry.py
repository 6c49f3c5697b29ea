# src/elastisink/core/registry.py
"""Field registry: the declared vocabulary of a configuration.

A registry is an ordered, immutable mapping from key to FieldDefinition.
It is assembled once with a RegistryBuilder (usually at import time),
frozen with build(), and then shared read-only by every resolution.

Sub-registries (e.g. the TLS vocabulary) are composed into a parent by
prefixing their keys - see RegistryBuilder.embed() and merge_registries().
Prefixed copies keep the original type, default and validator.

Example:
    builder = RegistryBuilder()
    builder.define("batch.size", ConfigType.INT, 2000, importance=Importance.MEDIUM, documentation="...")
    builder.embed("elastic.https.", "Security", 1, SSL_CONFIG)
    CONFIG = builder.build()
"""

from __future__ import annotations

import dataclasses
import types
from collections import Counter
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Final

from elastisink.contracts.enums import ConfigType, Importance, Width
from elastisink.contracts.errors import ConfigError, RegistryError
from elastisink.core.coercion import parse_type
from elastisink.core.validators import Validator


class NoDefault:
    """Sentinel class marking a field as required.

    Distinct from None, which is a legal (null) default.
    This is a singleton - use the NO_DEFAULT instance.
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return "<NO_DEFAULT>"


NO_DEFAULT: Final[NoDefault] = NoDefault()


@dataclass(frozen=True, slots=True)
class FieldDefinition:
    """Declaration of one configuration key.

    Only name, type, default and validator affect resolution. Everything
    else is presentation metadata for docs and configuration UIs.
    """

    name: str
    type: ConfigType
    default: Any = NO_DEFAULT
    validator: Validator | None = None
    importance: Importance = Importance.MEDIUM
    documentation: str = ""
    group: str | None = None
    order_in_group: int = -1
    width: Width = Width.NONE
    display_name: str | None = None

    @property
    def required(self) -> bool:
        return self.default is NO_DEFAULT

    @property
    def label(self) -> str:
        return self.display_name if self.display_name is not None else self.name


class ConfigRegistry(Mapping[str, FieldDefinition]):
    """Immutable, ordered collection of FieldDefinitions.

    Iteration follows declaration order. Construct through RegistryBuilder;
    the constructor trusts that defaults are parsed but rejects repeated names.
    """

    __slots__ = ("_definitions",)

    def __init__(self, definitions: Sequence[FieldDefinition]) -> None:
        self._definitions: Mapping[str, FieldDefinition] = types.MappingProxyType({d.name: d for d in definitions})
        if len(self._definitions) != len(definitions):
            counts = Counter(d.name for d in definitions)
            repeated = sorted(name for name, count in counts.items() if count > 1)
            raise RegistryError(f"Configuration {', '.join(repeated)} is defined twice.")

    def __getitem__(self, key: str) -> FieldDefinition:
        return self._definitions[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)

    def __repr__(self) -> str:
        return f"ConfigRegistry({len(self)} keys)"

    def definitions(self) -> tuple[FieldDefinition, ...]:
        """All definitions in declaration order."""
        return tuple(self._definitions.values())

    def groups(self) -> tuple[str, ...]:
        """Group names in the order each was first used."""
        seen: dict[str, None] = {}
        for definition in self._definitions.values():
            if definition.group is not None:
                seen.setdefault(definition.group, None)
        return tuple(seen)

    def all_keys(self) -> tuple[str, ...]:
        """Keys grouped by group insertion order, declaration order within a group.

        Ungrouped keys come last. Used for documentation only.
        """
        keys: list[str] = []
        for group in self.groups():
            keys.extend(d.name for d in self._definitions.values() if d.group == group)
        keys.extend(d.name for d in self._definitions.values() if d.group is None)
        return tuple(keys)

    def in_group(self, group: str) -> tuple[FieldDefinition, ...]:
        """Definitions of one group, sorted by display order then name."""
        members = [d for d in self._definitions.values() if d.group == group]
        return tuple(sorted(members, key=lambda d: (d.order_in_group, d.name)))

    def sorted_definitions(self) -> tuple[FieldDefinition, ...]:
        """Required keys first, then by importance (high to low), then by name."""
        return tuple(sorted(self._definitions.values(), key=lambda d: (not d.required, d.importance, d.name)))


class RegistryBuilder:
    """Mutable accumulator that produces a ConfigRegistry.

    define() and embed() return the builder so declarations can be chained.
    Every default is coerced and validated on the way in; a bad default is a
    RegistryError at import time rather than a surprise at resolution time.
    """

    def __init__(self) -> None:
        self._definitions: dict[str, FieldDefinition] = {}

    def __len__(self) -> int:
        return len(self._definitions)

    def __contains__(self, name: object) -> bool:
        return name in self._definitions

    def define(
        self,
        name: str,
        type: ConfigType,
        default: Any = NO_DEFAULT,
        validator: Validator | None = None,
        *,
        importance: Importance,
        documentation: str,
        group: str | None = None,
        order_in_group: int = -1,
        width: Width = Width.NONE,
        display_name: str | None = None,
    ) -> RegistryBuilder:
        """Declare a field. Raises RegistryError if the key already exists."""
        return self.add(
            FieldDefinition(
                name=name,
                type=type,
                default=default,
                validator=validator,
                importance=importance,
                documentation=documentation,
                group=group,
                order_in_group=order_in_group,
                width=width,
                display_name=display_name,
            )
        )

    def add(self, definition: FieldDefinition) -> RegistryBuilder:
        """Add a ready-made definition (used by define, embed and merge)."""
        if definition.name in self._definitions:
            raise RegistryError(f"Configuration {definition.name} is defined twice.")

        if not definition.required:
            try:
                parsed = parse_type(definition.name, definition.default, definition.type)
                if definition.validator is not None:
                    definition.validator.validate(definition.name, parsed)
            except ConfigError as e:
                raise RegistryError(f"Invalid default value for configuration {definition.name}: {e}") from e
            definition = dataclasses.replace(definition, default=parsed)

        self._definitions[definition.name] = definition
        return self

    def embed(self, prefix: str, group: str, start_order: int, sub_registry: ConfigRegistry) -> RegistryBuilder:
        """Merge every field of ``sub_registry`` under ``prefix``.

        Fields are taken in the sub-registry's sorted order and numbered from
        ``start_order`` inside ``group``. A sub-field that already has a group
        is shown as "<group>: <sub group>".
        """
        for offset, definition in enumerate(sub_registry.sorted_definitions()):
            self.add(
                dataclasses.replace(
                    definition,
                    name=prefix + definition.name,
                    group=group if definition.group is None else f"{group}: {definition.group}",
                    order_in_group=start_order + offset,
                )
            )
        return self

    def build(self) -> ConfigRegistry:
        return ConfigRegistry(tuple(self._definitions.values()))


def merge_registries(parts: Sequence[tuple[str, ConfigRegistry]]) -> ConfigRegistry:
    """Compose registries into one, prefixing each part's keys.

    Args:
        parts: (prefix, registry) pairs; use "" to merge a part unprefixed

    Returns:
        New registry with parts in the given order, declaration order kept

    Raises:
        RegistryError: If two parts produce the same key
    """
    builder = RegistryBuilder()
    for prefix, registry in parts:
        for definition in registry.definitions():
            builder.add(dataclasses.replace(definition, name=prefix + definition.name))
    return builder.build()
