# src/elastisink/core/docs.py
"""reStructuredText rendering of a field registry.

render_rst() lists every key, required keys first then by importance.
render_enriched_rst() adds one section per display group, ordered the way
a configuration UI would present the fields.
"""

from typing import Any

from pydantic import SecretStr

from elastisink.contracts.enums import ConfigType
from elastisink.core.registry import ConfigRegistry, FieldDefinition
from elastisink.core.snapshot import HIDDEN


def format_default(definition: FieldDefinition) -> str:
    """Render a default the way users would type it."""
    value: Any = definition.default
    if value is None:
        return "null"
    if isinstance(value, SecretStr):
        return HIDDEN
    if definition.type is ConfigType.LIST:
        return '""' if not value else ",".join(value)
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, str) and not value:
        return '""'
    return str(value)


def _field_block(definition: FieldDefinition, *, display_name: bool) -> list[str]:
    lines = [f"``{definition.name}``"]
    for doc_line in definition.documentation.splitlines() or [""]:
        lines.append(f"  {doc_line.strip()}".rstrip())
    lines.append("")
    lines.append(f"  * Type: {definition.type.value}")
    if not definition.required:
        lines.append(f"  * Default: {format_default(definition)}")
    if definition.validator is not None:
        lines.append(f"  * Valid Values: {definition.validator}")
    lines.append(f"  * Importance: {definition.importance}")
    if display_name:
        lines.append(f"  * Display name: {definition.label}")
    lines.append("")
    return lines


def render_rst(registry: ConfigRegistry) -> str:
    lines: list[str] = []
    for definition in registry.sorted_definitions():
        lines.extend(_field_block(definition, display_name=False))
    return "\n".join(lines)


def render_enriched_rst(registry: ConfigRegistry) -> str:
    lines: list[str] = []
    for group in registry.groups():
        lines.append(group)
        lines.append("^" * len(group))
        lines.append("")
        for definition in registry.in_group(group):
            lines.extend(_field_block(definition, display_name=True))

    ungrouped = [d for d in registry.sorted_definitions() if d.group is None]
    if ungrouped:
        lines.append("Other")
        lines.append("^^^^^")
        lines.append("")
        for definition in ungrouped:
            lines.extend(_field_block(definition, display_name=True))
    return "\n".join(lines)
