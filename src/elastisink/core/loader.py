# src/elastisink/core/loader.py
"""Loading raw connector configuration from files.

The hosting framework normally hands the connector a flat string mapping.
For local validation and tooling, the same mapping can be read from:
- YAML or JSON (``.yaml``, ``.yml``, ``.json``): a mapping, nested mappings
  are flattened with dots (``proxy: {host: h}`` -> ``proxy.host``)
- Java-style properties (``.properties``): ``key=value`` or ``key: value``
  lines, ``#`` / ``!`` comments

Every value is returned as a string, exactly what the framework would pass.
``${VAR}`` and ``${VAR:-default}`` are expanded from the environment so
secrets can stay out of the file.
"""

import os
import re
from pathlib import Path
from typing import Any

import yaml

_ENV_VAR_PATTERN = re.compile(r"\$\{([A-Z_][A-Z0-9_]*)(?::-([^}]*))?\}")

_YAML_SUFFIXES = frozenset({".yaml", ".yml", ".json"})


class ConfigLoadError(Exception):
    """Raised when a configuration file cannot be read or is malformed."""

    pass


def expand_env_vars(value: str) -> str:
    """Expand ${VAR} and ${VAR:-default} patterns in a string.

    Raises:
        ConfigLoadError: If a variable is unset and has no default
    """

    def replacer(match: re.Match[str]) -> str:
        var_name = match.group(1)
        default = match.group(2)  # None if no default specified
        env_value = os.environ.get(var_name)
        if env_value is not None:
            return env_value
        if default is not None:
            return default
        raise ConfigLoadError(f"Environment variable '{var_name}' is not set and has no default")

    return _ENV_VAR_PATTERN.sub(replacer, value)


def _to_raw_string(key: str, value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int | float | str):
        return str(value)
    if isinstance(value, list):
        return ",".join(_to_raw_string(key, item) for item in value)
    raise ConfigLoadError(f"Unsupported value for {key}: {type(value).__name__}")


def _flatten(data: dict[Any, Any], prefix: str = "") -> dict[str, str]:
    flat: dict[str, str] = {}
    for key, value in data.items():
        full_key = f"{prefix}{key}"
        if isinstance(value, dict):
            flat.update(_flatten(value, prefix=f"{full_key}."))
        elif value is None:
            # null means "not configured" - the default applies
            continue
        else:
            flat[full_key] = _to_raw_string(full_key, value)
    return flat


def parse_properties(text: str) -> dict[str, str]:
    """Parse simple Java-style properties text.

    Supports ``=`` or ``:`` separators and ``#`` / ``!`` comment lines.
    Line continuations and unicode escapes are not supported.
    """
    result: dict[str, str] = {}
    for line_no, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.strip()
        if not line or line.startswith(("#", "!")):
            continue
        match = re.match(r"^([^=:\s]+)\s*[=:]\s*(.*)$", line)
        if match is None:
            raise ConfigLoadError(f"Line {line_no}: expected 'key=value', got {raw_line!r}")
        result[match.group(1)] = match.group(2)
    return result


def load_raw_config(path: Path) -> dict[str, str]:
    """Read a configuration file into a flat string mapping.

    Args:
        path: YAML, JSON or .properties file

    Returns:
        Flat mapping of dotted keys to string values, env vars expanded

    Raises:
        ConfigLoadError: If the file is missing, unreadable or malformed
    """
    if not path.exists():
        raise ConfigLoadError(f"Config file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigLoadError(f"Cannot read config file {path}: {e}") from e

    if path.suffix.lower() in _YAML_SUFFIXES:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ConfigLoadError(f"Malformed YAML in {path}: {e}") from e
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigLoadError(f"Config file {path} must contain a mapping, got {type(data).__name__}")
        raw = _flatten(data)
    else:
        raw = parse_properties(text)

    return {key: expand_env_vars(value) for key, value in raw.items()}
