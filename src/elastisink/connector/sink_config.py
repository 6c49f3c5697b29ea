# src/elastisink/connector/sink_config.py
"""Validated configuration object handed to connector collaborators.

Construction is the whole validation pipeline:

    raw props -> resolve(registry) -> ConfigSnapshot -> cross-field rules

Any failure raises a ConfigError subclass and no object is produced. A
constructed ElasticsearchSinkConfig is immutable; every derived view
(secured(), ssl_configs(), ...) is recomputed from the snapshot on demand,
so views can never drift from the values they describe.

Example:
    config = ElasticsearchSinkConfig({"connection.url": "http://es:9200", "type.name": "_doc"})
    config.batch_size            # 2000
    config.secured()             # False
"""

from __future__ import annotations

import types
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Self

import structlog
from pydantic import SecretStr

from elastisink.connector.definitions import (
    AUTO_CREATE_INDICES_AT_START_CONFIG,
    BATCH_SIZE_CONFIG,
    BEHAVIOR_ON_MALFORMED_DOCS_CONFIG,
    BEHAVIOR_ON_NULL_VALUES_CONFIG,
    COMPACT_MAP_ENTRIES_CONFIG,
    CONFIG,
    CONNECTION_COMPRESSION_CONFIG,
    CONNECTION_PASSWORD_CONFIG,
    CONNECTION_SSL_CONFIG_PREFIX,
    CONNECTION_TIMEOUT_MS_CONFIG,
    CONNECTION_URL_CONFIG,
    CONNECTION_USERNAME_CONFIG,
    DOCUMENT_VERSION_TYPE_CONFIG,
    DROP_INVALID_MESSAGE_CONFIG,
    FLUSH_TIMEOUT_MS_CONFIG,
    KEY_IGNORE_CONFIG,
    LINGER_MS_CONFIG,
    MAX_BUFFERED_RECORDS_CONFIG,
    MAX_CONNECTION_IDLE_TIME_MS_CONFIG,
    MAX_IN_FLIGHT_REQUESTS_CONFIG,
    MAX_RETRIES_CONFIG,
    PROXY_HOST_CONFIG,
    PROXY_PASSWORD_CONFIG,
    PROXY_PORT_CONFIG,
    PROXY_USERNAME_CONFIG,
    READ_TIMEOUT_MS_CONFIG,
    RETRY_BACKOFF_MS_CONFIG,
    RETRY_ON_CONFLICT_CONFIG,
    SCHEMA_IGNORE_CONFIG,
    SECURITY_PROTOCOL_CONFIG,
    TOPIC_INDEX_MAP_CONFIG,
    TOPIC_KEY_IGNORE_CONFIG,
    TOPIC_SCHEMA_IGNORE_CONFIG,
    TYPE_NAME_CONFIG,
    WRITE_METHOD_CONFIG,
)
from elastisink.connector.ssl import SSL_CONFIG, SSL_ENDPOINT_IDENTIFICATION_ALGORITHM_CONFIG
from elastisink.connector.validation import validate
from elastisink.contracts.enums import (
    BehaviorOnMalformedDocs,
    BehaviorOnNullValues,
    DocumentVersionType,
    SecurityProtocol,
    WriteMethod,
)
from elastisink.contracts.errors import ConfigValidationError
from elastisink.core.loader import load_raw_config
from elastisink.core.parsing import originals_with_prefix, resolve, unknown_keys
from elastisink.core.registry import ConfigRegistry
from elastisink.core.snapshot import ConfigSnapshot

logger = structlog.get_logger(__name__)


class ElasticsearchSinkConfig:
    """Resolved, cross-validated connector configuration.

    Args:
        props: Raw key/value input from the hosting framework
        registry: Field declarations to resolve against (default: CONFIG)
        log_values: Log the effective values (secrets hidden) once built

    Raises:
        MissingRequiredFieldError: A required key is absent
        TypeCoercionError: A value does not fit its type or range
        ConfigValidationError: A value is outside its closed set
        ConfigurationConflictError: Proxy settings are incoherent
    """

    __slots__ = ("_originals", "_snapshot")

    def __init__(
        self,
        props: Mapping[str, Any],
        registry: ConfigRegistry = CONFIG,
        *,
        log_values: bool = True,
    ) -> None:
        self._originals: Mapping[str, Any] = types.MappingProxyType(dict(props))
        self._snapshot = resolve(registry, self._originals)
        validate(self._snapshot)

        if log_values:
            self._log_resolution(registry)

    @classmethod
    def from_file(cls, path: Path, registry: ConfigRegistry = CONFIG) -> Self:
        """Load raw props from a YAML/JSON/.properties file, then validate."""
        return cls(load_raw_config(path), registry)

    def _log_resolution(self, registry: ConfigRegistry) -> None:
        logger.info("Elasticsearch sink configuration resolved", values=self.redacted())

        for key in unknown_keys(registry, self._originals):
            logger.warning("Configuration was supplied but isn't a known config", key=key)

        if not self.secured():
            ignored = sorted(originals_with_prefix(self._originals, CONNECTION_SSL_CONFIG_PREFIX))
            if ignored:
                logger.warning(
                    "TLS settings are ignored because the security protocol is not SSL",
                    security_protocol=self.security_protocol.value,
                    ignored=[CONNECTION_SSL_CONFIG_PREFIX + key for key in ignored],
                )

    def __repr__(self) -> str:
        return f"ElasticsearchSinkConfig({self.redacted()!r})"

    # === Raw and resolved views ===

    @property
    def originals(self) -> Mapping[str, Any]:
        """The raw input exactly as supplied (read-only)."""
        return self._originals

    @property
    def values(self) -> ConfigSnapshot:
        return self._snapshot

    def redacted(self) -> dict[str, Any]:
        return self._snapshot.redacted()

    def get_string(self, key: str) -> str | None:
        return self._snapshot.get_string(key)

    def get_int(self, key: str) -> int | None:
        return self._snapshot.get_int(key)

    def get_long(self, key: str) -> int | None:
        return self._snapshot.get_long(key)

    def get_boolean(self, key: str) -> bool | None:
        return self._snapshot.get_boolean(key)

    def get_list(self, key: str) -> tuple[str, ...] | None:
        return self._snapshot.get_list(key)

    def get_password(self, key: str) -> SecretStr | None:
        return self._snapshot.get_password(key)

    # === Derived views ===

    def secured(self) -> bool:
        """True iff the security protocol is SSL."""
        return self.security_protocol is SecurityProtocol.SSL

    def is_basic_proxy_configured(self) -> bool:
        return bool(self.proxy_host)

    def is_proxy_with_authentication_configured(self) -> bool:
        return self.is_basic_proxy_configured() and bool(self.proxy_username) and self.proxy_password is not None

    def ssl_configs(self) -> ConfigSnapshot:
        """TLS settings resolved against the TLS vocabulary itself.

        A second, narrower resolution over the raw ``elastic.https.*`` input,
        with the prefix stripped - the shape a connection layer expects.
        """
        return resolve(SSL_CONFIG, originals_with_prefix(self._originals, CONNECTION_SSL_CONFIG_PREFIX))

    def should_disable_hostname_verification(self) -> bool:
        """True only when the endpoint identification algorithm is explicitly empty.

        Absent means the default algorithm applies and hostnames are verified.
        """
        algorithm = self.get_string(CONNECTION_SSL_CONFIG_PREFIX + SSL_ENDPOINT_IDENTIFICATION_ALGORITHM_CONFIG)
        return algorithm is not None and algorithm == ""

    def topic_to_index_map(self) -> dict[str, str]:
        """Parse the deprecated ``topic.index.map`` list of ``topic:index`` pairs.

        Raises:
            ConfigValidationError: If an entry is not a single ``topic:index`` pair
        """
        mapping: dict[str, str] = {}
        for entry in self.topic_index_map:
            topic, sep, index = entry.partition(":")
            if not sep or not topic or not index or ":" in index:
                raise ConfigValidationError(
                    TOPIC_INDEX_MAP_CONFIG,
                    f"Invalid value {entry!r} for configuration {TOPIC_INDEX_MAP_CONFIG}: expected a topic:index pair",
                    entry,
                )
            mapping[topic] = index
        return mapping

    # === Typed accessors for collaborators ===

    @property
    def connection_urls(self) -> tuple[str, ...]:
        return self._snapshot[CONNECTION_URL_CONFIG]

    @property
    def connection_username(self) -> str | None:
        return self._snapshot[CONNECTION_USERNAME_CONFIG]

    @property
    def connection_password(self) -> SecretStr | None:
        return self._snapshot[CONNECTION_PASSWORD_CONFIG]

    @property
    def batch_size(self) -> int:
        return self._snapshot[BATCH_SIZE_CONFIG]

    @property
    def max_in_flight_requests(self) -> int:
        return self._snapshot[MAX_IN_FLIGHT_REQUESTS_CONFIG]

    @property
    def max_buffered_records(self) -> int:
        return self._snapshot[MAX_BUFFERED_RECORDS_CONFIG]

    @property
    def linger_ms(self) -> int:
        return self._snapshot[LINGER_MS_CONFIG]

    @property
    def flush_timeout_ms(self) -> int:
        return self._snapshot[FLUSH_TIMEOUT_MS_CONFIG]

    @property
    def max_retries(self) -> int:
        return self._snapshot[MAX_RETRIES_CONFIG]

    @property
    def retry_backoff_ms(self) -> int:
        return self._snapshot[RETRY_BACKOFF_MS_CONFIG]

    @property
    def connection_compression(self) -> bool:
        return self._snapshot[CONNECTION_COMPRESSION_CONFIG]

    @property
    def max_connection_idle_time_ms(self) -> int:
        return self._snapshot[MAX_CONNECTION_IDLE_TIME_MS_CONFIG]

    @property
    def connection_timeout_ms(self) -> int:
        return self._snapshot[CONNECTION_TIMEOUT_MS_CONFIG]

    @property
    def read_timeout_ms(self) -> int:
        return self._snapshot[READ_TIMEOUT_MS_CONFIG]

    @property
    def auto_create_indices_at_start(self) -> bool:
        return self._snapshot[AUTO_CREATE_INDICES_AT_START_CONFIG]

    @property
    def retry_on_conflict(self) -> int:
        return self._snapshot[RETRY_ON_CONFLICT_CONFIG]

    @property
    def type_name(self) -> str:
        return self._snapshot[TYPE_NAME_CONFIG]

    @property
    def key_ignore(self) -> bool:
        return self._snapshot[KEY_IGNORE_CONFIG]

    @property
    def schema_ignore(self) -> bool:
        return self._snapshot[SCHEMA_IGNORE_CONFIG]

    @property
    def compact_map_entries(self) -> bool:
        return self._snapshot[COMPACT_MAP_ENTRIES_CONFIG]

    @property
    def topic_index_map(self) -> tuple[str, ...]:
        return self._snapshot[TOPIC_INDEX_MAP_CONFIG]

    @property
    def topic_key_ignore(self) -> tuple[str, ...]:
        return self._snapshot[TOPIC_KEY_IGNORE_CONFIG]

    @property
    def topic_schema_ignore(self) -> tuple[str, ...]:
        return self._snapshot[TOPIC_SCHEMA_IGNORE_CONFIG]

    @property
    def drop_invalid_message(self) -> bool:
        return self._snapshot[DROP_INVALID_MESSAGE_CONFIG]

    @property
    def behavior_on_null_values(self) -> BehaviorOnNullValues:
        return BehaviorOnNullValues(self._snapshot[BEHAVIOR_ON_NULL_VALUES_CONFIG])

    @property
    def behavior_on_malformed_documents(self) -> BehaviorOnMalformedDocs:
        return BehaviorOnMalformedDocs(self._snapshot[BEHAVIOR_ON_MALFORMED_DOCS_CONFIG])

    @property
    def write_method(self) -> WriteMethod:
        return WriteMethod(self._snapshot[WRITE_METHOD_CONFIG])

    @property
    def document_version_type(self) -> DocumentVersionType:
        return DocumentVersionType(self._snapshot[DOCUMENT_VERSION_TYPE_CONFIG])

    @property
    def security_protocol(self) -> SecurityProtocol:
        return SecurityProtocol(self._snapshot[SECURITY_PROTOCOL_CONFIG])

    @property
    def proxy_host(self) -> str:
        return self._snapshot[PROXY_HOST_CONFIG]

    @property
    def proxy_port(self) -> int:
        return self._snapshot[PROXY_PORT_CONFIG]

    @property
    def proxy_username(self) -> str:
        return self._snapshot[PROXY_USERNAME_CONFIG]

    @property
    def proxy_password(self) -> SecretStr | None:
        return self._snapshot[PROXY_PASSWORD_CONFIG]
