# src/elastisink/connector/definitions.py
"""Declared settings of the Elasticsearch sink connector.

CONFIG is built exactly once at import, by four independent builder
functions appending to the same RegistryBuilder:

    add_connector_configs   - connection, batching, retry, timeouts
    add_conversion_configs  - record-to-document behavior
    add_proxy_configs       - optional HTTP proxy
    add_security_configs    - protocol + embedded TLS vocabulary

Key constants are the contract with the collaborators that consume the
resolved configuration (wire client, batching engine, converter).
"""

import itertools
from typing import Final

from elastisink.connector.ssl import SSL_CONFIG
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
from elastisink.core.registry import ConfigRegistry, RegistryBuilder
from elastisink.core.validators import ClosedSet, NonEmptyList, Range

CONNECTOR_GROUP: Final = "Connector"
DATA_CONVERSION_GROUP: Final = "Data Conversion"
PROXY_GROUP: Final = "Proxy"
SECURITY_GROUP: Final = "Security"

# Connector
CONNECTION_URL_CONFIG: Final = "connection.url"
CONNECTION_USERNAME_CONFIG: Final = "connection.username"
CONNECTION_PASSWORD_CONFIG: Final = "connection.password"
BATCH_SIZE_CONFIG: Final = "batch.size"
MAX_IN_FLIGHT_REQUESTS_CONFIG: Final = "max.in.flight.requests"
MAX_BUFFERED_RECORDS_CONFIG: Final = "max.buffered.records"
LINGER_MS_CONFIG: Final = "linger.ms"
FLUSH_TIMEOUT_MS_CONFIG: Final = "flush.timeout.ms"
MAX_RETRIES_CONFIG: Final = "max.retries"
RETRY_BACKOFF_MS_CONFIG: Final = "retry.backoff.ms"
CONNECTION_COMPRESSION_CONFIG: Final = "connection.compression"
MAX_CONNECTION_IDLE_TIME_MS_CONFIG: Final = "max.connection.idle.time.ms"
CONNECTION_TIMEOUT_MS_CONFIG: Final = "connection.timeout.ms"
READ_TIMEOUT_MS_CONFIG: Final = "read.timeout.ms"
AUTO_CREATE_INDICES_AT_START_CONFIG: Final = "auto.create.indices.at.start"
RETRY_ON_CONFLICT_CONFIG: Final = "retry.on.conflict"

# Data conversion
TYPE_NAME_CONFIG: Final = "type.name"
KEY_IGNORE_CONFIG: Final = "key.ignore"
SCHEMA_IGNORE_CONFIG: Final = "schema.ignore"
COMPACT_MAP_ENTRIES_CONFIG: Final = "compact.map.entries"
TOPIC_INDEX_MAP_CONFIG: Final = "topic.index.map"  # deprecated
TOPIC_KEY_IGNORE_CONFIG: Final = "topic.key.ignore"
TOPIC_SCHEMA_IGNORE_CONFIG: Final = "topic.schema.ignore"
DROP_INVALID_MESSAGE_CONFIG: Final = "drop.invalid.message"
BEHAVIOR_ON_NULL_VALUES_CONFIG: Final = "behavior.on.null.values"
BEHAVIOR_ON_MALFORMED_DOCS_CONFIG: Final = "behavior.on.malformed.documents"
WRITE_METHOD_CONFIG: Final = "write.method"
DOCUMENT_VERSION_TYPE_CONFIG: Final = "elastic.document.version.type"

# Proxy
PROXY_HOST_CONFIG: Final = "proxy.host"
PROXY_PORT_CONFIG: Final = "proxy.port"
PROXY_USERNAME_CONFIG: Final = "proxy.username"
PROXY_PASSWORD_CONFIG: Final = "proxy.password"

# Security
SECURITY_PROTOCOL_CONFIG: Final = "elastic.security.protocol"
CONNECTION_SSL_CONFIG_PREFIX: Final = "elastic.https."

# Closed vocabularies, one generic validator each
BEHAVIOR_ON_NULL_VALUES_VALIDATOR: Final = ClosedSet.of(BehaviorOnNullValues, BehaviorOnNullValues.IGNORE)
BEHAVIOR_ON_MALFORMED_DOCS_VALIDATOR: Final = ClosedSet.of(BehaviorOnMalformedDocs, BehaviorOnMalformedDocs.FAIL)
WRITE_METHOD_VALIDATOR: Final = ClosedSet.of(WriteMethod, WriteMethod.INSERT)
SECURITY_PROTOCOL_VALIDATOR: Final = ClosedSet.of(SecurityProtocol, SecurityProtocol.PLAINTEXT)
DOCUMENT_VERSION_TYPE_VALIDATOR: Final = ClosedSet.of(DocumentVersionType, DocumentVersionType.LEGACY)

PROXY_PORT_RANGE: Final = Range.between(1, 65535)

CONNECTION_URL_DOC: Final = (
    "The comma-separated list of one or more Elasticsearch URLs, such as ``http://eshost1:9200,"
    "http://eshost2:9200`` or ``https://eshost3:9200``. HTTPS is used for all connections "
    "if any of the URLs starts with ``https:``. A URL without a protocol is treated as ``http``."
)
CONNECTION_USERNAME_DOC: Final = (
    "The username used to authenticate with Elasticsearch. The default is null, and "
    "authentication is only performed if both the username and password are non-null."
)
CONNECTION_PASSWORD_DOC: Final = (
    "The password used to authenticate with Elasticsearch. The default is null, and "
    "authentication is only performed if both the username and password are non-null."
)
LINGER_MS_DOC: Final = (
    "Linger time in milliseconds for batching.\n"
    "Records that arrive in between request transmissions are batched into a single bulk "
    f"indexing request, based on the ``{BATCH_SIZE_CONFIG}`` configuration. Normally this only "
    "occurs under load when records arrive faster than they can be sent out. When a pending "
    "batch is not full, the task waits up to the given delay to allow other records to be "
    "added, so that they can be batched into a single request even under light load."
)
FLUSH_TIMEOUT_MS_DOC: Final = (
    "The timeout in milliseconds to use for periodic flushing, and when waiting for buffer "
    "space to be made available by completed requests as records are added. If this timeout "
    "is exceeded the task will fail."
)
RETRY_BACKOFF_MS_DOC: Final = (
    "How long to wait in milliseconds before attempting the first retry of a failed indexing "
    "request. Upon a failure, the connector may wait up to twice as long as the previous "
    "wait, up to the maximum number of retries. This avoids retrying in a tight loop under "
    "failure scenarios."
)
CONNECTION_COMPRESSION_DOC: Final = (
    "Whether to use GZip compression on the HTTP connection to Elasticsearch. The "
    "``http.compression`` setting must also be enabled on the Elasticsearch nodes or the "
    "load-balancer for this to take effect."
)
KEY_IGNORE_DOC: Final = (
    "Whether to ignore the record key for the purpose of forming the Elasticsearch document ID. "
    "When this is set to ``true``, document IDs are generated as the record's "
    "``topic+partition+offset``.\n"
    f"This is a global config that applies to all topics, use ``{TOPIC_KEY_IGNORE_CONFIG}`` to "
    "override as ``true`` for specific topics."
)
SCHEMA_IGNORE_DOC: Final = (
    "Whether to ignore schemas during indexing. When this is set to ``true``, the record schema "
    "is ignored for the purpose of registering an Elasticsearch mapping, and Elasticsearch "
    "infers the mapping from the data (dynamic mapping needs to be enabled).\n"
    f"This is a global config that applies to all topics. Use ``{TOPIC_SCHEMA_IGNORE_CONFIG}`` "
    "to override as ``true`` for specific topics."
)
COMPACT_MAP_ENTRIES_DOC: Final = (
    "Defines how map entries with string keys within record values are written to JSON. "
    'When ``true``, entries are written compactly as ``"entryKey": "entryValue"``. '
    'Otherwise they are written as a nested document ``{"key": "entryKey", "value": "entryValue"}``. '
    "Map entries with non-string keys are always written as nested documents."
)
TOPIC_INDEX_MAP_DOC: Final = (
    "This option is deprecated and may be removed. Prefer routing transforms to map topic "
    "names to index names.\n"
    "A map from topic name to destination Elasticsearch index, as a list of ``topic:index`` pairs."
)
WRITE_METHOD_DOC: Final = (
    f"Method used for writing data to Elasticsearch, one of {WriteMethod.INSERT} or {WriteMethod.UPSERT}. "
    f"With {WriteMethod.INSERT} (the default) the connector builds a document from the record value "
    "and inserts it, replacing any existing document with the same ID. "
    f"With {WriteMethod.UPSERT} a new document is created if none exists for the ID, otherwise only "
    f"the fields present in the record value are added or replaced. {WriteMethod.UPSERT} may need "
    f"more time and resources, so consider increasing ``{FLUSH_TIMEOUT_MS_CONFIG}`` and "
    f"``{READ_TIMEOUT_MS_CONFIG}`` and decreasing ``{BATCH_SIZE_CONFIG}``."
)
SECURITY_PROTOCOL_DOC: Final = (
    "The security protocol to use when connecting to Elasticsearch. Values can be "
    f"``{SecurityProtocol.PLAINTEXT}`` or ``{SecurityProtocol.SSL}``. With "
    f"``{SecurityProtocol.PLAINTEXT}`` all configs prefixed by ``{CONNECTION_SSL_CONFIG_PREFIX}`` are ignored."
)


def add_connector_configs(builder: RegistryBuilder) -> None:
    order = itertools.count(1)
    (
        builder.define(
            CONNECTION_URL_CONFIG,
            ConfigType.LIST,
            validator=NonEmptyList(),
            importance=Importance.HIGH,
            documentation=CONNECTION_URL_DOC,
            group=CONNECTOR_GROUP,
            order_in_group=next(order),
            width=Width.LONG,
            display_name="Connection URLs",
        )
        .define(
            CONNECTION_USERNAME_CONFIG,
            ConfigType.STRING,
            None,
            importance=Importance.MEDIUM,
            documentation=CONNECTION_USERNAME_DOC,
            group=CONNECTOR_GROUP,
            order_in_group=next(order),
            width=Width.SHORT,
            display_name="Connection Username",
        )
        .define(
            CONNECTION_PASSWORD_CONFIG,
            ConfigType.PASSWORD,
            None,
            importance=Importance.MEDIUM,
            documentation=CONNECTION_PASSWORD_DOC,
            group=CONNECTOR_GROUP,
            order_in_group=next(order),
            width=Width.SHORT,
            display_name="Connection Password",
        )
        .define(
            BATCH_SIZE_CONFIG,
            ConfigType.INT,
            2000,
            importance=Importance.MEDIUM,
            documentation="The number of records to process as a batch when writing to Elasticsearch.",
            group=CONNECTOR_GROUP,
            order_in_group=next(order),
            width=Width.SHORT,
            display_name="Batch Size",
        )
        .define(
            MAX_IN_FLIGHT_REQUESTS_CONFIG,
            ConfigType.INT,
            5,
            importance=Importance.MEDIUM,
            documentation=(
                "The maximum number of indexing requests that can be in-flight to Elasticsearch "
                "before blocking further requests."
            ),
            group=CONNECTOR_GROUP,
            order_in_group=next(order),
            width=Width.SHORT,
            display_name="Max In-flight Requests",
        )
        .define(
            MAX_BUFFERED_RECORDS_CONFIG,
            ConfigType.INT,
            20000,
            importance=Importance.LOW,
            documentation=(
                "The maximum number of records each task will buffer before blocking acceptance of "
                "more records. This config can be used to limit the memory usage for each task."
            ),
            group=CONNECTOR_GROUP,
            order_in_group=next(order),
            width=Width.SHORT,
            display_name="Max Buffered Records",
        )
        .define(
            LINGER_MS_CONFIG,
            ConfigType.LONG,
            1,
            importance=Importance.LOW,
            documentation=LINGER_MS_DOC,
            group=CONNECTOR_GROUP,
            order_in_group=next(order),
            width=Width.SHORT,
            display_name="Linger (ms)",
        )
        .define(
            FLUSH_TIMEOUT_MS_CONFIG,
            ConfigType.LONG,
            10000,
            importance=Importance.LOW,
            documentation=FLUSH_TIMEOUT_MS_DOC,
            group=CONNECTOR_GROUP,
            order_in_group=next(order),
            width=Width.SHORT,
            display_name="Flush Timeout (ms)",
        )
        .define(
            MAX_RETRIES_CONFIG,
            ConfigType.INT,
            5,
            importance=Importance.LOW,
            documentation=(
                "The maximum number of retries that are allowed for failed indexing requests. "
                "If the retry attempts are exhausted the task will fail."
            ),
            group=CONNECTOR_GROUP,
            order_in_group=next(order),
            width=Width.SHORT,
            display_name="Max Retries",
        )
        .define(
            RETRY_BACKOFF_MS_CONFIG,
            ConfigType.LONG,
            100,
            importance=Importance.LOW,
            documentation=RETRY_BACKOFF_MS_DOC,
            group=CONNECTOR_GROUP,
            order_in_group=next(order),
            width=Width.SHORT,
            display_name="Retry Backoff (ms)",
        )
        .define(
            CONNECTION_COMPRESSION_CONFIG,
            ConfigType.BOOLEAN,
            False,
            importance=Importance.LOW,
            documentation=CONNECTION_COMPRESSION_DOC,
            group=CONNECTOR_GROUP,
            order_in_group=next(order),
            width=Width.SHORT,
            display_name="Compression",
        )
        .define(
            MAX_CONNECTION_IDLE_TIME_MS_CONFIG,
            ConfigType.INT,
            60000,
            importance=Importance.LOW,
            documentation="How long to wait in milliseconds before dropping an idle connection to prevent a read timeout.",
            group=CONNECTOR_GROUP,
            order_in_group=next(order),
            width=Width.SHORT,
            display_name="Max Connection Idle Time",
        )
        .define(
            CONNECTION_TIMEOUT_MS_CONFIG,
            ConfigType.INT,
            1000,
            importance=Importance.LOW,
            documentation=(
                "How long to wait in milliseconds when establishing a connection to the Elasticsearch "
                "server. The task fails if the client fails to connect to the server in this interval, "
                "and will need to be restarted."
            ),
            group=CONNECTOR_GROUP,
            order_in_group=next(order),
            width=Width.SHORT,
            display_name="Connection Timeout",
        )
        .define(
            READ_TIMEOUT_MS_CONFIG,
            ConfigType.INT,
            3000,
            importance=Importance.LOW,
            documentation=(
                "How long to wait in milliseconds for the Elasticsearch server to send a response. "
                "The task fails if any read operation times out, and will need to be restarted to "
                "resume further operations."
            ),
            group=CONNECTOR_GROUP,
            order_in_group=next(order),
            width=Width.SHORT,
            display_name="Read Timeout",
        )
        .define(
            AUTO_CREATE_INDICES_AT_START_CONFIG,
            ConfigType.BOOLEAN,
            True,
            importance=Importance.LOW,
            documentation=(
                "Auto create the Elasticsearch indices at startup. This is useful when the indices "
                "are a direct mapping of the topics."
            ),
            group=CONNECTOR_GROUP,
            order_in_group=next(order),
            width=Width.SHORT,
            display_name="Create indices at startup",
        )
        .define(
            RETRY_ON_CONFLICT_CONFIG,
            ConfigType.INT,
            0,
            importance=Importance.LOW,
            documentation=(
                "How many times Elasticsearch should retry the operation when a version conflict "
                f"occurs while using the {WriteMethod.UPSERT} write method."
            ),
            group=CONNECTOR_GROUP,
            order_in_group=next(order),
            width=Width.SHORT,
            display_name="Retry on conflict",
        )
    )


def add_conversion_configs(builder: RegistryBuilder) -> None:
    order = itertools.count(1)
    (
        builder.define(
            TYPE_NAME_CONFIG,
            ConfigType.STRING,
            importance=Importance.HIGH,
            documentation="The Elasticsearch type name to use when indexing.",
            group=DATA_CONVERSION_GROUP,
            order_in_group=next(order),
            width=Width.SHORT,
            display_name="Type Name",
        )
        .define(
            KEY_IGNORE_CONFIG,
            ConfigType.BOOLEAN,
            False,
            importance=Importance.HIGH,
            documentation=KEY_IGNORE_DOC,
            group=DATA_CONVERSION_GROUP,
            order_in_group=next(order),
            width=Width.SHORT,
            display_name="Ignore Key mode",
        )
        .define(
            SCHEMA_IGNORE_CONFIG,
            ConfigType.BOOLEAN,
            False,
            importance=Importance.LOW,
            documentation=SCHEMA_IGNORE_DOC,
            group=DATA_CONVERSION_GROUP,
            order_in_group=next(order),
            width=Width.SHORT,
            display_name="Ignore Schema mode",
        )
        .define(
            COMPACT_MAP_ENTRIES_CONFIG,
            ConfigType.BOOLEAN,
            True,
            importance=Importance.LOW,
            documentation=COMPACT_MAP_ENTRIES_DOC,
            group=DATA_CONVERSION_GROUP,
            order_in_group=next(order),
            width=Width.SHORT,
            display_name="Compact Map Entries",
        )
        .define(
            TOPIC_INDEX_MAP_CONFIG,
            ConfigType.LIST,
            "",
            importance=Importance.LOW,
            documentation=TOPIC_INDEX_MAP_DOC,
            group=DATA_CONVERSION_GROUP,
            order_in_group=next(order),
            width=Width.LONG,
            display_name="Topic to Index Map",
        )
        .define(
            TOPIC_KEY_IGNORE_CONFIG,
            ConfigType.LIST,
            "",
            importance=Importance.LOW,
            documentation=f"List of topics for which ``{KEY_IGNORE_CONFIG}`` should be ``true``.",
            group=DATA_CONVERSION_GROUP,
            order_in_group=next(order),
            width=Width.LONG,
            display_name="Topics for 'Ignore Key' mode",
        )
        .define(
            TOPIC_SCHEMA_IGNORE_CONFIG,
            ConfigType.LIST,
            "",
            importance=Importance.LOW,
            documentation=f"List of topics for which ``{SCHEMA_IGNORE_CONFIG}`` should be ``true``.",
            group=DATA_CONVERSION_GROUP,
            order_in_group=next(order),
            width=Width.LONG,
            display_name="Topics for 'Ignore Schema' mode",
        )
        .define(
            DROP_INVALID_MESSAGE_CONFIG,
            ConfigType.BOOLEAN,
            False,
            importance=Importance.LOW,
            documentation="Whether to drop a message when it cannot be converted to an output document.",
            group=DATA_CONVERSION_GROUP,
            order_in_group=next(order),
            width=Width.LONG,
            display_name="Drop invalid messages",
        )
        .define(
            BEHAVIOR_ON_NULL_VALUES_CONFIG,
            ConfigType.STRING,
            BEHAVIOR_ON_NULL_VALUES_VALIDATOR.default_value(),
            BEHAVIOR_ON_NULL_VALUES_VALIDATOR,
            importance=Importance.LOW,
            documentation=(
                "How to handle records with a non-null key and a null value (tombstone records). "
                f"Valid options are {', '.join(BEHAVIOR_ON_NULL_VALUES_VALIDATOR.values())}."
            ),
            group=DATA_CONVERSION_GROUP,
            order_in_group=next(order),
            width=Width.SHORT,
            display_name="Behavior for null-valued records",
        )
        .define(
            BEHAVIOR_ON_MALFORMED_DOCS_CONFIG,
            ConfigType.STRING,
            BEHAVIOR_ON_MALFORMED_DOCS_VALIDATOR.default_value(),
            BEHAVIOR_ON_MALFORMED_DOCS_VALIDATOR,
            importance=Importance.LOW,
            documentation=(
                "How to handle records that Elasticsearch rejects due to some malformation of the "
                "document itself, such as an index mapping conflict, a field name containing illegal "
                "characters, or a record with a missing id. Valid options are "
                f"{', '.join(BEHAVIOR_ON_MALFORMED_DOCS_VALIDATOR.values())}."
            ),
            group=DATA_CONVERSION_GROUP,
            order_in_group=next(order),
            width=Width.SHORT,
            display_name="Behavior on malformed documents",
        )
        .define(
            WRITE_METHOD_CONFIG,
            ConfigType.STRING,
            WRITE_METHOD_VALIDATOR.default_value(),
            WRITE_METHOD_VALIDATOR,
            importance=Importance.LOW,
            documentation=WRITE_METHOD_DOC,
            group=DATA_CONVERSION_GROUP,
            order_in_group=next(order),
            width=Width.SHORT,
            display_name="Write method",
        )
        .define(
            DOCUMENT_VERSION_TYPE_CONFIG,
            ConfigType.STRING,
            DOCUMENT_VERSION_TYPE_VALIDATOR.default_value(),
            DOCUMENT_VERSION_TYPE_VALIDATOR,
            importance=Importance.LOW,
            documentation=(
                "The version type used by the connector. Values can be "
                f"{', '.join(DOCUMENT_VERSION_TYPE_VALIDATOR.values())}."
            ),
            group=DATA_CONVERSION_GROUP,
            order_in_group=next(order),
            width=Width.SHORT,
            display_name="Document version",
        )
    )


def add_proxy_configs(builder: RegistryBuilder) -> None:
    order = itertools.count(1)
    (
        builder.define(
            PROXY_HOST_CONFIG,
            ConfigType.STRING,
            "",
            importance=Importance.LOW,
            documentation="The address of the proxy host to connect through. Supports the basic authentication scheme only.",
            group=PROXY_GROUP,
            order_in_group=next(order),
            width=Width.LONG,
            display_name="Proxy Host",
        )
        .define(
            PROXY_PORT_CONFIG,
            ConfigType.INT,
            8080,
            PROXY_PORT_RANGE,
            importance=Importance.LOW,
            documentation="The port of the proxy host to connect through.",
            group=PROXY_GROUP,
            order_in_group=next(order),
            width=Width.LONG,
            display_name="Proxy Port",
        )
        .define(
            PROXY_USERNAME_CONFIG,
            ConfigType.STRING,
            "",
            importance=Importance.LOW,
            documentation="The username for the proxy host.",
            group=PROXY_GROUP,
            order_in_group=next(order),
            width=Width.LONG,
            display_name="Proxy Username",
        )
        .define(
            PROXY_PASSWORD_CONFIG,
            ConfigType.PASSWORD,
            None,
            importance=Importance.LOW,
            documentation="The password for the proxy host.",
            group=PROXY_GROUP,
            order_in_group=next(order),
            width=Width.LONG,
            display_name="Proxy Password",
        )
    )


def add_security_configs(builder: RegistryBuilder) -> None:
    builder.define(
        SECURITY_PROTOCOL_CONFIG,
        ConfigType.STRING,
        SECURITY_PROTOCOL_VALIDATOR.default_value(),
        SECURITY_PROTOCOL_VALIDATOR,
        importance=Importance.MEDIUM,
        documentation=SECURITY_PROTOCOL_DOC,
        group=SECURITY_GROUP,
        order_in_group=1,
        width=Width.SHORT,
        display_name="Security protocol",
    )
    builder.embed(CONNECTION_SSL_CONFIG_PREFIX, SECURITY_GROUP, 2, SSL_CONFIG)


def base_config_def() -> ConfigRegistry:
    """Build a fresh connector registry. Normally use the CONFIG constant."""
    builder = RegistryBuilder()
    add_connector_configs(builder)
    add_conversion_configs(builder)
    add_proxy_configs(builder)
    add_security_configs(builder)
    return builder.build()


CONFIG: Final[ConfigRegistry] = base_config_def()
