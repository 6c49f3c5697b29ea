# src/elastisink/connector/ssl.py
"""Generic TLS client vocabulary.

Defined once, unprefixed, and embedded into the connector registry under
``elastic.https.``. The connection layer receives these values through
ElasticsearchSinkConfig.ssl_configs(), resolved against SSL_CONFIG itself.
"""

from typing import Final

from elastisink.contracts.enums import ConfigType, Importance
from elastisink.core.registry import ConfigRegistry, RegistryBuilder

SSL_PROTOCOL_CONFIG: Final = "ssl.protocol"
SSL_PROVIDER_CONFIG: Final = "ssl.provider"
SSL_CIPHER_SUITES_CONFIG: Final = "ssl.cipher.suites"
SSL_ENABLED_PROTOCOLS_CONFIG: Final = "ssl.enabled.protocols"
SSL_KEYSTORE_TYPE_CONFIG: Final = "ssl.keystore.type"
SSL_KEYSTORE_LOCATION_CONFIG: Final = "ssl.keystore.location"
SSL_KEYSTORE_PASSWORD_CONFIG: Final = "ssl.keystore.password"
SSL_KEY_PASSWORD_CONFIG: Final = "ssl.key.password"
SSL_TRUSTSTORE_TYPE_CONFIG: Final = "ssl.truststore.type"
SSL_TRUSTSTORE_LOCATION_CONFIG: Final = "ssl.truststore.location"
SSL_TRUSTSTORE_PASSWORD_CONFIG: Final = "ssl.truststore.password"
SSL_KEYMANAGER_ALGORITHM_CONFIG: Final = "ssl.keymanager.algorithm"
SSL_TRUSTMANAGER_ALGORITHM_CONFIG: Final = "ssl.trustmanager.algorithm"
SSL_ENDPOINT_IDENTIFICATION_ALGORITHM_CONFIG: Final = "ssl.endpoint.identification.algorithm"
SSL_SECURE_RANDOM_IMPLEMENTATION_CONFIG: Final = "ssl.secure.random.implementation"

DEFAULT_SSL_PROTOCOL: Final = "TLS"
DEFAULT_SSL_ENABLED_PROTOCOLS: Final = "TLSv1.2,TLSv1.1,TLSv1"
DEFAULT_SSL_STORE_TYPE: Final = "JKS"
DEFAULT_SSL_KEYMANAGER_ALGORITHM: Final = "SunX509"
DEFAULT_SSL_TRUSTMANAGER_ALGORITHM: Final = "PKIX"
DEFAULT_SSL_ENDPOINT_IDENTIFICATION_ALGORITHM: Final = "https"


def add_client_ssl_support(builder: RegistryBuilder) -> RegistryBuilder:
    """Declare the TLS client fields on ``builder``."""
    return (
        builder.define(
            SSL_PROTOCOL_CONFIG,
            ConfigType.STRING,
            DEFAULT_SSL_PROTOCOL,
            importance=Importance.MEDIUM,
            documentation="The TLS protocol used to create the SSL context.",
        )
        .define(
            SSL_PROVIDER_CONFIG,
            ConfigType.STRING,
            None,
            importance=Importance.MEDIUM,
            documentation="The name of the security provider used for SSL connections. Default is the platform default.",
        )
        .define(
            SSL_CIPHER_SUITES_CONFIG,
            ConfigType.LIST,
            None,
            importance=Importance.LOW,
            documentation="A list of cipher suites. By default all the available cipher suites are supported.",
        )
        .define(
            SSL_ENABLED_PROTOCOLS_CONFIG,
            ConfigType.LIST,
            DEFAULT_SSL_ENABLED_PROTOCOLS,
            importance=Importance.MEDIUM,
            documentation="The list of protocols enabled for SSL connections.",
        )
        .define(
            SSL_KEYSTORE_TYPE_CONFIG,
            ConfigType.STRING,
            DEFAULT_SSL_STORE_TYPE,
            importance=Importance.MEDIUM,
            documentation="The file format of the key store file.",
        )
        .define(
            SSL_KEYSTORE_LOCATION_CONFIG,
            ConfigType.STRING,
            None,
            importance=Importance.HIGH,
            documentation="The location of the key store file. Only needed for client authentication.",
        )
        .define(
            SSL_KEYSTORE_PASSWORD_CONFIG,
            ConfigType.PASSWORD,
            None,
            importance=Importance.HIGH,
            documentation="The store password for the key store file. Only needed if the key store location is set.",
        )
        .define(
            SSL_KEY_PASSWORD_CONFIG,
            ConfigType.PASSWORD,
            None,
            importance=Importance.HIGH,
            documentation="The password of the private key in the key store file.",
        )
        .define(
            SSL_TRUSTSTORE_TYPE_CONFIG,
            ConfigType.STRING,
            DEFAULT_SSL_STORE_TYPE,
            importance=Importance.MEDIUM,
            documentation="The file format of the trust store file.",
        )
        .define(
            SSL_TRUSTSTORE_LOCATION_CONFIG,
            ConfigType.STRING,
            None,
            importance=Importance.HIGH,
            documentation="The location of the trust store file.",
        )
        .define(
            SSL_TRUSTSTORE_PASSWORD_CONFIG,
            ConfigType.PASSWORD,
            None,
            importance=Importance.HIGH,
            documentation="The password for the trust store file. Without it, integrity checking of the trust store is skipped.",
        )
        .define(
            SSL_KEYMANAGER_ALGORITHM_CONFIG,
            ConfigType.STRING,
            DEFAULT_SSL_KEYMANAGER_ALGORITHM,
            importance=Importance.LOW,
            documentation="The algorithm used by the key manager factory for SSL connections.",
        )
        .define(
            SSL_TRUSTMANAGER_ALGORITHM_CONFIG,
            ConfigType.STRING,
            DEFAULT_SSL_TRUSTMANAGER_ALGORITHM,
            importance=Importance.LOW,
            documentation="The algorithm used by the trust manager factory for SSL connections.",
        )
        .define(
            SSL_ENDPOINT_IDENTIFICATION_ALGORITHM_CONFIG,
            ConfigType.STRING,
            DEFAULT_SSL_ENDPOINT_IDENTIFICATION_ALGORITHM,
            importance=Importance.LOW,
            documentation=(
                "The endpoint identification algorithm used to validate the server hostname against "
                "the server certificate. Set to an empty string to disable hostname verification."
            ),
        )
        .define(
            SSL_SECURE_RANDOM_IMPLEMENTATION_CONFIG,
            ConfigType.STRING,
            None,
            importance=Importance.LOW,
            documentation="The SecureRandom PRNG implementation to use for SSL cryptography operations.",
        )
    )


def _build_ssl_config() -> ConfigRegistry:
    return add_client_ssl_support(RegistryBuilder()).build()


SSL_CONFIG: Final[ConfigRegistry] = _build_ssl_config()
