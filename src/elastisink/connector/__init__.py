# src/elastisink/connector/__init__.py
"""Elasticsearch sink connector vocabulary and validated configuration."""

from elastisink.connector.definitions import CONFIG, base_config_def
from elastisink.connector.sink_config import ElasticsearchSinkConfig
from elastisink.connector.ssl import SSL_CONFIG, add_client_ssl_support
from elastisink.connector.validation import validate, validate_proxy_configs

__all__ = [
    "CONFIG",
    "SSL_CONFIG",
    "ElasticsearchSinkConfig",
    "add_client_ssl_support",
    "base_config_def",
    "validate",
    "validate_proxy_configs",
]
