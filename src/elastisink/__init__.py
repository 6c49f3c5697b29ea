"""
Elastisink: typed, validated configuration for an Elasticsearch sink connector.

Declares every tunable connector setting, resolves raw key/value input into
typed values, and rejects inconsistent configuration before any connection
or batch write is attempted.
"""

__version__ = "0.1.0"
