# tests/property/conftest.py
"""Shared Hypothesis strategies for property-based tests.

Strategies produce raw connector input the way the hosting framework
hands it over: a flat mapping of dotted keys to strings.

Usage:
    from tests.property.conftest import raw_props

    @given(raw=raw_props())
    def test_resolution_is_deterministic(raw: dict[str, str]) -> None:
        ...
"""

# =============================================================================
# Hypothesis Settings
# =============================================================================
#
# For standardized @settings decorators, import from tests.property.settings:
#   from tests.property.settings import STANDARD_SETTINGS, DETERMINISM_SETTINGS
#
# Tiers: DETERMINISM (500), STANDARD (100), QUICK (20)
# =============================================================================

from __future__ import annotations

import string

from hypothesis import strategies as st

from elastisink.core.coercion import INT_MAX, INT_MIN

# Characters that survive list splitting and trimming unchanged
LIST_ELEMENT_ALPHABET = string.ascii_letters + string.digits + ":/.-_"

list_elements = st.lists(
    st.text(alphabet=LIST_ELEMENT_ALPHABET, min_size=1, max_size=20),
    min_size=1,
    max_size=8,
)

int_strings = st.integers(min_value=INT_MIN, max_value=INT_MAX).map(str)

non_negative_int_strings = st.integers(min_value=0, max_value=INT_MAX).map(str)

boolean_strings = st.sampled_from(["true", "false", "TRUE", "False", " true "])

urls = st.builds(
    "http://{}:{}".format,
    st.text(alphabet=string.ascii_lowercase, min_size=1, max_size=10),
    st.integers(min_value=1, max_value=65535),
)

# Optional connector keys and a strategy of valid raw values for each.
# Proxy credentials are left out: they are only valid in combination.
OPTIONAL_VALUES: dict[str, st.SearchStrategy[str]] = {
    "connection.username": st.text(alphabet=string.ascii_letters, max_size=10),
    "connection.password": st.text(max_size=20),
    "batch.size": non_negative_int_strings,
    "max.in.flight.requests": non_negative_int_strings,
    "linger.ms": st.integers(min_value=0, max_value=2**40).map(str),
    "retry.on.conflict": int_strings,
    "connection.compression": boolean_strings,
    "key.ignore": boolean_strings,
    "topic.key.ignore": list_elements.map(",".join),
    "write.method": st.sampled_from(["insert", "upsert"]),
    "behavior.on.null.values": st.sampled_from(["ignore", "delete", "fail"]),
    "elastic.security.protocol": st.sampled_from(["PLAINTEXT", "SSL"]),
    "proxy.port": st.integers(min_value=1, max_value=65535).map(str),
    "elastic.https.ssl.endpoint.identification.algorithm": st.sampled_from(["", "https"]),
    "elastic.https.ssl.truststore.password": st.text(max_size=20),
}


@st.composite
def raw_props(draw: st.DrawFn) -> dict[str, str]:
    """Valid raw input: required keys plus a random subset of optional keys."""
    props = {
        "connection.url": ",".join(draw(st.lists(urls, min_size=1, max_size=3))),
        "type.name": draw(st.text(alphabet=string.ascii_letters + "_", min_size=1, max_size=10)),
    }
    chosen = draw(st.lists(st.sampled_from(sorted(OPTIONAL_VALUES)), unique=True))
    for key in chosen:
        props[key] = draw(OPTIONAL_VALUES[key])
    return props
