# tests/conftest.py
"""Shared test fixtures and helpers.

Fixtures:
- minimal_props: the smallest raw input that resolves against CONFIG
- props_with: build raw input from minimal_props plus overrides

Hypothesis Configuration:
- "ci" profile: Fast tests for CI (100 examples) - default
- "nightly" profile: Thorough tests (1000 examples)
- "debug" profile: Minimal tests with verbose output (10 examples)

Set profile via environment variable:
    HYPOTHESIS_PROFILE=nightly pytest tests/property/
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterator

import pytest
import structlog
from hypothesis import Phase, Verbosity, settings

MINIMAL_PROPS: dict[str, str] = {
    "connection.url": "http://localhost:9200",
    "type.name": "_doc",
}


@pytest.fixture
def minimal_props() -> dict[str, str]:
    """Required keys only; every other key takes its default."""
    return dict(MINIMAL_PROPS)


@pytest.fixture
def props_with() -> Callable[..., dict[str, str]]:
    """Factory: minimal props updated with the given overrides.

    Usage:
        props = props_with(**{"proxy.host": "proxy.local"})
    """

    def _build(**overrides: str) -> dict[str, str]:
        props = dict(MINIMAL_PROPS)
        props.update(overrides)
        return props

    return _build


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    """Drop handlers bound to a finished test's captured streams."""
    yield
    structlog.reset_defaults()
    logging.getLogger().handlers = []


# =============================================================================
# Hypothesis Configuration
# =============================================================================

# CI profile: Fast tests for continuous integration
settings.register_profile(
    "ci",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,  # Disable deadline for CI (timing varies)
)

# Nightly profile: Thorough testing for scheduled runs
settings.register_profile(
    "nightly",
    max_examples=1000,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

# Debug profile: Minimal examples with verbose output for debugging
settings.register_profile(
    "debug",
    max_examples=10,
    verbosity=Verbosity.verbose,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

# Load profile from environment, default to "ci"
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "ci"))
