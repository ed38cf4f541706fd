"""Shared fixtures for the test-suite."""

from __future__ import annotations

import pytest

from custom_specifications.operators_memory import build_default_registry


@pytest.fixture
def registry():
    """Default in-memory operator registry for building specs."""
    return build_default_registry()
