"""Shared fixtures for frc_streams tests."""

import matplotlib
import pytest

matplotlib.use("Agg")

from frc_streams.tunable import MemoryStore  # noqa: E402


@pytest.fixture
def store() -> MemoryStore:
    """Fresh in-memory value store."""
    return MemoryStore()
