"""Shared fixtures."""

import pytest

from lifegrid.simulation.config import ENV_PREFIX


@pytest.fixture
def clean_env(monkeypatch):
    """Remove any LIFEGRID_* variables from the environment."""
    for name in ("WIDTH", "HEIGHT", "GENERATIONS", "DELAY", "PATTERN", "SEED"):
        monkeypatch.delenv(ENV_PREFIX + name, raising=False)
    return monkeypatch
