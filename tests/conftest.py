"""Global pytest fixtures for INSTANCEKIT."""

from __future__ import annotations

import pytest

pytest_plugins = [
    "tests.fixtures.sqlite",
    "tests.fixtures.datagen",
]


@pytest.fixture(autouse=True)
def _clean_instancekit_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the runner's INSTANCEKIT_* variables out of every test."""
    for var in ("INSTANCEKIT_DB_URL", "INSTANCEKIT_INSTANCE_NAME"):
        monkeypatch.delenv(var, raising=False)
