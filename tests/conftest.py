"""Global test fixtures."""

import os

import pytest


@pytest.fixture(autouse=True)
def _isolate_rolegate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's ROLEGATE_* settings out of Config() in tests."""
    for key in list(os.environ):
        if key.startswith("ROLEGATE_"):
            monkeypatch.delenv(key, raising=False)
