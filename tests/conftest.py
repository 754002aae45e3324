# tests/conftest.py
from __future__ import annotations

import pytest
from hypothesis import HealthCheck, settings

from hexnum import runtime

# The autouse fixture below only resets process-wide state, so sharing it
# across generated examples is fine.
settings.register_profile(
    "hexnum",
    deadline=None,
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)
settings.load_profile("hexnum")


@pytest.fixture(autouse=True)
def _isolated_workspace(tmp_path, monkeypatch):
    """Every test gets its own HEXNUM_HOME and a fresh runtime."""
    monkeypatch.setenv("HEXNUM_HOME", str(tmp_path / "hexnum_home"))
    runtime.reset()
    yield
    runtime.reset()
