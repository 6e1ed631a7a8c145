"""Pytest configuration for chaosdump tests."""

import pytest


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    """Keep user-level settings from leaking into a test run.

    Every test starts inside its own temporary working directory with the
    ``CHAOSDUMP_*`` environment variables cleared.
    """
    for var in ("CHAOSDUMP_CONFIG", "CHAOSDUMP_TIMEOUT", "CHAOSDUMP_LOG_DIR"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
