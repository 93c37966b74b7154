"""Shared fixtures."""

import pytest

TOKEN_ENV_KEYS = ("INPUT_ASANA-PAT", "ASANA_PAT", "ASANA_TOKEN", "ASANA_PAT_FILE", "ASANA_API_URL", "ASANA_TIMEOUT")


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Environment without any Asana token or overrides."""
    for key in TOKEN_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.delenv("GATE_INTEGRATION_BRANCHES", raising=False)
    return monkeypatch
