"""Shared fixtures for case codec tests."""

import pytest


@pytest.fixture
def clean_env(monkeypatch):
    """Environment with no casecodec settings."""
    for key in ("CASECODEC_LOG_LEVEL", "CASECODEC_ENCODE_CASE"):
        monkeypatch.delenv(key, raising=False)
    return monkeypatch
