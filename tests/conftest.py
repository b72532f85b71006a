import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Run every test with default settings regardless of the host environment."""
    monkeypatch.delenv("EVALCLIENT_LENIENT_PARSING", raising=False)
    monkeypatch.delenv("EVALCLIENT_JSON_INDENT", raising=False)
