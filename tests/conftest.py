import pytest


@pytest.fixture(autouse=True)
def reset_env(monkeypatch):
    monkeypatch.setenv("HEROKU_API_KEY", "mock-api-key")
    monkeypatch.delenv("HKAPP", raising=False)
    monkeypatch.delenv("HKDEBUG", raising=False)
    yield
