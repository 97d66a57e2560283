import pytest

from envctl.log import setup_logging


@pytest.fixture(scope="session", autouse=True)
def configure_logging():
    setup_logging(log_level="WARNING")


@pytest.fixture(autouse=True)
def no_env_token(monkeypatch):
    monkeypatch.delenv("ENVCTL_API_TOKEN", raising=False)
