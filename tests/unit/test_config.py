import pytest
from marshmallow.exceptions import ValidationError

from envctl.config import (
    ConfigParseException,
    MemoryApiConfig,
    parse_config_file,
    RemoteApiConfig,
)


@pytest.fixture
def write_config(tmp_path):
    def _write_config(content):
        path = tmp_path / "config.yaml"
        path.write_text(content)
        return path

    return _write_config


class TestParseConfigFile:
    def test_remote(self, write_config):
        path = write_config(
            "api:\n"
            "  type: remote\n"
            "  url: https://api.example.com/\n"
            "  token: secret\n"
        )

        config = parse_config_file(path)

        assert isinstance(config.api, RemoteApiConfig)
        assert config.api.url == "https://api.example.com"
        assert config.api.token == "secret"
        assert config.api.api_version == "v6"
        assert config.api.timeout == 10

    def test_remote_token_from_env(self, write_config, monkeypatch):
        monkeypatch.setenv("ENVCTL_API_TOKEN", "from-env")

        path = write_config(
            "api:\n  type: remote\n  url: http://localhost:8080\n"
        )

        assert parse_config_file(path).api.token == "from-env"

    def test_memory(self, write_config):
        path = write_config(
            "api:\n"
            "  type: memory\n"
            "  token: secret\n"
            "  variables:\n"
            "    device_environment_variable: [1, 2]\n"
        )

        config = parse_config_file(path)

        assert isinstance(config.api, MemoryApiConfig)
        assert config.api.variables == {"device_environment_variable": [1, 2]}

    def test_missing_url(self, write_config):
        path = write_config("api:\n  type: remote\n")

        with pytest.raises(ValidationError) as exc_info:
            parse_config_file(path)

        assert "url" in exc_info.value.messages["api"]

    def test_unknown_type(self, write_config):
        path = write_config("api:\n  type: sqlite\n")

        with pytest.raises(ValidationError):
            parse_config_file(path)

    def test_invalid_yaml(self, write_config):
        path = write_config("api: [unclosed\n")

        with pytest.raises(ConfigParseException):
            parse_config_file(path)

    def test_empty(self, write_config):
        with pytest.raises(ConfigParseException):
            parse_config_file(write_config(""))

    def test_not_found(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            parse_config_file(tmp_path / "missing.yaml")
