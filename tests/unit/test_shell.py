import io

import click
import pytest

from envctl.api import ApiException
from envctl.api.backend.memory import ApiBackend as MemoryApiBackend
from envctl.config import Config, MemoryApiConfig
from envctl.shell.shell import Shell, ShellException


def make_config(token="token", variables=None):
    return Config(
        api_config=MemoryApiConfig(
            token=token,
            variables=variables
            or {
                "application_environment_variable": [1, 2, 123],
                "device_config_variable": [9],
            },
        )
    )


def _fail(*args, **kwargs):
    raise AssertionError("prompt should not be shown")


class TestShell:
    @pytest.mark.asyncio
    async def test_env_rm(self, monkeypatch):
        monkeypatch.setattr(click, "confirm", _fail)

        shell = Shell(make_config(), ["env", "rm", "123", "--yes"])

        assert await shell.run() == 0

    @pytest.mark.asyncio
    async def test_env_rm_partial_failure(self, capsys):
        shell = Shell(make_config(), ["env", "rm", "1,3,2", "-y"])

        assert await shell.run() == 1

        out = capsys.readouterr().out
        assert out == "application_environment_variable not found, id: 3\n"

    @pytest.mark.asyncio
    async def test_env_rm_device_config(self):
        shell = Shell(
            make_config(), ["env", "rm", "9", "--device", "--config", "-y"]
        )

        assert await shell.run() == 0

    @pytest.mark.asyncio
    async def test_env_rm_confirmed(self, monkeypatch):
        asked = []

        def _confirm(message, default):
            asked.append(message)
            return True

        monkeypatch.setattr(click, "confirm", _confirm)

        shell = Shell(make_config(), ["env", "rm", "1,2"])

        assert await shell.run() == 0
        assert asked == [
            "Are you sure you want to delete 2 environment variables?"
        ]

    @pytest.mark.asyncio
    async def test_env_rm_declined(self, monkeypatch, capsys):
        monkeypatch.setattr(click, "confirm", lambda *a, **kw: False)

        shell = Shell(make_config(), ["env", "rm", "5"])

        assert await shell.run() == 0
        assert capsys.readouterr().err == "Aborted\n"

    @pytest.mark.asyncio
    async def test_env_rm_stdin_closed(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO(""))

        shell = Shell(make_config(), ["env", "rm", "5"])

        assert await shell.run() == 0
        assert capsys.readouterr().err.endswith("Aborted\n")

    @pytest.mark.asyncio
    async def test_env_rm_not_logged_in(self):
        shell = Shell(make_config(token=None), ["env", "rm", "1", "-y"])

        with pytest.raises(ShellException) as exc_info:
            await shell.run()

        assert "Login required" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_env_rm_api_error(self, monkeypatch):
        async def _whoami(self):
            raise ApiException("could not connect to server: api")

        monkeypatch.setattr(MemoryApiBackend, "whoami", _whoami)

        shell = Shell(make_config(), ["env", "rm", "1", "-y"])

        with pytest.raises(ShellException) as exc_info:
            await shell.run()

        assert str(exc_info.value) == (
            "API error: could not connect to server: api"
        )

    def test_env_rm_invalid_id(self, capsys):
        shell = Shell(make_config(), ["env", "rm", "1,a"])

        with pytest.raises(SystemExit) as exc_info:
            shell.parser.parse_args(shell.argv)

        assert exc_info.value.code == 2
        assert "not a valid value for id" in capsys.readouterr().err

    @pytest.mark.asyncio
    async def test_env_prints_help(self, capsys):
        shell = Shell(make_config(), ["env"])

        assert await shell.run() is None
        assert "rm" in capsys.readouterr().out

    @pytest.mark.asyncio
    async def test_no_command_prints_help(self, capsys):
        shell = Shell(make_config(), [])

        await shell.run()

        assert "usage: envctl" in capsys.readouterr().out

    @pytest.mark.asyncio
    async def test_version(self, capsys):
        from envctl.version import version

        shell = Shell(make_config(), ["version"])

        await shell.run()

        assert capsys.readouterr().out == f"{version}\n"
