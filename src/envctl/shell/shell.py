import argparse

from ..api import ApiException
from ..client import NotLoggedIn
from ..variables import UserDeclined

from .command.env import EnvCommand
from .command.version import VersionCommand
from .helpers import print_error
from .utils import init_subcommands

SUBCOMMANDS = [EnvCommand, VersionCommand]


class ShellException(Exception):
    pass


class Shell:
    def __init__(self, config, argv=None):
        self.config = config
        self.argv = argv

        self.parser = argparse.ArgumentParser(
            prog="envctl", description="Environment and config variables"
        )

        async def _print_help(**_):
            self.parser.print_help()

        self.parser.set_defaults(call=_print_help)

        subparsers = self.parser.add_subparsers(title="commands")

        init_subcommands(subparsers, SUBCOMMANDS)

    async def run(self):
        args = self.parser.parse_args(self.argv)

        try:
            return await args.call(shell_args=args, config=self.config)
        except UserDeclined as exc:
            if exc.exit_if_declined:
                print_error(str(exc))
                return 0
            raise ShellException(str(exc)) from exc
        except NotLoggedIn as exc:
            raise ShellException(str(exc)) from exc
        except ApiException as exc:
            raise ShellException(f"API error: {exc}") from exc
