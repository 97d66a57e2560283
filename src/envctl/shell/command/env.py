from ..utils import init_subcommands

from .command import Command
from .env_rm import EnvRmCommand

SUBCOMMANDS = [EnvRmCommand]


class EnvCommand(Command):
    name = "env"
    help = "environment and config variable commands"

    def __init__(self, parser):
        super().__init__(parser)

        subparsers = parser.add_subparsers(title="env commands")

        init_subcommands(subparsers, SUBCOMMANDS)

    async def run(self, **kwargs):
        self.parser.print_help()
