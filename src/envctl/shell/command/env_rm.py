import argparse

from ...client import Client
from ...variables import BatchDeleter, parse_id_list

from ..prompt import confirm

from .command import Command


class EnvRmCommand(Command):
    name = "rm"
    help = "remove a config or env var"
    description = (
        "Remove a configuration or environment variable from one or more "
        "applications, devices or services, as selected by command-line "
        "options. Several variables can be removed at once by passing a "
        "comma-separated list of IDs. Interactive confirmation is normally "
        "asked before the variables are deleted; the --yes option disables "
        "this behavior."
    )

    def __init__(self, parser):
        super().__init__(parser)

        parser.formatter_class = argparse.RawDescriptionHelpFormatter
        parser.epilog = "\n".join(
            [
                "examples:",
                "  envctl env rm 123123",
                "  envctl env rm 123123,234234",
                "  envctl env rm 234234 --yes",
                "  envctl env rm 345345 --config",
                "  envctl env rm 456456 --service",
                "  envctl env rm 567567 --device",
                "  envctl env rm 678678 --device --config",
                "  envctl env rm 789789 --device --service --yes",
            ]
        )

        parser.add_argument(
            "id",
            type=parse_id_list,
            help="variable's numeric database ID (comma-separated for many)",
        )

        parser.add_argument(
            "--config",
            action="store_true",
            help="select a configuration variable (may be used together "
            "with the --device option)",
        )

        parser.add_argument(
            "--device",
            action="store_true",
            help="select a device-specific variable instead of an "
            "application (fleet) variable",
        )

        parser.add_argument(
            "--service",
            action="store_true",
            help="select a service variable (may be used together with "
            "the --device option)",
        )

        parser.add_argument(
            "-y",
            "--yes",
            action="store_true",
            default=False,
            help="do not prompt for confirmation before deleting the variable",
        )

    async def run(self, shell_args, config, **kwargs):
        async with Client(config.api) as client:
            result = await BatchDeleter(client, confirm).run(
                shell_args.id,
                config=shell_args.config,
                device=shell_args.device,
                service=shell_args.service,
                yes=shell_args.yes,
            )

        return result.exit_status
