def init_subcommands(subparsers, commands):
    for cmd in commands:
        parser = subparsers.add_parser(
            cmd.name, help=cmd.help, description=cmd.description
        )

        parser.set_defaults(call=cmd(parser).run)
