import click

from ..variables import UserDeclined


def confirm(skip, message, yes_message=None, exit_if_declined=False):
    if skip:
        if yes_message:
            print(yes_message)
        return True

    try:
        answer = click.confirm(message, default=False)
    except click.Abort as exc:
        raise UserDeclined(
            "Aborted", exit_if_declined=exit_if_declined
        ) from exc

    if not answer:
        raise UserDeclined("Aborted", exit_if_declined=exit_if_declined)

    return True
