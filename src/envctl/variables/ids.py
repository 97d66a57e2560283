import argparse
import re

_ID_LIST_RE = re.compile(r"^\d+(,\d+)*$")


def parse_id_list(value, name="id"):
    """argparse type for a comma-separated list of integer IDs.

    The value is validated but returned unchanged; splitting happens in
    the batch deleter, which keeps token order.
    """
    value = str(value)

    if not _ID_LIST_RE.match(value):
        raise argparse.ArgumentTypeError(
            f'"{value}" is not a valid value for {name}: '
            "expected a comma-separated list of integers"
        )

    return value


def split_ids(value):
    return str(value).split(",")
