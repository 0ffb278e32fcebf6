"""
Arguments parser for the taskrecords command line.
"""

import argparse
from typing import Optional, Sequence


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="taskrecords",
        description="Build a task and its steps from a JSON document and print the task snapshot",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument("document", type=str, help="File path of the task document")
    parser.add_argument(
        "-i",
        "--indent",
        type=int,
        default=2,
        help="Indentation of the printed snapshot",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose mode")
    parser.add_argument(
        "-l", "--logs", type=str, default=None, help="Store the logs in this file as well", dest="log_file"
    )
    parser.add_argument("-d", "--debug", action="store_true", help="Debug mode")

    return parser.parse_args(argv)
