#!/usr/bin/env python3

__author__ = "Gregory Maynard-Hoare"
__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"
__version__ = "1.0.0"

from argparse import ArgumentParser
from dstack import main


def parse_args():
    parser = ArgumentParser(description="Push and pop single digits on a small fixed-size stack")
    parser.add_argument(
        "-r", "--renderer", choices=["pygame", "curses", "null"],
        help=" ".join((
            "set the display and input systems (pygame by default if available, otherwise curses).",
            "null prints each result to the Terminal"
        ))
    )
    parser.add_argument(
        "-c", "--capacity", type=int,
        help="set the maximum number of items the stack can hold (default 3)"
    )
    parser.add_argument(
        "-s", "--scale", type=int,
        help="set the window width in PyGame mode (default 360), and block width in Curses mode (default 12)"
    )
    parser.add_argument(
        "-e", "--execute", action="append", metavar="COMMAND",
        help="run a command such as 'push 5', 'pop' or 'quit' instead of reading input.  Can be repeated"
    )
    parser.add_argument(
        "-f", "--file",
        help="run commands from a text file, one per line, after any given with --execute"
    )
    parser.add_argument(
        "--pygame_palette",
        help="redefine up to 10 digit colours for the PyGame renderer in comma-separated hex, e.g. FF0000,00FF00,.."
    )
    parser.add_argument(
        "-d", "--debug", action="store_true", default=False,
        help="enable live debug output after each command.  Best used with the null renderer"
    )
    return parser.parse_args()  # Can call sys.exit(2) if args are incorrect


def run():
    # It is possible to start a session from a GUI by calling main with a dictionary
    main(vars(parse_args()))


if __name__ == "__main__":
    run()
