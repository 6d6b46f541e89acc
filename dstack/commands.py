#!/usr/bin/env python3

"""
Command Parser

Turns a line of user input into an operation and an optional value.  The
grammar is tiny:

    push X  - X must be a single digit, 0-9
    pop     - anything after the operation is ignored
    quit

Input is trimmed and lower-cased first, and words are split on single spaces,
so "push  5" (two spaces) is rejected as a badly formatted push.

Anything that can't be understood raises a CommandError holding the message
that should be shown to the user.  This is also where the 0-9 range is
enforced, as the stack accepts any integer.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import (
    DIGITS, MSG_ENTER_COMMAND, MSG_INVALID_COMMAND, MSG_MISSING_SPACE, MSG_INVALID_PUSH, MSG_INVALID_VALUE
)

OP_PUSH = "push"
OP_POP = "pop"
OP_QUIT = "quit"


class CommandError(Exception):
    pass


def parse_command(text):
    command = text.strip().lower()

    if not command:
        raise CommandError(MSG_ENTER_COMMAND)

    parts = command.split(" ")
    operation = parts[0]

    if operation == OP_PUSH:
        return OP_PUSH, parse_push_value(parts)

    if operation in (OP_POP, OP_QUIT):
        return operation, None

    # "push8" style typo, only when what follows is a digit that could have been pushed
    suffix = operation[len(OP_PUSH):]

    if len(parts) == 1 and operation.startswith(OP_PUSH) and len(suffix) == 1 and suffix in DIGITS:
        raise CommandError(MSG_MISSING_SPACE.format(suffix))

    raise CommandError(MSG_INVALID_COMMAND)


def parse_push_value(parts):
    if len(parts) != 2:
        raise CommandError(MSG_INVALID_PUSH)

    value_str = parts[1]

    # ASCII digits only, str.isdigit also accepts superscripts
    if len(value_str) != 1 or value_str not in DIGITS:
        raise CommandError(MSG_INVALID_VALUE)

    return int(value_str)
