#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from dstack.commands import CommandError, OP_PUSH, OP_POP, OP_QUIT, parse_command
from dstack.constants import (
    MSG_ENTER_COMMAND, MSG_INVALID_COMMAND, MSG_INVALID_PUSH, MSG_INVALID_VALUE
)


class TestCommands(unittest.TestCase):
    def _check_error(self, text, message):
        with self.assertRaises(CommandError) as context:
            parse_command(text)

        self.assertEqual(message, str(context.exception))

    def test_commands_push(self):
        self.assertEqual((OP_PUSH, 5), parse_command("push 5"))
        self.assertEqual((OP_PUSH, 0), parse_command("push 0"))
        self.assertEqual((OP_PUSH, 9), parse_command("  PUSH 9  "))

    def test_commands_pop_quit(self):
        self.assertEqual((OP_POP, None), parse_command("pop"))
        self.assertEqual((OP_POP, None), parse_command("Pop now"))
        self.assertEqual((OP_QUIT, None), parse_command("QUIT"))

    def test_commands_empty(self):
        self._check_error("", MSG_ENTER_COMMAND)
        self._check_error("   ", MSG_ENTER_COMMAND)

    def test_commands_unknown(self):
        self._check_error("peek", MSG_INVALID_COMMAND)
        self._check_error("5", MSG_INVALID_COMMAND)
        self._check_error("popx", MSG_INVALID_COMMAND)

    def test_commands_missing_space(self):
        self._check_error("push8", "Format Error: Missing space between 'push' and '8'. Use: push 8")
        self._check_error("push0", "Format Error: Missing space between 'push' and '0'. Use: push 0")

    def test_commands_push_prefix_not_digit(self):
        # Only a single digit straight after "push" counts as a missing space
        self._check_error("pushx", MSG_INVALID_COMMAND)
        self._check_error("pushy", MSG_INVALID_COMMAND)
        self._check_error("push\t5", MSG_INVALID_COMMAND)
        self._check_error("push55", MSG_INVALID_COMMAND)

    def test_commands_push_format(self):
        self._check_error("push", MSG_INVALID_PUSH)
        self._check_error("push 1 2", MSG_INVALID_PUSH)
        self._check_error("push  5", MSG_INVALID_PUSH)

    def test_commands_push_value(self):
        self._check_error("push 10", MSG_INVALID_VALUE)
        self._check_error("push a", MSG_INVALID_VALUE)
        self._check_error("push -", MSG_INVALID_VALUE)
        self._check_error("push ²", MSG_INVALID_VALUE)  # Superscript two
        self._check_error("push ٣", MSG_INVALID_VALUE)  # Arabic-Indic three
