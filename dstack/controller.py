#!/usr/bin/env python3

"""
Session Controller

Owns the stack for the lifetime of a session and ties it to the front end.
Each cycle the display is refreshed, a command is fetched from the Inputs
plugin, and the command is parsed and dispatched.

The stack display is rebuilt from the stack's printable contents rather than
from its internal buffer, so the front end only ever sees the public contract.
It is only rebuilt after a push or pop, since nothing else can change it.

Full and empty stacks are ordinary outcomes here, reported to the user in the
same log line as any other result.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .commands import CommandError, OP_PUSH, OP_POP, OP_QUIT, parse_command
from .constants import (
    APP_NAME, MSG_READY, MSG_OUTPUT_PREFIX, MSG_PUSHED, MSG_FULL, MSG_POPPED, MSG_EMPTY, MSG_QUIT
)


def parse_contents(contents):
    # Format is "[ ]" when empty, otherwise "[5 3 7]" from bottom to top
    trimmed = contents.strip()

    if trimmed in ("[ ]", "[]"):
        return []

    inner = trimmed[1:-1].strip()
    return [int(value) for value in inner.split(" ")] if inner else []


class Controller:
    def __init__(self, stack, renderer, inputs, debugger):
        self.stack = stack
        self.renderer = renderer
        self.inputs = inputs
        self.debugger = debugger
        self.live_debug = self.debugger.is_live()
        self.running = False
        self.last_command = ""

        # Operation lookup, each returns the message to display
        self.operations = {
            OP_PUSH: self._push,
            OP_POP:  self._pop,
            OP_QUIT: self._quit
        }

        self.renderer.set_title(APP_NAME)
        self.refresh_display()
        self.renderer.show_message(MSG_READY)

    def run(self):
        self.running = True

        while self.running:
            self.renderer.refresh_display()
            command = self.inputs.get_command()

            if command is None:
                # Inputs closed (window shut, ESC pressed, or script finished)
                self.running = False
                break

            self.process_command(command)

        self.renderer.refresh_display()

    def process_command(self, text):
        self.last_command = text

        try:
            operation, value = parse_command(text)
        except CommandError as e:
            message = str(e)
        else:
            message = self.operations[operation](value)

        self.show_message(message)

        if self.live_debug:
            self.debug(text)

        return message

    def show_message(self, message):
        self.renderer.show_message(MSG_OUTPUT_PREFIX + message)

    def refresh_display(self):
        self.renderer.draw_stack(parse_contents(self.stack.get_contents()))

    def debug(self, command):
        self.debugger.output(self, command)

    def _push(self, value):
        if self.stack.push(value):
            message = MSG_PUSHED.format(value, self.stack.get_contents())
        else:
            message = MSG_FULL.format(self.stack.get_contents())

        self.refresh_display()
        return message

    def _pop(self, _):
        value = self.stack.pop()

        if value is None:
            message = MSG_EMPTY.format(self.stack.get_contents())
        else:
            message = MSG_POPPED.format(value, self.stack.get_contents())

        self.refresh_display()
        return message

    def _quit(self, _):
        self.running = False
        return MSG_QUIT
