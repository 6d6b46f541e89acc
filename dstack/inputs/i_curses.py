#!/usr/bin/env python3

"""
Curses TTY Terminal Input Plugin

Reads a command one character at a time from the Renderer's Curses screen, so
the line being typed can be redrawn by the Renderer after each keypress.
Enter submits the line, and Backspace removes the last character.

We will also quit if ESC (char 27) or CTRL+C (char 3) is detected.  In cbreak
mode, CTRL+C normally arrives as a KeyboardInterrupt instead, which is treated
the same way.

This plugin requires the Curses Renderer.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import curses
from .i_null import InputsError, Inputs as InputsBase

QUIT_CHARS = (27, 3)  # ESC, CTRL+C
SUBMIT_CHARS = (10, 13, curses.KEY_ENTER)
BACKSPACE_CHARS = (8, 127, curses.KEY_BACKSPACE)
MAX_COMMAND_LENGTH = 40


class Inputs(InputsBase):
    def __init__(self, renderer, commands=None):
        if not hasattr(renderer, "get_curses_screen"):
            raise InputsError("The Curses input plugin needs the Curses renderer")

        self.screen = renderer.get_curses_screen()
        super().__init__(renderer, commands)

    def get_command(self):
        text = ""

        while True:
            try:
                char = self.screen.getch()
            except KeyboardInterrupt:
                return None

            if char in QUIT_CHARS:
                return None

            if char in SUBMIT_CHARS:
                self.renderer.show_input("")
                return text

            if char in BACKSPACE_CHARS:
                text = text[:-1]
            elif 32 <= char < 127 and len(text) < MAX_COMMAND_LENGTH:
                text += chr(char)
            else:
                continue

            self.renderer.show_input(text)
            self.renderer.refresh_display()
