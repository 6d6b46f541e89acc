#!/usr/bin/env python3

"""
Curses Renderer Plugin

Draws the stack in a standard Linux-style TTY Terminal, the Windows Command
Prompt, or PowerShell.

Each item is drawn as a coloured block, with the top of the stack at the top of
the column.  Terminals only have 8 colours, so the digit palette is
approximated, and digits that share a colour are still told apart by the
number written inside the block.  If colour is unavailable, inverted blocks are
drawn instead.

The whole screen is redrawn on each refresh, which is cheap at this size and
copes with the Terminal being resized.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import curses
import _curses
from .r_null import Renderer as RendererBase
from ..constants import MSG_STACK_EMPTY_PLACEHOLDER

# Nearest Terminal colour for each digit's block, 0-9.  Pair numbers are offset by 1
DIGIT_CURSES_COLOURS = [
    curses.COLOR_RED, curses.COLOR_MAGENTA, curses.COLOR_MAGENTA, curses.COLOR_BLUE, curses.COLOR_BLUE,
    curses.COLOR_CYAN, curses.COLOR_CYAN, curses.COLOR_GREEN, curses.COLOR_GREEN, curses.COLOR_YELLOW
]
UNKNOWN_PAIR = len(DIGIT_CURSES_COLOURS) + 1
PROMPT = "> "


class Renderer(RendererBase):
    def __init__(self, scale=None, use_colour=True, curses_cursor_mode=1, **kwargs):
        if scale is None:
            scale = 12  # Default block width in characters if not supplied, or set to default

        self.cursor_mode = curses_cursor_mode
        self.prompt_row = 0
        self.screen = curses.initscr()
        curses.noecho()
        curses.cbreak()
        self.screen.keypad(True)

        try:
            curses.curs_set(self.cursor_mode)
        except _curses.error:
            pass

        self.use_colour = use_colour and curses.has_colors()

        if self.use_colour:
            curses.start_color()
            curses.use_default_colors()

            for pair_num, colour in enumerate(DIGIT_CURSES_COLOURS, 1):
                curses.init_pair(pair_num, curses.COLOR_BLACK, colour)

            curses.init_pair(UNKNOWN_PAIR, curses.COLOR_BLACK, curses.COLOR_WHITE)

        super().__init__(scale, **kwargs)

    def shutdown(self):
        self.screen.keypad(False)
        curses.nocbreak()
        curses.echo()

        try:
            curses.curs_set(1)
        except _curses.error:
            pass

        curses.endwin()
        super().shutdown()

    def get_block_attr(self, value):
        if not self.use_colour:
            return curses.A_REVERSE

        if 0 <= value < len(DIGIT_CURSES_COLOURS):
            return curses.color_pair(value + 1)

        return curses.color_pair(UNKNOWN_PAIR)

    def refresh_display(self):
        screen_height, screen_width = self.screen.getmaxyx()
        self.screen.erase()
        self._addstr(0, 0, self.title.ljust(screen_width - 1), curses.A_REVERSE)
        row = 2

        if self.values:
            for value in reversed(self.values):
                self._addstr(row, 2, str(value).center(self.scale), self.get_block_attr(value))
                row += 2
        else:
            self._addstr(row, 2, MSG_STACK_EMPTY_PLACEHOLDER, curses.A_DIM)
            row += 2

        self._addstr(row, 0, self.message)
        self.prompt_row = min(row + 2, screen_height - 1)
        self._addstr(self.prompt_row, 0, PROMPT + self.input_text)

        try:
            self.screen.move(self.prompt_row, min(len(PROMPT) + len(self.input_text), screen_width - 1))
        except _curses.error:
            pass

        self.screen.refresh()

    def _addstr(self, y, x, text, attr=curses.A_NORMAL):
        screen_height, screen_width = self.screen.getmaxyx()

        if y >= screen_height or x >= screen_width:
            return

        # Writing into the bottom-right cell raises, even though the text is drawn
        try:
            self.screen.addstr(y, x, text[:screen_width - x - 1], attr)
        except _curses.error:
            pass

    # No Superclass for these Curses-specific methods

    def get_curses_screen(self):
        return self.screen
