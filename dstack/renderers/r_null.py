#!/usr/bin/env python3

"""
Null Renderer Plugin

This serves as a base class for other rendering plugins.  It keeps track of
what should be on screen (the stack blocks, the log message, and the command
being typed) without drawing any of it.

This module can be used on its own as a Renderer plugin when running scripted
commands.  If echo is enabled, each log message is printed to the Terminal
instead.

Digit colours are resolved here, so every plugin agrees on them.  A palette of
up to 10 comma-separated hex colours overrides the defaults for digits 0-9 in
order.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from ..constants import DIGIT_COLOURS, UNKNOWN_COLOUR


class RendererError(Exception):
    pass


def parse_palette(palette):
    colour_map = list(DIGIT_COLOURS)

    if palette is None:
        return colour_map

    palette_split = palette.split(",")

    if len(palette_split) > len(colour_map):
        raise RendererError("Too many palette colours defined.")

    for colour_num, colour in enumerate(palette_split):
        if len(colour) != 6:
            raise RendererError("Palette colours must all be 6 hex digits long.")

        try:
            colour_map[colour_num] = int(colour, 16)
        except ValueError:
            raise RendererError("Invalid palette colour defined.") from None

    return colour_map


class Renderer:
    def __init__(self, scale=None, palette=None, echo=False, **kwargs):  # pylint: disable=unused-argument
        self.scale = 1 if scale is None else scale
        self.colour_map = parse_palette(palette)
        self.echo = echo
        self.title = ""
        self.values = []
        self.message = ""
        self.input_text = ""

    def get_colour(self, value):
        # Negative values would otherwise index from the end of the list
        if 0 <= value < len(self.colour_map):
            return self.colour_map[value]

        return UNKNOWN_COLOUR

    def draw_stack(self, values):
        # Values run from the bottom of the stack to the top
        self.values = list(values)

    def show_message(self, message):
        self.message = message

        if self.echo:
            print(message)

    def show_input(self, text):
        self.input_text = text

    def refresh_display(self):
        pass

    def set_title(self, title):
        self.title = title

    def shutdown(self):
        pass
