#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import io
import unittest
from contextlib import redirect_stdout
from dstack.constants import DIGIT_COLOURS, UNKNOWN_COLOUR
from dstack.renderers.r_null import Renderer, RendererError, parse_palette


class TestRenderer(unittest.TestCase):
    def setUp(self):
        self.renderer = Renderer()

    def test_renderer_defaults(self):
        self.assertEqual(1, self.renderer.scale)
        self.assertEqual([], self.renderer.values)
        self.assertEqual("", self.renderer.message)

    def test_renderer_colours(self):
        self.assertEqual(0xE57373, self.renderer.get_colour(0))
        self.assertEqual(0xFFB74D, self.renderer.get_colour(9))
        self.assertEqual(UNKNOWN_COLOUR, self.renderer.get_colour(10))
        self.assertEqual(UNKNOWN_COLOUR, self.renderer.get_colour(-1))

    def test_renderer_state(self):
        values = [1, 2]
        self.renderer.draw_stack(values)
        values.append(3)  # Renderer keeps its own copy
        self.renderer.show_message("Hello")
        self.renderer.show_input("pu")
        self.renderer.set_title("Title")
        self.assertEqual([1, 2], self.renderer.values)
        self.assertEqual("Hello", self.renderer.message)
        self.assertEqual("pu", self.renderer.input_text)
        self.assertEqual("Title", self.renderer.title)

        # Call only
        self.renderer.refresh_display()
        self.renderer.shutdown()

    def test_renderer_echo(self):
        renderer = Renderer(echo=True)
        output = io.StringIO()

        with redirect_stdout(output):
            renderer.show_message("Output: 1 is pushed. Stack [1]")
            self.renderer.show_message("Not echoed")

        self.assertEqual("Output: 1 is pushed. Stack [1]\n", output.getvalue())

    def test_renderer_palette(self):
        renderer = Renderer(palette="000000,FFFFFF")
        self.assertEqual(0x000000, renderer.get_colour(0))
        self.assertEqual(0xFFFFFF, renderer.get_colour(1))
        self.assertEqual(DIGIT_COLOURS[2], renderer.get_colour(2))

    def test_renderer_palette_default(self):
        self.assertEqual(DIGIT_COLOURS, parse_palette(None))
        self.assertIsNot(DIGIT_COLOURS, parse_palette(None))

    def test_renderer_palette_errors(self):
        self.assertRaises(RendererError, parse_palette, ",".join(["000000"] * 11))
        self.assertRaises(RendererError, parse_palette, "FFF")
        self.assertRaises(RendererError, parse_palette, "GGGGGG")
