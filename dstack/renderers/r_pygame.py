#!/usr/bin/env python3

"""
PyGame Renderer Plugin

Draws the stack onto an SDL window surface via PyGame.

The layout is specified in density-independent units, and converted into
pixels based on the window width, so the whole layout scales with the window.
A 360 pixel wide window is treated as 1 pixel per unit.

From the top of the window down, there is the command line being typed, the
log line (wrapped if too long), and then the stack.  Stack blocks are piled up
from the bottom of the window, so the top of the stack is always the highest
block.  Each block is filled with the digit's colour and labelled in white.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import pygame
from .r_null import Renderer as RendererBase
from ..constants import (
    APP_NAME, BLOCK_HEIGHT_DP, BLOCK_MARGIN_DP, BLOCK_PADDING_DP, MSG_STACK_EMPTY_PLACEHOLDER
)

BASE_WIDTH = 360  # Window width at which 1dp == 1px
BACKGROUND_COLOUR = 0xFAFAFA
TEXT_COLOUR = 0x212121
HINT_COLOUR = 0x9E9E9E
BLOCK_TEXT_COLOUR = 0xFFFFFF
PROMPT = "> "


def dp_to_px(dp, density):
    return int(dp * density)


def to_rgb(colour):
    return ((colour >> 16) & 0xFF, (colour >> 8) & 0xFF, colour & 0xFF)


class Renderer(RendererBase):
    def __init__(self, scale=None, **kwargs):
        if scale is None:
            scale = BASE_WIDTH  # Default window width if not supplied, or set to default

        # Palette is checked here, before anything needs shutting down
        super().__init__(scale, **kwargs)

        pygame.display.init()
        pygame.font.init()
        self.set_title(APP_NAME)
        self.density = scale / BASE_WIDTH
        self.window_size = (scale, scale * 4 // 3)
        self.display_surface = pygame.display.set_mode(self.window_size)
        self.block_font = pygame.font.Font(None, dp_to_px(36, self.density))
        self.text_font = pygame.font.Font(None, dp_to_px(22, self.density))
        self.log_bottom = 0

    def dp(self, value):
        return dp_to_px(value, self.density)

    def layout_blocks(self, count, area_top):
        # Rects from the bottom of the stack to the top.  Blocks shrink if they would reach above area_top
        width, height = self.window_size
        padding = self.dp(BLOCK_PADDING_DP)
        margin = self.dp(BLOCK_MARGIN_DP)
        block_height = self.dp(BLOCK_HEIGHT_DP)
        area_bottom = height - padding

        if count and count * (block_height + margin) - margin > area_bottom - area_top:
            block_height = max(1, (area_bottom - area_top + margin) // count - margin)

        rects = []
        block_y = area_bottom - block_height

        for _ in range(count):
            rects.append(pygame.Rect(padding, block_y, width - padding * 2, block_height))
            block_y -= block_height + margin

        return rects

    def refresh_display(self):
        surface = self.display_surface
        surface.fill(to_rgb(BACKGROUND_COLOUR))
        width, height = self.window_size
        padding = self.dp(BLOCK_PADDING_DP)
        inner_width = width - padding * 2

        # Command line and log line
        y = padding
        self._blit_text(PROMPT + self.input_text + "_", self.text_font, TEXT_COLOUR, padding, y)
        y += self.text_font.get_linesize() * 2

        for line in self._wrap_text(self.message, self.text_font, inner_width):
            self._blit_text(line, self.text_font, TEXT_COLOUR, padding, y)
            y += self.text_font.get_linesize()

        # Stack blocks, bottom of the stack at the bottom of the window
        self.log_bottom = y + self.dp(BLOCK_MARGIN_DP)

        if not self.values:
            block_height = self.dp(BLOCK_HEIGHT_DP)
            text = self.text_font.render(MSG_STACK_EMPTY_PLACEHOLDER, True, to_rgb(HINT_COLOUR))
            surface.blit(text, text.get_rect(center=(width // 2, height - padding - block_height // 2)))

        for value, block_rect in zip(self.values, self.layout_blocks(len(self.values), self.log_bottom)):
            pygame.draw.rect(surface, to_rgb(self.get_colour(value)), block_rect)
            text = self.block_font.render(str(value), True, to_rgb(BLOCK_TEXT_COLOUR))
            surface.blit(text, text.get_rect(center=block_rect.center))

        pygame.display.flip()

    def set_title(self, title):
        pygame.display.set_caption(title)
        super().set_title(title)

    def shutdown(self):
        # PyGame can segfault if display.quit is called via __del__
        pygame.font.quit()
        pygame.display.quit()
        super().shutdown()

    def _blit_text(self, text, font, colour, x, y):
        if text:
            self.display_surface.blit(font.render(text, True, to_rgb(colour)), (x, y))

    def _wrap_text(self, text, font, max_width):
        lines = []
        line = ""

        for word in text.split(" "):
            candidate = word if not line else line + " " + word

            if line and font.size(candidate)[0] > max_width:
                lines.append(line)
                line = word
            else:
                line = candidate

        if line:
            lines.append(line)

        return lines
