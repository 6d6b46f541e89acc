#!/usr/bin/env python3

"""
PyGame Input Plugin

Collects typed characters from the PyGame window into a command line.  Enter
submits the line, and Backspace removes the last character.  The Renderer is
told about every change, so the line can be drawn as it is typed.

Pressing ESC or closing the window ends the session.  Shutting PyGame down is
left to the Renderer.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import pygame
from .i_null import Inputs as InputsBase

MAX_COMMAND_LENGTH = 40


class Inputs(InputsBase):
    def __init__(self, renderer, commands=None):
        self.text = ""
        self.submitted = False
        self.quit_requested = False

        self.pygame_methods = {
            pygame.QUIT:    self._pygame_quit,
            pygame.KEYDOWN: self._pygame_keydown
        }

        super().__init__(renderer, commands)

    def get_command(self):
        self.text = ""
        self.submitted = False
        self.renderer.show_input(self.text)

        while not self.submitted:
            # Block until something happens, there is nothing else to do in the meantime
            event = pygame.event.wait()
            pygame_method = self.pygame_methods.get(event.type)

            if pygame_method is None:
                continue

            pygame_method(event)

            if self.quit_requested:
                return None

            self.renderer.show_input(self.text)
            self.renderer.refresh_display()

        self.renderer.show_input("")
        return self.text

    def _pygame_quit(self, _):
        self.quit_requested = True

    def _pygame_keydown(self, event):
        if event.key == pygame.K_ESCAPE:
            self.quit_requested = True
        elif event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
            self.submitted = True
        elif event.key == pygame.K_BACKSPACE:
            self.text = self.text[:-1]
        elif event.unicode and event.unicode.isprintable() and len(self.text) < MAX_COMMAND_LENGTH:
            self.text += event.unicode
