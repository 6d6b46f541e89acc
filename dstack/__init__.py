#!/usr/bin/env python3

"""
Main Startup Module

Simply call main(args) to start a session, replacing args with a dictionary of
options.  This can be done via the Terminal or GUI.

All options must be supplied.  Defaults can be specified with a 'None'.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import APP_INTRO, APP_COPYRIGHT, DEFAULT_CAPACITY
from .controller import Controller
from .debugger import Debugger
from .hostio import Loader
from .stack import Stack


class StartupError(Exception):
    pass


def main(args):
    print("".join((APP_INTRO, APP_COPYRIGHT)))

    # Scripted commands come from the command line first, then from a file
    commands = list(args["execute"] or [])

    if args["file"] is not None:
        commands.extend(Loader().load_commands(args["file"]))

    scripted = bool(commands) or args["file"] is not None
    opt_renderer = args["renderer"]

    if opt_renderer is None and scripted:
        opt_renderer = "null"

    auto_select_renderer = opt_renderer is None  # If necessary, try PyGame first, then Curses.

    # flake8: noqa: F401
    if auto_select_renderer or opt_renderer == "pygame":
        # pylint: disable=unused-import, import-outside-toplevel, raise-missing-from
        try:
            import pygame
        except ImportError:
            if auto_select_renderer:
                opt_renderer = "curses"
            else:
                raise StartupError(
                    "PyGame does not appear to be installed."
                )
        else:
            opt_renderer = "pygame"
            from .inputs.i_pygame import Inputs
            from .renderers.r_pygame import Renderer

    if opt_renderer == "curses":
        # pylint: disable=unused-import, import-outside-toplevel, raise-missing-from
        try:
            import curses
        except ImportError:
            if auto_select_renderer:
                raise StartupError(
                    "Neither PyGame nor Curses (or Windows-Curses) appear to be installed."
                )

            raise StartupError(
                "Curses (or Windows-Curses) does not appear to be installed."
            )
        else:
            from .inputs.i_curses import Inputs
            from .renderers.r_curses import Renderer

    if opt_renderer == "null":
        # pylint: disable=import-outside-toplevel
        from .inputs.i_null import Inputs
        from .renderers.r_null import Renderer

    if scripted:
        # Replay the script rather than waiting for someone to type
        # pylint: disable=import-outside-toplevel
        from .inputs.i_null import Inputs

    capacity = args["capacity"]
    stack = Stack(DEFAULT_CAPACITY if capacity is None else capacity)

    # Set up a new rendering system.  Only the null renderer echoes messages to the Terminal
    renderer = Renderer(
        scale=args["scale"],
        palette=args["pygame_palette"],
        echo=(opt_renderer == "null")
    )

    try:
        inputs = Inputs(renderer, commands)

        # Set up debugger and live output if necessary
        debugger = Debugger()
        debugger.set_live(args["debug"])

        controller = Controller(stack, renderer, inputs, debugger)

        try:
            controller.run()
        finally:
            inputs.shutdown()
    finally:
        # The session has ended, so shut down the rendering framework.  __del__ cannot be relied upon when using PyPy
        renderer.shutdown()
