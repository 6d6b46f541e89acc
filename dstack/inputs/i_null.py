#!/usr/bin/env python3

"""
Null Input Plugin

Serves as a base class for other Input plugins.  Can be used on its own to
replay a scripted list of commands, after which the session ends.  With no
commands at all, the session ends straight away.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"


class InputsError(Exception):
    pass


class Inputs:
    def __init__(self, renderer, commands=None):
        self.renderer = renderer
        self.commands = []

        for command in commands or []:
            if not isinstance(command, str):
                raise InputsError("Scripted commands must all be strings")

            self.commands.append(command)

        self.next_command = 0

    def get_command(self):
        # None means there is nothing more to process, and the session should end
        if self.next_command >= len(self.commands):
            return None

        command = self.commands[self.next_command]
        self.next_command += 1
        return command

    def shutdown(self):
        pass
