#!/usr/bin/env python3

"""
Host I/O Functionality

Handles loading command scripts, so a session can be replayed without anybody
typing.  Scripts are plain text with one command per line.  Blank lines and
lines starting with '#' are skipped.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"


class Loader:
    def load_text(self, filename):
        f = open(filename, "r", encoding="utf-8")
        data = f.read()
        f.close()
        return data

    def load_commands(self, filename):
        commands = []

        for line in self.load_text(filename).splitlines():
            stripped = line.strip()

            if stripped and not stripped.startswith("#"):
                commands.append(stripped)

        return commands
