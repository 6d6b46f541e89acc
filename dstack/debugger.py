#!/usr/bin/env python3

"""
Session Debugger

If enabled, this will output information after each command processed:
    * SZ  - Number of items on the stack
    * CAP - Stack capacity
    * FL  - Full flag (1 if no more items can be pushed)
    * EM  - Empty flag (1 if nothing can be popped)
    * CMD - The command exactly as it was entered

Verbose output adds the stack items from bottom to top.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"


class Debugger:
    def __init__(self):
        self.live = False

    def debug(self, controller, command, verbose=False):
        stack = controller.stack
        debug_str = "SZ: {} CAP: {} FL: {:d} EM: {:d} CMD: {!r}".format(
            stack.size(), stack.capacity, stack.is_full(), stack.is_empty(), command
        )

        if verbose:
            stack_items = stack.get_items()
            stack_str = (" {}" * len(stack_items)).format(*stack_items)
            debug_str += "\nStack:{}".format(stack_str or " (Empty)")

        return debug_str

    def set_live(self, enabled):
        self.live = enabled

    def is_live(self):
        return self.live

    def output(self, controller, command):
        print(self.debug(controller, command, verbose=True))
