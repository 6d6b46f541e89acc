#!/usr/bin/env python3

"""
Bounded Stack

A fixed-capacity LIFO container for integers.  The buffer is allocated once at
the full capacity and a top-of-stack index tracks how much of it is in use, so
nothing is ever resized.

Running out of room (or out of items) is normal in this application, so push
and pop report it through their return values rather than raising.  Callers
must check the result: push returns False when the stack is full, and pop
returns None when it is empty.

No range checking is done on pushed values.  Restricting them to single digits
is up to whoever reads the user's input.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"


class StackError(Exception):
    pass


class Stack:
    def __init__(self, capacity):
        # Rejects bools too, even though they are ints
        if not isinstance(capacity, int) or isinstance(capacity, bool) or capacity < 1:
            raise StackError("Stack capacity must be a positive integer")

        self.capacity = capacity
        self.items = [0] * capacity
        self.top_index = -1  # -1 when empty

    def push(self, item):
        if self.is_full():
            return False

        self.top_index += 1
        self.items[self.top_index] = item
        return True

    def pop(self):
        if self.is_empty():
            return None

        item = self.items[self.top_index]
        self.top_index -= 1
        return item

    def is_empty(self):
        return self.top_index == -1

    def is_full(self):
        return self.top_index == self.capacity - 1

    def size(self):
        return self.top_index + 1

    def get_contents(self):
        # Bottom of the stack on the left, top on the right
        if self.is_empty():
            return "[ ]"

        return "[{}]".format(" ".join(str(item) for item in self.get_items()))

    def get_items(self):
        # For debugging.  A copy, so callers can't reach into the buffer
        return tuple(self.items[:self.top_index + 1])
