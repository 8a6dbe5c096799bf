#!/usr/bin/env python3

"""
Stack Emulator

The call stack has no specified location in memory and programs cannot see the
stack pointer, so it is kept out of RAM and wrapped around a list.  The stack
pointer is simply the number of return addresses currently held.

The machine has room for 16 return addresses.  Calling with a full stack, or
returning with an empty one, raises a StackError and leaves the stack as it
was.  There is no wrapping or clamping.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"


class StackError(Exception):
    pass


class Stack:
    def __init__(self, size):
        self.items = []
        self.size = size

    def push(self, item):
        if len(self.items) >= self.size:
            raise StackError("Stack overflow")

        self.items.append(item)

    def pop(self):
        try:
            return self.items.pop()
        except IndexError:
            raise StackError("Stack underflow") from None

    def get_pointer(self):
        return len(self.items)

    def get_items(self):
        # For debugging
        return self.items
