#!/usr/bin/env python3

"""
Stack Emulator

There is no specified location for the CPU call stack, so by default return
addresses are kept in a list outside of system RAM.  The stack pointer (SP)
still moves by 2 on every call and return, so programs and debug output see
the same SP values either way.

RAMStack keeps the other layout: each return address is written into system
RAM as a big-endian word at the address held in SP (2, 4, 6, ...).  That area
overlaps the low memory reserved for the interpreter, and nothing stops a deep
enough call chain from running into the loaded program, so it is only used
when stack quirks are switched on.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"


class StackError(Exception):
    pass


class Stack:
    def __init__(self, size):
        self.items = []
        self.size = size

    def push(self, state, address):
        # Fetching the stack size with 'len' should be immediate, so no slow loop
        if len(self.items) >= self.size:
            raise StackError("Stack overflow")

        state.sp += 2
        self.items.append(address)

    def pop(self, state):
        try:
            address = self.items.pop()
        except IndexError:
            raise StackError("Stack underflow") from None

        state.sp -= 2
        return address

    def get_items(self, state):  # pylint: disable=unused-argument
        # For debugging
        return self.items


class RAMStack(Stack):
    def __init__(self):
        super().__init__(None)

    def push(self, state, address):
        state.sp += 2
        state.ram.write_word(state.sp, address)

    def pop(self, state):
        address = state.ram.read_word(state.sp)
        state.sp -= 2
        return address

    def get_items(self, state):
        return [state.ram.read_word(sp) for sp in range(2, state.sp + 1, 2)]
