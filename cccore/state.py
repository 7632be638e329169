#!/usr/bin/env python3

"""
Machine State

Everything a running program can change lives here: system RAM, the 16 V
registers, the index register (I), the program counter (PC) and the stack
pointer (SP).  The CPU is given one of these and is the only thing that
mutates it for the duration of a run.

I and PC wrap at 16 bits, SP at 8 bits.  Memory and register accesses are
bounds-checked and raise instead of wrapping.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import MEM_SIZE, NUM_REGISTERS, PROGRAM_START
from .ram import RAM


class StateError(Exception):
    pass


class InvalidRegisterError(StateError):
    pass


class MachineState:
    def __init__(self, mem_size=MEM_SIZE):
        self.ram = RAM(mem_size)
        self.v = memoryview(bytearray(NUM_REGISTERS))
        self._i = 0
        self._pc = PROGRAM_START
        self._sp = 0

    @property
    def i(self):
        return self._i

    @i.setter
    def i(self, value):
        self._i = value & 0xFFFF

    @property
    def pc(self):
        return self._pc

    @pc.setter
    def pc(self, value):
        self._pc = value & 0xFFFF

    @property
    def sp(self):
        return self._sp

    @sp.setter
    def sp(self, value):
        self._sp = value & 0xFF

    def read_byte(self, location):
        return self.ram.read(location)

    def write_byte(self, location, byte):
        self.ram.write(location, byte)

    def read_word(self, location):
        return self.ram.read_word(location)

    def write_word(self, location, word):
        self.ram.write_word(location, word)

    def check_register(self, index):
        if not 0 <= index < NUM_REGISTERS:
            raise InvalidRegisterError("There is no register V{}".format(index))

    def read_register(self, index):
        self.check_register(index)
        return self.v[index]

    def write_register(self, index, byte):
        self.check_register(index)
        self.v[index] = byte & 0xFF

    def load_program(self, data, location=PROGRAM_START):
        self.ram.write_block(location, data)
