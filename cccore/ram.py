#!/usr/bin/env python3

"""
RAM Emulator

Supports reading and writing of blocks of memory, individual bytes, and
big-endian 16-bit words.  Every access is checked against the size of the
bank, so a stray address raises rather than silently wrapping.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .words import merge_bytes, split_word


class RAMError(Exception):
    pass


class OutOfBoundsError(RAMError):
    pass


class RAM:
    def __init__(self, mem_size=0):
        # The bank is only ever sized once
        self.mem = memoryview(bytearray(b"\x00" * mem_size))
        self.mem_top = mem_size - 1
        self.mem_size = mem_size

    def read(self, location):
        self.check_overflow(location)
        return self.mem[location]

    def read_block(self, location, size=1):
        self.check_overflow(location)

        if size > 0:
            self.check_overflow(location + size - 1)

        return self.mem[location:location + size]

    def write(self, location, byte):
        self.check_overflow(location)
        self.mem[location] = byte & 0xFF

    def write_block(self, location, block):
        block_size = len(block)
        block_top = location + block_size
        self.check_overflow(location)

        if block_size > 0:
            self.check_overflow(block_top - 1)

        self.mem[location:block_top] = block

    def read_word(self, location):
        return merge_bytes(self.read(location), self.read(location + 1))

    def write_word(self, location, word):
        self.check_overflow(location + 1)
        high, low = split_word(word)
        self.write(location, high)
        self.write(location + 1, low)

    def check_overflow(self, location):
        if location < 0 or location > self.mem_top:
            raise OutOfBoundsError(
                "Memory access at 0x{:04x} is outside 0x000-0x{:03x}".format(location, self.mem_top)
            )

