#!/usr/bin/env python3

"""
Word Helpers

Instructions and saved addresses are 16-bit big-endian words, but memory is
addressed in bytes.  These helpers convert between the two and pull the
standard operand fields out of an instruction word.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from collections import namedtuple

CPU_ENDIAN = "big"  # CHIP-8 is big-endian

# op = first nibble, x/y = registers, n = last nibble, kk = byte, nnn = address
Fields = namedtuple("Fields", ["op", "x", "y", "n", "kk", "nnn"])


def split_word(word):
    high, low = (word & 0xFFFF).to_bytes(2, CPU_ENDIAN)
    return high, low


def merge_bytes(high, low):
    return int.from_bytes(bytes((high, low)), CPU_ENDIAN, signed=False)


def split_fields(opcode):
    return Fields(
        op=(opcode & 0xF000) >> 12,
        x=(opcode & 0xF00) >> 8,
        y=(opcode & 0xF0) >> 4,
        n=opcode & 0xF,
        kk=opcode & 0xFF,
        nnn=opcode & 0xFFF
    )


def to_bcd(byte):
    # Always three digits, zero-padded, most significant first
    return byte // 100, (byte // 10) % 10, byte % 10
