#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from cccore.ram import RAM, RAMError, OutOfBoundsError


class TestRAM(unittest.TestCase):
    def setUp(self):
        self.ram = RAM(5)

    def test_ram_init(self):
        ram = RAM()
        self.assertEqual("", ram.mem.hex())

    def test_ram_size(self):
        self.assertEqual("0000000000", self.ram.mem.hex())

    def test_ram_write(self):
        self.ram.write(1, 255)
        self.assertEqual("00ff000000", self.ram.mem.hex())
        self.assertEqual(255, self.ram.read(1))

    def test_ram_write_wraps_byte(self):
        self.ram.write(0, 0x1FF)
        self.assertEqual(0xFF, self.ram.read(0))

    def test_ram_write_block(self):
        self.ram.write_block(1, bytearray(b"\xFD\xFE"))
        self.ram.write_block(4, bytearray(b"\xFF"))
        self.assertEqual("00fdfe00ff", self.ram.mem.hex())
        self.assertEqual(b"\xFD\xFE", bytes(self.ram.read_block(1, 2)))

    def test_ram_write_empty_block(self):
        self.ram.write_block(0, b"")
        self.assertEqual("0000000000", self.ram.mem.hex())

    def test_ram_word(self):
        self.ram.write_word(2, 0xABCD)
        self.assertEqual("0000abcd00", self.ram.mem.hex())
        self.assertEqual(0xABCD, self.ram.read_word(2))

    def test_ram_byte_overflow(self):
        self.assertRaises(OutOfBoundsError, self.ram.write, 5, 255)
        self.assertRaises(OutOfBoundsError, self.ram.read, 5)
        self.assertRaises(OutOfBoundsError, self.ram.read, -1)

    def test_ram_block_overflow(self):
        self.assertRaises(OutOfBoundsError, self.ram.write_block, 4, bytearray(b"\xFE\xFF"))
        self.assertRaises(OutOfBoundsError, self.ram.read_block, 4, 2)
        # Nothing should be written if the block doesn't fit
        self.assertEqual("0000000000", self.ram.mem.hex())

    def test_ram_word_overflow(self):
        self.assertRaises(OutOfBoundsError, self.ram.write_word, 4, 0x1234)
        self.assertRaises(OutOfBoundsError, self.ram.read_word, 4)
        self.assertEqual("0000000000", self.ram.mem.hex())

    def test_ram_error_hierarchy(self):
        self.assertTrue(issubclass(OutOfBoundsError, RAMError))
