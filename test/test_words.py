#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from cccore.words import merge_bytes, split_fields, split_word, to_bcd


class TestWords(unittest.TestCase):
    def test_words_split(self):
        self.assertEqual((0x12, 0x34), split_word(0x1234))
        self.assertEqual((0x00, 0xFF), split_word(0x00FF))

    def test_words_merge(self):
        self.assertEqual(0xFFFE, merge_bytes(0xFF, 0xFE))
        self.assertEqual(0x0001, merge_bytes(0x00, 0x01))

    def test_words_merge_split_all(self):
        for word in range(0x10000):
            self.assertEqual(word, merge_bytes(*split_word(word)))

    def test_words_fields(self):
        fields = split_fields(0xD1A5)
        self.assertEqual(0xD, fields.op)
        self.assertEqual(0x1, fields.x)
        self.assertEqual(0xA, fields.y)
        self.assertEqual(0x5, fields.n)
        self.assertEqual(0xA5, fields.kk)
        self.assertEqual(0x1A5, fields.nnn)

    def test_words_bcd(self):
        self.assertEqual((2, 0, 5), to_bcd(205))
        self.assertEqual((0, 4, 2), to_bcd(42))
        self.assertEqual((0, 0, 7), to_bcd(7))
        self.assertEqual((2, 5, 5), to_bcd(255))
