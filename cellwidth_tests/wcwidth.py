#!/usr/bin/env python
# License: GPL v3 Copyright: 2026, Kovid Goyal <kovid at kovidgoyal.net>

from cellwidth import Width, wcswidth, wcwidth
from cellwidth.wcwidth import is_zero_width_format_char

from . import BaseTest, overridden_tables

zero_width_format_chars = (0x034F, 0x2028, 0x2029) + tuple(range(0x200B, 0x2010)) + tuple(range(0x202A, 0x202F)) + tuple(range(0x2060, 0x2064))


class TestWcwidth(BaseTest):

    def test_printable_ascii(self):
        for c in range(0x20, 0x7F):
            self.ae(wcwidth(c), Width.NORMAL, hex(c))

    def test_control_chars(self):
        for c in range(1, 32):
            self.ae(wcwidth(c), Width.NON_PRINTABLE, hex(c))
        for c in range(0x7F, 0xA0):
            self.ae(wcwidth(c), Width.NON_PRINTABLE, hex(c))
        self.ae(wcwidth(0), Width.ZERO)
        self.ae(wcwidth(0xA0), Width.NORMAL)
        self.ae(wcwidth(-1), Width.NON_PRINTABLE)

    def test_zero_width_format_chars(self):
        for c in zero_width_format_chars:
            self.assertTrue(is_zero_width_format_char(c), hex(c))
            self.ae(wcwidth(c), Width.ZERO, hex(c))
        for c in (0x200A, 0x2010, 0x2027, 0x202F, 0x205F, 0x2064, 0x034E, 0x0350):
            self.assertFalse(is_zero_width_format_char(c), hex(c))
        # soft hyphen is a format character but occupies a cell
        self.ae(wcwidth(0xAD), Width.NORMAL)

    def test_unicode_tables(self):
        def w(x):
            return wcwidth(ord(x))
        self.ae(tuple(map(w, 'a1\0コニチ ✔')), (1, 1, 0, 2, 2, 2, 1, 1))
        self.ae(w('\u0301'), Width.ZERO)
        self.ae(w('\u20dd'), Width.ZERO)  # enclosing circle, Me
        self.ae(w('\u302a'), Width.ZERO)  # Mn that is also East Asian Wide
        self.ae(w('\u4e2d'), Width.WIDE)
        self.ae(w('\uff01'), Width.WIDE)
        self.ae(w('\u1100'), Width.WIDE)
        self.ae(w('\U0001f600'), Width.WIDE)
        self.ae(w('\U00020000'), Width.WIDE)
        self.ae(w('\U000e0100'), Width.ZERO)
        self.ae(w('\u00e9'), Width.NORMAL)
        self.ae(w('\u0416'), Width.NORMAL)
        self.ae(wcwidth(0x10FFFF), Width.NORMAL)
        self.ae(wcwidth(0x110000), Width.NORMAL)
        self.ae(wcwidth(0xFFFFFFFF), Width.NORMAL)

    def test_rule_order(self):
        with overridden_tables(zero_width=[(0x300, 0x36F), (0x4E2D, 0x4E2D)], wide=[(1, 0x1F), (0x2000, 0x2100), (0x4E00, 0x9FFF)]):
            self.ae(wcwidth(0x200B), Width.ZERO)
            self.ae(wcwidth(0x2060), Width.ZERO)
            self.ae(wcwidth(0x2010), Width.WIDE)
            self.ae(wcwidth(5), Width.NON_PRINTABLE)
            self.ae(wcwidth(0x4E2D), Width.ZERO)
            self.ae(wcwidth(0x4E2C), Width.WIDE)
            self.ae(wcwidth(0x301), Width.ZERO)
            self.ae(wcwidth(0x370), Width.NORMAL)
        with overridden_tables():
            self.ae(wcwidth(0x4E2D), Width.NORMAL)
            self.ae(wcwidth(0x301), Width.NORMAL)
            self.ae(wcwidth(0), Width.ZERO)

    def test_wcswidth(self):
        self.ae(wcswidth([0x41, 0x4E2D, 0x200B], 3), 3)
        self.ae(tuple(map(wcwidth, (0x41, 0x4E2D, 0x200B))), (Width.NORMAL, Width.WIDE, Width.ZERO))
        self.ae(wcswidth([0x7], 1), -1)
        self.ae(wcswidth('A\u4e2d\u200b'), 3)
        self.ae(wcswidth('a\u00adb'), 3)
        self.ae(wcswidth('コンニチハ'), 10)
        self.ae(wcswidth('e\u0301'), 1)
        self.ae(wcswidth(''), 0)
        self.ae(wcswidth([]), 0)
        self.ae(wcswidth('abc\x07', 0), 0)
        self.assertIsInstance(wcswidth('ab'), int)

    def test_wcswidth_prefix(self):
        s = [0x41, 0x4E2D, 0x7, 0x4E2D, 0x301]
        self.ae(wcswidth(s, 1), 1)
        self.ae(wcswidth(s, 2), 3)
        for n in range(3, len(s) + 1):
            self.ae(wcswidth(s, n), -1)
        self.ae(wcswidth(s), -1)
        self.ae(wcswidth('abc\tdef', 3), 3)
        self.ae(wcswidth('abc\tdef'), -1)
        for text in ('A\u4e2d\u200b\u0301', 'ab\x1bc', '\uff01\U0001f600', ''):
            for n in range(len(text) + 1):
                self.ae(wcswidth(text, n), wcswidth(list(map(ord, text)), n), (text, n))

    def test_wcswidth_is_additive(self):
        s = [0x41, 0x4E2D, 0x200B, 0x301, 0xFF01, 0, 0x20, 0xAD, 0x1F600]
        for n in range(len(s) + 1):
            self.ae(wcswidth(s, n), sum(wcwidth(c) for c in s[:n]))

    def test_wcswidth_short_circuits(self):
        calls = []

        class Recorder(list):
            def __getitem__(self, i):
                calls.append(i)
                return super().__getitem__(i)

        s = Recorder([0x41, 0x1B, 0x41, 0x41])
        self.ae(wcswidth(s, 4), -1)
        self.ae(calls, [0, 1])

    def test_wcswidth_bad_count(self):
        self.assertRaises(ValueError, wcswidth, 'abc', 4)
        self.assertRaises(ValueError, wcswidth, [0x41], -1)
        self.assertRaises(ValueError, wcswidth, [], 1)
