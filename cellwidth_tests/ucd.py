#!/usr/bin/env python
# License: GPL v3 Copyright: 2026, Kovid Goyal <kovid at kovidgoyal.net>

from cellwidth.ucd import iter_data_lines, parse_east_asian_width, parse_range_spec, parse_unicode_data, split_two, tables_from_ucd

from . import BaseTest

unicode_data = '''\
0041;LATIN CAPITAL LETTER A;Lu;0;L;;;;;N;;;;0061;
00AD;SOFT HYPHEN;Cf;0;BN;;;;;N;;;;;
0300;COMBINING GRAVE ACCENT;Mn;230;NSM;;;;;N;NON-SPACING GRAVE;;;;
0301;COMBINING ACUTE ACCENT;Mn;230;NSM;;;;;N;NON-SPACING ACUTE;;;;
0302;COMBINING CIRCUMFLEX ACCENT;Mn;230;NSM;;;;;N;NON-SPACING CIRCUMFLEX;;;;
20DD;COMBINING ENCLOSING CIRCLE;Me;0;NSM;;;;;N;ENCLOSING CIRCLE;;;;
4E00;<CJK Ideograph, First>;Lo;0;L;;;;;N;;;;;
9FFF;<CJK Ideograph, Last>;Lo;0;L;;;;;N;;;;;
E0100;<Variation Selector Test, First>;Mn;0;NSM;;;;;N;;;;;
E0102;<Variation Selector Test, Last>;Mn;0;NSM;;;;;N;;;;;
'''

east_asian_width = '''\
# EastAsianWidth-15.1.0.txt

0020..007E     ; Na # Sc     [95] SPACE..TILDE
00A1           ; A  # Po         INVERTED EXCLAMATION MARK
1100..115F     ; W  # Lo    [96] HANGUL CHOSEONG KIYEOK..HANGUL CHOSEONG FILLER
3000           ; F  # Zs         IDEOGRAPHIC SPACE
3400..4DBF     ; W  # Lo  [6592] CJK UNIFIED IDEOGRAPH-3400..CJK UNIFIED IDEOGRAPH-4DBF
4E00..4E0F     ; N  # Lo    [16] deliberately not wide
FF01..FF60     ; F  # Po    [96] FULLWIDTH EXCLAMATION MARK..FULLWIDTH RIGHT WHITE PARENTHESIS
'''


class TestUCD(BaseTest):

    def test_data_lines(self):
        self.ae(list(iter_data_lines(['# comment', '', '  ', '0041 ; Na # A', b'0042;Na'])), ['0041 ; Na', '0042;Na'])
        self.ae(parse_range_spec('0300..036F'), range(0x300, 0x370))
        self.ae(parse_range_spec(' 0041 '), range(0x41, 0x42))
        for bad in ('xyz', '0300..', '0300..02FF', ''):
            self.assertRaises(ValueError, parse_range_spec, bad)
        self.ae(split_two('3000           ; F  # Zs'), (range(0x3000, 0x3001), 'F'))
        self.assertRaises(ValueError, split_two, '3000 F')

    def test_unicode_data(self):
        self.ae(parse_unicode_data(unicode_data.splitlines()), {0x300, 0x301, 0x302, 0x20DD, 0xE0100, 0xE0101, 0xE0102})
        self.ae(parse_unicode_data(unicode_data.encode('utf-8').splitlines()), parse_unicode_data(unicode_data.splitlines()))
        self.assertRaises(ValueError, parse_unicode_data, ['0041;LATIN CAPITAL LETTER A'])

    def test_east_asian_width(self):
        wide = parse_east_asian_width(east_asian_width.splitlines())
        for c in (0x1100, 0x115F, 0x3000, 0x3400, 0x4DBF, 0xFF01, 0xFF60, 0x4E10, 0x9FFF, 0xF900, 0x20000, 0x3FFFD):
            self.assertIn(c, wide, hex(c))
        for c in (0x41, 0xA1, 0x1160, 0x4E00, 0x4E0F, 0xFF61, 0x3FFFE):
            self.assertNotIn(c, wide, hex(c))

    def test_tables_from_ucd(self):
        t = tables_from_ucd(unicode_data.splitlines(), east_asian_width.splitlines(), 'sample')
        t.validate()
        self.ae(t.source, 'sample')
        self.ae(t.zero_width.as_list(), [[0x300, 0x302], [0x20DD, 0x20DD], [0xE0100, 0xE0102]])
        self.ae(t.wide[0], (0x1100, 0x115F))
        self.assertIn(0x4E10, t.wide)
        self.assertNotIn(0x4E00, t.wide)
