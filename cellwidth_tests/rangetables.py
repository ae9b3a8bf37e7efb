#!/usr/bin/env python
# License: GPL v3 Copyright: 2026, Kovid Goyal <kovid at kovidgoyal.net>

import io
import json
import os
import random
import unicodedata
from contextlib import redirect_stderr
from tempfile import TemporaryDirectory

from cellwidth.constants import DEBUG_ENV_VAR, TABLES_ENV_VAR
from cellwidth.tables import (
    RangeTable, Tables, build_from_unicodedata, load_tables_file, range_contains, ranges_from_codepoints, tables, validate_table,
)
from cellwidth.types import CodeRange

from . import BaseTest, env_vars, random_table


def linear_contains(table, codepoint):
    return any(low <= codepoint <= high for low, high in table)


class TestTables(BaseTest):

    def test_range_contains_matches_linear_scan(self):
        rng = random.Random(1234)
        for num in (1, 2, 3, 7, 50, 300):
            table = random_table(rng, num=num)
            probes = set()
            for low, high in table:
                probes |= {low - 1, low, low + 1, (low + high) // 2, high - 1, high, high + 1}
            probes |= {rng.randint(-5, table[-1].high + 50) for i in range(200)}
            for c in sorted(probes):
                self.ae(range_contains(table, c), linear_contains(table, c), f'{c} in {table.as_list()}')
                self.ae(c in table, linear_contains(table, c))

    def test_range_contains_edges(self):
        self.assertFalse(range_contains((), 0))
        self.assertFalse(range_contains(RangeTable(), 0x41))
        t = [(10, 10)]
        self.assertTrue(range_contains(t, 10))
        self.assertFalse(range_contains(t, 9))
        self.assertFalse(range_contains(t, 11))
        t = [(0, 5), (7, 7), (9, 0xFFFFFFFF)]
        for c, expected in ((0, True), (5, True), (6, False), (7, True), (8, False), (9, True), (0xFFFFFFFF, True), (1 << 32, False), (-1, False)):
            self.ae(range_contains(t, c), expected, c)

    def test_range_table(self):
        t = RangeTable([(1, 3), [5, 9], CodeRange(20, 20)])
        self.ae(len(t), 3)
        self.ae(t[1], CodeRange(5, 9))
        self.ae(t[-1].high, 20)
        self.ae(t[1:], RangeTable([(5, 9), (20, 20)]))
        self.ae(list(t), [CodeRange(1, 3), CodeRange(5, 9), CodeRange(20, 20)])
        self.ae(t.as_list(), [[1, 3], [5, 9], [20, 20]])
        self.ae(t.num_of_codepoints, 9)
        self.assertIn(2, t)
        self.assertNotIn(4, t)
        self.assertNotIn('2', t)
        self.ae(t, RangeTable(t.as_list()))
        self.ae(hash(t), hash(RangeTable(t)))
        self.assertNotEqual(t, RangeTable([(1, 3)]))
        self.ae(repr(t[0]), 'CodeRange(0x1, 0x3)')

    def test_validation(self):
        validate_table(())
        validate_table(RangeTable([(1, 1), (2, 2)]))
        for bad in ([(3, 1)], [(1, 5), (5, 9)], [(5, 9), (1, 3)], [(1, 10), (2, 3)]):
            self.assertRaises(ValueError, RangeTable, bad, validate=True)
            RangeTable(bad).as_list()
            self.assertRaises(ValueError, RangeTable(bad).validate)
        t = Tables(RangeTable([(1, 2)]), RangeTable([(5, 4)]))
        with self.assertRaisesRegex(ValueError, 'wide'):
            t.validate()

    def test_ranges_from_codepoints(self):
        self.ae(list(ranges_from_codepoints(())), [])
        self.ae(list(ranges_from_codepoints({5, 1, 2, 3, 9, 10, 3})), [(1, 3), (5, 5), (9, 10)])
        self.ae(RangeTable.from_codepoints(range(100, 200)).as_list(), [[100, 199]])

    def test_unicodedata_tables(self):
        t = build_from_unicodedata()
        t.validate()
        self.assertTrue(t.source.endswith(unicodedata.unidata_version))
        for c in (0x300, 0x36F, 0x483, 0x20DD, 0x302A, 0xFE00, 0xE0100):
            self.assertIn(c, t.zero_width, hex(c))
        for c in (0x1100, 0x3000, 0x4E2D, 0xFF01, 0x1F600, 0x20000, 0x3FFFD):
            self.assertIn(c, t.wide, hex(c))
        for c in (0x41, 0xAD, 0x200B, 0x2028, 0x10FFFF):
            self.assertNotIn(c, t.zero_width, hex(c))
            self.assertNotIn(c, t.wide, hex(c))
        self.assertNotIn(0x302A, t.wide)

    def test_load_tables_file(self):
        with TemporaryDirectory() as tdir:
            path = os.path.join(tdir, 'tables.json')

            def w(data):
                with open(path, 'w') as f:
                    f.write(data if isinstance(data, str) else json.dumps(data))

            w({'unicode_version': 'ucd 1.0.0', 'zero_width': [[0x300, 0x36F]], 'wide': [[0x1100, 0x115F], [0x4E00, 0x9FFF]]})
            t = load_tables_file(path)
            self.ae(t.source, 'ucd 1.0.0')
            self.ae(t.zero_width.as_list(), [[0x300, 0x36F]])
            self.ae(len(t.wide), 2)
            w({'zero_width': [], 'wide': []})
            self.ae(load_tables_file(path).source, path)
            for bad in ('{not json', '[]', {'wide': []}, {'zero_width': [[1]], 'wide': []}, {'zero_width': [5], 'wide': []},
                        {'zero_width': [[5, 1]], 'wide': []}, {'zero_width': [], 'wide': [[1, 5], [3, 8]]},
                        {'zero_width': ['12'], 'wide': []}, {'zero_width': '12', 'wide': []}, {'zero_width': [], 'wide': {}},
                        {'zero_width': [[4.9, 6.2]], 'wide': []}, {'zero_width': [], 'wide': [[True, 5]]},
                        {'zero_width': [[-1, 5]], 'wide': []}, {'zero_width': [[1, 2, 3]], 'wide': []}):
                w(bad)
                self.assertRaises(ValueError, load_tables_file, path)
            self.assertRaises(OSError, load_tables_file, os.path.join(tdir, 'missing.json'))

    def test_process_tables(self):
        self.assertIs(tables(), tables())
        with TemporaryDirectory() as tdir:
            path = os.path.join(tdir, 'tables.json')
            with open(path, 'w') as f:
                json.dump({'unicode_version': 'test', 'zero_width': [[0x41, 0x41]], 'wide': [[0x42, 0x43]]}, f)
            tables.clear_cached()
            try:
                with env_vars(**{TABLES_ENV_VAR: path, DEBUG_ENV_VAR: '1'}), redirect_stderr(io.StringIO()) as stderr:
                    t = tables()
                self.ae(t.source, 'test')
                self.ae(t.wide.as_list(), [[0x42, 0x43]])
                self.assertIn('Loaded width tables from test', stderr.getvalue())
                from cellwidth import wcswidth
                self.ae(wcswidth('ABCD'), 5)
                tables.clear_cached()
                with env_vars(**{TABLES_ENV_VAR: os.path.join(tdir, 'missing.json'), DEBUG_ENV_VAR: '0'}), redirect_stderr(io.StringIO()) as stderr:
                    t = tables()
                self.assertIn('Failed to load width tables from', stderr.getvalue())
                self.assertTrue(t.source.startswith('unicodedata'))
            finally:
                tables.clear_cached()
