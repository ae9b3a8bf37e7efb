#!/usr/bin/env python
# License: GPL v3 Copyright: 2026, Kovid Goyal <kovid at kovidgoyal.net>

import io
import unittest

from cellwidth import Width, wcwidth

from . import BaseTest, overridden_tables
from .main import all_test_modules, find_all_tests


class TestRunner(BaseTest):

    def test_discovery(self):
        mods = all_test_modules()
        for name in ('config', 'rangetables', 'runner', 'ucd', 'wcwidth'):
            self.assertIn(f'cellwidth_tests.{name}', mods)
        self.assertNotIn('cellwidth_tests.main', mods)
        self.ae(find_all_tests('wcwidth', ['rule_order']).countTestCases(), 1)
        self.ae(find_all_tests('', ['test_rule_order', 'ucd_parsing_does_not_exist']).countTestCases(), 1)
        self.ae(find_all_tests('no_such_module').countTestCases(), 0)
        self.assertGreater(find_all_tests('ucd').countTestCases(), 3)

    def test_table_override_with_all_modules_loaded(self):
        find_all_tests()
        with overridden_tables(wide=[(0x41, 0x41)]):
            self.ae(wcwidth(0x41), Width.WIDE)
        self.ae(wcwidth(0x41), Width.NORMAL)
        result = unittest.TextTestRunner(stream=io.StringIO(), verbosity=0).run(find_all_tests('wcwidth'))
        self.ae((result.errors, result.failures), ([], []))
        self.assertTrue(result.wasSuccessful())
