#!/usr/bin/env python
# License: GPL v3 Copyright: 2026, Kovid Goyal <kovid at kovidgoyal.net>

import importlib
import sys
import unittest
from collections.abc import Iterator, Sequence
from importlib.resources import files
from typing import Any

from . import BaseTest


def all_test_modules(package: str = 'cellwidth_tests', excludes: Sequence[str] = ('main', '__init__')) -> list[str]:
    names = (p.name.partition('.') for p in files(package).iterdir())
    return sorted(f'{package}.{name}' for name, sep, ext in names if ext == 'py' and name not in excludes)


def iter_cases(suite: unittest.TestSuite) -> Iterator[unittest.TestCase]:
    for test in suite:
        if isinstance(test, unittest.TestSuite):
            yield from iter_cases(test)
        else:
            yield test


def find_all_tests(module: str = '', names: Sequence[str] = ()) -> unittest.TestSuite:
    ' Load every test module, keeping only the tests in module (if given) and named by names (if given) '
    wanted = {x if x.startswith('test_') else 'test_' + x for x in names}
    ans = unittest.TestSuite()
    for qualname in all_test_modules():
        if module and qualname.rpartition('.')[-1] != module:
            continue
        m = importlib.import_module(qualname)
        for test in iter_cases(unittest.defaultTestLoader.loadTestsFromModule(m)):
            if not wanted or getattr(test, '_testMethodName', '') in wanted:
                ans.addTest(test)
    return ans


def run_cli(suite: unittest.TestSuite, verbosity: int = 4) -> bool:
    runner = unittest.TextTestRunner(verbosity=verbosity, tb_locals=True)
    result = runner.run(suite)
    sys.stdout.flush()
    sys.stderr.flush()
    return result.wasSuccessful()


def run_python_tests(args: Any) -> None:
    tests = find_all_tests(args.module, args.name)
    if not tests.countTestCases():
        raise SystemExit(f'No tests matching module: {args.module!r} and names: {args.name!r} found')
    if not run_cli(tests, args.verbosity):
        print("\x1b[31mError\x1b[39m: Some tests failed!")
        raise SystemExit(1)
    raise SystemExit(0)


def run_tests() -> None:
    import argparse

    parser = argparse.ArgumentParser()
    parser.add_argument(
        'name',
        nargs='*',
        default=[],
        help='The name of the test to run, for e.g. wcswidth corresponds to test_wcswidth. Can be specified multiple times.',
    )
    parser.add_argument('--verbosity', default=4, type=int, help='Test verbosity')
    parser.add_argument('--module', default='', help='Name of a test module to restrict to. For example: rangetables')
    args = parser.parse_args()
    print('Running under CI:', BaseTest.is_ci)
    sys.stdout.flush()
    run_python_tests(args)


def main() -> None:
    run_tests()
