#!/usr/bin/env python
# License: GPL v3 Copyright: 2026, Kovid Goyal <kovid at kovidgoyal.net>

import importlib


def main() -> None:
    m = importlib.import_module('cellwidth_tests.main')
    getattr(m, 'main')()


if __name__ == '__main__':
    main()
