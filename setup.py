#!/usr/bin/env python
# License: GPL v3 Copyright: 2026, Kovid Goyal <kovid at kovidgoyal.net>

import os
import re
import sys

from setuptools import setup

src_base = os.path.dirname(os.path.abspath(__file__))


def check_version_info() -> None:
    with open(os.path.join(src_base, 'pyproject.toml')) as f:
        raw = f.read()
    m = re.search(r'''^requires-python\s*=\s*['"](.+?)['"]''', raw, flags=re.MULTILINE)
    assert m is not None
    minver = m.group(1)
    match = re.match(r'(>=?)(\d+)\.(\d+)', minver)
    assert match is not None
    q = int(match.group(2)), int(match.group(3))
    if match.group(1) == '>=':
        is_ok = sys.version_info >= q
    else:
        is_ok = sys.version_info > q
    if not is_ok:
        exit(f'cellwidth requires Python {minver}. Current Python version: {".".join(map(str, sys.version_info[:3]))}')


def read_version() -> str:
    with open(os.path.join(src_base, 'cellwidth', 'constants.py'), 'rb') as f:
        constants = f.read().decode('utf-8')
    m = re.search(r"^version: Version = Version\((\d+), (\d+), (\d+)\)", constants, re.MULTILINE)
    assert m is not None
    return '.'.join(m.group(1, 2, 3))


check_version_info()
setup(version=read_version())
