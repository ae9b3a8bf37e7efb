#!/usr/bin/env python
# License: GPL v3 Copyright: 2026, Kovid Goyal <kovid at kovidgoyal.net>

from .constants import str_version as __version__
from .tables import RangeTable, Tables, range_contains
from .types import CodeRange, Width
from .wcwidth import wcswidth, wcwidth

__all__ = (
    '__version__', 'CodeRange', 'RangeTable', 'Tables', 'Width',
    'range_contains', 'wcswidth', 'wcwidth',
)
