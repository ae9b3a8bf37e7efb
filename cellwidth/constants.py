#!/usr/bin/env python
# License: GPL v3 Copyright: 2026, Kovid Goyal <kovid at kovidgoyal.net>

import os
from typing import NamedTuple, Optional


class Version(NamedTuple):
    major: int
    minor: int
    patch: int


appname: str = 'cellwidth'
version: Version = Version(0, 1, 0)
str_version: str = '.'.join(map(str, version))

TABLES_ENV_VAR = 'CELLWIDTH_TABLES'
DEBUG_ENV_VAR = 'CELLWIDTH_DEBUG'
# Unassigned code points in these blocks default to East Asian Wide
default_wide_blocks: tuple[tuple[int, int], ...] = (
    (0x3400, 0x4DBF),
    (0x4E00, 0x9FFF),
    (0xF900, 0xFAFF),
    (0x20000, 0x2FFFD),
    (0x30000, 0x3FFFD),
)


def tables_path() -> Optional[str]:
    q = os.environ.get(TABLES_ENV_VAR)
    if q:
        return os.path.abspath(os.path.expanduser(q))
    return None


def is_debug() -> bool:
    return os.environ.get(DEBUG_ENV_VAR, '') not in ('', '0')
