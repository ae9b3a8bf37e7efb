#!/usr/bin/env python
# License: GPL v3 Copyright: 2026, Kovid Goyal <kovid at kovidgoyal.net>

import sys
from contextlib import suppress
from typing import Any

from .constants import appname, is_debug


def log_error(*a: Any, **k: str) -> None:
    with suppress(Exception):
        msg = k.get('sep', ' ').join(map(str, a)) + k.get('end', '')
        print(f'[{appname}]', msg.replace('\0', ''), file=sys.stderr, flush=True)


def debug(*a: Any, **k: str) -> None:
    if is_debug():
        log_error(*a, **k)
