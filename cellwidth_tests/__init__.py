#!/usr/bin/env python
# License: GPL v3 Copyright: 2026, Kovid Goyal <kovid at kovidgoyal.net>

import os
import random
from collections.abc import Iterator
from contextlib import contextmanager
from unittest import TestCase

import cellwidth.tables as ct
from cellwidth.tables import RangeTable, Tables

is_ci = os.environ.get('CI') == 'true'


@contextmanager
def env_vars(**kw: str) -> Iterator[None]:
    originals = {k: os.environ.get(k) for k in kw}
    os.environ.update(kw)
    try:
        yield
    finally:
        for k, v in originals.items():
            if v is None:
                os.environ.pop(k, None)
            else:
                os.environ[k] = v


@contextmanager
def overridden_tables(zero_width=(), wide=()) -> Iterator[Tables]:
    t = Tables(RangeTable(zero_width, validate=True), RangeTable(wide, validate=True), 'test')
    ct.tables.set_override(t)
    try:
        yield t
    finally:
        ct.tables.clear_override()


def random_table(rng: random.Random, num: int = 50, max_gap: int = 40, max_span: int = 30) -> RangeTable:
    ans = []
    pos = rng.randint(0, max_gap)
    for i in range(num):
        low = pos
        high = low + rng.randint(0, max_span)
        ans.append((low, high))
        pos = high + rng.randint(1, max_gap)
    return RangeTable(ans, validate=True)


class BaseTest(TestCase):

    ae = TestCase.assertEqual
    maxDiff = 2048
    is_ci = is_ci
