#!/usr/bin/env python
# License: GPL v3 Copyright: 2026, Kovid Goyal <kovid at kovidgoyal.net>

import json
import unicodedata
from collections.abc import Iterable, Iterator, Sequence
from itertools import chain, groupby
from operator import itemgetter
from typing import Any, NamedTuple, Union, overload

from .constants import default_wide_blocks, is_debug, tables_path
from .types import CodeRange, run_once
from .utils import debug, log_error

RangeLike = Union[CodeRange, tuple[int, int], Sequence[int]]


def range_contains(table: Sequence[CodeRange], codepoint: int) -> bool:
    '''
    Return True if codepoint lies inside any of the inclusive ranges in table,
    which must be sorted by lower bound and non-overlapping.
    '''
    ubound = len(table) - 1
    if ubound < 0 or codepoint < table[0][0] or codepoint > table[ubound][1]:
        return False
    lbound = 0
    while ubound >= lbound:
        mid = (lbound + ubound) // 2
        low, high = table[mid]
        if codepoint > high:
            lbound = mid + 1
        elif codepoint < low:
            ubound = mid - 1
        else:
            return True
    return False


def validate_table(ranges: Sequence[CodeRange]) -> None:
    prev = None
    for i, r in enumerate(ranges):
        if r.low > r.high:
            raise ValueError(f'Range {i} is inverted: {r!r}')
        if prev is not None and prev.high >= r.low:
            raise ValueError(f'Range {i} ({r!r}) overlaps or is not sorted after the preceding range ({prev!r})')
        prev = r


def ranges_from_codepoints(codepoints: Iterable[int]) -> Iterator[CodeRange]:
    items = sorted(set(codepoints))
    for k, g in groupby(enumerate(items), lambda m: m[0]-m[1]):
        group = tuple(map(itemgetter(1), g))
        yield CodeRange(group[0], group[-1])


def as_code_range(r: RangeLike) -> CodeRange:
    if isinstance(r, CodeRange):
        return r
    low, high = r
    return CodeRange(int(low), int(high))


class RangeTable(Sequence[CodeRange]):

    __slots__ = ('_ranges',)

    def __init__(self, ranges: Iterable[RangeLike] = (), validate: bool = False):
        self._ranges: tuple[CodeRange, ...] = tuple(map(as_code_range, ranges))
        if validate:
            validate_table(self._ranges)

    @classmethod
    def from_codepoints(cls, codepoints: Iterable[int]) -> 'RangeTable':
        return cls(ranges_from_codepoints(codepoints))

    def __len__(self) -> int:
        return len(self._ranges)

    @overload
    def __getitem__(self, i: int) -> CodeRange: ...
    @overload
    def __getitem__(self, i: slice) -> 'RangeTable': ...

    def __getitem__(self, i: Union[int, slice]) -> Union[CodeRange, 'RangeTable']:
        if isinstance(i, slice):
            return RangeTable(self._ranges[i])
        return self._ranges[i]

    def __iter__(self) -> Iterator[CodeRange]:
        return iter(self._ranges)

    def __contains__(self, codepoint: object) -> bool:
        return isinstance(codepoint, int) and range_contains(self._ranges, codepoint)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, RangeTable):
            return self._ranges == other._ranges
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._ranges)

    def __repr__(self) -> str:
        return f'RangeTable({len(self._ranges)} ranges)'

    @property
    def num_of_codepoints(self) -> int:
        return sum(r.high - r.low + 1 for r in self._ranges)

    def validate(self) -> None:
        validate_table(self._ranges)

    def as_list(self) -> list[list[int]]:
        return [[r.low, r.high] for r in self._ranges]


class Tables(NamedTuple):
    zero_width: RangeTable
    wide: RangeTable
    source: str = 'custom'

    def validate(self) -> None:
        for name, t in (('zero_width', self.zero_width), ('wide', self.wide)):
            try:
                t.validate()
            except ValueError as err:
                raise ValueError(f'Invalid {name} table: {err}') from err


def build_from_unicodedata() -> Tables:
    zero_width: list[int] = []
    wide: list[int] = []
    unassigned_wide = frozenset(chain.from_iterable(range(a, b + 1) for a, b in default_wide_blocks))
    # planes 4-13 are unassigned and planes 15-16 are private use
    for code in chain(range(0x40000), range(0xE0000, 0xF0000)):
        ch = chr(code)
        category = unicodedata.category(ch)
        if category in ('Mn', 'Me'):
            zero_width.append(code)
        elif unicodedata.east_asian_width(ch) in ('W', 'F') or (category == 'Cn' and code in unassigned_wide):
            wide.append(code)
    return Tables(
        RangeTable.from_codepoints(zero_width), RangeTable.from_codepoints(wide),
        f'unicodedata {unicodedata.unidata_version}')


def range_from_json(r: Any) -> CodeRange:
    if not isinstance(r, list) or len(r) != 2:
        raise ValueError(f'{r!r} is not a pair of code points')
    for x in r:
        if type(x) is not int or x < 0:
            raise ValueError(f'{r!r} contains {x!r} which is not a non-negative integer')
    return CodeRange(r[0], r[1])


def table_from_json(name: str, data: Any) -> RangeTable:
    if not isinstance(data, list):
        raise ValueError(f'The {name} table is not a list of ranges')
    try:
        return RangeTable(map(range_from_json, data))
    except ValueError as err:
        raise ValueError(f'The {name} table contains a malformed range: {err}') from err


def load_tables_file(path: str) -> Tables:
    with open(path, 'rb') as f:
        try:
            data = json.loads(f.read())
        except ValueError as err:
            raise ValueError(f'The tables file {path} is not valid JSON: {err}') from err
    if not isinstance(data, dict):
        raise ValueError(f'The tables file {path} does not contain a JSON object')
    for key in ('zero_width', 'wide'):
        if key not in data:
            raise ValueError(f'The tables file {path} has no {key} table')
    try:
        ans = Tables(table_from_json('zero_width', data['zero_width']), table_from_json('wide', data['wide']), str(data.get('unicode_version') or path))
    except ValueError as err:
        raise ValueError(f'Invalid tables file {path}: {err}') from err
    ans.validate()
    return ans


@run_once
def tables() -> Tables:
    ans = None
    path = tables_path()
    if path:
        try:
            ans = load_tables_file(path)
        except (OSError, ValueError) as err:
            log_error(f'Failed to load width tables from {path}, using the builtin Unicode database instead. Error: {err}')
    if ans is None:
        ans = build_from_unicodedata()
    if is_debug():
        ans.validate()
        debug(f'Loaded width tables from {ans.source}: {len(ans.zero_width)} zero width ranges, {len(ans.wide)} wide ranges')
    return ans
