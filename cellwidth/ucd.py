#!/usr/bin/env python
# License: GPL v3 Copyright: 2026, Kovid Goyal <kovid at kovidgoyal.net>

# Parsers for the plain text files of the Unicode Character Database, see
# https://www.unicode.org/reports/tr44/

from collections.abc import Iterable, Iterator
from typing import Optional, Union

from .constants import default_wide_blocks
from .tables import RangeTable, Tables

zero_width_categories = frozenset(('Mn', 'Me'))
wide_eaw = frozenset(('W', 'F'))


def iter_data_lines(lines: Iterable[Union[str, bytes]]) -> Iterator[str]:
    for line in lines:
        if isinstance(line, bytes):
            line = line.decode('utf-8')
        line = line.partition('#')[0].strip()
        if line:
            yield line


def parse_range_spec(spec: str) -> range:
    spec = spec.strip()
    try:
        if '..' in spec:
            a, b = map(lambda x: int(x, 16), filter(None, spec.split('.')))
            if a > b:
                raise ValueError('inverted range')
            return range(a, b + 1)
        return range(int(spec, 16), int(spec, 16) + 1)
    except ValueError as err:
        raise ValueError(f'Invalid code point range: {spec!r}: {err}') from err


def split_two(line: str) -> tuple[range, str]:
    spec, sep, rest = line.partition(';')
    if not sep:
        raise ValueError(f'Malformed line, no ; separator: {line!r}')
    return parse_range_spec(spec), rest.strip().split(' ', 1)[0].strip()


def parse_unicode_data(lines: Iterable[Union[str, bytes]]) -> set[int]:
    ' Return the code points of UnicodeData.txt whose general category makes them zero width '
    ans: set[int] = set()
    first: Optional[int] = None
    for line in iter_data_lines(lines):
        parts = [x.strip() for x in line.split(';')]
        if len(parts) < 3:
            raise ValueError(f'Malformed line in UnicodeData.txt: {line!r}')
        codepoint = parse_range_spec(parts[0]).start
        codepoints: Iterable[int] = (codepoint,)
        if first is None:
            if parts[1].endswith(', First>'):
                first = codepoint
                continue
        else:
            codepoints = range(first, codepoint + 1)
            first = None
        if parts[2] in zero_width_categories:
            ans.update(codepoints)
    return ans


def parse_east_asian_width(lines: Iterable[Union[str, bytes]]) -> set[int]:
    ' Return the code points of EastAsianWidth.txt that are Wide or Fullwidth '
    ans: set[int] = set()
    seen: set[int] = set()
    for line in iter_data_lines(lines):
        chars, eaw = split_two(line)
        seen.update(chars)
        if eaw in wide_eaw:
            ans.update(chars)
    for a, b in default_wide_blocks:
        ans.update(x for x in range(a, b + 1) if x not in seen)
    return ans


def tables_from_ucd(
    unicode_data_lines: Iterable[Union[str, bytes]], east_asian_width_lines: Iterable[Union[str, bytes]], source: str = 'ucd'
) -> Tables:
    return Tables(
        RangeTable.from_codepoints(parse_unicode_data(unicode_data_lines)),
        RangeTable.from_codepoints(parse_east_asian_width(east_asian_width_lines)),
        source)
