#!/usr/bin/env python
# License: GPL v3 Copyright: 2026, Kovid Goyal <kovid at kovidgoyal.net>

from collections.abc import Sequence
from typing import Optional, Union

from .tables import range_contains, tables
from .types import Width


def is_zero_width_format_char(code: int) -> bool:
    # Chosen by hand, these have no distinguishing general category and other
    # characters in their category (Cf) are not zero width, for example U+00AD
    return (
        code == 0 or
        code == 0x034F or
        0x200B <= code <= 0x200F or
        code == 0x2028 or
        code == 0x2029 or
        0x202A <= code <= 0x202E or
        0x2060 <= code <= 0x2063
    )


def wcwidth(code: int) -> Width:
    '''
    Return the number of cells the code point occupies in a terminal.

    :return: :attr:`Width.ZERO` for characters that have no printable effect
        (combining marks, NUL and a few format characters),
        :attr:`Width.NON_PRINTABLE` for C0 and C1 control characters and DEL,
        :attr:`Width.WIDE` for East Asian Wide and Fullwidth characters and
        :attr:`Width.NORMAL` for everything else.

    Unless a tables file is configured with CELLWIDTH_TABLES, the zero width
    and wide tables come from the :mod:`unicodedata` module of the running
    interpreter, so results follow the Unicode version that Python ships
    (see :data:`unicodedata.unidata_version`).
    '''
    if is_zero_width_format_char(code):
        return Width.ZERO
    if code < 32 or 0x7F <= code < 0xA0:
        return Width.NON_PRINTABLE
    t = tables()
    if range_contains(t.zero_width, code):
        return Width.ZERO
    if range_contains(t.wide, code):
        return Width.WIDE
    return Width.NORMAL


def wcswidth(codepoints: Union[str, Sequence[int]], n: Optional[int] = None) -> int:
    '''
    Return the number of cells needed to display the first n code points of
    codepoints, or all of them when n is None. If any of those is not
    printable, -1 is returned. codepoints can also be a str.

    :raises ValueError: when n is negative or larger than the number of code points
    '''
    if n is None:
        n = len(codepoints)
    elif n < 0 or n > len(codepoints):
        raise ValueError(f'Cannot measure the first {n} code points of a sequence of length {len(codepoints)}')
    seq: Sequence[int] = [ord(ch) for ch in codepoints[:n]] if isinstance(codepoints, str) else codepoints
    ans = 0
    for i in range(n):
        w = wcwidth(seq[i])
        if w is Width.NON_PRINTABLE:
            return -1
        ans += w
    return ans
