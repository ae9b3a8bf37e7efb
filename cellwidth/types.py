#!/usr/bin/env python
# License: GPL v3 Copyright: 2026, Kovid Goyal <kovid at kovidgoyal.net>

from collections.abc import Callable
from enum import IntEnum
from functools import update_wrapper
from typing import TYPE_CHECKING, Generic, NamedTuple, TypeVar

_T = TypeVar('_T')


class Width(IntEnum):
    NON_PRINTABLE = -1
    ZERO = 0
    NORMAL = 1
    WIDE = 2


class CodeRange(NamedTuple):
    low: int
    high: int

    def __repr__(self) -> str:
        return f'CodeRange(0x{self.low:x}, 0x{self.high:x})'


if TYPE_CHECKING:
    class RunOnce(Generic[_T]):

        def __init__(self, func: Callable[[], _T]): ...
        def __call__(self) -> _T: ...
        def set_override(self, val: _T) -> None: ...
        def clear_override(self) -> None: ...
        def clear_cached(self) -> None: ...
else:
    class RunOnce:

        def __init__(self, f):
            self._override = RunOnce
            self._cached_result = RunOnce
            update_wrapper(self, f)

        def __call__(self):
            if self._override is not RunOnce:
                return self._override
            if self._cached_result is RunOnce:
                self._cached_result = self.__wrapped__()
            return self._cached_result

        def clear_cached(self):
            self._cached_result = RunOnce

        def set_override(self, val):
            self._override = val

        def clear_override(self):
            self._override = RunOnce


def run_once(f: Callable[[], _T]) -> 'RunOnce[_T]':
    return RunOnce(f)
