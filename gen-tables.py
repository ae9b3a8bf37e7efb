#!/usr/bin/env python3
# vim:fileencoding=utf-8
# License: GPL v3 Copyright: 2026, Kovid Goyal <kovid at kovidgoyal.net>

import json
import os
import re
import sys
from collections.abc import Iterable
from datetime import date
from urllib.request import urlopen

from cellwidth.constants import TABLES_ENV_VAR
from cellwidth.ucd import tables_from_ucd


def get_raw_data(fname: str, folder: str = 'UCD') -> bytes:
    url = f'https://www.unicode.org/Public/{folder}/latest/{fname}'
    bn = os.path.basename(url)
    local = os.path.join('/tmp', bn)
    if os.path.exists(local):
        with open(local, 'rb') as f:
            data = f.read()
    else:
        data = urlopen(url).read()
        with open(local, 'wb') as f:
            f.write(data)
    return data


def get_data(fname: str, folder: str = 'UCD') -> Iterable[str]:
    return get_raw_data(fname, folder).decode('utf-8').splitlines()


def unicode_version(east_asian_width_lines: Iterable[str]) -> str:
    for line in east_asian_width_lines:
        m = re.match(r'#\s*EastAsianWidth-(\d+\.\d+\.\d+)\.txt', line)
        if m is not None:
            return m.group(1)
    return 'latest'


def gen_tables(dest: str) -> None:
    eaw = list(get_data('ucd/EastAsianWidth.txt'))
    version = unicode_version(eaw)
    t = tables_from_ucd(get_data('ucd/UnicodeData.txt'), eaw, f'ucd {version}')
    t.validate()
    data = {
        'unicode_version': t.source, 'generated': str(date.today()),
        'zero_width': t.zero_width.as_list(), 'wide': t.wide.as_list(),
    }
    with open(dest, 'w') as f:
        json.dump(data, f, indent=1)
    print(f'Wrote {len(t.zero_width)} zero width and {len(t.wide)} wide ranges from Unicode {version} to {dest}')
    print(f'Set {TABLES_ENV_VAR}={os.path.abspath(dest)} to use them')


if __name__ == '__main__':
    gen_tables(sys.argv[1] if len(sys.argv) > 1 else 'cellwidth-tables.json')
