#!/usr/bin/env python
# vim:fileencoding=utf-8
# License: GPL v3 Copyright: 2026, Kovid Goyal <kovid at kovidgoyal.net>

import os
import shlex
import subprocess
import sys
import tempfile


def run(*a: str, env: 'dict[str, str] | None' = None) -> None:
    if len(a) == 1:
        a = tuple(shlex.split(a[0]))
    cmd = ' '.join(map(shlex.quote, a))
    print(cmd)
    sys.stdout.flush()
    ret = subprocess.Popen(a, env=env).wait()
    if ret != 0:
        raise SystemExit(f'The following process failed with exit code: {ret}:\n{cmd}')


def install_deps() -> None:
    print('Installing cellwidth and its test dependencies...')
    sys.stdout.flush()
    run(sys.executable, '-m', 'pip', 'install', '-e', '.[test]')


def test_cellwidth() -> None:
    run(sys.executable, 'test.py')


def test_ucd_tables() -> None:
    with tempfile.TemporaryDirectory() as tdir:
        path = os.path.join(tdir, 'tables.json')
        run(sys.executable, 'gen-tables.py', path)
        env = dict(os.environ, CELLWIDTH_TABLES=path, CELLWIDTH_DEBUG='1')
        run(sys.executable, 'test.py', '--module', 'wcwidth', env=env)


def main() -> None:
    action = sys.argv[-1]
    if action == 'build':
        install_deps()
    elif action == 'test':
        test_cellwidth()
    elif action == 'test-ucd':
        test_ucd_tables()
    elif action == 'type-check':
        run(sys.executable, '-m', 'mypy', '--pretty')
    else:
        raise SystemExit(f'Unknown action: {action}')


if __name__ == '__main__':
    main()
