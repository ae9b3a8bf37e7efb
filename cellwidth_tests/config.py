#!/usr/bin/env python
# License: GPL v3 Copyright: 2026, Kovid Goyal <kovid at kovidgoyal.net>

import io
import os
from contextlib import redirect_stderr

from cellwidth import __version__
from cellwidth.constants import DEBUG_ENV_VAR, TABLES_ENV_VAR, is_debug, str_version, tables_path, version
from cellwidth.types import run_once
from cellwidth.utils import debug, log_error

from . import BaseTest, env_vars


class TestConfig(BaseTest):

    def test_version(self):
        self.ae(__version__, str_version)
        self.ae(str_version, '.'.join(map(str, version)))

    def test_env_settings(self):
        with env_vars(**{TABLES_ENV_VAR: '', DEBUG_ENV_VAR: ''}):
            self.assertIsNone(tables_path())
            self.assertFalse(is_debug())
        with env_vars(**{TABLES_ENV_VAR: 'some/tables.json', DEBUG_ENV_VAR: '0'}):
            self.ae(tables_path(), os.path.abspath('some/tables.json'))
            self.assertFalse(is_debug())
        with env_vars(**{DEBUG_ENV_VAR: 'yes'}):
            self.assertTrue(is_debug())

    def test_logging(self):
        with redirect_stderr(io.StringIO()) as stderr:
            log_error('one', 2, 'th\0ree')
        self.ae(stderr.getvalue(), '[cellwidth] one 2 three\n')
        with env_vars(**{DEBUG_ENV_VAR: ''}), redirect_stderr(io.StringIO()) as stderr:
            debug('hidden')
        self.ae(stderr.getvalue(), '')
        with env_vars(**{DEBUG_ENV_VAR: '1'}), redirect_stderr(io.StringIO()) as stderr:
            debug('shown', sep='-')
        self.ae(stderr.getvalue(), '[cellwidth] shown\n')

    def test_run_once(self):
        calls = []

        @run_once
        def f():
            calls.append(1)
            return len(calls)

        self.ae((f(), f()), (1, 1))
        f.set_override(7)
        self.ae(f(), 7)
        f.clear_override()
        self.ae(f(), 1)
        f.clear_cached()
        self.ae(f(), 2)
