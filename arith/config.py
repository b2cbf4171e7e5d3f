"""
User settings for the command line tool.

Precedence, lowest first: built-in defaults, `$ARITH_HOME/arithrc`, the
`ARITH_*` environment variables, and finally command line flags (applied by
the caller).
"""

import os

from path import Path

from arith.exceptions import ConfigError


TRUE = {'1', 'true', 'yes', 'on'}
FALSE = {'0', 'false', 'no', 'off'}


def parse_bool(key, value):
    v = value.strip().lower()
    if v in TRUE: return True
    if v in FALSE: return False
    raise ConfigError(f'{key}: expected a boolean, got {value!r}')


class Settings:

    # key -> converter for values read from text
    fields = {
        'strict': parse_bool,
        'verbose': parse_bool,
        'style': lambda key, value: value.strip(),
    }

    def __init__(self, home=None, strict=True, verbose=False, style='paraiso-dark'):
        if home is None:
            home = '~/.arith'
        self.home = Path(str(home)).expanduser()
        self.strict = strict
        self.verbose = verbose
        self.style = style

    @property
    def history(self):
        return self.home / 'history'

    @property
    def rcfile(self):
        return self.home / 'arithrc'

    def ensure_home(self):
        "Create the settings directory and an empty history file."
        self.home.makedirs_p()
        if not self.history.exists():
            self.history.touch()
        return self.home

    def set(self, key, value):
        if key not in self.fields:
            raise ConfigError(f'unknown setting {key!r}')
        setattr(self, key, self.fields[key](key, value))

    def read_rcfile(self):
        if not self.rcfile.exists():
            return
        for lineno, line in enumerate(self.rcfile.read_text().splitlines(), start=1):
            line = line.split('#', 1)[0].strip()
            if not line: continue
            if '=' not in line:
                raise ConfigError(f'{self.rcfile}:{lineno}: expected `key = value`')
            key, value = line.split('=', 1)
            self.set(key.strip(), value)

    def read_environ(self, environ=None):
        environ = os.environ if environ is None else environ
        for key in ('strict', 'verbose'):
            value = environ.get(f'ARITH_{key.upper()}')
            if value is not None:
                self.set(key, value)

    @classmethod
    def load(cls, home=None, environ=None):
        environ = os.environ if environ is None else environ
        if home is None:
            home = environ.get('ARITH_HOME')
        settings = cls(home=home)
        settings.read_rcfile()
        settings.read_environ(environ)
        return settings

    def __repr__(self):
        return f'Settings(home={str(self.home)!r}, strict={self.strict}, verbose={self.verbose}, style={self.style!r})'
