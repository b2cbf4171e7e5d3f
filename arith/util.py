import math
import sys
from contextlib import contextmanager


def ansi(color=None, light=None, bg=3):
    return '\x1b[%s;%s%sm' % (light, bg, color)

_reset = '\x1b[0m'

def colorstring(s, c):
    return c + s + _reset


class colors:
    black, red, green, yellow, blue, magenta, cyan, white = \
        [colorstring('%s', ansi(c, 0)) for c in range(8)]

    class light:
        black, red, green, yellow, blue, magenta, cyan, white = \
            [colorstring('%s', ansi(c, 1)) for c in range(8)]

    bold = '\x1b[1m%s\x1b[0m'
    reset = _reset


def format_number(x):
    "Print numbers the way a JavaScript console does: `5`, `3.5`, `Infinity`, `NaN`."
    if math.isnan(x):
        return 'NaN'
    if math.isinf(x):
        return 'Infinity' if x > 0 else '-Infinity'
    if x == 0 and math.copysign(1.0, x) < 0:
        return '-0'
    if x == int(x) and abs(x) < 1e21:
        return str(int(x))
    return repr(x)


@contextmanager
def recursion_limit(limit):
    "Raise the interpreter's recursion limit to at least `limit` for the duration of the block."
    was = sys.getrecursionlimit()
    sys.setrecursionlimit(max(was, limit))
    try:
        yield
    finally:
        sys.setrecursionlimit(was)
