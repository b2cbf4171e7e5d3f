# the public entry points; each call builds its own scanner, parser and evaluator

from arith.syntax.scanner import Scanner
from arith.syntax.parser import Parser
from arith.evaluator import Evaluator


def tokenize(text):
    "Returns the token stream of `text`, ending with the END token."
    return list(Scanner(text))


def parse(text, strict=True):
    return Parser(Scanner(text), strict=strict).parse()


def evaluate(text, strict=True):
    """
    Evaluate an arithmetic expression and return its value as a float.

      >>> evaluate('2 + 3 * 4')
      14.0

    Raises `InvalidCharacter` or `UnexpectedToken` (both `EvaluationError`)
    on malformed input.  With `strict=False` anything after the first complete
    expression is ignored.
    """
    return Evaluator(Parser(Scanner(text), strict=strict)).interpret()
