"""
Tree-walking evaluator.

Arithmetic is done on doubles, and division by zero gives what a double
gives (+-inf, or nan for 0/0) instead of raising ZeroDivisionError.
"""

import logging
import math
import operator

from arith.syntax.parser import Parser
from arith.syntax.tokens import TokenKind
from arith.syntax.nodes import NumberLiteral, UnaryExpr, BinaryExpr

logger = logging.getLogger(__name__)


def to_number(value):
    try:
        return float(value)
    except OverflowError:
        return math.inf


def divide(a, b):
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


UNARY = {
    TokenKind.PLUS: operator.pos,
    TokenKind.MINUS: operator.neg,
}

BINARY = {
    TokenKind.PLUS: operator.add,
    TokenKind.MINUS: operator.sub,
    TokenKind.MUL: operator.mul,
    TokenKind.DIVIDE: divide,
}


class Evaluator:

    def __init__(self, parser=None, strict=True):
        if isinstance(parser, str):
            parser = Parser(parser, strict=strict)
        self.parser = parser

    def visit(self, node):
        # post-order walk over an explicit stack; long operator chains and sign
        # runs build trees far deeper than the recursion limit
        values = []
        stack = [(node, False)]
        while stack:
            node, children_done = stack.pop()
            if isinstance(node, NumberLiteral):
                values.append(to_number(node.value))
            elif isinstance(node, UnaryExpr):
                if children_done:
                    values.append(UNARY[node.operator](values.pop()))
                else:
                    stack.append((node, True))
                    stack.append((node.operand, False))
            elif isinstance(node, BinaryExpr):
                if children_done:
                    right = values.pop()
                    left = values.pop()
                    values.append(BINARY[node.operator](left, right))
                else:
                    stack.append((node, True))
                    stack.append((node.right, False))
                    stack.append((node.left, False))
            else:
                raise TypeError(f'cannot evaluate {node!r}')
        [result] = values
        return result

    def interpret(self):
        assert self.parser is not None, 'interpret() needs a parser, use visit() for a bare tree'
        tree = self.parser.parse()
        result = self.visit(tree)
        logger.debug('result %r', result)
        return result
