"""
Recursive-descent parser with one token of lookahead.

    expr   := term ( (PLUS | MINUS) term )*
    term   := factor ( (MUL | DIVIDE) factor )*
    factor := (PLUS | MINUS) factor
            | INTEGER
            | LPAREN expr RPAREN

Operators parsed deeper in the call chain bind tighter.
"""

import logging
import sys

from arith.exceptions import UnexpectedToken, NestingTooDeep
from arith.syntax.scanner import Scanner
from arith.syntax.tokens import TokenKind
from arith.syntax.nodes import NumberLiteral, UnaryExpr, BinaryExpr
from arith.util import recursion_limit

logger = logging.getLogger(__name__)

# deepest parenthesis nesting accepted by default
MAX_NESTING = 1000

# each open parenthesis costs expr -> term -> factor
FRAMES_PER_LEVEL = 3


class Parser:

    def __init__(self, scanner, strict=True, max_depth=MAX_NESTING):
        if isinstance(scanner, str):
            scanner = Scanner(scanner)
        self.scanner = scanner
        # when strict, parse() rejects anything left over after the expression
        self.strict = strict
        self.max_depth = max_depth
        self.depth = 0
        self.lookahead = self.scanner.next_token()

    def eat(self, kind):
        token = self.lookahead
        if token.kind is not kind:
            raise UnexpectedToken(kind, token)
        self.lookahead = self.scanner.next_token()
        return token

    def factor(self):
        # a run of prefix signs is read in a loop and wrapped around the
        # operand afterwards, innermost sign last
        signs = []
        while self.lookahead.kind in (TokenKind.PLUS, TokenKind.MINUS):
            signs.append(self.eat(self.lookahead.kind).kind)

        token = self.lookahead
        if token.kind is TokenKind.LPAREN:
            if self.depth >= self.max_depth:
                raise NestingTooDeep(self.max_depth, token.position)
            self.eat(TokenKind.LPAREN)
            self.depth += 1
            node = self.expr()
            self.eat(TokenKind.RPAREN)
            self.depth -= 1
        else:
            # anything else has to be a literal; eat() reports the error otherwise
            self.eat(TokenKind.INTEGER)
            node = NumberLiteral(token.literal)

        for op in reversed(signs):
            node = UnaryExpr(op, node)
        return node

    def term(self):
        node = self.factor()
        while self.lookahead.kind in (TokenKind.MUL, TokenKind.DIVIDE):
            op = self.eat(self.lookahead.kind).kind
            node = BinaryExpr(op, node, self.factor())
        return node

    def expr(self):
        node = self.term()
        while self.lookahead.kind in (TokenKind.PLUS, TokenKind.MINUS):
            op = self.eat(self.lookahead.kind).kind
            node = BinaryExpr(op, node, self.term())
        return node

    def parse(self):
        with recursion_limit(sys.getrecursionlimit() + FRAMES_PER_LEVEL * self.max_depth + 50):
            node = self.expr()
        if self.strict:
            self.eat(TokenKind.END)
        elif self.lookahead.kind is not TokenKind.END:
            logger.debug('ignoring trailing input starting with %r', self.lookahead)
        logger.debug('parsed a %s', type(node).__name__)
        return node
