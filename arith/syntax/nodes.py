"""
Abstract syntax tree for arithmetic expressions.

The tree is a closed union of three node types: `NumberLiteral`,
`UnaryExpr` and `BinaryExpr`.  Nodes are immutable and compare structurally.
"""

from arith.syntax.tokens import TokenKind, SYMBOLS

UNARY_OPERATORS = (TokenKind.PLUS, TokenKind.MINUS)
BINARY_OPERATORS = (TokenKind.PLUS, TokenKind.MINUS, TokenKind.MUL, TokenKind.DIVIDE)

OPERATOR_TEXT = {kind: char for char, kind in SYMBOLS.items()}


class Node:
    __slots__ = ()

    def __setattr__(self, name, value):
        raise AttributeError(f'{type(self).__name__} is immutable')

    def _init(self, **fields):
        for name, value in fields.items():
            object.__setattr__(self, name, value)

    def _key(self):
        return tuple(getattr(self, name) for name in self.__slots__)

    def __eq__(self, other):
        return type(self) is type(other) and self._key() == other._key()

    def __hash__(self):
        return hash((type(self).__name__,) + self._key())

    def __str__(self):
        return render(self)


class NumberLiteral(Node):
    __slots__ = ('value',)

    def __init__(self, value):
        self._init(value=value)

    def __repr__(self):
        return f'NumberLiteral({self.value!r})'


class UnaryExpr(Node):
    __slots__ = ('operator', 'operand')

    def __init__(self, operator, operand):
        if operator not in UNARY_OPERATORS:
            raise ValueError(f'{operator} is not a unary operator')
        self._init(operator=operator, operand=operand)

    def __repr__(self):
        return f'UnaryExpr({self.operator.name}, {self.operand!r})'


class BinaryExpr(Node):
    __slots__ = ('operator', 'left', 'right')

    def __init__(self, operator, left, right):
        if operator not in BINARY_OPERATORS:
            raise ValueError(f'{operator} is not a binary operator')
        self._init(operator=operator, left=left, right=right)

    def __repr__(self):
        return f'BinaryExpr({self.operator.name}, {self.left!r}, {self.right!r})'


def precedence(node):
    if isinstance(node, BinaryExpr):
        return 2 if node.operator in (TokenKind.MUL, TokenKind.DIVIDE) else 1
    if isinstance(node, UnaryExpr):
        return 3
    return 4


def render(node):
    """Render `node` as source text which parses back to the same tree.

    Parentheses are only added where precedence or left-associativity would
    otherwise regroup the operands.
    """
    def wrap(child, needs_parens):
        s = render(child)
        return f'({s})' if needs_parens else s

    if isinstance(node, NumberLiteral):
        return str(node.value)
    if isinstance(node, UnaryExpr):
        return OPERATOR_TEXT[node.operator] + wrap(node.operand, precedence(node.operand) < 3)
    if isinstance(node, BinaryExpr):
        p = precedence(node)
        left = wrap(node.left, precedence(node.left) < p)
        right = wrap(node.right, precedence(node.right) <= p)
        return f'{left} {OPERATOR_TEXT[node.operator]} {right}'
    raise TypeError(f'not an expression node: {node!r}')


def dump(node, indent=0):
    "Indented, one node per line view of the tree (used by the REPL)."
    pad = '  ' * indent
    if isinstance(node, NumberLiteral):
        return f'{pad}{node.value}'
    if isinstance(node, UnaryExpr):
        return f'{pad}{node.operator.name}\n{dump(node.operand, indent + 1)}'
    if isinstance(node, BinaryExpr):
        return f'{pad}{node.operator.name}\n{dump(node.left, indent + 1)}\n{dump(node.right, indent + 1)}'
    raise TypeError(f'not an expression node: {node!r}')
