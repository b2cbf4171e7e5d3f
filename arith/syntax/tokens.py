from enum import Enum


class TokenKind(Enum):
    INTEGER = 'INTEGER'
    PLUS = 'PLUS'
    MINUS = 'MINUS'
    MUL = 'MUL'
    DIVIDE = 'DIVIDE'
    LPAREN = 'LPAREN'
    RPAREN = 'RPAREN'
    END = 'END'


# single character tokens; the literal of these is the character itself
SYMBOLS = {
    '+': TokenKind.PLUS,
    '-': TokenKind.MINUS,
    '*': TokenKind.MUL,
    '/': TokenKind.DIVIDE,
    '(': TokenKind.LPAREN,
    ')': TokenKind.RPAREN,
}


class Token:
    """
    An immutable (kind, literal) pair.

    The literal depends on the kind: INTEGER carries an int, the symbol kinds
    carry their character, END carries None.  `position` is the source offset
    of the first character and is not part of equality.
    """
    __slots__ = ('kind', 'literal', 'position')

    def __init__(self, kind, literal=None, position=None):
        if kind is TokenKind.INTEGER:
            assert isinstance(literal, int) and literal >= 0, literal
        elif kind is TokenKind.END:
            assert literal is None
        else:
            assert SYMBOLS.get(literal) is kind, (kind, literal)
        object.__setattr__(self, 'kind', kind)
        object.__setattr__(self, 'literal', literal)
        object.__setattr__(self, 'position', position)

    def __setattr__(self, name, value):
        raise AttributeError(f'{type(self).__name__} is immutable')

    @classmethod
    def integer(cls, value, position=None):
        return cls(TokenKind.INTEGER, value, position)

    @classmethod
    def symbol(cls, char, position=None):
        return cls(SYMBOLS[char], char, position)

    @classmethod
    def end(cls, position=None):
        return cls(TokenKind.END, None, position)

    def __eq__(self, other):
        return isinstance(other, Token) and self.kind is other.kind and self.literal == other.literal

    def __hash__(self):
        return hash((self.kind, self.literal))

    def __repr__(self):
        return f'Token({self.kind.name}, {self.literal!r})'
