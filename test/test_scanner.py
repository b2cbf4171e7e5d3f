from arith import *
from arith.syntax.tokens import SYMBOLS

import pytest


def test_tokens():
    assert tokenize('12+(3)') == [
        Token.integer(12),
        Token.symbol('+'),
        Token.symbol('('),
        Token.integer(3),
        Token.symbol(')'),
        Token.end(),
    ]

    kinds = [t.kind for t in tokenize('1 - 2 * 3 / 4')]
    assert kinds == [TokenKind.INTEGER, TokenKind.MINUS, TokenKind.INTEGER, TokenKind.MUL,
                     TokenKind.INTEGER, TokenKind.DIVIDE, TokenKind.INTEGER, TokenKind.END]


def test_symbol_payloads():
    for char, kind in SYMBOLS.items():
        [t, end] = tokenize(char)
        assert t.kind is kind
        assert t.literal == char
        assert end.literal is None


def test_empty_input():
    assert tokenize('') == [Token.end()]
    assert tokenize('    ') == [Token.end()]


def test_positions():
    tokens = tokenize(' 1 + 23')
    assert [t.position for t in tokens] == [1, 3, 5, 7]
    assert tokens[2].literal == 23


def test_maximal_digit_run():
    [a, b, end] = tokenize('007 42')
    assert a.literal == 7
    assert b.literal == 42

    # int('...') refuses strings this long, the scanner does not
    [t, _] = tokenize('1' + '0' * 5000)
    assert t.literal == 10 ** 5000


def test_invalid_character():
    with pytest.raises(InvalidCharacter) as e:
        tokenize('2 & 3')
    assert e.value.char == '&'
    assert e.value.position == 2

    # only the space character separates tokens
    with pytest.raises(InvalidCharacter):
        tokenize('1\t+ 1')

    # non-ASCII digits are not digits here
    with pytest.raises(InvalidCharacter):
        tokenize('2²')

    with pytest.raises(InvalidCharacter):
        tokenize('1.5')


def test_lazy():
    s = Scanner('1 + &')
    assert s.next_token() == Token.integer(1)
    assert s.next_token() == Token.symbol('+')
    with pytest.raises(InvalidCharacter):
        s.next_token()


def test_iteration_ends_after_end_token():
    s = Scanner('1')
    assert list(s) == [Token.integer(1), Token.end()]
    with pytest.raises(StopIteration):
        next(s)


def test_token_value_semantics():
    t = Token.integer(3, position=0)
    assert t == Token.integer(3, position=10)
    assert hash(t) == hash(Token.integer(3))
    assert t != Token.integer(4)
    assert repr(t) == 'Token(INTEGER, 3)'
    assert repr(Token.end()) == 'Token(END, None)'

    with pytest.raises(AttributeError):
        t.literal = 4
