import math
import random

from arith import *
from arith.syntax.parser import MAX_NESTING
from arith.util import format_number

import pytest

PLUS, MINUS, MUL = TokenKind.PLUS, TokenKind.MINUS, TokenKind.MUL


def test_precedence():
    assert evaluate('2 + 3 * 4') == 14
    assert evaluate('(2 + 3) * 4') == 20
    assert evaluate('2 * 3 + 4 * 5') == 26


def test_left_associative():
    assert evaluate('10 - 2 - 3') == 5
    assert evaluate('100 / 10 / 5') == 2
    assert evaluate('10 - 2 + 3') == 11


def test_unary():
    assert evaluate('- -5') == 5
    assert evaluate('-(2+3)') == -5
    assert evaluate('- - - 5') == -5
    assert evaluate('+7') == 7
    assert evaluate('-2 * -3') == 6


def test_whitespace():
    assert evaluate('1+1') == evaluate(' 1 + 1 ') == 2
    assert evaluate('   (  4   )   ') == 4


def test_real_division():
    assert evaluate('7 / 2') == 3.5
    assert evaluate('1 / 3 * 3') == pytest.approx(1)
    assert isinstance(evaluate('4 / 2'), float)


def test_division_by_zero():
    assert evaluate('1 / 0') == math.inf
    assert evaluate('-1 / 0') == -math.inf
    assert evaluate('1 / -0') == -math.inf
    assert evaluate('-1 / -(0)') == math.inf
    assert math.isnan(evaluate('0 / 0'))
    assert math.isnan(evaluate('1 / 0 - 1 / 0'))
    assert math.isnan(evaluate('1 / 0 * 0'))
    assert evaluate('1 / (1 / 0)') == 0


def test_huge_literals():
    assert evaluate('1' + '0' * 400) == math.inf
    assert evaluate('-1' + '0' * 400) == -math.inf
    assert evaluate('1' + '0' * 20) == 1e20


def test_errors():
    with pytest.raises(InvalidCharacter):
        evaluate('2 & 3')
    with pytest.raises(UnexpectedToken):
        evaluate('(1 + 2')
    with pytest.raises(UnexpectedToken):
        evaluate('1 +')
    with pytest.raises(UnexpectedToken):
        evaluate('')

    # both failure classes share a base class
    for src in ['2 & 3', '1 +']:
        with pytest.raises(EvaluationError):
            evaluate(src)


def test_trailing_input():
    with pytest.raises(UnexpectedToken):
        evaluate('1 + 1 )')
    assert evaluate('1 + 1 )', strict=False) == 2


def test_repeatable():
    src = '(3 + 4) * -2 / 7'
    assert evaluate(src) == evaluate(src) == -2


def test_interpret():
    assert Evaluator('6 * 7').interpret() == 42
    assert Evaluator(Parser(Scanner('6 * 7'))).interpret() == 42
    assert Evaluator('1 )', strict=False).interpret() == 1


def test_visit():
    tree = BinaryExpr(MINUS, NumberLiteral(1), UnaryExpr(MINUS, NumberLiteral(2)))
    assert Evaluator().visit(tree) == 3
    # the tree is left untouched
    assert tree == BinaryExpr(MINUS, NumberLiteral(1), UnaryExpr(MINUS, NumberLiteral(2)))

    with pytest.raises(TypeError):
        Evaluator().visit('1 + 2')


def random_tree(rng, depth):
    if depth == 0 or rng.random() < 0.3:
        return NumberLiteral(rng.randint(0, 20))
    return BinaryExpr(rng.choice([PLUS, MINUS, MUL]),
                      random_tree(rng, depth - 1),
                      random_tree(rng, depth - 1))


def test_render_round_trip():
    rng = random.Random(0)
    for _ in range(200):
        tree = random_tree(rng, 5)
        src = render(tree)
        assert parse(src) == tree, src
        assert evaluate(src) == Evaluator().visit(tree), src


def test_long_sign_runs():
    assert evaluate('-' * 5000 + '1') == 1
    assert evaluate('-' * 5001 + '1') == -1
    assert evaluate('+-' * 3000 + '2') == 2


def test_long_operator_chains():
    assert evaluate('1' + ' + 1' * 5000) == 5001
    assert evaluate('2' + ' * 1' * 5000) == 2


def test_deep_parentheses():
    assert evaluate('(' * 500 + '1' + ')' * 500) == 1
    assert evaluate('(1 + ' * 500 + '1' + ')' * 500) == 501
    assert evaluate('-(' * 500 + '3' + ')' * 500) == 3

    with pytest.raises(NestingTooDeep) as e:
        evaluate('(' * 5000)
    assert isinstance(e.value, EvaluationError)
    assert e.value.position == MAX_NESTING


def test_format_negative_zero():
    assert format_number(evaluate('-0')) == '-0'
    assert format_number(evaluate('0 * -1')) == '-0'
    assert format_number(evaluate('0')) == '0'
