from .exceptions import *

from .syntax import (
    Token, TokenKind, Scanner, Parser,
    NumberLiteral, UnaryExpr, BinaryExpr, render,
)
from .evaluator import Evaluator
from .api import evaluate, tokenize, parse
