from .tokens import Token, TokenKind
from .scanner import Scanner
from .nodes import Node, NumberLiteral, UnaryExpr, BinaryExpr, render, dump
from .parser import Parser
