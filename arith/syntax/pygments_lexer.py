# -*- coding: utf-8 -*-
"""
Pygments lexer for arithmetic expressions and the REPL command words.
"""

from pygments.lexer import RegexLexer, bygroups
from pygments.token import Text, Keyword, Number, Operator, Punctuation, Error


class ArithLexer(RegexLexer):
    """
    Lexer for arith expressions.
    """
    name = 'Arith'
    aliases = ['arith']
    filenames = ['*.arith']
    mimetypes = ['text/x-arith']

    tokens = {
        'root': [
            # `load` takes a file name, not an expression
            (r'^(load)( +)(.*)$', bygroups(Keyword.Reserved, Text, Text)),

            # REPL commands
            (r'^(help|tokens|ast|strict|lenient|verbose|load|pdb|quit|exit)\b', Keyword.Reserved),

            (r'[0-9]+', Number.Integer),
            (r'[-+*/]', Operator),
            (r'[()]', Punctuation),
            (r' +', Text),

            # the scanner rejects everything else
            (r'.', Error),
        ],
    }

    def analyse_text(text):
        return True
