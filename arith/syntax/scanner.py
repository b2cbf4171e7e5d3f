"""
Lexical scanner: turns the source text into tokens, one per call.
"""

import logging

from arith.exceptions import InvalidCharacter
from arith.syntax.tokens import Token, TokenKind, SYMBOLS

logger = logging.getLogger(__name__)

DIGITS = '0123456789'


class Scanner:

    def __init__(self, text):
        self.text = text
        self.pos = 0
        self.current_char = text[0] if text else None
        self.done = False

    def advance(self):
        self.pos += 1
        if self.pos > len(self.text) - 1:
            self.current_char = None
        else:
            self.current_char = self.text[self.pos]

    def skip_whitespace(self):
        while self.current_char == ' ':
            self.advance()

    def integer(self):
        # accumulate digit by digit rather than calling int() on the whole run,
        # int() refuses very long digit strings.
        value = 0
        while self.current_char is not None and self.current_char in DIGITS:
            value = value * 10 + DIGITS.index(self.current_char)
            self.advance()
        return value

    def next_token(self):
        self.skip_whitespace()
        start = self.pos

        if self.current_char is None:
            token = Token.end(start)

        elif self.current_char in DIGITS:
            token = Token.integer(self.integer(), start)

        elif self.current_char in SYMBOLS:
            token = Token.symbol(self.current_char, start)
            self.advance()

        else:
            raise InvalidCharacter(self.current_char, start)

        logger.debug('scanned %r at %d', token, start)
        return token

    def __iter__(self):
        return self

    def __next__(self):
        # END is handed out exactly once, then the stream is finished
        if self.done:
            raise StopIteration
        token = self.next_token()
        if token.kind is TokenKind.END:
            self.done = True
        return token
