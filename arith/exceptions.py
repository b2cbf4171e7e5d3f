class EvaluationError(Exception):
    """Base class for everything that can go wrong while evaluating an expression.

    Both failure classes are fatal: the first one raised ends the evaluation
    and no partial result is produced.
    """

    def __init__(self, msg=None, position=None):
        super().__init__(msg)
        self.position = position

    def get_context(self, text, span=40):
        "Show the source around `position` with a caret underneath it."
        if self.position is None:
            return text
        pos = min(self.position, len(text))
        start = max(pos - span, 0)
        before = text[start:pos]
        after = text[pos:pos + span]
        return f'{before}{after}\n{" " * len(before)}^\n'


class InvalidCharacter(EvaluationError):
    "The scanner hit a character that does not start any token."

    def __init__(self, char, position):
        super().__init__(f'invalid character {char!r} at position {position}', position)
        self.char = char


class UnexpectedToken(EvaluationError):
    "The parser's lookahead did not match what the grammar required."

    def __init__(self, expected, token):
        super().__init__(f'expected {expected.name}, found {token} at position {token.position}',
                         token.position)
        self.expected = expected
        self.token = token


class NestingTooDeep(EvaluationError):
    "Parentheses nested deeper than the parser accepts."

    def __init__(self, limit, position):
        super().__init__(f'parentheses nested deeper than {limit} at position {position}', position)
        self.limit = limit


class ConfigError(Exception):
    pass
