import re, sys, traceback
import logging

from argparse import ArgumentParser

import pygments.styles
from prompt_toolkit import PromptSession
from prompt_toolkit.auto_suggest import AutoSuggestFromHistory
from prompt_toolkit.completion import Completer, Completion, PathCompleter
from prompt_toolkit.document import Document
from prompt_toolkit.formatted_text import ANSI
from prompt_toolkit.history import FileHistory
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.lexers import PygmentsLexer
from prompt_toolkit.styles import style_from_pygments_cls
from prompt_toolkit.validation import Validator

from arith.api import evaluate, tokenize, parse
from arith.config import Settings
from arith.exceptions import EvaluationError, InvalidCharacter, ConfigError
from arith.syntax.nodes import dump
from arith.syntax.pygments_lexer import ArithLexer
from arith.util import colors, format_number

logger = logging.getLogger(__name__)


class REPL:

    def __init__(self, settings=None, args=None):
        self.settings = settings if settings is not None else Settings()
        self.lineno = 0
        self.excpt = None

        if args is not None:
            for f in args.load:
                self.do_load(f)

    @property
    def commands(self):
        return {x[3:] for x in dir(self) if x.startswith('do_')}

    def report(self, err, text):
        print(colors.red % f'{type(err).__name__}: {err}')
        print(err.get_context(text), end='')

    def default(self, line):
        """
        Called when the line does not start with a command; the whole line is
        evaluated as an expression.
        """
        try:
            value = evaluate(line, strict=self.settings.strict)
        except EvaluationError as e:
            self.excpt = sys.exc_info()
            self.report(e, line)
            return None
        print(format_number(value))
        return value

    def do_tokens(self, line):
        """
        Show the token stream of an expression.

          > tokens 1 + 2
          Token(INTEGER, 1)
          Token(PLUS, '+')
          Token(INTEGER, 2)
          Token(END, None)
        """
        try:
            tokens = tokenize(line)
        except EvaluationError as e:
            self.excpt = sys.exc_info()
            self.report(e, line)
            return
        for t in tokens:
            print(t)

    def do_ast(self, line):
        """
        Show the syntax tree of an expression, one node per line.

          > ast 1 - 2 * 3
          MINUS
            1
            MUL
              2
              3
        """
        try:
            tree = parse(line, strict=self.settings.strict)
        except EvaluationError as e:
            self.excpt = sys.exc_info()
            self.report(e, line)
            return
        print(dump(tree))

    def do_strict(self, _):
        "Reject input left over after a complete expression (the default)."
        self.settings.strict = True
        print('strict mode: trailing input is an error')

    def do_lenient(self, _):
        "Ignore input left over after a complete expression, e.g. `1 + 1 )` is 2."
        self.settings.strict = False
        print('lenient mode: trailing input is ignored')

    def do_verbose(self, _):
        """
        Toggle debug logging of tokens, trees and results.
        """
        self.settings.verbose = not self.settings.verbose
        logging.getLogger('arith').setLevel(logging.DEBUG if self.settings.verbose else logging.INFO)
        print(f'verbose {"on" if self.settings.verbose else "off"}')

    def do_load(self, line):
        "Evaluate every line of a file.  Blank lines and lines starting with `#` are skipped."
        results = []
        with open(str(line).strip()) as f:
            for src in f:
                src = src.strip()
                if not src or src.startswith('#'): continue
                print(colors.light.yellow % src, end=' = ')
                results.append(self.default(src))
        return results

    def do_pdb(self, _):
        "Enter the debugger at the point of the last exception"
        if self.excpt is None:
            print('no exception to debug')
            return
        import ipdb
        ipdb.post_mortem(self.excpt[2])

    def do_help(self, line):
        # create help routines based on doc string.
        if line:
            method = getattr(self, f'do_{line.strip()}', None)
            if method and method.__doc__:
                print(method.__doc__)
            else:
                print(f'{line} not found')
        else:
            for x in sorted(self.commands):
                v = getattr(self, 'do_' + x)
                doc = (v.__doc__ or '').strip().split('\n')[0]
                print(colors.bold % x, doc)

    def do_quit(self, *a):
        sys.exit(0)
    do_exit = do_quit

    def parse_cmd(self, x):
        commands = '|'.join(sorted(self.commands))
        [(cmd, args)] = re.findall(f'^\\s*(?:({commands})(?:\\s+|$))?(.*)$', x)
        return [cmd.strip(), args.strip()]

    def runcmd(self, text):
        if not text.strip(): return
        self.lineno += 1

        [cmd, args] = self.parse_cmd(text)
        if cmd:
            return getattr(self, 'do_' + cmd)(args)
        return self.default(args)

    def validate(self, text):
        cmd, args = self.parse_cmd(text)
        if cmd:
            return True
        try:
            tokenize(args)
        except InvalidCharacter:
            return False
        return True

    def cmdloop(self, _=None):
        self.settings.ensure_home()

        bindings = KeyBindings()
        @bindings.add('f4')
        def _(event):
            "F4 toggles verbose logging."
            self.do_verbose(None)

        session = PromptSession(
            lexer = PygmentsLexer(ArithLexer),
            completer = CommandCompleter(self),
            complete_while_typing = True,
            style = style_from_pygments_cls(pygments.styles.get_style_by_name(self.settings.style)),
            history = FileHistory(str(self.settings.history)),
            enable_history_search = True,
            auto_suggest = AutoSuggestFromHistory(),
            key_bindings = bindings,
            validator = Validator.from_callable(
                self.validate,
                error_message = 'expression contains an invalid character',
                move_cursor_to_end = True),
            validate_while_typing = False,
        )

        while True:
            try:
                text = session.prompt(ANSI('\x1b[31m>\x1b[0m '))
            except KeyboardInterrupt:
                print('^C')
                continue  # Control-C pressed. Try again.
            except EOFError:
                break  # Control-D pressed.

            try:
                self.runcmd(text)
            except Exception:
                self.excpt = sys.exc_info()
                print(colors.red % ''.join(traceback.format_exception(*self.excpt)))


class CommandCompleter(Completer):
    "Completes command names at the start of the line and file names after `load`."

    def __init__(self, repl):
        self.repl = repl
        self.paths = PathCompleter()

    def get_completions(self, document, complete_event):
        cmd, args = self.repl.parse_cmd(document.text_before_cursor)
        if cmd == 'load':
            yield from self.paths.get_completions(Document(args), complete_event)
            return

        text = document.text_before_cursor
        if ' ' in text.lstrip():
            return
        word = document.get_word_before_cursor()
        for name in sorted(self.repl.commands):
            if name.startswith(word):
                yield Completion(name, -len(word))


def make_argument_parser():
    parser = ArgumentParser(
        prog='arith',
        description='Evaluate arithmetic expressions.  With no expression an interactive prompt is started.',
        epilog='Use `--` before an expression that starts with `-`, e.g. `arith -- -5 + 3`.',
    )
    parser.add_argument('expression', nargs='*',
                        help='expression to evaluate; the arguments are joined without spaces')
    parser.add_argument('--lenient', action='store_true',
                        help='ignore input left over after a complete expression')
    parser.add_argument('--verbose', action='store_true',
                        help='log tokens, trees and results')
    parser.add_argument('--load', action='append', default=[], metavar='FILE',
                        help='evaluate each line of FILE before the prompt starts')
    return parser


def main(argv=None):
    args = make_argument_parser().parse_args(argv)

    try:
        settings = Settings.load()
    except ConfigError as e:
        print(f'arith: {e}', file=sys.stderr)
        return 2
    if args.lenient: settings.strict = False
    if args.verbose: settings.verbose = True

    logging.basicConfig(level=logging.DEBUG if settings.verbose else logging.INFO,
                        format='%(name)s: %(message)s')

    if args.expression:
        text = ''.join(args.expression)
        try:
            value = evaluate(text, strict=settings.strict)
        except EvaluationError as e:
            print(f'{type(e).__name__}: {e}', file=sys.stderr)
            print(e.get_context(text), end='', file=sys.stderr)
            return 1
        print(format_number(value))
        return 0

    try:
        repl = REPL(settings, args)
    except OSError as e:
        print(f'arith: {e}', file=sys.stderr)
        return 2
    repl.cmdloop()
    return 0


if __name__ == '__main__':
    sys.exit(main())
