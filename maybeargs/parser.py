"""
maybeargs parsing engine: classify tokens and match them against possibilities.

What this module provides
- Parser: owns a TokenCursor over the invocation tokens and a Reporter, and offers
  • next()/any(): classify the next token into a Result (or None at the end).
  • expect(*possibilities, type=...): mandatory match; fatal on mismatch.
  • optional(*possibilities): match or rewind and return None.
  • persistent(possibility): find and claim a match anywhere ahead without
    moving the cursor.
  • command/argument/arguments/flag: narrow single-literal reads.

Classification (in priority order)
1. '--name' (longer than 2)   → Flag(name), markers and surrounding whitespace removed.
2. '-name value' (longer than 1) → the value token is mandatory:
   • list when the value ends with ',' or the following token starts with ','
     → ListArgument(name, values); every collected value is logged (tag "value").
   • otherwise the value is trimmed and unquoted; '[+-]?[0-9]+' → IntegerArgument,
     anything else → StringArgument.
3. anything else → RawToken(token).

Faults
- Every fatal path goes through reporter.fail(); in shell mode the process exits
  with status 1, otherwise the fault is raised (see maybeargs.faults).

Quick example
    from maybeargs import Parser, argument, flag, raw, ArgumentKind, RawToken

    parser = Parser("build -jobs 4 --verbose", usage="tool build [-jobs N] [--verbose]")
    verbose = parser.persistent(flag("verbose"))
    command = parser.expect(raw("build"), raw("clean"), type=RawToken)
    jobs = parser.optional(argument("jobs", "j", ArgumentKind.INTEGER, "parallel jobs"))
"""
import builtins
import re
import shlex
import sys
from collections.abc import Iterable

from .cursor import TokenCursor
from .faults import *
from .possibilities import Possibility, PossibilitySet
from .reporter import Reporter
from .results import *
from .utils import *

SEPARATOR = ","
QUOTE = '"'

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _unquote(value):
    return value.strip().strip(QUOTE)


def _trim(value):
    return value.strip().strip(SEPARATOR).strip()


def _tokenize(prompt):
    """
    Normalize a prompt into a tuple of tokens.

    - Unset: sys.argv[1:].
    - str: shell-style splitting via shlex.split.
    - Iterable[str]: used as-is (tokens are never trimmed or dropped).
    """
    if prompt is Unset:
        return tuple(sys.argv[1:])
    if isinstance(prompt, str):
        return tuple(shlex.split(prompt))
    if isinstance(prompt, Iterable):
        tokens = tuple(prompt)
        for token in tokens:
            if not isinstance(token, str):
                raise TypeError("Parser() argument must be a string or an iterable of strings")
        return tokens
    raise TypeError("Parser() argument must be a string or an iterable of strings")


class Parser:
    """
    Command-line token parser with backtracking and persistent scans.

    Parameters
    - prompt: Unset | str | Iterable[str]
      Tokens to parse (defaults to sys.argv[1:]).
    - usage: Unset | str
      Usage line appended to mismatch faults.
    - shell, fancy, colorful: bool
      Runtime switches for the default Reporter (ignored when a reporter is given).
    - reporter: Unset | Reporter-like
      Object offering log and fail; receives every side effect.
    """

    tokens = property(lambda self: self._cursor.tokens)
    position = property(lambda self: self._cursor.position)
    cursor = mirror("cursor")
    usage = mirror("usage")
    reporter = mirror("reporter")

    def __init__(self, prompt=Unset, /, usage=Unset, *, shell=True, fancy=False, colorful=True, reporter=Unset):
        if not isinstance(usage, str | Unset):
            raise TypeError("Parser() 'usage' must be a string")
        elif isinstance(usage, str) and not (usage := usage.strip()):
            raise ValueError("Parser() 'usage' cannot be empty")
        if reporter is Unset:
            reporter = Reporter(shell=shell, fancy=fancy, colorful=colorful)
        elif not all(callable(getattr(reporter, name, None)) for name in ("log", "fail")):
            raise TypeError("Parser() 'reporter' must provide log and fail methods")
        self._cursor = TokenCursor(_tokenize(prompt))
        self._usage = coalesce(usage)
        self._reporter = reporter

    # ── classification ──────────────────────────────────────────────────────

    def _value(self, name):
        # the value after a '-name' marker is mandatory
        value = self._cursor.take()
        if value is None:
            self._reporter.fail(MissingValueError(
                "expected value for argument %r" % name,
                title="missing value",
                code=FaultCode.MISSING_VALUE,
                hint="pass a value after '-%s' (for example: -%s <value>)" % (name, name),
                argument=name,
                usage=self._usage,
                docs=getdoc(FaultCode.MISSING_VALUE),
            ))
        return value

    def _continues(self, token):
        following = self._cursor.peek()
        return token.endswith(SEPARATOR) or (following is not None and following.startswith(SEPARATOR))

    def _collect(self, value):
        """
        Collect comma-continued list values, starting with `value`.

        Every token is trimmed of separators and whitespace; empty leftovers
        (a lone ',') are dropped. Collection stops at the first token that
        neither ends with ',' nor is followed by a token starting with ',',
        or when the tokens run out.
        """
        values = []
        token = value
        while True:
            if item := _trim(token):
                values.append(item)
                self._reporter.log(item, "value")
            if not self._continues(token) or (token := self._cursor.take()) is None:
                return values

    def next(self):
        """
        Classify the next token into a Result; None when the tokens are exhausted.
        """
        token = self._cursor.take()
        if token is None:
            return None

        if token.startswith("--") and len(token) > 2:
            return Flag(token.lstrip("-").strip())

        if token.startswith("-") and len(token) > 1:
            name = token.lstrip("-")
            value = self._value(name)
            if self._continues(value):
                return ListArgument(name, self._collect(value))
            # int() tolerates the whitespace left inside the quotes
            if _INTEGER.fullmatch((value := _unquote(value)).strip()):
                return IntegerArgument(name, int(value))
            return StringArgument(name, value)

        return RawToken(token)

    def any(self):
        """
        Return whatever the next token classifies to, without matching.
        """
        return self.next()

    # ── possibility matching ────────────────────────────────────────────────

    def _unmatched(self, result, possibilities):
        if result is None:
            message = "no more arguments, expected one of:"
            code = FaultCode.EXHAUSTED_TOKENS
            title = "missing argument"
        else:
            message = "invalid %s, expected one of:" % result
            code = FaultCode.UNMATCHED_POSSIBILITY
            title = "unexpected argument"
        self._reporter.fail(UnmatchedPossibilityError(
            message,
            title=title,
            code=code,
            received=result,
            possibilities=possibilities,
            details=tuple(possibilities.render().splitlines()),
            hint="pass one of the forms listed above",
            usage=self._usage,
            docs=getdoc(code),
        ))

    def expect(self, *possibilities, type=Unset):
        """
        Classify the next token and return it if any possibility matches.

        Parameters
        - *possibilities: Possibility (at least one)
        - type: Unset | type[Result]
          When given, the matched result must be an instance of it; anything
          else is a programming error in the caller and is fatal as well.

        Returns
        - Result: the matched result. On mismatch (or exhausted tokens) the
          reporter fails and this method does not return.
        """
        if type is not Unset and not (isinstance(type, builtins.type) and issubclass(type, Result)):
            raise TypeError("expect() 'type' must be a result class")
        possibilities = PossibilitySet(possibilities)

        result = self.next()
        if not possibilities.has(result):
            self._unmatched(result, possibilities)

        if type is not Unset and not isinstance(result, type):
            self._reporter.fail(ResultTypeError(
                "faulty parser, tried parsing a possibility into an invalid type: "
                "expected %s, found %s" % (type.__name__, builtins.type(result).__name__),
                title="result type mismatch",
                code=FaultCode.RESULT_TYPE,
                expected=type,
                received=result,
                hint="declare possibilities that produce %s, or expect a different type" % type.__name__,
                docs=getdoc(FaultCode.RESULT_TYPE),
            ))
        return result

    def optional(self, *possibilities):
        """
        Classify the next token and return it if any possibility matches.

        On mismatch every token read for the attempt is given back and None
        is returned; the position is the same as before the call.
        """
        possibilities = PossibilitySet(possibilities)
        checkpoint = self._cursor.checkpoint()
        result = self.next()
        if not possibilities.has(result):
            self._cursor.rewind(checkpoint)
            return None
        return result

    def persistent(self, possibility, /):
        """
        Look for `possibility` anywhere in the remaining tokens.

        The scan classifies token after token until one matches. The tokens
        of the matching step (a flag, or a '-name value' pair) are claimed so
        later sequential reads skip them. The position is restored before
        returning, whether or not a match was found.

        Returns
        - Result | None
        """
        if not isinstance(possibility, Possibility):
            raise TypeError("persistent() argument must be a possibility")
        checkpoint = self._cursor.checkpoint()
        try:
            while True:
                start = self._cursor.position
                if (result := self.next()) is None:
                    return None
                if possibility.matches(result):
                    self._cursor.claim(range(start, self._cursor.position))
                    return result
        finally:
            self._cursor.rewind(checkpoint)

    # ── narrow reads ────────────────────────────────────────────────────────

    def command(self, *names):
        """
        Return the next token if it is one of `names`; otherwise give it back and return None.
        """
        if not all(isinstance(name, str) for name in names):
            raise TypeError("command() arguments must be strings")
        token = self._cursor.take()
        if token is not None and token in names:
            return token
        self._cursor.backtrack()
        return None

    def _named(self):
        # '-name value' at the cursor, as (name, value); None when no marker
        token = self._cursor.take()
        if token is None or not token.startswith("-") or len(token) < 2:
            return None
        name = token.lstrip("-")
        return name, self._value(name)

    @staticmethod
    def _accepts(name, long, short):
        # no names given: any '-name value' marker matches
        return (long is Unset and short is Unset) or name == long or name == short

    def argument(self, long=Unset, short=Unset):
        """
        Return the raw value of the next '-name value' pair when name is `long`
        or `short` (any name when both are omitted).

        A marker without a value is fatal. On any other mismatch the cursor is
        rewound and None is returned.
        """
        if not isinstance(long, str | Unset) or not isinstance(short, str | Unset):
            raise TypeError("argument() names must be strings")
        checkpoint = self._cursor.checkpoint()
        if (pair := self._named()) is not None and self._accepts(pair[0], long, short):
            return pair[1]
        self._cursor.rewind(checkpoint)
        return None

    def arguments(self, long, short=Unset):
        """
        Return the values of the next '-name a, b, c' argument as a list.

        Unlike next(), this reader has no lookahead: the list continues only
        while each value ends with ','. The first token that does not end with
        ',' stops the list and is left unread. A single value without a
        trailing ',' is returned unquoted as a one-element list.

        A marker without a value is fatal. On mismatch the cursor is rewound
        and None is returned.
        """
        if not isinstance(long, str) or not isinstance(short, str | Unset):
            raise TypeError("arguments() names must be strings")
        checkpoint = self._cursor.checkpoint()
        if (pair := self._named()) is not None and self._accepts(pair[0], long, short):
            value = pair[1]
            if not value.endswith(SEPARATOR):
                return [_unquote(value)]
            values = [value.rstrip(SEPARATOR)]
            while (token := self._cursor.take()) is not None:
                if not token.endswith(SEPARATOR):
                    self._cursor.backtrack()
                    break
                values.append(token.rstrip(SEPARATOR))
            return values
        self._cursor.rewind(checkpoint)
        return None

    def flag(self, name, /):
        """
        Return True when the next token is exactly '--name'; otherwise give it back and return False.
        """
        if not isinstance(name, str):
            raise TypeError("flag() argument must be a string")
        token = self._cursor.take()
        if token is not None and token.startswith("--") and token[2:] == name:
            return True
        self._cursor.backtrack()
        return False

    def __repr__(self):
        if not hasattr(self, "_cursor"):
            # __init__ failed before the tokens were read
            return "Parser()"
        return "Parser(tokens=%r, position=%d, usage=%r)" % (self.tokens, self.position, self._usage)


__all__ = (
    "SEPARATOR",
    "Parser",
)
