"""
maybeargs faults and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for every fatal parse fault.
  Codes are grouped by domain to keep copy consistent and logs searchable.
- ParserException: base type carrying a message + options, able to render itself
  with rich and to decide between raising and terminating the process.
- trigger(): central entry point to surface a fault (respecting shell/fancy/colorful).
- getdoc(): optional description lookup for a code from the host application.

UX goals
- Short titles, one-sentence bodies, a single clear hint.
- Lowercased tone with readable styling (configurable via __styles__ in __main__).

Integration
- The parser builds a fault and hands it to its reporter, which calls trigger(fault, **ctx).
- In non-shell mode the exception is raised; in shell mode it is rendered via
  rich on stderr and the process exits with status 1.
"""
import copy
import os.path
import sys
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from .utils import Unset

console = Console(stderr=True)


class FaultCode(IntEnum):
    """
    canonical fault codes used by the parser (stable identifiers).

    grouping (by high-level domain)
    - tokens (1110x)
      • MISSING_VALUE: a '-name' marker with nothing after it.
      • UNMATCHED_POSSIBILITY: the next token fits none of the expected shapes.
      • EXHAUSTED_TOKENS: a token was mandatory but the input ended.
    - callers (1120x)
      • RESULT_TYPE: a matched result is not the variant the caller asked for.

    normalize() allows host remapping to custom labels while keeping code-stability.
    """
    # --- token errors (11xxx) ---
    MISSING_VALUE               = 11101
    UNMATCHED_POSSIBILITY       = 11102
    EXHAUSTED_TOKENS            = 11103

    # --- caller errors (11xxx) ---
    RESULT_TYPE                 = 11201

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels. when no mapping
        is present, the numeric value is returned as a string.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


def _program():
    main = __import__("__main__")
    return getattr(main, "__prog__", os.path.basename(sys.argv[0]) or "maybeargs")


class ParserException(Exception):
    """
    base of every fatal parse fault.

    options (all optional, merged by trigger())
    - code: FaultCode shown in the header.
    - title: short header title.
    - hint: one actionable sentence rendered under the message.
    - details: extra lines (e.g. rendered possibilities) shown between message and hint.
    - usage: usage string rendered last.
    - shell / fancy / colorful: runtime rendering switches.
    """

    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        super().__init__(message)
        self.message = message
        self.options = MappingProxyType(options)

    def __str__(self):
        return "" if self.message is Unset else self.message

    def __rich__(self):
        main = __import__("__main__")
        colorful = self.options.get("colorful", True)

        styles = defaultdict(str, {
            # header parts
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #00E5FF",  # neon cyan fault code
            "error-title": "bold #FF4DA6",  # friendly pinky title

            # body
            "error-message": "#C8C8D0",  # soft light gray message
            "error-details": "#FFD166",  # warm amber for expected shapes
            "hint-arrow": "#9CE19C dim",  # gentle green arrow
            "hint": "italic #9CE19C",  # gentle green hint text
            "usage": "dim",
        } | getattr(main, "__styles__", {}))

        def styler(style):
            return styles[style] if colorful else ""

        def text(fragment, style=""):
            if not fragment:
                return Text("")
            if not colorful:
                return Text(str(fragment))
            if isinstance(fragment, Text):
                return fragment
            return Text(str(fragment), style)

        code = self.options.get("code")
        header = Text.assemble(
            "[ ",
            text(_program(), styler("prog-name")),
            " — ",
            text(code.normalize() if code is not None else "", styler("code")),
            " | ",
            text(str(self.options.get("title", "parse error")).title(), styler("error-title")),
            " ]"
        )
        renders = [text(str(self), styler("error-message"))]
        for detail in self.options.get("details", ()):
            renders.append(text(" - " + str(detail), styler("error-details")))
        if hint := self.options.get("hint"):
            renders.append(Text.assemble(text(" → ", styler("hint-arrow")), text(hint, styler("hint"))))
        if usage := self.options.get("usage"):
            renders.append(text(usage, styler("usage")))

        if self.options.get("fancy", False):
            return Panel(Group(*renders), title=header, title_align="left")

        return Group(header, *renders)

    def __trigger__(self):
        if not self.options.get("shell", False):
            raise self from None
        console.print(self)
        sys.exit(1)

    def __replace__(self, *unused, **overrides):
        assert not unused, "unused arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class MissingValueError(ParserException): ...
class UnmatchedPossibilityError(ParserException): ...
class ResultTypeError(ParserException): ...


def trigger(fault, /, **options):
    """
    surface a fault with the given runtime options.

    contract
    - fault must provide __trigger__ and __replace__ methods (see ParserException).
    - options are merged into the fault via __replace__(**options) before triggering.
    - in shell mode, rendering happens via the rich console and the process exits
      with status 1; otherwise the fault is raised.
    """
    if (
        not hasattr(fault, "__trigger__") or
        not callable(fault.__trigger__) or
        not hasattr(fault, "__replace__") or
        not callable(fault.__replace__)
    ):
        raise TypeError("trigger() argument must have a __trigger__ and __replace__ methods")
    copy.replace(fault, **options).__trigger__()


def getdoc(code, /):
    """
    optional documentation fetch for a fault code.

    the host application may expose a __docs__ mapping in __main__ where keys
    are FaultCode instances and values are short documentation strings.
    when not found, returns None.
    """
    if not isinstance(code, FaultCode):
        raise TypeError("getdoc() argument must be a fault-code")
    try:
        return getattr(__import__("__main__"), "__docs__", {})[code]
    except KeyError:
        return None


__all__ = (
    "FaultCode",
    "ParserException",
    "MissingValueError",
    "UnmatchedPossibilityError",
    "ResultTypeError",
    "trigger",
    "getdoc",
)
