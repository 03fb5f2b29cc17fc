"""
maybeargs reporter: leveled line logging and the single exit seam for faults.

What this module provides
- Reporter: the black box the parser talks to for every observable side effect.
  • log(item, *tags): one line; every tag right-aligned in a 20-column field,
    followed by the item (e.g. collected list values are logged with tag "value").
  • each(items, *tags): log() for every item, in order.
  • error(item): log() with the "error" tag.
  • fail(fault): hand a fault to faults.trigger() with this reporter's runtime
    options. Never returns: in shell mode the fault is rendered and the process
    exits with status 1; otherwise the fault is raised.

Styling
- Tags are styled through a palette keyed "tag-<name>" ("tag-value", "tag-error",
  "tag-expected"), overridable via __styles__ in __main__. Unknown tags use
  "tag-default". colorful=False strips every style.

Embedding
- Any object offering log and fail can stand in for Reporter; the parser only
  calls through these two methods. each/error are conveniences for host code.
"""
from collections import defaultdict

from rich.console import Console
from rich.text import Text

from .faults import trigger
from .utils import *

WIDTH = 20


class Reporter:
    """
    Console-backed reporter (stderr by default).

    Parameters
    - shell: bool
      When True, fail() prints the fault and exits with status 1; otherwise it raises.
    - fancy: bool
      Render faults inside a rich Panel.
    - colorful: bool
      Enable styles for tags and faults.
    - console: Console | Unset
      Target console; a stderr console is created when omitted.
    """

    def __init__(self, *, shell=True, fancy=False, colorful=True, console=Unset):
        if not isinstance(console, Console | Unset):
            raise TypeError("Reporter() 'console' must be a rich console")
        self.shell = bool(shell)
        self.fancy = bool(fancy)
        self.colorful = bool(colorful)
        self.console = Console(stderr=True) if console is Unset else console

    def _styler(self, tag):
        styles = defaultdict(str, {
            "tag-default": "bold",
            "tag-value": "bold #3B82F6",  # blue, collected values
            "tag-error": "bold #FF4D4D",  # red, failures
            "tag-expected": "bold #FF4D4D",  # red, expected shapes
        } | getattr(__import__("__main__"), "__styles__", {}))
        if not self.colorful:
            return ""
        return styles.get("tag-" + tag, styles["tag-default"])

    def log(self, item, /, *tags):
        line = Text()
        for tag in map(str, tags):
            line.append(tag.rjust(WIDTH), self._styler(tag))
        line.append(" ").append(str(item))
        self.console.print(line, highlight=False, soft_wrap=True)

    def each(self, items, /, *tags):
        for item in items:
            if item is not None:
                self.log(item, *tags)

    def error(self, item, /):
        self.log(item, "error")

    def fail(self, fault, /, **options):
        trigger(fault, **options, shell=self.shell, fancy=self.fancy, colorful=self.colorful)
        # custom faults may return from __trigger__; fail() never does
        raise fault

    def __repr__(self):
        return "Reporter(shell=%r, fancy=%r, colorful=%r)" % (self.shell, self.fancy, self.colorful)


__all__ = (
    "Reporter",
)
