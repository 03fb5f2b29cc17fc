"""
Reporter module behavioral tests (line format, failure seam).

Scope
- Validate the log line layout: every tag right-aligned in a fixed-width field.
- Validate each()/error() as thin layers over log().
- Validate fail(): raising in embedded mode, exit status 1 in shell mode, and that
  it never returns even for faults whose trigger does not stop the flow.

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import io
import sys
import unittest
from contextlib import redirect_stderr
from unittest import TestCase

from rich.console import Console

from maybeargs.faults import MissingValueError, FaultCode
from maybeargs.reporter import Reporter, WIDTH


class QuietFault(Exception):
    """Fault whose trigger returns instead of raising or exiting."""

    triggered = False

    def __trigger__(self):
        QuietFault.triggered = True

    def __replace__(self, **options):
        return self


class TestLogging(TestCase):
    """Line layout of log/each/error."""

    def setUp(self) -> None:
        self.console = Console(file=io.StringIO(), width=200, color_system=None)
        self.reporter = Reporter(shell=False, colorful=False, console=self.console)

    def output(self):
        return self.console.file.getvalue()

    def testTagIsRightAligned(self):
        self.reporter.log("a", "value")
        self.assertEqual(self.output(), "value".rjust(WIDTH) + " a\n")

    def testSeveralTags(self):
        self.reporter.log("x", "parser", "value")
        self.assertEqual(self.output(), "parser".rjust(WIDTH) + "value".rjust(WIDTH) + " x\n")

    def testNoTag(self):
        self.reporter.log("plain")
        self.assertEqual(self.output(), " plain\n")

    def testItemIsStringified(self):
        self.reporter.log(42, "value")
        self.assertEqual(self.output(), "value".rjust(WIDTH) + " 42\n")

    def testEachSkipsNone(self):
        self.reporter.each(["a", None, "b"], "value")
        self.assertEqual(self.output(), "value".rjust(WIDTH) + " a\n" + "value".rjust(WIDTH) + " b\n")

    def testError(self):
        self.reporter.error("boom")
        self.assertEqual(self.output(), "error".rjust(WIDTH) + " boom\n")

    def testMarkupIsNotInterpreted(self):
        self.reporter.log("[bold]x[/bold]", "value")
        self.assertIn("[bold]x[/bold]", self.output())


class TestFailure(TestCase):
    """The single exit seam."""

    def testRaisesWhenEmbedded(self):
        reporter = Reporter(shell=False)
        with self.assertRaises(MissingValueError) as context:
            reporter.fail(MissingValueError("m", code=FaultCode.MISSING_VALUE))
        self.assertFalse(context.exception.options["shell"])
        self.assertTrue(context.exception.options["colorful"])

    def testExitsWithStatusOneInShell(self):
        reporter = Reporter(colorful=False)
        with redirect_stderr(io.StringIO()) as stderr, self.assertRaises(SystemExit) as context:
            reporter.fail(MissingValueError("expected value for argument 'x'"))
        self.assertEqual(context.exception.code, 1)
        self.assertIn("expected value for argument 'x'", stderr.getvalue())

    def testNeverReturns(self):
        QuietFault.triggered = False
        with self.assertRaises(QuietFault):
            Reporter(shell=False).fail(QuietFault())
        self.assertTrue(QuietFault.triggered)


class TestConstruction(TestCase):
    """Constructor switches."""

    def testDefaults(self):
        reporter = Reporter()
        self.assertTrue(reporter.shell)
        self.assertFalse(reporter.fancy)
        self.assertTrue(reporter.colorful)
        self.assertIsInstance(reporter.console, Console)

    def testConsoleMustBeRichConsole(self):
        with self.assertRaises(TypeError):
            Reporter(console=sys.stderr)

    def testRepr(self):
        self.assertEqual(repr(Reporter(shell=False)), "Reporter(shell=False, fancy=False, colorful=True)")


if __name__ == "__main__":
    unittest.main()
