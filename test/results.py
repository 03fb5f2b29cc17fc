"""
Results module behavioral tests (construction, rendering, equality, sealing).

Scope
- Validate every result variant: fields, user-facing str(), repr and rich repr.
- Validate value equality/hashing and that variants never compare equal across kinds.
- Validate construction constraints and that the variant set is closed.

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from maybeargs.results import Result, Flag, StringArgument, IntegerArgument, ListArgument, RawToken


class TestRendering(TestCase):
    """User-facing forms used in fault messages."""

    def testFlagStr(self):
        self.assertEqual(str(Flag("verbose")), "flag 'verbose'")

    def testStringArgumentStr(self):
        self.assertEqual(str(StringArgument("out", "a.txt")), "string 'out = a.txt'")

    def testIntegerArgumentStr(self):
        self.assertEqual(str(IntegerArgument("jobs", 4)), "int 'jobs = 4'")

    def testListArgumentStr(self):
        self.assertEqual(str(ListArgument("tags", ["a", "b"])), "list 'tags = [a, b]'")

    def testRawTokenStr(self):
        self.assertEqual(str(RawToken("build")), "'build'")

    def testRepr(self):
        self.assertEqual(repr(StringArgument("out", "a.txt")), "string-argument(name='out', value='a.txt')")
        self.assertEqual(repr(RawToken("x")), "raw-token(value='x')")

    def testRichRepr(self):
        self.assertEqual(list(IntegerArgument("n", 1).__rich_repr__()), [("name", "n"), ("value", 1)])


class TestSemantics(TestCase):
    """Equality, immutability and the closed variant set."""

    def testValueEquality(self):
        self.assertEqual(Flag("v"), Flag("v"))
        self.assertNotEqual(Flag("v"), Flag("w"))
        self.assertEqual(hash(ListArgument("t", ["a"])), hash(ListArgument("t", ("a",))))

    def testVariantsAreDisjoint(self):
        self.assertNotEqual(StringArgument("n", "1"), IntegerArgument("n", 1))
        self.assertNotEqual(RawToken("v"), Flag("v"))

    def testListValuesAreFrozen(self):
        values = ["a", "b"]
        result = ListArgument("tags", values)
        values.append("c")
        self.assertEqual(result.values, ("a", "b"))

    def testFieldsAreReadOnly(self):
        result = Flag("v")
        with self.assertRaises(AttributeError):
            result.name = "w"

    def testVariantsAreSealed(self):
        for variant in (Flag, StringArgument, IntegerArgument, ListArgument, RawToken):
            with self.assertRaises(TypeError):
                type("Subclass", (variant,), {})

    def testBaseIsAbstract(self):
        with self.assertRaises(TypeError):
            Result()

    def testMatchStatementDispatch(self):
        match IntegerArgument("jobs", 8):
            case IntegerArgument(name="jobs", value=value):
                self.assertEqual(value, 8)
            case _:
                self.fail("integer argument did not match its own pattern")


class TestConstraints(TestCase):
    """Construction-time type checks."""

    def testNameMustBeString(self):
        with self.assertRaises(TypeError):
            Flag(1)

    def testIntegerValueMustBeInt(self):
        with self.assertRaises(TypeError):
            IntegerArgument("n", "1")
        with self.assertRaises(TypeError):
            IntegerArgument("n", True)

    def testListValuesMustBeStrings(self):
        with self.assertRaises(TypeError):
            ListArgument("t", "abc")
        with self.assertRaises(TypeError):
            ListArgument("t", ["a", 2])


if __name__ == "__main__":
    unittest.main()
