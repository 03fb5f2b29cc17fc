"""
Tests for the internal utilities.

This module verifies the guarantees the other layers rely on:
- The `Unset` sentinel: singleton identity, falsy semantics, union support, finality.
- `coalesce` keeps legitimate falsy values.
- `rename` and `mirror` produce stable names and read-only views.
- `ModelType` derives typenames and seals final classes.
"""
import copy
import unittest
from unittest import TestCase

from maybeargs.utils import *


class UnsetTest(TestCase):
    """
    Test suite for the `Unset` sentinel.
    """

    def testSingleton(self) -> None:
        """
        The constructor returns the module-level instance on every call.
        """
        self.assertIs(UnsetType(), Unset)

    def testFalsy(self) -> None:
        """
        The sentinel is falsy but distinct from None and "".
        """
        self.assertFalse(Unset)
        self.assertIsNot(Unset, None)
        self.assertNotEqual(Unset, "")

    def testRepr(self) -> None:
        self.assertEqual(repr(Unset), "Unset")

    def testUnionInIsinstance(self) -> None:
        """
        `str | Unset` and `Unset | str` both work as isinstance targets.
        """
        self.assertTrue(isinstance(Unset, str | Unset))
        self.assertTrue(isinstance("x", Unset | str))
        self.assertFalse(isinstance(1, str | Unset))

    def testCopyPreservesSingleton(self) -> None:
        self.assertIs(copy.copy(Unset), Unset)
        self.assertIs(copy.deepcopy(Unset), Unset)

    def testFinalClass(self) -> None:
        """
        The class is final: attempts to subclass must fail with TypeError.
        """
        with self.assertRaises(TypeError):
            type("UnsetType", (UnsetType,), {})


class HelpersTest(TestCase):
    """
    Test suite for coalesce/rename/mirror.
    """

    def testCoalesce(self) -> None:
        self.assertEqual(coalesce(Unset, "fallback"), "fallback")
        self.assertIsNone(coalesce(Unset))
        self.assertEqual(coalesce("", "fallback"), "")
        self.assertEqual(coalesce(0, 1), 0)

    def testRenameInPlace(self) -> None:
        def function():
            pass

        self.assertIs(rename(function, "renamed"), function)
        self.assertEqual(function.__name__, "renamed")
        self.assertEqual(function.__qualname__, "renamed")

    def testRenameDecorator(self) -> None:
        @rename("renamed")
        def function():
            pass

        self.assertEqual(function.__name__, "renamed")

    def testRenameArguments(self) -> None:
        with self.assertRaises(TypeError):
            rename(1, "name")
        with self.assertRaises(TypeError):
            rename(len, 1)
        with self.assertRaises(TypeError):
            rename()

    def testMirrorFreezesContainers(self) -> None:
        """
        Containers come back as tuple/frozenset/mapping proxy, scalars as-is.
        """
        class Holder:
            items = mirror("items")
            indices = mirror("indices")
            table = mirror("table")
            name = mirror("name")

            def __init__(self):
                self._items = ["a"]
                self._indices = {1}
                self._table = {"k": "v"}
                self._name = "holder"

        holder = Holder()
        self.assertEqual(holder.items, ("a",))
        self.assertEqual(holder.indices, frozenset({1}))
        with self.assertRaises(TypeError):
            holder.table["k"] = "w"
        self.assertEqual(holder.name, "holder")
        with self.assertRaises(AttributeError):
            holder.name = "other"


class ModelTypeTest(TestCase):
    """
    Test suite for the model metaclass.
    """

    def setUp(self) -> None:
        class SampleModel(metaclass=ModelType, final=True):
            __slots__ = ("_left", "_right")
            __introspectable__ = ("left", "right")

            def __init__(self, left, right):
                self._left = left
                self._right = right

        self.model = SampleModel

    def testTypename(self) -> None:
        self.assertEqual(self.model.__typename__, "sample-model")

    def testRepr(self) -> None:
        self.assertEqual(repr(self.model(1, "b")), "sample-model(left=1, right='b')")

    def testFieldsAreReadOnly(self) -> None:
        instance = self.model(1, 2)
        self.assertEqual((instance.left, instance.right), (1, 2))
        with self.assertRaises(AttributeError):
            instance.left = 3

    def testSealed(self) -> None:
        with self.assertRaises(TypeError):
            type("Derived", (self.model,), {})


if __name__ == '__main__':
    unittest.main()
