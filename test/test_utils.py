"""
Tests for the internal helpers.

This module verifies:
- The Unset sentinel: singleton identity, falsy semantics, finality.
- coalesce(): only Unset is replaced.
- rename(): both call forms and their argument checks.
- mirror(): read-only properties handing out copies of containers.
"""
import unittest
from collections import namedtuple
from unittest import TestCase

from longqc.utils import *


class UnsetTest(TestCase):
    """
    Test suite for the `Unset` sentinel.
    """

    def testSingleton(self) -> None:
        """
        The constructor returns the exported instance on every call.
        """
        self.assertIs(UnsetType(), Unset)
        self.assertIs(UnsetType(), UnsetType())

    def testFalsy(self) -> None:
        self.assertFalse(Unset)
        self.assertIsNot(Unset, None)

    def testRepr(self) -> None:
        self.assertEqual(repr(Unset), "Unset")

    def testFinal(self) -> None:
        """
        The type refuses to be subclassed.
        """
        with self.assertRaises(TypeError):
            class Derived(UnsetType):
                pass


class CoalesceTest(TestCase):
    def testReplacesUnset(self) -> None:
        self.assertEqual(coalesce(Unset, "fallback"), "fallback")
        self.assertIsNone(coalesce(Unset))

    def testPreservesFalsyValues(self) -> None:
        for value in (None, 0, "", []):
            with self.subTest(value=value):
                self.assertIs(coalesce(value, "fallback"), value)


class RenameTest(TestCase):
    def testDirectForm(self) -> None:
        function = rename(lambda: None, "accessor")
        self.assertEqual(function.__name__, "accessor")
        self.assertEqual(function.__qualname__, "accessor")

    def testDecoratorForm(self) -> None:
        @rename("accessor")
        def function():
            pass

        self.assertEqual(function.__name__, "accessor")

    def testArgumentChecks(self) -> None:
        with self.assertRaises(TypeError):
            rename(42, "accessor")
        with self.assertRaises(TypeError):
            rename(lambda: None, 42)
        with self.assertRaises(TypeError):
            rename()
        with self.assertRaises(TypeError):
            rename(42)


class MirrorTest(TestCase):
    """
    Test suite for `mirror()`.
    """

    def setUp(self) -> None:
        Pair = namedtuple("Pair", ("value", "set"))

        class Holder:
            items = mirror("items")
            table = mirror("table")
            pair = mirror("pair")

            def __init__(self):
                self._items = ["a", ["b"]]
                self._table = {"key": ["value"]}
                self._pair = Pair(1, True)

        self.Pair = Pair
        self.holder = Holder()

    def testContainersAreCopied(self) -> None:
        """
        Mutating what the property returns leaves the backing field untouched.
        """
        self.holder.items.append("c")
        self.holder.items[1].append("d")
        self.holder.table["key"].append("other")
        self.assertEqual(self.holder.items, ["a", ["b"]])
        self.assertEqual(self.holder.table, {"key": ["value"]})

    def testTuplesAreReturnedAsIs(self) -> None:
        self.assertIsInstance(self.holder.pair, self.Pair)

    def testReadOnly(self) -> None:
        with self.assertRaises(AttributeError):
            self.holder.items = []

    def testRejectsNonStringName(self) -> None:
        with self.assertRaises(TypeError):
            mirror(42)


if __name__ == "__main__":
    unittest.main()
