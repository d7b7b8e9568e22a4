"""
Tests for the internal utilities (Unset sentinel, coalesce, rename, view).

Conventions
- Test method names follow CamelCase per project convention.
"""
import copy
import pickle
import unittest
from types import MappingProxyType
from unittest import TestCase

from commando.utils import *


class UnsetTest(TestCase):
    """The Unset sentinel is a falsy, final singleton."""

    def testSingleton(self):
        self.assertIs(UnsetType(), Unset)

    def testFalsy(self):
        self.assertFalse(Unset)
        self.assertIsNot(Unset, None)

    def testRepr(self):
        self.assertEqual(repr(Unset), "Unset")

    def testCopyAndPickleKeepIdentity(self):
        self.assertIs(copy.copy(Unset), Unset)
        self.assertIs(copy.deepcopy(Unset), Unset)
        self.assertIs(pickle.loads(pickle.dumps(Unset)), Unset)

    def testFinalClass(self):
        with self.assertRaises(TypeError):
            type("UnsetType", (UnsetType,), {})

    def testUnionWithTypes(self):
        self.assertIsInstance(Unset, str | Unset)
        self.assertIsInstance("x", str | Unset)


class CoalesceTest(TestCase):

    def testUnsetReplaced(self):
        self.assertEqual(coalesce(Unset, "fallback"), "fallback")

    def testFalseyValuesPreserved(self):
        for value in (None, 0, "", []):
            self.assertEqual(coalesce(value, "fallback"), value)


class RenameTest(TestCase):

    def testFunctionForm(self):
        def f():
            pass

        rename(f, "work")
        self.assertEqual((f.__name__, f.__qualname__), ("work", "work"))

    def testDecoratorForm(self):
        @rename("work")
        def f():
            pass

        self.assertEqual(f.__name__, "work")

    def testRejectsNonCallable(self):
        with self.assertRaises(TypeError):
            rename(1, "work")

    def testRejectsWrongArity(self):
        with self.assertRaises(TypeError):
            rename()


class ViewTest(TestCase):
    """view() exposes backing fields as immutable snapshots."""

    class Holder:
        items = view("items")
        table = view("table")
        tags = view("tags")
        label = view("label")

        def __init__(self):
            self._items = [1, 2]
            self._table = {"a": 1}
            self._tags = {"x"}
            self._label = "text"

    def testContainersAreFrozen(self):
        holder = self.Holder()
        self.assertEqual(holder.items, (1, 2))
        self.assertIsInstance(holder.table, MappingProxyType)
        self.assertEqual(holder.tags, frozenset({"x"}))
        self.assertEqual(holder.label, "text")

    def testPropertyName(self):
        self.assertEqual(self.Holder.items.fget.__name__, "items")

    def testRejectsNonString(self):
        with self.assertRaises(TypeError):
            view(1)


if __name__ == "__main__":
    unittest.main()
