"""
Tests for the internal helpers (Unset sentinel, coalesce, rename, ordinal).

Conventions
- Test method names follow CamelCase per project convention.
"""
import copy
import unittest
from unittest import TestCase

from junction.utils import *


class UnsetTest(TestCase):
    """Semantic guarantees of the Unset sentinel."""

    def testSingleton(self):
        self.assertIs(UnsetType(), Unset)

    def testFalsy(self):
        self.assertFalse(bool(Unset))

    def testRepr(self):
        self.assertEqual(repr(Unset), "Unset")

    def testNotEqualToNone(self):
        self.assertNotEqual(Unset, None)

    def testCopyPreservesSingleton(self):
        self.assertIs(copy.copy(Unset), Unset)

    def testUnionIsinstance(self):
        self.assertTrue(isinstance(Unset, str | Unset))
        self.assertTrue(isinstance("x", Unset | str))
        self.assertFalse(isinstance(1, str | Unset))

    def testFinalClass(self):
        with self.assertRaises(TypeError):
            type("UnsetType", (UnsetType,), {})


class HelpersTest(TestCase):
    """Behavior of coalesce, rename and ordinal."""

    def testCoalesce(self):
        self.assertEqual(coalesce(Unset, "fallback"), "fallback")
        self.assertIsNone(coalesce(None, "fallback"))
        self.assertEqual(coalesce("", "fallback"), "")
        self.assertIsNone(coalesce(Unset))

    def testRenameFunctionForm(self):
        def work():
            pass

        self.assertIs(rename(work, "job"), work)
        self.assertEqual((work.__name__, work.__qualname__), ("job", "job"))

    def testRenameDecoratorForm(self):
        @rename("job")
        def work():
            pass

        self.assertEqual(work.__name__, "job")

    def testRenameArity(self):
        with self.assertRaises(TypeError):
            rename()

    def testOrdinalWords(self):
        self.assertEqual([ordinal(number) for number in (1, 2, 3, 10)], ["first", "second", "third", "tenth"])

    def testOrdinalSuffixes(self):
        self.assertEqual([ordinal(number) for number in (11, 12, 13, 21, 22, 23, 101, 111)],
                         ["11th", "12th", "13th", "21st", "22nd", "23rd", "101st", "111th"])

    def testOrdinalRejectsBadInput(self):
        with self.assertRaises(TypeError):
            ordinal("1")
        with self.assertRaises(TypeError):
            ordinal(True)
        with self.assertRaises(ValueError):
            ordinal(-1)


class MetadataTest(TestCase):
    """Package identity exposed through the dunder metadata."""

    def testIdentity(self):
        import junction

        self.assertEqual(junction.__title__, "junction")
        self.assertEqual(junction.__author__, "junction contributors")
        self.assertEqual(junction.__license__, "MIT")


if __name__ == '__main__':
    unittest.main()
