"""
Faults behavioral tests (codes, trigger contract, rendering).

Scope
- Validate FaultCode stability and host relabeling via __main__.__codes__.
- Validate trigger(): option merging, raising outside shell mode, rendering in shell mode.
- Validate getdoc() lookups through __main__.__docs__.

Conventions
- Test method names follow CamelCase per project convention.
- Rich output is captured with a colorless console for deterministic comparison.
"""

from __future__ import annotations

import io
import sys
import unittest
from unittest import TestCase
from unittest.mock import patch

from rich.console import Console
from rich.panel import Panel

from junction import FaultCode, RoutingException, RoutingFailedError, getdoc, trigger
from junction import faults


class TestFaultCode(TestCase):
    """Behavioral tests for FaultCode."""

    def testStableValue(self):
        self.assertEqual(FaultCode.ROUTING_FAILED, 11101)

    def testNormalizeDefaultsToNumber(self):
        self.assertEqual(FaultCode.ROUTING_FAILED.normalize(), "11101")

    def testNormalizeUsesHostCodes(self):
        main = sys.modules["__main__"]
        with patch.object(main, "__codes__", {FaultCode.ROUTING_FAILED: "R1"}, create=True):
            self.assertEqual(FaultCode.ROUTING_FAILED.normalize(), "R1")


class TestTrigger(TestCase):
    """Behavioral tests for trigger()."""

    def setUp(self):
        self.console = Console(file=io.StringIO(), color_system=None, width=100)

    def testRaisesWithMergedOptions(self):
        with self.assertRaises(RoutingFailedError) as context:
            trigger(RoutingFailedError("unknown command 'x'", title="unknown command"), input="x")
        self.assertEqual(context.exception.options["title"], "unknown command")
        self.assertEqual(context.exception.options["input"], "x")
        self.assertEqual(str(context.exception), "unknown command 'x'")

    def testReplaceKeepsOriginalUntouched(self):
        original = RoutingFailedError("boom", shell=False)
        replaced = original.__replace__(shell=True)
        self.assertFalse(original.options["shell"])
        self.assertTrue(replaced.options["shell"])
        self.assertIs(type(replaced), RoutingFailedError)

    def testOptionsAreReadOnly(self):
        fault = RoutingException("boom", code=FaultCode.ROUTING_FAILED)
        with self.assertRaises(TypeError):
            fault.options["code"] = 0

    def testRejectsNonFaults(self):
        with self.assertRaises(TypeError):
            trigger(ValueError("boom"))

    def testShellModePrintsAndExits(self):
        with patch.object(faults, "console", self.console):
            with self.assertRaises(SystemExit) as context:
                trigger(
                    RoutingFailedError("unknown command 'x' at first position"),
                    title="unknown command",
                    code=FaultCode.ROUTING_FAILED,
                    hint="run 'tool --help' to see available commands",
                    prog="tool",
                    shell=True,
                )
        self.assertEqual(context.exception.code, 1)
        output = self.console.file.getvalue()
        self.assertIn("[ tool — 11101 | Unknown Command ]", output)
        self.assertIn("unknown command 'x' at first position", output)
        self.assertIn("→ run 'tool --help' to see available commands", output)

    def testFancyRendersPanel(self):
        fault = RoutingFailedError("boom", title="unknown command", code=FaultCode.ROUTING_FAILED, fancy=True)
        self.assertIsInstance(fault.__rich__(), Panel)

    def testHostProgramLabel(self):
        main = sys.modules["__main__"]
        fault = RoutingFailedError("boom", title="unknown command", code=FaultCode.ROUTING_FAILED, prog="tool")
        with patch.object(main, "__prog__", "todo", create=True):
            self.console.print(fault)
        self.assertIn("[ todo — 11101 | Unknown Command ]", self.console.file.getvalue())


class TestGetdoc(TestCase):
    """Behavioral tests for getdoc()."""

    def testMissingDocsIsNone(self):
        self.assertIsNone(getdoc(FaultCode.ROUTING_FAILED))

    def testHostDocs(self):
        main = sys.modules["__main__"]
        with patch.object(main, "__docs__", {FaultCode.ROUTING_FAILED: "see docs/routing"}, create=True):
            self.assertEqual(getdoc(FaultCode.ROUTING_FAILED), "see docs/routing")

    def testRejectsNonCode(self):
        with self.assertRaises(TypeError):
            getdoc(11101)


if __name__ == "__main__":
    unittest.main()
