"""
Layout module behavioral tests.

Scope
- Validate the width-to-indent mapping at every boundary.
- Validate the help settings produced by configure() for injected widths.
- Validate that the terminal query falls back instead of failing.

Conventions
- Test method names follow CamelCase per project convention.
- Widths are always injected; no test depends on the real terminal.
"""
import io
import unittest
from unittest import TestCase

from rich.console import Console

from longqc.layout import (
    DEFAULT_WIDTH,
    ConsoleDisplay,
    DisplayInfo,
    FixedDisplay,
    HelpParams,
    configure,
    indent_for,
)


class BrokenConsole:
    @property
    def size(self):
        raise OSError("no terminal attached")


class TestIndentFor(TestCase):
    """Behavioral tests for indent_for()."""

    def testBoundaries(self):
        expectations = {
            1000: 4,
            121: 4,
            120: 3,
            81: 3,
            80: 2,
            61: 2,
            60: 1,
            1: 1,
        }
        for width, indent in expectations.items():
            with self.subTest(width=width):
                self.assertEqual(indent_for(width), indent)


class TestConfigure(TestCase):
    """Behavioral tests for configure()."""

    def testWideDisplay(self):
        params = configure(FixedDisplay(121))
        self.assertFalse(params.show_terminator)
        self.assertEqual(params.prog_indent, 0)
        self.assertEqual(params.description_indent, 0)
        self.assertEqual(params.width, 121)
        self.assertEqual(params.flag_indent, 4)
        self.assertEqual(params.group_indent, 4)

    def testNarrowDisplay(self):
        params = configure(FixedDisplay(60))
        self.assertEqual((params.flag_indent, params.group_indent), (1, 1))
        self.assertEqual(params.width, 60)

    def testHelpIndentClampedToHalfWidth(self):
        self.assertEqual(configure(FixedDisplay(200)).help_indent, 40)
        self.assertEqual(configure(FixedDisplay(60)).help_indent, 30)
        self.assertEqual(configure(FixedDisplay(1)).help_indent, 0)

    def testSameWidthSameParams(self):
        self.assertEqual(configure(FixedDisplay(90)), configure(FixedDisplay(90)))
        self.assertNotEqual(configure(FixedDisplay(90)), configure(FixedDisplay(70)))

    def testAsDict(self):
        self.assertEqual(configure(FixedDisplay(100)).as_dict(), {
            "show_terminator": False,
            "prog_indent": 0,
            "description_indent": 0,
            "width": 100,
            "flag_indent": 3,
            "group_indent": 3,
            "help_indent": 40,
            "gutter": 1,
        })

    def testDefaultsMatchLibraryLayout(self):
        params = HelpParams()
        self.assertTrue(params.show_terminator)
        self.assertEqual(params.width, DEFAULT_WIDTH)


class TestDisplays(TestCase):
    """Behavioral tests for the width providers."""

    def testFixedDisplay(self):
        display = FixedDisplay(97)
        self.assertEqual(display.width(), 97)
        self.assertIsInstance(display, DisplayInfo)

    def testFixedDisplayRejectsNonPositiveWidths(self):
        with self.assertRaises(ValueError):
            FixedDisplay(0)

    def testConsoleDisplayReadsConsoleWidth(self):
        console = Console(file=io.StringIO(), width=97)
        self.assertEqual(ConsoleDisplay(console).width(), 97)

    def testConsoleDisplayFallsBackWhenQueryFails(self):
        self.assertEqual(ConsoleDisplay(BrokenConsole()).width(), DEFAULT_WIDTH)
        self.assertEqual(ConsoleDisplay(BrokenConsole(), default=72).width(), 72)

    def testConsoleDisplayWithoutConsoleNeverRaises(self):
        self.assertGreater(ConsoleDisplay().width(), 0)


if __name__ == "__main__":
    unittest.main()
