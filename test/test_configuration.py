"""
Configuration module behavioral tests.

Scope
- Validate assemble(): presence and value recorded independently for every option.
- Validate the folding of the two Illumina reference flags.
- Validate Configuration construction, plain-data view and representation.

Conventions
- Test method names follow CamelCase per project convention.
"""
import unittest
from unittest import TestCase

from longqc.configuration import (
    ILLUMINA_READS,
    SETTINGS,
    Configuration,
    Setting,
    assemble,
)
from longqc.layout import FixedDisplay, configure
from longqc.options import build_parser


def unset_settings():
    return {name: Setting(0, False) for name in SETTINGS}


class TestAssemble(TestCase):
    """Behavioral tests for assemble()."""

    def setUp(self):
        self.parser = build_parser(configure(FixedDisplay(80)), prog="longqc")

    def assemble(self, *argv):
        return assemble(self.parser, self.parser.parse(list(argv)))

    def testNothingSupplied(self):
        config = self.assemble("reads.fastq")
        self.assertEqual(config.input_reads, "reads.fastq")
        self.assertEqual(config.illumina_reads, [])
        for name in SETTINGS:
            with self.subTest(name=name):
                self.assertFalse(config.settings[name].set)
        self.assertFalse(config.verbose)
        self.assertEqual(config.window_size, 0)

    def testPresenceAndValueAreIndependent(self):
        config = self.assemble("reads.fastq", "--min_score", "0")
        self.assertEqual(config.settings["min_score"], Setting(0.0, True))
        self.assertEqual(config.settings["keep_percent"], Setting(0.0, False))

    def testIlluminaReadsInDeclarationOrder(self):
        self.assertEqual(self.assemble("reads.fastq", "--illumina_reads_1", "r1.fastq").illumina_reads, ["r1.fastq"])
        self.assertEqual(
            self.assemble("reads.fastq", "--illumina_reads_2", "b.fastq", "--illumina_reads_1", "a.fastq").illumina_reads,
            ["a.fastq", "b.fastq"],
        )

    def testIlluminaReadsAreNotSettings(self):
        config = self.assemble("reads.fastq", "--illumina_reads_1", "r1.fastq")
        for name in ILLUMINA_READS:
            self.assertNotIn(name, config.settings)

    def testLastValueWins(self):
        config = self.assemble("reads.fastq", "--window_size", "10", "--window_size", "20")
        self.assertEqual(config.window_size, 20)


class TestConfiguration(TestCase):
    """Behavioral tests for the Configuration object."""

    def testRejectsEmptyInput(self):
        with self.assertRaises(ValueError):
            Configuration("", unset_settings())

    def testRejectsMissingSettings(self):
        settings = unset_settings()
        del settings["window_size"]
        with self.assertRaises(ValueError) as context:
            Configuration("reads.fastq", settings)
        self.assertIn("window_size", str(context.exception))

    def testAcceptsPlainPairs(self):
        settings = {name: (0, False) for name in SETTINGS}
        settings["min_length"] = (1000, True)
        config = Configuration("reads.fastq", settings)
        self.assertEqual(config.settings["min_length"], Setting(1000, True))
        self.assertEqual(config.min_length, 1000)
        self.assertTrue(config.min_length_set)

    def testIlluminaReadsAreCopied(self):
        config = Configuration("reads.fastq", unset_settings(), ["r1.fastq"])
        config.illumina_reads.append("r2.fastq")
        self.assertEqual(config.illumina_reads, ["r1.fastq"])

    def testSettingsAreCopied(self):
        config = Configuration("reads.fastq", unset_settings())
        config.settings["min_score"] = Setting(99.0, True)
        self.assertFalse(config.min_score_set)

    def testAttributesAreReadOnly(self):
        config = Configuration("reads.fastq", unset_settings())
        with self.assertRaises(AttributeError):
            config.input_reads = "other.fastq"
        with self.assertRaises(AttributeError):
            config.min_score = 1.0

    def testAsDict(self):
        settings = unset_settings()
        settings["verbose"] = Setting(True, True)
        data = Configuration("reads.fastq", settings, ["r2.fastq"]).as_dict()
        self.assertEqual(data["input_reads"], "reads.fastq")
        self.assertEqual(data["illumina_reads"], ["r2.fastq"])
        self.assertEqual(data["verbose"], {"value": True, "set": True})
        self.assertEqual(data["min_score"], {"value": 0, "set": False})
        self.assertEqual(len(data), 2 + len(SETTINGS))

    def testEquality(self):
        self.assertEqual(
            Configuration("reads.fastq", unset_settings()),
            Configuration("reads.fastq", unset_settings()),
        )
        self.assertNotEqual(
            Configuration("reads.fastq", unset_settings()),
            Configuration("other.fastq", unset_settings()),
        )

    def testReprShowsOnlySuppliedSettings(self):
        settings = unset_settings()
        settings["window_size"] = Setting(50, True)
        text = repr(Configuration("reads.fastq", settings))
        self.assertTrue(text.startswith("configuration(input_reads='reads.fastq', illumina_reads=[]"))
        self.assertIn("window_size=50", text)
        self.assertNotIn("min_score", text)


if __name__ == "__main__":
    unittest.main()
