"""
Default tokenizer tests (raw tokens → values / invalid / rest).

Scope
- Long and short forms, inline and spaced values.
- Type coercion for boolean, count, integer, float and string switches.
- Invalid tokens: unknown switches, bad values, missing values.
- Leftovers: positional tokens and everything after "--".

Conventions
- Test method names follow CamelCase per project convention.
- The tokenizer is exercised directly with hand-written type/alias tables.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from commando import SwitchType, Tokens, tokenize

SWITCHES = {
    "path": SwitchType.STRING,
    "foo": SwitchType.COUNT,
    "port": SwitchType.INTEGER,
    "ratio": SwitchType.FLOAT,
    "force": SwitchType.BOOLEAN,
    "dry_run": SwitchType.BOOLEAN,
}
ALIASES = {"p": "path", "f": "foo", "F": "force"}


def run(*args):
    return tokenize(list(args), SWITCHES, ALIASES)


class TestTokenizeValues(TestCase):
    """Recognized switches and coercion."""

    def testResultShape(self):
        self.assertEqual(run(), Tokens({}, [], []))

    def testSpacedString(self):
        self.assertEqual(run("--path", "abc").values, {"path": "abc"})

    def testInlineString(self):
        self.assertEqual(run("--path=a=b").values, {"path": "a=b"})

    def testInlineEmptyString(self):
        self.assertEqual(run("--path=").values, {"path": ""})

    def testAliasString(self):
        self.assertEqual(run("-p", "abc").values, {"path": "abc"})

    def testCountAccumulatesAcrossAliases(self):
        self.assertEqual(run("--foo", "-f", "-f").values, {"foo": 3})

    def testInteger(self):
        self.assertEqual(run("--port", "12").values, {"port": 12})

    def testNegativeIntegerValue(self):
        self.assertEqual(run("--port", "-12").values, {"port": -12})

    def testFloat(self):
        self.assertEqual(run("--ratio", "1.5").values, {"ratio": 1.5})
        self.assertEqual(run("--ratio=2").values, {"ratio": 2.0})
        self.assertEqual(run("--ratio=1e3").values, {"ratio": 1000.0})

    def testBooleanBare(self):
        self.assertEqual(run("--force").values, {"force": True})
        self.assertEqual(run("-F").values, {"force": True})

    def testBooleanNegation(self):
        self.assertEqual(run("--no-force").values, {"force": False})

    def testBooleanInline(self):
        self.assertEqual(run("--force=false").values, {"force": False})
        self.assertEqual(run("--force=true").values, {"force": True})

    def testDashedNameMapsToUnderscore(self):
        self.assertEqual(run("--dry-run").values, {"dry_run": True})

    def testLastValueWins(self):
        self.assertEqual(run("--path", "a", "--path", "b").values, {"path": "b"})


class TestTokenizeInvalid(TestCase):
    """Unknown or malformed switches."""

    def testUnknownLongSwitch(self):
        tokens = run("--nope", "abc")
        self.assertEqual(tokens.invalid, ["--nope"])
        self.assertEqual(tokens.rest, ["abc"])

    def testUnknownInlineSwitchReportsNameOnly(self):
        self.assertEqual(run("--nope=1").invalid, ["--nope"])

    def testUnknownAlias(self):
        self.assertEqual(run("-x").invalid, ["-x"])

    def testUnderscoreSpellingIsInvalid(self):
        self.assertEqual(run("--dry_run").invalid, ["--dry_run"])

    def testBadInteger(self):
        tokens = run("--port", "bar")
        self.assertEqual(tokens.values, {})
        self.assertEqual(tokens.invalid, ["--port"])
        self.assertEqual(tokens.rest, [])

    def testPartialIntegerIsInvalid(self):
        self.assertEqual(run("--port=12a").invalid, ["--port"])

    def testMissingValueAtEnd(self):
        self.assertEqual(run("--path").invalid, ["--path"])

    def testSwitchIsNotTakenAsValue(self):
        tokens = run("--path", "--force")
        self.assertEqual(tokens.invalid, ["--path"])
        self.assertEqual(tokens.values, {"force": True})

    def testCountRejectsInlineValue(self):
        self.assertEqual(run("--foo=3").invalid, ["--foo"])

    def testBooleanRejectsOtherInlineValues(self):
        self.assertEqual(run("--force=yes").invalid, ["--force"])

    def testNegationOnlyForBooleans(self):
        self.assertEqual(run("--no-path").invalid, ["--no-path"])

    def testInvalidOrderPreserved(self):
        self.assertEqual(run("-x", "--nope", "--port=z").invalid, ["-x", "--nope", "--port"])

    def testSpacedTokenIsInvalid(self):
        tokens = run("--foo bar")
        self.assertEqual(tokens.invalid, ["--foo bar"])
        self.assertEqual(tokens.rest, [])

    def testEmptyNameIsInvalid(self):
        tokens = run("--=x")
        self.assertEqual(tokens.invalid, ["--=x"])
        self.assertEqual(tokens.rest, [])

    def testSpacedAliasIsInvalid(self):
        self.assertEqual(run("-p x").invalid, ["-p x"])

    def testNonAsciiDigitsRejected(self):
        self.assertEqual(run("--port", "١٢").invalid, ["--port"])
        self.assertEqual(run("--ratio=١.٥").invalid, ["--ratio"])

    def testNonAsciiNegativeIsSwitch(self):
        tokens = run("-١")
        self.assertEqual(tokens.invalid, ["-١"])
        self.assertEqual(tokens.rest, [])


class TestTokenizeRest(TestCase):
    """Positional leftovers."""

    def testPositionalTokens(self):
        tokens = run("one", "--force", "two")
        self.assertEqual(tokens.rest, ["one", "two"])
        self.assertEqual(tokens.values, {"force": True})

    def testDoubleDashStopsSwitches(self):
        tokens = run("--force", "--", "--path", "x")
        self.assertEqual(tokens.values, {"force": True})
        self.assertEqual(tokens.rest, ["--path", "x"])

    def testLoneDashIsPositional(self):
        self.assertEqual(run("-").rest, ["-"])

    def testNegativeNumberIsPositional(self):
        self.assertEqual(run("-5").rest, ["-5"])


if __name__ == "__main__":
    unittest.main()
