# SPDX-License-Identifier: MIT
"""Tests for the lint orchestrator and configuration."""

import unittest

from simplex_lint.complexity import ComplexityConfig
from simplex_lint.config import ConfigError, LintConfig
from simplex_lint.linter import Linter, lint_string

ADD_SPEC = """FUNCTION: add(a, b) → sum

RULES:
  - return the sum of a and b

DONE_WHEN:
  - result equals a + b

EXAMPLES:
  (2, 3) → 5

ERRORS:
  - any error → fail
"""


class TestLinter(unittest.TestCase):
    """Test the orchestrator."""

    def test_valid_spec(self) -> None:
        result = Linter().lint("valid.md", ADD_SPEC)
        self.assertTrue(result.valid)
        self.assertEqual(result.errors, [])
        self.assertEqual(result.file, "valid.md")
        self.assertEqual(result.stats.functions, 1)
        self.assertEqual(result.stats.examples, 1)
        self.assertEqual(result.stats.branches, 1)
        self.assertEqual(result.stats.coverage_percent, 100.0)

    def test_no_function(self) -> None:
        """Text without FUNCTION lints to exactly E001."""
        for text in ("", "plain prose", "DATA: SomeType\n  field: string"):
            result = lint_string(text)
            self.assertFalse(result.valid)
            self.assertEqual([e.code for e in result.errors], ["E001"])
            self.assertEqual(result.stats.functions, 0)
            self.assertEqual(result.stats.coverage_percent, 0.0)

    def test_parse_warnings_become_w001(self) -> None:
        """Parser warnings are reported as W001 at 'parse'."""
        result = lint_string(ADD_SPEC + "\nNOTES:\n  later\n")
        self.assertTrue(result.valid)
        self.assertEqual([w.code for w in result.warnings], ["W001"])
        self.assertEqual(result.warnings[0].location, "parse")

    def test_issue_order_follows_checker_order(self) -> None:
        """Structural findings come before complexity, evolution and determinism."""
        text = (
            "FUNCTION: f(a, b, c, d, e, f, g) → int\n"
            "BASELINE:\n  reference: v1\n"
            "DETERMINISM:\n  level: fuzzy\n"
        )
        codes = [e.code for e in lint_string(text).errors]
        self.assertEqual(codes[:4], ["E002", "E003", "E004", "E005"])
        self.assertLess(codes.index("E011"), codes.index("E060"))
        self.assertLess(codes.index("E060"), codes.index("E070"))

    def test_stats_sum_over_functions(self) -> None:
        text = ADD_SPEC + (
            "FUNCTION: pick(x) → int\n"
            "RULES:\n  - if x or y, return 1\n  - when z, return 2\n"
            "EXAMPLES:\n  (x) → 1\n  (y) → 1\n  (z) → 2\n"
        )
        stats = lint_string(text).stats
        self.assertEqual(stats.functions, 2)
        self.assertEqual(stats.branches, 4)
        self.assertEqual(stats.examples, 4)
        self.assertEqual(stats.coverage_percent, 100.0)

    def test_coverage_not_capped(self) -> None:
        """Coverage is the raw ratio: 5 examples over 1 branch is 500%."""
        text = ADD_SPEC.replace(
            "  (2, 3) → 5\n",
            "  (2, 3) → 5\n  (0, 0) → 0\n  (1, 1) → 2\n  (-1, 1) → 0\n  (9, 1) → 10\n",
        )
        result = lint_string(text)
        self.assertTrue(result.valid)
        self.assertEqual(result.stats.examples, 5)
        self.assertEqual(result.stats.branches, 1)
        self.assertEqual(result.stats.coverage_percent, 500.0)

    def test_config_thresholds_applied(self) -> None:
        linter = Linter(LintConfig(max_inputs=1))
        result = linter.lint("x", ADD_SPEC)
        self.assertEqual([e.code for e in result.errors], ["E011"])
        self.assertIn("2 inputs (max 1)", result.errors[0].message)

    def test_linter_reusable(self) -> None:
        """One linter gives independent results for independent inputs."""
        linter = Linter()
        first = linter.lint("a", "nothing")
        second = linter.lint("b", ADD_SPEC)
        self.assertFalse(first.valid)
        self.assertTrue(second.valid)
        self.assertEqual(len(first.errors), 1)

    def test_lint_string_default_name(self) -> None:
        self.assertEqual(lint_string(ADD_SPEC).file, "input")


class TestLintConfig(unittest.TestCase):
    """Test configuration building."""

    def test_defaults_match_complexity_defaults(self) -> None:
        self.assertEqual(LintConfig().complexity(), ComplexityConfig())

    def test_overrides_ignore_none(self) -> None:
        config = LintConfig.from_overrides(max_rules=20, max_inputs=None, no_llm=True)
        self.assertEqual(config.max_rules, 20)
        self.assertEqual(config.max_inputs, 6)
        self.assertTrue(config.no_llm)
        self.assertEqual(config.complexity().max_rules, 20)

    def test_non_positive_threshold_rejected(self) -> None:
        with self.assertRaises(ConfigError) as ctx:
            LintConfig.from_overrides(max_rules=0)
        self.assertEqual(ctx.exception.option, "max_rules")

    def test_unknown_option_rejected(self) -> None:
        with self.assertRaises(ConfigError):
            LintConfig.from_overrides(max_examples=3)


if __name__ == "__main__":
    unittest.main()
