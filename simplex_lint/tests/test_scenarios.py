# SPDX-License-Identifier: MIT
"""
End-to-end scenarios for the linter.

Each scenario lints a complete document and checks the resulting codes and
statistics.
"""

import unittest

from simplex_lint.linter import lint_string


class TestScenarios(unittest.TestCase):
    """Whole-document lint scenarios."""

    def test_minimal_valid_function(self) -> None:
        """A single complete function is valid with one example and one branch."""
        text = (
            "FUNCTION: add(a, b) → sum\n"
            "RULES:\n"
            "  - return the sum of a and b\n"
            "DONE_WHEN:\n"
            "  - result equals a + b\n"
            "EXAMPLES:\n"
            "  (2, 3) → 5\n"
            "ERRORS:\n"
            "  - any unhandled condition → fail\n"
        )
        result = lint_string(text)
        self.assertTrue(result.valid)
        self.assertEqual(result.errors, [])
        self.assertEqual(result.stats.functions, 1)
        self.assertEqual(result.stats.examples, 1)
        self.assertEqual(result.stats.branches, 1)

    def test_data_only(self) -> None:
        """A DATA block alone is invalid with exactly E001."""
        result = lint_string("DATA: Foo\n  field: string")
        self.assertFalse(result.valid)
        self.assertEqual([e.code for e in result.errors], ["E001"])

    def test_seventeen_rules(self) -> None:
        """17 rule items exceed the default maximum of 15."""
        rules = "".join(f"  - step {i}\n" for i in range(1, 18))
        text = (
            "FUNCTION: process(x) → result\n"
            "RULES:\n" + rules +
            "DONE_WHEN:\n  - done\n"
            "EXAMPLES:\n  (1) → ok\n"
            "ERRORS:\n  - any unhandled condition → fail\n"
        )
        result = lint_string(text)
        e010 = [e for e in result.errors if e.code == "E010"]
        self.assertEqual(len(e010), 1)
        self.assertIn("17", e010[0].message)
        self.assertIn("15", e010[0].message)

    def test_complete_evolution_blocks(self) -> None:
        """Well-formed BASELINE and EVAL produce nothing in E05x/E06x."""
        text = (
            "FUNCTION: rank(items) → result\n"
            "RULES:\n  - sort items by score\n"
            "DONE_WHEN:\n  - output is sorted\n"
            "EXAMPLES:\n  ([b, a]) → [a, b]\n"
            "ERRORS:\n  - any unhandled condition → fail\n"
            "BASELINE:\n"
            "  reference: rank v1\n"
            "  preserve:\n"
            "    - stable ordering of ties\n"
            "  evolve:\n"
            "    - recency boosts score\n"
            "EVAL:\n"
            "  preserve: pass^3\n"
            "  evolve: pass@5\n"
            "  grading: code\n"
        )
        result = lint_string(text)
        evolution_codes = [
            e.code for e in result.errors if e.code.startswith(("E05", "E06"))
        ]
        self.assertEqual(evolution_codes, [])
        self.assertTrue(result.valid)

    def test_full_document(self) -> None:
        """A realistic multi-block document lints clean."""
        text = """# Policy filter

DATA: Policy
  id: string
  tags: list of string

CONSTRAINT: ids_unique
  policy ids never repeat

FUNCTION: filter_policies(policies, ids, tags) → list of Policy

RULES:
  - if ids is empty and tags is empty, return all policies
  - if ids or tags are given, keep policies matching any of them
  - optionally sort by id

DONE_WHEN:
  - every returned policy satisfies the filter

EXAMPLES:
  ([p1, p2], [], []) → [p1, p2]
  ([p1, p2], [p1], []) → [p1]
  ([p1, p2], [], [t]) → [p2]
  ([p2, p1], [], [], sort) → [p1, p2]
  ([p2, p1], [], [], no sort) → [p2, p1]

ERRORS:
  - policies is null → fail with "policies required"

DETERMINISM:
  level: strict
  seed: from_input
"""
        result = lint_string(text, name="policies.md")
        self.assertEqual(result.errors, [])
        self.assertEqual(result.warnings, [])
        self.assertTrue(result.valid)
        self.assertEqual(result.stats.branches, 5)
        self.assertEqual(result.stats.examples, 5)
        self.assertEqual(result.stats.coverage_percent, 100.0)


if __name__ == "__main__":
    unittest.main()
