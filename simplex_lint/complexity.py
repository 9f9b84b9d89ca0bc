# SPDX-License-Identifier: MIT
"""
Simplex Complexity Checker

Keeps FUNCTION blocks small enough to implement and verify: bounded rule
counts, input counts and rule lengths, and enough examples to cover the
branches described by the rules.

Codes:
    E010  RULES block exceeds max items
    E011  FUNCTION has too many inputs
    E012  EXAMPLES fewer than branch count
    W010  Single RULES item too long
    W011  Spec has many FUNCTION blocks
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional

from .parser import FunctionBlock, ParsedSpec
from .result import LintResult, function_location


@dataclass(frozen=True)
class ComplexityConfig:
    """Thresholds for complexity checks."""

    max_rules: int = 15
    max_inputs: int = 6
    max_rule_length: int = 200
    max_functions: int = 10


# =============================================================================
# Counting Helpers
# =============================================================================

EITHER_OR_RE = re.compile(r"\beither\b[^,\n]*\bor\b")
IF_RE = re.compile(r"\bif\b")
OR_RE = re.compile(r"\bor\b")
OTHERWISE_RE = re.compile(r"\b(?:otherwise|else)\b")
WHEN_RE = re.compile(r"\bwhen\b")
OPTIONALLY_RE = re.compile(r"\boptionally\b")


def extract_rule_items(rules: str) -> List[str]:
    """
    Split a RULES block into items.

    Items are dash-prefixed lines with the dash stripped. A block with no
    dash-prefixed lines falls back to one item per non-empty line.
    """
    lines = rules.split("\n")
    items = []
    for line in lines:
        stripped = line.strip()
        if stripped.startswith("-"):
            item = stripped[1:].strip()
            if item:
                items.append(item)

    if not items:
        items = [line.strip() for line in lines if line.strip()]

    return items


def count_rule_items(rules: str) -> int:
    return len(extract_rule_items(rules))


def count_examples(examples: str) -> int:
    """Count lines that start with "(" or contain an arrow (→ or ->)."""
    count = 0
    for line in examples.split("\n"):
        stripped = line.strip()
        if not stripped:
            continue
        if stripped.startswith("(") or "→" in stripped or "->" in stripped:
            count += 1
    return count


def count_branches(rules: str) -> int:
    """
    Estimate the number of conditional branches in a RULES block.

    This is a keyword heuristic over the lowercased text, not a parse of
    the conditions, and it over- and under-counts on unusual phrasing:

    - "either X or Y" -> 2; the line is then excluded from the if/when scan
    - "if X or Y" -> 2
    - "if X otherwise Y" / "if X else Y" -> 2
    - any other "if X" -> 1
    - "when X" -> 1
    - "optionally" -> 2 (with and without)

    The clause following an "if" runs to the next comma or end of line.
    Non-empty rules with no recognized keyword count as one branch.

    Args:
        rules: RULES landmark content

    Returns:
        Estimated branch count; 0 only for empty content
    """
    content = rules.lower()
    count = 0

    for line in content.split("\n"):
        either = EITHER_OR_RE.findall(line)
        if either:
            count += 2 * len(either)
            continue

        for match in IF_RE.finditer(line):
            clause = line[match.end():].split(",", 1)[0]
            if OR_RE.search(clause) or OTHERWISE_RE.search(clause):
                count += 2
            else:
                count += 1

        count += len(WHEN_RE.findall(line))

    count += 2 * len(OPTIONALLY_RE.findall(content))

    if count == 0 and rules.strip():
        count = 1

    return count


# =============================================================================
# Checker
# =============================================================================


class ComplexityChecker:
    """Complexity validation of parsed specs."""

    def __init__(self, config: Optional[ComplexityConfig] = None) -> None:
        self.config = config or ComplexityConfig()

    def check(self, spec: ParsedSpec, result: LintResult) -> None:
        self.check_function_count(spec, result)

        for fn in spec.functions:
            self.check_rules_count(fn, result)
            self.check_input_count(fn, result)
            self.check_rule_length(fn, result)
            self.check_example_coverage(fn, result)

    def check_function_count(self, spec: ParsedSpec, result: LintResult) -> None:
        count = len(spec.functions)
        if count > self.config.max_functions:
            result.add_warning(
                "W011",
                f"Spec has {count} FUNCTION blocks (consider splitting into "
                f"multiple specs, max recommended: {self.config.max_functions})",
                "spec",
            )

    def check_rules_count(self, fn: FunctionBlock, result: LintResult) -> None:
        rules = fn.rules
        if not rules:
            return

        count = count_rule_items(rules)
        if count > self.config.max_rules:
            result.add_error(
                "E010",
                f"RULES block has {count} items (max {self.config.max_rules})",
                function_location(fn.name),
            )

    def check_input_count(self, fn: FunctionBlock, result: LintResult) -> None:
        count = len(fn.inputs)
        if count > self.config.max_inputs:
            result.add_error(
                "E011",
                f"FUNCTION has {count} inputs (max {self.config.max_inputs})",
                function_location(fn.name),
            )

    def check_rule_length(self, fn: FunctionBlock, result: LintResult) -> None:
        rules = fn.rules
        if not rules:
            return

        limit = self.config.max_rule_length
        for index, item in enumerate(extract_rule_items(rules), start=1):
            if len(item) > limit:
                result.add_warning_with_suggestion(
                    "W010",
                    f"RULES item {index} exceeds {limit} characters ({len(item)} chars)",
                    function_location(fn.name),
                    "Consider breaking this rule into multiple simpler rules",
                    False,
                )

    def check_example_coverage(self, fn: FunctionBlock, result: LintResult) -> None:
        rules = fn.rules
        examples = fn.examples
        # missing landmarks are reported by the structural checker
        if not rules or not examples:
            return

        branches = count_branches(rules)
        example_count = count_examples(examples)
        if example_count < branches:
            result.add_error(
                "E012",
                f"EXAMPLES has {example_count} items but RULES has {branches} "
                "branches (examples should cover all branches)",
                function_location(fn.name),
            )
