# SPDX-License-Identifier: MIT
"""
Simplex Evolution Checker

Validates BASELINE and EVAL landmarks on FUNCTION blocks that evolve from an
earlier behaviour.

Codes:
    E050  BASELINE requires reference field
    E051  BASELINE requires preserve field
    E052  BASELINE requires evolve field
    E053  BASELINE preserve must contain at least one item
    E054  BASELINE evolve must contain at least one item
    E060  EVAL required when BASELINE present (fixable)
    E061  EVAL requires preserve threshold when BASELINE present
    E062  EVAL requires evolve threshold when BASELINE present
    E063  preserve threshold must use pass^k notation
    E064  evolve threshold must use pass@k notation
    E065  grading must be code, model, or outcome
    E066  threshold k must be positive integer
"""

from __future__ import annotations

import re

from .fields import field_value, scan_fields
from .parser import FunctionBlock, ParsedSpec
from .result import LintResult, function_location

BASELINE_FIELDS = ("reference", "preserve", "evolve")
EVAL_FIELDS = ("preserve", "evolve", "grading")

VALID_GRADING = frozenset({"code", "model", "outcome"})

# pass^k: all k trials must pass
PRESERVE_RE = re.compile(r"^pass\^([0-9]+)$")
# pass@k: at least one of k trials must pass
EVOLVE_RE = re.compile(r"^pass@([0-9]+)$")

EVAL_SUGGESTION = (
    "Add EVAL: block with preserve and evolve thresholds "
    "(e.g., preserve: pass^3, evolve: pass@5)"
)


class EvolutionChecker:
    """BASELINE/EVAL validation of parsed specs."""

    def check(self, spec: ParsedSpec, result: LintResult) -> None:
        for fn in spec.functions:
            self.check_pairing(fn, result)
            if fn.has_baseline:
                self.check_baseline(fn, result)
            if fn.has_eval:
                self.check_eval(fn, result)

    def check_pairing(self, fn: FunctionBlock, result: LintResult) -> None:
        if fn.has_baseline and not fn.has_eval:
            result.add_error_with_suggestion(
                "E060",
                "EVAL required when BASELINE present",
                function_location(fn.name),
                EVAL_SUGGESTION,
                True,
            )

    def check_baseline(self, fn: FunctionBlock, result: LintResult) -> None:
        fields = scan_fields(fn.baseline, BASELINE_FIELDS)
        loc = f"{function_location(fn.name)} BASELINE"

        if "reference" not in fields:
            result.add_error("E050", "BASELINE requires reference field", loc)

        preserve = fields.get("preserve")
        if preserve is None:
            result.add_error("E051", "BASELINE requires preserve field", loc)
        elif not preserve.items:
            result.add_error("E053", "BASELINE preserve must contain at least one item", loc)

        evolve = fields.get("evolve")
        if evolve is None:
            result.add_error("E052", "BASELINE requires evolve field", loc)
        elif not evolve.items:
            result.add_error("E054", "BASELINE evolve must contain at least one item", loc)

    def check_eval(self, fn: FunctionBlock, result: LintResult) -> None:
        fields = scan_fields(fn.eval, EVAL_FIELDS)
        loc = f"{function_location(fn.name)} EVAL"

        preserve = field_value(fields, "preserve")
        evolve = field_value(fields, "evolve")
        grading = field_value(fields, "grading")

        if fn.has_baseline:
            if not preserve:
                result.add_error(
                    "E061", "EVAL requires preserve threshold when BASELINE present", loc
                )
            if not evolve:
                result.add_error(
                    "E062", "EVAL requires evolve threshold when BASELINE present", loc
                )

        if preserve:
            self.check_threshold(
                preserve, PRESERVE_RE, "E063", "preserve threshold must use pass^k notation",
                loc, result,
            )
        if evolve:
            self.check_threshold(
                evolve, EVOLVE_RE, "E064", "evolve threshold must use pass@k notation",
                loc, result,
            )

        if grading and grading not in VALID_GRADING:
            result.add_error(
                "E065", f"grading must be code, model, or outcome, got: {grading}", loc
            )

    def check_threshold(
        self,
        value: str,
        pattern: re.Pattern,
        code: str,
        message: str,
        loc: str,
        result: LintResult,
    ) -> None:
        match = pattern.match(value)
        if not match:
            result.add_error(code, f"{message}, got: {value}", loc)
        elif int(match.group(1)) == 0:
            result.add_error("E066", f"threshold k must be positive integer, got: {value}", loc)
