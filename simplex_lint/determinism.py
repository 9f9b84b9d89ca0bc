# SPDX-License-Identifier: MIT
"""
Simplex Determinism Checker

Validates DETERMINISM landmarks, which declare how consistent a function's
output must be across runs.

Codes:
    E070  DETERMINISM level must be strict, structural, or semantic
"""

from __future__ import annotations

import logging

from .fields import field_value, scan_fields
from .parser import FunctionBlock, ParsedSpec
from .result import LintResult, function_location

logger = logging.getLogger(__name__)

DETERMINISM_FIELDS = ("level", "seed", "vary", "stable")

VALID_LEVELS = frozenset({"strict", "structural", "semantic"})


class DeterminismChecker:
    """DETERMINISM validation of parsed specs."""

    def check(self, spec: ParsedSpec, result: LintResult) -> None:
        for fn in spec.functions:
            if fn.has_determinism:
                self.check_determinism(fn, result)

    def check_determinism(self, fn: FunctionBlock, result: LintResult) -> None:
        fields = scan_fields(fn.determinism, DETERMINISM_FIELDS)
        loc = f"{function_location(fn.name)} DETERMINISM"

        level = field_value(fields, "level")
        if not level:
            result.add_error(
                "E070",
                "DETERMINISM requires level field (strict, structural, or semantic)",
                loc,
            )
        elif level not in VALID_LEVELS:
            result.add_error(
                "E070",
                f"DETERMINISM level must be strict, structural, or semantic, got: {level}",
                loc,
            )

        # seed, vary and stable are accepted as written
        logger.debug(
            "%s: level=%r seed=%r vary=%s stable=%s",
            loc,
            level,
            field_value(fields, "seed"),
            "vary" in fields,
            "stable" in fields,
        )
