# SPDX-License-Identifier: MIT
"""
Simplex Structural Checker

Verifies that a spec has at least one FUNCTION, that every FUNCTION carries
the required landmarks, and that return types resolve against DATA blocks.

Codes:
    E001  No FUNCTION block found
    E002  FUNCTION missing RULES
    E003  FUNCTION missing DONE_WHEN
    E004  FUNCTION missing EXAMPLES
    E005  FUNCTION missing ERRORS (fixable)
    E006  Return type may reference undefined DATA type (warning)
"""

from __future__ import annotations

from typing import Set

from .parser import DONE_WHEN, ERRORS, EXAMPLES, RULES, FunctionBlock, ParsedSpec
from .result import LintResult, function_location

# Return types that never need a DATA definition
BUILTIN_TYPES = frozenset(
    {
        "string", "int", "integer", "number",
        "bool", "boolean", "float", "double",
        "list", "array", "map", "dict",
        "any", "void", "none", "null",
        "result", "output", "sum", "filtered",
        "valid", "issues", "timestamp", "id",
    }
)

COLLECTION_PREFIXES = ("listof", "arrayof", "setof")

ERRORS_SUGGESTION = (
    "Add ERRORS: block with at least: - any unhandled condition → fail with "
    "descriptive message"
)


def normalize_type_name(name: str) -> str:
    """
    Normalize a type name for comparison.

    Lowercases, drops spaces and underscores, then strips one leading
    "list of" / "array of" / "set of" prefix.
    """
    normalized = name.lower().replace(" ", "").replace("_", "")
    for prefix in COLLECTION_PREFIXES:
        if len(normalized) > len(prefix) and normalized.startswith(prefix):
            return normalized[len(prefix):]
    return normalized


def extract_type_name(content: str) -> str:
    """Return the DATA type name: the first whitespace-delimited token."""
    tokens = content.split(None, 1)
    return tokens[0] if tokens else ""


class StructuralChecker:
    """Structural validation of parsed specs."""

    def check(self, spec: ParsedSpec, result: LintResult) -> None:
        if not spec.functions:
            result.add_error("E001", "No FUNCTION block found", "spec")
            return

        for fn in spec.functions:
            self.check_required_landmarks(fn, result)

        if spec.data_blocks:
            self.check_data_references(spec, result)

    def check_required_landmarks(self, fn: FunctionBlock, result: LintResult) -> None:
        loc = function_location(fn.name)

        if not fn.has_landmark(RULES):
            result.add_error("E002", "FUNCTION missing RULES landmark", loc)
        if not fn.has_landmark(DONE_WHEN):
            result.add_error("E003", "FUNCTION missing DONE_WHEN landmark", loc)
        if not fn.has_landmark(EXAMPLES):
            result.add_error("E004", "FUNCTION missing EXAMPLES landmark", loc)
        if not fn.has_landmark(ERRORS):
            result.add_error_with_suggestion(
                "E005",
                "FUNCTION missing ERRORS landmark",
                loc,
                ERRORS_SUGGESTION,
                True,
            )

    def check_data_references(self, spec: ParsedSpec, result: LintResult) -> None:
        """Warn on return types that match neither a builtin nor a DATA type."""
        defined: Set[str] = set()
        for data in spec.data_blocks:
            type_name = extract_type_name(data.content)
            if type_name:
                defined.add(type_name)
                defined.add(normalize_type_name(type_name))

        for fn in spec.functions:
            if not fn.return_type:
                continue
            normalized = normalize_type_name(fn.return_type)
            if normalized in BUILTIN_TYPES:
                continue
            if normalized in defined or fn.return_type in defined:
                continue
            result.add_warning(
                "E006",
                f"Return type '{fn.return_type}' may reference undefined DATA type",
                function_location(fn.name),
            )

