# SPDX-License-Identifier: MIT
"""
Simplex Lint Results

Error/warning records, summary statistics and the per-file result that the
checkers write into, with JSON and plain-text rendering.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

SEVERITY_ERROR = "error"
SEVERITY_WARNING = "warning"


@dataclass
class LintError:
    """A single linting issue (error or warning)."""

    code: str  # e.g. "E001"
    message: str
    location: str  # e.g. "FUNCTION filter_policies" or "spec"
    severity: str = SEVERITY_ERROR
    suggestion: Optional[str] = None
    fixable: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "location": self.location,
            "severity": self.severity,
            "suggestion": self.suggestion,
            "fixable": self.fixable,
        }


@dataclass
class LintStats:
    """Summary statistics for a linted spec."""

    functions: int = 0
    branches: int = 0
    examples: int = 0
    coverage_percent: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "functions": self.functions,
            "branches": self.branches,
            "examples": self.examples,
            "coverage_percent": self.coverage_percent,
        }


@dataclass
class LintResult:
    """Complete linting output for a single input."""

    file: str
    valid: bool = True
    errors: List[LintError] = field(default_factory=list)
    warnings: List[LintError] = field(default_factory=list)
    stats: LintStats = field(default_factory=LintStats)

    def add_error(self, code: str, message: str, location: str) -> None:
        """Add an error; the result stays invalid from here on."""
        self.errors.append(LintError(code, message, location, SEVERITY_ERROR))
        self.valid = False

    def add_error_with_suggestion(
        self,
        code: str,
        message: str,
        location: str,
        suggestion: str,
        fixable: bool,
    ) -> None:
        """Add an error carrying a fix suggestion."""
        self.errors.append(
            LintError(code, message, location, SEVERITY_ERROR, suggestion, fixable)
        )
        self.valid = False

    def add_warning(self, code: str, message: str, location: str) -> None:
        """Add a warning (does not affect validity)."""
        self.warnings.append(LintError(code, message, location, SEVERITY_WARNING))

    def add_warning_with_suggestion(
        self,
        code: str,
        message: str,
        location: str,
        suggestion: str,
        fixable: bool,
    ) -> None:
        """Add a warning carrying a fix suggestion."""
        self.warnings.append(
            LintError(code, message, location, SEVERITY_WARNING, suggestion, fixable)
        )

    def codes(self) -> List[str]:
        """Error and warning codes, errors first."""
        return [e.code for e in self.errors] + [w.code for w in self.warnings]

    def to_dict(self) -> Dict[str, Any]:
        """Convert result to dictionary for JSON serialization."""
        return {
            "file": self.file,
            "valid": self.valid,
            "errors": [e.to_dict() for e in self.errors],
            "warnings": [w.to_dict() for w in self.warnings],
            "stats": self.stats.to_dict(),
        }

    def to_json(self) -> str:
        """Convert result to JSON string."""
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)

    def to_text(self) -> str:
        """
        Render the result as deterministic plain text.

        Returns:
            Errors, warnings, a count summary and the VALID/INVALID verdict
        """
        lines: List[str] = [f"simplex-lint: {self.file}", ""]

        if self.errors:
            lines.append("ERRORS:")
            for e in self.errors:
                lines.extend(format_issue(e))
            lines.append("")

        if self.warnings:
            lines.append("WARNINGS:")
            for w in self.warnings:
                lines.extend(format_issue(w))
            lines.append("")

        lines.append("SUMMARY:")
        lines.append(f"  {len(self.errors)} error(s), {len(self.warnings)} warning(s)")
        lines.append(f"  Spec is {'VALID' if self.valid else 'INVALID'}")

        return "\n".join(lines) + "\n"


def function_location(name: str) -> str:
    """Location string for issues raised against a FUNCTION block."""
    return f"FUNCTION {name}" if name else "FUNCTION (unnamed)"


def format_issue(issue: LintError) -> List[str]:
    """Format a single error or warning for text output."""
    lines = [f"  {issue.code} [{issue.location}] {issue.message}"]
    if issue.suggestion is not None:
        lines.append(f"       suggestion: {issue.suggestion}")
    return lines


@dataclass
class MultiResult:
    """Aggregate of results from several inputs."""

    results: List[LintResult] = field(default_factory=list)

    @property
    def total_files(self) -> int:
        return len(self.results)

    @property
    def total_valid(self) -> int:
        return sum(1 for r in self.results if r.valid)

    def all_valid(self) -> bool:
        return self.total_valid == self.total_files

    def to_dict(self) -> Dict[str, Any]:
        return {
            "results": [r.to_dict() for r in self.results],
            "total_valid": self.total_valid,
            "total_files": self.total_files,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)

    def to_text(self) -> str:
        parts: List[str] = []
        for index, result in enumerate(self.results):
            parts.append(result.to_text())
            if index < len(self.results) - 1:
                parts.append("\n" + "-" * 60 + "\n\n")

        parts.append("\n" + "=" * 60 + "\n")
        parts.append("OVERALL:\n")
        parts.append(f"  {self.total_valid}/{self.total_files} specs valid\n")
        return "".join(parts)
