# SPDX-License-Identifier: MIT
"""
Simplex Linter

Runs the soft parser and every checker over a specification and fills in
the summary statistics.

Usage:
    from simplex_lint import Linter, LintConfig, lint_string

    result = lint_string(content)
    result = Linter(LintConfig(max_rules=20)).lint("spec.md", content)
"""

from __future__ import annotations

import logging
from typing import Optional

from .complexity import ComplexityChecker, count_branches, count_examples
from .config import LintConfig
from .determinism import DeterminismChecker
from .evolution import EvolutionChecker
from .parser import ParsedSpec, Parser
from .result import LintResult
from .structural import StructuralChecker

logger = logging.getLogger(__name__)


class Linter:
    """
    Lint orchestrator.

    Holds no per-run state, so one instance can lint any number of inputs.
    """

    def __init__(self, config: Optional[LintConfig] = None) -> None:
        self.config = config or LintConfig()
        self.parser = Parser()
        self.structural_checker = StructuralChecker()
        self.complexity_checker = ComplexityChecker(self.config.complexity())
        self.evolution_checker = EvolutionChecker()
        self.determinism_checker = DeterminismChecker()

    def lint(self, name: str, content: str) -> LintResult:
        """
        Lint a specification.

        Args:
            name: Label for the input (file path or "<stdin>")
            content: The specification text

        Returns:
            LintResult with findings and stats
        """
        result = LintResult(file=name)
        spec = self.parser.parse(content)

        for warning in spec.parse_warnings:
            result.add_warning("W001", warning, "parse")

        self.structural_checker.check(spec, result)
        self.complexity_checker.check(spec, result)
        self.evolution_checker.check(spec, result)
        self.determinism_checker.check(spec, result)

        self.compute_stats(spec, result)

        if not self.config.no_llm:
            logger.debug("%s: semantic checks not implemented, skipping", name)

        logger.debug(
            "%s: %d error(s), %d warning(s)", name, len(result.errors), len(result.warnings)
        )
        return result

    def compute_stats(self, spec: ParsedSpec, result: LintResult) -> None:
        stats = result.stats
        stats.functions = len(spec.functions)
        stats.examples = sum(count_examples(fn.examples) for fn in spec.functions if fn.examples)
        stats.branches = sum(count_branches(fn.rules) for fn in spec.functions if fn.rules)

        # raw ratio, not capped at 100
        if stats.branches > 0:
            stats.coverage_percent = stats.examples / stats.branches * 100


def lint_string(content: str, name: str = "input") -> LintResult:
    """Lint a specification string with the default configuration."""
    return Linter().lint(name, content)
