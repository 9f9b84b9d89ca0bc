# SPDX-License-Identifier: MIT
"""
Simplex Lint

A Python package for soft-parsing and linting Simplex specifications:
landmark-structured documents describing functions, their rules, completion
criteria, examples and errors.

Usage:
    from simplex_lint import parse, lint_string, Linter, LintConfig

    # Parse a spec
    spec = parse(content)

    # Lint with defaults
    result = lint_string(content)

    # Lint with custom thresholds
    result = Linter(LintConfig(max_rules=20)).lint("spec.md", content)
    print(result.to_json())
"""

__version__ = "0.1.0"

from .parser import (
    parse,
    Parser,
    ParsedSpec,
    FunctionBlock,
    Landmark,
)

from .result import (
    LintError,
    LintStats,
    LintResult,
    MultiResult,
)

from .complexity import (
    ComplexityChecker,
    ComplexityConfig,
    count_branches,
    count_examples,
    count_rule_items,
)

from .structural import StructuralChecker
from .evolution import EvolutionChecker
from .determinism import DeterminismChecker
from .config import ConfigError, LintConfig
from .linter import Linter, lint_string

__all__ = [
    # Parser exports
    "parse",
    "Parser",
    "ParsedSpec",
    "FunctionBlock",
    "Landmark",
    # Result exports
    "LintError",
    "LintStats",
    "LintResult",
    "MultiResult",
    # Checker exports
    "StructuralChecker",
    "ComplexityChecker",
    "ComplexityConfig",
    "EvolutionChecker",
    "DeterminismChecker",
    "count_branches",
    "count_examples",
    "count_rule_items",
    # Linter exports
    "ConfigError",
    "LintConfig",
    "Linter",
    "lint_string",
    # Version
    "__version__",
]
