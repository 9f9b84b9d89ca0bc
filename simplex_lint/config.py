# SPDX-License-Identifier: MIT
"""Linter configuration."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Optional

from .complexity import ComplexityConfig


class ConfigError(Exception):
    """Raised when a configuration value is out of range."""

    def __init__(self, message: str, option: Optional[str] = None) -> None:
        self.option = option
        super().__init__(message)


@dataclass(frozen=True)
class LintConfig:
    """Thresholds and switches for a lint run."""

    max_rules: int = 15
    max_inputs: int = 6
    max_rule_length: int = 200
    max_functions: int = 10
    no_llm: bool = False  # semantic checks are not implemented either way
    verbose: bool = False

    @classmethod
    def from_overrides(cls, **overrides: Any) -> "LintConfig":
        """
        Build a config from optional overrides.

        None values (options the caller did not set) keep the default.

        Raises:
            ConfigError: If an option is unknown or a threshold is not positive
        """
        known = {f.name for f in fields(cls)}
        values = {}
        for name, value in overrides.items():
            if name not in known:
                raise ConfigError(f"Unknown option: {name}", option=name)
            if value is None:
                continue
            if name.startswith("max_") and value <= 0:
                raise ConfigError(f"{name} must be a positive integer, got {value}", option=name)
            values[name] = value
        return cls(**values)

    def complexity(self) -> ComplexityConfig:
        return ComplexityConfig(
            max_rules=self.max_rules,
            max_inputs=self.max_inputs,
            max_rule_length=self.max_rule_length,
            max_functions=self.max_functions,
        )
