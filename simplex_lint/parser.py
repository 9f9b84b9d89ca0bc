# SPDX-License-Identifier: MIT
"""
Simplex Soft Parser

Extracts structure from Simplex specifications without enforcing a grammar.
Landmarks (ALL_CAPS words followed by a colon at the start of a line) are
located, their content is sliced out, and the results are grouped into
FUNCTION blocks, DATA blocks and CONSTRAINT blocks.

Parsing never fails: malformed input degrades to fewer (or zero) functions,
and anything suspicious is recorded in ``ParsedSpec.parse_warnings``.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)


# =============================================================================
# Landmark Vocabulary
# =============================================================================

# Structural landmarks
DATA = "DATA"
CONSTRAINT = "CONSTRAINT"
FUNCTION = "FUNCTION"
BASELINE = "BASELINE"
EVAL = "EVAL"

# Function landmarks
RULES = "RULES"
DONE_WHEN = "DONE_WHEN"
EXAMPLES = "EXAMPLES"
ERRORS = "ERRORS"
READS = "READS"
WRITES = "WRITES"
TRIGGERS = "TRIGGERS"
NOT_ALLOWED = "NOT_ALLOWED"
HANDOFF = "HANDOFF"
UNCERTAIN = "UNCERTAIN"
DETERMINISM = "DETERMINISM"

STRUCTURAL_LANDMARKS = frozenset({DATA, CONSTRAINT, FUNCTION, BASELINE, EVAL})

# BASELINE and EVAL are both top-level and function-scoped
FUNCTION_LANDMARKS = frozenset(
    {
        RULES,
        DONE_WHEN,
        EXAMPLES,
        ERRORS,
        READS,
        WRITES,
        TRIGGERS,
        NOT_ALLOWED,
        HANDOFF,
        UNCERTAIN,
        DETERMINISM,
        BASELINE,
        EVAL,
    }
)

REQUIRED_FUNCTION_LANDMARKS = (RULES, DONE_WHEN, EXAMPLES, ERRORS)


# =============================================================================
# Data Classes
# =============================================================================


@dataclass
class Landmark:
    """A landmark declaration and the content beneath it."""

    name: str  # e.g. "FUNCTION", "RULES"
    content: str
    line_number: int  # 1-based


@dataclass
class FunctionBlock:
    """A FUNCTION declaration with its nested landmarks."""

    signature: str
    name: str = ""
    inputs: List[str] = field(default_factory=list)
    return_type: str = ""
    landmarks: Dict[str, Landmark] = field(default_factory=dict)
    line_number: int = 0

    def has_landmark(self, name: str) -> bool:
        return name in self.landmarks

    def get_landmark(self, name: str) -> Optional[Landmark]:
        return self.landmarks.get(name)

    def landmark_content(self, name: str) -> str:
        """Return the content of a nested landmark, or "" when absent."""
        landmark = self.landmarks.get(name)
        return landmark.content if landmark else ""

    @property
    def rules(self) -> str:
        return self.landmark_content(RULES)

    @property
    def examples(self) -> str:
        return self.landmark_content(EXAMPLES)

    @property
    def done_when(self) -> str:
        return self.landmark_content(DONE_WHEN)

    @property
    def errors(self) -> str:
        return self.landmark_content(ERRORS)

    @property
    def baseline(self) -> str:
        return self.landmark_content(BASELINE)

    @property
    def eval(self) -> str:
        return self.landmark_content(EVAL)

    @property
    def determinism(self) -> str:
        return self.landmark_content(DETERMINISM)

    @property
    def has_baseline(self) -> bool:
        return BASELINE in self.landmarks

    @property
    def has_eval(self) -> bool:
        return EVAL in self.landmarks

    @property
    def has_determinism(self) -> bool:
        return DETERMINISM in self.landmarks


@dataclass
class ParsedSpec:
    """A fully parsed Simplex specification."""

    functions: List[FunctionBlock] = field(default_factory=list)
    data_blocks: List[Landmark] = field(default_factory=list)
    constraints: List[Landmark] = field(default_factory=list)
    raw_text: str = ""
    parse_warnings: List[str] = field(default_factory=list)

    def get_function(self, name: str) -> Optional[FunctionBlock]:
        """Return the first function with the given name, or None."""
        for fn in self.functions:
            if fn.name == name:
                return fn
        return None


@dataclass
class LandmarkMatch:
    """A raw landmark declaration found by the scanner."""

    name: str
    remainder: str  # text on the declaration line after the colon
    line_number: int
    start: int
    end: int


# =============================================================================
# Regex Patterns
# =============================================================================

# Landmark declaration: column zero, ALL_CAPS (underscores allowed), colon
LANDMARK_RE = re.compile(r"^([A-Z][A-Z_]*):[ \t]*(.*)$", re.MULTILINE)

# Function signature: name(args) → return_type, ASCII "->" also accepted
SIGNATURE_RE = re.compile(r"^(\w+)\s*\(([^)]*)\)\s*(?:→|->)\s*(.+)$")


# =============================================================================
# Scanner and Assembler
# =============================================================================


def find_landmarks(text: str) -> List[LandmarkMatch]:
    """
    Find every landmark declaration in the text, in document order.

    A landmark-looking word that does not start a line is never a landmark.
    The name must begin with an uppercase letter, so a column-zero line such
    as ``_NOTE:`` is ordinary content of the preceding landmark.

    Args:
        text: The specification text

    Returns:
        List of LandmarkMatch records
    """
    matches: List[LandmarkMatch] = []
    for match in LANDMARK_RE.finditer(text):
        matches.append(
            LandmarkMatch(
                name=match.group(1),
                remainder=match.group(2).strip(),
                line_number=text.count("\n", 0, match.start()) + 1,
                start=match.start(),
                end=match.end(),
            )
        )
    return matches


def extract_landmarks(text: str, matches: List[LandmarkMatch]) -> List[Landmark]:
    """
    Slice the content belonging to each landmark.

    Content runs from the end of the declaration line to the start of the
    next declaration (or end of document). A same-line remainder is prepended.

    Args:
        text: The specification text
        matches: Scanner output for the same text

    Returns:
        List of Landmark objects in document order
    """
    landmarks: List[Landmark] = []

    for index, match in enumerate(matches):
        if index + 1 < len(matches):
            content_end = matches[index + 1].start
        else:
            content_end = len(text)

        content = text[match.end:content_end].strip()
        if match.remainder:
            content = f"{match.remainder}\n{content}" if content else match.remainder

        landmarks.append(
            Landmark(name=match.name, content=content, line_number=match.line_number)
        )

    return landmarks


def parse_signature(content: str) -> Tuple[str, str, List[str], str]:
    """
    Parse the signature line of a FUNCTION landmark.

    Format: name(arg1, arg2) → return_type

    An unparseable signature is not an error: the whole line becomes the
    name and inputs/return type are left empty.

    Args:
        content: Content of the FUNCTION landmark

    Returns:
        Tuple of (signature, name, inputs, return_type)
    """
    signature = content.split("\n", 1)[0].strip()

    match = SIGNATURE_RE.match(signature)
    if not match:
        return signature, signature, [], ""

    inputs = [arg.strip() for arg in match.group(2).split(",") if arg.strip()]
    return signature, match.group(1), inputs, match.group(3).strip()


def assemble(spec: ParsedSpec, landmarks: List[Landmark]) -> None:
    """
    Group landmarks into the spec structure in a single pass.

    FUNCTION blocks never nest, so only one "current function" is tracked.
    DATA and CONSTRAINT end the current function's context.

    Args:
        spec: The ParsedSpec to populate
        landmarks: Landmarks in document order
    """
    current: Optional[FunctionBlock] = None

    for landmark in landmarks:
        if landmark.name == FUNCTION:
            signature, name, inputs, return_type = parse_signature(landmark.content)
            current = FunctionBlock(
                signature=signature,
                name=name,
                inputs=inputs,
                return_type=return_type,
                line_number=landmark.line_number,
            )
            spec.functions.append(current)

        elif landmark.name == DATA:
            spec.data_blocks.append(landmark)
            current = None

        elif landmark.name == CONSTRAINT:
            spec.constraints.append(landmark)
            current = None

        elif landmark.name in FUNCTION_LANDMARKS:
            if current is not None:
                current.landmarks[landmark.name] = landmark
            else:
                spec.parse_warnings.append(
                    f"landmark {landmark.name} at line {landmark.line_number} "
                    "appears outside FUNCTION block"
                )

        else:
            spec.parse_warnings.append(
                f"unrecognized landmark: {landmark.name} at line {landmark.line_number}"
            )


# =============================================================================
# Parser
# =============================================================================


def parse(text: str) -> ParsedSpec:
    """
    Parse a Simplex specification.

    Args:
        text: The specification text

    Returns:
        ParsedSpec; zero functions in the worst case
    """
    spec = ParsedSpec(raw_text=text)

    matches = find_landmarks(text)
    if not matches:
        logger.debug("no landmarks found")
        return spec

    assemble(spec, extract_landmarks(text, matches))

    logger.debug(
        "parsed %d function(s), %d DATA, %d CONSTRAINT, %d warning(s)",
        len(spec.functions),
        len(spec.data_blocks),
        len(spec.constraints),
        len(spec.parse_warnings),
    )
    return spec


class Parser:
    """Reusable parser; holds nothing but the module's compiled patterns."""

    def parse(self, text: str) -> ParsedSpec:
        return parse(text)
