# SPDX-License-Identifier: MIT
"""
Field scanning for key/value landmark bodies.

BASELINE, EVAL and DETERMINISM blocks share one shape::

    reference: previous version
    preserve:
      - existing behaviour
    evolve:
      - new behaviour

Each recognized ``name:`` header may carry a same-line value and is followed
by zero or more dash-prefixed items, which belong to it until the next
recognized header.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional


@dataclass
class FieldEntry:
    """A recognized field header, its same-line value and following items."""

    name: str
    value: str = ""
    items: List[str] = field(default_factory=list)


def scan_fields(content: str, names: Iterable[str]) -> Dict[str, FieldEntry]:
    """
    Scan landmark content for recognized field headers.

    Header names are matched case-sensitively as a line prefix ``name:``
    after stripping indentation. A repeated header replaces the earlier one.
    Dash items before the first header are ignored; other unrecognized lines
    do not end the current header's item list.

    Args:
        content: Landmark content
        names: Recognized field names (without the colon)

    Returns:
        Mapping of field name to FieldEntry, only for headers present
    """
    prefixes = [(name, f"{name}:") for name in names]
    fields: Dict[str, FieldEntry] = {}
    current: Optional[FieldEntry] = None

    for line in content.split("\n"):
        stripped = line.strip()
        if not stripped:
            continue

        for name, prefix in prefixes:
            if stripped.startswith(prefix):
                current = FieldEntry(name=name, value=stripped[len(prefix):].strip())
                fields[name] = current
                break
        else:
            if stripped.startswith("-") and current is not None:
                current.items.append(stripped[1:].strip())

    return fields


def field_value(fields: Dict[str, FieldEntry], name: str) -> str:
    """Return the same-line value of a field, or "" when absent."""
    entry = fields.get(name)
    return entry.value if entry else ""
