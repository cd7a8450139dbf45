"""
Line-oriented field grammar for a single place block.

Every field is a ``Label: value`` line. Labels are matched case-insensitively
at the start of a line, optionally preceded by markdown bullets or emphasis
(``- **Place Name:** Joe's Diner``), and the value runs to the end of the line.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable

DEFAULT_RATING = 4.5
ADDRESS_NOT_FOUND = "Address not found"

# Markdown noise a model may put before a label: bullets, quotes, headings,
# bold markers and list numbers ("1. ", "2) ").
_LINE_PREFIX = r"[ \t>*#\-]*(?:\d+[.)][ \t]*)?[ \t*]*"
# The rating must lead the value: "4.6/5" counts, "Not rated (opened 2021)" does not.
_RATING_RE = re.compile(r"[ \t*]*(\d+(?:\.\d*)?)")


def label_pattern(label: str) -> str:
    """Regex source matching ``label`` at line start, up to and including its colon."""
    return rf"{_LINE_PREFIX}{re.escape(label)}[ \t]*\**[ \t]*:[ \t]*\**"


def _compile(label: str) -> re.Pattern[str]:
    return re.compile(
        rf"^{label_pattern(label)}[ \t]*(.*)$",
        re.IGNORECASE | re.MULTILINE,
    )


def _parse_text(value: str) -> str | None:
    value = value.strip().strip("*").strip()
    return value or None


def _parse_rating(value: str) -> float | None:
    match = _RATING_RE.match(value)
    if not match:
        return None
    rating = float(match.group(1))
    # Clamp to the 5-point scale
    return max(0.0, min(5.0, rating))


@dataclass(frozen=True)
class FieldRule:
    key: str
    label: str
    required: bool
    default: Callable[[str], Any] | None
    parse: Callable[[str], Any]

    @property
    def pattern(self) -> re.Pattern[str]:
        return _PATTERNS[self.label]

    def find(self, block: str) -> Any | None:
        """Parsed value of the first line carrying this label, or ``None``."""
        match = self.pattern.search(block)
        if not match:
            return None
        return self.parse(match.group(1))


NAME_LABEL = "Place Name"

FIELD_RULES: tuple[FieldRule, ...] = (
    FieldRule("name", NAME_LABEL, True, None, _parse_text),
    FieldRule("category", "Category", False, lambda query: query, _parse_text),
    FieldRule("address", "Address", False, lambda query: ADDRESS_NOT_FOUND, _parse_text),
    FieldRule("rating", "Rating", False, lambda query: DEFAULT_RATING, _parse_rating),
    FieldRule("snippet", "Review", False, lambda query: f"Highly rated {query} spot.", _parse_text),
)

_PATTERNS: dict[str, re.Pattern[str]] = {rule.label: _compile(rule.label) for rule in FIELD_RULES}


def extract_fields(block: str, query: str) -> dict[str, Any] | None:
    """
    Recover the labelled fields of one block.

    Returns ``None`` when a required field (the place name) is missing, so the
    caller can discard the block. Optional fields fall back to their defaults,
    some of which mention the original ``query``.
    """
    fields: dict[str, Any] = {}
    for rule in FIELD_RULES:
        value = rule.find(block)
        if value is None:
            if rule.required:
                return None
            value = rule.default(query)
        fields[rule.key] = value
    return fields
