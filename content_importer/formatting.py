"""
Inline Formatter
================
Line-level conversions that run before block structuring:
headings of levels 4-6 and bold/italic emphasis.

Underscore italics (`_text_`) are deliberately left alone: documents
carry formulas such as `c_0` or `x_i_j` that must survive untouched.
"""

from __future__ import annotations

import re

# "#### Title" .. "###### Title"; levels 1-3 belong to the state machine
SUBHEADING_PATTERN = re.compile(r"^\s*(#{4,6})\s+(.+?)\s*$")

# Spans never cross a "|" so emphasis stays inside one table cell
BOLD_ITALIC_PATTERN = re.compile(r"\*\*\*(?!\s)([^|]+?)(?<!\s)\*\*\*")
BOLD_STAR_PATTERN = re.compile(r"\*\*([^|]+?)\*\*")
BOLD_UNDERSCORE_PATTERN = re.compile(r"__([^|]+?)__")

# No whitespace right inside the markers, so "* item" stays a list marker
ITALIC_STAR_PATTERN = re.compile(r"\*(?!\s)([^|]+?)(?<!\s)\*")


def convert_subheading(line: str) -> str:
    match = SUBHEADING_PATTERN.match(line)
    if not match:
        return line
    level = len(match.group(1))
    return f"<h{level}>{match.group(2)}</h{level}>"


def format_inline(line: str) -> str:
    """Replace bold and italic markers with <strong>/<em>."""
    line = BOLD_ITALIC_PATTERN.sub(r"<strong><em>\1</em></strong>", line)
    line = BOLD_STAR_PATTERN.sub(r"<strong>\1</strong>", line)
    line = BOLD_UNDERSCORE_PATTERN.sub(r"<strong>\1</strong>", line)
    line = ITALIC_STAR_PATTERN.sub(r"<em>\1</em>", line)
    return line


def convert_subheadings(lines: list[str]) -> list[str]:
    return [convert_subheading(line) for line in lines]


def format_emphasis(lines: list[str]) -> list[str]:
    return [format_inline(line) for line in lines]
