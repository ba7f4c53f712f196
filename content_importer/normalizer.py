"""
Line Normalizer
===============
Prepares raw document text for the heading state machine:
unified line endings, front matter removed, split into lines.
"""

from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

# Leading "---" block, only at the very start of the document
FRONT_MATTER_PATTERN = re.compile(
    r"\A---[ \t]*\n.*?\n---[ \t]*(?:\n|\Z)", re.DOTALL
)

# "---", "***", "___" (three or more, nothing else on the line)
HORIZONTAL_RULE_PATTERN = re.compile(r"^(?:-{3,}|\*{3,}|_{3,})$")


def normalize_line_endings(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


def strip_front_matter(text: str) -> str:
    """Remove a leading front-matter block, if present."""
    stripped, count = FRONT_MATTER_PATTERN.subn("", text, count=1)
    if count:
        logger.debug("Removed front matter block")
    return stripped


def is_horizontal_rule(line: str) -> bool:
    return bool(HORIZONTAL_RULE_PATTERN.match(line.strip()))


def normalize(text: str) -> list[str]:
    """
    Turn raw text into an ordered list of lines.

    Empty (or whitespace-only) input yields an empty list.
    """
    text = strip_front_matter(normalize_line_endings(text or ""))
    if not text.strip():
        return []
    return text.split("\n")
