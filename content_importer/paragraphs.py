"""
Paragraph Wrapper
=================
Groups consecutive plain-text lines into <p> blocks. Block-level markup
(headings, lists, tables) passes through untouched and ends any open
paragraph, as does a blank line.
"""

from __future__ import annotations

import re

BLOCK_LEVEL_PATTERN = re.compile(
    r"^<(?:h[1-6]|ul|ol|li|table|/ul|/ol|/table)\b", re.IGNORECASE
)


def is_block_level(line: str) -> bool:
    return bool(BLOCK_LEVEL_PATTERN.match(line.strip()))


def wrap_paragraphs(lines: list[str]) -> list[str]:
    output: list[str] = []
    current: list[str] = []

    def close_paragraph():
        if current:
            output.append("<p>" + " ".join(current) + "</p>")
            current.clear()

    for line in lines:
        trimmed = line.strip()
        if is_block_level(trimmed):
            close_paragraph()
            output.append(trimmed)
        elif not trimmed:
            close_paragraph()
        else:
            current.append(trimmed)

    close_paragraph()
    return output
