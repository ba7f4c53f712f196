"""
Markdown-to-Markup Converter
============================
Runs a block of raw lines through an ordered list of stages, each a
function from lines to lines:

    subheadings (h4-h6) → emphasis → tables → lists → paragraphs

Emphasis runs before structuring so generated table and list tags are
never scanned for emphasis markers. The order of STAGES is significant:
tables must be detected before lists, and both before paragraphs.
"""

from __future__ import annotations

import logging
from typing import Callable, Sequence

from .formatting import convert_subheadings, format_emphasis
from .lists import build_lists
from .paragraphs import wrap_paragraphs
from .tables import build_tables

logger = logging.getLogger(__name__)

Stage = Callable[[list[str]], list[str]]

STAGES: tuple[Stage, ...] = (
    convert_subheadings,
    format_emphasis,
    build_tables,
    build_lists,
    wrap_paragraphs,
)


def run_stages(lines: Sequence[str], stages: Sequence[Stage] = STAGES) -> list[str]:
    result = list(lines)
    for stage in stages:
        result = stage(result)
    return result


def markdown_to_markup(lines: Sequence[str]) -> str:
    """Convert one section's raw lines into a single markup string."""
    return "\n".join(run_stages(lines))
