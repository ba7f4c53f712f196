"""
List Builder
============
Finite state machine that merges list item lines into <ul>/<ol> markup.

States:
    NONE       no list open
    UNORDERED  inside <ul>
    ORDERED    inside <ol>

One pending item slot holds the text of the item being assembled, so
continuation lines can be appended before the item is emitted. A blank
line emits the pending item but keeps the list open.
"""

from __future__ import annotations

import logging
import re
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)

# "- item" or "* item"
UNORDERED_ITEM_PATTERN = re.compile(r"^\s*[-*]\s+(.*)$")

# "1. item"
ORDERED_ITEM_PATTERN = re.compile(r"^\s*\d+\.\s+(.*)$")

# Markup emitted by earlier stages; never continuation text
BLOCK_MARKUP_PATTERN = re.compile(r"^\s*<(?:h[1-6]|table)\b", re.IGNORECASE)


class ListMode(Enum):
    NONE = "NONE"
    UNORDERED = "UNORDERED"
    ORDERED = "ORDERED"


_LIST_TAGS = {
    ListMode.UNORDERED: "ul",
    ListMode.ORDERED: "ol",
}


class ListBuilder:
    """Consumes lines one at a time and collects the transformed output."""

    def __init__(self):
        self.mode = ListMode.NONE
        self.pending_item: Optional[str] = None
        self.output: list[str] = []

    def reset(self):
        self.mode = ListMode.NONE
        self.pending_item = None
        self.output = []

    def build(self, lines: list[str]) -> list[str]:
        self.reset()
        for line in lines:
            self.feed(line)
        self.finish()
        return self.output

    def feed(self, line: str):
        """Dispatch a line to the transition for its category."""
        unordered = UNORDERED_ITEM_PATTERN.match(line)
        if unordered:
            self.on_item(ListMode.UNORDERED, unordered.group(1))
            return

        ordered = ORDERED_ITEM_PATTERN.match(line)
        if ordered:
            self.on_item(ListMode.ORDERED, ordered.group(1))
            return

        if not line.strip():
            self.on_blank(line)
        elif BLOCK_MARKUP_PATTERN.match(line):
            self.on_block_markup(line)
        else:
            self.on_text(line)

    # ─── Transitions ──────────────────────────────────────────────────────

    def on_item(self, mode: ListMode, text: str):
        """Start a new item, switching list type if needed."""
        self._close_item()
        if self.mode != mode:
            self._close_list()
            self.output.append(f"<{_LIST_TAGS[mode]}>")
            self.mode = mode
        self.pending_item = text.strip()

    def on_blank(self, line: str):
        """Emit the pending item; the list stays open."""
        self._close_item()
        self.output.append(line)

    def on_text(self, line: str):
        """Continue the pending item, or end the list and pass through."""
        if self.pending_item is not None:
            self.pending_item = f"{self.pending_item} {line.strip()}".strip()
            return
        self._close_list()
        self.output.append(line)

    def on_block_markup(self, line: str):
        self._close_item()
        self._close_list()
        self.output.append(line)

    def finish(self):
        self._close_item()
        self._close_list()

    # ─── Helpers ──────────────────────────────────────────────────────────

    def _close_item(self):
        if self.pending_item is None:
            return
        self.output.append(f"<li>{self.pending_item}</li>")
        self.pending_item = None

    def _close_list(self):
        if self.mode == ListMode.NONE:
            return
        self.output.append(f"</{_LIST_TAGS[self.mode]}>")
        self.mode = ListMode.NONE


def build_lists(lines: list[str]) -> list[str]:
    return ListBuilder().build(lines)
