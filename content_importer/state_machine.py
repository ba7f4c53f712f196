"""
Heading State Machine
=====================
Walks normalized lines and delimits the raw line range that belongs to
each (topic, classification, title) triple:

    #   Topic           sets the topic, resets everything below it
    ##  Classification  resolved via keyword table; for SOURCES the
                        heading itself is the section title
    ### Title           names the section, never part of its content

A triple is flushed to the aggregator whenever the next heading starts
and once more at end of input. Triples without content are dropped.
"""

from __future__ import annotations

import logging
import re
from typing import Callable, Optional, Sequence

from .aggregator import SectionAggregator
from .classifier import resolve
from .converter import markdown_to_markup
from .models import Classification, ParseResult, Section
from .normalizer import is_horizontal_rule

logger = logging.getLogger(__name__)

# ─── Heading Patterns ─────────────────────────────────────────────────────────

TOPIC_PATTERN = re.compile(r"^#\s+(.+)$")
CLASSIFICATION_PATTERN = re.compile(r"^##\s+(.+)$")
TITLE_PATTERN = re.compile(r"^###\s+(.+)$")


class HeadingStateMachine:
    """
    Transforms normalized lines into Sections. A fresh instance (or a
    call to parse(), which resets all state) is used per document.
    """

    def __init__(
        self,
        aggregator: Optional[SectionAggregator] = None,
        convert: Callable[[Sequence[str]], str] = markdown_to_markup,
    ):
        self.aggregator = aggregator or SectionAggregator()
        self.convert = convert
        self.topic: Optional[str] = None
        self.classification: Optional[Classification] = None
        self.title: Optional[str] = None
        self.buffer: list[str] = []

    def reset(self):
        """Reset the state machine for a fresh parsing run."""
        self.aggregator = SectionAggregator()
        self.topic = None
        self.classification = None
        self.title = None
        self.buffer = []

    def parse(self, lines: Sequence[str]) -> ParseResult:
        self.reset()
        for line in lines:
            self.feed(line)
        self.finalize()
        return self.aggregator.build_result()

    def finalize(self):
        """Flush the pending triple at end of input."""
        self._flush()

    def feed(self, line: str):
        trimmed = line.strip()

        if is_horizontal_rule(trimmed):
            return

        match = TOPIC_PATTERN.match(trimmed)
        if match:
            self.on_topic(match.group(1).strip())
            return

        match = CLASSIFICATION_PATTERN.match(trimmed)
        if match:
            self.on_classification(match.group(1).strip())
            return

        match = TITLE_PATTERN.match(trimmed)
        if match:
            self.on_title(match.group(1).strip())
            return

        if self.topic is not None and self.classification is not None:
            self.buffer.append(line)

    # ─── Transitions ──────────────────────────────────────────────────────

    def on_topic(self, text: str):
        self._flush()
        logger.debug(f"Topic: {text}")
        self.topic = text
        self.classification = None
        self.title = None

    def on_classification(self, text: str):
        self._flush()
        self.classification = resolve(text)
        # SOURCES sections are named by their level-2 heading
        if self.classification == Classification.SOURCES:
            self.title = text
        else:
            self.title = None
        logger.debug(f"Classification: '{text}' -> {self.classification.value}")

    def on_title(self, text: str):
        self._flush()
        self.title = text

    # ─── Flushing ─────────────────────────────────────────────────────────

    def has_content(self) -> bool:
        return any(line.strip() for line in self.buffer)

    def is_complete(self) -> bool:
        return (
            self.topic is not None
            and self.classification is not None
            and self.title is not None
            and self.has_content()
        )

    def _flush(self):
        """Emit a Section for a complete triple; always clear the buffer."""
        if self.is_complete():
            markup = self.convert(_trim_blank_edges(self.buffer))
            if markup.strip():
                self.aggregator.add(Section(
                    topic=self.topic,
                    classification=self.classification,
                    title=self.title,
                    markup=markup,
                ))
            else:
                logger.debug(f"Dropping section {self.title!r}: no markup left")
        elif self.has_content():
            logger.debug(
                f"Dropping content without a complete heading triple "
                f"(topic={self.topic!r}, title={self.title!r})"
            )
        self.buffer = []


def _trim_blank_edges(lines: list[str]) -> list[str]:
    start, end = 0, len(lines)
    while start < end and not lines[start].strip():
        start += 1
    while end > start and not lines[end - 1].strip():
        end -= 1
    return lines[start:end]
