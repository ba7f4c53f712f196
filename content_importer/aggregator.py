"""
Section Aggregator
==================
Collects finished sections in document order, groups them by
classification and computes the per-classification counts.
"""

from __future__ import annotations

import logging

from .models import Classification, ParseResult, ParseStats, Section

logger = logging.getLogger(__name__)


class SectionAggregator:

    def __init__(self):
        self.sections: list[Section] = []
        self.grouped: dict[Classification, list[Section]] = {
            c: [] for c in Classification
        }

    def add(self, section: Section):
        self.sections.append(section)
        self.grouped[section.classification].append(section)
        logger.debug(
            f"Collected {section.classification.value} section "
            f"'{section.title}' under topic '{section.topic}'"
        )

    def compute_stats(self) -> ParseStats:
        counts = {c.value: len(items) for c, items in self.grouped.items()}
        return ParseStats(total=len(self.sections), **counts)

    def build_result(self) -> ParseResult:
        return ParseResult(
            sections=list(self.sections),
            grouped={c: list(items) for c, items in self.grouped.items()},
            stats=self.compute_stats(),
        )
