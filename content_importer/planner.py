"""
Import Planner
==============
Binds parsed sections to the style identifiers chosen for their
classification. Sections whose classification has no style are skipped.
Storing the planned blocks is left to the persistence layer.
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional, Union

from .exceptions import NothingToImportError
from .models import Classification, ParseResult, PlannedBlock, SuggestionSet

logger = logging.getLogger(__name__)

StyleMapping = Union[SuggestionSet, Mapping[Union[Classification, str], Optional[str]]]


def normalize_mappings(mappings: StyleMapping) -> dict[Classification, str]:
    """Key by Classification and drop empty entries."""
    if isinstance(mappings, SuggestionSet):
        mappings = mappings.as_mapping()

    normalized: dict[Classification, str] = {}
    for key, style in mappings.items():
        if not style:
            continue
        normalized[Classification(key)] = style
    return normalized


def build_import_plan(
    result: ParseResult,
    mappings: StyleMapping,
) -> list[PlannedBlock]:
    """
    Create one PlannedBlock per mapped section, in document order.

    Raises:
        NothingToImportError: If no section has a mapped style.
    """
    styles = normalize_mappings(mappings)
    plan = []
    skipped = 0

    for section in result.sections:
        style = styles.get(section.classification)
        if not style:
            skipped += 1
            continue
        plan.append(PlannedBlock(
            style=style,
            title=section.title,
            classification=section.classification,
            topic=section.topic,
            markup=section.markup,
        ))

    if skipped:
        logger.info(f"Skipped {skipped} section(s) without a style mapping")

    if not plan:
        raise NothingToImportError()

    return plan
