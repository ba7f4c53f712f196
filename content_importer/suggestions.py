"""
Suggestion Matcher
==================
Proposes a style identifier per classification from a catalog of
existing blocks supplied by the caller. Never raises: a classification
without a match maps to None.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Union

from .models import (
    CatalogEntry,
    Classification,
    StyleMappingReport,
    StyleOption,
    SuggestionSet,
)

logger = logging.getLogger(__name__)

CatalogItem = Union[CatalogEntry, tuple[str, str], dict]

# Identifiers used by convention for the tiered styles
CONVENTIONAL_IDENTIFIERS = {
    Classification.K1: "infotext_k1",
    Classification.K2: "infotext_k2",
    Classification.K3: "infotext_k3",
}

SUGGESTION_KEYWORDS: dict[Classification, tuple[str, ...]] = {
    Classification.K1: ("k1",),
    Classification.K2: ("k2",),
    Classification.K3: ("k3",),
    Classification.SOURCES: ("quellen", "literatur", "referenz", "bibliographie"),
}


def to_entry(item: CatalogItem) -> Optional[CatalogEntry]:
    """
    Convert one catalog item, or return None when it is malformed.

    A missing or null label becomes "".
    """
    if isinstance(item, CatalogEntry):
        return item

    if isinstance(item, dict):
        identifier = item.get("identifier")
        label = item.get("label")
    elif isinstance(item, (tuple, list)) and len(item) == 2:
        identifier, label = item
    else:
        return None

    if not isinstance(identifier, str) or not identifier:
        return None
    if label is not None and not isinstance(label, str):
        return None
    return CatalogEntry(identifier=identifier, label=label or "")


def to_catalog(
    items: Iterable[CatalogItem],
    strict: bool = False,
) -> list[CatalogEntry]:
    """
    Accept CatalogEntry models, (identifier, label) pairs or dicts.

    Malformed items are skipped with a warning. With strict=True they
    raise ValueError instead.
    """
    catalog = []
    for index, item in enumerate(items):
        entry = to_entry(item)
        if entry is None:
            if strict:
                raise ValueError(f"Malformed catalog entry at index {index}: {item!r}")
            logger.warning(f"Skipping malformed catalog entry at index {index}: {item!r}")
            continue
        catalog.append(entry)
    return catalog


def find_by_keywords(
    catalog: list[CatalogEntry],
    keywords: tuple[str, ...],
) -> Optional[str]:
    """First entry whose label or identifier contains any keyword."""
    for entry in catalog:
        if any(keyword in entry.search_text for keyword in keywords):
            return entry.identifier
    return None


def suggest_for(
    classification: Classification,
    catalog: list[CatalogEntry],
) -> Optional[str]:
    conventional = CONVENTIONAL_IDENTIFIERS.get(classification)
    if conventional and any(e.identifier == conventional for e in catalog):
        return conventional
    return find_by_keywords(catalog, SUGGESTION_KEYWORDS[classification])


def suggest(items: Iterable[CatalogItem]) -> SuggestionSet:
    """Build the suggestion set for every classification."""
    catalog = to_catalog(items)
    suggestions = SuggestionSet(**{
        c.value: suggest_for(c, catalog) for c in Classification
    })
    logger.debug(f"Suggestions from {len(catalog)} catalog entries: {suggestions}")
    return suggestions


def style_options(items: Iterable[CatalogItem]) -> list[StyleOption]:
    """Catalog entries as selectable options, ordered by label."""
    catalog = to_catalog(items)
    return [
        StyleOption(value=e.identifier, label=e.label or e.identifier)
        for e in sorted(catalog, key=lambda e: (e.label or e.identifier).lower())
    ]


def style_mappings(items: Iterable[CatalogItem]) -> StyleMappingReport:
    catalog = to_catalog(items)
    return StyleMappingReport(
        styles=style_options(catalog),
        suggestions=suggest(catalog),
    )
