"""
Classification Resolver
=======================
Maps heading text to a classification tag by case-insensitive keyword
containment. The keyword table is declared in priority order; the first
tag with a matching keyword wins.
"""

from __future__ import annotations

from typing import Optional

from .models import Classification

DEFAULT_CLASSIFICATION = Classification.K1

KEYWORD_TABLE: tuple[tuple[Classification, tuple[str, ...]], ...] = (
    (Classification.K1, ("basiswissen", "basis", "k1", "grundwissen")),
    (Classification.K2, ("erweitertes wissen", "erweitertes", "k2", "erweitert")),
    (Classification.K3, ("vertiefendes wissen", "vertiefendes", "k3", "vertieft")),
    (Classification.SOURCES, (
        "quellenverzeichnis",
        "quellen",
        "literatur",
        "literaturverzeichnis",
        "referenzen",
        "bibliographie",
    )),
)


def find_classification(text: str) -> Optional[Classification]:
    """Return the first matching tag, or None when no keyword occurs."""
    lowered = text.strip().lower()
    for tag, keywords in KEYWORD_TABLE:
        if any(keyword in lowered for keyword in keywords):
            return tag
    return None


def resolve(heading: str) -> Classification:
    """Classify a level-2 heading, falling back to K1."""
    return find_classification(heading) or DEFAULT_CLASSIFICATION
