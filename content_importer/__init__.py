"""
Content Importer
================
Structured-document importer that turns Markdown learning material into
typed, classified content sections.

Architecture:
    - Line Normalizer: Unifies line endings, strips front matter
    - Heading State Machine: Delimits (topic, classification, title) ranges
    - Classification Resolver: Keyword table for K1/K2/K3/sources headings
    - Markup Converter: Emphasis → tables → lists → paragraphs
    - Section Aggregator: Ordered sections, grouping and counts
    - Suggestion Matcher: Proposes styles from a caller-supplied catalog

Version: 1.0.0
"""

__version__ = "1.0.0"

from .engine import ImportEngine, ImporterConfig, parse, suggest  # noqa: E402
from .exceptions import (  # noqa: E402
    EmptyInputError,
    ImporterError,
    NothingToImportError,
    ParseFailedError,
)
from .models import (  # noqa: E402
    CatalogEntry,
    Classification,
    ParseResult,
    Section,
    SuggestionSet,
)

__all__ = [
    "CatalogEntry",
    "Classification",
    "EmptyInputError",
    "ImportEngine",
    "ImporterConfig",
    "ImporterError",
    "NothingToImportError",
    "ParseFailedError",
    "ParseResult",
    "Section",
    "SuggestionSet",
    "parse",
    "suggest",
]
