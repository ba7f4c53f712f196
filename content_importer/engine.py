"""
Content Import Engine
=====================
Main orchestrator that combines normalization, heading state machine
parsing, markup conversion and aggregation into a complete import
pipeline.

Usage:
    engine = ImportEngine(config)
    result = engine.parse(markdown_text)
    # result is a ParseResult with sections, grouped sections and stats

Architecture:
    text → normalize → lines → HeadingStateMachine → (markup converter)
         → SectionAggregator → ParseResult (JSON)

Both `parse` and `suggest` are pure functions of their input; the
engine only adds logging and file handling around them.
"""

from __future__ import annotations

import json
import logging
import os
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

from .exceptions import EmptyInputError, ImporterError, ParseFailedError
from .models import (
    ParseResult,
    PlannedBlock,
    StyleMappingReport,
    SuggestionSet,
)
from .normalizer import normalize
from .planner import StyleMapping, build_import_plan
from .state_machine import HeadingStateMachine
from .suggestions import CatalogItem, style_mappings
from .suggestions import suggest as suggest_styles

logger = logging.getLogger(__name__)

LOG_FORMAT = "[%(asctime)s] %(levelname)-8s %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def parse(document: str) -> ParseResult:
    """
    Parse a Markdown document into classified sections.

    The text must be passed exactly as submitted; backslashes and other
    characters of embedded formulas are kept as they are.

    Raises:
        EmptyInputError: If the document has no content.
        ParseFailedError: If an unexpected error aborts the parse.
    """
    try:
        lines = normalize(document)
        if not lines:
            raise EmptyInputError()
        return HeadingStateMachine().parse(lines)
    except ImporterError:
        raise
    except Exception as e:
        logger.exception("Parse aborted")
        raise ParseFailedError(f"Failed to parse document: {e}") from e


def suggest(catalog: Iterable[CatalogItem]) -> SuggestionSet:
    """Suggest a style identifier per classification from a catalog."""
    return suggest_styles(catalog)


@dataclass
class ImporterConfig:
    """Configuration for the import engine."""

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None

    # Output settings
    output_dir: str = "output"
    save_output: bool = False

    # Input
    encoding: str = "utf-8"


class ImportEngine:
    """
    Content import engine.

    Orchestrates the full pipeline:
        1. Line normalization
        2. Heading state machine (section delimiting + classification)
        3. Markup conversion per section
        4. Aggregation and stats

    Holds no parse state; safe to share between threads.
    """

    def __init__(self, config: Optional[ImporterConfig] = None):
        self.config = config or ImporterConfig()
        self._setup_logging()

    def _setup_logging(self):
        """Configure logging based on config."""
        log_level = getattr(logging, self.config.log_level.upper(), logging.INFO)

        package_logger = logging.getLogger("content_importer")
        package_logger.setLevel(log_level)

        # Console handler
        if not package_logger.handlers:
            console = logging.StreamHandler()
            console.setLevel(log_level)
            console.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))
            package_logger.addHandler(console)

        # File handler
        if self.config.log_file and not any(
            isinstance(h, logging.FileHandler)
            and h.baseFilename == os.path.abspath(self.config.log_file)
            for h in package_logger.handlers
        ):
            log_dir = Path(self.config.log_file).parent
            log_dir.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(
                self.config.log_file, encoding="utf-8"
            )
            file_handler.setLevel(log_level)
            file_handler.setFormatter(
                logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT)
            )
            package_logger.addHandler(file_handler)

    def parse(self, document: str) -> ParseResult:
        """
        Parse document text into a ParseResult.

        Raises:
            EmptyInputError: If the document has no content.
            ParseFailedError: If an unexpected error aborts the parse.
        """
        start_time = time.time()
        logger.info(f"Starting parse of {len(document or '')} characters")

        try:
            result = parse(document)
        except EmptyInputError:
            logger.warning("No content found in document")
            raise

        elapsed = time.time() - start_time
        stats = result.stats
        logger.info(
            f"Parse complete in {elapsed:.3f}s: {stats.total} sections "
            f"(k1={stats.k1}, k2={stats.k2}, k3={stats.k3}, "
            f"sources={stats.sources})"
        )
        return result

    def parse_file(self, path: str) -> ParseResult:
        """
        Read and parse a document from disk.

        Raises:
            FileNotFoundError: If the document doesn't exist.
        """
        path = os.path.abspath(path)
        if not os.path.exists(path):
            raise FileNotFoundError(f"Document not found: {path}")

        # newline="" keeps "\r\n" for the normalizer
        with open(path, "r", encoding=self.config.encoding, newline="") as f:
            document = f.read()

        result = self.parse(document)

        if self.config.save_output:
            output_dir = Path(self.config.output_dir)
            output_dir.mkdir(parents=True, exist_ok=True)
            output_file = output_dir / f"{Path(path).stem}_sections.json"
            self._save_json(result.to_json_dict(), output_file)

        return result

    def suggest(self, catalog: Iterable[CatalogItem]) -> SuggestionSet:
        return suggest(catalog)

    def style_mappings(self, catalog: Iterable[CatalogItem]) -> StyleMappingReport:
        return style_mappings(catalog)

    def plan(
        self,
        result: ParseResult,
        mappings: StyleMapping,
    ) -> list[PlannedBlock]:
        plan = build_import_plan(result, mappings)
        logger.info(f"Planned {len(plan)} block(s) for import")
        return plan

    def _save_json(self, data: dict, filepath: Path):
        """Save a dict to JSON file."""
        try:
            with open(filepath, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False, default=str)
            logger.info(f"Saved JSON output: {filepath}")
        except OSError as e:
            logger.error(f"Failed to save JSON: {e}")
