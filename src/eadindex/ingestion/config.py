"""Runtime configuration for component extraction."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import os
from typing import Mapping

from eadindex.ingestion.assembler import HEADING_SEPARATOR
from eadindex.ingestion.lineage import NO_TITLE_PLACEHOLDER

DEFAULT_LOG_LEVEL = "INFO"
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True, slots=True)
class ExtractionSettings:
    """Validated settings shared by the ingestor and CLI."""

    heading_separator: str = HEADING_SEPARATOR
    no_title_placeholder: str = NO_TITLE_PLACEHOLDER
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ExtractionSettings":
        source: Mapping[str, str] = os.environ if environ is None else environ

        # Separator whitespace is significant, so it is not stripped.
        separator = source.get("EADINDEX_HEADING_SEPARATOR", HEADING_SEPARATOR)
        placeholder = source.get("EADINDEX_NO_TITLE_PLACEHOLDER", NO_TITLE_PLACEHOLDER).strip()
        log_level = source.get("EADINDEX_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()

        if not separator:
            raise ValueError("EADINDEX_HEADING_SEPARATOR cannot be empty")
        if not placeholder:
            raise ValueError("EADINDEX_NO_TITLE_PLACEHOLDER cannot be empty")
        if log_level not in _LOG_LEVELS:
            allowed = ", ".join(sorted(_LOG_LEVELS))
            raise ValueError(f"EADINDEX_LOG_LEVEL must be one of: {allowed}")

        return cls(heading_separator=separator, no_title_placeholder=placeholder, log_level=log_level)
