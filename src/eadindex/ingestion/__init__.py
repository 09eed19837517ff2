"""Ingestion package interfaces."""

from .errors import IngestionError, ParseError
from .ingestor import ComponentIngestor, ExtractionResult
from .models import ComponentRecord, Lineage

__all__ = [
    "ComponentIngestor",
    "ComponentRecord",
    "ExtractionResult",
    "IngestionError",
    "Lineage",
    "ParseError",
]
