"""Extraction entrypoint composing normalization, isolation, lineage and assembly."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from pathlib import Path
from typing import Callable

from lxml import etree

from eadindex.ingestion.assembler import assemble_record
from eadindex.ingestion.config import ExtractionSettings
from eadindex.ingestion.errors import IngestionError
from eadindex.ingestion.extractor import find_components, locate_document_id, parse_document
from eadindex.ingestion.isolator import isolate_component, serialize_component
from eadindex.ingestion.lineage import (
    derive_title,
    has_component_children,
    parent_component_id,
    resolve_lineage,
)
from eadindex.ingestion.models import ComponentRecord
from eadindex.ingestion.normalization import normalize_whitespace

logger = logging.getLogger(__name__)

TitleResolver = Callable[[etree._Element], str]


@dataclass(slots=True)
class ExtractionResult:
    """All records produced from one finding aid."""

    eadid: str
    records: list[ComponentRecord] = field(default_factory=list)
    source_path: str | None = None

    def to_dict(self) -> dict[str, object]:
        return {
            "source_path": self.source_path,
            "eadid": self.eadid,
            "count": len(self.records),
            "records": [record.to_fields() for record in self.records],
        }


class ComponentIngestor:
    """Turn one EAD document into standalone component records."""

    def __init__(
        self,
        settings: ExtractionSettings | None = None,
        *,
        title_resolver: TitleResolver | None = None,
    ) -> None:
        self._settings = settings or ExtractionSettings()
        self._title_resolver = title_resolver or self._default_title

    @property
    def settings(self) -> ExtractionSettings:
        return self._settings

    def ingest(self, path: str | Path, *, eadid: str | None = None) -> ExtractionResult:
        """Read a finding aid from disk and extract its components."""

        source = Path(path)
        raw_bytes = self._read_bytes(source)
        return self.extract(raw_bytes, path=source, eadid=eadid)

    def extract(
        self,
        source: str | bytes,
        *,
        path: Path | None = None,
        eadid: str | None = None,
    ) -> ExtractionResult:
        """Extract records from raw markup; ``eadid`` overrides the document's own."""

        root = parse_document(source, path=path)
        document_id = eadid or locate_document_id(root) or self._fallback_document_id(path)
        components = find_components(root)
        logger.info("Found %s components in %s", len(components), path or document_id or "<input>")

        taken_ids = {local_id for local_id in (node.get("id") for node in components) if local_id is not None}
        records = [
            self.build_record(node, eadid=document_id, fallback_id=_fallback_local_id(position, taken_ids))
            for position, node in enumerate(components, start=1)
        ]
        return ExtractionResult(
            eadid=document_id,
            records=records,
            source_path=str(path) if path is not None else None,
        )

    def build_record(self, node: etree._Element, *, eadid: str, fallback_id: str) -> ComponentRecord:
        """Assemble the record of one component; ``node`` must still have its ancestors.

        ``fallback_id`` replaces a missing ``id`` attribute in the composite id.
        """

        part = isolate_component(node)
        local_id = node.get("id")
        lineage = resolve_lineage(node, placeholder=self._settings.no_title_placeholder)
        if local_id is None:
            logger.debug(
                "Component without id in %s recorded as %s (top level: %s)",
                eadid,
                fallback_id,
                lineage.is_top_level,
            )

        return assemble_record(
            eadid=eadid,
            local_id=local_id,
            fallback_id=fallback_id,
            parent_id=parent_component_id(node),
            lineage=lineage,
            has_children=has_component_children(node),
            title=self._title_resolver(part),
            level=node.get("level"),
            text=normalize_whitespace(" ".join(part.itertext())),
            xml=serialize_component(part),
            heading_separator=self._settings.heading_separator,
        )

    def _default_title(self, part: etree._Element) -> str:
        return derive_title(part, placeholder=self._settings.no_title_placeholder)

    def _fallback_document_id(self, path: Path | None) -> str:
        fallback = path.stem if path is not None else ""
        logger.warning("Finding aid has no eadid; using %r as document id", fallback)
        return fallback

    def _read_bytes(self, path: Path) -> bytes:
        try:
            return path.read_bytes()
        except OSError as exc:
            raise IngestionError(path, f"Failed to read source file: {exc}") from exc


def _fallback_local_id(position: int, taken_ids: set[str]) -> str:
    """Positional stand-in for a missing id that avoids every id in the document."""

    candidate = f"component-{position}"
    suffix = 1
    while candidate in taken_ids:
        suffix += 1
        candidate = f"component-{position}-{suffix}"
    return candidate
