"""CLI entrypoint for extracting component records from one EAD finding aid."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from dotenv import load_dotenv

from eadindex.ingestion.config import ExtractionSettings
from eadindex.ingestion.errors import IngestionError
from eadindex.ingestion.ingestor import ComponentIngestor

load_dotenv()

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Extract indexable component records from an EAD file")
    parser.add_argument("--input", required=True, help="Path to the EAD XML document")
    parser.add_argument("--output", default=None, help="Write JSON here instead of stdout")
    parser.add_argument("--eadid", default=None, help="Override the document identifier")
    parser.add_argument("--indent", type=int, default=2, help="JSON indentation (0 for compact)")
    args = parser.parse_args(argv)

    try:
        settings = ExtractionSettings.from_env()
    except ValueError as error:
        print(json.dumps({"error": str(error)}, ensure_ascii=False))
        return 1

    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=settings.log_level_value,
    )

    ingestor = ComponentIngestor(settings)
    source = Path(args.input)
    try:
        result = ingestor.ingest(source, eadid=args.eadid)
    except IngestionError as error:
        logger.error("Extraction failed: %s", error)
        print(json.dumps({"source_path": str(source), "error": str(error)}, ensure_ascii=False))
        return 1

    indent = args.indent if args.indent > 0 else None
    rendered = json.dumps(result.to_dict(), ensure_ascii=False, indent=indent)
    if args.output:
        Path(args.output).write_text(rendered + "\n", encoding="utf-8")
        logger.info("Wrote %s records to %s", len(result.records), args.output)
    else:
        print(rendered)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
