"""Combine isolated content and lineage into a final component record."""

from __future__ import annotations

from eadindex.ingestion.models import ComponentRecord, Lineage

HEADING_SEPARATOR = " >> "
COMPOSITE_ID_SEPARATOR = ":"


def composite_id(eadid: str, local_id: str) -> str:
    return COMPOSITE_ID_SEPARATOR.join([eadid, local_id])


def build_heading(lineage: Lineage, title: str, *, separator: str = HEADING_SEPARATOR) -> str:
    """Join ancestor titles and the component's own title into one heading."""

    return separator.join([*lineage.titles, title])


def assemble_record(
    *,
    eadid: str,
    local_id: str | None,
    fallback_id: str,
    parent_id: str | None,
    lineage: Lineage,
    has_children: bool,
    title: str,
    level: str | None = None,
    text: str = "",
    xml: str = "",
    heading_separator: str = HEADING_SEPARATOR,
) -> ComponentRecord:
    """Build the immutable record for one component.

    ``title`` is the component's own display title, computed by the caller.
    ``fallback_id`` stands in for ``local_id`` in the composite id only.
    """

    return ComponentRecord(
        id=composite_id(eadid, local_id if local_id is not None else fallback_id),
        eadid=eadid,
        local_id=local_id,
        parent_id=parent_id,
        lineage=lineage,
        has_children=has_children,
        level=level,
        title=title,
        heading=build_heading(lineage, title, separator=heading_separator),
        text=text,
        xml=xml,
    )
