from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from eadindex.ingestion.assembler import assemble_record, build_heading, composite_id
from eadindex.ingestion.models import Lineage


def test_composite_id_joins_document_and_local_ids() -> None:
    assert composite_id("abc123", "i1") == "abc123:i1"


def test_heading_joins_ancestor_titles_and_own_title() -> None:
    lineage = Lineage(ids=("s1",), titles=("Series One", "File A"))

    assert build_heading(lineage, "Item One") == "Series One >> File A >> Item One"
    assert build_heading(Lineage(), "Item One") == "Item One"
    assert build_heading(lineage, "Item", separator=" / ") == "Series One / File A / Item"


def test_assembled_record_fields() -> None:
    record = assemble_record(
        eadid="abc123",
        local_id="i1",
        fallback_id="component-2",
        parent_id="s1",
        lineage=Lineage(ids=("s1",), titles=("Series One",)),
        has_children=False,
        title="Item One",
        level="item",
    )

    fields = record.to_fields()

    assert fields == {
        "id": "abc123:i1",
        "eadid_s": "abc123",
        "ref_s": "i1",
        "parent_id_s": "s1",
        "parent_id_list_t": ["s1"],
        "parent_unittitle_list_t": ["Series One"],
        "component_children_b": False,
        "component_level_s": "item",
        "title_display": "Item One",
        "heading_display": "Series One >> Item One",
    }


def test_missing_identifiers_are_omitted() -> None:
    record = assemble_record(
        eadid="abc123",
        local_id=None,
        fallback_id="component-1",
        parent_id=None,
        lineage=Lineage(),
        has_children=True,
        title="[No title available]",
    )

    fields = record.to_fields()

    assert fields["id"] == "abc123:component-1"
    assert "parent_id_s" not in fields
    assert "ref_s" not in fields
    assert "component_level_s" not in fields
    assert fields["parent_id_list_t"] == []
    assert fields["parent_unittitle_list_t"] == []


def test_record_is_immutable_and_field_lists_are_copies() -> None:
    record = assemble_record(
        eadid="d",
        local_id="x",
        fallback_id="component-1",
        parent_id=None,
        lineage=Lineage(ids=("a",), titles=("A",)),
        has_children=True,
        title="X",
    )

    with pytest.raises(FrozenInstanceError):
        record.title = "changed"  # type: ignore[misc]

    record.to_fields()["parent_id_list_t"].append("mutated")  # type: ignore[union-attr]
    assert record.parent_ids == ["a"]
