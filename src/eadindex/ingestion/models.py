"""Canonical data structures emitted by component extraction."""

from __future__ import annotations

from dataclasses import dataclass, field

FieldValue = str | bool | list[str]


@dataclass(frozen=True, slots=True)
class Lineage:
    """Ancestor identifiers and titles, ordered from outermost ancestor to parent.

    The two sequences are indexed independently: ancestors without an ``id``
    contribute a title but no identifier.
    """

    ids: tuple[str, ...] = ()
    titles: tuple[str, ...] = ()

    @property
    def is_top_level(self) -> bool:
        return not self.titles


@dataclass(frozen=True, slots=True)
class ComponentRecord:
    """One indexable component detached from its source tree."""

    id: str
    eadid: str
    local_id: str | None
    parent_id: str | None
    lineage: Lineage = field(default_factory=Lineage)
    has_children: bool = True
    level: str | None = None
    title: str = ""
    heading: str = ""
    text: str = ""
    xml: str = ""

    @property
    def parent_ids(self) -> list[str]:
        return list(self.lineage.ids)

    @property
    def parent_titles(self) -> list[str]:
        return list(self.lineage.titles)

    def to_fields(self) -> dict[str, FieldValue]:
        """Return the flat field mapping handed to the search index client."""

        fields: dict[str, FieldValue] = {
            "id": self.id,
            "eadid_s": self.eadid,
        }
        if self.local_id is not None:
            fields["ref_s"] = self.local_id
        if self.parent_id is not None:
            fields["parent_id_s"] = self.parent_id
        fields["parent_id_list_t"] = self.parent_ids
        fields["parent_unittitle_list_t"] = self.parent_titles
        fields["component_children_b"] = self.has_children
        if self.level is not None:
            fields["component_level_s"] = self.level
        fields["title_display"] = self.title
        fields["heading_display"] = self.heading
        if self.text:
            fields["text"] = self.text
        if self.xml:
            fields["xml_display"] = self.xml
        return fields
