"""Reconstruct a component's position in its original hierarchy."""

from __future__ import annotations

from collections.abc import Iterator

from lxml import etree

from eadindex.ingestion.extractor import is_component
from eadindex.ingestion.models import Lineage
from eadindex.ingestion.normalization import clean_display_text, inner_markup

NO_TITLE_PLACEHOLDER = "[No title available]"
_LEAF_LEVEL_MARKERS = ("file", "item")


def iter_ancestor_components(node: etree._Element) -> Iterator[etree._Element]:
    """Yield enclosing components from the immediate parent outward.

    Stops at the first parent that is not a component.
    """

    parent = node.getparent()
    while is_component(parent):
        yield parent
        parent = parent.getparent()


def parent_id_list(node: etree._Element) -> list[str]:
    """Ancestor ``id`` attributes, root first; ancestors without one are skipped."""

    ids = [ancestor.get("id") for ancestor in iter_ancestor_components(node)]
    return [value for value in reversed(ids) if value is not None]


def parent_title_list(node: etree._Element, *, placeholder: str = NO_TITLE_PLACEHOLDER) -> list[str]:
    """Ancestor display titles, root first; one entry per ancestor level.

    Titles are read from each ancestor's own ``did``, which nested components
    never reach, so no ancestor subtree is copied.
    """

    titles = [
        derive_title(ancestor, placeholder=placeholder)
        for ancestor in iter_ancestor_components(node)
    ]
    titles.reverse()
    return titles


def resolve_lineage(node: etree._Element, *, placeholder: str = NO_TITLE_PLACEHOLDER) -> Lineage:
    return Lineage(
        ids=tuple(parent_id_list(node)),
        titles=tuple(parent_title_list(node, placeholder=placeholder)),
    )


def parent_component_id(node: etree._Element) -> str | None:
    parent = node.getparent()
    if not is_component(parent):
        return None
    return parent.get("id")


def _first_content(part: etree._Element, path: str) -> str | None:
    element = part.find(path)
    if element is None:
        return None
    if not "".join(element.itertext()).strip():
        return None
    return inner_markup(element)


def derive_title(part: etree._Element, *, placeholder: str = NO_TITLE_PLACEHOLDER) -> str:
    """Pick the unit title, else the unit date, else ``placeholder``; then clean it.

    Only the direct ``did`` child of ``part`` is consulted, so nested components
    never contribute, whether or not ``part`` has been isolated.
    """

    for path in ("did/unittitle", "did/unitdate"):
        content = _first_content(part, path)
        if content is None:
            continue
        cleaned = clean_display_text(content)
        if cleaned:
            return cleaned
    return placeholder


def has_component_children(node: etree._Element) -> bool:
    """False for ``file`` and ``item`` levels; True otherwise, including no level."""

    level = node.get("level")
    if level is None:
        return True
    return not any(marker in level for marker in _LEAF_LEVEL_MARKERS)
