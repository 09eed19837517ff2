"""Detach one component from its tree, keeping only its own content."""

from __future__ import annotations

from copy import deepcopy

from lxml import etree

from eadindex.ingestion.extractor import COMPONENT_TAG


def isolate_component(node: etree._Element) -> etree._Element:
    """Return a standalone copy of ``node`` with every nested component removed.

    The copy has no parent and no tail, so the source tree is never touched and
    no ancestor content comes along. Unresolved entity references are copied as-is.
    """

    part = deepcopy(node)
    part.tail = None
    # Removing a component removes its whole subtree, so only outermost ones need detaching.
    for child in list(part.iterdescendants(COMPONENT_TAG)):
        parent = child.getparent()
        if parent is not None:
            parent.remove(child)
    return part


def serialize_component(part: etree._Element) -> str:
    return etree.tostring(part, encoding="unicode")
