"""Load EAD markup and select its component nodes in document order."""

from __future__ import annotations

from pathlib import Path
import re

from lxml import etree

from eadindex.ingestion.errors import ParseError
from eadindex.ingestion.normalization import normalize_whitespace

COMPONENT_TAG = "c"
DOCUMENT_ID_TAG = "eadid"

_NUMBERED_COMPONENT_RE = re.compile(r"c[0-9]{2}")
_XML_DECLARATION_RE = re.compile(r"^\s*<\?xml[^>]*\?>")


def is_component_tag(name: str) -> bool:
    """Return True for ``c`` and its numbered variants ``c01`` through ``c99``."""

    return name == COMPONENT_TAG or _NUMBERED_COMPONENT_RE.fullmatch(name) is not None


def is_component(element: etree._Element | None) -> bool:
    return element is not None and isinstance(element.tag, str) and element.tag == COMPONENT_TAG


def normalize_tree(root: etree._Element) -> etree._Element:
    """Drop element namespaces and collapse numbered component tags in place.

    Running it again on a normalized tree changes nothing.
    """

    for element in root.iter():
        if not isinstance(element.tag, str):
            continue
        name = etree.QName(element).localname
        if is_component_tag(name):
            name = COMPONENT_TAG
        if element.tag != name:
            element.tag = name
    etree.cleanup_namespaces(root)
    return root


def parse_document(source: str | bytes, *, path: Path | None = None) -> etree._Element:
    """Parse raw EAD markup and return its normalized root element."""

    if isinstance(source, str):
        # lxml refuses str input that still carries an encoding declaration.
        payload = _XML_DECLARATION_RE.sub("", source, count=1).encode("utf-8")
    else:
        payload = source

    # Entities declared in the internal subset are expanded; external ones stay as references.
    parser = etree.XMLParser(resolve_entities="internal", no_network=True, load_dtd=False, huge_tree=False)
    try:
        root = etree.fromstring(payload, parser=parser)
    except etree.XMLSyntaxError as exc:
        raise ParseError(path, f"Malformed finding aid: {exc.msg}", exc.lineno) from exc
    return normalize_tree(root)


def find_components(root: etree._Element) -> list[etree._Element]:
    """Return every component under ``root`` (root included) in document order."""

    return list(root.iter(COMPONENT_TAG))


def extract_components(source: str | bytes, *, path: Path | None = None) -> list[etree._Element]:
    """Parse ``source`` and return its components; an empty list is not an error."""

    return find_components(parse_document(source, path=path))


def locate_document_id(root: etree._Element) -> str | None:
    """Return the text of the first ``eadid`` element, or None when absent or blank."""

    element = next(root.iter(DOCUMENT_ID_TAG), None)
    if element is None:
        return None
    return normalize_whitespace("".join(element.itertext())) or None
