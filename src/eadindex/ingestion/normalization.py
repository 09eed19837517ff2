"""Text normalization helpers for titles and other indexed display strings."""

from __future__ import annotations

import re
from xml.sax.saxutils import escape

from lxml import etree

_WHITESPACE_RE = re.compile(r"\s+")

# Inline EAD formatting element and attribute, rewritten to their HTML equivalents.
_FORMATTING_TAG = "title"
_FORMATTING_ATTRIBUTE = "render"
_ALLOWED_TAG = "span"
_ALLOWED_ATTRIBUTE = "class"
_DROPPED_WITH_CONTENT = ("script", "style")

_FRAGMENT_PARSER = etree.XMLParser(recover=True, resolve_entities=False, no_network=True, load_dtd=False)


def normalize_whitespace(text: str) -> str:
    """Collapse repeated whitespace and trim boundaries."""

    return _WHITESPACE_RE.sub(" ", text).strip()


def inner_markup(element: etree._Element) -> str:
    """Serialize an element's children and text, without the element's own tag."""

    parts = [escape(element.text or "")]
    for child in element:
        parts.append(etree.tostring(child, encoding="unicode", with_tail=True))
    return "".join(parts)


def clean_display_text(markup: str) -> str:
    """Convert EAD inline formatting into a sanitized single-line display string.

    ``<title render="x">`` becomes ``<span class="x">``. Every other element is
    unwrapped (its text is kept), every attribute except ``class`` on ``span``
    is dropped, and whitespace is collapsed.
    """

    if not markup or not markup.strip():
        return ""

    wrapper = etree.fromstring(f"<fragment>{markup}</fragment>", parser=_FRAGMENT_PARSER)
    if wrapper is None:
        return normalize_whitespace(escape(markup))

    for element in wrapper.iterdescendants():
        if not isinstance(element.tag, str):
            continue
        if etree.QName(element).localname == _FORMATTING_TAG:
            element.tag = _ALLOWED_TAG
        if _FORMATTING_ATTRIBUTE in element.attrib:
            value = element.attrib.pop(_FORMATTING_ATTRIBUTE)
            element.set(_ALLOWED_ATTRIBUTE, value)

    etree.strip_elements(wrapper, *_DROPPED_WITH_CONTENT, with_tail=False)
    disallowed = {
        element.tag
        for element in wrapper.iterdescendants()
        if isinstance(element.tag, str) and element.tag != _ALLOWED_TAG
    }
    etree.strip_tags(wrapper, etree.Comment, etree.ProcessingInstruction, *disallowed)

    for span in wrapper.iter(_ALLOWED_TAG):
        for key in list(span.attrib):
            if key != _ALLOWED_ATTRIBUTE:
                del span.attrib[key]

    return normalize_whitespace(inner_markup(wrapper))
