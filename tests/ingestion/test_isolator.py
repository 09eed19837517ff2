from __future__ import annotations

from lxml import etree

from eadindex.ingestion.extractor import extract_components
from eadindex.ingestion.isolator import isolate_component, serialize_component

_DOCUMENT = """
<ead>
  <eadid>doc</eadid>
  <dsc>
    <c01 id="s1" level="series">
      <did><unittitle>Series One</unittitle><unitdate>1900</unitdate></did>
      <scopecontent><p>Series notes.</p></scopecontent>
      <c02 id="f1" level="file">
        <did><unittitle>File One</unittitle></did>
        <c03 id="i1" level="item"><did><unittitle>Item One</unittitle></did></c03>
      </c02>
      <c02 id="f2" level="file"><did><unittitle>File Two</unittitle></did></c02>
    </c01>
  </dsc>
</ead>
"""


def test_isolated_component_keeps_own_content_only() -> None:
    series = extract_components(_DOCUMENT)[0]

    part = isolate_component(series)

    assert part.tag == "c"
    assert part.get("id") == "s1"
    assert part.findtext("did/unittitle") == "Series One"
    assert part.findtext("did/unitdate") == "1900"
    assert part.findtext("scopecontent/p") == "Series notes."
    assert list(part.iter("c"))[1:] == []
    assert "File One" not in serialize_component(part)
    assert "Item One" not in serialize_component(part)


def test_isolation_does_not_include_ancestors_or_mutate_source() -> None:
    components = extract_components(_DOCUMENT)
    file_node = components[1]
    before = etree.tostring(file_node.getroottree())

    part = isolate_component(file_node)

    assert part.getparent() is None
    assert "eadid" not in serialize_component(part)
    assert "Series One" not in serialize_component(part)
    assert etree.tostring(file_node.getroottree()) == before
    assert len(list(file_node.iter("c"))) == 2


def test_leaf_component_is_copied_unchanged() -> None:
    item = extract_components(_DOCUMENT)[2]

    part = isolate_component(item)

    assert serialize_component(part) == etree.tostring(item, encoding="unicode", with_tail=False)


def test_isolation_survives_internal_entities() -> None:
    node = extract_components(
        '<!DOCTYPE ead [<!ENTITY nyu "New York University">]>'
        "<ead><dsc><c01 id='a'><did><unittitle>Papers of &nyu;</unittitle></did>"
        "<c02 id='b'><did/></c02></c01></dsc></ead>"
    )[0]

    part = isolate_component(node)

    assert part.findtext("did/unittitle") == "Papers of New York University"
    assert list(part.iter("c"))[1:] == []


def test_isolated_copy_has_no_tail() -> None:
    first = extract_components("<ead><c01 id='a'><did/></c01> trailing text <c01 id='b'/></ead>")[0]

    part = isolate_component(first)

    assert part.tail is None
    assert "trailing" not in serialize_component(part)
