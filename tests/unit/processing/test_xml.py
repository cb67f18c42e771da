from __future__ import annotations

import pytest
from lxml import etree

from infopathreader.processing.xml import elements_named, is_xsl, parse_xml, text_without

_XSL = "http://www.w3.org/1999/XSL/Transform"


def test_parse_xml_rejects_malformed_documents() -> None:
    with pytest.raises(etree.XMLSyntaxError):
        parse_xml(b"<root><unclosed></root>")


def test_text_without_keeps_tails_of_excluded_elements() -> None:
    document = parse_xml(b"<div>Before <input type='radio'>ignored</input> after<!-- note --> end</div>")
    div = document.getroot()
    control = div[0]

    assert text_without(div, [control]) == "Before  after end"


def test_text_without_reads_nested_text() -> None:
    document = parse_xml(b"<p>a<b>b<i>c</i></b>d</p>")

    assert text_without(document.getroot()) == "abcd"


def test_elements_named_skips_xslt_instructions() -> None:
    document = parse_xml(
        f'<xsl:stylesheet xmlns:xsl="{_XSL}"><xsl:template><select/><xsl:if/></xsl:template></xsl:stylesheet>'.encode(),
    )

    assert [etree.QName(element).localname for element in elements_named(document.getroot(), "select")] == ["select"]
    assert list(elements_named(document.getroot(), "template")) == []


def test_is_xsl() -> None:
    document = parse_xml(f'<xsl:if xmlns:xsl="{_XSL}"/>'.encode())

    assert is_xsl(document.getroot(), "if")
    assert not is_xsl(document.getroot(), "choose")
