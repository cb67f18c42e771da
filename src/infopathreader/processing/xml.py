"""lxml helpers shared by the manifest, schema and view readers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from lxml import etree

if TYPE_CHECKING:
    from collections.abc import Container, Iterator

XSD_NAMESPACE = "http://www.w3.org/2001/XMLSchema"
XSL_NAMESPACE = "http://www.w3.org/1999/XSL/Transform"
XSF_NAMESPACE = "http://schemas.microsoft.com/office/infopath/2003/solutionDefinition"
XD_NAMESPACE = "http://schemas.microsoft.com/office/infopath/2003"

NAMESPACES = {
    "xsd": XSD_NAMESPACE,
    "xsl": XSL_NAMESPACE,
    "xsf": XSF_NAMESPACE,
    "xd": XD_NAMESPACE,
}

XD_BINDING = f"{{{XD_NAMESPACE}}}binding"
XD_CONTROL_NAME = f"{{{XD_NAMESPACE}}}xctname"
XD_ON_VALUE = f"{{{XD_NAMESPACE}}}onValue"


def _parser() -> etree.XMLParser:
    return etree.XMLParser(resolve_entities=False, no_network=True, remove_blank_text=False)


def parse_xml(data: bytes) -> etree._ElementTree:
    """Parse an XML document without entity expansion or network access.

    Args:
        data (bytes): Raw document.

    Raises:
        etree.XMLSyntaxError: If the document is malformed.

    Returns:
        etree._ElementTree: Parsed document.
    """
    return etree.ElementTree(etree.fromstring(data, parser=_parser()))


def is_element(node: object) -> bool:
    """Return whether a node is an element (not a comment or processing instruction)."""
    return isinstance(node, etree._Element) and isinstance(node.tag, str)  # noqa: SLF001


def elements_named(root: etree._Element, name: str) -> Iterator[etree._Element]:
    """Iterate presentation elements by local name, skipping XSLT instructions.

    Views may or may not put their HTML in a namespace, so matching is done on
    the local name only.

    Args:
        root (etree._Element): Subtree root.
        name (str): Local element name, e.g. `select`.

    Yields:
        etree._Element: Matching elements in document order.
    """
    for element in root.iter():
        if not is_element(element):
            continue
        qname = etree.QName(element)
        if qname.localname == name and qname.namespace != XSL_NAMESPACE:
            yield element


def text_without(element: etree._Element, excluded: Container[etree._Element] = ()) -> str:
    """Return the text content of an element, leaving out some subtrees.

    Tails of excluded elements are kept, which mirrors cloning the element,
    removing the subtrees and reading its text content. Comments and
    processing instructions contribute only their tails.

    Args:
        element (etree._Element): Element to read.
        excluded (Container[etree._Element]): Subtrees to leave out.

    Returns:
        str: Concatenated text.
    """
    parts: list[str] = [element.text or ""] if is_element(element) else []
    for child in element:
        if is_element(child) and child not in excluded:
            parts.append(text_without(child, excluded))
        parts.append(child.tail or "")
    return "".join(parts)


def is_xsl(element: etree._Element, name: str) -> bool:
    """Return whether an element is the XSLT instruction `name`."""
    return is_element(element) and element.tag == f"{{{XSL_NAMESPACE}}}{name}"
