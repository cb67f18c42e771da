"""Rendering of InfoPath views to HTML."""

from __future__ import annotations

from typing import TYPE_CHECKING

from lxml import etree

from infopathreader.exceptions import ViewRenderError
from infopathreader.logging import get_logger
from infopathreader.processing.xml import XD_BINDING, XD_CONTROL_NAME, XSL_NAMESPACE, elements_named, is_element
from infopathreader.typing.enums import ControlType

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = get_logger(__name__)

_XSL_ATTRIBUTE = f"{{{XSL_NAMESPACE}}}attribute"
_XSL_VALUE_OF = f"{{{XSL_NAMESPACE}}}value-of"


def render_view(stylesheet: etree._ElementTree, data: etree._ElementTree) -> str:
    """Apply a view stylesheet to a form data document.

    Args:
        stylesheet (etree._ElementTree): Parsed view stylesheet.
        data (etree._ElementTree): Parsed form data, usually `template.xml`.

    Raises:
        ViewRenderError: If the stylesheet cannot be compiled or applied.

    Returns:
        str: Serialized transformation output.
    """
    try:
        transform = etree.XSLT(stylesheet, access_control=etree.XSLTAccessControl.DENY_ALL)
        result = transform(data)
    except (etree.XSLTParseError, etree.XSLTApplyError) as exc:
        raise ViewRenderError(message=f"Failed to render view: {exc}") from exc
    return str(result)


def replace_text_controls(stylesheet: etree._ElementTree) -> int:
    """Turn bound single-line text boxes into `<input type="text">` elements.

    The stylesheet is modified in place; each control's `xsl:value-of` becomes
    the value of the generated input.

    Args:
        stylesheet (etree._ElementTree): Parsed view stylesheet.

    Returns:
        int: Number of replaced controls.
    """
    controls = [
        element
        for element in stylesheet.getroot().iter()
        if is_element(element)
        and element.get(XD_BINDING)
        and element.get(XD_CONTROL_NAME) == ControlType.PLAIN_TEXT
    ]
    for control in controls:
        parent = control.getparent()
        if parent is None:
            continue
        text_input = etree.Element("input")
        _xsl_attribute(text_input, "type").text = "text"
        _xsl_attribute(text_input, "name").text = control.get(XD_BINDING)
        value = _xsl_attribute(text_input, "value")
        value_of = control.find(f".//{_XSL_VALUE_OF}")
        if value_of is not None:
            value.append(value_of)
            value_of.tail = None
        text_input.tail = control.tail
        parent.replace(control, text_input)
    return len(controls)


def wrap_body_in_form(stylesheet: etree._ElementTree, attributes: Mapping[str, str]) -> bool:
    """Move the content of the view's `<body>` into a `<form>`.

    Args:
        stylesheet (etree._ElementTree): Parsed view stylesheet, modified in place.
        attributes (Mapping[str, str]): Attributes of the form element.

    Returns:
        bool: False when the stylesheet has no body element.
    """
    body = next(elements_named(stylesheet.getroot(), "body"), None)
    if body is None:
        logger.warning("View stylesheet has no body element")
        return False
    form = etree.Element("form")
    for key, value in attributes.items():
        form.set(key, value)
    form.text, body.text = body.text, None
    for child in list(body):
        form.append(child)
    body.append(form)
    return True


def prepare_form_view(stylesheet: etree._ElementTree, attributes: Mapping[str, str]) -> None:
    """Make a view submit-ready: text inputs plus an enclosing form.

    Args:
        stylesheet (etree._ElementTree): Parsed view stylesheet, modified in place.
        attributes (Mapping[str, str]): Attributes of the form element.
    """
    replaced = replace_text_controls(stylesheet)
    wrap_body_in_form(stylesheet, attributes)
    logger.debug("View prepared as form", extra={"text_inputs": replaced, "form_attributes": dict(attributes)})


def _xsl_attribute(parent: etree._Element, name: str) -> etree._Element:
    return etree.SubElement(parent, _XSL_ATTRIBUTE, name=name, nsmap={"xsl": XSL_NAMESPACE})
