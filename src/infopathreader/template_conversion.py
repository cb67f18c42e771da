"""Conversion of rendered views into Savant templates with FormBuilder hooks."""

from __future__ import annotations

from typing import TYPE_CHECKING

import lxml.html
from lxml import etree

from infopathreader.logging import get_logger
from infopathreader.processing.normalization import binding_path, convert_field_name
from infopathreader.processing.xml import is_element
from infopathreader.typing.enums import ControlType

if TYPE_CHECKING:
    from collections.abc import Callable

logger = get_logger(__name__)

SUBMIT_FIELD = "__submit__"
FORM_ATTRIBUTES_HOOK = "<form <?php echo $this->form['attributes']?>>"

# The HTML parser keeps prefixed attribute names verbatim.
_BINDING_ATTRIBUTE = "xd:binding"
_CONTROL_ATTRIBUTE = "xd:xctname"
_DOCUMENT_TAGS = frozenset({"html", "body", "form"})

_CONVERTED_CONTROLS = frozenset(
    {
        ControlType.PLAIN_TEXT,
        ControlType.COMBOBOX,
        ControlType.DROPDOWN,
        ControlType.OPTION_BUTTON,
        ControlType.DATE_PICKER_TEXT,
        ControlType.LIST_BOX,
        ControlType.CHECK_BOX,
    },
)


def form_hook(field_name: str) -> etree._ProcessingInstruction:
    """Build the PHP instruction echoing a FormBuilder element.

    Args:
        field_name (str): Converted field name.

    Returns:
        etree._ProcessingInstruction: `<?php echo $this->form['<field>']['html']?>`.
    """
    return etree.ProcessingInstruction("php", f"echo $this->form['{field_name}']['html']?")


def convert_template(
    html: str,
    field_name_converter: Callable[[str], str] = convert_field_name,
) -> str:
    """Generate a Savant template with DB_DataObject_FormBuilder hooks.

    Args:
        html (str): Rendered view HTML, as returned without form attributes.
        field_name_converter (Callable[[str], str]): Maps InfoPath field names
            to PHP-friendly names.

    Returns:
        str: Template HTML.
    """
    document = lxml.html.document_fromstring(html)
    body = document.find("body")
    if body is None:
        body = etree.SubElement(document, "body")
    form = etree.Element("form")
    form.text, body.text = body.text, None
    for child in list(body):
        form.append(child)
    body.append(form)

    replacements: list[tuple[etree._Element, str | None, str]] = []
    for element in document.iter():
        if not is_element(element):
            continue
        binding = element.get(_BINDING_ATTRIBUTE, "")
        control = element.get(_CONTROL_ATTRIBUTE, "")
        steps = binding_path(binding)
        if steps and control in _CONVERTED_CONTROLS:
            replacements.append((element, control, field_name_converter(steps[-1])))
        elif element.get("type") == "button" and element.get("value") == "Submit":
            replacements.append((element, None, SUBMIT_FIELD))

    emitted_options: set[str] = set()
    for element, control, field_name in replacements:
        target = _replacement_target(element, control)
        if target is None or target.getparent() is None:
            continue
        if control == ControlType.OPTION_BUTTON and field_name in emitted_options:
            _remove_keeping_tail(target)
            continue
        if control == ControlType.OPTION_BUTTON:
            emitted_options.add(field_name)
        _replace_keeping_tail(target, form_hook(field_name))

    logger.debug("Template converted", extra={"hooks": len(replacements)})
    template_html = etree.tostring(document, method="html", encoding="unicode")
    return template_html.replace("<form>", FORM_ATTRIBUTES_HOOK)


def _replacement_target(element: etree._Element, control: str | None) -> etree._Element | None:
    """Return the node a control's placeholder replaces.

    Option buttons sit two levels deep in their labelled container and date
    pickers one level deep in the picker block.
    """
    if control == ControlType.OPTION_BUTTON:
        parent = element.getparent()
        if parent is None or parent.tag in _DOCUMENT_TAGS:
            return element
        grandparent = parent.getparent()
        if grandparent is None or grandparent.tag in _DOCUMENT_TAGS:
            return parent
        return grandparent
    if control == ControlType.DATE_PICKER_TEXT:
        return element.getparent()
    return element


def _replace_keeping_tail(old: etree._Element, new: etree._Element) -> None:
    parent = old.getparent()
    new.tail = old.tail
    parent.replace(old, new)


def _remove_keeping_tail(old: etree._Element) -> None:
    parent = old.getparent()
    if old.tail:
        previous = old.getprevious()
        if previous is not None:
            previous.tail = (previous.tail or "") + old.tail
        else:
            parent.text = (parent.text or "") + old.tail
    parent.remove(old)
