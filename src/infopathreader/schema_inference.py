"""Field table inference from schema, default data and the primary view.

The three documents are authored independently and only correlate through
field names, so the table is built by four ordered passes over one mutable
mapping:

1. structural pass over `myschema.xsd` (names, types, required-ness);
2. default values from `template.xml`;
3. single-value options (selects, list boxes, radio buttons) from the view;
4. folding of checkbox groups into a single multi-valued field.

Later passes consult types and presence established by earlier ones.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from lxml import etree
from pydantic import ValidationError

from infopathreader.exceptions import SchemaInconsistencyError
from infopathreader.logging import get_logger
from infopathreader.processing.normalization import binding_path, local_name, trim_label
from infopathreader.processing.xml import (
    NAMESPACES,
    XD_BINDING,
    XD_CONTROL_NAME,
    XD_ON_VALUE,
    XSD_NAMESPACE,
    elements_named,
    is_element,
    is_xsl,
    text_without,
)
from infopathreader.typing.enums import ControlType, OptionType
from infopathreader.typing.models import FieldDescriptor

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = get_logger(__name__)

REQUIRED_STRING_TYPE = "requiredString"
OTHER_SUFFIX = "other"

FieldTable = dict[str, FieldDescriptor]


def infer_schema(
    *,
    schema: etree._ElementTree,
    defaults: etree._ElementTree,
    view: etree._ElementTree,
    root_element: str,
    group_checkboxes: bool = True,
) -> FieldTable:
    """Build the field table of a form.

    Args:
        schema (etree._ElementTree): Parsed `myschema.xsd`.
        defaults (etree._ElementTree): Parsed `template.xml`.
        view (etree._ElementTree): Parsed stylesheet of the primary view.
        root_element (str): Root element name from the manifest.
        group_checkboxes (bool): Fold grouped boolean checkboxes into one field.

    Returns:
        FieldTable: Mapping of field name to descriptor.
    """
    table = read_structure(schema, root_element)
    apply_defaults(table, defaults, root_element)
    apply_select_options(table, view)
    apply_radio_options(table, view)
    if group_checkboxes:
        fold_checkbox_groups(table, schema, view, root_element)
    logger.info("Schema inferred", extra={"fields": len(table), "root_element": root_element})
    return table


def read_structure(schema: etree._ElementTree, root_element: str) -> FieldTable:
    """Seed the table with every typed element declaration except the root.

    Args:
        schema (etree._ElementTree): Parsed schema document.
        root_element (str): Root element name.

    Returns:
        FieldTable: Table with names, types and required flags.
    """
    table: FieldTable = {}
    for element in schema.iter(f"{{{XSD_NAMESPACE}}}element"):
        name = element.get("name", "")
        declared_type = element.get("type", "")
        if not name or not declared_type or name == root_element:
            continue

        base_type = local_name(declared_type)
        required = base_type == REQUIRED_STRING_TYPE
        try:
            table[name] = FieldDescriptor(
                name=name,
                type="string" if required else base_type,
                required=required,
            )
        except ValidationError:
            logger.warning("Skipping element with unsupported name or type", extra={"field": name})
    return table


def apply_defaults(table: FieldTable, defaults: etree._ElementTree, root_element: str) -> None:
    """Copy non-empty default-data values onto known fields.

    Args:
        table (FieldTable): Field table to update.
        defaults (etree._ElementTree): Parsed `template.xml`.
        root_element (str): Root element name.
    """
    root = _find_default_root(defaults, root_element)
    if root is None:
        logger.warning("Root element missing from default data", extra={"root_element": root_element})
        return

    namespace = etree.QName(root).namespace
    tag = f"{{{namespace}}}*" if namespace else "*"
    for element in root.iterdescendants(tag):
        name = etree.QName(element).localname
        if name not in table:
            continue
        text = text_without(element)
        if text:
            table[name].default = text


def apply_select_options(table: FieldTable, view: etree._ElementTree) -> None:
    """Record options of drop-down and list-box controls.

    Args:
        table (FieldTable): Field table to update.
        view (etree._ElementTree): Parsed primary view stylesheet.
    """
    for select in elements_named(view.getroot(), "select"):
        binding = select.get(XD_BINDING, "")
        if not binding:
            continue
        field_name = local_name(binding)
        try:
            descriptor = _lookup(table, field_name, "Select control bound to undeclared field")
        except SchemaInconsistencyError as exc:
            logger.warning(str(exc), extra={"field": field_name})
            continue

        if select.get(XD_CONTROL_NAME) == ControlType.LIST_BOX:
            descriptor.option_type = OptionType.MULTISELECT
        else:
            descriptor.option_type = OptionType.SELECT
        for option in elements_named(select, "option"):
            conditionals = [child for child in option.iter() if is_xsl(child, "if")]
            descriptor.options[option.get("value", "")] = trim_label(text_without(option, conditionals))


def apply_radio_options(table: FieldTable, view: etree._ElementTree) -> None:
    """Record the option carried by each radio button.

    Args:
        table (FieldTable): Field table to update.
        view (etree._ElementTree): Parsed primary view stylesheet.
    """
    for control in elements_named(view.getroot(), "input"):
        if control.get("type") != "radio":
            continue
        binding = control.get(XD_BINDING, "")
        field_name = local_name(binding)
        try:
            descriptor = _lookup(table, field_name, "Radio button bound to undeclared field")
        except SchemaInconsistencyError as exc:
            logger.warning(str(exc), extra={"field": field_name})
            continue

        descriptor.options[control.get(XD_ON_VALUE, "")] = _label_around(control) or ""
        descriptor.option_type = OptionType.RADIO


def fold_checkbox_groups(
    table: FieldTable,
    schema: etree._ElementTree,
    view: etree._ElementTree,
    root_element: str,
) -> None:
    """Replace qualifying groups of boolean fields with one checkbox field.

    A group qualifies when every member reference is named `<group>_<option>`
    and typed boolean, except an optional free-text `<group>_other` typed
    string. A boolean `<group>_other` is an ordinary option. A group with any
    other member is left untouched.

    Args:
        table (FieldTable): Field table to update.
        schema (etree._ElementTree): Parsed schema document.
        view (etree._ElementTree): Parsed primary view stylesheet.
        root_element (str): Root element name.
    """
    groups = schema.xpath("//xsd:element[@name][xsd:complexType]", namespaces=NAMESPACES)
    for group in groups:
        group_name = group.get("name")
        if group_name == root_element:
            continue
        try:
            members = _group_members(table, group)
        except SchemaInconsistencyError as exc:
            logger.warning(str(exc), extra={"group": group_name})
            continue
        if members is None:
            logger.debug("Group left unfolded", extra={"group": group_name})
            continue
        _fold_group(table, group_name, members, view)


def _group_members(table: FieldTable, group: etree._Element) -> list[str] | None:
    """Return the member names of a foldable group, or None if it does not qualify.

    Raises:
        SchemaInconsistencyError: If a member reference has no declaration.
    """
    group_name = group.get("name", "")
    prefix = f"{group_name}_"
    other_name = f"{prefix}{OTHER_SUFFIX}"

    members: list[str] = []
    for child in group.iterdescendants(f"{{{XSD_NAMESPACE}}}element"):
        reference = local_name(child.get("ref", ""))
        if not reference.startswith(prefix):
            return None
        descriptor = _lookup(table, reference, f"Group '{group_name}' references undeclared field")
        if descriptor.type == "boolean" or (reference == other_name and descriptor.type == "string"):
            members.append(reference)
        else:
            return None

    if not any(table[member].type == "boolean" for member in members):
        return None
    return members


def _fold_group(table: FieldTable, group_name: str, members: list[str], view: etree._ElementTree) -> None:
    prefix = f"{group_name}_"
    other_name = f"{prefix}{OTHER_SUFFIX}"
    group = FieldDescriptor(
        name=group_name,
        type="string",
        required=False,
        option_type=OptionType.CHECKBOX,
    )

    for member in members:
        if member == other_name and table[member].type == "string":
            control = _bound_control(view, group_name, member)
            group.other = True
            group.other_label = _label_around(control) if control is not None else None
        else:
            option = member.removeprefix(prefix)
            control = _bound_control(view, group_name, member, tag="input")
            label = _label_around(control) if control is not None else None
            group.options[option] = label or option
        del table[member]

    table[group_name] = group


def _lookup(table: FieldTable, field_name: str, message: str) -> FieldDescriptor:
    try:
        return table[field_name]
    except KeyError as exc:
        raise SchemaInconsistencyError(field=field_name, message=message) from exc


def _find_default_root(defaults: etree._ElementTree, root_element: str) -> etree._Element | None:
    root = defaults.getroot()
    if etree.QName(root).localname == root_element:
        return root
    for element in root.iterdescendants():
        if is_element(element) and etree.QName(element).localname == root_element:
            return element
    return None


def _bound_controls(view: etree._ElementTree, path: list[str], tag: str | None) -> Iterator[etree._Element]:
    for element in view.getroot().iter():
        if not is_element(element):
            continue
        binding = element.get(XD_BINDING)
        if not binding or binding_path(binding)[-len(path) :] != path:
            continue
        if tag is None or etree.QName(element).localname == tag:
            yield element


def _bound_control(
    view: etree._ElementTree,
    group_name: str,
    member: str,
    *,
    tag: str | None = None,
) -> etree._Element | None:
    return next(_bound_controls(view, [group_name, member], tag), None)


def _label_around(control: etree._Element) -> str | None:
    """Return the hand-written text of the block containing a control."""
    block = control.getparent()
    if block is None:
        return None
    return trim_label(text_without(block, [control])) or None
