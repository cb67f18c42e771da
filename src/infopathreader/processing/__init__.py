"""Document processing helpers."""

from infopathreader.processing.normalization import (
    TRIM_CHARACTERS,
    binding_path,
    convert_field_name,
    local_name,
    trim_label,
)
from infopathreader.processing.xml import (
    NAMESPACES,
    XD_NAMESPACE,
    XSD_NAMESPACE,
    XSF_NAMESPACE,
    XSL_NAMESPACE,
    elements_named,
    parse_xml,
    text_without,
)

__all__ = [
    "NAMESPACES",
    "TRIM_CHARACTERS",
    "XD_NAMESPACE",
    "XSD_NAMESPACE",
    "XSF_NAMESPACE",
    "XSL_NAMESPACE",
    "binding_path",
    "convert_field_name",
    "elements_named",
    "local_name",
    "parse_xml",
    "text_without",
    "trim_label",
]
