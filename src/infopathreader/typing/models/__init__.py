"""Core domain model exports."""

from infopathreader.typing.models.fields import (
    FIELD_NAME_PATTERN,
    FieldDescriptor,
    field_table_to_json_dict,
)
from infopathreader.typing.models.manifest import Manifest, SubmitInfo, View

__all__ = [
    "FIELD_NAME_PATTERN",
    "FieldDescriptor",
    "Manifest",
    "SubmitInfo",
    "View",
    "field_table_to_json_dict",
]
