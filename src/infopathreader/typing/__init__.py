"""Typing-centric domain modules."""

from infopathreader.typing.enums import ControlType, FieldKind, OptionType
from infopathreader.typing.models import FieldDescriptor, Manifest, SubmitInfo, View
from infopathreader.typing.protocol import Archive

__all__ = [
    "Archive",
    "ControlType",
    "FieldDescriptor",
    "FieldKind",
    "Manifest",
    "OptionType",
    "SubmitInfo",
    "View",
]
