"""Project enums."""

from __future__ import annotations

from enum import StrEnum


class _EnumMixin(StrEnum):
    """Shared conversion helpers for user-facing enums."""

    @classmethod
    def from_str(cls, value: str) -> _EnumMixin:
        """Parse enum from string.

        Args:
            value: Raw string value.

        Raises:
            ValueError: If the value is not supported.

        Returns:
            _EnumMixin: Parsed enum value.
        """
        try:
            return cls(value)
        except ValueError as exc:
            supported = ", ".join(member.value for member in cls)
            message = f"Unsupported {cls.__name__} value '{value}'. Expected one of: {supported}"
            raise ValueError(message) from exc

    def to_str(self) -> str:
        """Return string representation.

        Returns:
            str: Enum string value.
        """
        return self.value


class OptionType(_EnumMixin):
    """Selection control through which a view exposes a field."""

    SELECT = "select"
    MULTISELECT = "multiselect"
    RADIO = "radio"
    CHECKBOX = "checkbox"


class FieldKind(_EnumMixin):
    """Tagged variant of an inferred field."""

    SCALAR = "scalar"
    SELECT = "select"
    RADIO = "radio"
    CHECKBOX_GROUP = "checkbox_group"


class ControlType(_EnumMixin):
    """InfoPath control names carried by the `xd:xctname` attribute."""

    PLAIN_TEXT = "PlainText"
    COMBOBOX = "combobox"
    DROPDOWN = "dropdown"
    OPTION_BUTTON = "OptionButton"
    DATE_PICKER_TEXT = "DTPicker_DTText"
    LIST_BOX = "ListBox"
    CHECK_BOX = "CheckBox"
