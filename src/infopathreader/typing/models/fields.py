"""Field table domain models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from infopathreader.typing.enums import FieldKind, OptionType

FIELD_NAME_PATTERN = r"^[^\W\d][\w.\-]*$"

_OPTION_KEYS = ("optionType", "options", "other", "otherLabel")
_CHECKBOX_ONLY_KEYS = ("other", "otherLabel")


class FieldDescriptor(BaseModel):
    """One inferred logical form field."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True, validate_assignment=True)

    name: str = Field(pattern=FIELD_NAME_PATTERN)
    type: str = Field(min_length=1)
    required: bool = False
    default: str | None = None
    size: int | None = None
    option_type: OptionType | None = Field(default=None, alias="optionType")
    options: dict[str, str] = Field(default_factory=dict)
    other: bool = False
    other_label: str | None = Field(default=None, alias="otherLabel")

    @property
    def kind(self) -> FieldKind:
        """Return the tagged variant derived from the option type."""
        if self.option_type in {OptionType.SELECT, OptionType.MULTISELECT}:
            return FieldKind.SELECT
        if self.option_type == OptionType.RADIO:
            return FieldKind.RADIO
        if self.option_type == OptionType.CHECKBOX:
            return FieldKind.CHECKBOX_GROUP
        return FieldKind.SCALAR

    def to_json_dict(self) -> dict[str, Any]:
        """Return the field payload keyed the way the field table is published.

        Option keys are dropped for scalar fields, `other`/`otherLabel` for
        anything but checkbox groups.

        Returns:
            dict[str, Any]: JSON-compatible payload without the field name.
        """
        payload = self.model_dump(mode="json", by_alias=True, exclude={"name"})
        if self.option_type is None:
            dropped: tuple[str, ...] = _OPTION_KEYS
        elif self.option_type != OptionType.CHECKBOX:
            dropped = _CHECKBOX_ONLY_KEYS
        else:
            dropped = ()
        for key in dropped:
            payload.pop(key, None)
        return payload


def field_table_to_json_dict(table: dict[str, FieldDescriptor]) -> dict[str, dict[str, Any]]:
    """Serialize a field table.

    Args:
        table (dict[str, FieldDescriptor]): Field table.

    Returns:
        dict[str, dict[str, Any]]: JSON-compatible mapping of name to payload.
    """
    return {name: descriptor.to_json_dict() for name, descriptor in table.items()}
