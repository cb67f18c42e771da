from __future__ import annotations

import pytest

from infopathreader.typing.enums import ControlType, OptionType


def test_option_type_from_str() -> None:
    assert OptionType.from_str("multiselect") == OptionType.MULTISELECT


def test_option_type_from_str_raises_on_invalid_value() -> None:
    with pytest.raises(ValueError, match="Unsupported OptionType value"):
        OptionType.from_str("slider")


def test_control_type_matches_infopath_names() -> None:
    assert ControlType.from_str("DTPicker_DTText") == ControlType.DATE_PICKER_TEXT
    assert ControlType.LIST_BOX.to_str() == "ListBox"
