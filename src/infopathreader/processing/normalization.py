"""Name and label normalization helpers."""

from __future__ import annotations

# ASCII whitespace plus U+00C2 and U+00A0: InfoPath views leak the UTF-8
# non-breaking space pair (0xC2 0xA0) into control labels.
TRIM_CHARACTERS = " \t\n\r\x00\x0b\u00c2\u00a0"


def local_name(qualified_name: str) -> str:
    """Return the local part of a prefixed name.

    Args:
        qualified_name (str): Name such as `my:field1` or `xsd:string`.

    Returns:
        str: Part after the last colon, or the name unchanged when unprefixed.
    """
    return qualified_name.rpartition(":")[2]


def binding_path(binding: str) -> list[str]:
    """Split an `xd:binding` expression into local step names.

    Args:
        binding (str): Binding such as `my:group/my:group_a`.

    Returns:
        list[str]: Local names of each non-empty step.
    """
    return [local_name(step) for step in binding.split("/") if step]


def trim_label(text: str) -> str:
    """Strip whitespace and encoding debris from both ends of a label.

    Args:
        text (str): Extracted text.

    Returns:
        str: Trimmed label.
    """
    return text.strip(TRIM_CHARACTERS)


def convert_field_name(field_name: str) -> str:
    """Make a field name usable as a PHP variable name.

    Args:
        field_name (str): InfoPath field name.

    Returns:
        str: Name with hyphens replaced by underscores.
    """
    return field_name.replace("-", "_")
