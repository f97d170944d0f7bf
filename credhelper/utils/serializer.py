"""Credential helper output serialization."""

from collections.abc import Mapping

from credhelper.utils.parser import WIRE_ENCODING, WIRE_ERRORS

LINE_TERMINATOR = "\n"


def serialize_fields(fields: Mapping[str, str]) -> str:
    """Build wire-format text from a field mapping.

    Emits ``key=value`` lines in mapping order followed by the blank-line
    terminator. Line endings are always '\\n'.
    """
    body = "".join(f"{key}={value}{LINE_TERMINATOR}" for key, value in fields.items())
    return body + LINE_TERMINATOR


def encode_wire(text: str) -> bytes:
    """Encode wire-format text, restoring bytes that were not valid UTF-8."""
    return text.encode(WIRE_ENCODING, WIRE_ERRORS)
