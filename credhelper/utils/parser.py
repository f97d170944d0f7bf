"""Credential helper input parsing.

Reads ``key=value`` lines up to the first blank line or end of input.
"""

import io
import logging
from typing import IO, AnyStr

from credhelper.utils.validation import FormatError

logger = logging.getLogger(__name__)

# Decoding for binary streams; invalid bytes round-trip through encode_wire()
WIRE_ENCODING = "utf-8"
WIRE_ERRORS = "surrogateescape"


def _use_lf_newlines(stream: IO[AnyStr]) -> None:
    """Make a TextIOWrapper end lines only at '\\n'.

    Universal newlines would also split at a lone '\\r' inside a value.
    """
    if not isinstance(stream, io.TextIOWrapper):
        return

    try:
        stream.reconfigure(newline="\n")
    except io.UnsupportedOperation:
        # Already read from; keeps whatever newline mode it was opened with
        logger.debug("Text stream newlines not reconfigured (already read)")


def _read_lines(stream: IO[AnyStr]):
    """Yield decoded lines with the terminator stripped, stopping at a blank line."""
    _use_lf_newlines(stream)

    while True:
        raw = stream.readline()
        if not raw:
            return

        line = raw.decode(WIRE_ENCODING, WIRE_ERRORS) if isinstance(raw, bytes) else raw

        # Terminator is '\n' plus any '\r' run before it, so that serializing
        # (always '\n') and parsing again gives the same value
        if line.endswith("\n"):
            line = line[:-1].rstrip("\r")

        if not line:
            return

        yield line


def parse_fields(stream: IO[AnyStr], *, strict: bool = True) -> dict[str, str]:
    """Parse credential helper input into an ordered field mapping.

    Each line is split at the first '='. Values keep their whitespace and may
    contain '='. A repeated key keeps its first position with the last value.

    Args:
        stream: Text or binary stream positioned at the start of input
        strict: Raise on lines without '=' (default: True); skip them otherwise

    Returns:
        Dictionary of fields in first-occurrence order

    Raises:
        FormatError: If strict and a line has no '=' separator
    """
    fields: dict[str, str] = {}

    for line_number, line in enumerate(_read_lines(stream), start=1):
        key, sep, value = line.partition("=")
        if not sep:
            if strict:
                logger.debug("Rejecting malformed input at line %d", line_number)
                raise FormatError(line_number, line)
            logger.warning("Skipping malformed line %d (no '=')", line_number)
            continue

        if key in fields:
            logger.debug("Duplicate key %r at line %d, keeping last value", key, line_number)

        fields[key] = value

    logger.debug("Parsed %d fields: %s", len(fields), ", ".join(fields))
    return fields
