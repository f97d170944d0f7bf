"""Tests for credential helper input parsing."""

import io
import logging

import pytest

from credhelper.utils.parser import parse_fields
from credhelper.utils.validation import FormatError


def test_parse_splits_on_first_separator() -> None:
    """Values may contain '='; only the first one separates."""
    fields = parse_fields(io.StringIO("wwwauth[]=Basic realm=\"a=b\"\n\n"))

    assert fields == {"wwwauth[]": 'Basic realm="a=b"'}


def test_parse_preserves_whitespace() -> None:
    """Leading and trailing whitespace in keys and values is kept."""
    fields = parse_fields(io.StringIO(" key = value \n\n"))

    assert fields == {" key ": " value "}


def test_parse_stops_at_blank_line() -> None:
    """Nothing after the first blank line is consumed."""
    stream = io.StringIO("protocol=https\n\nhost=example.com\n\n")

    fields = parse_fields(stream)

    assert fields == {"protocol": "https"}
    assert stream.read() == "host=example.com\n\n"


def test_parse_stops_at_end_of_stream() -> None:
    """Input without a blank-line terminator is read to the end."""
    fields = parse_fields(io.StringIO("protocol=https\nhost=example.com"))

    assert fields == {"protocol": "https", "host": "example.com"}


def test_parse_empty_stream() -> None:
    """Empty input gives no fields."""
    assert parse_fields(io.BytesIO(b"")) == {}


def test_duplicate_key_keeps_first_position() -> None:
    """Repeated keys overwrite the value but keep the first position."""
    fields = parse_fields(io.StringIO("a=1\nb=2\na=3\n\n"))

    assert list(fields.items()) == [("a", "3"), ("b", "2")]


def test_parse_handles_crlf() -> None:
    """CRLF terminators are stripped as a unit."""
    fields = parse_fields(io.BytesIO(b"protocol=https\r\nhost=example.com\r\n\r\nignored=1\r\n"))

    assert fields == {"protocol": "https", "host": "example.com"}


def test_parse_accepts_empty_value_and_key() -> None:
    """'key=' and '=value' are both well-formed."""
    fields = parse_fields(io.StringIO("password=\n=orphan\n\n"))

    assert fields == {"password": "", "": "orphan"}


def test_parse_decodes_utf8_bytes() -> None:
    """Binary input is decoded as UTF-8."""
    fields = parse_fields(io.BytesIO("username=userNamể\n\n".encode("utf-8")))

    assert fields["username"] == "userNamể"


def test_missing_separator_raises_with_line_number() -> None:
    """Strict parsing reports the offending line number."""
    with pytest.raises(FormatError) as exc_info:
        parse_fields(io.StringIO("protocol=https\nnot-a-field\n\n"))

    assert exc_info.value.line_number == 2
    assert exc_info.value.line == "not-a-field"


def test_format_error_message_hides_line_content() -> None:
    """The error message does not echo the malformed line."""
    with pytest.raises(FormatError) as exc_info:
        parse_fields(io.StringIO("supersecret\n\n"))

    assert "supersecret" not in str(exc_info.value)
    assert "line 1" in str(exc_info.value)


def test_lenient_parse_skips_and_warns(caplog: pytest.LogCaptureFixture) -> None:
    """Non-strict parsing skips bad lines with a warning."""
    with caplog.at_level(logging.WARNING, logger="credhelper.utils.parser"):
        fields = parse_fields(io.StringIO("a=1\noops\nb=2\n\n"), strict=False)

    assert fields == {"a": "1", "b": "2"}
    assert "line 2" in caplog.text
    assert "oops" not in caplog.text


def test_debug_log_omits_values(caplog: pytest.LogCaptureFixture) -> None:
    """Debug logging lists keys only."""
    with caplog.at_level(logging.DEBUG, logger="credhelper.utils.parser"):
        parse_fields(io.StringIO("username=alice\npassword=s3cr3t\n\n"))

    assert "Parsed 2 fields" in caplog.text
    assert "s3cr3t" not in caplog.text


def test_parse_strips_carriage_return_run() -> None:
    """Every '\\r' before '\\n' belongs to the terminator, so re-parsing is stable."""
    fields = parse_fields(io.BytesIO(b"password=ab\r\r\n\n"))

    assert fields == {"password": "ab"}
    assert parse_fields(io.StringIO("password=ab\n\n")) == fields


def test_parse_text_wrapper_keeps_lone_carriage_return() -> None:
    """A TextIOWrapper only ends lines at '\\n'; a lone '\\r' stays in the value."""
    stream = io.TextIOWrapper(
        io.BytesIO(b"protocol=https\nhost=example.com\npassword=a\rb\n\n"),
        encoding="utf-8",
    )

    fields = parse_fields(stream)

    assert fields["password"] == "a\rb"
    assert list(fields) == ["protocol", "host", "password"]


def test_parse_text_wrapper_already_read() -> None:
    """A TextIOWrapper already read from can be parsed again for the next block."""
    stream = io.TextIOWrapper(
        io.BytesIO(b"protocol=https\n\nhost=example.com\n\n"),
        encoding="utf-8",
    )
    parse_fields(stream)

    assert parse_fields(stream) == {"host": "example.com"}
