"""Error types and input validation for credential helper arguments."""

import re
from typing import Final


class CredentialHelperError(ValueError):
    """Base class for credential helper argument errors."""

    pass


class FormatError(CredentialHelperError):
    """A non-blank input line has no '=' separator."""

    def __init__(self, line_number: int, line: str) -> None:
        # Only the length is reported; the line may carry a secret.
        super().__init__(
            f"Malformed line {line_number}: expected 'key=value' "
            f"(got {len(line)} chars without '=')"
        )
        self.line_number = line_number
        self.line = line


class InvalidUriError(CredentialHelperError):
    """Protocol or host cannot form a target URI."""

    pass


class InvalidFieldError(CredentialHelperError):
    """Key or value cannot be represented on the wire."""

    pass


# RFC 3986 scheme: ALPHA *( ALPHA / DIGIT / "+" / "-" / "." )
SCHEME_PATTERN: Final[re.Pattern[str]] = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")

# Characters that would break the line protocol
WIRE_BREAKING_CHARS: Final[list[str]] = ["\n", "\r", "\x00"]


def validate_scheme(scheme: str | None) -> str:
    """Validate a URI scheme taken from the ``protocol`` field.

    Args:
        scheme: Protocol value as read from input

    Returns:
        The scheme, unchanged

    Raises:
        InvalidUriError: If scheme is missing or not a valid URI scheme
    """
    if not scheme:
        raise InvalidUriError("Missing 'protocol' field")

    if not SCHEME_PATTERN.match(scheme):
        raise InvalidUriError(f"Invalid protocol: {scheme!r}")

    return scheme


def validate_host(host: str | None) -> str:
    """Validate a host taken from the ``host`` field.

    Args:
        host: Host value, possibly with ':port' suffix

    Returns:
        The host, unchanged

    Raises:
        InvalidUriError: If host is missing, carries user-info, or contains
            unusable characters
    """
    if not host:
        raise InvalidUriError("Missing 'host' field")

    # User-info in the host would leak credentials into the lookup URI
    if "@" in host:
        raise InvalidUriError("Host contains user-info ('@')")

    if "/" in host:
        raise InvalidUriError(f"Host contains '/': {host!r}")

    for char in host:
        if char.isspace() or ord(char) < 0x20 or ord(char) == 0x7F:
            raise InvalidUriError(f"Host contains invalid characters: {host!r}")

    return host


def validate_key(key: str) -> str:
    """Validate a field key for serialization.

    Raises:
        InvalidFieldError: If key contains '=' or a line break
    """
    if not isinstance(key, str):
        raise InvalidFieldError(f"Key must be a string, got {type(key).__name__}")

    if "=" in key:
        raise InvalidFieldError(f"Key contains '=': {key!r}")

    for char in WIRE_BREAKING_CHARS:
        if char in key:
            raise InvalidFieldError(f"Key contains invalid characters: {key!r}")

    return key


def validate_value(key: str, value: str) -> str:
    """Validate a field value for serialization.

    The value itself is not echoed back in the error, only its key.

    Raises:
        InvalidFieldError: If value contains a line break or NUL
    """
    if not isinstance(value, str):
        raise InvalidFieldError(
            f"Value for {key!r} must be a string, got {type(value).__name__}"
        )

    for char in WIRE_BREAKING_CHARS:
        if char in value:
            raise InvalidFieldError(f"Value for {key!r} contains invalid characters")

    return value
