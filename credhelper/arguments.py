"""Credential helper operation arguments.

An ``OperationArguments`` is read once from the helper's input stream and
gives the credential backend typed access to the request:

    args = OperationArguments(sys.stdin.buffer)
    lookup = args.target_uri        # https://example.com/
    args.set_credentials("user", "secret")
    args.write(sys.stdout.buffer)

Extension keys the helper does not understand are kept in place, so the
response written back carries every field of the request.
"""

import io
import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import IO, AnyStr

from credhelper.config import get_settings
from credhelper.models import TargetUri
from credhelper.utils.parser import parse_fields
from credhelper.utils.serializer import encode_wire, serialize_fields
from credhelper.utils.uri import build_target_uri
from credhelper.utils.validation import validate_key, validate_value

logger = logging.getLogger(__name__)

PROTOCOL_KEY = "protocol"
HOST_KEY = "host"
PATH_KEY = "path"
USERNAME_KEY = "username"
PASSWORD_KEY = "password"

RECOGNIZED_KEYS = (PROTOCOL_KEY, HOST_KEY, PATH_KEY, USERNAME_KEY, PASSWORD_KEY)


class OperationArguments:
    """Parsed credential helper request.

    Field order is the first-occurrence order of the input and is kept on
    output. The target URI is derived on every access, so it always matches
    the current fields; ``InvalidUriError`` surfaces there, not when parsing.
    """

    def __init__(
        self,
        stream: IO[AnyStr] | None = None,
        *,
        strict: bool | None = None,
        use_http_path: bool | None = None,
    ) -> None:
        """Read arguments from a stream.

        Args:
            stream: Text or binary stream; None gives empty arguments.
                A TextIOWrapper is switched to '\\n'-only line endings
                before the first read, so a lone '\\r' stays in its value.
            strict: Reject lines without '=' (default: from settings)
            use_http_path: Include ``path`` in the target URI
                (default: from settings)

        Raises:
            FormatError: If strict and a line has no '=' separator
        """
        settings = get_settings()
        if strict is None:
            strict = settings.strict_parsing
        if use_http_path is None:
            use_http_path = settings.use_http_path

        self.use_http_path = use_http_path
        self._fields: dict[str, str] = {}

        if stream is not None:
            self._fields = parse_fields(stream, strict=strict)
            logger.debug(
                "Read arguments: protocol=%s host=%s extensions=%d",
                self.query_protocol,
                self.query_host,
                len(self.extension_fields),
            )

    @classmethod
    def from_stream(
        cls,
        stream: IO[AnyStr],
        *,
        strict: bool | None = None,
        use_http_path: bool | None = None,
    ) -> "OperationArguments":
        """Read arguments from a stream (alias of the constructor)."""
        return cls(stream, strict=strict, use_http_path=use_http_path)

    @classmethod
    def from_fields(
        cls,
        fields: Mapping[str, str],
        *,
        use_http_path: bool | None = None,
    ) -> "OperationArguments":
        """Build arguments from an existing mapping, keeping its order.

        Raises:
            InvalidFieldError: If a key or value cannot be written to the wire
        """
        args = cls(use_http_path=use_http_path)
        for key, value in fields.items():
            args._fields[validate_key(key)] = validate_value(key, value)
        return args

    # Field access

    @property
    def fields(self) -> Mapping[str, str]:
        """Read-only view of all fields in wire order."""
        return MappingProxyType(self._fields)

    @property
    def extension_fields(self) -> dict[str, str]:
        """Fields other than the recognized ones, in wire order."""
        return {k: v for k, v in self._fields.items() if k not in RECOGNIZED_KEYS}

    def get(self, key: str, default: str | None = None) -> str | None:
        """Get any field value by key."""
        return self._fields.get(key, default)

    def __contains__(self, key: object) -> bool:
        return key in self._fields

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    @property
    def query_protocol(self) -> str | None:
        return self._fields.get(PROTOCOL_KEY)

    @property
    def query_host(self) -> str | None:
        return self._fields.get(HOST_KEY)

    @property
    def query_path(self) -> str | None:
        return self._fields.get(PATH_KEY)

    @property
    def cred_username(self) -> str | None:
        return self._fields.get(USERNAME_KEY)

    @cred_username.setter
    def cred_username(self, value: str | None) -> None:
        self._set_field(USERNAME_KEY, value)

    @property
    def cred_password(self) -> str | None:
        return self._fields.get(PASSWORD_KEY)

    @cred_password.setter
    def cred_password(self, value: str | None) -> None:
        self._set_field(PASSWORD_KEY, value)

    def set_credentials(self, username: str | None, password: str | None) -> None:
        """Set both credential fields; None removes a field.

        Both values are validated before either is written.

        Raises:
            InvalidFieldError: If a value contains a line break or NUL
        """
        if username is not None:
            validate_value(USERNAME_KEY, username)
        if password is not None:
            validate_value(PASSWORD_KEY, password)

        self._set_field(USERNAME_KEY, username)
        self._set_field(PASSWORD_KEY, password)

    def clear_credentials(self) -> None:
        """Remove username and password."""
        self.set_credentials(None, None)

    def _set_field(self, key: str, value: str | None) -> None:
        """Update in place, append if new, or remove when value is None."""
        if value is None:
            if self._fields.pop(key, None) is not None:
                logger.debug("Removed %s", key)
            return

        self._fields[key] = validate_value(key, value)
        logger.debug("Set %s", key)

    # URIs

    @property
    def query_uri(self) -> TargetUri:
        """URI of the request, including ``path``.

        Raises:
            InvalidUriError: If protocol or host is missing or unusable
        """
        return build_target_uri(self._fields, include_path=True)

    @property
    def target_uri(self) -> TargetUri:
        """Lookup URI; includes ``path`` only when ``use_http_path`` is set.

        Raises:
            InvalidUriError: If protocol or host is missing or unusable
        """
        return build_target_uri(self._fields, include_path=self.use_http_path)

    @property
    def credential_uri(self) -> str:
        """Target URI with username and password as user-info.

        Raises:
            InvalidUriError: If protocol or host is missing or unusable
        """
        return self.target_uri.with_credentials()

    # Output

    def serialize(self) -> str:
        """Render the fields in wire format."""
        return serialize_fields(self._fields)

    def to_bytes(self) -> bytes:
        """Render the fields in wire format as bytes."""
        return encode_wire(self.serialize())

    def write(self, stream: IO[AnyStr]) -> None:
        """Write the wire format to a text or binary stream and flush it.

        A text stream with an underlying ``buffer`` (such as ``sys.stdout``)
        is written through the buffer, so undecodable input bytes come back
        out unchanged instead of failing the text encoder.
        """
        text = self.serialize()
        if not isinstance(stream, io.TextIOBase):
            stream.write(encode_wire(text))
        elif hasattr(stream, "buffer"):
            # Pending text must reach the buffer first
            stream.flush()
            stream.buffer.write(encode_wire(text))
            stream.buffer.flush()
        else:
            stream.write(text)
        stream.flush()
        logger.debug("Wrote %d fields", len(self._fields))

    def __str__(self) -> str:
        return self.serialize()

    def __repr__(self) -> str:
        shown = {
            k: ("***" if k == PASSWORD_KEY else v) for k, v in self._fields.items()
        }
        return f"OperationArguments({shown!r}, use_http_path={self.use_http_path!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OperationArguments):
            return NotImplemented
        return list(self._fields.items()) == list(other._fields.items())

    __hash__ = None  # type: ignore[assignment]
