"""Utilities for credhelper."""

from credhelper.utils.console import ColorfulFormatter, configure_logging
from credhelper.utils.parser import parse_fields
from credhelper.utils.serializer import encode_wire, serialize_fields
from credhelper.utils.uri import build_target_uri, split_host_port
from credhelper.utils.validation import (
    CredentialHelperError,
    FormatError,
    InvalidFieldError,
    InvalidUriError,
)

__all__ = [
    "build_target_uri",
    "ColorfulFormatter",
    "configure_logging",
    "CredentialHelperError",
    "encode_wire",
    "FormatError",
    "InvalidFieldError",
    "InvalidUriError",
    "parse_fields",
    "serialize_fields",
    "split_host_port",
]
