"""Git credential helper argument parsing.

Reads the helper's ``key=value`` request, derives the target URI, and writes
the fields back in the same wire format.
"""

from credhelper.arguments import OperationArguments
from credhelper.config import Settings
from credhelper.models import TargetUri
from credhelper.utils import (
    CredentialHelperError,
    FormatError,
    InvalidFieldError,
    InvalidUriError,
    build_target_uri,
    configure_logging,
    parse_fields,
    serialize_fields,
    split_host_port,
)

__version__ = "0.1.0"

__all__ = [
    "build_target_uri",
    "configure_logging",
    "CredentialHelperError",
    "FormatError",
    "InvalidFieldError",
    "InvalidUriError",
    "OperationArguments",
    "parse_fields",
    "serialize_fields",
    "Settings",
    "split_host_port",
    "TargetUri",
]
