"""Target URI synthesis from credential helper fields."""

from collections.abc import Mapping

from credhelper.models import TargetUri
from credhelper.utils.validation import validate_host, validate_scheme

MAX_PORT = 65535


def split_host_port(host: str) -> tuple[str, int | None]:
    """Split an optional ':port' suffix off a host.

    Only an all-digit suffix within the port range counts as a port.
    Anything else stays part of the host, so
    "foo.bar.com:8181?git-credential=manager" is returned unchanged.

    Args:
        host: Host value as received

    Returns:
        Tuple of (host, port or None)
    """
    name, sep, port = host.rpartition(":")
    if not sep or not name:
        return host, None

    # Bare IPv6 literal; a port needs the bracketed form
    if ":" in name and not name.endswith("]"):
        return host, None

    if not (port.isascii() and port.isdigit()):
        return host, None

    number = int(port)
    if number > MAX_PORT:
        return host, None

    return name, number


def build_path(path: str | None) -> str:
    """Return the URI path for a ``path`` field value.

    No percent-encoding normalization is applied.
    """
    if not path:
        return "/"
    if path.startswith("/"):
        return path
    return f"/{path}"


def build_target_uri(
    fields: Mapping[str, str],
    *,
    include_path: bool = True,
) -> TargetUri:
    """Build a target URI from ``protocol``, ``host``, ``path`` and credentials.

    Args:
        fields: Parsed field mapping
        include_path: Whether ``path`` becomes the URI path (default: True)

    Returns:
        TargetUri; its string form never contains credentials

    Raises:
        InvalidUriError: If protocol or host is missing or unusable
    """
    scheme = validate_scheme(fields.get("protocol"))
    host, port = split_host_port(validate_host(fields.get("host")))

    path = build_path(fields.get("path")) if include_path else "/"

    return TargetUri(
        scheme=scheme,
        host=host,
        port=port,
        path=path,
        username=fields.get("username"),
        password=fields.get("password"),
    )
