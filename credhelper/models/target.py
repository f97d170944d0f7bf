"""Target URI data model."""

from dataclasses import dataclass, replace
from urllib.parse import quote


@dataclass(frozen=True)
class TargetUri:
    """Canonical lookup URI derived from credential helper fields.

    Credentials are carried as separate attributes and are left out of the
    string form. Use ``with_credentials()`` for a URI with user-info.
    """

    scheme: str
    host: str
    port: int | None = None
    path: str = "/"
    username: str | None = None
    password: str | None = None

    @property
    def authority(self) -> str:
        """Host with the port appended when one was given."""
        if self.port is None:
            return self.host
        return f"{self.host}:{self.port}"

    @property
    def actual_uri(self) -> str:
        """Lookup URI string, without credentials."""
        return str(self)

    def with_credentials(self) -> str:
        """Render the URI with percent-encoded ``user[:pass]@`` user-info.

        Returns:
            URI string; identical to ``str(self)`` when no username is set
        """
        if self.username is None:
            return str(self)

        userinfo = quote(self.username, safe="")
        if self.password is not None:
            userinfo = f"{userinfo}:{quote(self.password, safe='')}"
        return f"{self.scheme}://{userinfo}@{self.authority}{self.path}"

    def without_path(self) -> "TargetUri":
        """Copy of this URI with the path reset to '/'."""
        return replace(self, path="/")

    def __str__(self) -> str:
        return f"{self.scheme}://{self.authority}{self.path}"

    def __repr__(self) -> str:
        password = None if self.password is None else "***"
        return (
            f"TargetUri(scheme={self.scheme!r}, host={self.host!r}, "
            f"port={self.port!r}, path={self.path!r}, "
            f"username={self.username!r}, password={password!r})"
        )
