"""Typed model of clone URLs.

Bitbucket reports clone links in two syntaxes:

- URL form: ``https://user@host:port/owner/repo.git``,
  ``ssh://git@host:7999/owner/repo.git``
- SCP-like form: ``git@bitbucket.org:owner/repo.git``

Both are parsed into the same model so the repository part can be swapped
without string surgery.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, Field

GIT_SUFFIX = ".git"

_URL_RE = re.compile(
    r"^(?P<scheme>[A-Za-z][A-Za-z0-9+.\-]*)://"
    r"(?:(?P<user>[^@/]+)@)?"
    r"(?P<host>\[[^\]]+\]|[^:/]+)"
    r"(?::(?P<port>\d+))?"
    r"(?P<path>/[^?#]*)?$"
)
_SCP_RE = re.compile(r"^(?:(?P<user>[^@/:]+)@)?(?P<host>[^:/]+):(?P<path>[^/].*)$")


class CloneUrl(BaseModel):
    """A clone URL split into its parts.

    ``scheme`` is None for the SCP-like syntax.
    """

    scheme: str | None = None
    user: str | None = None
    host: str
    port: int | None = None
    segments: tuple[str, ...] = Field(default_factory=tuple)

    model_config = {"frozen": True}

    @classmethod
    def parse(cls, text: str) -> "CloneUrl":
        """Parse a clone URL in URL or SCP-like syntax."""
        match = _URL_RE.match(text)
        if match:
            port = match.group("port")
            return cls(
                scheme=match.group("scheme").lower(),
                user=match.group("user"),
                host=match.group("host"),
                port=int(port) if port else None,
                segments=_split_path(match.group("path") or ""),
            )
        match = _SCP_RE.match(text)
        if match:
            return cls(
                user=match.group("user"),
                host=match.group("host"),
                segments=_split_path(match.group("path")),
            )
        raise ValueError(f"Not a clone URL: {text!r}")

    @property
    def is_scp_like(self) -> bool:
        return self.scheme is None

    @property
    def path(self) -> str:
        return "/".join(self.segments)

    def with_repository(self, owner: str, repository: str) -> "CloneUrl":
        """Replace the last two path segments with owner and repository.

        The ``.git`` suffix of the current repository segment is kept.
        """
        if len(self.segments) < 2:
            raise ValueError(f"Clone URL has no owner/repository path: {self}")
        if self.segments[-1].endswith(GIT_SUFFIX) and not repository.endswith(GIT_SUFFIX):
            repository += GIT_SUFFIX
        return self.model_copy(update={"segments": (*self.segments[:-2], owner, repository)})

    def __str__(self) -> str:
        user = f"{self.user}@" if self.user else ""
        if self.is_scp_like:
            return f"{user}{self.host}:{self.path}"
        port = f":{self.port}" if self.port is not None else ""
        return f"{self.scheme}://{user}{self.host}{port}/{self.path}"


def _split_path(path: str) -> tuple[str, ...]:
    return tuple(part for part in path.split("/") if part)


def ssh_port_of(url: str) -> int | None:
    """Port of an ``ssh://`` clone URL, or None if it has none."""
    try:
        return CloneUrl.parse(url).port
    except ValueError:
        return None
