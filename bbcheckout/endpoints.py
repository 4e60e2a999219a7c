"""Bitbucket endpoints: server URL normalization and web URLs."""

from __future__ import annotations

from urllib.parse import quote, urlsplit, urlunsplit

from pydantic import BaseModel, Field, computed_field, field_validator

CLOUD_SERVER_URL = "https://bitbucket.org"

_DEFAULT_PORTS = {"http": 80, "https": 443}


def normalize_server_url(server_url: str | None) -> str:
    """Normalize a Bitbucket root URL so equal servers compare equal.

    Blank means Bitbucket Cloud. For http(s) URLs the host is lower-cased and
    the scheme's default port dropped. A trailing slash is always removed.
    """
    url = (server_url or "").strip() or CLOUD_SERVER_URL
    parts = urlsplit(url)
    if parts.scheme in _DEFAULT_PORTS and parts.hostname:
        host = parts.hostname.lower()
        if ":" in host:
            host = f"[{host}]"
        port = parts.port
        if port == _DEFAULT_PORTS[parts.scheme]:
            port = None
        netloc = host if port is None else f"{host}:{port}"
        if parts.username:
            userinfo = parts.username
            if parts.password:
                userinfo += f":{parts.password}"
            netloc = f"{userinfo}@{netloc}"
        url = urlunsplit((parts.scheme, netloc, parts.path, parts.query, parts.fragment))
    return url[:-1] if url.endswith("/") else url


def _segment(value: str) -> str:
    return quote(value, safe="")


class CloudEndpoint(BaseModel):
    """Bitbucket Cloud (bitbucket.org)."""

    server_url: str = Field(default=CLOUD_SERVER_URL)
    display_name: str = Field(default="Bitbucket Cloud")

    model_config = {"frozen": True}

    def repository_url(self, repo_owner: str, repository: str) -> str:
        """Web page of a repository."""
        return f"{self.server_url}/{_segment(repo_owner)}/{_segment(repository)}"


class ServerEndpoint(BaseModel):
    """A self-hosted Bitbucket Server instance."""

    server_url: str = Field(..., description="Root URL of the server")
    display_name: str | None = Field(default=None)

    model_config = {"frozen": True}

    @field_validator("server_url")
    @classmethod
    def _normalize(cls, value: str) -> str:
        return normalize_server_url(value)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def name(self) -> str:
        """Display name, defaulting to the server's host name."""
        if self.display_name and self.display_name.strip():
            return self.display_name.strip()
        return urlsplit(self.server_url).hostname or self.server_url

    def repository_url(self, repo_owner: str, repository: str) -> str:
        """Web page of a repository.

        Owners starting with ``~`` are personal projects and live under
        ``/users/``.
        """
        if repo_owner.startswith("~"):
            project = f"/users/{_segment(repo_owner[1:])}"
        else:
            project = f"/projects/{_segment(repo_owner)}"
        return f"{self.server_url}{project}/repos/{_segment(repository)}"


BitbucketEndpoint = CloudEndpoint | ServerEndpoint


def endpoint_for(server_url: str | None) -> BitbucketEndpoint:
    """Get the endpoint for a root URL (blank means Bitbucket Cloud)."""
    normalized = normalize_server_url(server_url)
    if normalized == CLOUD_SERVER_URL:
        return CloudEndpoint()
    return ServerEndpoint(server_url=normalized)
