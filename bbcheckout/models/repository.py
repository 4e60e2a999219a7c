"""Repository, credential and clone link models."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from bbcheckout.endpoints import (
    CLOUD_SERVER_URL,
    BitbucketEndpoint,
    CloudEndpoint,
    ServerEndpoint,
    normalize_server_url,
)


class BackendType(str, Enum):
    """Version control backend of a repository."""

    GIT = "git"
    MERCURIAL = "hg"


class DeploymentModel(str, Enum):
    """Where the Bitbucket instance runs.

    cloud: bitbucket.org
    server: self-hosted, web URLs carry a project path segment
    """

    CLOUD = "cloud"
    SERVER = "server"


class TransportProtocol(str, Enum):
    """Transport used to clone a repository."""

    HTTPS = "https"
    SSH = "ssh"


class CredentialKind(str, Enum):
    """Shape of a checkout credential. The secret itself is never read."""

    SSH_KEY = "ssh_key"
    USERNAME_PASSWORD = "username_password"


class CredentialRef(BaseModel):
    """Reference to a credential held by an external credential store."""

    id: str = Field(..., description="Credential identifier")
    kind: CredentialKind = Field(default=CredentialKind.USERNAME_PASSWORD)

    model_config = {"frozen": True}

    @property
    def protocol(self) -> TransportProtocol:
        """Transport protocol this credential can authenticate."""
        if self.kind == CredentialKind.SSH_KEY:
            return TransportProtocol.SSH
        return TransportProtocol.HTTPS


def protocol_for(credential: CredentialRef | None) -> TransportProtocol:
    """Pick the transport for a credential; anonymous access uses HTTPS."""
    return credential.protocol if credential is not None else TransportProtocol.HTTPS


class CloneLinkTemplate(BaseModel):
    """One clone URL of one repository, as reported by the Bitbucket API.

    Accepts the API shape ``{"name": "ssh", "href": "..."}`` as well as
    ``{"protocol": "ssh", "url": "..."}``. Both ``http`` and ``https`` links
    map to :attr:`TransportProtocol.HTTPS`.
    """

    protocol: TransportProtocol
    url: str

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def _from_api_shape(cls, data: Any) -> Any:
        if isinstance(data, dict):
            data = dict(data)
            if "name" in data and "protocol" not in data:
                data["protocol"] = data.pop("name")
            if "href" in data and "url" not in data:
                data["url"] = data.pop("href")
            if isinstance(data.get("protocol"), str) and data["protocol"].lower() == "http":
                data["protocol"] = TransportProtocol.HTTPS
        return data


class SourceContext(BaseModel):
    """The repository a scan or build is configured against."""

    deployment_model: DeploymentModel = Field(default=DeploymentModel.CLOUD)
    server_root_url: str | None = Field(
        default=None, description="Root URL of a Bitbucket Server instance"
    )
    repo_owner: str = Field(..., description="Workspace, project key or ~user")
    repo_name: str = Field(..., description="Repository slug")
    credential: CredentialRef | None = Field(
        default=None, description="Checkout credential, None for anonymous"
    )

    model_config = {"frozen": True}

    @field_validator("server_root_url")
    @classmethod
    def _normalize_root(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        return normalize_server_url(value)

    @model_validator(mode="after")
    def _check_server_root(self) -> "SourceContext":
        if self.deployment_model == DeploymentModel.SERVER and not self.server_root_url:
            raise ValueError("server deployments require server_root_url")
        if self.deployment_model == DeploymentModel.CLOUD and self.server_root_url:
            raise ValueError("server_root_url is only valid for server deployments")
        return self

    @classmethod
    def for_server_url(
        cls,
        server_url: str | None,
        repo_owner: str,
        repo_name: str,
        credential: CredentialRef | None = None,
    ) -> "SourceContext":
        """Build a context, inferring the deployment model from the URL.

        A blank URL or bitbucket.org means cloud; anything else is a server.
        """
        normalized = normalize_server_url(server_url)
        if normalized == CLOUD_SERVER_URL:
            return cls(repo_owner=repo_owner, repo_name=repo_name, credential=credential)
        return cls(
            deployment_model=DeploymentModel.SERVER,
            server_root_url=normalized,
            repo_owner=repo_owner,
            repo_name=repo_name,
            credential=credential,
        )

    @property
    def is_server(self) -> bool:
        return self.deployment_model == DeploymentModel.SERVER

    @property
    def root_url(self) -> str:
        """Deployment root, used as placeholder before clone links are known."""
        if self.is_server and self.server_root_url:
            return self.server_root_url
        return CLOUD_SERVER_URL

    @property
    def protocol(self) -> TransportProtocol:
        return protocol_for(self.credential)

    @property
    def credential_id(self) -> str | None:
        return self.credential.id if self.credential is not None else None

    @property
    def endpoint(self) -> BitbucketEndpoint:
        """Endpoint serving web pages of this context's deployment."""
        if self.is_server and self.server_root_url:
            return ServerEndpoint(server_url=self.server_root_url)
        return CloudEndpoint()

    def is_same_repository(self, owner: str, repo: str) -> bool:
        """Check if owner/repo names this context's repository.

        Project keys and repository slugs are case-insensitive.
        """
        return (owner.casefold(), repo.casefold()) == (
            self.repo_owner.casefold(),
            self.repo_name.casefold(),
        )
