"""Best-effort clone URLs for repositories no clone link describes yet."""

from __future__ import annotations

from urllib.parse import urlsplit

from bbcheckout.endpoints import normalize_server_url
from bbcheckout.errors import UnsupportedBackendError
from bbcheckout.models.repository import BackendType, DeploymentModel, TransportProtocol

CLOUD_HOST = "bitbucket.org"


def resolve_repository_uri(
    owner: str,
    repository: str,
    backend_type: BackendType,
    deployment_model: DeploymentModel,
    server_root_url: str | None = None,
    protocol: TransportProtocol = TransportProtocol.HTTPS,
    ssh_port: int | None = None,
) -> str:
    """Get the canonical clone URL of a repository.

    Args:
        owner: Workspace (cloud) or project key (server)
        repository: Repository slug
        backend_type: Git or Mercurial
        deployment_model: Cloud or server
        server_root_url: Root URL, required for server deployments
        protocol: HTTPS or SSH
        ssh_port: SSH port of a server deployment. No default is assumed;
            without one the URL carries no port.

    Raises:
        UnsupportedBackendError: Mercurial against a server deployment.
    """
    if deployment_model == DeploymentModel.SERVER:
        if backend_type == BackendType.MERCURIAL:
            raise UnsupportedBackendError(
                "Mercurial is not supported by Bitbucket Server"
            )
        if not server_root_url:
            raise ValueError("server_root_url is required for server deployments")
        root = normalize_server_url(server_root_url)
        if protocol == TransportProtocol.SSH:
            host = urlsplit(root).hostname or root
            port = f":{ssh_port}" if ssh_port is not None else ""
            return f"ssh://git@{host}{port}/{owner}/{repository}.git"
        return f"{root}/scm/{owner}/{repository}.git"

    if backend_type == BackendType.MERCURIAL:
        if protocol == TransportProtocol.SSH:
            return f"ssh://hg@{CLOUD_HOST}/{owner}/{repository}"
        return f"https://{CLOUD_HOST}/{owner}/{repository}"
    if protocol == TransportProtocol.SSH:
        return f"git@{CLOUD_HOST}:{owner}/{repository}.git"
    return f"https://{CLOUD_HOST}/{owner}/{repository}.git"
