"""Checkout requests loaded from YAML documents."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from bbcheckout.builders import CheckoutBuilder, create_builder
from bbcheckout.models.checkout import CheckoutConfiguration
from bbcheckout.models.head import Head
from bbcheckout.models.repository import CloneLinkTemplate, CredentialRef, SourceContext
from bbcheckout.models.revision import Revision


class CheckoutRequest(BaseModel):
    """Everything needed to compute one checkout configuration.

    Example::

        server_url: https://bitbucket.example.com
        owner: PROJ
        repository: app
        credential: {id: deploy-key, kind: ssh_key}
        head:
          kind: branch
          name: main
        revision: {kind: commit, hash: cafebabe...}
        clone_links:
          - {name: https, href: https://bitbucket.example.com/scm/proj/app.git}
          - {name: ssh, href: ssh://git@bitbucket.example.com:7999/proj/app.git}
    """

    server_url: str | None = Field(default=None, description="Blank for Bitbucket Cloud")
    owner: str
    repository: str
    credential: CredentialRef | None = None
    head: Head
    revision: Revision | None = None
    clone_links: list[CloneLinkTemplate] | None = Field(
        default=None, description="Clone links of the repository, None if not fetched yet"
    )

    @property
    def context(self) -> SourceContext:
        return SourceContext.for_server_url(
            self.server_url, self.owner, self.repository, self.credential
        )

    def builder(self) -> CheckoutBuilder:
        """Create the builder, resolved if clone links are present."""
        return create_builder(self.context, self.head, self.revision, self.clone_links)

    def build(self) -> CheckoutConfiguration:
        return self.builder().build()

    @classmethod
    def from_yaml(cls, path: Path) -> "CheckoutRequest":
        """Load a checkout request from a YAML file."""
        with open(path) as f:
            data = yaml.safe_load(f)
        return cls.model_validate(data)
