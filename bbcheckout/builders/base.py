"""Base checkout builder shared by the Git and Mercurial builders."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar, Iterable

from bbcheckout.errors import InvalidHeadError, MissingCloneLinkError
from bbcheckout.models.head import BranchHead, HeadOrigin, PullRequestHead
from bbcheckout.models.repository import (
    BackendType,
    CloneLinkTemplate,
    SourceContext,
    TransportProtocol,
)
from bbcheckout.resolver import resolve_repository_uri
from bbcheckout.urls import CloneUrl, ssh_port_of

if TYPE_CHECKING:
    from bbcheckout.models.checkout import CheckoutConfiguration
    from bbcheckout.models.revision import CommitRevision, ChangesetRevision, PullRequestRevision

logger = logging.getLogger(__name__)


class CheckoutBuilder(ABC):
    """Computes the checkout configuration of one head.

    A builder starts unresolved: URL queries return the deployment root as a
    "not configured yet" placeholder. :meth:`with_clone_links` returns a
    resolved copy once the repository's clone links have been fetched.
    """

    backend_type: ClassVar[BackendType]
    browser_suffix: ClassVar[str] = ""

    def __init__(
        self,
        context: SourceContext,
        head: BranchHead | PullRequestHead,
        revision: CommitRevision | ChangesetRevision | PullRequestRevision | None = None,
        clone_links: Iterable[CloneLinkTemplate] | None = None,
    ) -> None:
        if head.backend_type != self.backend_type:
            raise InvalidHeadError(
                f"{head.name} is a {head.backend_type.value} head, "
                f"expected {self.backend_type.value}"
            )
        if isinstance(head, PullRequestHead):
            _check_origin(context, head)
        self._context = context
        self._head = head
        self._revision = revision
        self._clone_links = tuple(clone_links) if clone_links is not None else None

    @property
    def context(self) -> SourceContext:
        return self._context

    @property
    def head(self) -> BranchHead | PullRequestHead:
        return self._head

    @property
    def revision(self) -> CommitRevision | ChangesetRevision | PullRequestRevision | None:
        return self._revision

    @property
    def clone_links(self) -> tuple[CloneLinkTemplate, ...]:
        """The clone links (empty until resolved)."""
        return self._clone_links or ()

    @property
    def is_resolved(self) -> bool:
        return self._clone_links is not None

    @property
    def protocol(self) -> TransportProtocol:
        """Protocol matching the credential kind."""
        return self._context.protocol

    @property
    def credential_id(self) -> str | None:
        return self._context.credential_id

    def with_clone_links(self, clone_links: Iterable[CloneLinkTemplate]) -> "CheckoutBuilder":
        """Return a resolved builder using the given clone links.

        Resolving again with the same links returns ``self``.
        """
        links = tuple(clone_links)
        if self._clone_links == links:
            return self
        logger.debug(
            "Resolving %s of %s/%s with %d clone link(s)",
            self._head.name,
            self._context.repo_owner,
            self._context.repo_name,
            len(links),
        )
        return type(self)(self._context, self._head, self._revision, links)

    def clone_link(self, protocol: TransportProtocol) -> CloneLinkTemplate:
        """Get the clone link for a protocol.

        Raises:
            MissingCloneLinkError: No link for that protocol was supplied.
        """
        for link in self.clone_links:
            if link.protocol == protocol:
                return link
        raise MissingCloneLinkError(
            protocol.value, [link.protocol.value for link in self.clone_links]
        )

    @property
    def origin_repository(self) -> tuple[str, str]:
        """Owner and name of the repository the head's commits live in.

        Cloud pull requests are fetched from their origin repository. Server
        exposes pull requests as refs of the target repository itself.
        """
        head = self._head
        if isinstance(head, PullRequestHead) and not self._context.is_server:
            return head.origin_owner, head.origin_repo_name
        return self._context.repo_owner, self._context.repo_name

    def remote_url(self, owner: str, repository: str) -> str:
        """Clone URL of a repository on this deployment.

        Returns the deployment root while unresolved.
        """
        context = self._context
        if not self.is_resolved:
            return context.root_url
        protocol = self.protocol
        link = self.clone_link(protocol)
        ssh_port = ssh_port_of(link.url) if protocol == TransportProtocol.SSH else None
        url = resolve_repository_uri(
            context.repo_owner,
            context.repo_name,
            self.backend_type,
            context.deployment_model,
            context.server_root_url,
            protocol,
            ssh_port,
        )
        if context.is_same_repository(owner, repository):
            return url
        return str(CloneUrl.parse(url).with_repository(owner, repository))

    @property
    def browser_url(self) -> str:
        """Web page of the repository the checkout comes from."""
        endpoint = self._context.endpoint
        if self.is_resolved:
            owner, repository = self.origin_repository
        else:
            owner, repository = self._context.repo_owner, self._context.repo_name
        return endpoint.repository_url(owner, repository) + self.browser_suffix

    @abstractmethod
    def build(self) -> CheckoutConfiguration:
        """Materialize the checkout configuration."""
        ...


def _check_origin(context: SourceContext, head: PullRequestHead) -> None:
    same = context.is_same_repository(head.origin_owner, head.origin_repo_name)
    if head.origin == HeadOrigin.FORK and same:
        raise InvalidHeadError(
            f"{head.name} is marked as a fork but comes from "
            f"{context.repo_owner}/{context.repo_name} itself"
        )
    if head.origin == HeadOrigin.SAME and not same:
        raise InvalidHeadError(
            f"{head.name} comes from {head.origin_owner}/{head.origin_repo_name} "
            f"but is not marked as a fork"
        )
