"""Mercurial checkout builder."""

from __future__ import annotations

import logging
from typing import Iterable

from bbcheckout.builders.base import CheckoutBuilder
from bbcheckout.errors import UnsupportedBackendError
from bbcheckout.models.checkout import MercurialCheckoutConfiguration, MercurialPinDirective, PinKind
from bbcheckout.models.head import BranchHead, PullRequestHead
from bbcheckout.models.repository import BackendType, CloneLinkTemplate, SourceContext
from bbcheckout.models.revision import ChangesetRevision, CommitRevision, PullRequestRevision

logger = logging.getLogger(__name__)


class MercurialCheckoutBuilder(CheckoutBuilder):
    """Builds Mercurial checkout configurations.

    Mercurial is only hosted on Bitbucket Cloud. Pull requests are pulled
    from their origin repository; merge builds are not supported and fall
    back to the pull request's head.
    """

    backend_type = BackendType.MERCURIAL
    browser_suffix = "/"

    def __init__(
        self,
        context: SourceContext,
        head: BranchHead | PullRequestHead,
        revision: CommitRevision | ChangesetRevision | PullRequestRevision | None = None,
        clone_links: Iterable[CloneLinkTemplate] | None = None,
    ) -> None:
        if context.is_server:
            raise UnsupportedBackendError("Mercurial is not supported by Bitbucket Server")
        if isinstance(revision, CommitRevision) or (
            isinstance(revision, PullRequestRevision)
            and isinstance(revision.source_revision, CommitRevision)
        ):
            raise ValueError("Git commits cannot pin a Mercurial checkout")
        super().__init__(context, head, revision, clone_links)

    def source(self) -> str:
        """URL to pull from."""
        return self.remote_url(*self.origin_repository)

    def build(self) -> MercurialCheckoutConfiguration:
        head = self.head
        if isinstance(head, PullRequestHead) and head.is_merge:
            logger.warning(
                "Building merge commits of Mercurial pull requests is not supported, "
                "building the head of %s instead",
                head.name,
            )
        return MercurialCheckoutConfiguration(
            source=self.source(),
            credential_id=self.credential_id,
            pin=self._pin(),
            browser_url=self.browser_url,
        )

    def _pin(self) -> MercurialPinDirective:
        revision = self.revision
        if isinstance(revision, PullRequestRevision):
            revision = revision.source_revision
        if isinstance(revision, ChangesetRevision):
            return MercurialPinDirective(kind=PinKind.CHANGESET, value=revision.changeset_id)
        return MercurialPinDirective(kind=PinKind.BRANCH, value=self.head.branch_name)
