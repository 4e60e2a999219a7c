"""Git checkout builder."""

from __future__ import annotations

import logging
from typing import Iterable

from bbcheckout.builders.base import CheckoutBuilder
from bbcheckout.models.checkout import (
    REMOTE_PLACEHOLDER,
    GitCheckoutConfiguration,
    GitPinDirective,
    MergeDirective,
    RemoteSpec,
)
from bbcheckout.models.head import BranchHead, PullRequestHead
from bbcheckout.models.repository import (
    BackendType,
    CloneLinkTemplate,
    DeploymentModel,
    SourceContext,
)
from bbcheckout.models.revision import ChangesetRevision, CommitRevision, PullRequestRevision

logger = logging.getLogger(__name__)

ORIGIN_REMOTE = "origin"
UPSTREAM_REMOTE = "upstream"


def ref_specs_for(
    head: BranchHead | PullRequestHead, deployment_model: DeploymentModel
) -> list[str]:
    """Fetch refspecs of a head, with ``@{remote}`` as the remote name.

    Bitbucket Server publishes a pull request's source commit as
    ``refs/pull-requests/{id}/from`` on the target repository. Cloud pull
    requests are fetched by branch name from the origin repository.
    """
    if isinstance(head, PullRequestHead):
        if deployment_model == DeploymentModel.SERVER:
            source = f"refs/pull-requests/{head.id}/from"
        else:
            source = f"refs/heads/{head.origin_branch_name}"
        return [f"+{source}:refs/remotes/{REMOTE_PLACEHOLDER}/{head.name}"]
    return [f"+refs/heads/{head.name}:refs/remotes/{REMOTE_PLACEHOLDER}/{head.name}"]


class GitCheckoutBuilder(CheckoutBuilder):
    """Builds Git checkout configurations for branches and pull requests.

    Merge builds of pull requests get a second ``upstream`` remote tracking
    the target branch and a merge directive onto it.
    """

    backend_type = BackendType.GIT

    def __init__(
        self,
        context: SourceContext,
        head: BranchHead | PullRequestHead,
        revision: CommitRevision | ChangesetRevision | PullRequestRevision | None = None,
        clone_links: Iterable[CloneLinkTemplate] | None = None,
    ) -> None:
        if isinstance(revision, ChangesetRevision) or (
            isinstance(revision, PullRequestRevision)
            and isinstance(revision.source_revision, ChangesetRevision)
        ):
            raise ValueError("Mercurial changesets cannot pin a Git checkout")
        super().__init__(context, head, revision, clone_links)

    def ref_specs(self) -> list[str]:
        return ref_specs_for(self.head, self.context.deployment_model)

    def remote(self) -> str:
        """URL of the ``origin`` remote."""
        return self.remote_url(*self.origin_repository)

    def build(self) -> GitCheckoutConfiguration:
        head = self.head
        remotes = [
            RemoteSpec(
                name=ORIGIN_REMOTE,
                url=self.remote(),
                refspec=self.ref_specs()[0].replace(REMOTE_PLACEHOLDER, ORIGIN_REMOTE),
                credential_id=self.credential_id,
            )
        ]
        merge = None
        if isinstance(head, PullRequestHead) and head.is_merge:
            target = head.target.name
            remotes.append(
                RemoteSpec(
                    name=UPSTREAM_REMOTE,
                    url=self.remote_url(self.context.repo_owner, self.context.repo_name),
                    refspec=f"+refs/heads/{target}:refs/remotes/{UPSTREAM_REMOTE}/{target}",
                    credential_id=self.credential_id,
                )
            )
            merge = MergeDirective(
                base_remote_ref=f"remotes/{UPSTREAM_REMOTE}/{target}",
                base_hash=(
                    self.revision.target_revision.hash
                    if isinstance(self.revision, PullRequestRevision)
                    else None
                ),
            )

        config = GitCheckoutConfiguration(
            remotes=tuple(remotes),
            pin=self._pin(),
            merge=merge,
            browser_url=self.browser_url,
        )
        logger.debug("Built git checkout of %s: %s", head.name, config)
        return config

    def _pin(self) -> GitPinDirective | None:
        revision = self.revision
        if isinstance(revision, PullRequestRevision):
            commit = revision.source_revision.hash
        elif isinstance(revision, CommitRevision):
            commit = revision.hash
        else:
            return None
        return GitPinDirective(branch_name=self.head.branch_name, commit_hash=commit)
