"""Checkout configuration builders."""

from __future__ import annotations

from typing import Iterable

from bbcheckout.builders.base import CheckoutBuilder
from bbcheckout.builders.git import GitCheckoutBuilder, ref_specs_for
from bbcheckout.builders.mercurial import MercurialCheckoutBuilder
from bbcheckout.models.head import BranchHead, PullRequestHead
from bbcheckout.models.repository import BackendType, CloneLinkTemplate, SourceContext
from bbcheckout.models.revision import ChangesetRevision, CommitRevision, PullRequestRevision

BUILDER_CLASSES: dict[BackendType, type[CheckoutBuilder]] = {
    BackendType.GIT: GitCheckoutBuilder,
    BackendType.MERCURIAL: MercurialCheckoutBuilder,
}


def create_builder(
    context: SourceContext,
    head: BranchHead | PullRequestHead,
    revision: CommitRevision | ChangesetRevision | PullRequestRevision | None = None,
    clone_links: Iterable[CloneLinkTemplate] | None = None,
) -> CheckoutBuilder:
    """Create the builder matching the head's backend."""
    builder_class = BUILDER_CLASSES[head.backend_type]
    return builder_class(context, head, revision, clone_links)


__all__ = [
    "CheckoutBuilder",
    "GitCheckoutBuilder",
    "MercurialCheckoutBuilder",
    "create_builder",
    "ref_specs_for",
]
