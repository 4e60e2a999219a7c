"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from bbcheckout.models.head import BranchHead, CheckoutStrategy, HeadOrigin, PullRequestHead
from bbcheckout.models.repository import (
    CloneLinkTemplate,
    CredentialKind,
    CredentialRef,
    DeploymentModel,
    SourceContext,
)

SERVER_URL = "https://bitbucket.test"


@pytest.fixture
def password_credential() -> CredentialRef:
    return CredentialRef(id="user-pass", kind=CredentialKind.USERNAME_PASSWORD)


@pytest.fixture
def ssh_credential() -> CredentialRef:
    return CredentialRef(id="user-key", kind=CredentialKind.SSH_KEY)


@pytest.fixture
def cloud_context() -> SourceContext:
    """Anonymous cloud context for tester/test-repo."""
    return SourceContext(repo_owner="tester", repo_name="test-repo")


@pytest.fixture
def server_context() -> SourceContext:
    """Anonymous server context for tester/test-repo."""
    return SourceContext(
        deployment_model=DeploymentModel.SERVER,
        server_root_url=SERVER_URL,
        repo_owner="tester",
        repo_name="test-repo",
    )


@pytest.fixture
def cloud_git_links() -> list[CloneLinkTemplate]:
    return [
        CloneLinkTemplate(name="https", href="https://bitbucket.org/tester/test-repo.git"),
        CloneLinkTemplate(name="ssh", href="ssh://git@bitbucket.org/tester/test-repo.git"),
    ]


@pytest.fixture
def cloud_hg_links() -> list[CloneLinkTemplate]:
    return [
        CloneLinkTemplate(name="https", href="https://bitbucket.org/tester/test-repo"),
        CloneLinkTemplate(name="ssh", href="ssh://hg@bitbucket.org/tester/test-repo"),
    ]


@pytest.fixture
def server_git_links() -> list[CloneLinkTemplate]:
    return [
        CloneLinkTemplate(name="http", href="https://tester@bitbucket.test/scm/tester/test-repo.git"),
        CloneLinkTemplate(name="ssh", href="ssh://git@bitbucket.test:7999/tester/test-repo.git"),
    ]


@pytest.fixture
def branch_head() -> BranchHead:
    return BranchHead(name="test-branch")


@pytest.fixture
def fork_merge_head(branch_head: BranchHead) -> PullRequestHead:
    """Pull request 1 from the qa/qa-repo fork, built as a merge."""
    return PullRequestHead(
        id="1",
        origin_owner="qa",
        origin_repo_name="qa-repo",
        origin_branch_name="qa-branch",
        target=branch_head,
        origin=HeadOrigin.FORK,
        checkout_strategy=CheckoutStrategy.MERGE,
    )


@pytest.fixture
def same_repo_head(branch_head: BranchHead) -> PullRequestHead:
    """Pull request 2 from a branch of the target repository."""
    return PullRequestHead(
        id="2",
        origin_owner="tester",
        origin_repo_name="test-repo",
        origin_branch_name="feature",
        target=branch_head,
    )
