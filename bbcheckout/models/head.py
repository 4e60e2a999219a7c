"""Buildable heads: branches and pull requests."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from bbcheckout.models.repository import BackendType

PR_NAME_PREFIX = "PR-"


class HeadOrigin(str, Enum):
    """Where a pull request's source branch lives."""

    SAME = "same"
    FORK = "fork"


class CheckoutStrategy(str, Enum):
    """How a pull request is checked out.

    head: the tip of the source branch
    merge: the source branch merged onto the target branch
    """

    HEAD = "head"
    MERGE = "merge"


class BranchHead(BaseModel):
    """A plain branch of the context repository."""

    kind: Literal["branch"] = "branch"
    name: str = Field(..., description="Branch name")
    backend_type: BackendType = Field(default=BackendType.GIT)

    model_config = {"frozen": True}

    @property
    def branch_name(self) -> str:
        """Branch that has to be fetched to check this head out."""
        return self.name


class PullRequestHead(BaseModel):
    """A pull request, possibly coming from a fork."""

    kind: Literal["pull_request"] = "pull_request"
    id: str = Field(..., description="Pull request number")
    origin_owner: str = Field(..., description="Owner of the repository holding the source branch")
    origin_repo_name: str = Field(..., description="Repository holding the source branch")
    origin_branch_name: str = Field(..., description="Source branch name")
    target: BranchHead
    origin: HeadOrigin = Field(default=HeadOrigin.SAME)
    checkout_strategy: CheckoutStrategy = Field(default=CheckoutStrategy.HEAD)

    model_config = {"frozen": True}

    @property
    def name(self) -> str:
        return f"{PR_NAME_PREFIX}{self.id}"

    @property
    def branch_name(self) -> str:
        return self.origin_branch_name

    @property
    def backend_type(self) -> BackendType:
        return self.target.backend_type

    @property
    def is_merge(self) -> bool:
        return self.checkout_strategy == CheckoutStrategy.MERGE


Head = Annotated[Union[BranchHead, PullRequestHead], Field(discriminator="kind")]
