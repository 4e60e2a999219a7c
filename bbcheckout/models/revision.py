"""Revisions observed for a head at discovery time."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class CommitRevision(BaseModel):
    """A Git commit."""

    kind: Literal["commit"] = "commit"
    hash: str = Field(..., description="Full commit SHA-1")

    model_config = {"frozen": True}


class ChangesetRevision(BaseModel):
    """A Mercurial changeset."""

    kind: Literal["changeset"] = "changeset"
    changeset_id: str = Field(..., description="Changeset node id")

    model_config = {"frozen": True}

    @property
    def hash(self) -> str:
        return self.changeset_id


class PullRequestRevision(BaseModel):
    """Target and source tips of a pull request, observed together.

    The target tip is only used to pin the merge base of merge builds.
    """

    kind: Literal["pull_request"] = "pull_request"
    target_revision: Annotated[
        Union[CommitRevision, ChangesetRevision], Field(discriminator="kind")
    ]
    source_revision: Annotated[
        Union[CommitRevision, ChangesetRevision], Field(discriminator="kind")
    ]

    model_config = {"frozen": True}


Revision = Annotated[
    Union[CommitRevision, ChangesetRevision, PullRequestRevision],
    Field(discriminator="kind"),
]
