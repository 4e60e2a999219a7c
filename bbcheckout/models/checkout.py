"""Checkout configurations handed to version control clients."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

REMOTE_PLACEHOLDER = "@{remote}"


class RemoteSpec(BaseModel):
    """One remote to define and fetch from."""

    name: str
    url: str
    refspec: str
    credential_id: str | None = None

    model_config = {"frozen": True}


class GitPinDirective(BaseModel):
    """Lock a Git checkout of a branch to a known commit."""

    branch_name: str
    commit_hash: str

    model_config = {"frozen": True}


class PinKind(str, Enum):
    """What a Mercurial revision value refers to."""

    BRANCH = "branch"
    CHANGESET = "changeset"


class MercurialPinDirective(BaseModel):
    """Mercurial revision to update to."""

    kind: PinKind
    value: str

    model_config = {"frozen": True}


class MergeDirective(BaseModel):
    """Merge the checked out head onto a base ref.

    A missing base_hash merges onto whatever the base ref resolves to at
    checkout time.
    """

    base_remote_ref: str = Field(..., description="e.g. remotes/upstream/main")
    base_hash: str | None = None

    model_config = {"frozen": True}


class GitCheckoutConfiguration(BaseModel):
    """Everything a Git client needs to check out a head."""

    remotes: tuple[RemoteSpec, ...] = Field(default_factory=tuple)
    pin: GitPinDirective | None = None
    merge: MergeDirective | None = None
    browser_url: str

    model_config = {"frozen": True}

    def remote(self, name: str) -> RemoteSpec | None:
        """Get a remote by name."""
        for remote in self.remotes:
            if remote.name == name:
                return remote
        return None


class MercurialCheckoutConfiguration(BaseModel):
    """Everything a Mercurial client needs to check out a head."""

    source: str
    credential_id: str | None = None
    pin: MercurialPinDirective
    browser_url: str

    model_config = {"frozen": True}


CheckoutConfiguration = GitCheckoutConfiguration | MercurialCheckoutConfiguration
