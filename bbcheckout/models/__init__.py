"""Data models for bbcheckout."""

from bbcheckout.models.checkout import (
    CheckoutConfiguration,
    GitCheckoutConfiguration,
    GitPinDirective,
    MercurialCheckoutConfiguration,
    MercurialPinDirective,
    MergeDirective,
    PinKind,
    RemoteSpec,
)
from bbcheckout.models.head import BranchHead, CheckoutStrategy, Head, HeadOrigin, PullRequestHead
from bbcheckout.models.repository import (
    BackendType,
    CloneLinkTemplate,
    CredentialKind,
    CredentialRef,
    DeploymentModel,
    SourceContext,
    TransportProtocol,
)
from bbcheckout.models.revision import (
    ChangesetRevision,
    CommitRevision,
    PullRequestRevision,
    Revision,
)

__all__ = [
    # Repository models
    "BackendType",
    "DeploymentModel",
    "TransportProtocol",
    "CredentialKind",
    "CredentialRef",
    "CloneLinkTemplate",
    "SourceContext",
    # Heads
    "Head",
    "BranchHead",
    "PullRequestHead",
    "HeadOrigin",
    "CheckoutStrategy",
    # Revisions
    "Revision",
    "CommitRevision",
    "ChangesetRevision",
    "PullRequestRevision",
    # Checkout configurations
    "CheckoutConfiguration",
    "GitCheckoutConfiguration",
    "MercurialCheckoutConfiguration",
    "RemoteSpec",
    "GitPinDirective",
    "MercurialPinDirective",
    "PinKind",
    "MergeDirective",
]
