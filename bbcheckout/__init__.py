"""bbcheckout - Checkout configurations for Bitbucket branches and pull requests."""

from bbcheckout.builders import (
    CheckoutBuilder,
    GitCheckoutBuilder,
    MercurialCheckoutBuilder,
    create_builder,
)
from bbcheckout.errors import (
    CheckoutError,
    InvalidHeadError,
    MissingCloneLinkError,
    UnsupportedBackendError,
)
from bbcheckout.resolver import resolve_repository_uri

__version__ = "0.1.0"
__all__ = [
    "CheckoutBuilder",
    "GitCheckoutBuilder",
    "MercurialCheckoutBuilder",
    "create_builder",
    "resolve_repository_uri",
    "CheckoutError",
    "InvalidHeadError",
    "MissingCloneLinkError",
    "UnsupportedBackendError",
]
