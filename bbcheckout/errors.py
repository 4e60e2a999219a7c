"""Exceptions raised while computing checkout configurations."""

from __future__ import annotations


class CheckoutError(Exception):
    """Base class for checkout configuration errors."""

    code: str = "CHECKOUT_ERROR"


class UnsupportedBackendError(CheckoutError):
    """The requested backend is not hosted by the deployment.

    Bitbucket Server has no Mercurial hosting, so any Mercurial URL against a
    server deployment is rejected.
    """

    code = "UNSUPPORTED_BACKEND"


class MissingCloneLinkError(CheckoutError):
    """No clone link was supplied for the protocol the credential needs."""

    code = "MISSING_CLONE_LINK"

    def __init__(self, protocol: str, available: list[str] | None = None) -> None:
        self.protocol = protocol
        self.available = available or []
        super().__init__(
            f"No {protocol} clone link available (got: {', '.join(self.available) or 'none'})"
        )


class InvalidHeadError(CheckoutError, ValueError):
    """A head contradicts the source context it is built against."""

    code = "INVALID_HEAD"
