"""
quickbase.core.errors - Exception hierarchy
============================================

Every failure raised by this package derives from ``QuickBaseError``.
Boundaries wrap lower-level failures with ``raise ... from cause`` so the
final exception reads as a causal chain.
"""

from __future__ import annotations

from typing import Optional

from quickbase.api.codes import ErrorCode


class QuickBaseError(RuntimeError):
    """Base exception for all QuickBase client errors."""


class QuickBaseConfigError(QuickBaseError, ValueError):
    """Invalid construction argument, malformed URL or unencodable payload."""


class QuickBaseAuthError(QuickBaseError):
    """Authentication did not yield a ticket."""


class QuickBaseRequestError(QuickBaseError):
    """A call to the QuickBase service could not be completed."""


class QuickBaseTransportError(QuickBaseRequestError):
    """
    Network failure, HTTP error status or unparseable response body.

    Attributes
    ----------
    status : int, optional
        HTTP status code, when a response was received
    url : str, optional
        The URL that was called
    body : str
        Response body (truncated in the message)
    """

    def __init__(
        self,
        message: str,
        *,
        status: Optional[int] = None,
        url: Optional[str] = None,
        body: Optional[str] = None,
    ) -> None:
        detail = message
        if status is not None:
            detail = f"{detail} [HTTP {status}]"
        if url:
            detail = f"{detail} for {url}"
        if body:
            detail = f"{detail}: {body[:1200]}"
        super().__init__(detail)
        self.status = status
        self.url = url
        self.body = body or ""


class QuickBaseFieldError(QuickBaseRequestError):
    """An expected element could not be retrieved from a response."""

    def __init__(self, message: str, field: str) -> None:
        super().__init__(message)
        self.field = field


class QuickBaseUpstreamError(QuickBaseRequestError):
    """
    The service answered with a non-OK result code.

    Attributes
    ----------
    error_code : ErrorCode
        Decoded ``errcode`` of the response
    error_text : str
        The service's ``errtext``
    """

    def __init__(self, error_code: ErrorCode, error_text: str) -> None:
        super().__init__(f"{error_text} (error code {error_code!s})")
        self.error_code = error_code
        self.error_text = error_text


class QuickBaseLookupError(QuickBaseError, LookupError):
    """A database lookup by name matched nothing."""
