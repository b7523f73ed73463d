"""
quickbase.core.config - Connection configuration
=================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Tuple, Union
from urllib.parse import urlsplit

from quickbase.core.errors import QuickBaseConfigError

SUPPORTED_PROTOCOLS = ("http", "https")


@dataclass(frozen=True)
class QuickBaseCredentials:
    """
    Username and password used to obtain tickets.

    The password is left out of ``repr`` so configs can be logged.
    """
    username: str
    password: str = field(repr=False)


@dataclass
class QuickBaseConfig:
    """
    Connection configuration for a QuickBase realm.

    Parameters
    ----------
    domain : str
        Realm host, e.g. "example.quickbase.com"
    credentials : QuickBaseCredentials
        Account used for authentication
    auth_hours : int
        Ticket lifetime requested from the service; required and positive
    protocol : str
        "https" (default) or "http"
    timeout : float
        Request timeout in seconds (default: 60.0)
    retries : int
        Transport-level retries for idempotent requests (default: 0)
    backoff : float
        Backoff factor for transport retries (default: 0.5)
    verify : bool or str
        SSL verification (True, False, or path to CA bundle)
    user_agent : str
        User-Agent header value

    Examples
    --------
    >>> cfg = QuickBaseConfig(
    ...     domain="example.quickbase.com",
    ...     credentials=QuickBaseCredentials("user@example.com", "secret"),
    ...     auth_hours=4,
    ... )
    """
    domain: str
    credentials: QuickBaseCredentials
    auth_hours: Any
    protocol: str = "https"
    timeout: float = 60.0
    retries: int = 0
    backoff: float = 0.5
    verify: Union[bool, str] = True
    user_agent: str = "quickbase-sdk/0.1"


def validate_auth_hours(value: Any) -> int:
    """Return ``value`` if it is a positive integer, else raise."""
    if value is None or isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise QuickBaseConfigError(f"Invalid authHours parameter: [{value}]")
    return value


def build_urls(protocol: str, domain: str) -> Tuple[str, str]:
    """
    Derive the session-level and database-level base URLs.

    Returns
    -------
    tuple of (str, str)
        ``(main_url, base_url)``, e.g.
        ``("https://host/db/main?", "https://host/db/")``
    """
    scheme = (protocol or "").strip().lower()
    host = (domain or "").strip()
    if scheme not in SUPPORTED_PROTOCOLS:
        raise QuickBaseConfigError(
            f"Authentication failed. Unsupported protocol {protocol!r} for QuickBase URL"
        )
    if not host or any(c in host for c in "/?#@ \t"):
        raise QuickBaseConfigError(
            f"Authentication failed. Incorrect format of URL to connect to quickbase: {domain!r}"
        )

    main_url = f"{scheme}://{host}/db/main?"
    base_url = f"{scheme}://{host}/db/"

    try:
        parts = urlsplit(base_url)
        parts.port  # raises ValueError on a malformed port
    except ValueError as e:
        raise QuickBaseConfigError(
            "Authentication failed. Incorrect format of URL to connect to quickbase"
        ) from e
    if parts.scheme != scheme or not parts.hostname:
        raise QuickBaseConfigError(
            "Authentication failed. Incorrect format of URL to connect to quickbase"
        )
    return main_url, base_url
