"""
quickbase.core.connection - High-level connection management
=============================================================

Provides a ConnectionContext that builds a QuickBaseSession from explicit
arguments or ``QB_*`` environment variables.
"""

from __future__ import annotations

import logging
import os
from typing import List, Optional, Union

from quickbase.core.config import QuickBaseConfig, QuickBaseCredentials
from quickbase.core.errors import QuickBaseConfigError, QuickBaseError
from quickbase.core.session import QuickBaseSession
from quickbase.db.database import QuickBaseDatabase

logger = logging.getLogger("quickbase.session")


class ConnectionContext:
    """
    High-level connection manager for a QuickBase realm.

    Supports environment variable configuration and context manager usage.
    The session is created (and authenticated) on first use.

    Parameters
    ----------
    domain : str, optional
        Realm host. Falls back to QB_DOMAIN env var.
    user : str, optional
        Username. Falls back to QB_USER env var.
    password : str, optional
        Password. Falls back to QB_PASS env var.
    auth_hours : int, optional
        Ticket lifetime in hours. Falls back to QB_AUTH_HOURS env var.
    protocol : str, optional
        "https" or "http". Falls back to QB_PROTOCOL env var, then "https".
    verify : bool, optional
        SSL verification. Falls back to QB_VERIFY_TLS env var.
    timeout : float
        Request timeout in seconds.
    sign_off_on_close : bool
        Sign the ticket out when the context is closed.

    Examples
    --------
    >>> with ConnectionContext() as conn:  # reads QB_* env vars
    ...     db = conn.find_database("Projects")
    ...     doc = db.execute(QuickBaseAPICall.API_DoQuery)
    """

    def __init__(
        self,
        domain: Optional[str] = None,
        user: Optional[str] = None,
        password: Optional[str] = None,
        auth_hours: Optional[int] = None,
        protocol: Optional[str] = None,
        verify: Optional[Union[bool, str]] = None,
        timeout: float = 60.0,
        sign_off_on_close: bool = True,
    ) -> None:
        # Resolve from environment if not provided
        self._domain = (domain or os.environ.get("QB_DOMAIN", "")).strip()
        self._user = user or os.environ.get("QB_USER", "")
        self._password = password or os.environ.get("QB_PASS", "")
        self._protocol = protocol or os.environ.get("QB_PROTOCOL", "https")

        if auth_hours is not None:
            self._auth_hours = auth_hours
        else:
            raw = os.environ.get("QB_AUTH_HOURS", "").strip()
            try:
                self._auth_hours = int(raw) if raw else None
            except ValueError as e:
                raise QuickBaseConfigError(f"Invalid QB_AUTH_HOURS value: [{raw}]") from e

        if verify is not None:
            self._verify = verify
        else:
            self._verify = os.environ.get("QB_VERIFY_TLS", "true").lower() != "false"

        self._timeout = timeout
        self._sign_off_on_close = sign_off_on_close

        # Validate configuration
        if not self._domain:
            raise QuickBaseConfigError(
                "Missing domain. Set QB_DOMAIN environment variable "
                "or pass domain parameter."
            )

        if not (self._user and self._password):
            raise QuickBaseConfigError(
                "Missing credentials. Set QB_USER/QB_PASS environment variables "
                "or pass user/password parameters."
            )

        self._session: Optional[QuickBaseSession] = None

    @property
    def session(self) -> QuickBaseSession:
        """Get or create the underlying QuickBase session."""
        if self._session is None:
            self._session = self._build_session()
        return self._session

    def _build_session(self) -> QuickBaseSession:
        cfg = QuickBaseConfig(
            domain=self._domain,
            credentials=QuickBaseCredentials(self._user, self._password),
            auth_hours=self._auth_hours,
            protocol=self._protocol,
            verify=self._verify,
            timeout=self._timeout,
        )
        return QuickBaseSession(cfg)

    def close(self) -> None:
        """Sign off (if configured) and close the connection."""
        if self._session is None:
            return
        session, self._session = self._session, None
        try:
            if self._sign_off_on_close:
                session.sign_off()
        finally:
            session.close()

    def __enter__(self) -> "ConnectionContext":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            self.close()
            return
        # Keep the error raised inside the block as the one the caller sees.
        try:
            self.close()
        except QuickBaseError as e:
            logger.warning("Sign-off after failed block did not complete: %s", e)

    def database(self, dbid: str) -> QuickBaseDatabase:
        """Get a handle for a known database id."""
        return QuickBaseDatabase(self.session, dbid)

    def find_database(self, name: str) -> QuickBaseDatabase:
        """Get a handle for the first database with the given name."""
        return self.session.find_database_by_name(name)

    def find_databases(self, name: str) -> List[QuickBaseDatabase]:
        """Get handles for every database with the given name."""
        return self.session.find_databases_by_name(name)

    @property
    def domain(self) -> str:
        """The configured realm host."""
        return self._domain

    @property
    def auth_hours(self) -> Optional[int]:
        """The configured ticket lifetime."""
        return self._auth_hours
