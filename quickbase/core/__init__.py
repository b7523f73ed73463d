"""
quickbase.core - Core connectivity and authentication
======================================================

This module provides the foundational classes for talking to QuickBase:

- QuickBaseCredentials / QuickBaseConfig: connection configuration
- QuickBaseSession: ticket-based HTTP session with one-shot re-authentication
- ConnectionContext: high-level, environment-driven connection manager
- RequestBuilder and friends: rebuildable request descriptions
- The QuickBaseError exception hierarchy

"""

from quickbase.core.config import QuickBaseConfig, QuickBaseCredentials
from quickbase.core.errors import (
    QuickBaseAuthError,
    QuickBaseConfigError,
    QuickBaseError,
    QuickBaseFieldError,
    QuickBaseLookupError,
    QuickBaseRequestError,
    QuickBaseTransportError,
    QuickBaseUpstreamError,
)
from quickbase.core.builders import HttpCall, RequestBuilder, SessionState
from quickbase.core.session import QuickBaseSession
from quickbase.core.connection import ConnectionContext

__all__ = [
    "QuickBaseConfig",
    "QuickBaseCredentials",
    "QuickBaseSession",
    "ConnectionContext",
    "HttpCall",
    "RequestBuilder",
    "SessionState",
    "QuickBaseError",
    "QuickBaseConfigError",
    "QuickBaseAuthError",
    "QuickBaseRequestError",
    "QuickBaseTransportError",
    "QuickBaseFieldError",
    "QuickBaseUpstreamError",
    "QuickBaseLookupError",
]
