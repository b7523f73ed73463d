"""
QuickBase Python client (quickbase)
===================================

A client for the QuickBase HTTP/XML API: ticket-based authentication,
database-scoped GET and XML POST calls, and typed errors for the result
codes embedded in every response.

Usage
-----
>>> from quickbase import ConnectionContext, QuickBaseAPICall
>>>
>>> with ConnectionContext(domain="example.quickbase.com",
...                        user="me@example.com", password="secret",
...                        auth_hours=4) as conn:
...     db = conn.find_database("Projects")
...     doc = db.execute(QuickBaseAPICall.API_DoQuery, {"query": "{'3'.GT.'0'}"})

Subpackages
-----------
- quickbase.core: Session, configuration, request builders and errors
- quickbase.api: Operation and result-code catalogs
- quickbase.db: Database handles

"""

__version__ = "0.1.0"

# Core exports - available at package root
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
from quickbase.core.session import QuickBaseSession
from quickbase.core.connection import ConnectionContext

# Convenience re-exports
from quickbase.api import ErrorCode, ExceptionCode, QueryExecutionMode, QuickBaseAPICall
from quickbase.db import QuickBaseDatabase

__all__ = [
    # Version
    "__version__",
    # Core
    "QuickBaseConfig",
    "QuickBaseCredentials",
    "QuickBaseSession",
    "ConnectionContext",
    # Errors
    "QuickBaseError",
    "QuickBaseConfigError",
    "QuickBaseAuthError",
    "QuickBaseRequestError",
    "QuickBaseTransportError",
    "QuickBaseFieldError",
    "QuickBaseUpstreamError",
    "QuickBaseLookupError",
    # Catalogs
    "QuickBaseAPICall",
    "ErrorCode",
    "ExceptionCode",
    "QueryExecutionMode",
    # Handles
    "QuickBaseDatabase",
]
