"""
quickbase.api - QuickBase API catalogs
=======================================

Pure data describing the remote API:

- QuickBaseAPICall: operation tokens
- ErrorCode: result codes embedded in every response
- ExceptionCode: descriptions for authentication failures
- QueryExecutionMode: synchronous/asynchronous flag for callers

"""

from quickbase.api.calls import QuickBaseAPICall
from quickbase.api.codes import ErrorCode, ExceptionCode
from quickbase.api.modes import QueryExecutionMode

__all__ = [
    "QuickBaseAPICall",
    "ErrorCode",
    "ExceptionCode",
    "QueryExecutionMode",
]
