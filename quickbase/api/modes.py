"""
quickbase.api.modes - Query execution mode
===========================================
"""

from enum import Enum


class QueryExecutionMode(Enum):
    """
    Whether a caller wants a query processed synchronously or asynchronously.

    Informational only: every call made through ``QuickBaseSession`` blocks
    the calling thread regardless of this flag.
    """

    synchronous = "synchronous"
    asynchronous = "asynchronous"

    @property
    def is_async(self) -> bool:
        return self is QueryExecutionMode.asynchronous
