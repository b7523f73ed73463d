"""
quickbase.api.codes - QuickBase result codes
=============================================

Every QuickBase response carries an ``<errcode>`` element, even when the
HTTP status is 200. ``ErrorCode`` maps that integer to a symbolic name.

Integers missing from the catalog decode to ``ERROR_CODE_NOT_RECOGNIZED``
instead of raising, so a server that grows new codes never breaks response
parsing.

Note that ``TIMEOUT`` and ``ACCESS_DENIED`` are both published as 82. An
``IntEnum`` turns the second name into an alias of the first, so decoding 82
always yields ``TIMEOUT``.
"""

from __future__ import annotations

import logging
from enum import Enum, IntEnum
from typing import Optional

logger = logging.getLogger("quickbase.api")

# Source of the catalog below.
ERROR_CODE_REFERENCE = "https://www.quickbase.com/api-guide/whnjs.htm"


class ErrorCode(IntEnum):
    """
    Result code returned in the ``errcode`` element of a response.

    Examples
    --------
    >>> ErrorCode(4)
    <ErrorCode.INVALID_TICKET: 4>
    >>> ErrorCode(9999)
    <ErrorCode.ERROR_CODE_NOT_RECOGNIZED: -1>
    >>> str(ErrorCode.INVALID_TICKET)
    'INVALID_TICKET(4)'
    """

    ERROR_CODE_NOT_RECOGNIZED = -1

    OK = 0
    UNKNOWN = 1
    INVALID_INPUT = 2
    INSUFFICIENT_PERMISSIONS = 3
    INVALID_TICKET = 4
    UNIMPLEMENTED_OP = 5
    SYNTAX_ERROR = 6
    API_NO_ALLOWED = 7
    SSL_REQUIRED = 8
    INVALID_CHOICE = 9
    INVALID_FIELD_TYPE = 10
    XML_PARSE_ERROR = 11
    INVALID_SOURCE_DBID = 12
    INVALID_ACCT = 13
    DBID_ERROR = 14
    INVALID_HOSTNAME = 15
    UNAUTHORIZED_IP = 19
    INVALID_CREDENTIALS = 20
    INVALID_USER = 21
    SIGNIN_REQUIRED = 22
    FEATURE_NOT_SUPPORTED = 23
    INVALID_APPTOKEN = 24
    DUPLICATE_APPTOKEN = 25
    MAX_COUNT = 26
    REGISTRATION_REQUIRED = 27
    MANAGED_BY_LDAP = 28
    DENIED = 29
    NO_RECORD = 30
    NO_FIELD = 31
    NO_APP = 32
    NO_QUERY = 33
    CANNOT_CHANGE_VALUE = 34
    NO_DATA = 35
    CLONING_ERROR = 36
    NO_REPORT = 37
    RESTRICTED_FIELD_IN_REPORT = 38
    REQUIRED_FIELD = 50
    UNIQ_ERROR = 51
    DUPLICATE_FIELD = 52
    MISSING_FIELDS = 53
    CACHE_NOT_FOUND = 54
    UPDATE_ERROR = 60
    SCHEMA_LOCKED = 61
    OVER_ACCT_SIZE_LIMIT = 70
    OVER_DB_SIZE_LIMIT = 71
    ACCT_SUSPENDED = 73
    CREATE_APP_DENIED = 74
    VIEW_TOO_LARGE = 75
    TOO_MANY_CRITERIA = 76
    REQUEST_LIMIT = 77
    DATA_LIMIT = 78
    OVERFLOW = 80
    NOT_FOUND = 81
    TIMEOUT = 82
    ACCESS_DENIED = 82  # alias of TIMEOUT, see module docstring
    DB_ERROR = 84
    SCHEMA_UPDATE_ERROR = 85
    INVALID_GROUP = 87
    TRY_LATER = 100
    TEMPORARILY_UNAVAILABLE = 101
    INVALID_REQUEST = 102
    INVALID_SRVR = 103
    HEAVY_TRAFFIC = 104
    TECHNICAL_ISSUES = 105
    INVALID_ROLE = 110
    USER_EXISTS = 111
    NO_USER_IN_ROLE = 112
    USER_HAS_ROLE = 113
    ADMIN_REQUIRED = 114
    UPGRADE_PLAN = 150
    EXPIRED_PLAN = 151
    APP_SUSPENDED = 152

    @classmethod
    def _missing_(cls, value: object) -> Optional["ErrorCode"]:
        if isinstance(value, int) and not isinstance(value, bool):
            logger.warning(
                "Error code not recognized [%s]. Please update ErrorCode (from %s)",
                value,
                ERROR_CODE_REFERENCE,
            )
            return cls.ERROR_CODE_NOT_RECOGNIZED
        return None

    @property
    def code(self) -> int:
        return int(self.value)

    def __str__(self) -> str:
        return f"{self.name}({self.value})"


class ExceptionCode(Enum):
    """
    Human-readable descriptions for the authentication failures.

    Attributes
    ----------
    code : int
        Wire value shared with the matching ``ErrorCode``
    description : str
        Text suitable for end-user messages
    """

    UNKNOWN_USER = (21, "Unknown user")
    UNKNOWN_USERNAME_PASSWD = (20, "Unknown username/password")

    def __init__(self, code: int, description: str) -> None:
        self.code = code
        self.description = description

    @classmethod
    def for_error_code(cls, error_code: ErrorCode) -> Optional["ExceptionCode"]:
        """Return the description entry for ``error_code``, if there is one."""
        for member in cls:
            if member.code == int(error_code):
                return member
        return None

    def __str__(self) -> str:
        return f"{self.code}: {self.description}"
