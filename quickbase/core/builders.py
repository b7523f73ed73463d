"""
quickbase.core.builders - Rebuildable request descriptions
===========================================================

A ``RequestBuilder`` captures what a call targets (database id, operation,
parameters) but not the ticket. The session hands it a ``SessionState``
snapshot every time it builds, so the same builder produces a request bound
to a fresh ticket after re-authentication.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Sequence, Tuple, Union
from xml.sax.saxutils import escape

from quickbase.api.calls import QuickBaseAPICall
from quickbase.core.config import QuickBaseCredentials
from quickbase.core.errors import QuickBaseConfigError

ACT = "act"
TICKET = "ticket"
USERNAME = "username"
PASSWORD = "password"
HOURS = "hours"
DBNAME = "dbname"

QB_ACTION_HEADER = "QUICKBASE-ACTION"
XML_CONTENT_TYPE = "application/xml; charset=UTF-8"

Call = Union[QuickBaseAPICall, str]
Params = Union[Mapping[str, str], Sequence[Tuple[str, str]]]


@dataclass(frozen=True)
class SessionState:
    """Snapshot of the session values a builder may read."""
    ticket: Optional[str]
    credentials: QuickBaseCredentials
    auth_hours: int
    main_url: str
    base_url: str


@dataclass(frozen=True)
class HttpCall:
    """
    A ready-to-send HTTP request.

    ``sensitive`` marks a request whose query string carries credentials;
    transport failures for it are reported without the underlying
    exception text.
    """
    method: str
    url: str
    params: Optional[List[Tuple[str, str]]] = None
    headers: Dict[str, str] = field(default_factory=dict)
    data: Optional[bytes] = None
    sensitive: bool = False


def _pairs(params: Optional[Params]) -> List[Tuple[str, str]]:
    if not params:
        return []
    items = params.items() if isinstance(params, Mapping) else params
    return [(str(k), str(v)) for k, v in items]


class RequestBuilder(ABC):
    """Builds an ``HttpCall`` from the current session state."""

    @abstractmethod
    def build(self, state: SessionState) -> HttpCall:
        """
        Materialize the request.

        Raises
        ------
        QuickBaseConfigError
            If the request cannot be built
        """


class AuthenticateRequest(RequestBuilder):
    def build(self, state: SessionState) -> HttpCall:
        return HttpCall(
            "GET",
            state.main_url,
            params=[
                (ACT, str(QuickBaseAPICall.API_Authenticate)),
                (USERNAME, state.credentials.username),
                (PASSWORD, state.credentials.password),
                (HOURS, str(state.auth_hours)),
            ],
            sensitive=True,
        )


class SignOutRequest(RequestBuilder):
    def build(self, state: SessionState) -> HttpCall:
        return HttpCall(
            "GET",
            state.main_url,
            params=[
                (ACT, str(QuickBaseAPICall.API_SignOut)),
                (TICKET, state.ticket or ""),
            ],
        )


class FindDatabaseRequest(RequestBuilder):
    def __init__(self, database_name: str) -> None:
        self.database_name = database_name

    def build(self, state: SessionState) -> HttpCall:
        return HttpCall(
            "GET",
            state.main_url,
            params=[
                (ACT, str(QuickBaseAPICall.API_FindDBByName)),
                (TICKET, state.ticket or ""),
                (DBNAME, self.database_name),
            ],
        )


class ExecuteRequest(RequestBuilder):
    """
    GET call against a database: ``<base_url><dbid>?act=...&ticket=...``.

    ``act`` and ``ticket`` come first, followed by the caller's parameters
    in the order given.
    """

    def __init__(self, dbid: str, call: Call, params: Optional[Params] = None) -> None:
        self.dbid = dbid
        self.call = call
        self.params = _pairs(params)

    def build(self, state: SessionState) -> HttpCall:
        query = [(ACT, str(self.call)), (TICKET, state.ticket or "")]
        query.extend(self.params)
        return HttpCall("GET", f"{state.base_url}{self.dbid}?", params=query)


class ExecuteXmlRequest(RequestBuilder):
    """
    POST call against a database with an XML payload.

    The body wraps the ticket and the caller's raw XML fragments in a
    ``<qdbapi>`` envelope; the operation travels in the
    ``QUICKBASE-ACTION`` header.
    """

    def __init__(self, dbid: str, call: Call, elements: Sequence[str] = ()) -> None:
        self.dbid = dbid
        self.call = call
        self.elements = list(elements)

    def payload(self, state: SessionState) -> str:
        parts = ["<qdbapi>\n", "<ticket>", escape(state.ticket or ""), "</ticket>\n"]
        for element in self.elements:
            parts.append(element)
            parts.append("\n")
        parts.append("</qdbapi>\n")
        return "".join(parts)

    def build(self, state: SessionState) -> HttpCall:
        payload = self.payload(state)
        try:
            data = payload.encode("utf-8")
        except UnicodeEncodeError as e:
            raise QuickBaseConfigError("Cannot create string request entity") from e
        return HttpCall(
            "POST",
            f"{state.base_url}{self.dbid}",
            headers={
                "Content-Type": XML_CONTENT_TYPE,
                QB_ACTION_HEADER: str(self.call),
            },
            data=data,
        )
