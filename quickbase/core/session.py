"""
quickbase.core.session - QuickBase HTTP Session Management
===========================================================

Ticket-based session handling for the QuickBase HTTP/XML API with:
- Authentication on construction (``API_Authenticate``)
- Result-code checking of every 200-OK XML body
- One transparent retry after re-authentication when the ticket expired
- Single-flight ticket renewal across threads sharing a session
"""

from __future__ import annotations

from typing import List, Optional, Tuple
import logging
import threading
import time
import xml.etree.ElementTree as ET

import requests
from requests import Response, Session
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from quickbase.api.codes import ErrorCode, ExceptionCode
from quickbase.core.builders import (
    AuthenticateRequest,
    Call,
    ExecuteRequest,
    ExecuteXmlRequest,
    FindDatabaseRequest,
    HttpCall,
    Params,
    RequestBuilder,
    SessionState,
    SignOutRequest,
)
from quickbase.core.config import (
    QuickBaseConfig,
    QuickBaseCredentials,
    build_urls,
    validate_auth_hours,
)
from quickbase.core.errors import (
    QuickBaseAuthError,
    QuickBaseConfigError,
    QuickBaseError,
    QuickBaseLookupError,
    QuickBaseRequestError,
    QuickBaseTransportError,
    QuickBaseUpstreamError,
)
from quickbase.core.response import (
    DBID,
    TICKET,
    error_code,
    error_text,
    field_texts,
    parse_document,
)
from quickbase.db.database import QuickBaseDatabase


class QuickBaseSession:
    """
    Authenticated HTTP session against one QuickBase realm.

    Construction validates the configuration, builds the HTTP transport and
    obtains a ticket. A session that fails to authenticate is never
    returned. Instances may be shared between threads.

    Parameters
    ----------
    cfg : QuickBaseConfig
        Connection configuration

    Raises
    ------
    QuickBaseConfigError
        If ``auth_hours`` is missing or not positive, or the domain and
        protocol do not form a valid URL. No request is sent in that case.
    QuickBaseAuthError
        If the initial authentication does not yield a ticket

    Examples
    --------
    >>> cfg = QuickBaseConfig(...)
    >>> with QuickBaseSession(cfg) as sess:
    ...     doc = sess.execute("bdcagynhs", QuickBaseAPICall.API_DoQuery,
    ...                        [("query", "{'3'.GT.'0'}")])
    """

    def __init__(self, cfg: QuickBaseConfig) -> None:
        self.cfg = cfg
        self._auth_hours = validate_auth_hours(cfg.auth_hours)
        if not isinstance(cfg.credentials, QuickBaseCredentials) or not cfg.credentials.username:
            raise QuickBaseConfigError("Missing credentials for QuickBase authentication")
        self._credentials = cfg.credentials
        self._main_url, self._base_url = build_urls(cfg.protocol, cfg.domain)

        self.timeout = float(cfg.timeout)
        self.verify = cfg.verify
        self.logger = logging.getLogger("quickbase.session")

        self.session = self._build_session()

        self._ticket: Optional[str] = None
        self._ticket_lock = threading.Lock()

        try:
            self.authenticate()
        except QuickBaseError:
            self.close()
            raise

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.session.close()

    def __enter__(self) -> "QuickBaseSession":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # ---------------- properties ----------------

    @property
    def ticket(self) -> Optional[str]:
        """The ticket currently attached to outgoing requests."""
        return self._ticket

    @property
    def main_url(self) -> str:
        return self._main_url

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def credentials(self) -> QuickBaseCredentials:
        return self._credentials

    @property
    def auth_hours(self) -> int:
        return self._auth_hours

    # ---------------- transport ----------------

    def _build_session(self) -> Session:
        sess = requests.Session()

        sess.headers.update({
            "Accept": "application/xml",
            "User-Agent": self.cfg.user_agent,
        })

        retry = Retry(
            total=self.cfg.retries,
            backoff_factor=self.cfg.backoff,
            status_forcelist=(429, 500, 502, 503, 504),
            allowed_methods=frozenset({"GET", "HEAD"}),
            raise_on_status=False,
        )
        adapter = HTTPAdapter(max_retries=retry)
        sess.mount("https://", adapter)
        sess.mount("http://", adapter)
        return sess

    def _state(self) -> SessionState:
        return SessionState(
            ticket=self._ticket,
            credentials=self._credentials,
            auth_hours=self._auth_hours,
            main_url=self._main_url,
            base_url=self._base_url,
        )

    def _raise_for_error(self, r: Response, url: str) -> None:
        if r.status_code >= 400:
            raise QuickBaseTransportError(
                "QuickBase request failed", status=r.status_code, url=url, body=r.text
            )

    def _request(self, call: HttpCall) -> Response:
        t0 = time.perf_counter()
        try:
            r = self.session.request(
                method=call.method,
                url=call.url,
                params=call.params,
                headers=call.headers or None,
                data=call.data,
                timeout=self.timeout,
                verify=self.verify,
            )
        except requests.RequestException as e:
            if call.sensitive:
                # requests puts the full query string, password included, in its message.
                raise QuickBaseTransportError(
                    f"QuickBase request failed ({type(e).__name__})", url=call.url
                ) from None
            raise QuickBaseTransportError("QuickBase request failed", url=call.url) from e
        self._raise_for_error(r, call.url)
        dt = (time.perf_counter() - t0) * 1000.0
        self.logger.debug("%s %s %sms", call.method, call.url, round(dt, 1))
        return r

    def _send(self, builder: RequestBuilder) -> Tuple[ET.Element, ErrorCode]:
        call = builder.build(self._state())
        r = self._request(call)
        doc = parse_document(r.content)
        return doc, error_code(doc)

    # ---------------- authentication ----------------

    def authenticate(self) -> str:
        """
        Obtain a new ticket and make it the session's current ticket.

        Returns
        -------
        str
            The new ticket

        Raises
        ------
        QuickBaseAuthError
            If the round-trip fails or the response holds no ticket
        """
        with self._ticket_lock:
            return self._renew_ticket()

    def _renew_ticket(self) -> str:
        # Caller holds _ticket_lock.
        try:
            doc, code = self._send(AuthenticateRequest())
            if code is not ErrorCode.OK:
                raise QuickBaseUpstreamError(code, error_text(doc))
        except QuickBaseUpstreamError as e:
            known = ExceptionCode.for_error_code(e.error_code)
            if known is not None:
                raise QuickBaseAuthError(f"Authentication failed. {known.description}.") from e
            raise QuickBaseAuthError("Authentication failed.") from e
        except QuickBaseRequestError as e:
            raise QuickBaseAuthError("Authentication failed.") from e

        tickets = field_texts(doc, TICKET)
        ticket = tickets[0] if tickets else ""
        if not ticket:
            raise QuickBaseAuthError("Authentication failed. No ticket found in response.")

        self._ticket = ticket
        self.logger.info(
            "Authenticated %s on %s for %s hours",
            self._credentials.username,
            self.cfg.domain,
            self._auth_hours,
        )
        return ticket

    # ---------------- request protocol ----------------

    def execute_request(self, builder: RequestBuilder) -> ET.Element:
        """
        Send the request produced by ``builder`` and check its result code.

        If the service reports ``INVALID_TICKET`` the ticket is renewed (once
        per expiry, however many threads notice it) and the request is
        rebuilt and sent one more time.

        Parameters
        ----------
        builder : RequestBuilder
            Produces the request from the current session state

        Returns
        -------
        xml.etree.ElementTree.Element
            Root ``<qdbapi>`` element of a successful response

        Raises
        ------
        QuickBaseUpstreamError
            If the final response carries a non-OK result code
        QuickBaseTransportError
            On network failure, HTTP error status or malformed XML
        QuickBaseFieldError
            If the result code or error text cannot be read
        QuickBaseConfigError
            If the request cannot be built
        """
        # Snapshot before building; compared again under the lock.
        old_ticket = self._ticket

        doc, code = self._send(builder)
        if code is ErrorCode.OK:
            return doc

        self.logger.warning("Got QuickBase error code: %s", code)

        if code is ErrorCode.INVALID_TICKET:
            self.logger.warning("Ticket might have expired. Renewing ticket and executing again.")

            with self._ticket_lock:
                if self._ticket == old_ticket:
                    self._renew_ticket()

            doc, code = self._send(builder)
            if code is ErrorCode.OK:
                return doc

            self.logger.info("After re-login got error code: %s", code)

        raise QuickBaseUpstreamError(code, error_text(doc))

    # ---------------- public ops ----------------

    def execute(self, dbid: str, call: Call, params: Optional[Params] = None) -> ET.Element:
        """
        Execute an API call against a database using HTTP GET.

        Parameters
        ----------
        dbid : str
            Database (application or table) id
        call : QuickBaseAPICall or str
            Operation to run
        params : dict or sequence of (name, value), optional
            Additional query parameters, sent in order after ``act`` and
            ``ticket``

        Returns
        -------
        xml.etree.ElementTree.Element
            Root of the response document
        """
        return self.execute_request(ExecuteRequest(dbid, call, params))

    def execute_xml(self, dbid: str, call: Call, *elements: str) -> ET.Element:
        """
        Execute an API call against a database with an XML payload (HTTP POST).

        Parameters
        ----------
        dbid : str
            Id of the object the call acts upon
        call : QuickBaseAPICall or str
            Operation to run, sent in the ``QUICKBASE-ACTION`` header
        *elements : str
            Raw XML fragments appended to the payload after ``<ticket>``

        Raises
        ------
        QuickBaseConfigError
            If the payload cannot be encoded; nothing is sent
        """
        return self.execute_request(ExecuteXmlRequest(dbid, call, elements))

    def find_databases_by_name(self, database_name: str) -> List[QuickBaseDatabase]:
        """
        Find every database with the given name.

        Only database ids are unique in QuickBase, so several databases may
        share a name.

        Returns
        -------
        list of QuickBaseDatabase
            Handles in the order the service listed them; may be empty
        """
        doc = self.execute_request(FindDatabaseRequest(database_name))
        return [QuickBaseDatabase(self, dbid) for dbid in field_texts(doc, DBID) if dbid]

    def find_database_by_name(self, database_name: str) -> QuickBaseDatabase:
        """
        Find a database by name, returning the first match.

        Raises
        ------
        QuickBaseLookupError
            If no database of that name exists
        """
        databases = self.find_databases_by_name(database_name)
        if not databases:
            raise QuickBaseLookupError(f"No QuickBase database named {database_name!r}")
        return databases[0]

    def sign_off(self) -> ET.Element:
        """
        Invalidate the ticket on the server (``API_SignOut``).

        Raises
        ------
        QuickBaseRequestError
            "Log off failed." wrapping the underlying failure
        """
        try:
            doc = self.execute_request(SignOutRequest())
        except QuickBaseError as e:
            raise QuickBaseRequestError("Log off failed.") from e
        self.logger.info("Signed out %s from %s", self._credentials.username, self.cfg.domain)
        return doc
