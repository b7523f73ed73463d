"""
Pytest configuration and shared fixtures.
"""

import threading
import xml.etree.ElementTree as ET
from typing import Any, Callable, Dict, List, Optional
from unittest.mock import MagicMock, Mock, patch

import pytest

from quickbase.core.config import QuickBaseConfig, QuickBaseCredentials
from tests.helpers import make_response, qdbapi


class FakeQuickBase:
    """
    In-memory stand-in for the QuickBase HTTP endpoint.

    Issues tickets T1, T2, ... on API_Authenticate and answers any other
    call with OK while the ticket is valid, or INVALID_TICKET after
    ``expire_tickets()``. Queued bodies and failures take precedence.
    """

    def __init__(self) -> None:
        self.calls: List[Dict[str, Any]] = []
        self.valid_tickets: set = set()
        self.queued: Dict[str, List[Any]] = {}
        self.hook: Optional[Callable[[str, Optional[str]], None]] = None
        self._issued = 0
        self._lock = threading.Lock()

    @property
    def auth_count(self) -> int:
        return len(self.calls_for("API_Authenticate"))

    def calls_for(self, act: str) -> List[Dict[str, Any]]:
        return [c for c in self.calls if c["act"] == act]

    def queue(self, act: str, *replies: Any) -> None:
        """Queue response bodies (str), Mock responses or exceptions for ``act``."""
        self.queued.setdefault(act, []).extend(replies)

    def expire_tickets(self) -> None:
        with self._lock:
            self.valid_tickets.clear()

    def handle(
        self,
        method: str,
        url: str,
        params: Any = None,
        headers: Any = None,
        data: Any = None,
        timeout: Any = None,
        verify: Any = None,
    ) -> Mock:
        params = list(params or [])
        headers = dict(headers or {})
        if method == "POST":
            act = headers.get("QUICKBASE-ACTION")
            ticket = ET.fromstring(data).findtext("ticket")
        else:
            query = dict(params)
            act = query.get("act")
            ticket = query.get("ticket")

        with self._lock:
            self.calls.append({
                "method": method,
                "url": url,
                "params": params,
                "headers": headers,
                "data": data,
                "act": act,
                "ticket": ticket,
            })
            pending = self.queued.get(act)
            if pending:
                reply: Any = pending.pop(0)
            elif act == "API_Authenticate":
                self._issued += 1
                new_ticket = f"T{self._issued}"
                self.valid_tickets.add(new_ticket)
                reply = qdbapi(ticket=new_ticket, userid="12345.abcd")
            elif ticket not in self.valid_tickets:
                reply = qdbapi(4, "Invalid ticket")
            else:
                reply = qdbapi(0, "No error", action=act)

        if self.hook is not None:
            self.hook(act, ticket)

        if isinstance(reply, BaseException):
            raise reply
        if isinstance(reply, str):
            return make_response(reply)
        return reply


@pytest.fixture
def cfg():
    """A valid QuickBaseConfig."""
    return QuickBaseConfig(
        domain="test.quickbase.com",
        credentials=QuickBaseCredentials("user@example.com", "secret"),
        auth_hours=4,
    )


@pytest.fixture
def fake_qb():
    """Patch requests.Session so every request is served by a FakeQuickBase."""
    fake = FakeQuickBase()
    with patch("quickbase.core.session.requests.Session") as mock_session_class:
        mock_session = MagicMock()
        mock_session.request.side_effect = fake.handle
        mock_session_class.return_value = mock_session
        fake.transport = mock_session
        fake.session_class = mock_session_class
        yield fake


@pytest.fixture
def mock_session():
    """Create a mock QuickBaseSession."""
    session = Mock()
    session.ticket = "T1"
    session.base_url = "https://test.quickbase.com/db/"
    session.main_url = "https://test.quickbase.com/db/main?"
    return session
