"""
Response builders shared by the test modules.
"""

from typing import Any
from unittest.mock import Mock


def qdbapi(errcode: int = 0, errtext: str = "No error", **fields: Any) -> str:
    """Render a QuickBase response envelope."""
    parts = ['<?xml version="1.0" ?>', "<qdbapi>"]
    parts.append(f"<errcode>{errcode}</errcode>")
    parts.append(f"<errtext>{errtext}</errtext>")
    for name, value in fields.items():
        values = value if isinstance(value, (list, tuple)) else [value]
        for v in values:
            parts.append(f"<{name}>{v}</{name}>")
    parts.append("</qdbapi>")
    return "\n".join(parts)


def make_response(body: str, status: int = 200) -> Mock:
    r = Mock()
    r.status_code = status
    r.content = body.encode("utf-8")
    r.text = body
    r.headers = {"Content-Type": "application/xml"}
    return r
