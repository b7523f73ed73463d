"""
quickbase.core.response - Response field extraction
====================================================

QuickBase answers every call with an XML document rooted at ``<qdbapi>``::

    <qdbapi>
        <action>API_FindDBByName</action>
        <errcode>0</errcode>
        <errtext>No error</errtext>
        <dbid>bdcagynhs</dbid>
    </qdbapi>

The helpers here pull the result code, the error text and named payload
elements out of such a document. Missing fields raise
``QuickBaseFieldError``; nothing falls back to a default.
"""

from __future__ import annotations

from typing import List
import xml.etree.ElementTree as ET

from quickbase.api.codes import ErrorCode
from quickbase.core.errors import QuickBaseFieldError, QuickBaseTransportError

ROOT = "qdbapi"
ERRCODE = "errcode"
ERRTEXT = "errtext"
TICKET = "ticket"
DBID = "dbid"


def _strip_ns(tag: str) -> str:
    """Strip XML namespace from a tag name."""
    return tag.split("}", 1)[-1] if "}" in tag else tag


def parse_document(content: bytes) -> ET.Element:
    """
    Parse a response body into its root element.

    Raises
    ------
    QuickBaseTransportError
        If the body is not well-formed XML
    """
    try:
        return ET.fromstring(content)
    except ET.ParseError as e:
        raise QuickBaseTransportError("Cannot parse QuickBase response") from e


def _select(doc: ET.Element, name: str) -> List[ET.Element]:
    if _strip_ns(doc.tag) != ROOT:
        return []
    return [c for c in doc if _strip_ns(c.tag) == name]


def field_texts(doc: ET.Element, name: str) -> List[str]:
    """
    Text of every ``/qdbapi/<name>`` element, in document order.

    Returns an empty list when there are none.
    """
    return [(c.text or "").strip() for c in _select(doc, name)]


def field_text(doc: ET.Element, name: str) -> str:
    """Text of the first ``/qdbapi/<name>`` element."""
    nodes = _select(doc, name)
    if not nodes:
        raise QuickBaseFieldError(f"Cannot retrieve {name}.", name)
    return (nodes[0].text or "").strip()


def error_code(doc: ET.Element) -> ErrorCode:
    """
    Decode the ``errcode`` of a response.

    Unknown integers decode to ``ErrorCode.ERROR_CODE_NOT_RECOGNIZED``.
    """
    try:
        raw = field_text(doc, ERRCODE)
    except QuickBaseFieldError as e:
        raise QuickBaseFieldError("Cannot retrieve error code.", ERRCODE) from e
    try:
        return ErrorCode(int(raw))
    except ValueError as e:
        raise QuickBaseFieldError("Cannot retrieve error code.", ERRCODE) from e


def error_text(doc: ET.Element) -> str:
    try:
        return field_text(doc, ERRTEXT)
    except QuickBaseFieldError as e:
        raise QuickBaseFieldError("Cannot retrieve error text.", ERRTEXT) from e
