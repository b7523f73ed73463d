"""
quickbase.db.database - Database handle
========================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, TYPE_CHECKING
import xml.etree.ElementTree as ET

if TYPE_CHECKING:
    from quickbase.core.builders import Call, Params
    from quickbase.core.session import QuickBaseSession


@dataclass(frozen=True)
class QuickBaseDatabase:
    """
    A QuickBase database id bound to the session that resolved it.

    Handles are immutable and may be shared between threads.

    Parameters
    ----------
    session : QuickBaseSession
        Session used for every call made through this handle
    dbid : str
        Database (application or table) id

    Examples
    --------
    >>> db = sess.find_database_by_name("Projects")
    >>> doc = db.execute(QuickBaseAPICall.API_DoQuery, {"query": "{'3'.GT.'0'}"})
    """
    session: "QuickBaseSession" = field(repr=False)
    dbid: str

    def execute(self, call: "Call", params: Optional["Params"] = None) -> ET.Element:
        """Run ``call`` against this database using HTTP GET."""
        return self.session.execute(self.dbid, call, params)

    def execute_xml(self, call: "Call", *elements: str) -> ET.Element:
        """Run ``call`` against this database with an XML payload."""
        return self.session.execute_xml(self.dbid, call, *elements)
