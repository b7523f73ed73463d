"""
quickbase.db - Database handles
================================
"""

from quickbase.db.database import QuickBaseDatabase

__all__ = ["QuickBaseDatabase"]
