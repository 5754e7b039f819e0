# eshop/infra/__init__.py
"""
Infrastructure layer: PostgreSQL.
"""

from eshop.infra.database import DatabaseManager, get_db, init_db, close_db

__all__ = [
    "DatabaseManager",
    "get_db",
    "init_db",
    "close_db",
]
