from __future__ import annotations

from typing import Any, Dict, Optional

from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import User
from .repository import UserRepository

_SELECT_USER = """
    SELECT id, id_number, email, full_name, password_hash, role, profile_picture, created_at, is_active
    FROM users
"""


def _row_to_user(row: Dict[str, Any]) -> User:
    return User(
        id=str(row["id"]),
        id_number=str(row["id_number"]),
        email=row["email"],
        full_name=row["full_name"],
        password_hash=row["password_hash"],
        role=Role(row["role"]),
        profile_picture=row.get("profile_picture"),
        created_at=row.get("created_at"),
        is_active=bool(row.get("is_active", True)),
    )


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_identifier(self, identifier: str) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _SELECT_USER + " WHERE LOWER(email)=%s OR id_number=%s LIMIT 1",
                (identifier.lower(), identifier),
            )
            row = fetchone(cur)
            return _row_to_user(row) if row else None

    def count_by_email(self, email: str) -> int:
        with db_cursor(self._conn_factory, dictionary=False) as (_, cur):
            cur.execute("SELECT COUNT(*) FROM users WHERE LOWER(email)=%s", (email.lower(),))
            row = cur.fetchone()
            return int(row[0]) if row else 0
