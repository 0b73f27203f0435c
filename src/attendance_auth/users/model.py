from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: a row of the ``users`` table, as seen by the server.

    Note: plain data object, no DB access code here.
    """

    id: str
    id_number: str
    email: str
    full_name: str
    password_hash: str
    role: Role
    profile_picture: Optional[str] = None
    created_at: Optional[datetime] = None
    is_active: bool = True


@dataclass(frozen=True)
class UserRecord:
    """Sanitized user profile shared with clients and kept in the session cache.

    ``password`` exists only so the record keeps the same shape as the wire
    schema; it is always the empty string.
    """

    id: str
    id_number: str
    email: str
    full_name: str
    role: Role
    profile_picture: Optional[str] = None
    created_at: Optional[datetime] = None
    password: str = ""