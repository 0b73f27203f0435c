"""Boundary mappers between external user shapes and ``UserRecord``.

Every inbound source has exactly one mapper, so the rest of the package only
ever sees ``UserRecord``. The wire and storage formats are camelCase; the
``users`` table is snake_case.
"""
from __future__ import annotations

from typing import Any, Mapping

from ..common.datetime_utils import format_timestamp, parse_timestamp
from ..core.enums import Role
from ..core.exceptions import ValidationError
from .model import User, UserRecord


def _require(data: Mapping[str, Any], key: str) -> Any:
    value = data.get(key)
    if value is None or value == "":
        raise ValidationError(f"User payload is missing '{key}'")
    return value


def _role(value: Any) -> Role:
    try:
        return Role(str(value))
    except ValueError:
        raise ValidationError(f"Unknown role: {value!r}")


def user_from_api(payload: Mapping[str, Any]) -> UserRecord:
    """Map the ``/api/login`` response body."""
    return UserRecord(
        id=str(_require(payload, "id")),
        id_number=str(_require(payload, "idNumber")),
        email=str(_require(payload, "email")),
        full_name=str(_require(payload, "fullName")),
        role=_role(_require(payload, "role")),
        profile_picture=payload.get("profilePicture") or None,
        created_at=parse_timestamp(payload.get("createdAt")),
        password="",
    )


def user_from_row(row: Mapping[str, Any]) -> UserRecord:
    """Map a ``users`` table row (snake_case columns)."""
    return UserRecord(
        id=str(_require(row, "id")),
        id_number=str(_require(row, "id_number")),
        email=str(_require(row, "email")),
        full_name=str(_require(row, "full_name")),
        role=_role(_require(row, "role")),
        profile_picture=row.get("profile_picture") or None,
        created_at=parse_timestamp(row.get("created_at")),
        password="",
    )


def user_to_api(user: UserRecord | User) -> dict:
    """Serialize to the camelCase wire shape. Never includes a password."""
    return {
        "id": user.id,
        "idNumber": user.id_number,
        "email": user.email,
        "fullName": user.full_name,
        "role": user.role.value,
        "profilePicture": user.profile_picture,
        "createdAt": format_timestamp(user.created_at),
    }


def to_record(user: User) -> UserRecord:
    return UserRecord(
        id=user.id,
        id_number=user.id_number,
        email=user.email,
        full_name=user.full_name,
        role=user.role,
        profile_picture=user.profile_picture,
        created_at=user.created_at,
    )


# The storage entry uses the wire shape.
user_to_storage = user_to_api
user_from_storage = user_from_api
