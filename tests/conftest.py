from __future__ import annotations

from datetime import datetime

import pytest

from attendance_auth.core.enums import Role
from attendance_auth.users.model import UserRecord


@pytest.fixture
def sample_user() -> UserRecord:
    return UserRecord(
        id="u-1",
        id_number="2024-0001",
        email="ana@school.test",
        full_name="Ana Reyes",
        role=Role.STUDENT,
        profile_picture=None,
        created_at=datetime(2026, 1, 5, 8, 0, 0),
    )


@pytest.fixture
def login_payload() -> dict:
    return {
        "id": "u-1",
        "idNumber": "2024-0001",
        "email": "ana@school.test",
        "fullName": "Ana Reyes",
        "role": "student",
        "profilePicture": None,
        "createdAt": "2026-01-05T08:00:00Z",
    }
