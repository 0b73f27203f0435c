from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role used for authorization and landing pages."""

    ADMIN = "admin"
    TEACHER = "teacher"
    STUDENT = "student"


class FlowState(str, Enum):
    """States of the forgot-password form."""

    FORM = "form"
    SUBMITTED = "submitted"
