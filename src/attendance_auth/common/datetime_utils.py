from __future__ import annotations

from datetime import datetime
from typing import Any, Optional


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse timestamps coming from JSON payloads or DB rows.

    Accepts datetime objects as-is and ISO-8601 strings, including the
    trailing ``Z`` that JavaScript's ``toISOString`` produces.
    """

    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        return datetime.fromisoformat(text)
    raise TypeError(f"Unsupported timestamp value type: {type(value)!r}")


def format_timestamp(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None
