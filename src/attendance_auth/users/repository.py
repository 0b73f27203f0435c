from __future__ import annotations

from typing import Optional, Protocol

from .model import User


class UserRepository(Protocol):
    """Repository interface for User.

    Note: the service layer depends on this interface, not on a concrete DB.
    """

    def get_by_identifier(self, identifier: str) -> Optional[User]:
        """Look a user up by e-mail (case-insensitive) or ID number."""
        raise NotImplementedError

    def count_by_email(self, email: str) -> int:
        raise NotImplementedError
