from __future__ import annotations

import logging

from werkzeug.security import check_password_hash

from ..common.validators import require_non_empty
from ..core.constants import DEFAULT_LOGIN_ERROR
from ..core.exceptions import AuthenticationError
from .mapping import to_record
from .model import UserRecord
from .repository import UserRepository

logger = logging.getLogger(__name__)


class AuthService:
    """Use case: authenticate user (login)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def authenticate(self, identifier: str, password: str) -> UserRecord:
        identifier = require_non_empty(identifier, "Email or ID number")
        require_non_empty(password, "Password")

        user = self._users.get_by_identifier(identifier)
        if not user or not user.is_active:
            raise AuthenticationError(DEFAULT_LOGIN_ERROR)

        try:
            ok = check_password_hash(user.password_hash, password)
        except (ValueError, TypeError):
            # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
            ok = False

        if not ok:
            logger.info("Rejected login for user %s", user.id)
            raise AuthenticationError(DEFAULT_LOGIN_ERROR)

        return to_record(user)