from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Protocol

from ..core.constants import LANDING_PATH, LOGIN_PATH
from ..core.exceptions import DomainError
from ..users.mapping import user_from_api, user_from_row
from ..users.model import UserRecord
from .client import AuthApiClient, LoginRequest
from .context import SessionContext
from .navigation import Navigator
from .storage import load_stored_user, store_user

logger = logging.getLogger(__name__)


class ProfileSource(Protocol):
    def fetch_user(self, user_id: str) -> Optional[Dict[str, Any]]:
        raise NotImplementedError


class SessionManager:
    """Client-side login state: login, logout and profile refresh.

    All state lives in the ``SessionContext`` passed in; the manager itself
    only coordinates the API client, the profile source and navigation.
    """

    def __init__(
        self,
        context: SessionContext,
        api: AuthApiClient,
        profiles: ProfileSource,
        navigator: Navigator,
    ):
        self._ctx = context
        self._api = api
        self._profiles = profiles
        self._navigator = navigator
        self.is_logging_in = False
        self.is_logging_out = False

    @property
    def context(self) -> SessionContext:
        return self._ctx

    @property
    def user(self) -> Optional[UserRecord]:
        return self._ctx.user

    @property
    def is_loading(self) -> bool:
        return self._ctx.is_loading

    def login(self, identifier: str, password: str) -> UserRecord:
        """Raises ``AuthenticationError`` when the server rejects the credentials."""
        self.is_logging_in = True
        try:
            payload = self._api.login(LoginRequest(identifier=identifier, password=password))
            user = user_from_api(payload)
        finally:
            self.is_logging_in = False

        store_user(self._ctx.storage, user)
        self._ctx.set_user(user)
        logger.info("Logged in as %s", user.full_name)
        self._navigator.navigate(LANDING_PATH)
        return user

    def logout(self) -> None:
        self.is_logging_out = True
        try:
            store_user(self._ctx.storage, None)
            self._ctx.set_user(None)

            try:
                self._api.logout()
            except Exception as e:
                logger.warning("Server logout failed (non-blocking): %s", e)
        finally:
            self._ctx.clear_queries()
            self.is_logging_out = False
        self._navigator.navigate(LOGIN_PATH)

    def refresh(self) -> Optional[UserRecord]:
        """Reload the cached user's profile from the user table.

        Picks up profile edits made elsewhere. Returns ``None`` when nobody is
        logged in or the profile could not be fetched.
        """
        stored = load_stored_user(self._ctx.storage)
        if not stored or not stored.id:
            return None

        try:
            row = self._profiles.fetch_user(stored.id)
            if not row:
                return None
            user = user_from_row(row)
        except (DomainError, ValueError) as e:
            logger.warning("Could not refresh user %s: %s", stored.id, e)
            return None

        store_user(self._ctx.storage, user)
        self._ctx.set_user(user)
        return user
