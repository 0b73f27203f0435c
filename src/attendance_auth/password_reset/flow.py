"""Forgot-password form logic.

The outcome a user sees must not reveal whether an address is registered:
registered, unregistered, and failed lookups all end on the same
confirmation. The only distinct outcome is the identity service's rate limit.
"""
from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from typing import Optional, Protocol

from ..common.validators import require_email
from ..core.constants import LOGIN_PATH, PROFILE_PATH
from ..core.enums import FlowState
from ..core.exceptions import IdentityServiceError, RateLimitError
from .redirect import resolve_redirect_url

logger = logging.getLogger(__name__)

CONFIRMATION_TITLE = "Request Received"
CONFIRMATION_MESSAGE = "If an account with that email exists, a reset link will be sent shortly."
RATE_LIMIT_TITLE = "Too Many Requests"
RATE_LIMIT_MESSAGE = "Please wait a few minutes before requesting another reset email."


class UserDirectory(Protocol):
    """Count-only view of the application's user table."""

    def count_by_email(self, email: str) -> int:
        raise NotImplementedError


class IdentityProvider(Protocol):
    def sign_up(self, email: str, password: str):
        raise NotImplementedError

    def reset_password_for_email(self, email: str, *, redirect_to: Optional[str] = None) -> None:
        raise NotImplementedError


@dataclass(frozen=True)
class ResetOutcome:
    title: str
    message: str
    is_error: bool = False


CONFIRMATION = ResetOutcome(title=CONFIRMATION_TITLE, message=CONFIRMATION_MESSAGE)
RATE_LIMITED = ResetOutcome(title=RATE_LIMIT_TITLE, message=RATE_LIMIT_MESSAGE, is_error=True)


def temporary_password() -> str:
    return str(uuid.uuid4())


class ForgotPasswordFlow:
    """Two-state form: ``FORM`` until a request is accepted, then ``SUBMITTED``."""

    def __init__(
        self,
        users: UserDirectory,
        identity: IdentityProvider,
        *,
        origin: str,
        deployed_redirect_url: str,
        from_profile: bool = False,
    ):
        self._users = users
        self._identity = identity
        self._origin = origin
        self._deployed_redirect_url = deployed_redirect_url
        self.from_profile = from_profile
        self.state = FlowState.FORM
        self.submitted_email = ""
        self.is_submitting = False

    @property
    def back_path(self) -> str:
        return PROFILE_PATH if self.from_profile else LOGIN_PATH

    @property
    def redirect_url(self) -> str:
        return resolve_redirect_url(self._origin, self._deployed_redirect_url)

    def submit(self, email: str) -> ResetOutcome:
        """Raises ``ValidationError`` for a malformed address; otherwise returns the outcome to show."""
        email = require_email(email)

        self.is_submitting = True
        try:
            try:
                self._request_reset(email.lower())
            except RateLimitError:
                return RATE_LIMITED
            except Exception:
                # Same message on every failure, so errors can't be told apart from success.
                logger.exception("Password reset request failed")

            self.submitted_email = email
            self.state = FlowState.SUBMITTED
            return CONFIRMATION
        finally:
            self.is_submitting = False

    def reset(self) -> None:
        self.state = FlowState.FORM
        self.submitted_email = ""

    def _user_exists(self, email: str) -> bool:
        try:
            return self._users.count_by_email(email) > 0
        except Exception as e:
            logger.warning("Existence check failed: %s", e)
            return False

    def _request_reset(self, email: str) -> None:
        if not self._user_exists(email):
            return

        # The reset endpoint only works for addresses the identity service
        # already knows; sign-up is a no-op for existing accounts.
        try:
            self._identity.sign_up(email, temporary_password())
        except IdentityServiceError as e:
            logger.info("Identity sign-up skipped: %s", e)

        self._identity.reset_password_for_email(email, redirect_to=self.redirect_url)
