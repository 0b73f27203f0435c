from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .core.constants import DEFAULT_HTTP_TIMEOUT
from .database.connection import DBConfig, DatabaseConnection
from .identity.client import IdentityClient
from .mail.sender import DEFAULT_FROM_EMAIL, DEFAULT_FROM_NAME, MailSettings, SendResult, send_password_reset_email
from .password_reset.flow import ForgotPasswordFlow
from .session.client import AuthApiClient
from .session.context import SessionContext
from .session.manager import SessionManager
from .session.navigation import HistoryNavigator, Navigator
from .session.storage import JsonFileStorage, Storage
from .users.mysql_user_repository import MySQLUserRepository
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    users_repo: MySQLUserRepository
    auth_service: AuthService

    identity: IdentityClient
    mail_settings: MailSettings
    reset_redirect_url: str

    def forgot_password_flow(self, *, origin: str, from_profile: bool = False) -> ForgotPasswordFlow:
        return ForgotPasswordFlow(
            self.users_repo,
            self.identity,
            origin=origin,
            deployed_redirect_url=self.reset_redirect_url,
            from_profile=from_profile,
        )

    def send_password_reset_email(self, *, to: str, user_name: str, reset_url: str, **branding: str) -> SendResult:
        return send_password_reset_email(
            to=to,
            user_name=user_name,
            reset_url=reset_url,
            settings=self.mail_settings,
            **branding,
        )


def _timeout(settings: Any) -> float:
    return float(getattr(settings, "HTTP_TIMEOUT", DEFAULT_HTTP_TIMEOUT))


def build_identity_client(settings: Any) -> IdentityClient:
    return IdentityClient(
        str(getattr(settings, "IDENTITY_URL")),
        str(getattr(settings, "IDENTITY_API_KEY", "")),
        timeout=_timeout(settings),
    )


def build_mail_settings(settings: Any) -> MailSettings:
    return MailSettings(
        api_key=getattr(settings, "RESEND_API_KEY", None) or None,
        from_email=getattr(settings, "FROM_EMAIL", None) or DEFAULT_FROM_EMAIL,
        from_name=getattr(settings, "FROM_NAME", None) or DEFAULT_FROM_NAME,
    )


def build_container(settings: Any) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(getattr(settings, "DB_CONFIG")))

    users_repo = MySQLUserRepository(conn)
    auth_service = AuthService(users_repo)

    return Container(
        conn=conn,
        users_repo=users_repo,
        auth_service=auth_service,
        identity=build_identity_client(settings),
        mail_settings=build_mail_settings(settings),
        reset_redirect_url=str(getattr(settings, "RESET_REDIRECT_URL")),
    )


def build_session_manager(
    settings: Any,
    *,
    storage: Optional[Storage] = None,
    navigator: Optional[Navigator] = None,
) -> SessionManager:
    """Client-side wiring: restores the cached user and talks to the API server."""
    storage = storage or JsonFileStorage(getattr(settings, "SESSION_STORAGE_PATH"))
    return SessionManager(
        SessionContext.restore(storage),
        AuthApiClient(str(getattr(settings, "API_BASE_URL")), timeout=_timeout(settings)),
        build_identity_client(settings),
        navigator or HistoryNavigator(),
    )
