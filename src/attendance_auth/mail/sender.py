from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Callable, Optional

from ..core.exceptions import EmailDeliveryError, ValidationError
from .resend import ResendClient
from .templates import render_reset_html, render_reset_text

logger = logging.getLogger(__name__)

DEFAULT_FROM_EMAIL = "onboarding@resend.dev"
DEFAULT_FROM_NAME = "Attendance System"
DEFAULT_SYSTEM_NAME = "Attendance Monitoring System"
DEFAULT_SCHOOL_NAME = "Your School"


@dataclass(frozen=True)
class MailSettings:
    api_key: Optional[str]
    from_email: str = DEFAULT_FROM_EMAIL
    from_name: str = DEFAULT_FROM_NAME

    @classmethod
    def from_env(cls) -> "MailSettings":
        return cls(
            api_key=os.getenv("RESEND_API_KEY") or None,
            from_email=os.getenv("FROM_EMAIL") or DEFAULT_FROM_EMAIL,
            from_name=os.getenv("FROM_NAME") or DEFAULT_FROM_NAME,
        )

    @property
    def sender(self) -> str:
        return f"{self.from_name} <{self.from_email}>"


@dataclass(frozen=True)
class SendResult:
    success: bool
    error: Optional[str] = None
    message_id: Optional[str] = None


def send_password_reset_email(
    *,
    to: str,
    user_name: str,
    reset_url: str,
    system_name: str = DEFAULT_SYSTEM_NAME,
    school_name: str = DEFAULT_SCHOOL_NAME,
    settings: Optional[MailSettings] = None,
    client_factory: Callable[[str], ResendClient] = ResendClient,
) -> SendResult:
    """Render and send the password reset e-mail.

    Never raises: configuration problems and delivery failures come back as
    ``SendResult(success=False, error=...)``.
    """
    settings = settings or MailSettings.from_env()
    if not settings.api_key:
        logger.error("RESEND_API_KEY is not set")
        return SendResult(success=False, error="Email service not configured")

    try:
        first_name = user_name.split(" ")[0]
        html = render_reset_html(
            first_name=first_name,
            reset_url=reset_url,
            system_name=system_name,
            school_name=school_name,
        )
        text = render_reset_text(first_name=first_name, reset_url=reset_url, system_name=system_name)

        client = client_factory(settings.api_key)
        message_id = client.send(
            sender=settings.sender,
            to=[to],
            subject=f"Reset Your Password - {system_name}",
            html=html,
            text=text,
        )
    except ValidationError as e:
        logger.error("Refusing to render reset email: %s", e)
        return SendResult(success=False, error=str(e))
    except EmailDeliveryError as e:
        logger.error("Resend error: %s", e)
        return SendResult(success=False, error=str(e))
    except Exception:
        logger.exception("Failed to send password reset email")
        return SendResult(success=False, error="Failed to send email")

    logger.info("Password reset email sent successfully: %s", message_id)
    return SendResult(success=True, message_id=message_id)
