from __future__ import annotations

import logging
from typing import Optional, Sequence

import requests

from ..core.constants import DEFAULT_HTTP_TIMEOUT
from ..core.exceptions import EmailDeliveryError

logger = logging.getLogger(__name__)

RESEND_API_URL = "https://api.resend.com/emails"


class ResendClient:
    """Minimal client for the Resend transactional e-mail API."""

    def __init__(
        self,
        api_key: str,
        *,
        http: Optional[requests.Session] = None,
        api_url: str = RESEND_API_URL,
        timeout: float = DEFAULT_HTTP_TIMEOUT,
    ):
        self._api_key = api_key
        self._http = http or requests.Session()
        self._api_url = api_url
        self._timeout = timeout

    def send(self, *, sender: str, to: Sequence[str], subject: str, html: str, text: str) -> str:
        """Send one message and return the provider's message id."""
        response = self._http.post(
            self._api_url,
            json={"from": sender, "to": list(to), "subject": subject, "html": html, "text": text},
            headers={"Authorization": f"Bearer {self._api_key}"},
            timeout=self._timeout,
        )
        try:
            body = response.json()
        except ValueError:
            body = {}

        if not response.ok:
            message = body.get("message") if isinstance(body, dict) else None
            raise EmailDeliveryError(message or f"Email provider returned HTTP {response.status_code}")
        return str(body.get("id", ""))
