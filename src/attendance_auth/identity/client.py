"""Client for the external identity-and-token service.

The service exposes two surfaces under one base URL: a REST view of the
application's ``users`` table (``/rest/v1``) and the credential API
(``/auth/v1``). Both authenticate with the same project API key.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Sequence

import requests

from ..core.constants import DEFAULT_HTTP_TIMEOUT, PROFILE_COLUMNS
from ..core.exceptions import IdentityServiceError, RateLimitError

logger = logging.getLogger(__name__)

USERS_TABLE = "users"


def is_rate_limit_message(message: str) -> bool:
    message = (message or "").lower()
    return "rate" in message or "limit" in message


class IdentityClient:
    def __init__(
        self,
        base_url: str,
        api_key: str,
        *,
        http: Optional[requests.Session] = None,
        timeout: float = DEFAULT_HTTP_TIMEOUT,
    ):
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._http = http or requests.Session()
        self._timeout = timeout

    def _headers(self, **extra: str) -> Dict[str, str]:
        headers = {
            "apikey": self._api_key,
            "Authorization": f"Bearer {self._api_key}",
        }
        headers.update(extra)
        return headers

    def _request(self, method: str, path: str, **kwargs) -> requests.Response:
        try:
            response = self._http.request(
                method,
                f"{self._base_url}{path}",
                timeout=self._timeout,
                **kwargs,
            )
        except requests.RequestException as e:
            raise IdentityServiceError(f"Identity service unreachable: {e}") from e

        if not response.ok:
            message = self._error_message(response)
            if response.status_code == 429 or is_rate_limit_message(message):
                raise RateLimitError(message, status_code=response.status_code)
            raise IdentityServiceError(message, status_code=response.status_code)
        return response

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            for key in ("msg", "message", "error_description", "error"):
                if body.get(key):
                    return str(body[key])
        return f"Identity service returned HTTP {response.status_code}"

    def fetch_user(self, user_id: str, columns: Sequence[str] = PROFILE_COLUMNS) -> Optional[Dict[str, Any]]:
        response = self._request(
            "GET",
            f"/rest/v1/{USERS_TABLE}",
            params={"select": ",".join(columns), "id": f"eq.{user_id}", "limit": "1"},
            headers=self._headers(Accept="application/json"),
        )
        rows = response.json()
        return rows[0] if rows else None

    def sign_up(self, email: str, password: str) -> Dict[str, Any]:
        response = self._request(
            "POST",
            "/auth/v1/signup",
            json={"email": email, "password": password},
            headers=self._headers(),
        )
        return response.json()

    def reset_password_for_email(self, email: str, *, redirect_to: Optional[str] = None) -> None:
        params = {"redirect_to": redirect_to} if redirect_to else None
        self._request(
            "POST",
            "/auth/v1/recover",
            params=params,
            json={"email": email},
            headers=self._headers(),
        )
