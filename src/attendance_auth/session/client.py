from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

import requests

from ..core.constants import DEFAULT_HTTP_TIMEOUT, DEFAULT_LOGIN_ERROR
from ..core.exceptions import AuthenticationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoginRequest:
    identifier: str
    password: str

    def to_json(self) -> dict:
        return {"identifier": self.identifier, "password": self.password}


class AuthApiClient:
    """HTTP client for the application's ``/api/login`` and ``/api/logout``.

    A ``requests.Session`` keeps the server's session cookie between calls.
    """

    def __init__(self, base_url: str, *, http: Optional[requests.Session] = None, timeout: float = DEFAULT_HTTP_TIMEOUT):
        self._base_url = base_url.rstrip("/")
        self._http = http or requests.Session()
        self._timeout = timeout

    def login(self, credentials: LoginRequest) -> dict[str, Any]:
        response = self._http.post(
            f"{self._base_url}/api/login",
            json=credentials.to_json(),
            timeout=self._timeout,
        )
        if not response.ok:
            try:
                error_data = response.json()
            except ValueError:
                error_data = {}
            message = error_data.get("message") if isinstance(error_data, dict) else None
            raise AuthenticationError(message or DEFAULT_LOGIN_ERROR)
        return response.json()

    def logout(self) -> None:
        self._http.post(f"{self._base_url}/api/logout", timeout=self._timeout)
