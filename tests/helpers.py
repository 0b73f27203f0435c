"""In-memory fakes shared by the test modules."""
from __future__ import annotations

from typing import Any, Callable, Optional

from werkzeug.security import generate_password_hash

from attendance_auth.core.enums import Role
from attendance_auth.users.model import User


class FakeResponse:
    def __init__(self, status_code: int = 200, body: Any = None, headers: Optional[dict] = None):
        self.status_code = status_code
        self._body = body
        self.headers = headers or {}

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400

    def json(self):
        if self._body is None:
            raise ValueError("No JSON body")
        return self._body


class FakeHttp:
    """Stands in for ``requests.Session``; ``handler(method, url, kwargs)`` decides the reply."""

    def __init__(self, handler: Callable[[str, str, dict], FakeResponse]):
        self._handler = handler
        self.calls: list[tuple[str, str, dict]] = []

    def request(self, method: str, url: str, **kwargs) -> FakeResponse:
        self.calls.append((method, url, kwargs))
        return self._handler(method, url, kwargs)

    def post(self, url: str, **kwargs) -> FakeResponse:
        return self.request("POST", url, **kwargs)

    def urls(self) -> list[str]:
        return [url for _, url, _ in self.calls]


class InMemoryUsers:
    def __init__(self, *users: User):
        self._users = list(users)

    def get_by_identifier(self, identifier: str) -> Optional[User]:
        for u in self._users:
            if u.email.lower() == identifier.lower() or u.id_number == identifier:
                return u
        return None

    def count_by_email(self, email: str) -> int:
        return sum(1 for u in self._users if u.email.lower() == email.lower())


def make_user(**overrides) -> User:
    data = dict(
        id="u-1",
        id_number="2024-0001",
        email="ana@school.test",
        full_name="Ana Reyes",
        password_hash=generate_password_hash("right"),
        role=Role.STUDENT,
    )
    data.update(overrides)
    return User(**data)
