from __future__ import annotations

import pytest
import requests
from helpers import FakeHttp, FakeResponse

from attendance_auth.core.exceptions import AuthenticationError, IdentityServiceError
from attendance_auth.session.client import AuthApiClient
from attendance_auth.session.context import AUTH_USER_QUERY, SessionContext
from attendance_auth.session.manager import SessionManager
from attendance_auth.session.navigation import HistoryNavigator
from attendance_auth.session.storage import MemoryStorage, load_stored_user, store_user


class FakeProfiles:
    def __init__(self, row=None, error: Exception | None = None):
        self.row = row
        self.error = error
        self.requested: list[str] = []

    def fetch_user(self, user_id: str):
        self.requested.append(user_id)
        if self.error:
            raise self.error
        return self.row


def server(login_response: FakeResponse, logout_error: Exception | None = None) -> FakeHttp:
    def handler(method, url, kwargs):
        if url.endswith("/api/login"):
            return login_response
        if url.endswith("/api/logout"):
            if logout_error:
                raise logout_error
            return FakeResponse(200, {"success": True})
        raise AssertionError(f"unexpected call {method} {url}")

    return FakeHttp(handler)


def make_manager(http: FakeHttp, *, storage=None, profiles=None):
    storage = storage or MemoryStorage()
    navigator = HistoryNavigator(start="/login")
    manager = SessionManager(
        SessionContext.restore(storage),
        AuthApiClient("http://api.test", http=http),
        profiles or FakeProfiles(),
        navigator,
    )
    return manager, storage, navigator


def test_restore_reads_cached_user(sample_user):
    storage = MemoryStorage()
    store_user(storage, sample_user)

    manager, _, _ = make_manager(server(FakeResponse(500)), storage=storage)

    assert manager.user == sample_user
    assert manager.is_loading is False


def test_login_caches_user_and_navigates(login_payload):
    login_payload["password"] = "leaked"
    http = server(FakeResponse(200, login_payload))
    manager, storage, navigator = make_manager(http)

    user = manager.login("ana@school.test", "right")

    assert user.password == ""
    assert manager.user == user
    assert load_stored_user(storage) == user
    assert manager.context.cached(AUTH_USER_QUERY) == user
    assert navigator.location == "/dashboard"
    assert http.calls[0][2]["json"] == {"identifier": "ana@school.test", "password": "right"}
    assert manager.is_logging_in is False


def test_wrong_password_leaves_prior_cached_user(sample_user):
    storage = MemoryStorage()
    store_user(storage, sample_user)
    http = server(FakeResponse(401, {"message": "Wrong password"}))
    manager, _, navigator = make_manager(http, storage=storage)

    with pytest.raises(AuthenticationError, match="Wrong password"):
        manager.login("ana@school.test", "wrong")

    assert manager.user == sample_user
    assert load_stored_user(storage) == sample_user
    assert navigator.history == ["/login"]


def test_wrong_password_without_message_uses_generic_error():
    manager, storage, _ = make_manager(server(FakeResponse(401, None)))

    with pytest.raises(AuthenticationError, match="Invalid email/ID number or password"):
        manager.login("ana@school.test", "wrong")

    assert manager.user is None
    assert load_stored_user(storage) is None


def test_logout_clears_cache_even_if_server_unreachable(sample_user):
    storage = MemoryStorage()
    store_user(storage, sample_user)
    http = server(FakeResponse(200), logout_error=requests.ConnectionError("down"))
    manager, _, navigator = make_manager(http, storage=storage)
    manager.context.cache_query(("attendance", "today"), [1, 2, 3])

    manager.logout()

    assert manager.user is None
    assert load_stored_user(storage) is None
    assert manager.context.queries == {}
    assert navigator.location == "/login"
    assert http.urls() == ["http://api.test/api/logout"]


def test_refresh_overwrites_cache_with_canonical_row(sample_user):
    storage = MemoryStorage()
    store_user(storage, sample_user)
    profiles = FakeProfiles(
        row={
            "id": "u-1",
            "id_number": "2024-0001",
            "email": "ana@school.test",
            "full_name": "Ana Maria Reyes",
            "role": "student",
            "profile_picture": "https://cdn.test/ana.png",
            "created_at": "2026-01-05T08:00:00",
            "password": "hash-from-db",
        }
    )
    manager, _, _ = make_manager(server(FakeResponse(500)), storage=storage, profiles=profiles)

    user = manager.refresh()

    assert profiles.requested == ["u-1"]
    assert user.full_name == "Ana Maria Reyes"
    assert user.password == ""
    assert manager.user == user
    assert load_stored_user(storage) == user


def test_refresh_without_cached_user_does_nothing():
    profiles = FakeProfiles(row={})
    manager, _, _ = make_manager(server(FakeResponse(500)), profiles=profiles)

    assert manager.refresh() is None
    assert profiles.requested == []


def test_refresh_failure_keeps_cached_user(sample_user):
    storage = MemoryStorage()
    store_user(storage, sample_user)
    profiles = FakeProfiles(error=IdentityServiceError("timeout"))
    manager, _, _ = make_manager(server(FakeResponse(500)), storage=storage, profiles=profiles)

    assert manager.refresh() is None
    assert manager.user == sample_user


def test_logout_survives_non_http_transport_errors(sample_user):
    storage = MemoryStorage()
    store_user(storage, sample_user)
    http = server(FakeResponse(200), logout_error=OSError("socket closed"))
    manager, _, navigator = make_manager(http, storage=storage)
    manager.context.cache_query(("attendance", "today"), [1])

    manager.logout()

    assert manager.user is None
    assert load_stored_user(storage) is None
    assert manager.context.queries == {}
    assert navigator.location == "/login"
    assert manager.is_logging_out is False
