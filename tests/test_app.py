from __future__ import annotations

import config
from attendance_auth.container import build_container, build_session_manager
from attendance_auth.main import create_app
from attendance_auth.session.storage import MemoryStorage, store_user


def test_settings_module_follows_app_env(monkeypatch):
    monkeypatch.setenv("APP_ENV", "prod")
    assert config.get_settings_module() == "config.production"

    monkeypatch.setenv("APP_ENV", "testing")
    assert config.get_settings_module() == "config.testing"

    monkeypatch.delenv("APP_ENV")
    assert config.get_settings_module() == "config.development"


def test_create_app_registers_auth_routes():
    app = create_app("config.testing")

    rules = {rule.rule for rule in app.url_map.iter_rules()}

    assert {"/api/login", "/api/logout", "/api/forgot-password"} <= rules
    assert app.config["TESTING"] is True


def test_container_without_mail_key_reports_configuration_error():
    from config import testing

    container = build_container(testing)

    result = container.send_password_reset_email(
        to="ana@school.test", user_name="Ana", reset_url="https://attendance.test/reset-password"
    )

    assert result.success is False
    assert result.error == "Email service not configured"


def test_build_session_manager_restores_cached_user(sample_user):
    from config import testing

    storage = MemoryStorage()
    store_user(storage, sample_user)

    manager = build_session_manager(testing, storage=storage)

    assert manager.user == sample_user
