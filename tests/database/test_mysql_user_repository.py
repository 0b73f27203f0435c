from __future__ import annotations

from datetime import datetime

from attendance_auth.core.enums import Role
from attendance_auth.database.bootstrap import iter_sql_statements
from attendance_auth.users.mysql_user_repository import MySQLUserRepository


class FakeCursor:
    def __init__(self, row):
        self._row = row
        self.executed: list[tuple[str, tuple]] = []

    def execute(self, sql, params=()):
        self.executed.append((" ".join(sql.split()), params))

    def fetchone(self):
        return self._row

    def close(self):
        pass


class FakeConnection:
    def __init__(self, row):
        self.cursor_obj = FakeCursor(row)
        self.committed = False

    def cursor(self, dictionary=True):
        return self.cursor_obj

    def commit(self):
        self.committed = True

    def rollback(self):
        pass

    def close(self):
        pass


class FakeConnectionFactory:
    def __init__(self, row):
        self.conn = FakeConnection(row)

    def connect(self):
        return self.conn


def test_count_by_email_is_count_only_and_lowercased():
    factory = FakeConnectionFactory((2,))

    assert MySQLUserRepository(factory).count_by_email("Ana@School.test") == 2

    sql, params = factory.conn.cursor_obj.executed[0]
    assert sql.startswith("SELECT COUNT(*) FROM users")
    assert params == ("ana@school.test",)


def test_get_by_identifier_maps_row():
    row = {
        "id": "u-1",
        "id_number": "2024-0001",
        "email": "ana@school.test",
        "full_name": "Ana Reyes",
        "password_hash": "hash",
        "role": "teacher",
        "profile_picture": None,
        "created_at": datetime(2026, 1, 5),
        "is_active": 1,
    }
    factory = FakeConnectionFactory(row)

    user = MySQLUserRepository(factory).get_by_identifier("2024-0001")

    assert user.role == Role.TEACHER
    assert user.is_active is True
    assert factory.conn.cursor_obj.executed[0][1] == ("2024-0001", "2024-0001")


def test_get_by_identifier_missing_returns_none():
    assert MySQLUserRepository(FakeConnectionFactory(None)).get_by_identifier("nope@school.test") is None


def test_sql_splitter_ignores_semicolons_in_quotes():
    sql = "INSERT INTO t VALUES ('a;b'); SELECT 1;"

    assert list(iter_sql_statements(sql)) == ["INSERT INTO t VALUES ('a;b')", "SELECT 1"]
