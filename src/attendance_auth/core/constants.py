"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

USER_STORAGE_KEY = "attendance_user"

LANDING_PATH = "/dashboard"
LOGIN_PATH = "/login"
PROFILE_PATH = "/profile"
RESET_PASSWORD_PATH = "/reset-password"

DEFAULT_LOGIN_ERROR = "Invalid email/ID number or password"
DEFAULT_HTTP_TIMEOUT = 10

LOCAL_HOSTNAMES = frozenset({"localhost", "127.0.0.1"})

# Columns the client is allowed to read back from the users table.
PROFILE_COLUMNS = ("id", "id_number", "email", "full_name", "role", "profile_picture", "created_at")
