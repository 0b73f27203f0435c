import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_test"),
}

IDENTITY_URL = "http://identity.test"
IDENTITY_API_KEY = "test-key"
RESET_REDIRECT_URL = "https://attendance.test/reset-password"

API_BASE_URL = "http://api.test"
SESSION_STORAGE_PATH = os.getenv("SESSION_STORAGE_PATH", ".session/test-storage.json")
HTTP_TIMEOUT = 5.0

RESEND_API_KEY = ""
FROM_EMAIL = "onboarding@resend.dev"
FROM_NAME = "Attendance System"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = False
