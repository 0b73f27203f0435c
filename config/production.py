import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_db"),
}

IDENTITY_URL = os.getenv("IDENTITY_URL", "")
IDENTITY_API_KEY = os.getenv("IDENTITY_API_KEY", "")
RESET_REDIRECT_URL = os.getenv("RESET_REDIRECT_URL", "https://attendance.example.com/reset-password")

API_BASE_URL = os.getenv("API_BASE_URL", "")
SESSION_STORAGE_PATH = os.getenv("SESSION_STORAGE_PATH", os.path.expanduser("~/.attendance/storage.json"))
HTTP_TIMEOUT = float(os.getenv("HTTP_TIMEOUT", "10"))

RESEND_API_KEY = os.getenv("RESEND_API_KEY", "")
FROM_EMAIL = os.getenv("FROM_EMAIL", "onboarding@resend.dev")
FROM_NAME = os.getenv("FROM_NAME", "Attendance System")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
