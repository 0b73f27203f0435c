import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_db"),
}

# Identity service (user table REST view + credential API)
IDENTITY_URL = os.getenv("IDENTITY_URL", "http://localhost:54321")
IDENTITY_API_KEY = os.getenv("IDENTITY_API_KEY", "")

# Where reset links send users when the request did not come from localhost
RESET_REDIRECT_URL = os.getenv("RESET_REDIRECT_URL", "http://localhost:5000/reset-password")

# Client side
API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:5000")
SESSION_STORAGE_PATH = os.getenv("SESSION_STORAGE_PATH", ".session/storage.json")
HTTP_TIMEOUT = float(os.getenv("HTTP_TIMEOUT", "10"))

# Transactional e-mail
RESEND_API_KEY = os.getenv("RESEND_API_KEY", "")
FROM_EMAIL = os.getenv("FROM_EMAIL", "onboarding@resend.dev")
FROM_NAME = os.getenv("FROM_NAME", "Attendance System")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
