import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_db"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Supervisor profile activity feed size
RECENT_ACTIVITY_LIMIT = int(os.getenv("RECENT_ACTIVITY_LIMIT", "20"))
# "drop" or "reportDefaultUnknown" for attendance rows without a known employee
ORPHAN_POLICY = os.getenv("ORPHAN_POLICY", "drop")
DATE_DISPLAY_FORMAT = os.getenv("DATE_DISPLAY_FORMAT", "%d/%m/%Y")
