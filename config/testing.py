import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_db_test"),
}

DEBUG = False
TESTING = True
LOG_LEVEL = "DEBUG"

RECENT_ACTIVITY_LIMIT = 20
ORPHAN_POLICY = "drop"
DATE_DISPLAY_FORMAT = "%d/%m/%Y"
