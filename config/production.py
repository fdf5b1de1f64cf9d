import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "student_attendance"),
}

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))

FEED_UNLOCK_LIMIT = int(os.getenv("FEED_UNLOCK_LIMIT", "3"))
FEED_ATTENDANCE_LIMIT = int(os.getenv("FEED_ATTENDANCE_LIMIT", "5"))
FEED_MAX_ITEMS = int(os.getenv("FEED_MAX_ITEMS", "5"))
