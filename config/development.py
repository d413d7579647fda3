import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")
DEBUG = True

# "sheet" (spreadsheet web-app API) or "mysql"
STORE_BACKEND = os.getenv("STORE_BACKEND", "sheet")
SHEET_API_URL = os.getenv("SHEET_API_URL", "")
HTTP_TIMEOUT_SECONDS = float(os.getenv("HTTP_TIMEOUT_SECONDS", "15"))

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "staff_movement"),
}

# If enabled (mysql backend), apply database/schema.sql on startup (idempotent)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
ADMIN_USERNAME = os.getenv("ADMIN_USERNAME", "admin")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "admin123")

ENABLE_SCHEDULER = bool(int(os.getenv("ENABLE_SCHEDULER", "1")))
REFRESH_INTERVAL_SECONDS = int(os.getenv("REFRESH_INTERVAL_SECONDS", "60"))
SYNC_MAX_WORKERS = int(os.getenv("SYNC_MAX_WORKERS", "4"))
SYNC_MAX_PENDING = int(os.getenv("SYNC_MAX_PENDING", "64"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
LOG_FORMAT = os.getenv("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")
