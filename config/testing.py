SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True

STORE_BACKEND = "sheet"
SHEET_API_URL = "http://sheet.invalid/exec"
HTTP_TIMEOUT_SECONDS = 1.0

DB_CONFIG = {
    "host": "localhost",
    "port": 3306,
    "user": "root",
    "password": "",
    "database": "staff_movement_test",
}

AUTO_INIT_DB = False
ENABLE_SCHEDULER = False
REFRESH_INTERVAL_SECONDS = 60
SYNC_MAX_WORKERS = 1
SYNC_MAX_PENDING = 8

LOG_LEVEL = "WARNING"
