import os
import tempfile

STORAGE_BACKEND = "file"
DATA_DIR = os.getenv("DATA_DIR", os.path.join(tempfile.gettempdir(), "attendance-ledger-test"))

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_ledger_test"),
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

MAX_RECORD_SIZE = 1024
EMPLOYEE_STRICT_CREATE = False

AUTO_INIT_DB = False
