import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "printpress_test"),
}

DEBUG = False
TESTING = True

# In-memory local store unless a path is given.
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "local")
LOCAL_DATA_PATH = os.getenv("LOCAL_DATA_PATH", "")

PAYROLL_ADVANCE_CUTOFF = os.getenv("PAYROLL_ADVANCE_CUTOFF", "componentwise")

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
