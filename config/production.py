import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "printpress_db"),
}

DEBUG = False

STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "mysql")
LOCAL_DATA_PATH = os.getenv("LOCAL_DATA_PATH", "instance/printpress-data.json")

PAYROLL_ADVANCE_CUTOFF = os.getenv("PAYROLL_ADVANCE_CUTOFF", "componentwise")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
