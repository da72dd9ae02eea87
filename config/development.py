import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "printpress_db"),
}

DEBUG = True

# mysql | local (JSON file under LOCAL_DATA_PATH)
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "local")
LOCAL_DATA_PATH = os.getenv("LOCAL_DATA_PATH", "instance/printpress-data.json")

# componentwise | chronological
PAYROLL_ADVANCE_CUTOFF = os.getenv("PAYROLL_ADVANCE_CUTOFF", "componentwise")

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed demo data on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
