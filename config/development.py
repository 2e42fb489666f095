import os

from config.config import (  # noqa: F401
    ATTENDANCE_TIMEZONE,
    PAYROLL_RATES,
    SUPER_ADMIN_PASSWORD,
    SUPER_ADMIN_USERNAME,
    db_config,
    env_flag,
)

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = db_config()

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "1")
# Optional: also create the super admin account on startup
AUTO_SEED_DB = env_flag("AUTO_SEED_DB", "0")
