import os

from config.config import (  # noqa: F401
    ATTENDANCE_TIMEZONE,
    PAYROLL_RATES,
    SUPER_ADMIN_PASSWORD,
    SUPER_ADMIN_USERNAME,
    db_config,
)

SECRET_KEY = "test-secret"

DB_CONFIG = db_config()

DEBUG = False
TESTING = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

AUTO_INIT_DB = False
AUTO_SEED_DB = False
