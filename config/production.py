import os

from config.config import (  # noqa: F401
    ATTENDANCE_TIMEZONE,
    PAYROLL_RATES,
    SUPER_ADMIN_PASSWORD,
    SUPER_ADMIN_USERNAME,
    db_config,
    env_flag,
)

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = db_config()

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "0")
AUTO_SEED_DB = env_flag("AUTO_SEED_DB", "0")
