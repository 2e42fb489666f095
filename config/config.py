import json
import os


def env_flag(name: str, default: str = "0") -> bool:
    return bool(int(os.environ.get(name, default)))


def env_json(name: str) -> dict:
    raw = os.environ.get(name, "").strip()
    return json.loads(raw) if raw else {}


def db_config(default_password: str = "") -> dict:
    return {
        "host": os.environ.get("DB_HOST", "localhost"),
        "port": int(os.environ.get("DB_PORT", "3306")),
        "user": os.environ.get("DB_USER", "root"),
        "password": os.environ.get("DB_PASSWORD", default_password),
        "database": os.environ.get("DB_NAME", "planilla_db"),
    }


ATTENDANCE_TIMEZONE = os.environ.get("ATTENDANCE_TIMEZONE", "America/Tegucigalpa")

# e.g. PAYROLL_RATES='{"saturday_bonus_factor": "0.181818"}'
PAYROLL_RATES = env_json("PAYROLL_RATES")

SUPER_ADMIN_USERNAME = os.environ.get("SUPER_ADMIN_USERNAME", "superadmin")
SUPER_ADMIN_PASSWORD = os.environ.get("SUPER_ADMIN_PASSWORD", "")
