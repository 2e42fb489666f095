from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.planilla_system.planilla_system.database.bootstrap import ensure_super_admin


def main() -> None:
    settings = importlib.import_module(get_settings_module())

    parser = argparse.ArgumentParser(description="Create or reset the super admin account.")
    parser.add_argument("--username", default=getattr(settings, "SUPER_ADMIN_USERNAME", "superadmin"))
    parser.add_argument("--password", default=getattr(settings, "SUPER_ADMIN_PASSWORD", ""))
    args = parser.parse_args()

    db_config = dict(settings.DB_CONFIG)
    ensure_super_admin(db_config, username=args.username, password=args.password)
    print(f"OK: super admin '{args.username}' -> {db_config.get('database')}")


if __name__ == "__main__":
    main()
