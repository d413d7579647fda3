from __future__ import annotations

import sys
from pathlib import Path

import importlib

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.staff_movement.staff_movement.database.bootstrap import apply_schema, ensure_admin_account


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    schema_path = REPO_ROOT / "database" / "schema.sql"
    apply_schema(db_config, schema_path=schema_path)

    admin_user = getattr(settings, "ADMIN_USERNAME", "")
    admin_pass = getattr(settings, "ADMIN_PASSWORD", "")
    created = bool(admin_user and admin_pass) and ensure_admin_account(db_config, username=admin_user, password=admin_pass)

    print(
        "OK: Applied schema.sql -> "
        f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}"
        f" (admin {'created' if created else 'unchanged'})"
    )


if __name__ == "__main__":
    main()
