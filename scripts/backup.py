"""Dump the configured database to backups/<db>_<timestamp>.sql.

Settlements delete salary rows and rewrite credit, so take a dump before
running bulk corrections by hand. Needs the `mysqldump` client on PATH.
"""

from __future__ import annotations

import importlib
import os
import shutil
import subprocess
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.dairy_payroll.dairy_payroll.database.connection import DBConfig


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    db = DBConfig.from_dict(settings.DB_CONFIG)

    mysqldump = shutil.which("mysqldump")
    if not mysqldump:
        raise SystemExit("mysqldump not found on PATH")

    target = REPO_ROOT / "backups" / f"{db.database}_{datetime.now():%Y%m%d_%H%M%S}.sql"
    target.parent.mkdir(parents=True, exist_ok=True)

    # password through the environment keeps it out of the process list
    env = dict(os.environ, MYSQL_PWD=db.password)
    with target.open("wb") as out:
        subprocess.run(
            [mysqldump, "-h", db.host, "-P", str(db.port), "-u", db.user, "--single-transaction", db.database],
            stdout=out,
            env=env,
            check=True,
        )
    print(f"backup written to {target}")


if __name__ == "__main__":
    main()
