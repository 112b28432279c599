"""Create the database and tables; `--seed` also loads the demo rows.

Usage: APP_ENV=development python scripts/init_db.py [--seed]
"""

from __future__ import annotations

import argparse
import importlib
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.dairy_payroll.dairy_payroll.database.bootstrap import apply_schema, apply_seed_sql, list_tables

SQL_DIR = REPO_ROOT / "database"


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--seed", action="store_true", help="insert demo employees and entries")
    args = parser.parse_args(argv)

    load_dotenv(override=False)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    apply_schema(db_config, schema_path=SQL_DIR / "schema.sql")
    if args.seed:
        apply_seed_sql(db_config, seed_path=SQL_DIR / "seed.sql")

    print(f"{db_config['database']}@{db_config['host']}: {', '.join(list_tables(db_config))}")


if __name__ == "__main__":
    main()
