"""Apply the bundled schema/seed SQL files to a MySQL server."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterator

from .connection import DatabaseConnection, DBConfig

logger = logging.getLogger(__name__)

_DB_SWITCH_RE = re.compile(r"(?im)^\s*(?:CREATE\s+DATABASE|USE)\b[^;]*;\s*$")
_QUOTES = ("'", '"', "`")


def load_script(path: str | Path) -> str:
    """Read a .sql file without its CREATE DATABASE / USE lines; the target DB comes from config."""
    return _DB_SWITCH_RE.sub("", Path(path).read_text(encoding="utf-8"))


def iter_sql_statements(sql: str) -> Iterator[str]:
    """Split on ';' outside quoted strings; `--` line comments are dropped."""
    statement: list[str] = []
    quote = None
    i = 0
    while i < len(sql):
        ch = sql[i]
        if quote:
            statement.append(ch)
            if ch == "\\" and i + 1 < len(sql):
                statement.append(sql[i + 1])
                i += 1
            elif ch == quote:
                quote = None
        elif sql.startswith("--", i):
            end = sql.find("\n", i)
            i = len(sql) if end == -1 else end
            continue
        elif ch in _QUOTES:
            quote = ch
            statement.append(ch)
        elif ch == ";":
            text = "".join(statement).strip()
            if text:
                yield text
            statement = []
        else:
            statement.append(ch)
        i += 1

    text = "".join(statement).strip()
    if text:
        yield text


def _execute_script(config: DBConfig, sql: str) -> int:
    conn = DatabaseConnection(config).connect()
    try:
        cur = conn.cursor()
        count = 0
        for stmt in iter_sql_statements(sql):
            cur.execute(stmt)
            count += 1
        conn.commit()
        return count
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def ensure_database_exists(db_config: dict) -> None:
    config = DBConfig.from_dict(db_config)
    conn = DatabaseConnection(config).connect(with_database=False)
    try:
        conn.cursor().execute(
            f"CREATE DATABASE IF NOT EXISTS `{config.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: dict, *, schema_path: str | Path) -> None:
    ensure_database_exists(db_config)
    count = _execute_script(DBConfig.from_dict(db_config), load_script(schema_path))
    logger.info("schema %s applied (%d statements)", Path(schema_path).name, count)


def apply_seed_sql(db_config: dict, *, seed_path: str | Path) -> None:
    count = _execute_script(DBConfig.from_dict(db_config), load_script(seed_path))
    logger.info("seed %s applied (%d statements)", Path(seed_path).name, count)


def list_tables(db_config: dict) -> list[str]:
    conn = DatabaseConnection(DBConfig.from_dict(db_config)).connect()
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return sorted(str(row[0]) for row in cur.fetchall())
    finally:
        conn.close()
