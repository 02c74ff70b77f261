from __future__ import annotations

import logging
import re
from pathlib import Path

import mysql.connector

from .connection import DBConfig

logger = logging.getLogger(__name__)


def _statements(sql: str) -> list[str]:
    # schema.sql keeps ';' out of string literals, so a plain split is enough.
    sql = re.sub(r"(?m)^\s*--.*$", "", sql)
    return [stmt.strip() for stmt in sql.split(";") if stmt.strip()]


def ensure_database_exists(config: DBConfig) -> None:
    conn = mysql.connector.connect(host=config.host, port=config.port, user=config.user, password=config.password)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{config.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: dict, *, schema_path: str | Path) -> list[str]:
    """Create tables and seed system_config defaults; returns the table names."""
    config = DBConfig.from_dict(db_config)
    ensure_database_exists(config)

    conn = mysql.connector.connect(
        host=config.host,
        port=config.port,
        user=config.user,
        password=config.password,
        database=config.database,
    )
    try:
        cur = conn.cursor()
        for stmt in _statements(Path(schema_path).read_text(encoding="utf-8")):
            cur.execute(stmt)
        conn.commit()

        cur.execute("SHOW TABLES")
        tables = [row[0] for row in cur.fetchall()]
    finally:
        conn.close()

    logger.info("Schema applied to %s@%s/%s (tables=%d)", config.user, config.host, config.database, len(tables))
    return tables
