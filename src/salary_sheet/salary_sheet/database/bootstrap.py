from __future__ import annotations

from pathlib import Path
from typing import Iterable

from sqlalchemy import inspect, text

from .connection import DatabaseConnection
from .sql_base import db_transaction


def _iter_sql_statements(sql: str) -> Iterable[str]:
    # Minimal SQL splitter for schema files (handles ';' inside quotes).
    buf: list[str] = []
    in_single = False
    in_double = False

    for ch in sql:
        if ch == "'" and not in_double:
            in_single = not in_single
        elif ch == '"' and not in_single:
            in_double = not in_double
        elif ch == ";" and not in_single and not in_double:
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                yield stmt
            continue
        buf.append(ch)

    tail = "".join(buf).strip()
    if tail:
        yield tail


def _strip_comments(sql: str) -> str:
    return "\n".join(line for line in sql.splitlines() if not line.lstrip().startswith("--"))


def apply_schema(conn_factory: DatabaseConnection, *, schema_path: str | Path) -> None:
    """Run every statement of schema.sql in one transaction (idempotent DDL expected)."""
    sql = _strip_comments(Path(schema_path).read_text(encoding="utf-8"))
    with db_transaction(conn_factory) as conn:
        for stmt in _iter_sql_statements(sql):
            conn.execute(text(stmt))


def list_tables(conn_factory: DatabaseConnection) -> list[str]:
    return sorted(inspect(conn_factory.engine).get_table_names())
