# domain_registry/core/schema.py
"""
Schema management for the ``user`` and ``domain`` tables.

Tables are created with ``CREATE TABLE IF NOT EXISTS`` so the statements can be
applied any number of times against the same store.
"""
import logging
from typing import List

from sqlalchemy import inspect
from sqlalchemy.dialects import mysql, postgresql, sqlite
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.schema import CreateTable

from domain_registry.models import Base

logger = logging.getLogger("uvicorn")

DIALECTS = {"sqlite": sqlite, "postgresql": postgresql, "mysql": mysql}


def create_table_statements() -> List[CreateTable]:
    return [
        CreateTable(table, if_not_exists=True)
        for table in Base.metadata.sorted_tables
    ]


def create_schema(bind: Engine | Connection) -> None:
    """Apply every CREATE TABLE IF NOT EXISTS statement in one transaction."""
    if isinstance(bind, Engine):
        with bind.begin() as conn:
            _apply(conn)
    else:
        _apply(bind)
        bind.commit()


def _apply(conn: Connection) -> None:
    for statement in create_table_statements():
        logger.debug(f"🛠️ Ensuring table '{statement.element.name}'")
        conn.execute(statement)


def render_schema_ddl(dialect_name: str = "sqlite") -> str:
    """Render the table creation statements for a given SQL dialect."""
    if dialect_name not in DIALECTS:
        raise ValueError(f"Unsupported dialect: {dialect_name}")
    dialect = DIALECTS[dialect_name].dialect()
    statements = [
        str(statement.compile(dialect=dialect)).strip() + ";"
        for statement in create_table_statements()
    ]
    return "\n\n".join(statements) + "\n"


def table_names(bind: Engine | Connection) -> List[str]:
    return inspect(bind).get_table_names()
