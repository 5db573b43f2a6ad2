"""Tiny home-grown schema upgrades for existing ``Computadoras`` tables."""

from __future__ import annotations

import logging

from sqlalchemy import inspect, text
from sqlalchemy.engine import Engine

from .session import Base
from ..models.computadora import Computadora

logger = logging.getLogger("computadoras.migrate")

# Additive only. Older deployments created the table without these columns.
OPTIONAL_COLUMNS: tuple[tuple[str, str], ...] = (
    ("precio", "DECIMAL(10, 2) NULL"),
    ("fecha_adquisicion", "DATE NULL"),
)


def _column_names(engine: Engine, table: str) -> set[str]:
    return {column["name"] for column in inspect(engine).get_columns(table)}


def _add_column(engine: Engine, table: str, name: str, col_def: str) -> None:
    """ALTER TABLE ADD COLUMN helper."""

    quote = engine.dialect.identifier_preparer.quote
    with engine.begin() as conn:
        conn.execute(text(f"ALTER TABLE {quote(table)} ADD COLUMN {quote(name)} {col_def}"))


def run_migrations(engine: Engine) -> list[str]:
    """Create missing tables and add missing optional columns; return what was added."""

    Base.metadata.create_all(bind=engine)

    table = Computadora.__tablename__
    existing = _column_names(engine, table)
    added: list[str] = []
    for name, col_def in OPTIONAL_COLUMNS:
        if name in existing:
            continue
        _add_column(engine, table, name, col_def)
        added.append(name)
        logger.info("migrate.column_added", extra={"extra_data": {"table": table, "column": name}})
    return added
