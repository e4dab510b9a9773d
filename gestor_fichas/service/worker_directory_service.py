from __future__ import annotations

import os
from typing import Optional

from sqlalchemy import Column, Integer, MetaData, String, Table, create_engine, event, func, select
from sqlalchemy.engine import Engine

from gestor_fichas.domain.ports.Worker_directory_provider import Worker_directory_provider
from gestor_fichas.lib.logger import get_logger


metadata = MetaData()

# Existing table owned by the fichas database; only the columns we read.
trabajadores = Table(
    "trabajadores",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("nombre", String(255), nullable=False),
)


def _unicode_lower(value):
    return value.lower() if isinstance(value, str) else value


def _register_unicode_lower(dbapi_connection, connection_record) -> None:
    dbapi_connection.create_function("lower", 1, _unicode_lower, deterministic=True)


class SqlWorkerDirectory(Worker_directory_provider):
    """Case-insensitive partial-name lookup over the `trabajadores` table."""

    def __init__(self, engine: Engine) -> None:
        self.engine = engine
        if engine.dialect.name == "sqlite":
            # SQLite lower() only folds ASCII; "ÁNGEL" must still match "ángel".
            # Applies to connections opened after this point.
            event.listen(engine, "connect", _register_unicode_lower)

    @classmethod
    def from_url(cls, url: str) -> "SqlWorkerDirectory":
        return cls(create_engine(url, pool_pre_ping=True))

    def find_id_by_name(self, name: str) -> Optional[str]:
        needle = name.strip().lower()
        if not needle:
            return None
        stmt = (
            select(trabajadores.c.id)
            .where(func.lower(trabajadores.c.nombre).contains(needle, autoescape=True))
            .order_by(trabajadores.c.id)
            .limit(1)
        )
        with self.engine.connect() as conn:
            row = conn.execute(stmt).first()
        return str(row[0]) if row is not None else None


def build_worker_directory() -> Optional[Worker_directory_provider]:
    """Create the directory from DATABASE_URL, or None when it is not configured."""
    logger = get_logger("workers")
    url = os.getenv("DATABASE_URL")
    if not url:
        logger.info("DATABASE_URL not set: worker names will not be resolved")
        return None
    logger.info("worker directory: %s", url.split("://", 1)[0])
    return SqlWorkerDirectory.from_url(url)
