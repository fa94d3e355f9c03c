from __future__ import annotations

import logging

from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError

from ..core.exceptions import PersistenceError
from .connection import DatabaseConnection
from .schema import metadata

logger = logging.getLogger(__name__)


def apply_schema(conn_factory: DatabaseConnection) -> None:
    """Create missing tables (CREATE IF NOT EXISTS semantics)."""

    try:
        metadata.create_all(conn_factory.engine)
    except SQLAlchemyError as exc:
        raise PersistenceError("Could not create schema") from exc
    logger.info("schema ready at %s", conn_factory.engine.url.render_as_string(hide_password=True))


def list_tables(conn_factory: DatabaseConnection) -> list[str]:
    try:
        return sorted(inspect(conn_factory.engine).get_table_names())
    except SQLAlchemyError as exc:
        raise PersistenceError("Could not inspect schema") from exc
