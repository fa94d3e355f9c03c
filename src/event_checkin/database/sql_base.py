from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.engine import Connection
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from ..core.exceptions import PersistenceError
from .connection import DatabaseConnection

logger = logging.getLogger(__name__)


@contextmanager
def db_transaction(conn_factory: DatabaseConnection) -> Iterator[Connection]:
    """Yield a connection inside one transaction.

    Commits on success, rolls back on any error. Driver errors other than
    integrity violations are re-raised as PersistenceError.
    """

    try:
        with conn_factory.begin() as conn:
            yield conn
    except IntegrityError:
        raise
    except SQLAlchemyError as exc:
        logger.exception("database operation failed")
        raise PersistenceError("Storage is unavailable") from exc
