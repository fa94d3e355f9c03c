from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import StaticPool


@dataclass
class DBConfig:
    url: str
    echo: bool = False


class DatabaseConnection:
    """Owns the SQLAlchemy engine for one store instance.

    Note: Created by the container and closed with it; there is no shared
    module-level instance.
    """

    def __init__(self, config: DBConfig):
        self._config = config
        self._engine: Optional[Engine] = None

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            self._engine = _build_engine(self._config)
        return self._engine

    def begin(self):
        return self.engine.begin()

    def close(self) -> None:
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None


def _build_engine(config: DBConfig) -> Engine:
    url = make_url(config.url)
    if url.get_backend_name() != "sqlite":
        return create_engine(url, echo=config.echo, pool_pre_ping=True)

    kwargs: dict = {"connect_args": {"check_same_thread": False, "timeout": 30}}
    if url.database in (None, "", ":memory:"):
        # One shared connection, otherwise every checkout sees an empty database.
        kwargs["poolclass"] = StaticPool
    return create_engine(url, echo=config.echo, **kwargs)
