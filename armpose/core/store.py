# armpose/core/store.py
"""
PoseStore: owns the SQLAlchemy engine for the pose table.

Connections are checked out per call and always handed back, whichever way
the call ends. The engine's pool may keep the socket warm between calls.
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import SQLAlchemyError

from .. import config as C
from ..config import StoreConfig
from .errors import PoseStoreError

log = logging.getLogger(__name__)


def _connect_args(backend: str, timeout: float) -> Dict[str, Any]:
    if backend == "mysql":
        return {"connect_timeout": timeout, "read_timeout": timeout}
    if backend == "sqlite":
        return {"timeout": timeout}
    if backend == "postgresql":
        return {"connect_timeout": max(1, int(timeout))}
    return {}


def _reason(e: SQLAlchemyError) -> str:
    # DBAPI message without the SQL statement and parameters
    return str(getattr(e, "orig", None) or e)


class PoseStore:
    def __init__(self, cfg: StoreConfig, engine: Optional[Engine] = None):
        self.cfg = cfg
        if engine is None:
            url = cfg.sqlalchemy_url()
            engine = create_engine(
                url,
                pool_pre_ping=True,
                connect_args=_connect_args(url.get_backend_name(), cfg.timeout),
            )
        self.engine = engine
        quote = engine.dialect.identifier_preparer.quote
        # Identifiers come from StoreConfig, never from the request.
        self._latest_sql = text(
            f"SELECT * FROM {quote(cfg.table)} "
            f"ORDER BY {quote(C.RECENCY_FIELD)} DESC LIMIT 1"
        )

    def describe(self) -> str:
        """Engine URL with the password masked, safe for logs."""
        return self.engine.url.render_as_string(hide_password=True)

    @contextmanager
    def connection(self) -> Iterator[Connection]:
        try:
            conn = self.engine.connect()
        except SQLAlchemyError as e:
            log.warning("pose store connect failed (%s): %s", self.describe(), e)
            raise PoseStoreError(f"Connection failed: {_reason(e)}") from e
        with conn:
            yield conn

    def fetch_latest(self) -> Optional[Dict[str, Any]]:
        """Most recent row as {column: value}, or None when the table is empty."""
        with self.connection() as conn:
            try:
                row = conn.execute(self._latest_sql).first()
            except SQLAlchemyError as e:
                log.warning("latest pose query failed on %s: %s", self.cfg.table, e)
                raise PoseStoreError(f"Query failed: {_reason(e)}") from e
        if row is None:
            return None
        return dict(row._mapping)

    def ping(self) -> None:
        with self.connection() as conn:
            try:
                conn.execute(text("SELECT 1"))
            except SQLAlchemyError as e:
                log.warning("pose store ping failed on %s: %s", self.describe(), e)
                raise PoseStoreError(f"Query failed: {_reason(e)}") from e

    def dispose(self):
        self.engine.dispose()
