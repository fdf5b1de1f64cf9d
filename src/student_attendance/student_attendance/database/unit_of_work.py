from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, ContextManager, Iterator, Protocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Transaction:
    """An open connection + cursor shared by several repository calls."""

    conn: Any
    cur: Any


class UnitOfWork(Protocol):
    """Groups repository writes so they commit or roll back together.

    Repositories accept the yielded ``Transaction`` through their ``tx``
    keyword argument.
    """

    def atomic(self) -> ContextManager[Transaction]:
        raise NotImplementedError


class MySQLUnitOfWork(UnitOfWork):
    def __init__(self, conn_factory):
        self._conn_factory = conn_factory

    @contextmanager
    def atomic(self) -> Iterator[Transaction]:
        conn = self._conn_factory.connect()
        try:
            conn.start_transaction()
            cur = conn.cursor(dictionary=True)
            try:
                yield Transaction(conn=conn, cur=cur)
                conn.commit()
            finally:
                cur.close()
        except Exception:
            logger.debug("Rolling back transaction")
            conn.rollback()
            raise
        finally:
            conn.close()
