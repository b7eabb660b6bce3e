from contextlib import asynccontextmanager
from typing import Optional

import aiosqlite

from dao import database
from dao.errors import StoreError
from utils.logger import get_logger

_logger = get_logger(__name__)


class DaoBase:
    """Stateless base for the store-backed daos.

    Holds nothing but the database location; every call acquires its own
    connection through `_connect()`.
    """

    def __init__(self, db_path: Optional[str] = None):
        self._db_path = db_path

    @asynccontextmanager
    async def _connect(self) -> aiosqlite.Connection:
        """Scoped connection; driver errors come out as StoreError."""
        try:
            async with database.connect(self._db_path) as conn:
                yield conn
        except aiosqlite.Error as e:
            _logger.error(f"{type(self).__name__}: store failure: {e}")
            raise StoreError(str(e), cause=e) from e
