# manages connections to the store, shared by every dao
import os
from contextlib import asynccontextmanager
from sqlite3 import Row
from typing import Optional

import aiosqlite

from utils.logger import get_logger

_logger = get_logger(__name__)

DB_PATH = os.getenv("STORE_DB_PATH", "data/store.sqlite")


@asynccontextmanager
async def connect(db_path: Optional[str] = None) -> aiosqlite.Connection:
    """Async context manager yielding an aiosqlite connection with FK enabled.

    The connection is closed on every exit path. `db_path` falls back to the
    module level DB_PATH, looked up at call time.
    """
    path = db_path or DB_PATH
    _logger.debug(f"Opening connection to {path}")
    conn = await aiosqlite.connect(path)
    conn.row_factory = Row
    try:
        await conn.execute("PRAGMA foreign_keys = ON;")
        yield conn
    finally:
        await conn.close()
