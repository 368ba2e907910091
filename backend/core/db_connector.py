"""
Database connector — read-only SQLAlchemy engine and query executor.
Every connection is opened with mode=ro and PRAGMA query_only, and each statement is
bounded by a wall-clock deadline enforced through SQLite's progress handler.
"""
import logging
import time
from pathlib import Path
from typing import Optional

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from config import settings
from errors import QueryError
from models.chat import QueryResult

logger = logging.getLogger(__name__)

# SQLite VM instructions between deadline checks
_PROGRESS_STEPS = 1000


def create_read_only_engine(db_path: Optional[str] = None) -> Engine:
    """Build a SQLAlchemy engine over the SQLite store with writes disabled."""
    path = Path(db_path or settings.DATABASE_PATH)
    # mode=ro: a missing file is an error instead of a new empty database
    engine = create_engine(f"sqlite:///file:{path.as_posix()}?mode=ro&uri=true", pool_pre_ping=True)

    @event.listens_for(engine, "connect")
    def _set_query_only(dbapi_conn, _record):
        cur = dbapi_conn.cursor()
        cur.execute("PRAGMA query_only = ON")
        cur.close()

    return engine


def check_connection(engine: Engine) -> bool:
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return True
    except SQLAlchemyError as e:
        logger.warning("Store unreachable: %s", e)
        return False


class QueryExecutor:
    """Runs validated read queries and reports failures as values."""

    def __init__(
        self,
        engine: Engine,
        timeout_seconds: Optional[float] = None,
        max_rows: Optional[int] = None,
    ):
        self.engine = engine
        self.timeout_seconds = settings.QUERY_TIMEOUT_SECONDS if timeout_seconds is None else timeout_seconds
        self.max_rows = settings.MAX_RESULT_ROWS if max_rows is None else max_rows

    def execute(self, sql: str) -> QueryResult:
        logger.info("Executing SQL: %s", sql)
        try:
            rows, truncated = self._run(sql)
        except QueryError as e:
            logger.warning("Database query error: %s", e)
            return QueryResult(success=False, error=str(e), query=sql)
        return QueryResult(success=True, rows=rows, query=sql, truncated=truncated)

    def _run(self, sql: str) -> tuple[list[dict], bool]:
        deadline = time.monotonic() + self.timeout_seconds

        def _past_deadline() -> int:
            # non-zero return aborts the running statement
            return 1 if time.monotonic() > deadline else 0

        try:
            with self.engine.connect() as conn:
                raw = conn.connection.dbapi_connection
                raw.set_progress_handler(_past_deadline, _PROGRESS_STEPS)
                try:
                    result = conn.exec_driver_sql(sql)
                    cols = list(result.keys())
                    fetched = result.fetchmany(self.max_rows + 1)
                finally:
                    raw.set_progress_handler(None, 0)
        except Exception as e:
            if time.monotonic() > deadline:
                raise QueryError(sql, f"Query exceeded {self.timeout_seconds}s time limit") from e
            raise QueryError(sql, _short_message(e)) from e

        truncated = len(fetched) > self.max_rows
        rows = [dict(zip(cols, r)) for r in fetched[: self.max_rows]]
        return rows, truncated


def _short_message(err: Exception) -> str:
    orig = getattr(err, "orig", None)
    return str(orig) if orig is not None else str(err)
