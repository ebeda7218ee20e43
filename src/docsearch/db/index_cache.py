"""
Persistent Index Cache

Stores the extracted document indexes in SQLite so the next start does not
have to parse every document again. Best-effort: every operation returns a
CacheResult, and callers treat a failure exactly like an empty cache.
"""

import logging
import sqlite3
from dataclasses import dataclass
from datetime import datetime, timezone

from pydantic import ValidationError
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from docsearch.exceptions import CacheUnavailable
from docsearch.models import CachedIndexPayload

logger = logging.getLogger(__name__)

STORAGE_KEY = "cache"

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS index_cache (
  key TEXT PRIMARY KEY,
  signature TEXT NOT NULL,
  payload TEXT NOT NULL,
  written_at TEXT NOT NULL
);
"""

# Retry transient "database is locked" errors
_retry_locked = retry(
    retry=retry_if_exception_type(sqlite3.OperationalError),
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=0.1, min=0.1, max=1),
    reraise=True,
)


@dataclass(frozen=True)
class CacheResult:
    """Outcome of a cache operation: success (with optional payload) or failure."""

    ok: bool
    payload: CachedIndexPayload | None = None
    reason: str | None = None

    @classmethod
    def success(cls, payload: CachedIndexPayload | None = None) -> "CacheResult":
        return cls(ok=True, payload=payload)

    @classmethod
    def failure(cls, reason: str) -> "CacheResult":
        return cls(ok=False, reason=reason)


class SqliteIndexStore:
    """Single-slot index cache keyed by catalog signature."""

    def __init__(self, db_path: str, timeout: float = 5.0):
        self.db_path = db_path
        self.timeout = timeout

    def _connect(self) -> sqlite3.Connection:
        con = sqlite3.connect(self.db_path, timeout=self.timeout)
        con.executescript(SCHEMA_SQL)
        return con

    @_retry_locked
    def _read_row(self) -> tuple[str, str] | None:
        con = self._connect()
        try:
            return con.execute(
                "SELECT signature, payload FROM index_cache WHERE key = ?",
                (STORAGE_KEY,),
            ).fetchone()
        finally:
            con.close()

    @_retry_locked
    def _write_row(self, signature: str, payload: str) -> None:
        con = self._connect()
        try:
            with con:
                con.execute(
                    "INSERT OR REPLACE INTO index_cache(key, signature, payload, written_at) "
                    "VALUES(?,?,?,?)",
                    (
                        STORAGE_KEY,
                        signature,
                        payload,
                        datetime.now(timezone.utc).isoformat(),
                    ),
                )
        finally:
            con.close()

    def _load(self, signature: str) -> CachedIndexPayload | None:
        try:
            row = self._read_row()
        except sqlite3.Error as e:
            raise CacheUnavailable(f"read failed: {e}", original_error=e) from e

        if row is None:
            return None
        stored_signature, raw = row
        if stored_signature != signature:
            logger.info("Index cache signature mismatch; ignoring stale cache")
            return None
        try:
            return CachedIndexPayload.model_validate_json(raw)
        except ValidationError as e:
            raise CacheUnavailable(f"corrupt payload: {e}", original_error=e) from e

    def read(self, signature: str) -> CacheResult:
        """
        Read the cached payload for signature.

        Returns:
            success(payload) on a hit, success(None) when empty or stale,
            failure(reason) when the cache cannot be read.
        """
        try:
            return CacheResult.success(self._load(signature))
        except CacheUnavailable as e:
            return CacheResult.failure(e.message)

    def write(self, payload: CachedIndexPayload) -> CacheResult:
        """Replace the cached payload."""
        try:
            self._write_row(payload.signature, payload.model_dump_json())
        except sqlite3.Error as e:
            return CacheResult.failure(f"write failed: {e}")
        return CacheResult.success(payload)

    def clear(self) -> CacheResult:
        try:
            con = self._connect()
            try:
                with con:
                    con.execute("DELETE FROM index_cache WHERE key = ?", (STORAGE_KEY,))
            finally:
                con.close()
        except sqlite3.Error as e:
            return CacheResult.failure(f"clear failed: {e}")
        return CacheResult.success()
