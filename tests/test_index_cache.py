"""Test the SQLite index cache."""

import sqlite3

from docsearch.db.index_cache import CacheResult, SqliteIndexStore
from docsearch.models import CachedIndexPayload


def make_payload(document_factory, signature="sig-1"):
    return CachedIndexPayload(
        signature=signature,
        documents=[
            document_factory("loops", ["While loop", "For loop"]),
            document_factory("graphs", ["Графы"]),
        ],
    )


class TestSqliteIndexStore:
    """Test best-effort cache reads and writes."""

    def test_read_empty_cache(self, cache_db_path):
        result = SqliteIndexStore(cache_db_path).read("sig-1")
        assert result == CacheResult.success(None)

    def test_write_then_read(self, cache_db_path, document_factory):
        store = SqliteIndexStore(cache_db_path)
        payload = make_payload(document_factory)

        assert store.write(payload).ok
        result = store.read("sig-1")

        assert result.ok
        assert result.payload == payload
        assert result.payload.documents[1].pages[0].normalized_text == "графы"

    def test_stale_signature_reads_as_empty(self, cache_db_path, document_factory):
        store = SqliteIndexStore(cache_db_path)
        store.write(make_payload(document_factory))

        result = store.read("sig-2")

        assert result.ok
        assert result.payload is None

    def test_write_replaces_previous_payload(self, cache_db_path, document_factory):
        store = SqliteIndexStore(cache_db_path)
        store.write(make_payload(document_factory, signature="sig-1"))
        store.write(make_payload(document_factory, signature="sig-2"))

        assert store.read("sig-1").payload is None
        assert store.read("sig-2").payload is not None

    def test_corrupt_payload_is_a_failure(self, cache_db_path):
        store = SqliteIndexStore(cache_db_path)
        store.read("sig-1")  # creates the schema
        con = sqlite3.connect(cache_db_path)
        with con:
            con.execute(
                "INSERT INTO index_cache(key, signature, payload, written_at) "
                "VALUES('cache', 'sig-1', '{not json', 'now')"
            )
        con.close()

        result = store.read("sig-1")

        assert not result.ok
        assert "corrupt payload" in result.reason

    def test_unavailable_database(self, tmp_path, document_factory):
        store = SqliteIndexStore(str(tmp_path / "missing" / "cache.db"))

        read = store.read("sig-1")
        write = store.write(make_payload(document_factory))

        assert not read.ok
        assert "read failed" in read.reason
        assert not write.ok
        assert "write failed" in write.reason

    def test_clear(self, cache_db_path, document_factory):
        store = SqliteIndexStore(cache_db_path)
        store.write(make_payload(document_factory))

        assert store.clear().ok
        assert store.read("sig-1").payload is None
