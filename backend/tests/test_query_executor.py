import sqlite3

from core.db_connector import QueryExecutor, check_connection, create_read_only_engine


def test_execute_returns_rows_in_projection_order(executor):
    result = executor.execute(
        "SELECT primary_agent, COUNT(*) AS listing_count FROM listings WHERE status='Active' "
        "GROUP BY primary_agent ORDER BY listing_count DESC"
    )
    assert result.success is True
    assert result.error is None
    assert result.rows == [
        {"primary_agent": "B", "listing_count": 5},
        {"primary_agent": "A", "listing_count": 3},
    ]
    assert list(result.rows[0].keys()) == ["primary_agent", "listing_count"]
    assert result.truncated is False


def test_execute_empty_result(executor):
    result = executor.execute("SELECT * FROM listings WHERE primary_agent = 'Nobody'")
    assert result.success is True
    assert result.rows == []


def test_unknown_column_is_a_failed_result(executor):
    sql = "SELECT no_such_column FROM listings"
    result = executor.execute(sql)
    assert result.success is False
    assert result.rows is None
    assert "no_such_column" in result.error
    assert result.query == sql


def test_syntax_error_is_a_failed_result(executor):
    result = executor.execute("SELECT FROM WHERE")
    assert result.success is False
    assert result.error


def test_stacked_statements_never_run(executor, store_path):
    result = executor.execute("SELECT 1; DELETE FROM listings")
    assert result.success is False
    conn = sqlite3.connect(store_path)
    assert conn.execute("SELECT COUNT(*) FROM listings").fetchone()[0] == 10
    conn.close()


def test_connection_refuses_writes(engine):
    # the guard would stop this first; the connection itself must refuse too
    result = QueryExecutor(engine).execute("DELETE FROM listings")
    assert result.success is False
    assert "readonly" in result.error.lower() or "read-only" in result.error.lower()


def test_row_cap_sets_truncated(engine):
    capped = QueryExecutor(engine, max_rows=4)
    result = capped.execute("SELECT id FROM listings ORDER BY id")
    assert result.success is True
    assert [r["id"] for r in result.rows] == [1, 2, 3, 4]
    assert result.truncated is True


def test_query_timeout_is_a_failed_result(engine):
    slow = QueryExecutor(engine, timeout_seconds=0.05)
    result = slow.execute(
        "SELECT COUNT(*) FROM (WITH RECURSIVE c(x) AS (SELECT 1 UNION ALL SELECT x + 1 FROM c) SELECT x FROM c)"
    )
    assert result.success is False
    assert "time limit" in result.error


def test_check_connection(engine):
    assert check_connection(engine) is True


def test_missing_store_is_unreachable_and_not_created(tmp_path):
    path = tmp_path / "claritynow.db"
    eng = create_read_only_engine(str(path))
    try:
        assert check_connection(eng) is False
        result = QueryExecutor(eng).execute("SELECT * FROM listings")
        assert result.success is False
    finally:
        eng.dispose()
    assert not path.exists()


def test_zero_row_cap_is_respected(engine):
    result = QueryExecutor(engine, max_rows=0).execute("SELECT id FROM listings")
    assert result.success is True
    assert result.rows == []
    assert result.truncated is True
