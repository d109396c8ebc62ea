from unittest.mock import patch, MagicMock

from scripts.list_vehicle_catalog import list_vehicle_catalog, main as catalog_main
from scripts.check_timestamps import check_timestamps, main as timestamps_main


def _rows(rows):
    result = MagicMock()
    result.mappings.return_value.all.return_value = rows
    return result

def test_list_vehicle_catalog():
    conn = MagicMock()
    conn.execute.side_effect = [
        _rows([{"id": 1, "name": "Moto", "capacity": 20, "active": True}]),
        _rows([{"id": 7, "name": "Honda", "active": True}]),
        _rows([]),
    ]

    catalog = list_vehicle_catalog(conn)

    assert [t["name"] for t in catalog["vehicle_types"]] == ["Moto"]
    assert catalog["brands"][0]["id"] == 7
    assert catalog["vehicle_models"] == []
    assert "FROM vehicle_types" in conn.execute.call_args_list[0].args[0].text

def test_catalog_main_counts(caplog):
    conn = MagicMock()
    conn.execute.side_effect = [_rows([]), _rows([{"id": 7, "name": "Honda", "active": True}]), _rows([])]
    with patch('scripts.list_vehicle_catalog.PostgresDB') as mock_db_cls:
        mock_db_cls.return_value.pool.connect.return_value.__enter__.return_value = conn

        with caplog.at_level("INFO"):
            assert catalog_main() == 0
    assert "- Honda (ID: 7, Active: True)" in caplog.text

def test_check_timestamps():
    tz = MagicMock()
    tz.scalar.return_value = "UTC"
    now = MagicMock()
    now.mappings.return_value.first.return_value = {"utc_now": "2026-10-18 12:00:00+00", "local_now": "2026-10-18 09:00:00", "current_ts": "x"}
    col = MagicMock()
    col.mappings.return_value.first.return_value = {"column_name": "created_at", "data_type": "timestamp without time zone", "datetime_precision": 6}
    latest = _rows([{"id": "r1", "request_number": "EN-0001"}])

    conn = MagicMock()
    conn.execute.side_effect = [tz, now, col, latest]

    report = check_timestamps(conn, limit=1)

    assert report["timezone"] == "UTC"
    assert report["column_type"]["data_type"] == "timestamp without time zone"
    assert report["latest"][0]["request_number"] == "EN-0001"
    stmt, params = conn.execute.call_args_list[3].args
    assert "ORDER BY created_at DESC" in stmt.text
    assert "AS created_at_with_offset" in stmt.text
    assert params == {"limit": 1}

def _timestamp_conn(now_row, latest_rows):
    tz = MagicMock()
    tz.scalar.return_value = "America/Sao_Paulo"
    now = MagicMock()
    now.mappings.return_value.first.return_value = now_row
    col = MagicMock()
    col.mappings.return_value.first.return_value = None
    conn = MagicMock()
    conn.execute.side_effect = [tz, now, col, _rows(latest_rows)]
    return conn

def test_timestamps_main_logs_each_request(caplog):
    row = {
        "id": "r1",
        "request_number": "EN-0042",
        "created_at": "2026-10-18 12:00:00",
        "created_at_local": "2026-10-18 09:00:00",
        "created_at_formatted": "2026-10-18 12:00:00",
        "created_at_local_formatted": "2026-10-18 09:00:00",
        "created_at_with_offset": "2026-10-18T09:00:00-03:00",
    }
    now_row = {"utc_now": "2026-10-18 12:05:00+00", "local_now": "2026-10-18 09:05:00", "current_ts": "2026-10-18 12:05:00+00"}
    with patch('scripts.check_timestamps.PostgresDB') as mock_db_cls:
        mock_db = mock_db_cls.return_value
        mock_db.pool.connect.return_value.__enter__.return_value = _timestamp_conn(now_row, [row])

        with caplog.at_level("INFO"):
            assert timestamps_main() == 0
        mock_db.close.assert_called_once()

    assert "PostgreSQL timezone: America/Sao_Paulo" in caplog.text
    assert "UTC NOW(): 2026-10-18 12:05:00+00" in caplog.text
    assert "1. EN-0042" in caplog.text
    assert "with offset: 2026-10-18T09:00:00-03:00" in caplog.text
    assert "Check complete" in caplog.text

def test_timestamps_main_without_now_row(caplog):
    """An empty NOW() result still logs every line instead of failing."""
    with patch('scripts.check_timestamps.PostgresDB') as mock_db_cls:
        mock_db_cls.return_value.pool.connect.return_value.__enter__.return_value = _timestamp_conn(None, [])

        with caplog.at_level("INFO"):
            assert timestamps_main() == 0

    assert "UTC NOW(): None" in caplog.text
    assert "created_at column type: None" in caplog.text
    assert "Check complete" in caplog.text
