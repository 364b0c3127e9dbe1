"""Food SQL building — only supplied columns are touched."""

import pytest

from foods import repository


def _flat(sql: str) -> str:
    return " ".join(sql.split())


def test_build_update_name_only():
    sql, args = repository.build_update_food("F001", item_name="Rice")
    assert _flat(sql) == "UPDATE foods SET item_name = $1 WHERE item_id = $2 RETURNING item_id"
    assert args == ["Rice", "F001"]


def test_build_update_unit_only():
    sql, args = repository.build_update_food("F001", item_unit="kg")
    assert _flat(sql) == "UPDATE foods SET item_unit = $1 WHERE item_id = $2 RETURNING item_id"
    assert args == ["kg", "F001"]


def test_build_update_both_fields_keeps_placeholders_in_order():
    sql, args = repository.build_update_food("F001", item_name="Rice", item_unit="kg")
    assert "SET item_name = $1, item_unit = $2 WHERE item_id = $3" in _flat(sql)
    assert args == ["Rice", "kg", "F001"]


def test_build_update_requires_a_field():
    with pytest.raises(ValueError):
        repository.build_update_food("F001")


async def test_upsert_reports_insert_flag(fake_conn):
    assert await repository.upsert_food(fake_conn, "F001", item_name="Rice", item_unit="kg") is True
    assert await repository.upsert_food(fake_conn, "F001", item_name="Rice", item_unit="kg") is False
    sql, args = fake_conn.queries[0]
    assert "ON CONFLICT (item_id) DO UPDATE" in sql
    assert "RETURNING (xmax = 0) AS inserted" in sql
    assert args == ("F001", "Rice", "kg")
