"""持久化层测试：整表读写、损坏回退、ID 迁移。"""
from __future__ import annotations

import json
import logging

import pytest

import db
from config import STORAGE_KEY
from db.connection import init_database


def test_load_missing_slot(empty_db):
    assert db.transactions.load() == []


def test_roundtrip(empty_db, sample_transactions):
    db.transactions.save(sample_transactions)
    loaded = db.transactions.load()
    assert loaded == sample_transactions
    assert loaded[4].note == "breakout"
    assert loaded[0].note is None


def test_note_absent_in_payload(empty_db, make_tx):
    db.transactions.save([make_tx(10)])
    payload = json.loads(db.store.get(STORAGE_KEY))
    assert "note" not in payload[0]


@pytest.mark.parametrize("raw", [
    "{not json",
    '{"id": "x"}',
    "42",
    '[{"id": "a", "date": "2024-03-04"}]',
    '[{"id": "a", "date": "2024-13-01", "type": "TRADE", "strategy": "SWING", "amount": 1}]',
    '[{"id": "a", "date": "2024-03-04", "type": "BUY", "strategy": "SWING", "amount": 1}]',
    '[{"id": "a", "date": "2024-03-04", "type": "TRADE", "strategy": "SWING", "amount": NaN}]',
    '[{"id": "a", "date": "2024-03-04", "type": "TRADE", "strategy": "SWING", "amount": null}]',
    "[1, 2]",
    '[{"id": "a", "date": "2024-03-04", "type": "TRADE", "strategy": "SWING", "amount": 1' + "0" * 400 + "}]",
])
def test_corrupt_data_falls_back_to_empty(empty_db, raw, caplog):
    db.store.put(STORAGE_KEY, raw)
    with caplog.at_level(logging.WARNING, logger="db.transactions"):
        assert db.transactions.load() == []
    assert "Failed to load transactions" in caplog.text


def test_missing_table_falls_back_to_empty(tmp_path, monkeypatch):
    """未初始化的数据库文件也不抛异常。"""
    monkeypatch.setenv("JOURNAL_DB_PATH", str(tmp_path / "fresh.db"))
    assert db.transactions.load() == []


def test_unusable_db_path_falls_back_to_empty(tmp_path, monkeypatch, caplog):
    """数据库目录无法创建时同样回退为空列表。"""
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("x")
    monkeypatch.setenv("JOURNAL_DB_PATH", str(blocker / "journal.db"))
    with caplog.at_level(logging.ERROR, logger="db.transactions"):
        assert db.transactions.load() == []
    assert "Failed to read transaction store" in caplog.text


def test_migrates_missing_and_numeric_ids(empty_db):
    raw = json.dumps([
        {"date": "2024-03-04", "type": "TRADE", "strategy": "SWING", "amount": 10},
        {"id": 17, "date": "2024-03-05", "type": "DEPOSIT", "strategy": "OPTIONS", "amount": 500},
        {"id": "17", "date": "2024-03-06", "type": "TRADE", "strategy": "OPTIONS", "amount": -5},
    ])
    db.store.put(STORAGE_KEY, raw)

    first = db.transactions.load()
    ids = [t.id for t in first]
    assert all(isinstance(i, str) and i for i in ids)
    assert ids[1] == "17"
    assert len(set(ids)) == 3

    # 迁移结果已写回，再次读取 ID 不变
    assert [t.id for t in db.transactions.load()] == ids


def test_add_and_delete(empty_db, make_tx):
    a, b = make_tx(10), make_tx(-20)
    db.transactions.add(a)
    assert db.transactions.add(b) == [a, b]
    assert db.transactions.delete(a.id) == [b]
    assert db.transactions.delete(a.id) == [b]


def test_init_database_idempotent(empty_db):
    init_database()
    init_database()
    assert db.transactions.load() == []
