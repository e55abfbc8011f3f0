"""测试夹具：临时数据库 + 交易构造工具。"""
from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable, Optional

import sys

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from config import StrategyType, TransactionType
from db.connection import init_database
from models import Transaction


@pytest.fixture(scope="function")
def empty_db(tmp_path, monkeypatch) -> Iterable[Path]:
    """指向临时文件的空数据库（已建表）。"""
    db_path = tmp_path / "journal.db"
    monkeypatch.setenv("JOURNAL_DB_PATH", str(db_path))
    init_database()
    yield db_path


@pytest.fixture
def make_tx() -> Callable[..., Transaction]:
    """构造交易，ID 自动递增。"""
    counter = {"n": 0}

    def _make(
        amount: float,
        tx_type: TransactionType = TransactionType.TRADE,
        *,
        date: str = "2024-03-04",
        strategy: StrategyType = StrategyType.DAY_TRADE,
        note: Optional[str] = None,
        tx_id: Optional[str] = None,
    ) -> Transaction:
        counter["n"] += 1
        return Transaction(
            id=tx_id or f"tx-{counter['n']}",
            date=date,
            type=tx_type,
            strategy=strategy,
            amount=amount,
            note=note,
        )

    return _make


@pytest.fixture
def sample_transactions(make_tx) -> list:
    """三种策略混合的交易列表（无序）。"""
    return [
        make_tx(10000, TransactionType.DEPOSIT, date="2024-03-01", strategy=StrategyType.SWING),
        make_tx(500, date="2024-03-04"),
        make_tx(-200, date="2024-03-04", strategy=StrategyType.OPTIONS),
        make_tx(2000, TransactionType.WITHDRAWAL, date="2024-03-15", strategy=StrategyType.SWING),
        make_tx(300, date="2024-03-11", strategy=StrategyType.SWING, note="breakout"),
        make_tx(0, date="2024-03-12", strategy=StrategyType.OPTIONS),
    ]


@pytest.fixture
def seeded_db(empty_db, sample_transactions) -> Iterable[list]:
    """写入 sample_transactions 的数据库。"""
    import db
    db.transactions.save(sample_transactions)
    yield sample_transactions
