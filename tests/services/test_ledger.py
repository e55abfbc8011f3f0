"""账本汇总服务测试。"""
from __future__ import annotations

import math

import pytest

from config import StrategyType, TransactionType, ViewType
from services import LedgerService


def test_aggregate_empty():
    """空列表全部为 0，不抛异常。"""
    m = LedgerService.aggregate([])
    assert m.invested_capital == 0
    assert m.net_profit == 0
    assert m.portfolio_value == 0
    assert m.roi == 0
    assert m.win_rate == 0
    assert m.profit_factor == 0
    assert m.avg_win == 0 and m.avg_loss == 0
    assert m.trade_count == 0


def test_zero_trade_counts_only_toward_trade_count(make_tx):
    """金额为 0 的交易只计次数。"""
    m = LedgerService.aggregate([make_tx(0)])
    assert m.trade_count == 1
    assert m.win_count == 0
    assert m.loss_count == 0
    assert m.win_rate == 0
    assert m.gross_profit == 0 and m.gross_loss == 0
    assert m.profit_factor == 0


def test_aggregate_mixed(sample_transactions):
    m = LedgerService.aggregate(sample_transactions)
    assert m.invested_capital == 8000
    assert m.net_profit == 600
    assert m.portfolio_value == 8600
    assert m.roi == pytest.approx(7.5)
    assert m.trade_count == 4
    assert (m.win_count, m.loss_count) == (2, 1)
    assert m.win_rate == pytest.approx(50.0)
    assert m.avg_win == pytest.approx(400)
    assert m.avg_loss == pytest.approx(200)
    assert m.profit_factor == pytest.approx(4.0)


def test_profit_factor_infinite_without_losses(make_tx):
    m = LedgerService.aggregate([make_tx(120), make_tx(30)])
    assert math.isinf(m.profit_factor) and m.profit_factor > 0


def test_roi_zero_without_capital(make_tx):
    """没有本金时 ROI 定义为 0。"""
    m = LedgerService.aggregate([make_tx(250)])
    assert m.invested_capital == 0
    assert m.roi == 0


def test_transfers_do_not_count_as_trades(make_tx):
    m = LedgerService.aggregate([
        make_tx(1000, TransactionType.DEPOSIT),
        make_tx(400, TransactionType.WITHDRAWAL),
    ])
    assert m.invested_capital == 600
    assert m.trade_count == 0
    assert m.net_profit == 0


def test_portfolio_value_identity(sample_transactions):
    for n in range(len(sample_transactions) + 1):
        m = LedgerService.aggregate(sample_transactions[:n])
        assert m.portfolio_value == m.invested_capital + m.net_profit


def test_filter_overview_keeps_everything_sorted(sample_transactions):
    """总览 = 不筛选，按日期倒序。"""
    out = LedgerService.filter_by_view(sample_transactions, ViewType.OVERVIEW)
    assert len(out) == len(sample_transactions)
    assert [t.date for t in out] == sorted((t.date for t in out), reverse=True)
    assert LedgerService.aggregate(out) == LedgerService.aggregate(sample_transactions)


def test_filter_by_strategy(sample_transactions):
    out = LedgerService.filter_by_view(sample_transactions, ViewType.SWING)
    assert out
    assert all(t.strategy is StrategyType.SWING for t in out)

    m = LedgerService.aggregate(out)
    assert m.invested_capital == 8000
    assert m.net_profit == 300
    assert m.trade_count == 1


def test_filter_does_not_mutate_input(sample_transactions):
    before = list(sample_transactions)
    LedgerService.filter_by_view(sample_transactions, ViewType.OPTIONS)
    LedgerService.aggregate(sample_transactions)
    assert sample_transactions == before


def test_recent_limits_to_five(make_tx):
    txs = [make_tx(i, date=f"2024-03-{i + 1:02d}") for i in range(8)]
    view = LedgerService.filter_by_view(txs, ViewType.OVERVIEW)
    recent = LedgerService.recent(view)
    assert len(recent) == 5
    assert recent[0].date == "2024-03-08"


def test_equity_curve(sample_transactions):
    df = LedgerService.equity_curve(sample_transactions)
    assert list(df["date"]) == sorted(df["date"])
    last = df.iloc[-1]
    assert last["net_profit"] == pytest.approx(600)
    assert last["invested_capital"] == pytest.approx(8000)
    assert last["portfolio_value"] == pytest.approx(8600)
    # 同日两笔交易合并为一行
    assert df.loc[df["date"] == "2024-03-04", "pl"].item() == pytest.approx(300)


def test_equity_curve_empty():
    assert LedgerService.equity_curve([]) is None
