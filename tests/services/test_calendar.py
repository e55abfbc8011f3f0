"""日历投影服务测试。"""
from __future__ import annotations

from datetime import date, datetime

from config import TransactionType
from services import CalendarService


def _day_slots(slots):
    return [s for s in slots if not s.is_blank]


def test_thirty_day_month_starting_sunday():
    """2024-09：周日开始，30 天，剩余 12 ≥ 7 不补齐。"""
    slots = CalendarService.project(date(2024, 9, 17))
    assert len(slots) == 30
    assert slots[0].day == 1
    assert slots[0].date_key == "2024-09-01"
    assert slots[-1].date_key == "2024-09-30"


def test_february_non_leap_starting_thursday():
    """2018-02：周四开始，4 个前导 + 28 天 = 32，不补齐。"""
    slots = CalendarService.project(date(2018, 2, 1))
    assert len(slots) == 32
    assert all(s.is_blank for s in slots[:4])
    assert slots[4].day == 1
    assert slots[4].date_key == "2018-02-01"
    assert len(_day_slots(slots)) == 28


def test_pads_to_42_when_remainder_under_a_week():
    """2024-03：周五开始，5 + 31 = 36，剩余 6 < 7，补齐到 42。"""
    slots = CalendarService.project(date(2024, 3, 1))
    assert len(slots) == 42
    assert all(s.is_blank for s in slots[36:])
    assert all(s.day is None and s.date_key is None for s in slots[36:])


def test_exactly_one_week_remaining_is_not_padded():
    """2026-01：周四开始，4 + 31 = 35，剩余正好 7，不补。"""
    slots = CalendarService.project(date(2026, 1, 20))
    assert len(slots) == 35


def test_leap_february():
    slots = CalendarService.project(date(2024, 2, 10))
    keys = [s.date_key for s in _day_slots(slots)]
    assert len(keys) == 29
    assert keys[-1] == "2024-02-29"


def test_accepts_datetime_reference():
    slots = CalendarService.project(datetime(2024, 9, 30, 23, 59))
    assert slots[-1].date_key == "2024-09-30"


def test_weeks_split():
    slots = CalendarService.project(date(2018, 2, 1))
    weeks = CalendarService.weeks(slots)
    assert [len(w) for w in weeks] == [7, 7, 7, 7, 4]


def test_day_stats_sums_trades_only(make_tx):
    txs = [
        make_tx(300, date="2024-03-04"),
        make_tx(-100, date="2024-03-04"),
        make_tx(5000, TransactionType.DEPOSIT, date="2024-03-04"),
        make_tx(999, date="2024-03-05"),
    ]
    ds = CalendarService.day_stats("2024-03-04", txs)
    assert ds.pl == 200
    assert ds.is_profit and not ds.is_loss
    assert ds.has_trades
    assert len(ds.transactions) == 3


def test_day_stats_net_loss_still_has_trades(make_tx):
    txs = [make_tx(100), make_tx(-250)]
    ds = CalendarService.day_stats("2024-03-04", txs)
    assert ds.pl == -150
    assert ds.is_loss
    assert ds.has_trades


def test_day_stats_zero_net_trade(make_tx):
    ds = CalendarService.day_stats("2024-03-04", [make_tx(0)])
    assert ds.has_trades
    assert not ds.is_profit
    assert not ds.is_loss


def test_day_stats_transfers_only(make_tx):
    ds = CalendarService.day_stats(
        "2024-03-04", [make_tx(1000, TransactionType.WITHDRAWAL)],
    )
    assert ds.pl == 0
    assert not ds.has_trades
    assert ds.transactions


def test_day_stats_empty_day():
    ds = CalendarService.day_stats("2024-03-04", [])
    assert ds.pl == 0
    assert not (ds.is_profit or ds.is_loss or ds.has_trades)
    assert ds.transactions == []


def test_day_stats_lookup_binds_snapshot(make_tx):
    txs = [make_tx(50)]
    lookup = CalendarService.day_stats_lookup(txs)
    txs.append(make_tx(-500))
    assert lookup("2024-03-04").pl == 50
