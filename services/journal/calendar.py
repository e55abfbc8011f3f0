"""
日历投影服务 — 月份 → 固定格子序列 + 单日统计

纯函数，无 DB / UI 依赖。日期键统一由 utils.dates.format_date_iso 生成，
与交易记录的 date 字段直接比较。
"""
from __future__ import annotations

from datetime import date
from typing import Callable, List, Sequence

from config import CALENDAR_SLOTS, DAYS_PER_WEEK, TransactionType
from models import CalendarSlot, DayStats, Transaction
from utils.dates import DateLike, days_in_month, first_weekday, format_date_iso, to_local_date


class CalendarService:
    """日历投影服务"""

    @staticmethod
    def project(reference: DateLike) -> List[CalendarSlot]:
        """
        reference 所在月份的日历格子

        规则：
        1. 前导占位 = 1 号的星期序号（周日为 0）
        2. 每天一个格子，带日期键
        3. 剩余 = 42 - 已用格子；剩余不足一周才补齐到 42，否则不补
           （不会为了补齐多出一整行几乎空白的第 6 行）
        """
        ref = to_local_date(reference)
        leading = first_weekday(ref)
        n_days = days_in_month(ref)

        slots = [CalendarSlot() for _ in range(leading)]
        slots.extend(
            CalendarSlot(day=d, date_key=format_date_iso(date(ref.year, ref.month, d)))
            for d in range(1, n_days + 1)
        )

        remaining = CALENDAR_SLOTS - len(slots)
        if remaining < DAYS_PER_WEEK:
            slots.extend(CalendarSlot() for _ in range(remaining))
        return slots

    @staticmethod
    def weeks(slots: Sequence[CalendarSlot]) -> List[List[CalendarSlot]]:
        """格子序列按 7 个一行切分（最后一行可能不满）"""
        return [
            list(slots[i:i + DAYS_PER_WEEK])
            for i in range(0, len(slots), DAYS_PER_WEEK)
        ]

    @staticmethod
    def day_stats(date_key: str, transactions: Sequence[Transaction]) -> DayStats:
        """
        单日统计

        - pl:         当日 TRADE 金额合计（入金/出金不计）
        - has_trades: 当日存在任一 TRADE（与盈亏符号无关，净 0 也算）
        """
        day_tx = [t for t in transactions if t.date == date_key]
        trades = [t for t in day_tx if t.type is TransactionType.TRADE]
        pl = sum((t.amount for t in trades), 0.0)
        return DayStats(
            date=date_key,
            pl=pl,
            transactions=day_tx,
            is_profit=pl > 0,
            is_loss=pl < 0,
            has_trades=bool(trades),
        )

    @staticmethod
    def day_stats_lookup(
        transactions: Sequence[Transaction],
    ) -> Callable[[str], DayStats]:
        """绑定交易快照，返回 date_key → DayStats 查询函数"""
        snapshot = tuple(transactions)

        def _lookup(date_key: str) -> DayStats:
            return CalendarService.day_stats(date_key, snapshot)

        return _lookup
