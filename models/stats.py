"""
派生统计模型 — 每次渲染重新计算，不持久化
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from models.transaction import Transaction


@dataclass(frozen=True)
class Metrics:
    """组合汇总指标"""

    invested_capital: float = 0.0    # 入金 - 出金
    net_profit: float = 0.0          # 交易盈亏合计
    portfolio_value: float = 0.0     # 本金 + 盈亏
    roi: float = 0.0                 # 百分比（已乘 100）
    win_rate: float = 0.0            # 百分比（已乘 100）
    avg_win: float = 0.0
    avg_loss: float = 0.0            # 绝对值
    profit_factor: float = 0.0       # 无亏损且有盈利时为 math.inf
    trade_count: int = 0
    win_count: int = 0
    loss_count: int = 0
    gross_profit: float = 0.0
    gross_loss: float = 0.0          # 绝对值


@dataclass(frozen=True)
class CalendarSlot:
    """日历格子：day/date_key 同为 None 表示占位"""

    day: Optional[int] = None
    date_key: Optional[str] = None

    @property
    def is_blank(self) -> bool:
        return self.day is None


@dataclass(frozen=True)
class DayStats:
    """单日统计（pl 只含 TRADE）"""

    date: str
    pl: float = 0.0
    transactions: List[Transaction] = field(default_factory=list)
    is_profit: bool = False
    is_loss: bool = False
    has_trades: bool = False
