"""
页面工具函数 — 指标卡片文本、历史表 DataFrame

只做「派生结果 → 显示文本」的转换，不碰 DB。
"""
from typing import List, Sequence, Tuple

import pandas as pd

from config import STRATEGY_LABELS, TYPE_LABELS, TransactionType
from models import Metrics, Transaction
from utils import (
    format_currency,
    format_percentage,
    format_profit_factor,
    format_signed_amount,
)


def summary_items(m: Metrics) -> List[Tuple[str, str]]:
    """第一行指标：账户价值 / 净盈亏 / ROI / 本金"""
    return [
        ("账户价值", format_currency(m.portfolio_value)),
        ("净盈亏", format_currency(m.net_profit)),
        ("ROI", format_percentage(m.roi)),
        ("投入本金", format_currency(m.invested_capital)),
    ]


def performance_items(m: Metrics) -> List[Tuple[str, str]]:
    """第二行指标：胜率 / 盈亏因子 / 平均盈利 / 平均亏损 / 交易次数"""
    return [
        ("胜率", format_percentage(m.win_rate)),
        ("盈亏因子", format_profit_factor(m.profit_factor)),
        ("平均盈利", format_currency(m.avg_win)),
        ("平均亏损", format_currency(m.avg_loss)),
        ("交易次数", f"{m.trade_count} ({m.win_count}W / {m.loss_count}L)"),
    ]


def history_frame(transactions: Sequence[Transaction]) -> pd.DataFrame:
    """
    历史表 DataFrame（前端就绪）

    Returns:
        DataFrame(日期, 类型, 策略, 金额, 备注)
    """
    rows = [
        {
            "日期": t.date,
            "类型": TYPE_LABELS[t.type],
            "策略": STRATEGY_LABELS[t.strategy],
            "金额": format_signed_amount(t.type, t.amount),
            "备注": t.note or "-",
        }
        for t in transactions
    ]
    return pd.DataFrame(rows, columns=["日期", "类型", "策略", "金额", "备注"])


def is_negative_flow(t: Transaction) -> bool:
    """出金或亏损交易（显示红色）"""
    return t.type is TransactionType.WITHDRAWAL or (t.is_trade and t.amount < 0)
