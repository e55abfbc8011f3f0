"""
账本汇总服务 — 视图筛选 + 组合指标 + 权益曲线

纯函数：输入交易列表快照，输出新对象，不修改输入，不碰 DB / UI。
"""
from __future__ import annotations

import math
from typing import List, Optional, Sequence

import pandas as pd

from config import RECENT_LIMIT, TransactionType, ViewType
from models import Metrics, Transaction


class LedgerService:
    """
    账本汇总服务

    所有方法为 @staticmethod，每次渲染用当前交易列表重新计算。
    """

    @staticmethod
    def filter_by_view(
        transactions: Sequence[Transaction],
        view: ViewType,
    ) -> List[Transaction]:
        """
        按视图筛选，并按日期倒序（同日保持原顺序）

        Args:
            transactions: 全部交易
            view:         OVERVIEW 不筛选；其余按 strategy 精确匹配

        Returns:
            新列表
        """
        view = ViewType(view)
        if view is ViewType.OVERVIEW:
            txs = list(transactions)
        else:
            txs = [t for t in transactions if t.strategy.value == view.value]
        return sorted(txs, key=lambda t: t.date, reverse=True)

    @staticmethod
    def recent(
        transactions: Sequence[Transaction],
        limit: int = RECENT_LIMIT,
    ) -> List[Transaction]:
        """最近 N 条（输入应为 filter_by_view 的倒序结果）"""
        return list(transactions[:limit])

    @staticmethod
    def aggregate(transactions: Sequence[Transaction]) -> Metrics:
        """
        单次遍历计算组合指标

        规则：
        - DEPOSIT 加本金，WITHDRAWAL 减本金
        - TRADE 计入净盈亏与交易次数
        - 金额 > 0 计盈利，< 0 计亏损（取绝对值），= 0 只计次数

        除零全部有定义值，不抛异常：
        - roi / win_rate / avg_win / avg_loss 分母为 0 时为 0
        - profit_factor 无亏损时：有盈利为 inf，否则为 0
        """
        invested = 0.0
        net = 0.0
        trade_count = 0
        gross_profit = 0.0
        gross_loss = 0.0
        win_count = 0
        loss_count = 0

        for t in transactions:
            if t.type is TransactionType.DEPOSIT:
                invested += t.amount
            elif t.type is TransactionType.WITHDRAWAL:
                invested -= t.amount
            elif t.type is TransactionType.TRADE:
                net += t.amount
                trade_count += 1
                if t.amount > 0:
                    gross_profit += t.amount
                    win_count += 1
                elif t.amount < 0:
                    gross_loss += abs(t.amount)
                    loss_count += 1

        if gross_loss > 0:
            profit_factor = gross_profit / gross_loss
        else:
            profit_factor = math.inf if gross_profit > 0 else 0.0

        return Metrics(
            invested_capital=invested,
            net_profit=net,
            portfolio_value=invested + net,
            roi=(net / invested) * 100 if invested != 0 else 0.0,
            win_rate=(win_count / trade_count) * 100 if trade_count > 0 else 0.0,
            avg_win=gross_profit / win_count if win_count > 0 else 0.0,
            avg_loss=gross_loss / loss_count if loss_count > 0 else 0.0,
            profit_factor=profit_factor,
            trade_count=trade_count,
            win_count=win_count,
            loss_count=loss_count,
            gross_profit=gross_profit,
            gross_loss=gross_loss,
        )

    @staticmethod
    def equity_curve(transactions: Sequence[Transaction]) -> Optional[pd.DataFrame]:
        """
        权益曲线 DataFrame（按日期升序累计）

        Returns:
            DataFrame(date, pl, flow, net_profit, invested_capital, portfolio_value)，
            无数据返回 None
        """
        if not transactions:
            return None

        rows = []
        for t in transactions:
            if t.type is TransactionType.TRADE:
                rows.append({"date": t.date, "pl": t.amount, "flow": 0.0})
            elif t.type is TransactionType.DEPOSIT:
                rows.append({"date": t.date, "pl": 0.0, "flow": t.amount})
            else:
                rows.append({"date": t.date, "pl": 0.0, "flow": -t.amount})

        df = (
            pd.DataFrame(rows)
            .groupby("date", as_index=False)[["pl", "flow"]]
            .sum()
            .sort_values("date")
            .reset_index(drop=True)
        )
        df["net_profit"] = df["pl"].cumsum()
        df["invested_capital"] = df["flow"].cumsum()
        df["portfolio_value"] = df["invested_capital"] + df["net_profit"]
        return df
