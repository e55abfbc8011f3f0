"""页面组件：当日录入面板 — 新增交易/入金/出金 · 当日活动"""
from typing import Callable, List, Optional, Tuple

import streamlit as st

from config import (
    STRATEGY_LABELS,
    TYPE_LABELS,
    StrategyType,
    TransactionType,
    ViewType,
)
from models import Transaction
from services import JournalService
from ui import UI

from .page_dashboard import render_transaction_row

# 录入模式 → 可选类型
MODE_TYPES = {
    "TRADE": [TransactionType.TRADE],
    "TRANSFER": [TransactionType.DEPOSIT, TransactionType.WITHDRAWAL],
}

# on_save 返回 (保存后的全部交易, 错误信息)
SaveResult = Tuple[List[Transaction], Optional[str]]
SaveCallback = Callable[[str, TransactionType, StrategyType, str, Optional[str]], SaveResult]


def default_strategy(view: ViewType) -> StrategyType:
    """表单默认策略：单策略视图下沿用该策略，总览下为 Day Trade"""
    if view is ViewType.OVERVIEW:
        return StrategyType.DAY_TRADE
    return StrategyType(view.value)


def submit_entry(
    on_save: SaveCallback,
    transactions: List[Transaction],
    date_key: str,
    tx_type: TransactionType,
    strategy: StrategyType,
    amount: str,
    note: Optional[str],
) -> SaveResult:
    """提交表单；失败时保留原列表，成功时返回保存后的列表供当日活动使用"""
    updated, error = on_save(date_key, tx_type, strategy, amount, note)
    if error:
        return transactions, error
    return updated, None


def page_entry(
    date_key: str,
    mode: str,
    view: ViewType,
    transactions: List[Transaction],
    *,
    on_save: SaveCallback,
    on_delete: Callable[[str], None],
    on_close: Callable[[], None],
):
    """
    录入面板

    Args:
        date_key:     选中日期
        mode:         "TRADE" | "TRANSFER"
        view:         当前视图（决定默认策略）
        transactions: 全部交易（当日活动不受视图筛选）
        on_save:      保存回调，返回 (保存后的全部交易, 错误信息)，成功时错误为 None
        on_delete:    按 ID 删除
        on_close:     关闭面板
    """
    title = "记录交易" if mode == "TRADE" else "入金 / 出金"
    with UI.expander(f"{title} · {date_key}", expanded=True, key="entry_panel"):
        with st.form(key=f"entry_form_{date_key}_{mode}", clear_on_submit=True):
            c1, c2 = st.columns(2)
            types = MODE_TYPES.get(mode, MODE_TYPES["TRADE"])
            tx_type = c1.radio(
                "类型", types, format_func=lambda t: TYPE_LABELS[t],
                horizontal=True,
            )
            strategies = list(StrategyType)
            strategy = c2.selectbox(
                "策略", strategies,
                index=strategies.index(default_strategy(view)),
                format_func=lambda s: STRATEGY_LABELS[s],
            )
            amount = st.text_input(
                "金额 ($)",
                placeholder="盈利填正数，亏损填负数" if mode == "TRADE" else "0.00",
            )
            note = st.text_input("备注（可选）")
            submitted = st.form_submit_button("💾 保存", use_container_width=True)

        if submitted:
            transactions, error = submit_entry(
                on_save, transactions, date_key, tx_type, strategy, amount, note,
            )
            if error:
                st.error(error)
            else:
                st.success("已保存")

        day_tx = JournalService.for_date(date_key, transactions)
        if day_tx:
            UI.sub_heading(f"{date_key} 当日活动")
            for tx in day_tx:
                render_transaction_row(tx, on_delete, key_prefix="day")

        st.button("关闭", key="entry_close", on_click=on_close)
