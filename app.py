#!/usr/bin/env python3
"""
Pro Trade Journal - Streamlit Dashboard

交易列表是唯一数据源，存放在 session_state；所有指标/日历每次渲染重新推导。
写操作（新增/删除）通过显式回调传给页面，回调用整表替换后的列表刷新状态。
"""
import logging
from datetime import date
from typing import List, Optional, Tuple

import streamlit as st

from config import PAGE_CONFIG, VIEW_LABELS, StrategyType, TransactionType, ViewType
from db.connection import init_database
from frontend import page_dashboard, page_entry, page_settings
from models import InvalidAmountError, Transaction
from services import JournalService
from utils import month_start, shift_month, today_key

logger = logging.getLogger(__name__)

# 页面配置
st.set_page_config(**PAGE_CONFIG)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# 初始化数据库
init_database()


# ==================== 状态 ====================

def _init_state():
    ss = st.session_state
    if "transactions" not in ss:
        ss.transactions = JournalService.load()
    ss.setdefault("view", ViewType.OVERVIEW)
    ss.setdefault("month", month_start(date.today()))
    ss.setdefault("selected_date", None)
    ss.setdefault("entry_mode", "TRADE")


# ==================== 回调 ====================

def _open_entry(date_key: str, mode: str = "TRADE"):
    st.session_state.selected_date = date_key
    st.session_state.entry_mode = mode


def _close_entry():
    st.session_state.selected_date = None


def _shift_month(delta: int):
    st.session_state.month = shift_month(st.session_state.month, delta)


def _save(
    date_key: str,
    tx_type: TransactionType,
    strategy: StrategyType,
    amount: str,
    note: Optional[str],
) -> Tuple[List[Transaction], Optional[str]]:
    """保存新记录，返回 (当前全部交易, 错误信息)；金额非法时状态不变"""
    try:
        st.session_state.transactions = JournalService.create(
            date_key, tx_type, strategy, amount, note,
        )
    except InvalidAmountError as exc:
        logger.info("Rejected entry on %s: %s", date_key, exc)
        return st.session_state.transactions, str(exc)
    return st.session_state.transactions, None


def _delete(tx_id: str):
    st.session_state.transactions = JournalService.delete(tx_id)


def _clear():
    st.session_state.transactions = JournalService.clear()


# ==================== 主程序 ====================

def main():
    """主应用"""
    _init_state()
    ss = st.session_state

    st.sidebar.title("📅 Pro Trade Journal")
    page = st.sidebar.radio("导航", ["📊 Dashboard", "⚙️ 设置"])

    if page == "⚙️ 设置":
        page_settings(ss.transactions, on_clear=_clear)
        return

    ss.view = st.sidebar.radio(
        "视图", list(ViewType),
        index=list(ViewType).index(ss.view),
        format_func=lambda v: VIEW_LABELS[v],
    )

    st.sidebar.divider()
    st.sidebar.button("＋ 记录交易", on_click=_open_entry,
                      args=(today_key(), "TRADE"), use_container_width=True)
    st.sidebar.button("⇄ 入金 / 出金", on_click=_open_entry,
                      args=(today_key(), "TRANSFER"), use_container_width=True)

    if ss.selected_date:
        page_entry(
            ss.selected_date, ss.entry_mode, ss.view, ss.transactions,
            on_save=_save, on_delete=_delete, on_close=_close_entry,
        )

    page_dashboard(
        ss.transactions, ss.view, ss.month,
        on_select_day=_open_entry,
        on_shift_month=_shift_month,
        on_delete=_delete,
    )


if __name__ == "__main__":
    main()
