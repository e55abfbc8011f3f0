"""页面：交易仪表盘 Dashboard — 指标 · 权益曲线 · 日历 · 最近记录"""
from datetime import date
from typing import Callable, List

import streamlit as st

from config import TYPE_LABELS, VIEW_LABELS, WEEKDAY_HEADERS, TransactionType, ViewType
from config.theme import COLORS
from models import Transaction
from services import CalendarService, LedgerService
from ui import UI, equity_curve_figure, render_chart
from utils import format_compact, format_signed_amount, month_name, today_key

from .helpers import is_negative_flow, performance_items, summary_items


def page_dashboard(
    transactions: List[Transaction],
    view: ViewType,
    month: date,
    *,
    on_select_day: Callable[[str], None],
    on_shift_month: Callable[[int], None],
    on_delete: Callable[[str], None],
):
    """
    仪表盘

    Args:
        transactions:   全部交易（唯一数据源）
        view:           当前视图
        month:          日历所在月份（任意一天）
        on_select_day:  点击日历格子 → 打开当日录入面板
        on_shift_month: 翻月（-1 / +1）
        on_delete:      按 ID 删除
    """
    UI.inject_css()
    UI.header("交易日历", VIEW_LABELS[view])

    filtered = LedgerService.filter_by_view(transactions, view)
    metrics = LedgerService.aggregate(filtered)

    UI.metric_row(summary_items(metrics))
    UI.metric_row(performance_items(metrics))

    curve = LedgerService.equity_curve(filtered)
    if curve is not None:
        UI.sub_heading("权益曲线")
        render_chart(equity_curve_figure(curve), key="equity_curve")

    _calendar(filtered, month, on_select_day, on_shift_month)
    _history(filtered, on_delete)


def _calendar(
    filtered: List[Transaction],
    month: date,
    on_select_day: Callable[[str], None],
    on_shift_month: Callable[[int], None],
):
    """月历：每格显示当日交易盈亏，蓝点表示有入金/出金"""
    c_prev, c_title, c_next = st.columns([1, 4, 1])
    c_prev.button("◀", key="cal_prev", on_click=on_shift_month, args=(-1,),
                  use_container_width=True)
    c_title.markdown(
        f"<h3 style='text-align:center;margin:0'>{month_name(month)} {month.year}</h3>",
        unsafe_allow_html=True,
    )
    c_next.button("▶", key="cal_next", on_click=on_shift_month, args=(1,),
                  use_container_width=True)

    UI.weekday_header(WEEKDAY_HEADERS)
    stats_for = CalendarService.day_stats_lookup(filtered)
    today = today_key()

    slots = CalendarService.project(month)
    for week in CalendarService.weeks(slots):
        cols = st.columns(len(WEEKDAY_HEADERS))
        for col, slot in zip(cols, week):
            with col:
                if slot.is_blank:
                    UI.calendar_cell(None)
                    continue
                ds = stats_for(slot.date_key)
                UI.calendar_cell(
                    slot.day,
                    pl_text=format_compact(ds.pl) if ds.has_trades else "",
                    pl=ds.pl,
                    has_trades=ds.has_trades,
                    has_transfers=any(not t.is_trade for t in ds.transactions),
                    is_today=slot.date_key == today,
                )
                st.button("＋", key=f"cal_day_{slot.date_key}",
                          on_click=on_select_day, args=(slot.date_key,),
                          use_container_width=True)


def _history(filtered: List[Transaction], on_delete: Callable[[str], None]):
    """最近记录（最新 5 条），每行带删除按钮"""
    UI.sub_heading("历史记录")
    if not filtered:
        UI.empty("当前视图暂无交易记录")
        return

    for tx in LedgerService.recent(filtered):
        render_transaction_row(tx, on_delete, key_prefix="hist")
    st.caption("仅显示最近 5 条记录")


def render_transaction_row(
    tx: Transaction,
    on_delete: Callable[[str], None],
    *,
    key_prefix: str,
):
    """单条交易行：日期 · 类型 · 金额 · 备注 · 删除"""
    c_date, c_type, c_amount, c_note, c_del = st.columns([2, 2, 2, 4, 1])
    c_date.markdown(tx.date)
    badge_color = {
        TransactionType.TRADE: COLORS["text_muted"],
        TransactionType.DEPOSIT: COLORS["deposit"],
        TransactionType.WITHDRAWAL: COLORS["withdrawal"],
    }[tx.type]
    c_type.markdown(UI.badge_html(TYPE_LABELS[tx.type], badge_color),
                    unsafe_allow_html=True)
    sign_value = -1 if is_negative_flow(tx) else 1
    c_amount.markdown(
        UI.pnl_text(format_signed_amount(tx.type, tx.amount), sign_value),
        unsafe_allow_html=True,
    )
    c_note.caption(tx.note or "-")
    c_del.button("🗑", key=f"{key_prefix}_del_{tx.id}", help="删除",
                 on_click=on_delete, args=(tx.id,))
