"""
UI 原子组件库 — 纯渲染，无业务逻辑

所有方法只做 HTML/Streamlit 渲染，不做任何业务计算。
依赖方向：ui/ → config/（主题）+ streamlit

设计原则：
- 用户文本经 html.escape() 转义
- 不引用 services/ / frontend/ / db/
"""
from __future__ import annotations

import html as _html
from contextlib import contextmanager
from typing import Any, Optional, Sequence, Tuple

import streamlit as st
from streamlit_extras.metric_cards import style_metric_cards
from streamlit_extras.stylable_container import stylable_container

from config.theme import COLORS, GLOBAL_CSS, MOBILE_CSS, METRIC_CARD_STYLE

_PANEL_CSS = (
    "{"
    f"border: 1px solid {COLORS['border']};"
    "border-radius: 12px;"
    f"background: {COLORS['bg_card']};"
    "padding: 8px 12px;"
    "}"
)


def _esc(text: Any) -> str:
    """HTML 转义"""
    return _html.escape(str(text)) if text is not None else ""


class UI:
    """
    原子级 UI 组件库

    使用示例::
        from ui import UI
        UI.inject_css()
        UI.header("交易日历", "Overview")
        UI.metric_row([("账户价值", "$12,400"), ("ROI", "3.20%")])
    """

    # ── 全局样式注入 ──

    @staticmethod
    def inject_css():
        """注入全局 CSS + 移动端响应式（每页调用一次）"""
        st.markdown(GLOBAL_CSS, unsafe_allow_html=True)
        st.markdown(MOBILE_CSS, unsafe_allow_html=True)
        style_metric_cards(**METRIC_CARD_STYLE)

    # ── 标题 ──

    @staticmethod
    def header(title: str, subtitle: str = ""):
        st.subheader(title)
        if subtitle:
            st.caption(subtitle)

    @staticmethod
    def sub_heading(title: str):
        st.markdown(f"### {title}")

    # ── 面板 ──

    @staticmethod
    @contextmanager
    def expander(title: str, *, expanded: bool = False, key: Optional[str] = None):
        """带边框的折叠面板"""
        safe_key = key or f"expander_{abs(hash(title))}"
        with stylable_container(key=safe_key, css_styles=_PANEL_CSS):
            with st.expander(title, expanded=expanded):
                yield

    # ── 指标行 ──

    @staticmethod
    def metric_row(items: Sequence[Tuple[str, str, ...]]):
        """水平排列的指标行: [(label, value), ...] 或 [(label, value, delta), ...]"""
        cols = st.columns(len(items))
        for col, item in zip(cols, items):
            label = item[0]
            value = item[1]
            delta = item[2] if len(item) > 2 else None
            col.metric(label=label, value=value, delta=delta)

    # ── 日历 ──

    @staticmethod
    def weekday_header(labels: Sequence[str]):
        cols = st.columns(len(labels))
        for col, label in zip(cols, labels):
            col.markdown(f'<div class="cal-head">{_esc(label)}</div>',
                         unsafe_allow_html=True)

    @staticmethod
    def calendar_cell(
        day: Optional[int],
        *,
        pl_text: str = "",
        pl: float = 0.0,
        has_trades: bool = False,
        has_transfers: bool = False,
        is_today: bool = False,
    ):
        """
        日历格子

        Args:
            day:           日号，None 为占位格
            pl_text:       紧凑盈亏文本（仅 has_trades 时显示）
            pl:            盈亏数值（决定颜色与底色）
            has_trades:    当日有交易
            has_transfers: 当日有入金/出金（显示蓝点）
            is_today:      高亮今天
        """
        if day is None:
            st.markdown('<div class="cal-cell blank"></div>', unsafe_allow_html=True)
            return

        classes = "cal-cell today" if is_today else "cal-cell"
        style = ""
        body = ""
        if has_trades:
            if pl > 0:
                style = f' style="background:{COLORS["gain_bg"]}"'
            elif pl < 0:
                style = f' style="background:{COLORS["loss_bg"]}"'
            color = UI.pnl_color(pl) if pl != 0 else COLORS["text_muted"]
            body = (f'<div class="cal-pl numeric" style="color:{color}">'
                    f'{_esc(pl_text)}</div>')
        dot = '<span class="cal-dot"></span>' if has_transfers else ""
        st.markdown(
            f'<div class="{classes}"{style}>'
            f'<div class="cal-day">{day}{dot}</div>{body}</div>',
            unsafe_allow_html=True,
        )

    # ── 徽章 ──

    @staticmethod
    def badge_html(text: str, color: str) -> str:
        return (
            f'<span style="font-size:10px;padding:2px 8px;border-radius:999px;'
            f'font-weight:700;text-transform:uppercase;letter-spacing:0.05em;'
            f'color:{color};border:1px solid {color}">{_esc(text)}</span>'
        )

    # ── 空状态 ──

    @staticmethod
    def empty(message: str = "暂无数据"):
        st.info(message)

    # ── 盈亏色 ──

    @staticmethod
    def pnl_color(value: float) -> str:
        """正值返回绿色，负值返回红色"""
        return COLORS["gain"] if value >= 0 else COLORS["loss"]

    @staticmethod
    def pnl_text(text: str, value: float) -> str:
        """带色彩的 HTML 数字文本"""
        return (f'<span class="numeric" style="color:{UI.pnl_color(value)};'
                f'font-weight:700">{_esc(text)}</span>')
