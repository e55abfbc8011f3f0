"""
Plotly 图表工具 — 统一布局 + 渲染封装

依赖方向：ui/ → config/（主题）+ plotly + streamlit
"""
from __future__ import annotations

from typing import Any, Dict

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from config.theme import COLORS, PLOTLY_LAYOUT_DEFAULTS


def plotly_layout(**overrides: Any) -> Dict[str, Any]:
    """
    构建统一 Plotly 布局参数

    用法::
        fig.update_layout(**plotly_layout(height=320, hovermode="x unified"))
    """
    layout = dict(PLOTLY_LAYOUT_DEFAULTS)
    layout.update(overrides)
    return layout


def render_chart(fig: go.Figure, **kwargs: Any) -> None:
    """渲染 Plotly 图表（铺满容器、关闭工具栏）"""
    st.plotly_chart(
        fig,
        use_container_width=True,
        config={"displayModeBar": False},
        **kwargs,
    )


def equity_curve_figure(df: pd.DataFrame) -> go.Figure:
    """
    权益曲线：账户价值 + 累计盈亏 + 本金

    Args:
        df: LedgerService.equity_curve() 的结果
    """
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=df["date"], y=df["portfolio_value"], name="Portfolio",
        mode="lines", line=dict(color=COLORS["accent"], width=2),
    ))
    fig.add_trace(go.Scatter(
        x=df["date"], y=df["net_profit"], name="Net P/L",
        mode="lines", line=dict(color=COLORS["gain"], width=1.5, dash="dot"),
    ))
    fig.add_trace(go.Scatter(
        x=df["date"], y=df["invested_capital"], name="Invested",
        mode="lines", line=dict(color=COLORS["deposit"], width=1.5, shape="hv"),
    ))
    fig.update_layout(**plotly_layout(height=320, hovermode="x unified"))
    fig.update_yaxes(tickprefix="$", separatethousands=True)
    return fig
