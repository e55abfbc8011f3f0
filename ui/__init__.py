"""
UI 组件库 — 统一导出

依赖方向：ui/ → config/ + streamlit
不引用 services/ / frontend/
"""
from .components import UI
from .charts import plotly_layout, render_chart, equity_curve_figure

__all__ = [
    "UI",
    "plotly_layout",
    "render_chart",
    "equity_curve_figure",
]
