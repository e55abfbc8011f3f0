"""
主题配置 — 颜色、CSS、Plotly 布局

所有视觉风格的唯一定义处。UI 组件只引用此文件。
"""
from typing import Dict, Any

# ═══════════════════════════════════════════════════════
#  颜色定义（深色交易终端风格）
# ═══════════════════════════════════════════════════════

COLORS: Dict[str, str] = {
    # 背景
    "bg_main":     "#09090B",
    "bg_card":     "#18181B",
    "bg_cell":     "#111113",

    # 边框
    "border":      "#27272A",
    "border_light": "#3F3F46",

    # 文字
    "text":        "#F4F4F5",
    "text_muted":  "#71717A",

    # 盈亏色
    "gain":        "#34D399",
    "loss":        "#FB7185",
    "gain_bg":     "rgba(16, 185, 129, 0.12)",
    "loss_bg":     "rgba(244, 63, 94, 0.12)",

    # 本金流动
    "deposit":     "#60A5FA",
    "withdrawal":  "#FB923C",

    # 强调色
    "accent":      "#10B981",
}


# ═══════════════════════════════════════════════════════
#  全局 CSS
# ═══════════════════════════════════════════════════════

GLOBAL_CSS: str = """
<style>
    .stApp { background: #09090B; color: #F4F4F5; }
    .numeric { font-family: ui-monospace, 'SFMono-Regular', monospace; }
    .cal-cell {
        min-height: 84px;
        border: 1px solid #27272A;
        border-radius: 8px;
        padding: 6px 8px;
        background: #111113;
        margin-bottom: 6px;
    }
    .cal-cell.blank { background: transparent; border-color: transparent; }
    .cal-cell.today { border-color: #10B981; }
    .cal-day { font-size: 12px; color: #71717A; font-weight: 600; }
    .cal-pl { font-size: 15px; font-weight: 700; margin-top: 14px; }
    .cal-dot { display: inline-block; width: 6px; height: 6px;
               border-radius: 50%; background: #60A5FA; margin-left: 4px; }
    .cal-head { text-align: center; font-size: 12px; color: #71717A;
                text-transform: uppercase; letter-spacing: 0.05em; }
</style>
"""

# ═══════════════════════════════════════════════════════
#  移动端响应式 CSS
# ═══════════════════════════════════════════════════════

MOBILE_CSS: str = """
<style>
@media (max-width: 640px) {
    .cal-cell { min-height: 52px; padding: 4px; }
    .cal-pl { font-size: 11px; margin-top: 6px; }
}
</style>
"""


# ═══════════════════════════════════════════════════════
#  metric_cards 样式参数（streamlit-extras）
# ═══════════════════════════════════════════════════════

METRIC_CARD_STYLE: Dict[str, str] = {
    "background_color": "#18181B",
    "border_color": "#27272A",
    "border_left_color": "#10B981",
    "box_shadow": "0 0 6px rgba(0, 0, 0, 0.4)",
}


# ═══════════════════════════════════════════════════════
#  Plotly 布局默认配置
# ═══════════════════════════════════════════════════════

PLOTLY_LAYOUT_DEFAULTS: Dict[str, Any] = dict(
    template="plotly_dark",
    paper_bgcolor="rgba(0,0,0,0)",
    plot_bgcolor="rgba(0,0,0,0)",
    margin=dict(l=40, r=20, t=40, b=40),
    font=dict(size=13, color="#F4F4F5"),
    xaxis=dict(
        showgrid=False,
        zeroline=False,
        linecolor="#3F3F46",
        linewidth=1,
        tickfont=dict(size=12, color="#A1A1AA"),
    ),
    yaxis=dict(
        showgrid=True,
        gridcolor="#27272A",
        zeroline=False,
        linecolor="#3F3F46",
        linewidth=1,
        tickfont=dict(size=12, color="#A1A1AA"),
    ),
    hoverlabel=dict(
        bgcolor="#18181B",
        bordercolor="#3F3F46",
        font=dict(size=13, color="#F4F4F5"),
    ),
    legend=dict(
        font=dict(size=12, color="#A1A1AA"),
        bgcolor="rgba(0,0,0,0)",
        orientation="h",
    ),
)
