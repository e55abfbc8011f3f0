"""
交易类型与策略常量 — Single Source of Truth

本文件是整个系统中关于「交易类型」「策略标签」「视图」的唯一定义处。
任何新增/修改类型都只改这一个文件。
"""
from enum import Enum
from typing import Dict, List

# ═══════════════════════════════════════════════════════
#  Streamlit 页面配置
# ═══════════════════════════════════════════════════════

PAGE_CONFIG: Dict = dict(
    page_title="Pro Trade Journal",
    page_icon="📅",
    layout="wide",
    initial_sidebar_state="expanded",
)

# 持久化槽位名（kv_store 表的 key）
STORAGE_KEY: str = "pro-trade-data"

# 历史表默认只显示最近 N 条
RECENT_LIMIT: int = 5

# 日历固定 6 行 × 7 列
CALENDAR_SLOTS: int = 42
DAYS_PER_WEEK: int = 7

# ═══════════════════════════════════════════════════════
#  交易类型 — 互斥
# ═══════════════════════════════════════════════════════

class TransactionType(str, Enum):
    """
    交易记录类型（互斥，不可交叉）

    - TRADE:      交易盈亏（正=盈利，负=亏损）
    - DEPOSIT:    入金（金额非负，增加本金）
    - WITHDRAWAL: 出金（金额非负，减少本金）
    """
    TRADE      = "TRADE"
    DEPOSIT    = "DEPOSIT"
    WITHDRAWAL = "WITHDRAWAL"


# 本金流动类型（金额必须非负）
TRANSFER_TYPES = frozenset({TransactionType.DEPOSIT, TransactionType.WITHDRAWAL})


# ═══════════════════════════════════════════════════════
#  策略标签 — 仅用作筛选维度
# ═══════════════════════════════════════════════════════

class StrategyType(str, Enum):
    """交易策略标签（入金/出金也带策略，便于按视图筛选）"""
    DAY_TRADE = "DAY_TRADE"
    SWING     = "SWING"
    OPTIONS   = "OPTIONS"


class ViewType(str, Enum):
    """仪表盘视图：总览 或 单一策略"""
    OVERVIEW  = "OVERVIEW"
    DAY_TRADE = "DAY_TRADE"
    SWING     = "SWING"
    OPTIONS   = "OPTIONS"


STRATEGY_LABELS: Dict[StrategyType, str] = {
    StrategyType.DAY_TRADE: "Day Trade",
    StrategyType.SWING:     "Swing Trade",
    StrategyType.OPTIONS:   "Options",
}

VIEW_LABELS: Dict[ViewType, str] = {
    ViewType.OVERVIEW:  "Overview",
    ViewType.DAY_TRADE: "Day Trade",
    ViewType.SWING:     "Swing Trade",
    ViewType.OPTIONS:   "Options",
}

TYPE_LABELS: Dict[TransactionType, str] = {
    TransactionType.TRADE:      "交易",
    TransactionType.DEPOSIT:    "入金",
    TransactionType.WITHDRAWAL: "出金",
}

# 日历表头（周日起）
WEEKDAY_HEADERS: List[str] = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]


# ═══════════════════════════════════════════════════════
#  字符串 → 枚举 解析
# ═══════════════════════════════════════════════════════

def parse_type(value) -> TransactionType:
    """
    解析交易类型（入库/反序列化时调用）

    Raises:
        ValueError: 当 value 不是合法交易类型时抛出
    """
    try:
        return TransactionType(value)
    except ValueError:
        raise ValueError(
            f"未知交易类型: {value}，合法值: {[t.value for t in TransactionType]}"
        ) from None


def parse_strategy(value) -> StrategyType:
    """
    解析策略标签

    Raises:
        ValueError: 当 value 不是合法策略时抛出
    """
    try:
        return StrategyType(value)
    except ValueError:
        raise ValueError(
            f"未知策略: {value}，合法值: {[s.value for s in StrategyType]}"
        ) from None
