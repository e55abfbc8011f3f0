"""
全局配置 — 统一导出

使用方式：
    from config import TransactionType, StrategyType, ViewType
    from config.theme import COLORS
"""
from config.constants import (
    PAGE_CONFIG,
    STORAGE_KEY,
    RECENT_LIMIT,
    CALENDAR_SLOTS,
    DAYS_PER_WEEK,
    TransactionType,
    StrategyType,
    ViewType,
    TRANSFER_TYPES,
    STRATEGY_LABELS,
    VIEW_LABELS,
    TYPE_LABELS,
    WEEKDAY_HEADERS,
    parse_type,
    parse_strategy,
)

__all__ = [
    "PAGE_CONFIG",
    "STORAGE_KEY",
    "RECENT_LIMIT",
    "CALENDAR_SLOTS",
    "DAYS_PER_WEEK",
    "TransactionType",
    "StrategyType",
    "ViewType",
    "TRANSFER_TYPES",
    "STRATEGY_LABELS",
    "VIEW_LABELS",
    "TYPE_LABELS",
    "WEEKDAY_HEADERS",
    "parse_type",
    "parse_strategy",
]
