"""工具函数 — 日期键与数值格式化（纯函数，无 DB / UI 依赖）"""
from utils.dates import (
    format_date_iso,
    today_key,
    days_in_month,
    first_weekday,
    month_name,
    month_start,
    shift_month,
)
from utils.formatting import (
    format_currency,
    format_percentage,
    format_profit_factor,
    format_compact,
    format_signed_amount,
)

__all__ = [
    "format_date_iso",
    "today_key",
    "days_in_month",
    "first_weekday",
    "month_name",
    "month_start",
    "shift_month",
    "format_currency",
    "format_percentage",
    "format_profit_factor",
    "format_compact",
    "format_signed_amount",
]
