"""
日期工具 — 规范日期键、月份信息

日期键统一为本地民用日期 YYYY-MM-DD，是日历格子与交易记录的连接键。
"""
from __future__ import annotations

import calendar
from datetime import date, datetime
from typing import Union

DateLike = Union[date, datetime]

# 英文月份全称（与系统 locale 无关）
_MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def to_local_date(value: DateLike) -> date:
    """
    转换为本地日期

    - date:            原样返回
    - naive datetime:  视为本地时间，直接取日期
    - aware datetime:  先转换到本地时区再取日期
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone()
        return value.date()
    return value


def format_date_iso(value: DateLike) -> str:
    """本地日期 → 'YYYY-MM-DD'（不经过 UTC 截断）"""
    return to_local_date(value).isoformat()


def today_key() -> str:
    """今天的日期键"""
    return format_date_iso(date.today())


def days_in_month(value: DateLike) -> int:
    """所在月份的天数"""
    d = to_local_date(value)
    return calendar.monthrange(d.year, d.month)[1]


def first_weekday(value: DateLike) -> int:
    """所在月份 1 号是星期几（0=周日 … 6=周六）"""
    d = to_local_date(value)
    return (date(d.year, d.month, 1).weekday() + 1) % 7


def month_name(value: DateLike) -> str:
    """英文月份全称，如 'February'"""
    return _MONTH_NAMES[to_local_date(value).month - 1]


def month_start(value: DateLike) -> date:
    """所在月份 1 号"""
    d = to_local_date(value)
    return date(d.year, d.month, 1)


def shift_month(value: DateLike, delta: int) -> date:
    """前后翻月：返回 delta 个月之后（可为负）那个月的 1 号"""
    d = to_local_date(value)
    index = d.year * 12 + (d.month - 1) + delta
    return date(index // 12, index % 12 + 1, 1)
