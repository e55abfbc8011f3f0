"""数值格式化 — 货币、百分比、盈亏因子、日历紧凑标签（美国习惯）"""
from __future__ import annotations

import math
from decimal import Decimal, ROUND_HALF_UP

from config import TransactionType

_COMPACT_UNITS = ("", "K", "M", "B", "T")


def _round_half_up(value: float, places: int) -> Decimal:
    quant = Decimal(1).scaleb(-places)
    return Decimal(repr(value)).quantize(quant, rounding=ROUND_HALF_UP)


def format_currency(amount: float) -> str:
    """
    美元整数格式：1234.5 → '$1,235'，-50 → '-$50'

    四舍五入后为 0 的负数显示为 '$0'。
    """
    if not math.isfinite(amount):
        return "$0"
    rounded = _round_half_up(abs(amount), 0)
    sign = "-" if amount < 0 and rounded != 0 else ""
    return f"{sign}${rounded:,.0f}"


def format_percentage(value: float) -> str:
    """
    已乘 100 的百分数 → 两位小数：53.2 → '53.20%'

    NaN / 无穷 → '0.00%'
    """
    if value is None or not math.isfinite(value):
        return "0.00%"
    return f"{_round_half_up(value, 2):,.2f}%"


def format_profit_factor(value: float) -> str:
    """盈亏因子：无穷显示 '∞'，其余两位小数"""
    if math.isinf(value) and value > 0:
        return "∞"
    if math.isnan(value):
        return "0.00"
    return f"{value:.2f}"


def format_compact(pl: float) -> str:
    """
    日历格子里的紧凑盈亏：1234 → '+1.2K'，-350 → '-350'，0 → '+0'

    最多一位小数，去掉末尾的 '.0'。
    """
    sign = "+" if pl >= 0 else "-"
    magnitude = abs(pl)
    unit = 0
    while magnitude >= 1000 and unit < len(_COMPACT_UNITS) - 1:
        magnitude /= 1000
        unit += 1
    rounded = _round_half_up(magnitude, 1)
    if rounded >= 1000 and unit < len(_COMPACT_UNITS) - 1:
        rounded = _round_half_up(float(rounded) / 1000, 1)
        unit += 1
    text = f"{rounded:.1f}".rstrip("0").rstrip(".")
    return f"{sign}{text}{_COMPACT_UNITS[unit]}"


def format_signed_amount(tx_type: TransactionType, amount: float) -> str:
    """历史表金额：出金前缀 '-'，非负金额前缀 '+'"""
    if tx_type is TransactionType.WITHDRAWAL:
        prefix = "-"
    elif amount >= 0:
        prefix = "+"
    else:
        prefix = ""
    return f"{prefix}{format_currency(amount)}"
