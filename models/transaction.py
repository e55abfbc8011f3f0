"""
交易数据模型
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Optional

from config import (
    TransactionType,
    StrategyType,
    parse_type,
    parse_strategy,
)


def _check_date_key(value: Any) -> str:
    """校验规范日期键 YYYY-MM-DD，非法时抛 ValueError"""
    if not isinstance(value, str):
        raise ValueError(f"日期必须是字符串: {value!r}")
    parsed = date.fromisoformat(value)
    if parsed.isoformat() != value:
        raise ValueError(f"日期不是规范格式 YYYY-MM-DD: {value!r}")
    return value


def normalize_note(note: Optional[str]) -> Optional[str]:
    """备注归一化：空串/纯空白 → None"""
    if note is None:
        return None
    note = str(note).strip()
    return note or None


@dataclass(frozen=True)
class Transaction:
    """
    交易记录（创建后不可变）

    金额约定：
    - TRADE:      正数 = 盈利，负数 = 亏损
    - DEPOSIT:    非负，增加本金
    - WITHDRAWAL: 非负，减少本金（符号由 type 决定，不存负数）

    示例：
    - 日内盈利 $250: Transaction(id, "2026-03-02", TRADE, DAY_TRADE, 250.0)
    - 入金 $5000:    Transaction(id, "2026-03-01", DEPOSIT, SWING, 5000.0)
    """

    id: str                          # 唯一 ID，创建时生成
    date: str                        # YYYY-MM-DD
    type: TransactionType            # TRADE | DEPOSIT | WITHDRAWAL
    strategy: StrategyType           # DAY_TRADE | SWING | OPTIONS
    amount: float                    # 金额
    note: Optional[str] = None       # 备注

    def __post_init__(self):
        """数据验证 + 枚举转换"""
        if not isinstance(self.id, str) or not self.id:
            raise ValueError(f"交易 ID 必须是非空字符串: {self.id!r}")
        _check_date_key(self.date)
        object.__setattr__(self, "type", parse_type(self.type))
        object.__setattr__(self, "strategy", parse_strategy(self.strategy))

        if isinstance(self.amount, bool):
            raise ValueError(f"金额必须是数字: {self.amount!r}")
        try:
            amount = float(self.amount)
        except OverflowError:
            raise ValueError(f"金额超出浮点范围: {self.amount!r}") from None
        if not math.isfinite(amount):
            raise ValueError(f"金额必须是有限数: {self.amount!r}")
        object.__setattr__(self, "amount", amount)
        object.__setattr__(self, "note", normalize_note(self.note))

    @property
    def is_trade(self) -> bool:
        return self.type is TransactionType.TRADE

    def to_dict(self) -> Dict[str, Any]:
        """序列化为 JSON 友好的 dict（note 为空时省略）"""
        d: Dict[str, Any] = {
            "id": self.id,
            "date": self.date,
            "type": self.type.value,
            "strategy": self.strategy.value,
            "amount": self.amount,
        }
        if self.note is not None:
            d["note"] = self.note
        return d

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Transaction":
        """
        从 dict 反序列化

        Raises:
            KeyError:   缺少必填字段
            ValueError: 字段非法
        """
        return cls(
            id=str(d["id"]),
            date=d["date"],
            type=d["type"],
            strategy=d["strategy"],
            amount=d["amount"],
            note=d.get("note"),
        )
