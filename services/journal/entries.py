"""
交易录入服务 — 表单校验 + 新增 / 删除

写入边界：金额在这里校验，非法输入不产生任何记录，也不写库。
"""
from __future__ import annotations

import logging
import math
import re
from typing import List, Optional, Union

import db
from config import TRANSFER_TYPES, StrategyType, TransactionType, parse_strategy, parse_type
from models import InvalidAmountError, Transaction
from utils.ids import new_id

logger = logging.getLogger(__name__)

AmountInput = Union[str, int, float, None]

# 千分位只接受 1,234 / 12,345.67 这种规范写法
_GROUPED = re.compile(r"^[+-]?\d{1,3}(,\d{3})+(\.\d+)?$")


def parse_amount(raw: AmountInput, tx_type: TransactionType) -> float:
    """
    表单金额 → float

    Raises:
        InvalidAmountError: 空值 / 非数字 / NaN / 无穷 / 入金出金为负
    """
    if raw is None or isinstance(raw, bool):
        raise InvalidAmountError("请输入金额")
    if isinstance(raw, str):
        raw = raw.strip()
        if not raw:
            raise InvalidAmountError("请输入金额")
        if "," in raw:
            if not _GROUPED.match(raw):
                raise InvalidAmountError(f"金额不是数字: {raw!r}")
            raw = raw.replace(",", "")
    try:
        amount = float(raw)
    except (TypeError, ValueError, OverflowError):
        raise InvalidAmountError(f"金额不是数字: {raw!r}") from None
    if not math.isfinite(amount):
        raise InvalidAmountError(f"金额必须是有限数: {raw!r}")
    if tx_type in TRANSFER_TYPES and amount < 0:
        raise InvalidAmountError("入金/出金金额不能为负，方向由类型决定")
    return amount


class JournalService:
    """
    交易录入服务

    新增/删除都是整表替换（读 → 新列表 → 覆盖），返回替换后的列表，
    调用方用返回值刷新界面状态。
    """

    @staticmethod
    def load() -> List[Transaction]:
        """读取全部交易（损坏/缺失时为空列表）"""
        return db.transactions.load()

    @staticmethod
    def build(
        date_key: str,
        tx_type: Union[TransactionType, str],
        strategy: Union[StrategyType, str],
        amount: AmountInput,
        note: Optional[str] = None,
    ) -> Transaction:
        """
        构造新交易（生成 ID，不写库）

        Raises:
            InvalidAmountError: 金额非法
            ValueError:         类型/策略/日期非法
        """
        tx_type = parse_type(tx_type)
        value = parse_amount(amount, tx_type)
        return Transaction(
            id=new_id(),
            date=date_key,
            type=tx_type,
            strategy=parse_strategy(strategy),
            amount=value,
            note=note,
        )

    @staticmethod
    def create(
        date_key: str,
        tx_type: Union[TransactionType, str],
        strategy: Union[StrategyType, str],
        amount: AmountInput,
        note: Optional[str] = None,
    ) -> List[Transaction]:
        """
        校验并保存一条新交易

        Returns:
            保存后的完整交易列表

        Raises:
            InvalidAmountError: 金额非法（未写库）
        """
        tx = JournalService.build(date_key, tx_type, strategy, amount, note)
        updated = db.transactions.add(tx)
        logger.info("Saved %s %s on %s (%s)", tx.type.value, tx.amount, tx.date, tx.id)
        return updated

    @staticmethod
    def delete(tx_id: str) -> List[Transaction]:
        """按 ID 删除；ID 不存在时为空操作"""
        return db.transactions.delete(str(tx_id))

    @staticmethod
    def clear() -> List[Transaction]:
        """清空全部交易"""
        db.transactions.clear()
        logger.info("Cleared all transactions")
        return []

    @staticmethod
    def for_date(
        date_key: str,
        transactions: List[Transaction],
    ) -> List[Transaction]:
        """某日的全部交易（不受视图筛选影响，用于录入面板的当日活动）"""
        return [t for t in transactions if t.date == date_key]
