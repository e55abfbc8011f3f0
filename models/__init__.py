"""
数据模型模块 - 统一导出所有模型
"""
from .transaction import Transaction, normalize_note
from .stats import Metrics, CalendarSlot, DayStats
from .errors import JournalError, StorageReadError, InvalidAmountError

__all__ = [
    # 交易
    'Transaction',
    'normalize_note',
    # 派生统计
    'Metrics',
    'CalendarSlot',
    'DayStats',
    # 异常
    'JournalError',
    'StorageReadError',
    'InvalidAmountError',
]
