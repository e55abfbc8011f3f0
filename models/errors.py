"""
异常定义

- StorageReadError:   持久化数据损坏/缺失（db 层内部捕获，回退空列表）
- InvalidAmountError: 表单金额非法（拒绝保存，不产生任何状态变化）
"""


class JournalError(Exception):
    """交易日志基础异常"""


class StorageReadError(JournalError):
    """持久化槽位无法解析为交易列表"""


class InvalidAmountError(JournalError, ValueError):
    """金额输入非法：非数字 / NaN / 无穷 / 入金出金为负"""
