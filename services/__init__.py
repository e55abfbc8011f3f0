"""
业务逻辑层

目录结构：
- services/journal/    交易日志（账本汇总 / 日历投影 / 录入）

架构规则：
- services/ → db/ + models/ + config/ + utils/（可以调用）
- 绝对禁止：services/ → ui/、services/ → frontend/
"""
from services.journal import LedgerService, CalendarService, JournalService

__all__ = [
    "LedgerService",
    "CalendarService",
    "JournalService",
]
