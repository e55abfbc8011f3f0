"""交易日志服务"""
from .ledger import LedgerService
from .calendar import CalendarService
from .entries import JournalService, parse_amount

__all__ = ["LedgerService", "CalendarService", "JournalService", "parse_amount"]
