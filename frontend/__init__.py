"""前端模块 - 所有页面"""
from .page_dashboard import page_dashboard
from .page_entry import page_entry
from .page_settings import page_settings

__all__ = [
    "page_dashboard",
    "page_entry",
    "page_settings",
]
