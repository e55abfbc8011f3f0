"""页面：设置 — 数据导出与数据库信息"""
from typing import Callable, List

import streamlit as st

from db.connection import get_db_path
from models import Transaction
from ui import UI

from .helpers import history_frame


def page_settings(transactions: List[Transaction], *, on_clear: Callable[[], None]):
    UI.inject_css()
    UI.header("设置", "Settings")

    UI.sub_heading("数据导出")
    if transactions:
        df = history_frame(sorted(transactions, key=lambda t: t.date))
        st.download_button(
            "导出 CSV",
            df.to_csv(index=False).encode("utf-8-sig"),
            file_name="trade_journal.csv",
            mime="text/csv",
        )
        st.caption(f"共 {len(transactions)} 条记录")
    else:
        UI.empty("暂无记录可导出")

    UI.sub_heading("数据库信息")
    db_path = get_db_path()
    if db_path.exists():
        size_kb = db_path.stat().st_size / 1024
        st.info(f"数据库路径: `{db_path}`\n\n大小: {size_kb:.1f} KB")
    else:
        st.warning("数据库文件不存在")

    UI.sub_heading("清空数据")
    confirm = st.checkbox("我确认要删除全部记录", key="confirm_clear")
    st.button("清空全部记录", key="btn_clear", disabled=not confirm,
              on_click=on_clear)
