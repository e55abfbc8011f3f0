"""
数据库访问层 — 统一导出

使用方式：
    from db import connection, store, transactions

    # 或者
    import db
    db.transactions.add(tx)
    db.transactions.load()
"""
from db import connection
from db import store
from db import transactions

__all__ = [
    "connection",
    "store",
    "transactions",
]
