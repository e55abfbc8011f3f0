"""
键值槽位读写

纯数据访问：只认字符串，不关心 JSON 内容。
"""
from typing import Optional

from db.connection import get_connection


def get(key: str) -> Optional[str]:
    """读取槽位原文，不存在返回 None"""
    conn = get_connection()
    row = conn.execute(
        "SELECT value FROM kv_store WHERE key = ?", (key,)
    ).fetchone()
    conn.close()
    return row["value"] if row else None


def put(key: str, value: str) -> None:
    """整体覆盖写入槽位"""
    conn = get_connection()
    conn.execute("""
        INSERT INTO kv_store (key, value, updated_at)
        VALUES (?, ?, CURRENT_TIMESTAMP)
        ON CONFLICT(key) DO UPDATE SET
            value = excluded.value,
            updated_at = CURRENT_TIMESTAMP
    """, (key, value))
    conn.commit()
    conn.close()


def delete(key: str) -> bool:
    """删除槽位，返回是否存在"""
    conn = get_connection()
    cursor = conn.execute("DELETE FROM kv_store WHERE key = ?", (key,))
    conn.commit()
    deleted = cursor.rowcount > 0
    conn.close()
    return deleted
