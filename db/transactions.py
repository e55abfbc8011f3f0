"""
交易记录持久化 — 整表读写

整个交易列表以 JSON 数组存放在 STORAGE_KEY 槽位中。
所有写操作都是「读当前列表 → 生成新列表 → 整体覆盖」，单写者，后写覆盖。
"""
import json
import logging
import sqlite3
from typing import Any, Dict, List, Tuple

from config import STORAGE_KEY
from db import store
from models import Transaction, StorageReadError
from utils.ids import new_id

logger = logging.getLogger(__name__)


def _decode(raw: str) -> Tuple[List[Transaction], bool]:
    """
    JSON 原文 → 交易列表

    迁移规则：缺 ID 或 ID 重复的记录分配新 ID，ID 统一转为字符串。

    Returns:
        (交易列表, 是否发生了迁移)

    Raises:
        StorageReadError: 原文无法解析或任一记录非法
    """
    try:
        parsed = json.loads(raw)
    except ValueError as exc:
        raise StorageReadError(f"JSON 解析失败: {exc}") from exc
    if not isinstance(parsed, list):
        raise StorageReadError(f"槽位内容不是数组: {type(parsed).__name__}")

    migrated = False
    seen = set()
    out: List[Transaction] = []
    for idx, item in enumerate(parsed):
        if not isinstance(item, dict):
            raise StorageReadError(f"第 {idx} 条记录不是对象")
        record: Dict[str, Any] = dict(item)
        tx_id = record.get("id")
        if tx_id in (None, "") or str(tx_id) in seen:
            record["id"] = new_id()
            migrated = True
        elif not isinstance(tx_id, str):
            record["id"] = str(tx_id)
            migrated = True
        try:
            tx = Transaction.from_dict(record)
        except (KeyError, TypeError, ValueError) as exc:
            raise StorageReadError(f"第 {idx} 条记录非法: {exc!r}") from exc
        seen.add(tx.id)
        out.append(tx)
    return out, migrated


def load() -> List[Transaction]:
    """
    读取全部交易

    任何失败（槽位缺失 / 数据损坏 / 数据库不可读）都回退为空列表，只记日志不抛出。
    迁移过的列表会立即写回，保证 ID 在后续删除时稳定。
    """
    try:
        raw = store.get(STORAGE_KEY)
    except (sqlite3.Error, OSError):
        logger.exception("Failed to read transaction store")
        return []
    if raw is None:
        return []

    try:
        transactions, migrated = _decode(raw)
    except StorageReadError as exc:
        logger.warning("Failed to load transactions: %s", exc)
        return []

    if migrated:
        logger.info("Migrated transaction ids, rewriting %d records", len(transactions))
        try:
            save(transactions)
        except (sqlite3.Error, OSError):
            logger.exception("Failed to write back migrated ids")
    return transactions


def save(transactions: List[Transaction]) -> None:
    """整表覆盖写入"""
    payload = json.dumps(
        [tx.to_dict() for tx in transactions], ensure_ascii=False,
    )
    store.put(STORAGE_KEY, payload)


def add(tx: Transaction) -> List[Transaction]:
    """追加一条交易并写回，返回新列表"""
    updated = load() + [tx]
    save(updated)
    return updated


def delete(tx_id: str) -> List[Transaction]:
    """
    按 ID 删除并写回，返回新列表

    ID 不存在时为空操作：不写库，原样返回当前列表。
    """
    current = load()
    updated = [tx for tx in current if tx.id != tx_id]
    if len(updated) == len(current):
        logger.debug("Delete ignored, id not found: %s", tx_id)
        return current
    save(updated)
    logger.info("Deleted %s, remaining %d", tx_id, len(updated))
    return updated


def clear() -> None:
    """清空全部交易（设置页使用）"""
    store.delete(STORAGE_KEY)
