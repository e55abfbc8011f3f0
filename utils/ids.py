"""交易 ID 生成"""
import logging
import random
import string
import time
import uuid

logger = logging.getLogger(__name__)

_BASE36 = string.digits + string.ascii_lowercase


def _base36(n: int) -> str:
    if n == 0:
        return "0"
    out = []
    while n:
        n, r = divmod(n, 36)
        out.append(_BASE36[r])
    return "".join(reversed(out))


def fallback_id() -> str:
    """毫秒时间戳 base36 + 7 位随机 base36"""
    suffix = "".join(random.choice(_BASE36) for _ in range(7))
    return _base36(int(time.time() * 1000)) + suffix


def new_id() -> str:
    """新交易 ID：优先 uuid4，失败时退回时间戳 + 随机串"""
    try:
        return str(uuid.uuid4())
    except (OSError, NotImplementedError):
        logger.warning("uuid4 unavailable, falling back to timestamp id")
        return fallback_id()
