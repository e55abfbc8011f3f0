"""交易 ID 生成测试。"""
from __future__ import annotations

import uuid

import pytest

from utils import ids


def test_new_id_is_uuid():
    value = ids.new_id()
    assert str(uuid.UUID(value)) == value


@pytest.mark.parametrize("exc", [OSError("no entropy"), NotImplementedError("no randomness source")])
def test_new_id_falls_back_without_uuid(monkeypatch, exc):
    def _boom():
        raise exc

    monkeypatch.setattr(ids.uuid, "uuid4", _boom)
    value = ids.new_id()
    assert value.isalnum()
    assert len(value) > 7
    assert value != ids.new_id()
