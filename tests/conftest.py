import os
from datetime import datetime, timedelta

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from services.memo_service import MemoListService
from services.memo_store import MemoStore
from services.storage_service import StorageService


@pytest.fixture
def storage(tmp_path):
    return StorageService(str(tmp_path / "data"))


@pytest.fixture
def store(storage):
    return MemoStore(storage)


@pytest.fixture
def service(store):
    return MemoListService(store)


@pytest.fixture
def clock():
    """呼び出すたびに1分ずつ進む時刻を返す。"""
    base = datetime(2024, 4, 1, 9, 0, 0)
    ticks = iter(range(10_000))
    return lambda: base + timedelta(minutes=next(ticks))


@pytest.fixture(scope="session")
def qapp():
    from PyQt6.QtWidgets import QApplication
    app = QApplication.instance() or QApplication([])
    yield app
