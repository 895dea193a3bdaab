import json
from datetime import datetime, timezone

import pytest

from models.memo_models import Memo
from services.errors import MemoCommitError, MemoFetchError, StorageError
from services.memo_store import MemoStore


def _saved(store, title, when):
    memo = store.create_pending()
    memo.title = title
    memo.content = f"{title}の本文"
    memo.date = when
    return memo


def test_fetch_all_on_empty_storage_returns_empty_list(store):
    assert store.fetch_all() == []


def test_fetch_all_sorts_by_date_descending(store, storage):
    _saved(store, "古い", datetime(2024, 1, 1))
    _saved(store, "新しい", datetime(2024, 3, 1))
    _saved(store, "中間", datetime(2024, 2, 1))
    store.commit()

    fresh = MemoStore(storage)
    assert [m.title for m in fresh.fetch_all()] == ["新しい", "中間", "古い"]


def test_fetch_all_returns_same_instances(store):
    _saved(store, "a", datetime(2024, 1, 1))
    store.commit()
    first = store.fetch_all()
    second = store.fetch_all()
    assert first[0] is second[0]


def test_pending_memo_is_not_fetched_until_committed(store):
    memo = store.create_pending()
    assert memo.id
    assert store.pending == [memo]
    assert store.fetch_all() == []


def test_commit_keeps_unsaved_pending_memo_pending(store, storage):
    blank = store.create_pending()
    store.commit()

    assert store.pending == [blank]
    assert store.fetch_all() == []
    assert MemoStore(storage).fetch_all() == []


def test_commit_promotes_saved_pending_memo(store, storage):
    memo = _saved(store, "買い物", datetime(2024, 5, 1, 12, 30))
    store.commit()

    assert store.pending == []
    assert store.fetch_all() == [memo]

    reloaded = MemoStore(storage).fetch_all()
    assert len(reloaded) == 1
    assert reloaded[0].id == memo.id
    assert reloaded[0].title == "買い物"
    assert reloaded[0].date == datetime(2024, 5, 1, 12, 30)


def test_in_place_edit_is_persisted_on_commit(store, storage):
    memo = _saved(store, "before", datetime(2024, 1, 1))
    store.commit()
    memo.title = "after"
    store.commit()
    assert MemoStore(storage).fetch_all()[0].title == "after"


def test_delete_removes_memo_after_commit(store, storage):
    keep = _saved(store, "keep", datetime(2024, 1, 1))
    drop = _saved(store, "drop", datetime(2024, 1, 2))
    store.commit()

    store.delete(drop)
    assert store.fetch_all() == [keep]
    store.commit()

    assert [m.title for m in MemoStore(storage).fetch_all()] == ["keep"]


def test_delete_pending_memo_discards_it(store):
    memo = store.create_pending()
    store.delete(memo)
    assert store.pending == []


def test_delete_unknown_memo_raises(store):
    other = MemoStore().create_pending()
    other.date = datetime(2024, 1, 1)
    with pytest.raises(KeyError):
        store.delete(other)


def test_store_without_storage_works_in_memory():
    store = MemoStore()
    memo = _saved(store, "memory", datetime(2024, 1, 1))
    store.commit()
    assert store.fetch_all() == [memo]


def test_corrupt_file_raises_fetch_error(store, storage):
    with open(storage.get_path(MemoStore.MEMO_FILE_IDENTIFIER), "w", encoding="utf-8") as f:
        f.write("{not json")
    with pytest.raises(MemoFetchError):
        store.fetch_all()


def test_unexpected_file_shape_raises_fetch_error(store, storage):
    storage.save_json(MemoStore.MEMO_FILE_IDENTIFIER, {"id": "x"})
    with pytest.raises(MemoFetchError):
        store.fetch_all()


def test_commit_failure_raises_and_keeps_pending(store, monkeypatch):
    memo = _saved(store, "unsaved", datetime(2024, 1, 1))

    def fail(*args, **kwargs):
        raise StorageError("disk full")

    monkeypatch.setattr(store.storage_service, "save_json", fail)
    with pytest.raises(MemoCommitError):
        store.commit()
    assert store.pending == [memo]
    assert store.fetch_all() == []


def test_file_format(store, storage):
    memo = _saved(store, "形式", datetime(2024, 6, 1, 8, 0))
    memo.content = "本文"
    store.commit()
    with open(storage.get_path("memos.json"), encoding="utf-8") as f:
        data = json.load(f)
    assert data == [{
        "id": memo.id,
        "title": "形式",
        "content": "本文",
        "date": "2024-06-01T08:00:00",
    }]


def _write_raw(storage, records):
    storage.save_json(MemoStore.MEMO_FILE_IDENTIFIER, records)


def test_mixed_timezone_dates_are_sorted(store, storage):
    _write_raw(storage, [
        {"id": "naive", "title": "naive", "content": "", "date": "2024-01-01T09:00:00"},
        {"id": "aware", "title": "aware", "content": "", "date": "2024-01-02T09:00:00+09:00"},
    ])
    memos = store.fetch_all()
    assert [m.title for m in memos] == ["aware", "naive"]
    assert all(m.date.tzinfo is None for m in memos)


def test_aware_date_is_converted_to_local_time():
    memo = Memo.from_dict({"id": "x", "date": "2024-01-02T00:00:00+00:00"})
    expected = datetime(2024, 1, 2, tzinfo=timezone.utc).astimezone().replace(tzinfo=None)
    assert memo.date == expected


def test_duplicate_ids_raise_fetch_error(store, storage):
    _write_raw(storage, [
        {"id": "a", "title": "first", "content": "", "date": "2024-01-01T09:00:00"},
        {"id": "a", "title": "second", "content": "", "date": "2024-01-02T09:00:00"},
    ])
    with pytest.raises(MemoFetchError):
        store.fetch_all()
