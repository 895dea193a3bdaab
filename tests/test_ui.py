import pytest

from services.memo_store import MemoStore
from services.memo_service import MemoListService
from ui.main_window import MainWindow


@pytest.fixture
def window(qapp, service):
    win = MainWindow(service)
    assert win.load()
    yield win
    win.close()


def _fill(window, title, content):
    window.detail_screen.title_field.setText(title)
    window.detail_screen.content_edit.setPlainText(content)


def _titles(window):
    memo_list = window.list_screen.memo_list
    return [memo_list.item(i).text() for i in range(memo_list.count())]


def test_add_memo_through_screens(window, storage):
    window.list_screen.new_memo_button.click()
    assert window.stack.currentIndex() == MainWindow.DETAIL_PAGE
    assert window.detail_screen.delete_button.isHidden()

    _fill(window, "Buy milk", "2% milk, oat milk")
    window.detail_screen.done_button.click()

    assert window.stack.currentIndex() == MainWindow.LIST_PAGE
    assert _titles(window) == ["Buy milk"]
    assert [m.content for m in MemoStore(storage).fetch_all()] == ["2% milk, oat milk"]


def test_edit_prefills_fields_and_updates_row(window):
    window.list_screen.new_memo_button.click()
    _fill(window, "first", "body")
    window.detail_screen.done_button.click()

    window.open_edit(0)
    assert window.detail_screen.title_field.text() == "first"
    assert window.detail_screen.content_edit.toPlainText() == "body"
    assert not window.detail_screen.delete_button.isHidden()

    window.detail_screen.title_field.setText("")
    window.detail_screen.done_button.click()
    assert _titles(window) == ["(無題)"]


def test_delete_and_cancel(window, service):
    for title in ("a", "b"):
        window.list_screen.new_memo_button.click()
        _fill(window, title, "")
        window.detail_screen.done_button.click()

    window.list_screen.new_memo_button.click()
    _fill(window, "discarded", "")
    window.detail_screen.cancel_button.click()
    assert _titles(window) == ["a", "b"]

    window.open_edit(0)
    window.detail_screen.delete_button.click()
    assert _titles(window) == ["b"]
    assert [m.title for m in service.memos] == ["b"]


def test_existing_memos_are_listed_on_load(qapp, store, storage, clock):
    seed = MemoListService(store)
    for title in ("old", "new"):
        seed.begin_add().done(title, "", now=clock())

    win = MainWindow(MemoListService(MemoStore(storage)))
    assert win.load()
    assert _titles(win) == ["new", "old"]
    win.close()
