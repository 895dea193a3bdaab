# ui/main_window.py
from PyQt6.QtWidgets import QMainWindow, QStackedWidget, QMessageBox

from services.errors import MemoStoreError
from services.memo_service import MemoListService, ReconcileResult
from ui.screens.memo_detail_screen import MemoDetailScreen
from ui.screens.memo_list_screen import MemoListScreen
from utils.logging_utils import get_logger

logger = get_logger("main_window")


class MainWindow(QMainWindow):
    """
    メモ一覧画面と詳細画面を切り替えて表示するメインウィンドウ。

    一覧から追加・編集が要求されると MemoListService で編集セッションを開始し、
    詳細画面に渡します。セッションの結果は一覧に反映され、一覧画面に戻ります。
    """
    LIST_PAGE = 0
    DETAIL_PAGE = 1

    def __init__(self, service: MemoListService):
        super().__init__()
        self.setWindowTitle("ANMemo")
        self.setGeometry(100, 100, 480, 640)
        self.service = service
        self._result_applied = False

        self.stack = QStackedWidget()
        self.list_screen = MemoListScreen(service)
        self.detail_screen = MemoDetailScreen()
        self.stack.addWidget(self.list_screen)
        self.stack.addWidget(self.detail_screen)
        self.setCentralWidget(self.stack)

        self.list_screen.add_requested.connect(self.open_add)
        self.list_screen.edit_requested.connect(self.open_edit)
        self.detail_screen.closed.connect(self.show_list)

    def load(self) -> bool:
        """メモ一覧を読み込んで表示する。失敗した場合はエラーを表示してFalseを返す。"""
        try:
            self.service.load_once()
        except MemoStoreError as exc:
            logger.error("メモ一覧の読み込みに失敗しました: %s", exc)
            QMessageBox.critical(self, "読み込みエラー", f"メモ一覧を読み込めませんでした。\n{exc}")
            return False
        self.list_screen.reload()
        return True

    def open_add(self):
        if self.stack.currentIndex() == self.DETAIL_PAGE:
            return
        self._open_session(self.service.begin_add(on_finished=self._on_result))

    def open_edit(self, row: int):
        if self.stack.currentIndex() == self.DETAIL_PAGE:
            return
        if not 0 <= row < self.service.memo_count():
            return
        self._open_session(self.service.begin_edit(row, on_finished=self._on_result))

    def show_list(self):
        # 保存エラーで結果が反映されなかった場合は一覧全体を作り直す
        if not self._result_applied:
            self.list_screen.reload()
        self.stack.setCurrentIndex(self.LIST_PAGE)

    def _open_session(self, session):
        self._result_applied = False
        self.detail_screen.set_session(session)
        self.stack.setCurrentIndex(self.DETAIL_PAGE)

    def _on_result(self, result: ReconcileResult):
        self.list_screen.apply_result(result)
        self._result_applied = True
