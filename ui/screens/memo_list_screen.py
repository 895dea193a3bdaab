# ui/screens/memo_list_screen.py
"""
メモ一覧画面のUIコンポーネントを提供します。

このモジュールには、保存済みメモのタイトルを一覧表示し、新規作成や
編集画面への遷移を要求する MemoListScreen クラスが含まれています。
"""
from typing import Optional

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (QWidget, QVBoxLayout, QHBoxLayout, QListWidget,
                             QListWidgetItem, QPushButton, QLabel)

from models.memo_models import EditorAction
from services.memo_service import MemoListService, ReconcileResult


class MemoListScreen(QWidget):
    """
    メモ一覧画面のメインウィジェット。

    MemoListService のキャッシュをデータソースとして、1行に1件のメモの
    タイトルを表示します。行の選択で編集、「新規メモ」ボタンで追加を要求します。
    """

    add_requested = pyqtSignal()
    edit_requested = pyqtSignal(int)

    DEFAULT_FONT_SIZE: int = 14

    def __init__(self, service: MemoListService, parent: Optional[QWidget] = None) -> None:
        """
        MemoListScreenのコンストラクタ。

        Args:
            service (MemoListService): 一覧のデータを提供するサービス。
            parent (Optional[QWidget]): 親ウィジェット。
        """
        super().__init__(parent)
        self.service = service

        # --- UI要素の型定義 ---
        self.memo_list: QListWidget
        self.new_memo_button: QPushButton

        self.setup_ui()
        self.setup_connections()

    def setup_ui(self) -> None:
        """UIの構築とレイアウト設定を行う。"""
        layout = QVBoxLayout(self)

        header_layout = QHBoxLayout()
        header_layout.addWidget(QLabel("メモ"))
        header_layout.addStretch()
        self.new_memo_button = QPushButton("新規メモ")
        header_layout.addWidget(self.new_memo_button)
        layout.addLayout(header_layout)

        self.memo_list = QListWidget()
        self.memo_list.setFont(QFont(self.memo_list.font().family(), self.DEFAULT_FONT_SIZE))
        layout.addWidget(self.memo_list)

    def setup_connections(self) -> None:
        """UI要素のシグナルとスロットを接続する。"""
        self.new_memo_button.clicked.connect(self.add_requested.emit)
        self.memo_list.itemActivated.connect(self._on_item_activated)
        self.memo_list.itemClicked.connect(self._on_item_activated)

    def reload(self) -> None:
        """キャッシュの内容で一覧全体を作り直す。"""
        self.memo_list.clear()
        for row in range(self.service.memo_count()):
            self.memo_list.addItem(QListWidgetItem(self.service.display_title(row)))

    def apply_result(self, result: ReconcileResult) -> None:
        """
        編集セッションの反映結果に合わせて、変更された行だけを更新する。

        Args:
            result (ReconcileResult): MemoListServiceが返した反映結果。
        """
        row = result.row
        if result.action is EditorAction.ADD:
            self.memo_list.addItem(QListWidgetItem(self.service.display_title(row)))
        elif result.action is EditorAction.EDIT:
            self.memo_list.item(row).setText(self.service.display_title(row))
        elif result.action is EditorAction.DELETE:
            self.memo_list.takeItem(row)
        self.memo_list.clearSelection()

    def _on_item_activated(self, item: QListWidgetItem) -> None:
        """行が選択されたときに、その行の編集を要求する。"""
        self.edit_requested.emit(self.memo_list.row(item))
