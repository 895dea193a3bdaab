# ui/screens/memo_detail_screen.py
"""
メモ詳細（作成・編集）画面のUIコンポーネントを提供します。

このモジュールには、1件のメモのタイトルと本文を編集し、完了・削除・
キャンセルのいずれかで編集セッションを終了させる MemoDetailScreen クラスが
含まれています。
"""
from typing import Optional

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import (QWidget, QVBoxLayout, QHBoxLayout, QLineEdit,
                             QPlainTextEdit, QPushButton, QMessageBox)

from services.errors import MemoStoreError
from services.memo_session import MemoEditorSession


class MemoDetailScreen(QWidget):
    """
    メモ詳細画面のメインウィジェット。

    表示前に set_session() で編集セッションを受け取り、入力欄をメモの内容で
    初期化します。削除ボタンは編集セッションの場合のみ表示されます。
    セッションが終了すると closed シグナルを送出します。
    """

    closed = pyqtSignal()

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        """
        MemoDetailScreenのコンストラクタ。

        Args:
            parent (Optional[QWidget]): 親ウィジェット。
        """
        super().__init__(parent)
        self.session: Optional[MemoEditorSession] = None

        # --- UI要素の型定義 ---
        self.cancel_button: QPushButton
        self.delete_button: QPushButton
        self.done_button: QPushButton
        self.title_field: QLineEdit
        self.content_edit: QPlainTextEdit

        self.setup_ui()
        self.setup_connections()

    def setup_ui(self) -> None:
        """UIの構築とレイアウト設定を行う。"""
        layout = QVBoxLayout(self)

        button_layout = QHBoxLayout()
        self.cancel_button = QPushButton("キャンセル")
        self.delete_button = QPushButton("削除")
        self.done_button = QPushButton("完了")
        button_layout.addWidget(self.cancel_button)
        button_layout.addStretch()
        button_layout.addWidget(self.delete_button)
        button_layout.addWidget(self.done_button)
        layout.addLayout(button_layout)

        self.title_field = QLineEdit()
        self.title_field.setPlaceholderText("タイトル")
        layout.addWidget(self.title_field)

        self.content_edit = QPlainTextEdit()
        layout.addWidget(self.content_edit)

    def setup_connections(self) -> None:
        """UI要素のシグナルとスロットを接続する。"""
        self.done_button.clicked.connect(self.done_tapped)
        self.delete_button.clicked.connect(self.delete_tapped)
        self.cancel_button.clicked.connect(self.cancel_tapped)

    def set_session(self, session: MemoEditorSession) -> None:
        """
        編集するセッションを設定し、入力欄をメモの内容で初期化する。

        Args:
            session (MemoEditorSession): 開始済みの編集セッション。
        """
        self.session = session
        self.title_field.setText(session.memo.title)
        self.content_edit.setPlainText(session.memo.content)
        self.delete_button.setVisible(session.can_delete)
        self.title_field.setFocus()

    def done_tapped(self) -> None:
        """入力内容でメモを確定する。"""
        self._finish_with(
            lambda s: s.done(self.title_field.text(), self.content_edit.toPlainText())
        )

    def delete_tapped(self) -> None:
        """編集中のメモを削除する。"""
        self._finish_with(lambda s: s.delete())

    def cancel_tapped(self) -> None:
        """変更を破棄して一覧に戻る。"""
        self._finish_with(lambda s: s.cancel())

    def _finish_with(self, operation) -> None:
        """セッションを終了させ、保存エラーがあれば通知してから画面を閉じる。"""
        if self.session is None or self.session.is_finished:
            return
        try:
            operation(self.session)
        except MemoStoreError as exc:
            QMessageBox.critical(self, "保存エラー", f"メモの保存に失敗しました。\n{exc}")
        self.session = None
        self.closed.emit()
