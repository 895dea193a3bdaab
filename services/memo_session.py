# services/memo_session.py
from __future__ import annotations
from datetime import datetime
from typing import Callable, Optional

from .errors import InvalidSessionActionError, SessionFinishedError
from models.memo_models import EditorAction, Memo, SessionState

# セッション終了時に (セッション, 終了アクション) を受け取るコールバック
FinishCallback = Callable[["MemoEditorSession", EditorAction], None]


class MemoEditorSession:
    """
    1件のメモに対する作成・編集の1サイクルを表すクラス。

    セッションは EDITING 状態で始まり、完了・削除・キャンセルのいずれかで
    FINISHED 状態になります。終了時には必ず一度だけコールバックに
    (セッション, アクション) が通知されます。

    Attributes:
        memo (Memo): 編集対象のメモ。
        action (EditorAction): 作成時に決まるセッションの種類（ADD または EDIT）。
        row (Optional[int]): 編集対象の一覧上の行番号。作成時に確定する。
        state (SessionState): 現在の状態。
        result (EditorAction): 終了時に通知したアクション。終了前はNONE。
    """

    def __init__(
        self,
        memo: Memo,
        action: EditorAction,
        on_finished: FinishCallback,
        row: Optional[int] = None
    ) -> None:
        if action not in (EditorAction.ADD, EditorAction.EDIT):
            raise InvalidSessionActionError(f"セッションを開始できないアクションです: {action}")
        if action is EditorAction.EDIT and row is None:
            raise InvalidSessionActionError("編集セッションには行番号が必要です")
        self.memo: Memo = memo
        self.action: EditorAction = action
        self.row: Optional[int] = row
        self.state: SessionState = SessionState.EDITING
        self.result: EditorAction = EditorAction.NONE
        self._on_finished = on_finished

    @property
    def is_finished(self) -> bool:
        return self.state is SessionState.FINISHED

    @property
    def can_delete(self) -> bool:
        """削除ボタンを表示できるかどうか。編集セッションのみ削除できる。"""
        return self.action is EditorAction.EDIT

    def done(self, title: str, content: str, now: Optional[datetime] = None) -> None:
        """
        入力内容をメモに反映してセッションを終了する。

        Args:
            title (str): タイトル欄の入力内容。
            content (str): 本文欄の入力内容。
            now (Optional[datetime]): 保存日時。省略時は現在時刻。
        """
        self._ensure_editing()
        self.memo.date = now or datetime.now()
        self.memo.title = title
        self.memo.content = content
        self._finish(self.action)

    def delete(self) -> None:
        """メモの削除を通知してセッションを終了する。"""
        self._ensure_editing()
        if not self.can_delete:
            raise InvalidSessionActionError("新規作成中のメモは削除できません")
        self._finish(EditorAction.DELETE)

    def cancel(self) -> None:
        """メモを変更せずにセッションを終了する。"""
        self._ensure_editing()
        self._finish(EditorAction.CANCEL)

    def _ensure_editing(self) -> None:
        if self.is_finished:
            raise SessionFinishedError("このセッションは既に終了しています")

    def _finish(self, action: EditorAction) -> None:
        self.state = SessionState.FINISHED
        self.result = action
        self._on_finished(self, action)
