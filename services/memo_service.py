# services/memo_service.py
from dataclasses import dataclass
from typing import Callable, List, Optional

from .memo_session import MemoEditorSession
from .memo_store import MemoStore
from models.memo_models import EditorAction, Memo
from utils.logging_utils import get_logger

logger = get_logger("memo_service")

UNTITLED_LABEL = "(無題)"


@dataclass(frozen=True)
class ReconcileResult:
    """編集セッションの結果を一覧に反映した内容。

    Attributes:
        action (EditorAction): 反映したアクション。
        row (Optional[int]): 変更された行。変更がない場合はNone。
    """
    action: EditorAction
    row: Optional[int] = None


ResultListener = Callable[[ReconcileResult], None]


class MemoListService:
    """メモ一覧画面と編集画面の間でメモを同期させるサービスクラス。

    ストアから一度だけ読み込んだメモをキャッシュとして保持し、
    編集セッションの結果（追加・編集・削除・キャンセル）をキャッシュと
    ストアの両方に反映します。
    """

    def __init__(self, store: MemoStore) -> None:
        """MemoListServiceのコンストラクタ。

        Args:
            store (MemoStore): メモの永続化を担当するストア。
        """
        self.store = store
        self._memos: Optional[List[Memo]] = None

    @property
    def memos(self) -> List[Memo]:
        """キャッシュされたメモ一覧。初回アクセス時に読み込まれる。"""
        return self.load_once()

    @property
    def is_loaded(self) -> bool:
        return self._memos is not None

    def load_once(self) -> List[Memo]:
        """ストアからメモ一覧を読み込む。2回目以降は再取得しない。

        Raises:
            MemoFetchError: 読み込みに失敗した場合。
        """
        if self._memos is None:
            self._memos = self.store.fetch_all()
            logger.info("メモ一覧をキャッシュしました（%d件）", len(self._memos))
        return self._memos

    def memo_count(self) -> int:
        return len(self.memos)

    def memo_at(self, row: int) -> Memo:
        return self.memos[row]

    def display_title(self, row: int) -> str:
        """一覧に表示するタイトル。空の場合はプレースホルダーを返す。"""
        return self.memo_at(row).title or UNTITLED_LABEL

    def begin_add(self, on_finished: Optional[ResultListener] = None) -> MemoEditorSession:
        """新規メモの編集セッションを開始する。

        Args:
            on_finished (Optional[Callable]): 結果の反映後に呼ばれるリスナー。

        Returns:
            MemoEditorSession: 追加モードのセッション。
        """
        memo = self.store.create_pending()
        return MemoEditorSession(
            memo, EditorAction.ADD, self._make_callback(on_finished)
        )

    def begin_edit(self, row: int, on_finished: Optional[ResultListener] = None) -> MemoEditorSession:
        """既存メモの編集セッションを開始する。行番号はこの時点で確定する。

        Args:
            row (int): 編集するメモの行番号。
            on_finished (Optional[Callable]): 結果の反映後に呼ばれるリスナー。

        Raises:
            IndexError: 行番号が範囲外の場合。
        """
        memos = self.memos
        if not 0 <= row < len(memos):
            raise IndexError(f"行番号が範囲外です: {row}")
        return MemoEditorSession(
            memos[row], EditorAction.EDIT, self._make_callback(on_finished), row=row
        )

    def on_session_finished(self, session: MemoEditorSession, action: EditorAction) -> ReconcileResult:
        """
        セッションの終了アクションをキャッシュに反映し、ストアに保存する。

        保存はアクションに関係なく必ず行う。

        Args:
            session (MemoEditorSession): 終了したセッション。
            action (EditorAction): セッションが通知したアクション。

        Returns:
            ReconcileResult: 変更された行の情報。

        Raises:
            MemoCommitError: 保存に失敗した場合。キャッシュへの変更は取り消されない。
        """
        memos = self.memos
        memo = session.memo
        result = ReconcileResult(action)

        if action is EditorAction.ADD:
            memos.append(memo)
            result = ReconcileResult(action, len(memos) - 1)
        elif action is EditorAction.EDIT:
            row = session.row
            memos[row] = memo
            result = ReconcileResult(action, row)
        elif action is EditorAction.DELETE:
            row = session.row
            removed = memos.pop(row)
            self.store.delete(removed)
            result = ReconcileResult(action, row)

        logger.debug("セッション結果を反映しました: %s (row=%s)", action.value, result.row)
        self.store.commit()
        return result

    def _make_callback(self, listener: Optional[ResultListener]):
        def callback(session: MemoEditorSession, action: EditorAction) -> None:
            result = self.on_session_finished(session, action)
            if listener is not None:
                listener(result)
        return callback
