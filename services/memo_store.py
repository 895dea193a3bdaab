# services/memo_store.py
import uuid
from datetime import datetime
from typing import Dict, List, Optional

from .base_service import BaseService
from .errors import MemoCommitError, MemoFetchError, StorageError
from .storage_service import StorageService
from models.memo_models import Memo
from utils.logging_utils import get_logger

logger = get_logger("memo_store")


class MemoStore(BaseService[List[Memo]]):
    """メモの永続化境界を提供するストアクラス。

    ファイルから読み込んだメモを同一性マップとして保持し、作成・削除・
    フィールドの変更を保留したまま、commit() でまとめて保存します。

    - create_pending() で作成したメモは保留中として扱われ、一度保存された
      （dateが設定された）状態でcommit()されるまで fetch_all() には現れません。
    - fetch_all() で返したメモへのフィールド変更はそのまま次のcommit()で保存されます。
    """

    MEMO_FILE_IDENTIFIER = "memos.json"

    def __init__(self, storage_service: Optional[StorageService] = None) -> None:
        """MemoStoreのコンストラクタ。

        Args:
            storage_service (Optional[StorageService]): データ永続化のためのストレージサービス。
                Noneの場合はメモリ上だけで動作する。
        """
        super().__init__(storage_service=storage_service)
        self._records: Dict[str, Memo] = {}
        self._pending: Dict[str, Memo] = {}
        self._deleted: Dict[str, Memo] = {}
        self._loaded: bool = False

    @property
    def pending(self) -> List[Memo]:
        """まだ保存されていない新規メモの一覧。"""
        return list(self._pending.values())

    def fetch_all(self) -> List[Memo]:
        """保存済みのメモを日付の新しい順に取得する。

        Returns:
            List[Memo]: 保存済みメモのリスト。日付のないメモは末尾に並ぶ。

        Raises:
            MemoFetchError: 保存ファイルの読み込みに失敗した場合。
        """
        self._ensure_loaded()
        memos = [m for m in self._records.values() if m.id not in self._deleted]
        memos.sort(key=lambda m: m.date or datetime.min, reverse=True)
        return memos

    def create_pending(self) -> Memo:
        """ストアに紐づいた新しいメモを作成する。まだ保存はされない。"""
        memo = Memo(id=str(uuid.uuid4()))
        self._pending[memo.id] = memo
        logger.debug("新規メモを保留中として作成しました: %s", memo.id)
        return memo

    def delete(self, memo: Memo) -> None:
        """メモを削除対象としてマークする。

        保留中の新規メモの場合は保留リストから取り除くだけで、保存は行わない。

        Raises:
            KeyError: このストアが管理していないメモが渡された場合。
        """
        if memo.id in self._pending:
            del self._pending[memo.id]
            return
        if self._records.get(memo.id) is not memo:
            raise KeyError(f"ストアに存在しないメモです: {memo.id}")
        self._deleted[memo.id] = memo

    def commit(self) -> None:
        """保留中の作成・変更・削除をすべて保存する。

        一度も保存されていない（dateがNoneの）保留中メモは保留のまま残る。
        書き込みに成功した場合のみ内部状態を更新する。

        Raises:
            MemoCommitError: 保存に失敗した場合。
        """
        try:
            self._ensure_loaded()
        except MemoFetchError as e:
            raise MemoCommitError("保存前の読み込みに失敗しました") from e

        promoted = {key: m for key, m in self._pending.items() if m.date is not None}
        records = {
            key: m for key, m in self._records.items() if key not in self._deleted
        }
        records.update(promoted)

        try:
            self.save_data(list(records.values()))
        except StorageError as e:
            raise MemoCommitError("メモを保存できませんでした") from e

        self._records = records
        for key in promoted:
            del self._pending[key]
        deleted_count = len(self._deleted)
        self._deleted.clear()
        logger.info(
            "メモを保存しました（%d件, 新規%d件, 削除%d件）",
            len(records), len(promoted), deleted_count
        )

    def load_data(self, identifier: str) -> Optional[List[Memo]]:
        """BaseServiceから継承したメソッド。ストレージからメモデータを読み込む。

        Args:
            identifier (str): 読み込むファイル名（識別子）。

        Returns:
            Optional[List[Memo]]: 読み込まれたメモのリスト。データがない場合はNone。

        Raises:
            MemoFetchError: 読み込みまたは復元に失敗した場合。
        """
        if not self.storage_service:
            return None
        try:
            data = self.storage_service.load_json(identifier)
        except StorageError as e:
            raise MemoFetchError("メモ一覧を取得できませんでした") from e
        if data is None:
            return None
        if not isinstance(data, list):
            raise MemoFetchError(f"メモファイルの形式が不正です: {identifier}")
        try:
            return [Memo.from_dict(item) for item in data]
        except (KeyError, TypeError, ValueError) as e:
            raise MemoFetchError(f"メモデータを復元できませんでした: {e}") from e

    def save_data(self, data: List[Memo]) -> None:
        """BaseServiceから継承したメソッド。メモデータをストレージに保存する。

        Args:
            data (List[Memo]): 保存するメモのリスト。
        """
        if self.storage_service:
            self.storage_service.save_json(
                self.MEMO_FILE_IDENTIFIER, [memo.to_dict() for memo in data]
            )

    def _ensure_loaded(self) -> None:
        """初回のみ保存ファイルを読み込み、同一性マップを作成する。"""
        if self._loaded:
            return
        memos = self.load_data(self.MEMO_FILE_IDENTIFIER) or []
        records: Dict[str, Memo] = {}
        for memo in memos:
            if memo.id in records:
                raise MemoFetchError(f"メモIDが重複しています: {memo.id}")
            records[memo.id] = memo
        self._records = records
        self._loaded = True
        logger.info("%d件のメモを読み込みました。", len(memos))
