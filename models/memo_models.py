# models/memo_models.py
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional


class EditorAction(Enum):
    """メモ編集画面のセッションがどのように終了したかを表す値。"""
    ADD = "add"
    EDIT = "edit"
    CANCEL = "cancel"
    DELETE = "delete"
    NONE = "none"


class SessionState(Enum):
    """編集セッションの状態。"""
    EDITING = "editing"
    FINISHED = "finished"


def _to_local_naive(value: datetime) -> datetime:
    """タイムゾーン付きの日時をローカル時刻（タイムゾーンなし）に揃える。"""
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


@dataclass(eq=False)
class Memo:
    """ユーザーが作成する単一のメモを表現するデータモデル。

    同じレコードはストア内で常に同一のインスタンスとして扱われるため、
    比較は値ではなく同一性（is）で行う。

    Attributes:
        id (Optional[str]): ストアが割り当てる一意なID。
        title (str): メモのタイトル。空文字も許可される。
        content (str): メモの本文。
        date (Optional[datetime]): 最後に保存された日時。一度も保存されていない場合はNone。
    """
    id: Optional[str] = None
    title: str = ""
    content: str = ""
    date: Optional[datetime] = None

    def to_dict(self) -> Dict[str, Any]:
        """JSONに保存できる辞書へ変換する。"""
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "date": self.date.isoformat() if self.date else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Memo":
        """保存された辞書からMemoを復元する。

        Raises:
            KeyError: idが含まれていない場合。
            ValueError: dateがISO 8601形式でない場合。
        """
        raw_date = data.get("date")
        return cls(
            id=data["id"],
            title=data.get("title") or "",
            content=data.get("content") or "",
            date=_to_local_naive(datetime.fromisoformat(raw_date)) if raw_date else None,
        )
