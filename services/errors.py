# services/errors.py
"""
メモの永続化と編集セッションで発生する例外を定義します。

ストア関連の例外は MemoStoreError、編集セッション関連の例外は
MemoSessionError を基底とし、呼び出し側（UI）がまとめて捕捉できるようにします。
"""


class MemoStoreError(Exception):
    """メモストアの読み書きに関するすべての例外の基底クラス。"""


class StorageError(MemoStoreError):
    """ローカルファイルの読み込み・書き込みに失敗した。"""


class MemoFetchError(MemoStoreError):
    """保存済みメモ一覧の取得に失敗した。"""


class MemoCommitError(MemoStoreError):
    """変更内容の保存（コミット）に失敗した。"""


class MemoSessionError(Exception):
    """編集セッションの不正な操作に関する例外の基底クラス。"""


class SessionFinishedError(MemoSessionError):
    """終了済みのセッションに対して操作しようとした。"""


class InvalidSessionActionError(MemoSessionError):
    """セッションの種類では許可されていない操作を行おうとした。"""
