# services/storage_service.py
import json
import os
from typing import Dict, Any, Optional, Union, List

from services.errors import StorageError
from utils.logging_utils import get_logger

logger = get_logger("storage")

JsonData = Union[Dict[str, Any], List[Dict[str, Any]]]


class StorageService:
    """ローカルファイルシステムへのデータ永続化を管理するサービスクラス。

    JSON形式のデータの保存・読み込み機能を提供します。
    読み書きに失敗した場合はStorageErrorを送出し、扱いは呼び出し側に任せます。
    """

    def __init__(self, base_path: str = "data") -> None:
        """StorageServiceのコンストラクタ。

        Args:
            base_path (str): データを保存する基準ディレクトリのパス。
                             存在しない場合は自動的に作成されます。
        """
        self.base_path = base_path
        os.makedirs(self.base_path, exist_ok=True)

    def get_path(self, file_name: str) -> str:
        """ベースパスとファイル名を結合して完全なファイルパスを取得する。

        Args:
            file_name (str): ファイル名。

        Returns:
            str: 完全なファイルパス。
        """
        return os.path.join(self.base_path, file_name)

    def save_json(self, file_name: str, data: JsonData) -> None:
        """データをJSONファイルとしてローカルに保存する。

        一時ファイルに書き込んでから置き換えるため、書き込み途中で失敗しても
        既存のファイルは壊れない。

        Args:
            file_name (str): 保存するファイル名。
            data (Union[Dict, List]): 保存するデータ（辞書または辞書のリスト）。

        Raises:
            StorageError: ファイルの書き込みに失敗した場合。
        """
        file_path = self.get_path(file_name)
        tmp_path = f"{file_path}.tmp"
        try:
            with open(tmp_path, 'w', encoding='utf-8') as f:
                json.dump(data, f, ensure_ascii=False, indent=4)
            os.replace(tmp_path, file_path)
        except (OSError, TypeError, ValueError) as e:
            logger.error("ファイル保存中にエラーが発生しました: %s, %s", file_path, e)
            raise StorageError(f"ファイルを保存できませんでした: {file_path}") from e
        logger.debug("データを %s に保存しました。", file_path)

    def load_json(self, file_name: str) -> Optional[JsonData]:
        """ローカルのJSONファイルからデータを読み込む。

        Args:
            file_name (str): 読み込むファイル名。

        Returns:
            Optional[Union[Dict, List]]: 読み込まれたデータ。ファイルが存在しない場合はNone。

        Raises:
            StorageError: ファイルの読み込みまたはJSONの解析に失敗した場合。
        """
        file_path = self.get_path(file_name)
        if not os.path.exists(file_path):
            return None
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error("ファイル読み込み中にエラーが発生しました: %s, %s", file_path, e)
            raise StorageError(f"ファイルを読み込めませんでした: {file_path}") from e
