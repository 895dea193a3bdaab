"""
アプリケーションのエントリーポイント。

このスクリプトは、設定とログを初期化し、メモストアと一覧サービスを組み立てて
メインウィンドウに渡し、アプリケーションのイベントループを開始します。
また、プロジェクトのルートディレクトリをPythonのパスに追加し、
他のモジュール（ui, servicesなど）を正しくインポートできるように設定します。
"""
import sys
import os
from PyQt6.QtWidgets import QApplication

# このファイル(main.py)があるディレクトリをモジュール検索パスに追加します。
current_dir: str = os.path.dirname(os.path.abspath(__file__))
if current_dir not in sys.path:
    sys.path.append(current_dir)

from services.memo_service import MemoListService
from services.memo_store import MemoStore
from services.storage_service import StorageService
from ui.main_window import MainWindow
from utils.config import load_config
from utils.logging_utils import setup_logging


def main() -> int:
    """アプリケーションを起動し、終了コードを返す。"""
    # 1. 設定とログを初期化します。
    config = load_config()
    setup_logging(config.log_dir, config.log_level)

    # 2. PyQtアプリケーションインスタンスを作成します。
    app: QApplication = QApplication(sys.argv)

    # 3. ストアとサービスを組み立て、メインウィンドウに渡します。
    store = MemoStore(StorageService(config.data_dir))
    window: MainWindow = MainWindow(MemoListService(store))
    if not window.load():
        return 1

    # 4. ウィンドウを表示してイベントループを開始します。
    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
