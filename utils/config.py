# utils/config.py
"""
アプリケーション設定の読み込みを提供します。

設定値は環境変数（および .env ファイル）から読み込まれます。
"""
import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_DATA_DIR = "data"
DEFAULT_LOG_DIR = "logs"
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class AppConfig:
    """アプリケーション全体の設定値。

    Attributes:
        data_dir (str): メモを保存するディレクトリ。
        log_dir (str): ログファイルを出力するディレクトリ。
        log_level (str): ログレベル名（例: "INFO", "DEBUG"）。
    """
    data_dir: str = DEFAULT_DATA_DIR
    log_dir: str = DEFAULT_LOG_DIR
    log_level: str = DEFAULT_LOG_LEVEL


def load_config() -> AppConfig:
    """環境変数から設定を読み込んでAppConfigを返す。"""
    load_dotenv()
    return AppConfig(
        data_dir=os.getenv("ANMEMO_DATA_DIR", DEFAULT_DATA_DIR),
        log_dir=os.getenv("ANMEMO_LOG_DIR", DEFAULT_LOG_DIR),
        log_level=os.getenv("ANMEMO_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
    )
