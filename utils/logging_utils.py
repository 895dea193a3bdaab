# utils/logging_utils.py
"""
ログ出力の共通設定を提供します。

アプリケーション全体のロガー "anmemo" にファイル（ローテーション付き）と
コンソールのハンドラを一度だけ設定し、各モジュールはその子ロガーを使います。
"""
import logging
import logging.handlers
import os
from typing import Optional

ROOT_LOGGER_NAME = "anmemo"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def setup_logging(log_dir: Optional[str] = None, level: str = "INFO") -> logging.Logger:
    """
    ルートロガーにハンドラを設定する。既に設定済みの場合は何もしない。

    Args:
        log_dir (Optional[str]): ログファイルの出力先。Noneの場合はコンソールのみ。
        level (str): ログレベル名。

    Returns:
        logging.Logger: 設定済みのルートロガー。
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # モジュールの再読み込みでハンドラが重複しないようにする
    if logger.handlers:
        return logger

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        fh = logging.handlers.RotatingFileHandler(
            os.path.join(log_dir, f"{ROOT_LOGGER_NAME}.log"),
            maxBytes=1_000_000, backupCount=3, encoding="utf-8"
        )
        fh.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(fh)

    ch = logging.StreamHandler()
    ch.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.addHandler(ch)
    return logger


def get_logger(name: str) -> logging.Logger:
    """ルートロガー配下の子ロガーを返す。"""
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
