# ロギング設定を行うミドルウェアモジュール
# 標準出力とファイルへの二重出力、UTC タイムスタンプ付きフォーマットを設定する
import logging
import time
from pathlib import Path


# ルートロガーに標準出力ハンドラとファイルハンドラを設定する関数
# 既存のハンドラをすべてクリアしてから再設定するため、重複ログの出力を防ぐ
def set_logger_config(log_file_path: Path) -> None:
    # ログフォーマット: "タイムスタンプ ロガー名 ログレベル: メッセージ"
    fmt = "%(asctime)s %(name)s %(levelname)s: %(message)s"
    logging_formatter = logging.Formatter(fmt)
    logging_formatter.converter = time.gmtime
    level = logging.INFO

    logger = logging.getLogger()
    logger.setLevel(level)

    if len(logger.handlers):
        logger.handlers.clear()
        logger.root.handlers.clear()

    # CDK CLI は標準エラーをそのまま表示するため、合成中のログはコンソールで確認できる
    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(level)
    stream_handler.setFormatter(logging_formatter)
    logger.addHandler(stream_handler)

    file_handler = logging.FileHandler(log_file_path)
    file_handler.setLevel(level)
    file_handler.setFormatter(logging_formatter)
    logger.addHandler(file_handler)

    # turn off logs for botocore and jsii
    logging.getLogger("botocore").setLevel(logging.CRITICAL)
    logging.getLogger("jsii").setLevel(logging.WARNING)
