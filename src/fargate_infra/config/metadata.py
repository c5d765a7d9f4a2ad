# 合成（synth）実行のメタデータを収集・保存するモジュール
# スタック設定・デプロイ先・監査ログバケット名・Git 情報を一括で記録する
import json
import logging
import subprocess
from dataclasses import asdict, dataclass
from datetime import datetime
from pathlib import Path

from .stack_config import StackConfig
from .target import DeployTarget

logger = logging.getLogger(__name__)


# 1 回の合成実行の全メタデータを保持するデータクラス
# バケット名は合成時刻から生成されるため、どの実行がどのバケットを作ったかを後から追跡できるようにする
@dataclass
class SynthMetadata:
    stack_config: StackConfig  # 使用したスタック設定
    target: DeployTarget  # デプロイ先（アカウント・リージョン）
    bucket_name: str  # 生成した監査ログバケット名
    version: str  # 合成バージョン（タイムスタンプ文字列）
    start_time: datetime  # 合成開始時刻
    end_time: datetime  # 合成終了時刻
    artifact_key_prefix: str  # アーティファクト保存先のキープレフィックス

    @property
    def stack_id(self) -> str:
        return self.stack_config.stack_id

    # 実行時の Git コミットハッシュ（短縮形）を取得するプロパティ
    # git コマンドが存在しない環境では None を返す
    @property
    def git_commit_hash(self) -> str | None:
        try:
            result = subprocess.run(
                ["git", "rev-parse", "--short", "HEAD"],
                capture_output=True,
                text=True,
            )
            return result.stdout.strip()
        except FileNotFoundError:
            logger.info("git command is not installed")
            return None

    # 実行時の Git ブランチ名を取得するプロパティ
    @property
    def git_branch(self) -> str | None:
        try:
            result = subprocess.run(
                ["git", "branch", "--show-current"],
                capture_output=True,
                text=True,
            )
            return result.stdout.strip()
        except FileNotFoundError:
            logger.info("git command is not installed")
            return None

    # メタデータを JSON ファイルとして保存するメソッド
    # dataclass のフィールドに加えて、プロパティ経由で取得した Git 情報も含めて保存する
    def save_as_json(self, output_path: Path) -> None:
        metadata_dict = asdict(self)
        # Path や dict など JSON 化できない値を含むため、スタック設定はすべて文字列化する
        metadata_dict["stack_config"] = {k: str(v) for k, v in metadata_dict["stack_config"].items()}
        # Pydantic モデルは asdict の対象外なので model_dump で辞書化する
        metadata_dict["target"] = self.target.model_dump()
        metadata_dict["start_time"] = self.start_time.strftime("%Y-%m-%d %H:%M:%S")
        metadata_dict["end_time"] = self.end_time.strftime("%Y-%m-%d %H:%M:%S")
        metadata_dict["stack_id"] = self.stack_id
        metadata_dict["git_commit_hash"] = self.git_commit_hash
        metadata_dict["git_branch"] = self.git_branch

        with open(output_path, "w") as f:
            json.dump(metadata_dict, f, indent=2)

        logger.info(f"Saved metadata. {metadata_dict=}")
