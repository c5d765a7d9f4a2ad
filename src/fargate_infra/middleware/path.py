# アーティファクト（ログ・メタデータ）の保存パスを管理するミドルウェアモジュール
from pathlib import Path

ARTIFACT_ROOT = Path("./artifact")


# アーティファクトのパス管理クラス
# ジョブタイプとバージョン文字列から保存ディレクトリとキープレフィックスを生成する
class Artifact:
    def __init__(self, version: str, job_type: str, root: Path = ARTIFACT_ROOT) -> None:
        # キープレフィックス（例: "synth/20240101120000"）
        self.key_prefix = f"{job_type}/{version}"
        self.dir_path = root / self.key_prefix
        self.dir_path.mkdir(parents=True, exist_ok=True)

    # アーティファクトディレクトリ内の指定ファイル名の完全パスを返すメソッド
    def file_path(self, file_name: str) -> Path:
        return self.dir_path / file_name
