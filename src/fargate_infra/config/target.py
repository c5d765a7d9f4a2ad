# デプロイ先（アカウント・リージョン）の定義
# CDK CLI が設定する環境変数を Pydantic モデルとして読み込む
import os

import aws_cdk as cdk
from pydantic import BaseModel

ACCOUNT_ENV: str = "CDK_DEFAULT_ACCOUNT"
REGION_ENV: str = "CDK_DEFAULT_REGION"


# スタックのデプロイ先を表すデータモデル
# どちらも未設定の場合は環境非依存のテンプレートになり、リージョンはデプロイ時に解決される
class DeployTarget(BaseModel):
    account: str | None = None  # AWS アカウント ID
    region: str | None = None  # AWS リージョン名

    # 環境変数からデプロイ先を生成するクラスメソッド（空文字は未設定として扱う）
    @classmethod
    def from_env(cls) -> "DeployTarget":
        return cls(
            account=os.getenv(ACCOUNT_ENV) or None,
            region=os.getenv(REGION_ENV) or None,
        )

    # CDK の Environment に変換するメソッド
    def to_environment(self) -> cdk.Environment:
        return cdk.Environment(account=self.account, region=self.region)

