# インフラ構成全体で共通利用する固定値の定義
# ネットワーク・タスクサイズ・リソース名などの値をここで一元管理する
from pathlib import Path
from typing import Final

# CDK アプリとしてデプロイするスタックの ID
STACK_ID: Final = "EMD-FargateService15"

# デプロイ環境のラベル（監査ログバケット名の先頭に使われる）
ENVIRONMENT_LABEL: Final = "Development"

# VPC 全体のアドレス範囲
VPC_CIDR: Final = "10.0.0.0/16"

# サブネットを配置するアベイラビリティゾーン数
MAX_AZS: Final = 2

# 各サブネットのマスク長（/24 = 256 アドレス）
SUBNET_CIDR_MASK: Final = 24

# サブネット設定の名前（パブリック: ALB 用、プライベート: Fargate タスク用）
PUBLIC_SUBNET_NAME: Final = "EMD-PublicSubnet"
PRIVATE_SUBNET_NAME: Final = "EMD-PrivateSubnet"

# ALB とコンテナが受け付ける HTTP ポート
HTTP_PORT: Final = 80

# ALB の名前（32 文字以内）
LOAD_BALANCER_NAME: Final = "EMD-ApplicationLoadBalancer"

# Fargate タスクのリソース割り当て（CPU ユニット・メモリ MiB）
TASK_CPU: Final = 512
TASK_MEMORY_MIB: Final = 1024

# タスク定義のファミリー名
TASK_FAMILY: Final = "EMD-CDK-fargateTaskDefinition"

# コンテナ名（ALB のターゲット解決にも使う）
CONTAINER_NAME: Final = "EMD-FargateContainer"

# CloudWatch Logs のストリームプレフィックス
LOG_STREAM_PREFIX: Final = "infra"

# ALB アクセスログを書き込むバケット内のキープレフィックス
ACCESS_LOG_PREFIX: Final = "alb-logs"

# コンテナイメージのビルドコンテキスト（リポジトリ直下の local-image ディレクトリ）
IMAGE_DIRECTORY: Final = Path(__file__).resolve().parents[2] / "local-image"
