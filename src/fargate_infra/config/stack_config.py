# スタック設定の定義と取得関数を提供するモジュール
# VPC・タスクサイズ・コンテナ定義・アクセスログの設定を環境ごとに一元管理する
import logging
from dataclasses import dataclass, field
from pathlib import Path

from fargate_infra.const import (
    ACCESS_LOG_PREFIX,
    CONTAINER_NAME,
    ENVIRONMENT_LABEL,
    HTTP_PORT,
    IMAGE_DIRECTORY,
    LOAD_BALANCER_NAME,
    LOG_STREAM_PREFIX,
    MAX_AZS,
    STACK_ID,
    SUBNET_CIDR_MASK,
    TASK_CPU,
    TASK_FAMILY,
    TASK_MEMORY_MIB,
    VPC_CIDR,
)

logger = logging.getLogger(__name__)


# タスク定義に含める単一コンテナの設定を保持するデータクラス
@dataclass
class ContainerConfig:
    name: str  # コンテナ名（ALB ターゲットの解決キーとして使用）
    image_directory: Path  # イメージのビルドコンテキスト（Dockerfile を含むディレクトリ）
    container_port: int  # コンテナが待ち受けるポート
    host_port: int  # ホスト側のポート（awsvpc モードではコンテナポートと同じ値にする）
    environment: dict[str, str] = field(default_factory=dict)  # コンテナに渡す環境変数
    log_stream_prefix: str = LOG_STREAM_PREFIX  # awslogs ドライバのストリームプレフィックス


# スタック全体の構成を保持するデータクラス
# ネットワーク・タスクサイズ・コンテナ・ALB の設定を一つにまとめて扱う
@dataclass
class StackConfig:
    name: str  # 環境ラベル（監査ログバケット名の先頭にも使う）
    stack_id: str  # CloudFormation スタック ID
    vpc_cidr: str  # VPC のアドレス範囲
    max_azs: int  # サブネットを展開する AZ 数
    subnet_cidr_mask: int  # 各サブネットのマスク長
    task_cpu: int  # タスクの CPU ユニット
    task_memory_mib: int  # タスクのメモリ（MiB）
    task_family: str  # タスク定義のファミリー名
    load_balancer_name: str  # ALB の名前
    access_log_prefix: str  # アクセスログのキープレフィックス
    container: ContainerConfig  # 単一コンテナの設定


# プロジェクトで使用する全環境の設定リスト
stack_configs = [
    # 開発環境: 2AZ・ARM64 の Fargate タスク 1 コンテナ構成
    StackConfig(
        name=ENVIRONMENT_LABEL,
        stack_id=STACK_ID,
        vpc_cidr=VPC_CIDR,
        max_azs=MAX_AZS,
        subnet_cidr_mask=SUBNET_CIDR_MASK,
        task_cpu=TASK_CPU,
        task_memory_mib=TASK_MEMORY_MIB,
        task_family=TASK_FAMILY,
        load_balancer_name=LOAD_BALANCER_NAME,
        access_log_prefix=ACCESS_LOG_PREFIX,
        container=ContainerConfig(
            name=CONTAINER_NAME,
            image_directory=IMAGE_DIRECTORY,
            container_port=HTTP_PORT,
            host_port=HTTP_PORT,
            environment={
                "EMD_VAR": "option 1",
                "FAVORITE_DESSERT": "ice cream",
            },
        ),
    ),
]


# 環境名からスタック設定を取得する関数
# 存在しない環境名が指定された場合は ValueError を発生させる
def get_stack_config(name: str) -> StackConfig:
    for stack_config in stack_configs:
        if stack_config.name == name:
            return stack_config
    raise ValueError(f"Invalid stack config name: {name}")
