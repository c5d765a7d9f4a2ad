# Fargate サービス構成全体を 1 つのスタックとして組み立てるモジュール
# ネットワーク → SG → ALB → クラスター・タスク定義 → サービス → リスナー → 監査ログの順に宣言する
import logging
from datetime import datetime, timezone
from typing import Any

from aws_cdk import CfnOutput, Stack, Token
from constructs import Construct

from fargate_infra.config import StackConfig

from .audit import build_log_bucket, enable_access_logs, generate_bucket_name
from .compute import add_container, build_cluster, build_task_definition
from .load_balancer import add_http_listener, build_load_balancer
from .network import build_vpc
from .security import build_load_balancer_security_group, build_service_security_group
from .service import build_fargate_service

logger = logging.getLogger(__name__)


# VPC・ALB・ECS クラスター・Fargate サービス・監査ログバケットをまとめて宣言するスタック
# 各ステップで作成したコンストラクトは後続ステップとテストから参照できるよう属性として保持する
class FargateServiceStack(Stack):
    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        config: StackConfig,
        now: datetime | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)
        # ALB アクセスログのバケットポリシーとバケット名はリージョンが確定していないと作れない
        if Token.is_unresolved(self.region):
            raise ValueError(f"Region is required to synthesize {construct_id}: set CDK_DEFAULT_REGION")
        self.config = config
        # 合成時刻（テストでは固定値を渡してバケット名を再現できるようにする）
        self.synth_time = now if now is not None else datetime.now(timezone.utc)

        # -----------------------------
        # Network
        # -----------------------------
        self.vpc = build_vpc(self, config)

        # -----------------------------
        # Security Groups
        # -----------------------------
        self.load_balancer_security_group = build_load_balancer_security_group(self, self.vpc)
        self.service_security_group = build_service_security_group(
            self, self.vpc, self.load_balancer_security_group
        )

        # -----------------------------
        # Load Balancer
        # -----------------------------
        self.load_balancer = build_load_balancer(self, self.vpc, self.load_balancer_security_group, config)

        # -----------------------------
        # Cluster / Task Definition
        # -----------------------------
        self.cluster = build_cluster(self, self.vpc)
        self.task_definition = build_task_definition(self, config)
        self.container = add_container(self, self.task_definition, config.container)

        # -----------------------------
        # Service / Routing
        # -----------------------------
        self.service = build_fargate_service(
            self, self.cluster, self.task_definition, self.vpc, self.service_security_group
        )
        self.listener = add_http_listener(self.load_balancer, self.service, config.container.name)

        # -----------------------------
        # Audit Log Bucket
        # -----------------------------
        self.bucket_name = generate_bucket_name(label=config.name, region=self.region, now=self.synth_time)
        self.log_bucket = build_log_bucket(self, self.bucket_name)
        enable_access_logs(self.load_balancer, self.log_bucket, config.access_log_prefix)

        CfnOutput(self, "LoadBalancerDnsName", value=self.load_balancer.load_balancer_dns_name)
        CfnOutput(self, "LogBucketName", value=self.log_bucket.bucket_name)
        logger.info(f"Declared stack: {construct_id=}, bucket_name={self.bucket_name}")
