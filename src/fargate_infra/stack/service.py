# Fargate サービスを宣言するモジュール
import logging

from aws_cdk import aws_ec2 as ec2
from aws_cdk import aws_ecs as ecs
from constructs import Construct

logger = logging.getLogger(__name__)


# タスク定義を常駐させる Fargate サービスを作成する関数
# 配置先は 2AZ 分のプライベートサブネットのみとし、ALB 経由以外の経路を持たせない
def build_fargate_service(
    scope: Construct,
    cluster: ecs.ICluster,
    task_definition: ecs.FargateTaskDefinition,
    vpc: ec2.IVpc,
    security_group: ec2.ISecurityGroup,
) -> ecs.FargateService:
    service = ecs.FargateService(
        scope,
        "EMD-ecs-service",
        assign_public_ip=True,
        cluster=cluster,
        task_definition=task_definition,
        platform_version=ecs.FargatePlatformVersion.LATEST,
        vpc_subnets=ec2.SubnetSelection(
            subnets=[
                vpc.private_subnets[0],
                vpc.private_subnets[1],
            ]
        ),
        security_groups=[security_group],
    )
    logger.info("Declared fargate service in private subnets")
    return service
