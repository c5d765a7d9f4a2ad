# VPC とサブネットを宣言するモジュール
# 2AZ × (パブリック / プライベート) の 4 サブネット構成を作成する
import logging

from aws_cdk import aws_ec2 as ec2
from constructs import Construct

from fargate_infra.config import StackConfig
from fargate_infra.const import PRIVATE_SUBNET_NAME, PUBLIC_SUBNET_NAME

logger = logging.getLogger(__name__)


# VPC を作成する関数
# パブリックサブネットはインターネットゲートウェイへ、プライベートサブネットは NAT ゲートウェイ経由で外部へ出る
def build_vpc(scope: Construct, config: StackConfig) -> ec2.Vpc:
    vpc = ec2.Vpc(
        scope,
        "VPC",
        max_azs=config.max_azs,
        subnet_configuration=[
            ec2.SubnetConfiguration(
                cidr_mask=config.subnet_cidr_mask,
                name=PUBLIC_SUBNET_NAME,
                subnet_type=ec2.SubnetType.PUBLIC,
            ),
            ec2.SubnetConfiguration(
                cidr_mask=config.subnet_cidr_mask,
                name=PRIVATE_SUBNET_NAME,
                subnet_type=ec2.SubnetType.PRIVATE_WITH_EGRESS,
            ),
        ],
        ip_addresses=ec2.IpAddresses.cidr(config.vpc_cidr),
    )
    logger.info(f"Declared vpc: cidr={config.vpc_cidr}, max_azs={config.max_azs}, mask=/{config.subnet_cidr_mask}")
    return vpc
