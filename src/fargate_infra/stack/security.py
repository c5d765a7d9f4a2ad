# セキュリティグループ（通信ルールセット）を宣言するモジュール
# インターネット → ALB → Fargate タスクの一方向の経路だけを許可する
import logging

from aws_cdk import aws_ec2 as ec2
from constructs import Construct

from fargate_infra.const import HTTP_PORT

logger = logging.getLogger(__name__)


# ALB 用のセキュリティグループを作成する関数
# 任意の IPv4 送信元からの HTTP（80 番）のみを許可する
def build_load_balancer_security_group(scope: Construct, vpc: ec2.IVpc) -> ec2.SecurityGroup:
    security_group = ec2.SecurityGroup(scope, "EMD-ApplicationLoadBalancerSecurityGroup", vpc=vpc)
    security_group.add_ingress_rule(
        ec2.Peer.any_ipv4(),
        ec2.Port.tcp(HTTP_PORT),
        "Allow All HTTP traffic",
    )
    logger.info(f"Declared load balancer security group: ingress=0.0.0.0/0:{HTTP_PORT}")
    return security_group


# Fargate タスク用のセキュリティグループを作成する関数
# 送信元は ALB のセキュリティグループ ID のみ（CIDR を送信元にしない）
def build_service_security_group(
    scope: Construct,
    vpc: ec2.IVpc,
    load_balancer_security_group: ec2.ISecurityGroup,
) -> ec2.SecurityGroup:
    security_group = ec2.SecurityGroup(
        scope,
        "EMD-EC2SecurityGroup",
        vpc=vpc,
        allow_all_outbound=True,
    )
    security_group.add_ingress_rule(
        ec2.Peer.security_group_id(load_balancer_security_group.security_group_id),
        ec2.Port.tcp(HTTP_PORT),
        f"Allow All HTTP traffic from ALB on port {HTTP_PORT}",
    )
    logger.info(f"Declared service security group: ingress=load balancer security group:{HTTP_PORT}")
    return security_group
