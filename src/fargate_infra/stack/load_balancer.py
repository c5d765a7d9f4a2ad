# インターネット向け ALB とリスナーを宣言するモジュール
import logging

from aws_cdk import aws_ec2 as ec2
from aws_cdk import aws_ecs as ecs
from aws_cdk import aws_elasticloadbalancingv2 as elbv2
from constructs import Construct

from fargate_infra.config import StackConfig
from fargate_infra.const import HTTP_PORT

logger = logging.getLogger(__name__)


# インターネット向けの ALB を作成する関数
# パブリックサブネットにのみ配置し、IPv4 アドレスで公開する
def build_load_balancer(
    scope: Construct,
    vpc: ec2.IVpc,
    security_group: ec2.ISecurityGroup,
    config: StackConfig,
) -> elbv2.ApplicationLoadBalancer:
    load_balancer = elbv2.ApplicationLoadBalancer(
        scope,
        "EMD-ApplicationLoadBalancer",
        vpc=vpc,
        internet_facing=True,
        ip_address_type=elbv2.IpAddressType.IPV4,
        security_group=security_group,
        load_balancer_name=config.load_balancer_name,
        vpc_subnets=ec2.SubnetSelection(subnet_type=ec2.SubnetType.PUBLIC),
    )
    logger.info(f"Declared load balancer: name={config.load_balancer_name}")
    return load_balancer


# ALB に HTTP リスナーを追加し、Fargate サービスを唯一のターゲットとして登録する関数
# パス・ホストベースのルーティングは行わず、すべてのリクエストをデフォルトアクションで転送する
def add_http_listener(
    load_balancer: elbv2.ApplicationLoadBalancer,
    service: ecs.FargateService,
    container_name: str,
) -> elbv2.ApplicationListener:
    listener = load_balancer.add_listener(
        "EMD-HTTPListener",
        port=HTTP_PORT,
        protocol=elbv2.ApplicationProtocol.HTTP,
    )
    # ターゲットはコンテナ名で解決される（タスク定義のポートマッピングと一致する必要がある）
    listener.add_targets(
        "EMD-ECS",
        protocol=elbv2.ApplicationProtocol.HTTP,
        targets=[service.load_balancer_target(container_name=container_name)],
    )
    logger.info(f"Declared listener: port={HTTP_PORT}, target container={container_name}")
    return listener
