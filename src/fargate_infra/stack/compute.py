# ECS クラスター・タスク定義・コンテナ定義を宣言するモジュール
# ARM64 / Linux の Fargate タスクに 1 コンテナのみを配置する
import logging

from aws_cdk import aws_ec2 as ec2
from aws_cdk import aws_ecs as ecs
from constructs import Construct

from fargate_infra.config import ContainerConfig, StackConfig

logger = logging.getLogger(__name__)

DOCKERFILE_NAME = "Dockerfile"


# VPC に紐づく ECS クラスターを作成する関数
def build_cluster(scope: Construct, vpc: ec2.IVpc) -> ecs.Cluster:
    cluster = ecs.Cluster(scope, "Cluster", vpc=vpc)
    logger.info("Declared ecs cluster")
    return cluster


# Fargate タスク定義を作成する関数
# CPU / メモリの予約量と CPU アーキテクチャ・OS ファミリーを指定する
def build_task_definition(scope: Construct, config: StackConfig) -> ecs.FargateTaskDefinition:
    task_definition = ecs.FargateTaskDefinition(
        scope,
        "EMD-FargateTaskDefinition",
        family=config.task_family,
        cpu=config.task_cpu,
        memory_limit_mib=config.task_memory_mib,
        runtime_platform=ecs.RuntimePlatform(
            cpu_architecture=ecs.CpuArchitecture.ARM64,
            operating_system_family=ecs.OperatingSystemFamily.LINUX,
        ),
    )
    logger.info(
        f"Declared task definition: family={config.task_family}, cpu={config.task_cpu}, "
        f"memory={config.task_memory_mib}"
    )
    return task_definition


# タスク定義にコンテナを追加する関数
# イメージはローカルのビルドコンテキストからアセットとしてビルドされる
# ビルドコンテキストが存在しない場合はコンストラクトを作る前に FileNotFoundError を発生させる
def add_container(
    scope: Construct,
    task_definition: ecs.FargateTaskDefinition,
    container_config: ContainerConfig,
) -> ecs.ContainerDefinition:
    dockerfile_path = container_config.image_directory / DOCKERFILE_NAME
    if not dockerfile_path.is_file():
        raise FileNotFoundError(f"Container build context not found: {dockerfile_path}")

    container = ecs.ContainerDefinition(
        scope,
        "EMD-FargateContainer",
        task_definition=task_definition,
        container_name=container_config.name,
        image=ecs.ContainerImage.from_asset(str(container_config.image_directory)),
        port_mappings=[
            ecs.PortMapping(
                container_port=container_config.container_port,
                host_port=container_config.host_port,
                protocol=ecs.Protocol.TCP,
            )
        ],
        environment=container_config.environment,
        logging=ecs.AwsLogDriver(stream_prefix=container_config.log_stream_prefix),
    )
    logger.info(f"Declared container: name={container_config.name}, image={container_config.image_directory}")
    return container
