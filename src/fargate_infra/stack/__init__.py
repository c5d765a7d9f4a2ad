from .audit import build_log_bucket, enable_access_logs, generate_bucket_name, to_iso8601
from .compute import add_container, build_cluster, build_task_definition
from .fargate_stack import FargateServiceStack
from .load_balancer import add_http_listener, build_load_balancer
from .network import build_vpc
from .security import build_load_balancer_security_group, build_service_security_group
from .service import build_fargate_service

__all__ = [
    "FargateServiceStack",
    "add_container",
    "add_http_listener",
    "build_cluster",
    "build_fargate_service",
    "build_load_balancer",
    "build_load_balancer_security_group",
    "build_log_bucket",
    "build_service_security_group",
    "build_task_definition",
    "build_vpc",
    "enable_access_logs",
    "generate_bucket_name",
    "to_iso8601",
]
