from dataclasses import replace

import aws_cdk as cdk
import pytest

from fargate_infra.config import get_stack_config
from fargate_infra.stack import add_container, build_task_definition


def _container_definitions(template) -> list[dict]:
    task_definitions = template.find_resources("AWS::ECS::TaskDefinition")
    assert len(task_definitions) == 1
    return next(iter(task_definitions.values()))["Properties"]["ContainerDefinitions"]


def test_single_cluster(template):
    template.resource_count_is("AWS::ECS::Cluster", 1)


def test_task_definition_size_and_platform(template):
    template.has_resource_properties(
        "AWS::ECS::TaskDefinition",
        {
            "Family": "EMD-CDK-fargateTaskDefinition",
            "Cpu": "512",
            "Memory": "1024",
            "NetworkMode": "awsvpc",
            "RequiresCompatibilities": ["FARGATE"],
            "RuntimePlatform": {"CpuArchitecture": "ARM64", "OperatingSystemFamily": "LINUX"},
        },
    )


def test_exactly_one_container(template):
    container_definitions = _container_definitions(template)

    assert len(container_definitions) == 1
    assert container_definitions[0]["Name"] == "EMD-FargateContainer"


def test_container_port_mapping_and_environment(template):
    container = _container_definitions(template)[0]

    assert container["PortMappings"] == [{"ContainerPort": 80, "HostPort": 80, "Protocol": "tcp"}]
    environment = {item["Name"]: item["Value"] for item in container["Environment"]}
    assert environment == {"EMD_VAR": "option 1", "FAVORITE_DESSERT": "ice cream"}


def test_container_ships_logs_with_stream_prefix(template):
    container = _container_definitions(template)[0]

    assert container["LogConfiguration"]["LogDriver"] == "awslogs"
    assert container["LogConfiguration"]["Options"]["awslogs-stream-prefix"] == "infra"


def test_missing_build_context_aborts_before_synthesis(tmp_path):
    config = get_stack_config(name="Development")
    container_config = replace(config.container, image_directory=tmp_path / "missing")
    stack = cdk.Stack(cdk.App(), "BuildContextStack")
    task_definition = build_task_definition(stack, config)

    with pytest.raises(FileNotFoundError):
        add_container(stack, task_definition, container_config)
