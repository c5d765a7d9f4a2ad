import pytest

from fargate_infra.config import get_stack_config, stack_configs


def test_get_stack_config():
    config = get_stack_config(name="Development")

    assert config.stack_id == "EMD-FargateService15"
    assert config.vpc_cidr == "10.0.0.0/16"
    assert config.max_azs == 2
    assert config.subnet_cidr_mask == 24
    assert (config.task_cpu, config.task_memory_mib) == (512, 1024)
    assert config.container.name == "EMD-FargateContainer"
    assert (config.container.container_port, config.container.host_port) == (80, 80)


def test_get_stack_config_invalid_name():
    with pytest.raises(ValueError, match="Invalid stack config name"):
        get_stack_config(name="Unknown")


@pytest.mark.parametrize("config", stack_configs, ids=[config.name for config in stack_configs])
def test_build_context_has_dockerfile(config):
    assert (config.container.image_directory / "Dockerfile").is_file()
