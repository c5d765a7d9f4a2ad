from .metadata import SynthMetadata
from .stack_config import ContainerConfig, StackConfig, get_stack_config, stack_configs
from .target import DeployTarget

__all__ = [
    "ContainerConfig",
    "DeployTarget",
    "StackConfig",
    "SynthMetadata",
    "get_stack_config",
    "stack_configs",
]
