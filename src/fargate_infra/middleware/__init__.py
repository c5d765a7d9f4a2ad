from .logging import set_logger_config
from .path import Artifact

__all__ = ["Artifact", "set_logger_config"]
