# Common utilities
from licgate.common.config import Config as Config
from licgate.common.logging_utils import setup_logger as setup_logger

__all__ = ["Config", "setup_logger"]
