"""Configuration loading and validation."""

from ef80escape.config.loader import load_config
from ef80escape.config.schema import Config, LoggingConfig, PayloadConfig

__all__ = [
    "Config",
    "LoggingConfig",
    "PayloadConfig",
    "load_config",
]
