"""Configuration management

YAML configuration file loading and CLI override handling.
"""

from .settings import CommrateConfig, LoggingConfig, load_config, get_default_config_path

__all__ = [
    "CommrateConfig",
    "LoggingConfig",
    "load_config",
    "get_default_config_path",
]
