"""
Configuration management for the Headless Admin SDK.

Handles loading and validation of configuration files.
"""

from headless_admin.config.settings import (
    CacheConfig,
    ClientConfig,
    HeadlessConfig,
    LoggingConfig,
    RedisConfig,
    get_default_config,
    get_default_config_path,
    load_config,
)

__all__ = [
    "CacheConfig",
    "ClientConfig",
    "HeadlessConfig",
    "LoggingConfig",
    "RedisConfig",
    "get_default_config",
    "get_default_config_path",
    "load_config",
]
