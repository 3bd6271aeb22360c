"""
Configuration management for the Headless Admin SDK.

Loads YAML configuration from file with sensible defaults and validation.
Supports environment variable substitution using ${ENV_VAR} syntax.
"""

import os
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import yaml

from headless_admin.exceptions import InvalidConfigurationError
from headless_admin.logging_config import get_logger

logger = get_logger(__name__)

VALID_CACHE_BACKENDS = ["none", "memory", "redis"]
VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
VALID_LOG_FORMATS = ["json", "console"]


def _expand_env_vars(value: Any) -> Any:
    """
    Recursively expand environment variables in configuration values.
    
    Supports ${ENV_VAR} syntax with optional default values: ${ENV_VAR:default}
    
    Args:
        value: Configuration value (string, dict, list, or other)
    
    Returns:
        Value with environment variables expanded
    
    Examples:
        "${HEADLESS_SERVER_URL}" -> value of HEADLESS_SERVER_URL env var
        "${HEADLESS_LANGUAGE:en}" -> value of HEADLESS_LANGUAGE or "en" if not set
    """
    if isinstance(value, str):
        pattern = r'\$\{([^}:]+)(?::([^}]*))?\}'
        
        def replace_env_var(match):
            var_name = match.group(1)
            default_value = match.group(2) if match.group(2) is not None else ""
            return os.environ.get(var_name, default_value)
        
        return re.sub(pattern, replace_env_var, value)
    elif isinstance(value, dict):
        return {k: _expand_env_vars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [_expand_env_vars(item) for item in value]
    else:
        return value


@dataclass
class ClientConfig:
    """Connection settings for the remote admin API."""
    
    server_url: str = "http://localhost"
    language: str = ""
    access_token: str = ""
    timeout: int = 30
    endpoint_prefix: str = "admin/"


@dataclass
class RedisConfig:
    """Redis connection settings for the redis cache backend."""
    
    host: str = "localhost"
    port: int = 6379
    password: str = ""
    db: int = 0
    ssl: bool = False


@dataclass
class CacheConfig:
    """Response cache configuration."""
    
    backend: str = "none"  # "none", "memory" or "redis"
    max_entries: int = 10000
    key_prefix: str = "headless"
    redis: RedisConfig = field(default_factory=RedisConfig)


@dataclass
class LoggingConfig:
    """Logging configuration."""
    
    level: str = "INFO"
    file: str = ""
    format: str = "console"  # "json" or "console"


@dataclass
class HeadlessConfig:
    """Main SDK configuration."""
    
    client: ClientConfig = field(default_factory=ClientConfig)
    cache: CacheConfig = field(default_factory=CacheConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def get_default_config_path() -> str:
    """Get the default configuration file path."""
    return os.path.expanduser("~/.headless/config.yaml")


def get_default_config() -> HeadlessConfig:
    """
    Get default configuration with sensible defaults.
    
    Returns:
        HeadlessConfig: Default configuration object
    """
    return HeadlessConfig()


def load_config(config_path: Optional[str] = None) -> HeadlessConfig:
    """
    Load configuration from YAML file with validation.
    
    If config file is not found, returns default configuration.
    If config file is malformed or invalid, raises InvalidConfigurationError.
    
    Args:
        config_path: Path to configuration file. If None, uses default path.
    
    Returns:
        HeadlessConfig: Loaded and validated configuration
    
    Raises:
        InvalidConfigurationError: If configuration is invalid or malformed
    """
    if config_path is None:
        config_path = get_default_config_path()
    
    config_path = os.path.expanduser(config_path)
    
    if not os.path.exists(config_path):
        logger.info(f"Configuration file not found at {config_path}, using defaults")
        return get_default_config()
    
    try:
        with open(config_path, 'r') as f:
            config_data = yaml.safe_load(f)
        logger.debug(f"Loaded configuration from {config_path}")
    except yaml.YAMLError as e:
        logger.error(f"Failed to parse YAML configuration file '{config_path}': {e}", exc_info=True)
        raise InvalidConfigurationError(
            f"Failed to parse YAML configuration file '{config_path}': {e}"
        ) from e
    except OSError as e:
        logger.error(f"Failed to read configuration file '{config_path}': {e}", exc_info=True)
        raise InvalidConfigurationError(
            f"Failed to read configuration file '{config_path}': {e}"
        ) from e
    
    if config_data is None:
        logger.info(f"Configuration file {config_path} is empty, using defaults")
        return get_default_config()
    
    if not isinstance(config_data, dict):
        raise InvalidConfigurationError(
            f"Configuration file '{config_path}' must contain a mapping at the top level"
        )
    
    config_data = _expand_env_vars(config_data)
    logger.debug("Expanded environment variables in configuration")
    
    try:
        config = _build_config_from_dict(config_data)
        _validate_config(config)
    except (TypeError, ValueError, InvalidConfigurationError) as e:
        logger.error(f"Invalid configuration in '{config_path}': {e}", exc_info=True)
        raise InvalidConfigurationError(
            f"Invalid configuration in '{config_path}': {e}"
        ) from e
    
    logger.info(f"Successfully loaded and validated configuration from {config_path}")
    return config


def _to_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


def _build_config_from_dict(config_data: Dict[str, Any]) -> HeadlessConfig:
    """
    Build HeadlessConfig from dictionary loaded from YAML.
    
    Merges user configuration with defaults. Numeric values are coerced
    because environment variable expansion always yields strings.
    
    Args:
        config_data: Dictionary loaded from YAML file
    
    Returns:
        HeadlessConfig: Configuration object
    """
    default_config = get_default_config()
    
    client_data = config_data.get('client') or {}
    client = ClientConfig(
        server_url=str(client_data.get('server_url', default_config.client.server_url)),
        language=str(client_data.get('language', default_config.client.language) or ""),
        access_token=str(client_data.get('access_token', default_config.client.access_token) or ""),
        timeout=int(client_data.get('timeout', default_config.client.timeout)),
        endpoint_prefix=str(
            client_data.get('endpoint_prefix', default_config.client.endpoint_prefix) or ""
        ),
    )
    
    cache_data = config_data.get('cache') or {}
    redis_data = cache_data.get('redis') or {}
    default_redis = default_config.cache.redis
    redis = RedisConfig(
        host=str(redis_data.get('host', default_redis.host)),
        port=int(redis_data.get('port', default_redis.port)),
        password=str(redis_data.get('password', default_redis.password) or ""),
        db=int(redis_data.get('db', default_redis.db)),
        ssl=_to_bool(redis_data.get('ssl', default_redis.ssl)),
    )
    cache = CacheConfig(
        backend=str(cache_data.get('backend', default_config.cache.backend)).lower(),
        max_entries=int(cache_data.get('max_entries', default_config.cache.max_entries)),
        key_prefix=str(cache_data.get('key_prefix', default_config.cache.key_prefix)),
        redis=redis,
    )
    
    logging_data = config_data.get('logging') or {}
    logging = LoggingConfig(
        level=str(logging_data.get('level', default_config.logging.level)),
        file=str(logging_data.get('file', default_config.logging.file) or ""),
        format=str(logging_data.get('format', default_config.logging.format)).lower(),
    )
    
    return HeadlessConfig(client=client, cache=cache, logging=logging)


def _validate_config(config: HeadlessConfig) -> None:
    """
    Validate configuration values.
    
    Args:
        config: Configuration to validate
    
    Raises:
        InvalidConfigurationError: If configuration is invalid
    """
    if not config.client.server_url:
        logger.error("Configuration validation failed: server_url cannot be empty")
        raise InvalidConfigurationError("server_url cannot be empty")
    
    if config.client.timeout <= 0:
        raise InvalidConfigurationError(
            f"timeout must be positive, got {config.client.timeout}"
        )
    
    if config.cache.backend not in VALID_CACHE_BACKENDS:
        raise InvalidConfigurationError(
            f"cache backend must be one of {VALID_CACHE_BACKENDS}, "
            f"got '{config.cache.backend}'"
        )
    
    if config.cache.max_entries < 1:
        raise InvalidConfigurationError(
            f"max_entries must be at least 1, got {config.cache.max_entries}"
        )
    
    if config.logging.level.upper() not in VALID_LOG_LEVELS:
        raise InvalidConfigurationError(
            f"logging level must be one of {VALID_LOG_LEVELS}, "
            f"got '{config.logging.level}'"
        )
    
    if config.logging.format not in VALID_LOG_FORMATS:
        raise InvalidConfigurationError(
            f"logging format must be one of {VALID_LOG_FORMATS}, "
            f"got '{config.logging.format}'"
        )
