"""Utility functions for application configuration management.

This module provides a standardized interface for Lambda functions to access
configuration. All settings come from environment variables (see ENV in
sluglink.constants) and are read here only; the rest of the code base receives
plain dictionaries.

The configuration dictionary follows this structure:

    {
        "redis": {
            "host": "localhost", "port": 6379, "db": 0,
            "username": None, "password": None, "socket_timeout": 5.0
        },
        "server": {"scheme": "http", "host": "localhost", "port": 8080},
        "slug_generator": {"model_id": "...", "region": "...", "timeout": 5.0},
        "cors": {"allow_origin": "http://localhost:3000"}
    }

"slug_generator" is None when no generator API key is configured, which
disables AI slug generation without being an error.

Typical usage inside a Lambda handler:
    >>> from sluglink.utils.config import load_config
    >>> config = load_config()
    >>> print(config['redis']['host'])
    localhost
"""

import os
import logging

from sluglink.types import AppConfig
from sluglink.constants import ENV, Defaults
from sluglink.exceptions import BadConfigurationError


logger = logging.getLogger(__name__)


def app_env() -> str:
    return os.environ.get(ENV.App.APP_ENV, 'local').lower()


def app_name() -> str | None:
    return os.environ.get(ENV.App.APP_NAME)


def app_prefix() -> str | None:
    """Return application prefix for DAOs

    Returns:
        str: app prefix as <app name>:<app env>.
             None if APP_NAME is not set.

    Example:
        >>> os.environ['APP_NAME'] = 'sluglink'
        >>> os.environ['APP_ENV'] = 'local'
        >>> app_prefix()
        'sluglink:local'
    """
    return None if app_name() is None else f'{app_name()}:{app_env()}'


def _env_str(name: str, default: str | None = None) -> str | None:
    # Empty values count as unset
    return os.environ.get(name) or default


def _env_int(name: str, default: int) -> int:
    raw = _env_str(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise BadConfigurationError(f"Environment variable '{name}' must be an integer (given value: {raw!r}).") from e


def _env_float(name: str, default: float) -> float:
    raw = _env_str(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError as e:
        raise BadConfigurationError(f"Environment variable '{name}' must be a number (given value: {raw!r}).") from e
    if value <= 0:
        raise BadConfigurationError(f"Environment variable '{name}' must be positive (given value: {raw!r}).")
    return value


def _redis_config() -> dict:
    return {
        'host': _env_str(ENV.Redis.HOST, Defaults.REDIS_HOST),
        'port': _env_int(ENV.Redis.PORT, Defaults.REDIS_PORT),
        'db': max(0, _env_int(ENV.Redis.DB, Defaults.REDIS_DB)),
        'username': _env_str(ENV.Redis.USERNAME),
        'password': _env_str(ENV.Redis.PASSWORD),
        'socket_timeout': _env_float(ENV.Redis.SOCKET_TIMEOUT, Defaults.REDIS_SOCKET_TIMEOUT),
    }


def _server_config() -> dict:
    scheme = _env_str(ENV.Server.SCHEME, Defaults.SERVER_SCHEME).lower()
    if scheme not in ('http', 'https'):
        raise BadConfigurationError(f"Environment variable '{ENV.Server.SCHEME}' must be 'http' or 'https' (given value: {scheme!r}).")
    return {
        'scheme': scheme,
        'host': _env_str(ENV.Server.HOST, Defaults.SERVER_HOST),
        'port': _env_int(ENV.Server.PORT, Defaults.SERVER_PORT),
    }


def _slug_generator_config() -> dict | None:
    if not _env_str(ENV.SlugGenerator.API_KEY):
        logger.debug('No slug generator API key configured. AI slug generation disabled.')
        return None
    return {
        'model_id': _env_str(ENV.SlugGenerator.MODEL_ID, Defaults.SLUG_GENERATOR_MODEL_ID),
        'region': _env_str(ENV.SlugGenerator.REGION, Defaults.SLUG_GENERATOR_REGION),
        'timeout': _env_float(ENV.SlugGenerator.TIMEOUT, Defaults.SLUG_GENERATOR_TIMEOUT),
    }


def load_config() -> AppConfig:
    """Load the application configuration from environment variables

    Returns:
        AppConfig: Configuration dictionary (see module docstring for its structure).

    Raises:
        BadConfigurationError:
            If a numeric variable can't be parsed or a value is out of range.

    Example:
        >>> os.environ['REDIS_HOST'] = 'redis.internal'
        >>> load_config()['redis']['host']
        'redis.internal'
    """
    config = {
        'redis': _redis_config(),
        'server': _server_config(),
        'slug_generator': _slug_generator_config(),
        'cors': {'allow_origin': _env_str(ENV.App.CORS_ALLOW_ORIGIN, Defaults.CORS_ALLOW_ORIGIN)},
    }
    logger.debug(
        'Loaded configuration from environment.',
        extra={'redisHost': config['redis']['host'], 'slugGeneratorEnabled': config['slug_generator'] is not None},
    )
    return config
