from enum import StrEnum


class TTL:
    """TTL durations in seconds."""

    # Short URL TTL duration (data retention period) (1 year in seconds)
    ONE_YEAR = 31_536_000  # 60 * 60 * 24 * 365


class SlugRules:
    """Constraints on generator-derived slugs."""

    MIN_LENGTH = 3
    MAX_LENGTH = 8


class Defaults:
    """Fallback values for optional configuration."""

    REDIS_HOST = 'localhost'
    REDIS_PORT = 6379
    REDIS_DB = 0
    REDIS_SOCKET_TIMEOUT = 5.0  # seconds

    SERVER_SCHEME = 'http'
    SERVER_HOST = 'localhost'
    SERVER_PORT = 8080

    SLUG_GENERATOR_MODEL_ID = 'amazon.nova-micro-v1:0'
    SLUG_GENERATOR_REGION = 'us-east-1'
    SLUG_GENERATOR_TIMEOUT = 5.0  # seconds

    CORS_ALLOW_ORIGIN = 'http://localhost:3000'

    # Time reserved at the end of a Lambda invocation to build the response
    DEADLINE_MARGIN = 0.5  # seconds


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        APP_ENV = 'APP_ENV'
        APP_NAME = 'APP_NAME'
        LOG_LEVEL = 'LOG_LEVEL'
        CORS_ALLOW_ORIGIN = 'CORS_ALLOW_ORIGIN'

    class Redis(StrEnum):
        HOST = 'REDIS_HOST'
        PORT = 'REDIS_PORT'
        DB = 'REDIS_DB'
        USERNAME = 'REDIS_USERNAME'
        PASSWORD = 'REDIS_PASSWORD'  # noqa: S105
        SOCKET_TIMEOUT = 'REDIS_SOCKET_TIMEOUT'

    class Server(StrEnum):
        SCHEME = 'SERVER_SCHEME'
        HOST = 'SERVER_HOST'
        PORT = 'SERVER_PORT'

    class SlugGenerator(StrEnum):
        # Bedrock API key, picked up by botocore straight from the environment
        API_KEY = 'AWS_BEARER_TOKEN_BEDROCK'
        MODEL_ID = 'SLUG_GENERATOR_MODEL_ID'
        REGION = 'SLUG_GENERATOR_REGION'
        TIMEOUT = 'SLUG_GENERATOR_TIMEOUT'


# Error codes
UNKNOWN_INTERNAL_SERVER_ERROR = 'UNKNOWN_INTERNAL_SERVER_ERROR'
