from sluglink.utils.config import app_env, app_name, app_prefix, load_config
from sluglink.utils.helpers import base_url, guarantee_500_response
from sluglink.utils.base62 import encode
from sluglink.utils.shortener import short_hash
from sluglink.utils.validator import validate_url, normalize_url
from sluglink.utils.deadline import Deadline, bounded_timeout
from sluglink.utils.logging import initialize_logging


__all__ = [
    'encode',
    'short_hash',
    'validate_url',
    'normalize_url',
    'Deadline',
    'bounded_timeout',
    'app_env',
    'app_name',
    'app_prefix',
    'load_config',
    'base_url',
    'guarantee_500_response',
    'initialize_logging',
]
