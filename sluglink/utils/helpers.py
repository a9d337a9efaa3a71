"""Helper utilities for AWS lambda functions.

Functions:
    base_url(server: dict) -> str
        Build the public base URL of the service from server configuration
    guarantee_500_response(handler: Callable) -> Callable
        Decorator: turn any unhandled exception into an HTTP 500 response

Example:
    >>> server = {'scheme': 'http', 'host': 'localhost', 'port': 8080}
    >>> base_url(server)
    'http://localhost:8080'
"""

import functools
import logging
from typing import Any
from collections.abc import Callable

from sluglink.constants import UNKNOWN_INTERNAL_SERVER_ERROR
from sluglink.utils.responses import response_500


logger = logging.getLogger(__name__)


def base_url(server: dict[str, Any]) -> str:
    return f'{server["scheme"]}://{server["host"]}:{server["port"]}'


def guarantee_500_response(handler: Callable) -> Callable:
    """Decorator: make sure a Lambda handler always answers with a valid HTTP response.

    Any exception escaping the handler is logged with its traceback and converted
    into a generic 500 response, so API Gateway never returns its own opaque error.

    Example:
        >>> @guarantee_500_response
        ... def lambda_handler(event, context):
        ...     raise RuntimeError('boom')
        >>> lambda_handler({}, None)['statusCode']
        500
    """

    @functools.wraps(handler)
    def wrapper(event: dict, context: Any) -> dict:
        try:
            return handler(event, context)
        except Exception:
            logger.exception(
                'Unhandled exception in Lambda handler. Responding with 500.',
                extra={'event': UNKNOWN_INTERNAL_SERVER_ERROR},
            )
            return response_500(error_code=UNKNOWN_INTERNAL_SERVER_ERROR)

    return wrapper
