import logging

from sluglink.types import LambdaEvent, LambdaContext, LambdaResponse
from sluglink.dao.redis import ShortURLRedisDAO
from sluglink.dao.exceptions import DataStoreError, ShortURLNotFoundError
from sluglink.exceptions import ConfigurationError, DeadlineExceededError
from sluglink.services import URLShortener
from sluglink.utils import Deadline, app_prefix, bounded_timeout, guarantee_500_response, load_config
from sluglink.utils.responses import response_301, response_400, response_404, response_500
from sluglink.lambdas.redirect_url.constants import (
    MISSING_SHORTCODE,
    SHORT_URL_NOT_FOUND,
    CONFIGURATION_ERROR,
    STORAGE_ERROR,
    DEADLINE_EXCEEDED,
    REDIRECT_SUCCESS,
)


logger = logging.getLogger(__name__)


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Handle incoming API Gateway requests to redirect URLs (GET /{shortcode})

    This Lambda handler follows this procedure to redirect URLs:
    - Step 1: Load application configuration
    - Step 2: Extract shortcode from request path
    - Step 3: Resolve the shortcode from the database
    - Step 4: Redirect client to target URL

    HTTP responses:
        301: Successful redirect
            headers:
                Location: target URL destination
        400: Bad client request
            error: missing shortcode in path parameters
        404: Not found
            error: "Short URL not found" (unknown or expired shortcode)
        500: Internal server error
            error: server experienced an internal error

    Args:
        event (LambdaEvent):
            API Gateway event payload containing the shortcode path parameter.
        context (LambdaContext):
            AWS Lambda runtime context object.

    Returns:
        LambdaResponse:
            API Gateway-compatible response including statusCode, headers, and body.

    Example:
        >>> event = {'pathParameters': {'shortcode': 'ghub'}}
        >>> response = lambda_handler(event, None)
        >>> response['statusCode']
        301
        >>> response['headers']['Location']
        'https://github.com'
    """
    # 1- Get application's config
    try:
        app_config = load_config()
    except ConfigurationError:
        logger.exception('Failed to load configuration. Responding with 500.', extra={'event': CONFIGURATION_ERROR})
        return response_500(error_code=CONFIGURATION_ERROR)
    else:
        logger.debug('Assuming Redis as the backend database for short URLs')
        redis_config = {f'redis_{k}': v for k, v in app_config['redis'].items()}

    # 2- Extract shortcode from request's path
    shortcode = (event.get('pathParameters') or {}).get('shortcode')
    if not shortcode:
        logger.info('Missing "shortcode" in path. Responding with 400.', extra={'event': MISSING_SHORTCODE})
        return response_400("missing 'shortcode' in path", error_code=MISSING_SHORTCODE)

    # 3- Resolve the shortcode (via DAO)
    #    Redis socket timeouts are capped by the time left in this invocation
    deadline = Deadline.from_lambda_context(context)
    try:
        redis_config['redis_socket_timeout'] = bounded_timeout(redis_config['redis_socket_timeout'], deadline, 'redis client setup')
        short_url_dao = ShortURLRedisDAO(**redis_config, prefix=app_prefix())
    except DataStoreError:
        logger.exception('Failed to connect to the store. Responding with 500.', extra={'event': STORAGE_ERROR})
        return response_500(error_code=STORAGE_ERROR)
    except DeadlineExceededError:
        logger.warning('Request deadline exceeded. Responding with 500.', extra={'shortcode': shortcode, 'event': DEADLINE_EXCEEDED})
        return response_500(error_code=DEADLINE_EXCEEDED)

    try:
        target_url = URLShortener(short_url_dao).resolve(shortcode, deadline=deadline)
    except ShortURLNotFoundError:
        logger.info(
            'Short URL record not found in database. Responding with 404.',
            extra={'shortcode': shortcode, 'event': SHORT_URL_NOT_FOUND},
        )
        return response_404('Short URL not found', error_code=SHORT_URL_NOT_FOUND)
    except DataStoreError:
        logger.exception('Failed to read short URL record. Responding with 500.', extra={'shortcode': shortcode, 'event': STORAGE_ERROR})
        return response_500(error_code=STORAGE_ERROR)
    except DeadlineExceededError:
        logger.warning('Request deadline exceeded. Responding with 500.', extra={'shortcode': shortcode, 'event': DEADLINE_EXCEEDED})
        return response_500(error_code=DEADLINE_EXCEEDED)
    finally:
        short_url_dao.close()

    # 4- Redirect client to target URL
    logger.info(
        'Redirecting client to target URL. Responding with 301.',
        extra={'shortcode': shortcode, 'event': REDIRECT_SUCCESS},
    )
    return response_301(location=target_url)
