import base64
import binascii
import json
import logging

from sluglink.types import LambdaEvent, LambdaContext, LambdaResponse
from sluglink.dao.redis import ShortURLRedisDAO
from sluglink.dao.exceptions import DataStoreError
from sluglink.exceptions import ConfigurationError, DeadlineExceededError, InvalidURLError
from sluglink.services import URLShortener, build_slug_generator
from sluglink.utils import Deadline, app_prefix, base_url, bounded_timeout, guarantee_500_response, load_config, normalize_url
from sluglink.utils.responses import cors_headers, response_200, response_400, response_500
from sluglink.lambdas.shorten_url.constants import (
    INVALID_JSON,
    INVALID_URL,
    CONFIGURATION_ERROR,
    STORAGE_ERROR,
    DEADLINE_EXCEEDED,
    SHORTEN_SUCCESS,
)


logger = logging.getLogger(__name__)


def _request_body(event: LambdaEvent) -> dict:
    """Decode the JSON object in an API Gateway request body.

    Raises:
        ValueError: If the body is missing, not valid JSON, or not a JSON object.
    """
    raw = event.get('body')
    if not raw:
        raise ValueError('empty body')
    if event.get('isBase64Encoded'):
        try:
            raw = base64.b64decode(raw).decode('utf-8')
        except (binascii.Error, UnicodeDecodeError) as e:
            raise ValueError('undecodable body') from e

    body = json.loads(raw)  # json.JSONDecodeError is a ValueError
    if not isinstance(body, dict):
        raise ValueError('body is not a JSON object')
    return body


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Handle incoming API Gateway requests to shorten URLs (POST /api/urls)

    This Lambda handler follows this procedure to shorten URLs:
    - Step 1: Load application configuration
    - Step 2: Extract the URL from the request body
    - Step 3: Validate and normalize the URL
    - Step 4: Shorten the URL (AI slug or hash fallback) and store the mapping
    - Step 5: Respond to user with 200 success

    HTTP responses:
        200: Successful URL shortening
            original_url: normalized URL
            short_code: code the URL is stored under
            short_url: public short URL
            slug_type: "generator_derived" or "hash_based"
        400: Bad client request
            error: "Invalid JSON" or "Invalid URL" (with a reason)
        500: Internal server error
            error: storage failure, exceeded deadline, or bad configuration

    Args:
        event (LambdaEvent):
            API Gateway event payload in Lambda Proxy format.
        context (LambdaContext):
            AWS Lambda context object containing runtime information.

    Returns:
        LambdaResponse:
            JSON-serializable response following API Gateway Lambda Proxy
            output format. Includes status code, headers, and response body.

    Example:
        >>> event = {'body': '{"url": "https://github.com"}'}
        >>> response = lambda_handler(event, None)
        >>> response['statusCode']
        200
        >>> json.loads(response['body'])['short_code']
        'ghub'
    """
    # 1- Get application's config
    try:
        app_config = load_config()
    except ConfigurationError:
        logger.exception('Failed to load configuration. Responding with 500.', extra={'event': CONFIGURATION_ERROR})
        return response_500(error_code=CONFIGURATION_ERROR)
    else:
        headers = cors_headers(app_config['cors']['allow_origin'])
        redis_config = {f'redis_{k}': v for k, v in app_config['redis'].items()}

    # 2- Extract original URL from request body
    try:
        request_body = _request_body(event)
    except ValueError:
        logger.info('Invalid JSON body. Responding with 400.', extra={'event': INVALID_JSON})
        return response_400('Invalid JSON', error_code=INVALID_JSON, headers=headers)

    # A missing or non-string 'url' is handled like an empty one
    url = request_body.get('url')
    if not isinstance(url, str):
        url = ''

    # 3- Validate the URL before touching the store
    try:
        normalize_url(url)
    except InvalidURLError as e:
        logger.info('Invalid URL. Responding with 400.', extra={'event': INVALID_URL, 'url': url, 'reason': str(e)})
        return response_400('Invalid URL', error_code=INVALID_URL, headers=headers, reason=str(e))

    # 4- Shorten the URL and store the mapping (via DAO)
    #    Client timeouts are capped by the time left in this invocation
    deadline = Deadline.from_lambda_context(context)
    try:
        slug_generator = build_slug_generator(app_config['slug_generator'], deadline=deadline)
        redis_config['redis_socket_timeout'] = bounded_timeout(redis_config['redis_socket_timeout'], deadline, 'redis client setup')
        short_url_dao = ShortURLRedisDAO(**redis_config, prefix=app_prefix())
    except DataStoreError as e:
        logger.exception('Failed to connect to the store. Responding with 500.', extra={'event': STORAGE_ERROR})
        return response_500(f'failed to store URL: {e}', error_code=STORAGE_ERROR, headers=headers)
    except DeadlineExceededError as e:
        logger.warning('Request deadline exceeded. Responding with 500.', extra={'event': DEADLINE_EXCEEDED})
        return response_500(str(e), error_code=DEADLINE_EXCEEDED, headers=headers)

    shortener = URLShortener(
        short_url_dao=short_url_dao,
        slug_generator=slug_generator,
        base_url=base_url(app_config['server']),
    )
    try:
        shortened = shortener.shorten(url, deadline=deadline)
    except DataStoreError as e:
        logger.exception('Failed to store URL mapping. Responding with 500.', extra={'event': STORAGE_ERROR})
        return response_500(f'failed to store URL: {e}', error_code=STORAGE_ERROR, headers=headers)
    except DeadlineExceededError as e:
        logger.warning('Request deadline exceeded. Responding with 500.', extra={'event': DEADLINE_EXCEEDED})
        return response_500(str(e), error_code=DEADLINE_EXCEEDED, headers=headers)
    finally:
        short_url_dao.close()

    # 5- Return successful response to user
    logger.info(
        'Shortened URL. Responding with 200.',
        extra={'event': SHORTEN_SUCCESS, 'shortcode': shortened.short_code, 'slugType': str(shortened.slug_type)},
    )
    return response_200(shortened.to_dict(), headers=headers)
