"""Unit tests for the redirect_url AWS Lambda handler.

Test coverage includes:

1. Successful redirect
   - Known shortcodes redirect with HTTP 301 and a Location header.

2. Bad requests
   - Missing shortcode path parameter returns HTTP 400.

3. Unknown shortcodes
   - Never-existing and expired shortcodes return HTTP 404.

4. Server errors
   - Configuration errors, unreachable store and exceeded deadlines return HTTP 500.

5. Deadline-capped clients
   - The Redis socket timeout never exceeds the invocation's remaining time.
"""

import json
from unittest.mock import MagicMock

import pytest

from sluglink.lambdas.redirect_url import app
from sluglink.models import ShortURLModel
from sluglink.dao.base import ShortURLBaseDAO
from sluglink.dao.exceptions import DataStoreError, ShortURLNotFoundError
from sluglink.exceptions import BadConfigurationError


# -------------------------------
# Fixtures
# -------------------------------


@pytest.fixture()
def apigw_event():
    def _event(shortcode):
        return {
            'resource': '/{shortcode}',
            'path': f'/{shortcode}',
            'httpMethod': 'GET',
            'headers': {'User-Agent': 'pytest'},
            'pathParameters': None if shortcode is None else {'shortcode': shortcode},
            'requestContext': {'resourcePath': '/{shortcode}', 'httpMethod': 'GET', 'stage': 'test'},
        }

    return _event


@pytest.fixture()
def context():
    return {'function_name': 'RedirectURLFunction', 'aws_request_id': 'test-request-id'}


@pytest.fixture()
def config():
    return {
        'redis': {'host': 'redis.test', 'port': 6379, 'db': 0, 'username': None, 'password': None, 'socket_timeout': 5.0},
        'server': {'scheme': 'http', 'host': 'localhost', 'port': 8080},
        'slug_generator': None,
        'cors': {'allow_origin': 'http://localhost:3000'},
    }


@pytest.fixture()
def short_url_dao():
    dao = MagicMock(spec=ShortURLBaseDAO)
    dao.get.return_value = ShortURLModel(target='https://github.com', shortcode='ghub')
    return dao


@pytest.fixture()
def dao_factory(short_url_dao):
    return MagicMock(return_value=short_url_dao)


@pytest.fixture(autouse=True)
def _patch_lambda_dependencies(monkeypatch, config, dao_factory):
    monkeypatch.setattr(app, 'load_config', lambda: config)
    monkeypatch.setattr(app, 'ShortURLRedisDAO', dao_factory)
    monkeypatch.setattr(app, 'app_prefix', lambda: 'sluglink:test')


# -------------------------------
# 1. Successful redirect
# -------------------------------


def test_redirect(apigw_event, context, short_url_dao):
    response = app.lambda_handler(apigw_event('ghub'), context)

    assert response['statusCode'] == 301
    assert response['headers']['Location'] == 'https://github.com'
    short_url_dao.get.assert_called_once_with('ghub')
    short_url_dao.close.assert_called_once()


# -------------------------------
# 2. Bad requests
# -------------------------------


@pytest.mark.parametrize('shortcode', [None, ''])
def test_missing_shortcode(apigw_event, context, dao_factory, shortcode):
    response = app.lambda_handler(apigw_event(shortcode), context)

    assert response['statusCode'] == 400
    assert json.loads(response['body'])['errorCode'] == 'MISSING_SHORTCODE'
    dao_factory.assert_not_called()


# -------------------------------
# 3. Unknown shortcodes
# -------------------------------


def test_short_url_not_found(apigw_event, context, short_url_dao):
    short_url_dao.get.side_effect = ShortURLNotFoundError("Short URL with code 'nope' not found.")

    response = app.lambda_handler(apigw_event('nope'), context)

    assert response['statusCode'] == 404
    assert json.loads(response['body']) == {'error': 'Short URL not found', 'errorCode': 'SHORT_URL_NOT_FOUND'}
    short_url_dao.close.assert_called_once()


# -------------------------------
# 4. Server errors
# -------------------------------


def test_configuration_error(monkeypatch, apigw_event, context):
    def _load_config():
        raise BadConfigurationError('bad')

    monkeypatch.setattr(app, 'load_config', _load_config)

    response = app.lambda_handler(apigw_event('ghub'), context)

    assert response['statusCode'] == 500
    assert json.loads(response['body'])['errorCode'] == 'CONFIGURATION_ERROR'


def test_unreachable_store(apigw_event, context, dao_factory):
    dao_factory.side_effect = DataStoreError("Can't connect to Redis at redis.test:6379/0.")

    response = app.lambda_handler(apigw_event('ghub'), context)

    assert response['statusCode'] == 500
    assert json.loads(response['body'])['errorCode'] == 'STORAGE_ERROR'


def test_failed_read(apigw_event, context, short_url_dao):
    short_url_dao.get.side_effect = DataStoreError("Can't connect to Redis at redis.test:6379/0.")

    response = app.lambda_handler(apigw_event('ghub'), context)

    assert response['statusCode'] == 500
    assert json.loads(response['body'])['errorCode'] == 'STORAGE_ERROR'


def test_deadline_exceeded(apigw_event, short_url_dao):
    class AlmostTimedOutContext:
        def get_remaining_time_in_millis(self):
            return 100

    response = app.lambda_handler(apigw_event('ghub'), AlmostTimedOutContext())

    assert response['statusCode'] == 500
    assert json.loads(response['body'])['errorCode'] == 'DEADLINE_EXCEEDED'
    short_url_dao.get.assert_not_called()


# -------------------------------
# 5. Deadline-capped clients
# -------------------------------


def test_redis_timeout_capped_by_deadline(apigw_event, dao_factory):
    class LambdaContext:
        def get_remaining_time_in_millis(self):
            return 1500

    response = app.lambda_handler(apigw_event('ghub'), LambdaContext())

    assert response['statusCode'] == 301
    assert 0 < dao_factory.call_args.kwargs['redis_socket_timeout'] <= 1.0
