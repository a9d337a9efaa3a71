"""API Gateway (Lambda proxy) response builders.

Error bodies follow {"error": <message>, "errorCode": <code>}.
"""

import json
from typing import Any

from sluglink.types import LambdaResponse


def cors_headers(allow_origin: str) -> dict[str, str]:
    return {
        'Access-Control-Allow-Origin': allow_origin,
        'Access-Control-Allow-Headers': 'Content-Type',
        'Access-Control-Allow-Methods': 'OPTIONS,POST,GET',
    }


def _error_body(message: str, error_code: str | None, **extra: Any) -> str:
    body = {'error': message, **extra}
    if error_code:
        body['errorCode'] = error_code
    return json.dumps(body)


def response_200(body: dict[str, Any], headers: dict[str, str] | None = None) -> LambdaResponse:
    return {
        'statusCode': 200,
        'headers': {'Content-Type': 'application/json', **(headers or {})},
        'body': json.dumps(body),
    }


def response_301(*, location: str) -> LambdaResponse:
    return {
        'statusCode': 301,
        'headers': {'Location': location},
        'body': json.dumps({}),  # no body needed for redirects
    }


def response_400(message: str, error_code: str | None = None, headers: dict[str, str] | None = None, **extra: Any) -> LambdaResponse:
    return {
        'statusCode': 400,
        'headers': {'Content-Type': 'application/json', **(headers or {})},
        'body': _error_body(message, error_code, **extra),
    }


def response_404(message: str, error_code: str | None = None) -> LambdaResponse:
    return {
        'statusCode': 404,
        'headers': {'Content-Type': 'application/json'},
        'body': _error_body(message, error_code),
    }


def response_500(message: str | None = None, error_code: str | None = None, headers: dict[str, str] | None = None) -> LambdaResponse:
    return {
        'statusCode': 500,
        'headers': {'Content-Type': 'application/json', **(headers or {})},
        'body': _error_body(message or 'Internal Server Error', error_code),
    }
