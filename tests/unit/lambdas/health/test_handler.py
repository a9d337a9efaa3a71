"""Unit tests for the health AWS Lambda handler."""

import json

from sluglink.lambdas.health import app


def test_health():
    response = app.lambda_handler({'httpMethod': 'GET', 'path': '/health'}, None)

    assert response['statusCode'] == 200
    assert response['headers']['Content-Type'] == 'application/json'
    assert json.loads(response['body']) == {'status': 'healthy', 'storage': 'redis'}
