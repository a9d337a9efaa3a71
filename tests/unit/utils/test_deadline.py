"""Unit tests for the Deadline class in deadline.py.

Test coverage includes:

1. Expiry
   - A fresh deadline is not expired and check() passes.
   - An elapsed deadline is expired and check() names the stage.

2. Lambda context
   - Remaining invocation time minus the margin.
   - Contexts without get_remaining_time_in_millis() mean "no deadline".

3. Timeout capping
   - Client timeouts never exceed the remaining time.
   - Capping against an elapsed deadline raises.
"""

import pytest

from sluglink.exceptions import DeadlineExceededError
from sluglink.utils import Deadline, bounded_timeout


class FakeLambdaContext:
    def __init__(self, remaining_ms: int):
        self.remaining_ms = remaining_ms

    def get_remaining_time_in_millis(self) -> int:
        return self.remaining_ms


# -------------------------------
# 1. Expiry
# -------------------------------


def test_fresh_deadline_is_not_expired():
    deadline = Deadline(60)

    assert not deadline.expired()
    assert 0 < deadline.remaining() <= 60
    deadline.check('persist')


def test_elapsed_deadline_raises_with_stage():
    deadline = Deadline(-1)

    assert deadline.expired()
    assert deadline.remaining() == 0.0
    with pytest.raises(DeadlineExceededError, match='before persist'):
        deadline.check('persist')


# -------------------------------
# 2. Lambda context
# -------------------------------


def test_from_lambda_context_keeps_safety_margin():
    deadline = Deadline.from_lambda_context(FakeLambdaContext(3000), margin=0.5)

    assert deadline is not None
    assert 2.0 < deadline.remaining() <= 2.5


def test_from_lambda_context_with_margin_larger_than_remaining_time():
    deadline = Deadline.from_lambda_context(FakeLambdaContext(100), margin=0.5)

    assert deadline.expired()


@pytest.mark.parametrize('context', [None, {}, {'aws_request_id': 'abc'}])
def test_from_lambda_context_without_remaining_time(context):
    assert Deadline.from_lambda_context(context) is None


# -------------------------------
# 3. Timeout capping
# -------------------------------


def test_bound_caps_timeout_at_remaining_time():
    deadline = Deadline(0.5)

    assert 0 < deadline.bound(5.0, 'redis client setup') <= 0.5


def test_bound_keeps_shorter_timeout():
    assert Deadline(60).bound(5.0, 'redis client setup') == 5.0


def test_bound_with_elapsed_deadline():
    with pytest.raises(DeadlineExceededError, match='before slug generator setup'):
        Deadline(-1).bound(5.0, 'slug generator setup')


def test_bounded_timeout_without_deadline():
    assert bounded_timeout(5.0, None, 'redis client setup') == 5.0


def test_bounded_timeout_with_deadline():
    assert bounded_timeout(5.0, Deadline(1.0), 'redis client setup') <= 1.0
