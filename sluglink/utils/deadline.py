"""Request deadlines

A Deadline bounds how long a single request may keep calling external
services (Redis, Bedrock). The shortening policy checks it before every
external call, so a request that runs out of time fails before anything is
written to the store. Clients built for a request get their socket timeouts
capped by the remaining time, so a single slow call can't outlive it either.

Example:
    >>> deadline = Deadline.from_lambda_context(context)
    >>> deadline.remaining()
    2.5
    >>> deadline.check('persist')
    >>> bounded_timeout(5.0, deadline, 'redis client')
    2.5
"""

import time

from sluglink.constants import Defaults
from sluglink.exceptions import DeadlineExceededError
from sluglink.types import LambdaContext


class Deadline:
    """Point in (monotonic) time after which a request must give up."""

    def __init__(self, seconds: float):
        self.expires_at = time.monotonic() + seconds

    @classmethod
    def from_lambda_context(cls, context: LambdaContext, margin: float = Defaults.DEADLINE_MARGIN) -> 'Deadline | None':
        """Build a deadline from the remaining time of a Lambda invocation.

        Args:
            context (LambdaContext):
                AWS Lambda context object.
            margin (float):
                Seconds kept in reserve to build and return the response.

        Returns:
            Deadline | None:
                None if the context doesn't expose get_remaining_time_in_millis()
                (e.g. local invocations and tests), which means "no deadline".
        """
        remaining_ms = getattr(context, 'get_remaining_time_in_millis', None)
        if remaining_ms is None:
            return None
        return cls(remaining_ms() / 1000 - margin)

    def remaining(self) -> float:
        return max(0.0, self.expires_at - time.monotonic())

    def expired(self) -> bool:
        return time.monotonic() >= self.expires_at

    def check(self, stage: str) -> None:
        """Raise DeadlineExceededError if the deadline has passed.

        Args:
            stage (str): Name of the step about to run, used in the error message.
        """
        if self.expired():
            raise DeadlineExceededError(f'Request deadline exceeded before {stage}.')

    def bound(self, timeout: float, stage: str) -> float:
        """Cap a per-call timeout so the call can't outlive the deadline.

        Args:
            timeout (float): Configured timeout in seconds.
            stage (str): Name of the client being set up, used in the error message.

        Returns:
            float: min(timeout, remaining time), always positive.

        Raises:
            DeadlineExceededError: If the deadline already passed.
        """
        remaining = self.expires_at - time.monotonic()
        if remaining <= 0:
            raise DeadlineExceededError(f'Request deadline exceeded before {stage}.')
        return min(timeout, remaining)


def bounded_timeout(timeout: float, deadline: Deadline | None, stage: str) -> float:
    """Return timeout capped by the deadline (unchanged when there is no deadline)."""
    return timeout if deadline is None else deadline.bound(timeout, stage)
