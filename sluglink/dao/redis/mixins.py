"""Redis mixin providing shared client initialization and connectivity checks.

Responsibilities:
    - Initialize Redis client (with bounded socket timeouts)
    - Healthcheck Redis client
    - Close Redis client

Classes:
    - RedisClientMixin: Base mixin to inject Redis key managemnent, client setup & healthcheck.

Example:
    Typical usage with a DAO implementation:

        >>> class ShortURLRedisDAO(RedisClientMixin, ShortURLBaseDAO):
        ...     pass
        ...
        >>> dao = ShortURLRedisDAO(prefix="sluglink:prod")
        >>> dao._healthcheck()
        True
"""

from typing import Optional

import redis

from sluglink.dao.redis.redis_key_schema import RedisKeySchema
from sluglink.dao.redis.helpers import redis_address
from sluglink.dao.exceptions import DataStoreError
from sluglink.constants import Defaults


class RedisClientMixin:
    """Mixin Redis client setup and health check for Redis-backed DAOs.

    Attributes:
        redis (redis.Redis):
            Active Redis client instance used by subclasses.

        keys (RedisKeySchema):
            Helper class for generating namespaced Redis key names.

    Methods:
        _healthcheck() -> bool:
            Ping Redis to verify connectivity, raise DataStoreError if unreachable.

        close() -> None:
            Close the Redis client and its connection pool.
    """

    def __init__(
        self,
        redis_host: Optional[str] = Defaults.REDIS_HOST,
        redis_port: Optional[int] = Defaults.REDIS_PORT,
        redis_db: Optional[int] = Defaults.REDIS_DB,
        redis_decode_responses: Optional[bool] = True,
        redis_username: Optional[str] = None,
        redis_password: Optional[str] = None,
        redis_socket_timeout: Optional[float] = Defaults.REDIS_SOCKET_TIMEOUT,
        redis_client: Optional[redis.Redis] = None,
        prefix: Optional[str] = None,
    ):
        """Initialize a Redis-based DAO for short URL management

        The option is given to either use an existing Redis client instance or
        create one via the appropriate Redis connection parameters.

        Args:
            redis_host (Optional[str]):
                Hostname of the Redis server. Defaults to 'localhost'.

            redis_port (Optional[int]):
                Redis server port. Defaults to 6379.

            redis_db (Optional[int]):
                Redis database index. Defaults to 0.

            redis_decode_responses (Optional[bool]):
                If True, decodes Redis responses. Defaults to True.

            redis_username (Optional[str]):
                Username for Redis authentication (if required).

            redis_password (Optional[str]):
                Password for Redis authentication (if required).

            redis_socket_timeout (Optional[float]):
                Upper bound in seconds for connecting and for every command.
                Defaults to 5 seconds.

            redis_client (Optional[redis.Redis]):
                Pre-initialized Redis client. If None, a new client is created.

            prefix (Optional[str]):
                Namespace prefix for all Redis keys, e.g. 'app:env'.

        Raises:
            DataStoreError:
                If Redis healthcheck fails (connectivity issues).
        """
        if redis_client is None:
            redis_client = redis.Redis(
                host=redis_host,
                port=int(redis_port),
                db=int(redis_db),
                decode_responses=redis_decode_responses,
                username=redis_username,
                password=redis_password,
                socket_timeout=redis_socket_timeout,
                socket_connect_timeout=redis_socket_timeout,
            )

        self.redis = redis_client
        self.keys = RedisKeySchema(prefix=prefix)

        self._healthcheck()

    def _healthcheck(self) -> bool:
        """PING Redis to healthcheck connectivity

        The PING is bounded by the client's socket timeouts like every other command.

        Returns:
            bool: True if Redis is reachable.

        Raises:
            DataStoreError:
                If Redis can't be reached or rejects the connection (e.g. bad credentials).
        """
        try:
            self.redis.ping()
        except redis.exceptions.RedisError as e:
            raise DataStoreError(f"Can't connect to Redis at {redis_address(self.redis)}. Check the provided configuration paramters.") from e
        return True

    def close(self) -> None:
        self.redis.close()
