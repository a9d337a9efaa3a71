"""Data Access Object (DAO) implementation for managing shortened URLs in Redis

This module provides a Redis-based implementation of ShortURLBaseDAO for CRUD-like
operations with ShortURLModel instances.

Persisted layout: one string key per short code, holding the raw original URL
and expiring after a fixed TTL (no renewal on read):

    SET <prefix>:links:<shortcode>:url <original url> EX 31536000

Responsibilities:
    - Insert (optionally set-if-absent), retrieve and delete short URLs in Redis;
    - Derive mapping metadata (creation and expiry time) from the key's TTL;
    - Provide defensive error handling and raise appropriate DAO exceptions.

Classes:
    ShortURLRedisDAO:
        DAO for storing and retrieving ShortURLModel in a Redis datastore.

Example:
    >>> from sluglink.models import ShortURLModel
    >>> from sluglink.dao.redis import ShortURLRedisDAO

    >>> dao = ShortURLRedisDAO(prefix="app:dev")

    >>> short_url = ShortURLModel(
    ...     target="https://github.com",
    ...     shortcode="ghub"
    ... )
    >>> dao.insert(short_url, nx=True)
    <ShortURLRedisDAO>

    >>> retrieved = dao.get("ghub")
    >>> retrieved.target
    'https://github.com'
    >>> retrieved.expires_at
    <datetime>
"""

from datetime import datetime, timedelta, UTC

from beartype import beartype

from sluglink.models import ShortURLModel
from sluglink.dao.base import ShortURLBaseDAO
from sluglink.dao.redis.mixins import RedisClientMixin
from sluglink.dao.redis.helpers import handle_redis_connection_error
from sluglink.dao.exceptions import ShortURLAlreadyExistsError, ShortURLNotFoundError
from sluglink.constants import TTL


class ShortURLRedisDAO(RedisClientMixin, ShortURLBaseDAO):
    """Redis-based Data Access Object (DAO) for managing short URL mappings

    This class implements the ShortURLBaseDAO interface using Redis as a data store.
    The redis-py client is backed by a thread-safe connection pool, so a single
    DAO instance may be shared by concurrent requests.

    Attributes (see RedisClientMixin):
        redis (redis.Redis):
            Redis client used to communicate with the Redis datastore.
        keys (RedisKeySchema):
            Key schema helper for generating namespaced Redis keys.

    Methods:
        insert(short_url: ShortURLModel, nx: bool = False, **kwargs) -> ShortURLRedisDAO:
            Store a short URL mapping with a one year TTL.
            Raises ShortURLAlreadyExistsError when nx=True and the shortcode is taken.
            Raises DataStoreError on connectivity issues with Redis.

        get(shortcode: str, **kwargs) -> ShortURLModel:
            Retrieve a short URL mapping and its metadata (creation, expiry) by shortcode.
            Raises ShortURLNotFoundError when the shortcode doesn't exist.
            Raises DataStoreError on connectivity issues with Redis.

        delete(shortcode: str, **kwargs) -> None:
            Remove a short URL mapping ahead of its expiry.
            Raises ShortURLNotFoundError when the shortcode doesn't exist.
            Raises DataStoreError on connectivity issues with Redis.
    """

    @handle_redis_connection_error
    @beartype
    def insert(self, short_url: ShortURLModel, nx: bool = False, **kwargs) -> 'ShortURLRedisDAO':
        """Insert a short URL mapping into Redis

        The write is a single SET command, so the set-if-absent variant is atomic:
        two concurrent inserts of the same shortcode with nx=True can't both succeed.

        Args:
            short_url (ShortURLModel):
                ShortURLModel instance representing the shortened URL mapping.
            nx (bool):
                If True, only set the key if it does not exist yet (SET NX).
                If False, overwrite any existing mapping (last write wins).
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            ShortURLRedisDAO: self (for method chaining)

        Raises:
            ShortURLAlreadyExistsError:
                If nx=True and a short URL with the same shortcode already exists.
            DataStoreError:
                If a Redis connection issue occurs.

        Example:
            >>> short_url = ShortURLModel(
            ...     target='https://github.com',
            ...     shortcode='ghub'
            ... )
            >>> dao.insert(short_url, nx=True)
            <ShortURLRedisDAO>
        """
        link_url_key = self.keys.link_url_key(short_url.shortcode)

        # NOTE: SET ... NX replies with nil when the key exists. Without NX the reply is always OK.
        created = self.redis.set(link_url_key, short_url.target, ex=TTL.ONE_YEAR, nx=nx)
        if not created:
            raise ShortURLAlreadyExistsError(f"Short URL with code '{short_url.shortcode}' already exists.")
        return self

    @handle_redis_connection_error
    @beartype
    def get(self, shortcode: str, **kwargs) -> ShortURLModel:
        """Retrieve a stored short URL mapping by shortcode

        Fetches the original URL and its remaining TTL using a single Redis
        transaction (to avoid race conditions). Calculates the expiry datetime
        from the remaining TTL value and the creation datetime from the fixed TTL.

        Args:
            shortcode (str):
                The shortcode identifier for the shortened URL.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            ShortURLModel:
                The retrieved ShortURLModel instance if found.

        Raises:
            ShortURLNotFoundError:
                If the short URL does not exist in Redis (or already expired).
            DataStoreError:
                If Redis connectivity issues occur.

        Example:
            >>> dao.get('ghub')
            ShortURLModel(target='https://github.com', shortcode='ghub', ...)
        """
        link_url_key = self.keys.link_url_key(shortcode)

        with self.redis.pipeline(transaction=True) as pipe:
            pipe.get(link_url_key)
            pipe.ttl(link_url_key)
            original_url, ttl = pipe.execute()

        if original_url is None:
            raise ShortURLNotFoundError(f"Short URL with code '{shortcode}' not found.")

        # TTL replies -1 for keys without expiry (e.g. written by hand)
        if ttl < 0:
            return ShortURLModel(target=original_url, shortcode=shortcode)

        expires_at = datetime.now(UTC) + timedelta(seconds=ttl)
        return ShortURLModel(
            target=original_url,
            shortcode=shortcode,
            created_at=expires_at - timedelta(seconds=TTL.ONE_YEAR),
            expires_at=expires_at,
        )

    @handle_redis_connection_error
    @beartype
    def delete(self, shortcode: str, **kwargs) -> None:
        """Delete a short URL mapping before its TTL elapses

        Raises:
            ShortURLNotFoundError:
                If the short URL does not exist in Redis.
            DataStoreError:
                If Redis connectivity issues occur.
        """
        deleted = self.redis.delete(self.keys.link_url_key(shortcode))
        if not deleted:
            raise ShortURLNotFoundError(f"Short URL with code '{shortcode}' not found.")
