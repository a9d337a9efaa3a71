"""In-process implementation of ShortURLBaseDAO

Keeps short URL mappings in a dictionary guarded by a lock. Expired mappings
are treated as missing on read and purged lazily. Useful for unit tests and
local experiments; nothing is shared between processes.

Example:
    >>> dao = ShortURLMemoryDAO()
    >>> dao.insert(ShortURLModel(target='https://github.com', shortcode='ghub'))
    <ShortURLMemoryDAO>
    >>> dao.get('ghub').target
    'https://github.com'
"""

import threading
from datetime import datetime, timedelta, UTC

from beartype import beartype

from sluglink.models import ShortURLModel
from sluglink.dao.base import ShortURLBaseDAO
from sluglink.dao.exceptions import ShortURLAlreadyExistsError, ShortURLNotFoundError
from sluglink.constants import TTL


class ShortURLMemoryDAO(ShortURLBaseDAO):
    """Thread-safe, dictionary-backed DAO with per-mapping expiry."""

    def __init__(self, ttl: int = TTL.ONE_YEAR):
        self.ttl = ttl
        self._lock = threading.Lock()
        self._links: dict[str, ShortURLModel] = {}

    def _live(self, shortcode: str, now: datetime) -> ShortURLModel | None:
        # Caller must hold the lock
        short_url = self._links.get(shortcode)
        if short_url is not None and short_url.expires_at <= now:
            del self._links[shortcode]
            return None
        return short_url

    @beartype
    def insert(self, short_url: ShortURLModel, nx: bool = False, **kwargs) -> 'ShortURLMemoryDAO':
        now = datetime.now(UTC)
        with self._lock:
            if nx and self._live(short_url.shortcode, now) is not None:
                raise ShortURLAlreadyExistsError(f"Short URL with code '{short_url.shortcode}' already exists.")
            self._links[short_url.shortcode] = ShortURLModel(
                target=short_url.target,
                shortcode=short_url.shortcode,
                created_at=now,
                expires_at=now + timedelta(seconds=self.ttl),
            )
        return self

    @beartype
    def get(self, shortcode: str, **kwargs) -> ShortURLModel:
        with self._lock:
            short_url = self._live(shortcode, datetime.now(UTC))
        if short_url is None:
            raise ShortURLNotFoundError(f"Short URL with code '{shortcode}' not found.")
        return short_url

    @beartype
    def delete(self, shortcode: str, **kwargs) -> None:
        with self._lock:
            if self._live(shortcode, datetime.now(UTC)) is None:
                raise ShortURLNotFoundError(f"Short URL with code '{shortcode}' not found.")
            del self._links[shortcode]

    def close(self) -> None:
        with self._lock:
            self._links.clear()
