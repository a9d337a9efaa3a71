"""Shortening policy: decide which short code a URL gets, and resolve codes back.

Per request the policy walks through these states:

    Start -> TryGenerator | SkipGenerator
          -> GeneratorSlugChosen | HashFallback
          -> Persist -> Done | Failed

- Without a slug generator, the code is always the URL's content hash.
- With a generator, its proposal is used if the store has no live mapping for
  it. Generator failures are logged and fall back to the hash.
- The generator slug is persisted set-if-absent, so a concurrent request that
  claimed the same slug first makes this one fall back to the hash instead of
  overwriting the other mapping.
- Hash-based codes are persisted unconditionally: on a (rare) hash collision
  the last write wins.
- A store that can't be reached during the availability check aborts the
  request instead of pretending the slug is free.

The policy keeps no mapping state: every read and write goes to the DAO.

Example:
    >>> shortener = URLShortener(ShortURLMemoryDAO(), base_url='http://localhost:8080')
    >>> shortener.shorten('example.com').to_dict()
    {'original_url': 'https://example.com', 'short_code': '...', 'short_url': 'http://localhost:8080/...', 'slug_type': 'hash_based'}
"""

import logging
from enum import StrEnum

from sluglink.models import ShortURLModel, ShortenedURL, SlugType
from sluglink.dao.base import ShortURLBaseDAO
from sluglink.dao.exceptions import DataStoreError, ShortURLAlreadyExistsError, ShortURLNotFoundError
from sluglink.exceptions import SlugGenerationError
from sluglink.services.slug_generator import SlugGenerator
from sluglink.utils.deadline import Deadline
from sluglink.utils.shortener import short_hash
from sluglink.utils.validator import normalize_url


logger = logging.getLogger(__name__)


class SlugAvailability(StrEnum):
    """Outcome of looking a candidate slug up in the store."""

    AVAILABLE = 'available'  # no live mapping
    TAKEN = 'taken'  # a live mapping exists
    UNAVAILABLE = 'unavailable'  # the store couldn't answer


class URLShortener:
    """Create short codes for URLs and resolve them.

    Args:
        short_url_dao (ShortURLBaseDAO):
            Store holding all mappings. Must be safe for concurrent use.
        slug_generator (SlugGenerator | None):
            Optional generator of human-readable slugs. None disables it.
        base_url (str):
            Public base URL of the service, e.g. 'http://localhost:8080'.
    """

    def __init__(
        self,
        short_url_dao: ShortURLBaseDAO,
        slug_generator: SlugGenerator | None = None,
        base_url: str = 'http://localhost:8080',
    ):
        self.short_url_dao = short_url_dao
        self.slug_generator = slug_generator
        self.base_url = base_url.rstrip('/')

    def shorten(self, url: str, deadline: Deadline | None = None) -> ShortenedURL:
        """Shorten a URL.

        Args:
            url (str):
                URL as submitted by the user. It is validated and normalized first.
            deadline (Deadline | None):
                Time budget of the request. None means unbounded.

        Returns:
            ShortenedURL: The stored mapping and the branch that produced its code.

        Raises:
            InvalidURLError:
                If the URL fails validation. The store is never touched.
            DataStoreError:
                If the store fails during the availability check or the write.
            DeadlineExceededError:
                If the deadline passes before the mapping is written.
        """
        original_url = normalize_url(url)

        if self.slug_generator is None:
            logger.debug('No slug generator configured. Using hash-based slug.')
        else:
            shortened = self._try_generator_slug(original_url, deadline)
            if shortened is not None:
                return shortened

        shortcode = short_hash(original_url)
        self._persist(ShortURLModel(target=original_url, shortcode=shortcode), nx=False, deadline=deadline)
        logger.info('Using hash-based slug.', extra={'shortcode': shortcode, 'url': original_url})
        return self._result(original_url, shortcode, SlugType.HASH_BASED)

    def resolve(self, shortcode: str, deadline: Deadline | None = None) -> str:
        """Return the original URL stored under a short code.

        Raises:
            ShortURLNotFoundError:
                If the code never existed or its mapping expired.
            DataStoreError:
                If the store can't be reached.
            DeadlineExceededError:
                If the deadline already passed.
        """
        if deadline is not None:
            deadline.check('resolve')
        return self.short_url_dao.get(shortcode).target

    def check_availability(self, slug: str) -> SlugAvailability:
        """Look a slug up in the store (best-effort, point-in-time).

        A lookup that fails because of the store (rather than a missing key)
        is reported as UNAVAILABLE, never as AVAILABLE.
        """
        try:
            self.short_url_dao.get(slug)
        except ShortURLNotFoundError:
            return SlugAvailability.AVAILABLE
        except DataStoreError:
            logger.warning('Store unreachable while checking slug availability.', extra={'slug': slug}, exc_info=True)
            return SlugAvailability.UNAVAILABLE
        return SlugAvailability.TAKEN

    def _try_generator_slug(self, original_url: str, deadline: Deadline | None) -> ShortenedURL | None:
        # Returns None whenever the policy must fall back to the hash-based code
        if deadline is not None:
            deadline.check('slug generation')

        try:
            slug = self.slug_generator.generate(original_url)
        except SlugGenerationError as e:
            logger.warning('AI slug generation failed, falling back to hash.', extra={'url': original_url, 'reason': str(e)})
            return None

        if deadline is not None:
            deadline.check('slug availability check')

        availability = self.check_availability(slug)
        if availability is SlugAvailability.UNAVAILABLE:
            raise DataStoreError(f"Couldn't verify availability of slug '{slug}'.")
        if availability is SlugAvailability.TAKEN:
            logger.info('AI-generated slug already exists, falling back to hash.', extra={'slug': slug})
            return None

        try:
            self._persist(ShortURLModel(target=original_url, shortcode=slug), nx=True, deadline=deadline)
        except ShortURLAlreadyExistsError:
            logger.info('AI-generated slug was claimed concurrently, falling back to hash.', extra={'slug': slug})
            return None

        logger.info('Using AI-generated slug.', extra={'shortcode': slug, 'url': original_url})
        return self._result(original_url, slug, SlugType.GENERATOR_DERIVED)

    def _persist(self, short_url: ShortURLModel, nx: bool, deadline: Deadline | None) -> None:
        if deadline is not None:
            deadline.check('persist')
        self.short_url_dao.insert(short_url, nx=nx)
        logger.debug('Stored URL mapping.', extra={'shortcode': short_url.shortcode, 'url': short_url.target})

    def _result(self, original_url: str, shortcode: str, slug_type: SlugType) -> ShortenedURL:
        return ShortenedURL(
            original_url=original_url,
            short_code=shortcode,
            short_url=f'{self.base_url}/{shortcode}',
            slug_type=slug_type,
        )
