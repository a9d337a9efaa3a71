"""Abstract base class for ShortURL data access objects (DAOs).

This class establishes a consistent contract for all ShortURL DAO implementations,
regardless of the underlying storage mechanism (e.g., Redis, in-memory).

Responsibilities:
    - Provide an interface for inserting, retrieving and deleting ShortURLModel objects.
    - Standardize error handling across multiple data store implementations.
    - Own all mapping state: callers never cache mappings themselves.

Example:
    Typical usage with a datastore-specific implementation:

        >>> from sluglink.models import ShortURLModel
        >>> from sluglink.dao.redis import ShortURLRedisDAO

        >>> dao = ShortURLRedisDAO(...)

        >>> short_url = ShortURLModel(
        ...     target="https://github.com",
        ...     shortcode="ghub",
        ... )
        >>> dao.insert(short_url, nx=True)

        >>> retrieved = dao.get("ghub")
        >>> print(retrieved.target)
        https://github.com

        >>> dao.close()
"""

from abc import ABC, abstractmethod

from sluglink.models import ShortURLModel


class ShortURLBaseDAO(ABC):
    """Interface for ShortURL data access objects (DAOs).

    Methods:
        insert(short_url: ShortURLModel, nx: bool = False, **kwargs) -> ShortURLBaseDAO:
            Store a short URL mapping with the fixed TTL.
            With nx=True, raises ShortURLAlreadyExistsError if the short code already exists.
            Raises DataStoreError on connection or write failure.

        get(shortcode: str, **kwargs) -> ShortURLModel:
            Retrieve a ShortURLModel from the data store by short code.
            Raises ShortURLNotFoundError if the entry does not exist (or expired).
            Raises DataStoreError on connection or read failure.

        delete(shortcode: str, **kwargs) -> None:
            Remove a mapping before its TTL elapses.
            Raises ShortURLNotFoundError if the entry does not exist.
            Raises DataStoreError on connection or write failure.

        close() -> None:
            Release the underlying connection resources.

    Subclassing:
        Datastore-specific implementations (e.g., ShortURLRedisDAO or
        ShortURLMemoryDAO) must extend this class and implement all
        abstract methods. Implementations must be safe for concurrent use.

    NOTE:
        - Mappings are expected to expire automatically. delete() exists for
          expiry before the TTL, the common path never calls it.
    """

    @abstractmethod
    def insert(self, short_url: ShortURLModel, nx: bool = False, **kwargs) -> 'ShortURLBaseDAO':
        """Insert a new ShortURLModel into the data store.

        Args:
            short_url (ShortURLModel):
                The ShortURLModel instance to be inserted.

            nx (bool):
                If True, only insert when the short code is not already taken.
                If False (default), an existing mapping is overwritten.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            ShortURLBaseDAO: self (for method chaining)

        Raises:
            ShortURLAlreadyExistsError:
                If nx=True and a ShortURLModel with the same short code already exists.

            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def get(self, shortcode: str, **kwargs) -> ShortURLModel:
        """Retrieve a ShortURLModel from the data store by its short code.

        Args:
            shortcode (str):
                The short code of the ShortURLModel to be retrieved.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            ShortURLModel: The ShortURLModel instance.

        Raises:
            ShortURLNotFoundError:
                If no live ShortURLModel with the given short code exists.

            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def delete(self, shortcode: str, **kwargs) -> None:
        """Delete a ShortURLModel from the data store.

        Raises:
            ShortURLNotFoundError:
                If no live ShortURLModel with the given short code exists.

            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def close(self) -> None:
        """Release connections held by the DAO."""
        pass
