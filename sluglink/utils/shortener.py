"""Shortcode generation utility

This module derives a short, deterministic code from a URL's content.

Functions:
    short_hash(url):
        Fingerprint a URL and Base62-encode the fingerprint.

Example:
    >>> from sluglink.utils import short_hash
    >>> short_hash('https://example.com')
    '4KjP4hmE2uW'
"""

import hashlib

from sluglink.utils.base62 import encode


FINGERPRINT_BYTES = 8


def short_hash(url: str) -> str:
    """Generate a short, deterministic code from a URL.

    Computes the SHA-1 digest of the UTF-8 encoded URL, reads its first 8 bytes
    as a big-endian unsigned 64-bit integer (the fingerprint) and Base62-encodes
    it. The result has between 1 and 11 characters.

    Args:
        url (str):
            URL to fingerprint. Identical input always yields identical output.

    Returns:
        str: Base62 code derived from the URL.

    Example:
        >>> short_hash('https://github.com')
        'BOSIwc5zCv8'

    NOTE:
        - Collisions are possible (birthday bound on a 64-bit space). Detecting
          them is the shortening policy's job, this function never looks at the store.
    """
    if not isinstance(url, str):
        raise TypeError(f'URL must be of type string (given type: {type(url)}).')

    digest = hashlib.sha1(url.encode('utf-8')).digest()  # noqa: S324
    fingerprint = int.from_bytes(digest[:FINGERPRINT_BYTES], byteorder='big', signed=False)
    return encode(fingerprint)
