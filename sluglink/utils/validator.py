"""URL validation and normalization

User-supplied URLs are checked before anything is shortened. A URL without a
scheme is treated as HTTPS, so "example.com" is accepted and normalized to
"https://example.com". Only http and https URLs with a dotted host pass.

Functions:
    validate_url(url: str) -> None
        Raise InvalidURLError if the URL is not acceptable.
    normalize_url(url: str) -> str
        Validate the URL and return it with a scheme.

Example:
    >>> normalize_url('example.com')
    'https://example.com'
    >>> normalize_url('ftp://example.com')
    Traceback (most recent call last):
        ...
    sluglink.exceptions.InvalidURLError: URL must have a valid domain
"""

import urllib.parse

from sluglink.exceptions import InvalidURLError


SUPPORTED_SCHEMES = ('http', 'https')
DEFAULT_SCHEME_PREFIX = 'https://'


def _has_scheme(url: str) -> bool:
    return url.startswith(tuple(f'{scheme}://' for scheme in SUPPORTED_SCHEMES))


def _with_scheme(url: str) -> str:
    return url if _has_scheme(url) else DEFAULT_SCHEME_PREFIX + url


def _parse(url: str) -> urllib.parse.SplitResult:
    # urlsplit() silently tolerates control characters and whitespace, a strict URI parser doesn't
    if any(char.isspace() or ord(char) < 0x20 or ord(char) == 0x7F for char in url):
        raise InvalidURLError('invalid URL format: URL contains whitespace or control characters')

    try:
        parsed = urllib.parse.urlsplit(url)
        parsed.port  # raises ValueError on a malformed port
    except ValueError as e:
        raise InvalidURLError(f'invalid URL format: {e}') from e
    return parsed


def validate_url(url: str) -> None:
    """Check a user-supplied URL.

    Rules, applied in order:
        1. the URL is not empty;
        2. the URL doesn't start or end with a dot;
        3. a missing scheme is assumed to be https:// for the remaining checks;
        4. the URL parses;
        5. the host is not empty;
        6. the host contains at least one dot;
        7. the host doesn't start or end with a dot;
        8. an '@' only appears as 'user:password@' right after 'scheme://';
        9. the scheme is http or https.

    The host is the URL authority without the userinfo part (any port included).

    Args:
        url (str): URL exactly as the user submitted it.

    Raises:
        InvalidURLError: With the reason of the first rule that failed.
    """
    if not url:
        raise InvalidURLError('URL is required')

    if url.startswith('.') or url.endswith('.'):
        raise InvalidURLError('URL cannot start or end with a dot')

    url = _with_scheme(url)
    parsed = _parse(url)

    host = parsed.netloc.rpartition('@')[2]
    if not host:
        raise InvalidURLError('URL must have a valid host')

    if '.' not in host:
        raise InvalidURLError('URL must have a valid domain')

    if host.startswith('.') or host.endswith('.'):
        raise InvalidURLError('URL host cannot start or end with a dot')

    # Guard against host spoofing, e.g. "https://trusted.com@evil.com"
    if '@' in url:
        scheme_end = url.find('://')
        at_index = url.index('@')
        if scheme_end == -1 or at_index < scheme_end + 3:
            raise InvalidURLError('URL contains @ character in invalid position')
        if ':' not in url[scheme_end + 3 : at_index]:
            raise InvalidURLError('URL contains @ character in invalid position')

    if parsed.scheme not in SUPPORTED_SCHEMES:
        raise InvalidURLError(f"URL scheme '{parsed.scheme}' is not supported")


def normalize_url(url: str) -> str:
    """Validate a URL and prepend https:// when it has no scheme.

    Idempotent: normalizing an already normalized URL returns it unchanged.

    Raises:
        InvalidURLError: If the URL fails validation.
    """
    validate_url(url)
    return _with_scheme(url)
