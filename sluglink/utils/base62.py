"""Base62 encoding of unsigned 64-bit integers

Alphabet order is digits, then uppercase, then lowercase letters, so the
encoding of small numbers reads like ordinary positional notation:

    >>> encode(0)
    '0'
    >>> encode(61)
    'z'
    >>> encode(62)
    '10'

Codes are only ever looked up verbatim as store keys, so no decoder is provided.
"""

import string


ALPHABET = string.digits + string.ascii_uppercase + string.ascii_lowercase
BASE = len(ALPHABET)
MAX_UINT64 = 2**64 - 1


def encode(number: int) -> str:
    """Encode an unsigned 64-bit integer as a minimal-length Base62 string.

    Args:
        number (int):
            Value in [0, 2**64 - 1].

    Returns:
        str: Base62 representation, most significant symbol first,
             without leading zero symbols (except for 0 itself).

    Raises:
        TypeError: If number is not an integer.
        ValueError: If number is outside the unsigned 64-bit range.
    """
    if not isinstance(number, int) or isinstance(number, bool):
        raise TypeError(f'Number must be of type integer (given type: {type(number)}).')
    if not 0 <= number <= MAX_UINT64:
        raise ValueError(f'Number must be an unsigned 64-bit integer (given value: {number}).')

    if number == 0:
        return ALPHABET[0]

    symbols = []
    while number:
        number, remainder = divmod(number, BASE)
        symbols.append(ALPHABET[remainder])
    return ''.join(reversed(symbols))
