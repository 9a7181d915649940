"""Key generation and namespacing utilities

Two key namespaces share the same keyspace:

    generated keys   random Base62 strings, e.g. 'Gh71WPT'
    reserved keys    caller-supplied keys stored with a leading '$', e.g. '$docs'

Generated keys are drawn from [a-zA-Z0-9] only, so they can never collide
with a reserved key.

Example:
    >>> from urlstore.utils.keys import generate_key, reserve_key, is_reserved_key
    >>> len(generate_key())
    7
    >>> reserve_key('docs')
    '$docs'
    >>> is_reserved_key('$docs')
    True
"""

import secrets
import string

from urlstore.constants import Keys


ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits


def generate_key(length: int = Keys.DEFAULT_LENGTH) -> str:
    """Generate a random Base62 key.

    Uses the `secrets` CSPRNG so keys are not guessable from previous ones.
    With the default length of 7 there are 62^7 (about 3.5e12) possible keys.

    Args:
        length (int, optional):
            Number of characters. Defaults to 7.

    Returns:
        str: random key over [a-zA-Z0-9].

    Raises:
        TypeError: if length is not an integer.
        ValueError: if length is not positive.
    """
    if not isinstance(length, int) or isinstance(length, bool):
        raise TypeError(f'Key length must be of type integer (given type: {type(length)}).')
    if length < 1:
        raise ValueError(f'Key length must be a positive integer (given value: {length}).')

    return ''.join(secrets.choice(ALPHABET) for _ in range(length))


def reserve_key(key: str) -> str:
    """Namespace a caller-supplied key with the reserved marker."""
    return f'{Keys.RESERVED_MARKER}{key}'


def is_reserved_key(key: str) -> bool:
    return key.startswith(Keys.RESERVED_MARKER)
