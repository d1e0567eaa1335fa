"""Shortcode generation utility

Functions:
    generate_shortcode(length=6, alphabet=SHORTCODE_ALPHABET, rng=None) -> str
        Draw a random shortcode from a Base62 alphabet.

Collision handling is not done here; the registry retries against its set of
reserved codes with a bounded number of attempts.

Example:
    >>> import random
    >>> from linkshortener.utils import generate_shortcode
    >>> code = generate_shortcode(6, rng=random.Random(7))
    >>> len(code)
    6
"""

import random

from linkshortener.constants import SHORTCODE_ALPHABET


def generate_shortcode(length: int = 6, alphabet: str = SHORTCODE_ALPHABET, rng: random.Random | None = None) -> str:
    """Generate a random shortcode.

    Args:
        length (int):
            Number of characters in the shortcode. Defaults to 6.
        alphabet (str):
            Symbols to draw from. Defaults to Base62 [a-zA-Z0-9].
        rng (random.Random | None):
            Source of randomness. Defaults to the module-level generator.

    Returns:
        str: random shortcode of exactly `length` characters.

    Raises:
        TypeError: if length is not an integer.
        ValueError: if length is not positive or the alphabet is empty.
    """
    if not isinstance(length, int) or isinstance(length, bool):
        raise TypeError(f'Length must be of type integer (given type: {type(length)}).')
    if length <= 0:
        raise ValueError(f'Length must be a positive integer (given value: {length}).')
    if not alphabet:
        raise ValueError('Alphabet must be a non-empty string.')

    rng = rng or random
    return ''.join(rng.choice(alphabet) for _ in range(length))
