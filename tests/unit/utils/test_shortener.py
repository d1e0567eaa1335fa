"""Unit tests for the generate_shortcode function in shortener.py.

Test coverage includes:

1. Basic functionality
   - Ensures the function returns a string of the requested length.

2. Output format
   - All characters belong to the Base62 alphabet (or a custom alphabet).

3. Determinism
   - The same seeded generator yields the same shortcodes.

4. Error handling
   - Invalid lengths and empty alphabets raise the appropriate exceptions.
"""

import random
import string

import pytest

from linkshortener.utils import generate_shortcode


# -------------------------------
# 1. Basic functionality
# -------------------------------


def test_generate_shortcode_default_length():
    result = generate_shortcode()
    assert isinstance(result, str)
    assert len(result) == 6


@pytest.mark.parametrize('length', [1, 3, 12, 32])
def test_generate_shortcode_custom_length(length):
    assert len(generate_shortcode(length)) == length


# -------------------------------
# 2. Output format
# -------------------------------


def test_generate_shortcode_is_base62():
    allowed = set(string.ascii_letters + string.digits)
    for _ in range(200):
        assert set(generate_shortcode(6)) <= allowed


def test_generate_shortcode_custom_alphabet():
    assert generate_shortcode(8, alphabet='x') == 'xxxxxxxx'


# -------------------------------
# 3. Determinism
# -------------------------------


def test_generate_shortcode_seeded_rng():
    first = [generate_shortcode(6, rng=random.Random(99)) for _ in range(3)]
    second = [generate_shortcode(6, rng=random.Random(99)) for _ in range(3)]
    assert first == second


# -------------------------------
# 4. Error handling
# -------------------------------


@pytest.mark.parametrize('length, exception', [(0, ValueError), (-1, ValueError), ('6', TypeError), (2.5, TypeError), (True, TypeError)])
def test_generate_shortcode_invalid_length(length, exception):
    with pytest.raises(exception):
        generate_shortcode(length)


def test_generate_shortcode_empty_alphabet():
    with pytest.raises(ValueError, match='Alphabet must be a non-empty string.'):
        generate_shortcode(6, alphabet='')
