"""Unit tests for shortcode generation in shortener.py.

Test coverage includes:

1. Random shortcodes
   - Fixed length (6 by default) over the base36 alphabet [0-9a-z].
   - Custom lengths and injected random sources are honoured.
   - Non-positive lengths raise ValueError.

2. Counter-derived shortcodes
   - Deterministic for the same counter and salt.
   - Different salts produce different codes.
   - Distinct counters map to distinct codes inside the modulo space.
   - Counters wrap around at BASE**length.
   - Invalid counters, salts and multipliers raise errors.

3. CounterShortcodeGenerator
   - Every call advances the counter and yields a new code.
"""

import random
import string

import pytest
import xxhash

from minishortener.utils import generate_shortcode, generate_counter_shortcode, CounterShortcodeGenerator
from minishortener.utils.shortener import ALPHABET, BASE


BASE36 = set(string.digits + string.ascii_lowercase)


# -------------------------------
# 1. Random shortcodes
# -------------------------------


def test_alphabet_is_base36():
    """Ensure the alphabet is exactly digits followed by lowercase letters."""
    assert ALPHABET == '0123456789abcdefghijklmnopqrstuvwxyz'
    assert BASE == 36


@pytest.mark.parametrize('attempt', range(50))
def test_generate_shortcode_is_six_base36_characters(attempt):
    """Ensure random shortcodes have length 6 and use only [0-9a-z]."""
    shortcode = generate_shortcode()
    assert isinstance(shortcode, str)
    assert len(shortcode) == 6
    assert set(shortcode) <= BASE36


@pytest.mark.parametrize('length', [1, 8, 12])
def test_generate_shortcode_respects_length(length):
    """Ensure the requested length is honoured."""
    assert len(generate_shortcode(length=length)) == length


def test_generate_shortcode_uses_injected_rng():
    """Ensure equally seeded random sources yield equal codes."""
    assert generate_shortcode(rng=random.Random(1234)) == generate_shortcode(rng=random.Random(1234))


@pytest.mark.parametrize('length', [0, -3])
def test_generate_shortcode_rejects_non_positive_length(length):
    """Non-positive lengths raise ValueError."""
    with pytest.raises(ValueError):
        generate_shortcode(length=length)


# -------------------------------
# 2. Counter-derived shortcodes
# -------------------------------


def test_counter_shortcode_is_deterministic():
    """Same counter + same salt always produce the same code."""
    assert generate_counter_shortcode(123, salt='unit_test_salt') == generate_counter_shortcode(123, salt='unit_test_salt')


def test_counter_shortcode_format():
    """Counter-derived codes are 6 base36 characters."""
    shortcode = generate_counter_shortcode(123, salt='format_test')
    assert len(shortcode) == 6
    assert set(shortcode) <= BASE36


def test_counter_shortcode_hashes_salt_bytes():
    """Ensure the salt is hashed as UTF-8 bytes with the installed xxhash."""
    modulo_space = BASE**6
    permuted = (42 * 2654435761 + xxhash.xxh64_intdigest(b'my_secret') % modulo_space) % modulo_space
    expected = ''.join(reversed([ALPHABET[(permuted // BASE**i) % BASE] for i in range(6)]))

    assert generate_counter_shortcode(42, salt='my_secret') == expected


@pytest.mark.parametrize('salt', ['unit_test_salt', 'sel-\u00e9t\u00e9', '\u79d8\u5bc6'])
def test_counter_shortcode_accepts_any_str_salt(salt):
    """Ensure ASCII and non-ASCII salts both produce 6 base36 characters."""
    shortcode = generate_counter_shortcode(7, salt=salt)
    assert len(shortcode) == 6
    assert set(shortcode) <= BASE36


def test_counter_shortcode_diff_salts_produce_diff_codes():
    """Changing the salt shifts the output space."""
    codes_a = [generate_counter_shortcode(i, salt='unit_test_saltA') for i in range(20)]
    codes_b = [generate_counter_shortcode(i, salt='unit_test_saltB') for i in range(20)]
    assert codes_a != codes_b


def test_counter_shortcode_is_collision_free_for_distinct_counters():
    """Distinct counters below BASE**length map to distinct codes."""
    codes = {generate_counter_shortcode(i, salt='collision_test') for i in range(5000)}
    assert len(codes) == 5000


def test_counter_shortcode_wraps_around_for_big_counters():
    """Counters that differ by BASE**length share a code."""
    first = generate_counter_shortcode(12345, salt='my_secret')
    assert generate_counter_shortcode(36**6 + 12345, salt='my_secret') == first
    assert generate_counter_shortcode(2 * 36**6 + 12345, salt='my_secret') == first


@pytest.mark.parametrize('counter', [None, 'abc', 12.34, True])
def test_invalid_counter_type_raises_error(counter):
    """Non-integer counters raise TypeError."""
    with pytest.raises(TypeError):
        generate_counter_shortcode(counter)


def test_negative_counter_raises_error():
    """Negative counters raise ValueError."""
    with pytest.raises(ValueError):
        generate_counter_shortcode(-1)


@pytest.mark.parametrize('salt', [None, 1, 12.34])
def test_invalid_salt_type_raises_error(salt):
    """Non-string salts raise TypeError."""
    with pytest.raises(TypeError):
        generate_counter_shortcode(100, salt=salt)


def test_empty_salt_raises_error():
    """Empty salts raise ValueError."""
    with pytest.raises(ValueError):
        generate_counter_shortcode(100, salt='')


@pytest.mark.parametrize('mult', [2, 3, 6, 1315423911])
def test_multiplier_not_coprime_raises_error(mult):
    """Multipliers sharing a factor with 36**length raise ValueError."""
    with pytest.raises(ValueError):
        generate_counter_shortcode(100, mult=mult)


# -------------------------------
# 3. CounterShortcodeGenerator
# -------------------------------


def test_counter_generator_yields_sequence_of_counter_codes():
    """Each call encodes the next counter value."""
    generator = CounterShortcodeGenerator(salt='sequence_test', start=10)
    expected = [generate_counter_shortcode(i, salt='sequence_test') for i in range(10, 15)]
    assert [generator() for _ in range(5)] == expected


def test_counter_generator_never_repeats():
    """Consecutive codes are all distinct."""
    generator = CounterShortcodeGenerator()
    codes = [generator() for _ in range(1000)]
    assert len(set(codes)) == 1000
