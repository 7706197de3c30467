"""Shortcode generation utility

This module provides two ways of minting fixed-length shortcodes over the
base36 alphabet (digits + lowercase letters):

Functions:
    generate_shortcode(length=6, rng=None):
        Draw a random shortcode from a non-cryptographic random source.

    generate_counter_shortcode(counter, salt='minishortener', length=6, mult=2654435761):
        Deterministically scramble a numeric counter into a shortcode.

Classes:
    CounterShortcodeGenerator:
        Callable producing a new counter-derived shortcode on every call.

Example:
    >>> from minishortener.utils import generate_shortcode
    >>> len(generate_shortcode())
    6
    >>> generator = CounterShortcodeGenerator(salt='my_secret')
    >>> generator() != generator()
    True
"""

import math
import random
import string
import itertools

import xxhash

from minishortener.constants import Limits


ALPHABET = string.digits + string.ascii_lowercase
BASE = len(ALPHABET)  # 10 digits + 26 lowercase letters


def generate_shortcode(length: int = Limits.SHORTCODE_LENGTH, rng: random.Random | None = None) -> str:
    """Generate a random shortcode

    The code is drawn from the `random` module, which is neither seeded here nor
    cryptographically secure. Uniqueness is NOT guaranteed; callers that need it
    (e.g. ShortURLRegistry) check the result against codes they already hold.

    Args:
        length (int, optional):
            Number of characters in the shortcode. Defaults to 6.

        rng (random.Random | None, optional):
            Random source to draw from. Defaults to the module-level generator.

    Returns:
        str: A `length`-character string over [0-9a-z].

    Example:
        >>> generate_shortcode(rng=random.Random(42)) == generate_shortcode(rng=random.Random(42))
        True
    """
    if length <= 0:
        raise ValueError(f'Length must be a positive integer (given value: {length}).')

    source = rng if rng is not None else random
    return ''.join(source.choices(ALPHABET, k=length))


def generate_counter_shortcode(
    counter: int,
    salt: str = 'minishortener',
    length: int = Limits.SHORTCODE_LENGTH,
    mult: int = 2654435761,
) -> str:
    """Generate a short, deterministic shortcode from a counter and salt.

    The counter is pushed through an affine permutation over the fixed space
    BASE**length and then encoded in base36, so consecutive counters do not
    produce visibly sequential codes. The mapping is 1:1 as long as
    `counter < BASE**length`.

    Args:
        counter (int):
            Non-negative integer identifying the record.

        salt (str, optional):
            Secret string shifting the output space. Hashed with xxhash.

        length (int, optional):
            Length of the resulting shortcode. Defaults to 6.

        mult (int, optional):
            Multiplicative factor for the permutation. Must be coprime with
            BASE**length, i.e. odd and not divisible by 3 for base36.

    Returns:
        str: A `length`-character string over [0-9a-z].

    NOTE:
        - The output wraps around once the counter exceeds the modulo space.
        - This is obfuscation, not encryption.
        - The salt is hashed as UTF-8 bytes (xxhash 4 rejects str input).
    """
    if not isinstance(counter, int) or isinstance(counter, bool):
        raise TypeError(f'Counter must be of type integer (given type: {type(counter)}).')
    if counter < 0:
        raise ValueError(f'Counter must be a non-negative integer (given value: {counter}).')
    if not isinstance(salt, str):
        raise TypeError(f'Salt must be of type string (given type: {type(salt)}).')
    if not salt:
        raise ValueError(f'Salt must be a non-empty string (given value: {salt!r}).')
    if math.gcd(mult, BASE**length) != 1:
        raise ValueError(f'Multiplicative factor must be coprime with mod ({BASE**length}) (given value: mult={mult}).')

    modulo_space = BASE**length
    salt_hash = xxhash.xxh64_intdigest(salt.encode()) % modulo_space
    permuted = (counter * mult + salt_hash) % modulo_space

    # Most significant digit first, padded to a fixed length
    return ''.join(reversed([ALPHABET[(permuted // BASE**i) % BASE] for i in range(length)]))


class CounterShortcodeGenerator:
    """Mint shortcodes from a private monotonic counter.

    Every call advances the counter and returns
    `generate_counter_shortcode(counter, salt, length)`. Codes never repeat
    until the counter wraps the BASE**length space.

    Example:
        >>> generator = CounterShortcodeGenerator(salt='unit_test_salt')
        >>> codes = {generator() for _ in range(1000)}
        >>> len(codes)
        1000
    """

    def __init__(self, salt: str = 'minishortener', length: int = Limits.SHORTCODE_LENGTH, start: int = 0):
        self.salt = salt
        self.length = length
        self._counter = itertools.count(start)

    def __call__(self) -> str:
        return generate_counter_shortcode(next(self._counter), salt=self.salt, length=self.length)
