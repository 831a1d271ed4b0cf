"""Entropy sources consulted when a generator is constructed without a seed.

A source is any callable taking a bit count and returning a non-negative
integer below ``2**n_bits``. The default draws from PyCryptodomex's
``get_random_bytes``; callers that want a second source behind it must ask
for one explicitly through :class:`FallbackEntropy`.
"""

from __future__ import annotations

import os
from typing import Callable

from Cryptodome.Random import get_random_bytes

from .constants import SEED_BITS
from .errors import EntropyUnavailable


EntropySource = Callable[[int], int]


def _bits_from_bytes(raw: bytes, n_bits: int) -> int:
    return int.from_bytes(raw, "big") & ((1 << n_bits) - 1)


def cryptodome_bits(n_bits: int) -> int:
    return _bits_from_bytes(get_random_bytes((n_bits + 7) // 8), n_bits)


def urandom_bits(n_bits: int) -> int:
    return _bits_from_bytes(os.urandom((n_bits + 7) // 8), n_bits)


default_source: EntropySource = cryptodome_bits


class FallbackEntropy:
    """Try ``primary`` and, if it cannot deliver, ``secondary``."""

    def __init__(self, primary: EntropySource, secondary: EntropySource):
        self.primary = primary
        self.secondary = secondary

    def __call__(self, n_bits: int) -> int:
        try:
            return draw_bits(self.primary, n_bits)
        except EntropyUnavailable:
            return draw_bits(self.secondary, n_bits)


def draw_bits(source: EntropySource, n_bits: int) -> int:
    """Call ``source`` and check that it returned ``n_bits`` worth of bits.

    Failures of the source surface as :class:`EntropyUnavailable`.
    """
    try:
        value = source(n_bits)
    except EntropyUnavailable:
        raise
    except Exception as exc:
        raise EntropyUnavailable(f"entropy source failed: {exc}") from exc
    if not isinstance(value, int) or isinstance(value, bool):
        raise EntropyUnavailable(f"entropy source returned {type(value).__name__}, expected int")
    if value < 0 or value >= (1 << n_bits):
        raise EntropyUnavailable(f"entropy source returned {value:#x}, outside {n_bits} bits")
    return value


def draw_seed(source: EntropySource | None = None) -> int:
    return draw_bits(source if source is not None else default_source, SEED_BITS)
