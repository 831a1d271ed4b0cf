"""28-bit hash built on the Rijndael S-box.

Each of the five rounds splits the running value into a 4-bit nibble and three
bytes, substitutes the bytes through the S-box, recombines them in place,
multiplies by 7 and reduces modulo 2^28 - 1. Python integers are unbounded so
the multiply never wraps; the reduction keeps every round inside 28 bits.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from .constants import (
    FIELD_A,
    FIELD_B,
    FIELD_C,
    FIELD_D,
    HASH_MULTIPLIER,
    HASH_ROUNDS,
    MODULUS,
)
from .errors import InvalidArgument
from .sbox import SBOX


@dataclass(frozen=True)
class RoundTrace:
    recombined: int  # value after substitution, before multiply/reduce
    reduced: int  # value carried into the next round


def _field(v: int, layout: tuple) -> int:
    shift, width = layout
    return (v >> shift) & ((1 << width) - 1)


def _substitute(v: int) -> int:
    a = _field(v, FIELD_A)
    b = SBOX[_field(v, FIELD_B)]
    c = SBOX[_field(v, FIELD_C)]
    d = SBOX[_field(v, FIELD_D)]
    return (d << FIELD_D[0]) | (c << FIELD_C[0]) | (b << FIELD_B[0]) | a


def _round(v: int) -> int:
    return abs(_substitute(v) * HASH_MULTIPLIER) % MODULUS


def _check_input(x) -> int:
    if not isinstance(x, int) or isinstance(x, bool):
        raise InvalidArgument(f"hash input must be an integer, got {type(x).__name__}")
    if x < 0 or x > MODULUS:
        raise InvalidArgument(f"hash input must be within 0..{MODULUS:#x}, got {x:#x}")
    return x


def hash28(x: int) -> int:
    v = _check_input(x)
    for _ in range(HASH_ROUNDS):
        v = _round(v)
    return v


def hash_trace(x: int) -> List[RoundTrace]:
    """Return the per-round intermediate values of ``hash28(x)``.

    The ``reduced`` field of the last entry equals ``hash28(x)``.
    """
    trace: List[RoundTrace] = []
    v = _check_input(x)
    for _ in range(HASH_ROUNDS):
        recombined = _substitute(v)
        v = abs(recombined * HASH_MULTIPLIER) % MODULUS
        trace.append(RoundTrace(recombined=recombined, reduced=v))
    return trace
