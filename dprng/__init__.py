"""
dprng — a deterministic pseudo-random number generator whose output is
bit-for-bit reproducible across independent implementations.

Features:

- 28-bit hash built from five rounds of Rijndael S-box substitution,
  multiply-by-7 and reduction modulo 2^28 - 1.
- Generator state ``(state, counter)`` advanced by a single primitive that
  derives output from the old pair before mutating it.
- Integer ranges, floats in [0, 1) or [a, b), and byte sequences derived from
  that primitive, plus snapshot/restore of the state pair.
- Seeds from PyCryptodomex entropy when none is given, or from a passphrase
  and salt via Argon2id.
- Built-in reference vectors and a CLI to hash, trace, draw and verify.

This is not a cryptographically secure generator.
"""

__version__ = "0.1"

__all__ = [
    "DPRNG",
    "GeneratorState",
    "hash28",
    "hash_trace",
    "DPRNGError",
    "InvalidArgument",
    "EntropyUnavailable",
]

from .errors import DPRNGError, EntropyUnavailable, InvalidArgument
from .hashing import hash28, hash_trace
from .prng import DPRNG, GeneratorState
