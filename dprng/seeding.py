from __future__ import annotations

from argon2.low_level import Type as ArgonType, hash_secret_raw

from .constants import (
    ARGON_HASH_LEN,
    ARGON_MEMORY_COST_KIB,
    ARGON_PARALLELISM,
    ARGON_TIME_COST,
    MAX_SEED,
    SALT_SIZE,
)
from .errors import InvalidArgument


def parse_seed(text: str) -> int:
    """Parse a decimal or ``0x``-prefixed hexadecimal seed and range-check it."""
    cleaned = text.strip().replace("_", "")
    try:
        value = int(cleaned, 0)
    except ValueError as exc:
        raise InvalidArgument(f"invalid seed {text!r}") from exc
    if value < 0 or value > MAX_SEED:
        raise InvalidArgument(f"seed must be within 0..{MAX_SEED:#x}, got {text!r}")
    return value


def seed_from_passphrase(passphrase: str, salt: bytes) -> int:
    """Derive a 28-bit seed from a passphrase and salt with Argon2id.

    The same passphrase and salt always give the same seed, so a salted
    generator can be rebuilt from memorable inputs.
    """
    if not isinstance(salt, (bytes, bytearray)) or len(salt) < 8:
        raise InvalidArgument(f"salt must be at least 8 bytes (recommended {SALT_SIZE})")
    digest = hash_secret_raw(
        passphrase.encode("utf-8"),
        bytes(salt),
        time_cost=ARGON_TIME_COST,
        memory_cost=ARGON_MEMORY_COST_KIB,
        parallelism=ARGON_PARALLELISM,
        hash_len=ARGON_HASH_LEN,
        type=ArgonType.ID,
    )
    return int.from_bytes(digest[:4], "big") & MAX_SEED
