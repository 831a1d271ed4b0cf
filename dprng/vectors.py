"""Known-answer vectors for the DPRNG hash and generator.

Two provenances are kept apart:

- ``REFERENCE_*`` tables are the published cross-implementation vectors.
  Any conforming port must reproduce them.
- ``REGRESSION_*`` tables and ``HASH_TRACES`` were generated by this package
  and pin its own output. They are consistent with the reference tables but
  are not an independent authority for other ports.

``HASH_VECTORS`` and ``SEQUENCE_VECTORS`` merge both provenances. Sequence
tables map a seed to ``{call index: next_int(0, 0xFF) result}`` of a fresh
generator.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

from .hashing import hash28, hash_trace
from .prng import DPRNG


REFERENCE_HASH_VECTORS: Dict[int, int] = {
    0x0000000: 0x41272CC,
    0x35CF421: 0xEF8959C,
}

REGRESSION_HASH_VECTORS: Dict[int, int] = {
    0x0000001: 0xB624556,
    0x0000002: 0xDAC9B09,
    0x00000FF: 0x4759937,
    0x0000100: 0x8F39666,
    0x1234567: 0x0E6E724,
    0x0ABCDEF: 0x514C374,
    0xFFFFFFF: 0x506F3CA,
    0xFFFFFFE: 0xC1B6010,
    0x8000000: 0xA9222F5,
    0x7654321: 0x53CAE10,
    0x1520C5D: 0xD2A764A,
    0x070554F: 0x2584579,
}

HASH_VECTORS: Dict[int, int] = {**REFERENCE_HASH_VECTORS, **REGRESSION_HASH_VECTORS}

# Generated here; the final reduced value of each trace is a reference vector
HASH_TRACES: Dict[int, List[Tuple[int, int]]] = {
    0x0000000: [
        (0x6363630, 0xB7B7B52),
        (0xA9A9D52, 0xA3A4D42),
        (0x0A49482, 0x4800F8E),
        (0x526341E, 0x40B6CD4),
        (0x094EBD4, 0x41272CC),
    ],
    0x35CF421: [
        (0x968A2C1, 0x1DC734B),
        (0xA4C618B, 0x816AAD1),
        (0x0C02951, 0x5412137),
        (0x20C97D7, 0xE5826E1),
        (0xD9139F1, 0xEF8959C),
    ],
}

REFERENCE_SEQUENCE_VECTORS: Dict[int, Dict[int, int]] = {
    0x0000000: dict(enumerate([
        0xCC, 0x68, 0x2D, 0x9C, 0x13, 0x73, 0x27, 0x52, 0x2A, 0x83,
        0x5F, 0xB6, 0x36, 0xDE, 0xB5, 0x7B, 0x88, 0x3E, 0x58, 0x77,
    ])),
    0x1520C5D: {0x00: 0x4A},
    0x070554F: {0x63: 0xED},
}

REGRESSION_SEQUENCE_VECTORS: Dict[int, Dict[int, int]] = {
    0x070554F: {0x00: 0x79, 0x01: 0x61, 0x02: 0x28, 0x03: 0x8F},
    0x1234567: dict(enumerate([0x24, 0x95, 0x76, 0x40, 0xB6, 0xCA, 0xC2, 0xB8, 0x94, 0x6F])),
}

SEQUENCE_VECTORS: Dict[int, Dict[int, int]] = {
    seed: {**REGRESSION_SEQUENCE_VECTORS.get(seed, {}), **REFERENCE_SEQUENCE_VECTORS.get(seed, {})}
    for seed in {**REFERENCE_SEQUENCE_VECTORS, **REGRESSION_SEQUENCE_VECTORS}
}


def byte_sequence(seed: int, length: int) -> List[int]:
    gen = DPRNG(seed)
    return [gen.next_int(0, 0xFF) for _ in range(length)]


def verify_vectors() -> List[str]:
    """Recompute every table and return a description of each mismatch.

    Each line starts with ``[reference]`` or ``[regression]``.
    """
    failures: List[str] = []
    for label, table in (("reference", REFERENCE_HASH_VECTORS), ("regression", REGRESSION_HASH_VECTORS)):
        for x, expected in table.items():
            got = hash28(x)
            if got != expected:
                failures.append(f"[{label}] hash({x:#09x}) = {got:#09x}, expected {expected:#09x}")
    for x, rounds in HASH_TRACES.items():
        got_rounds = [(r.recombined, r.reduced) for r in hash_trace(x)]
        for i, (got, expected) in enumerate(zip(got_rounds, rounds)):
            if got != expected:
                failures.append(f"[regression] hash({x:#09x}) round {i + 1}: {got[0]:#09x}/{got[1]:#09x}, expected {expected[0]:#09x}/{expected[1]:#09x}")
    for label, tables in (("reference", REFERENCE_SEQUENCE_VECTORS), ("regression", REGRESSION_SEQUENCE_VECTORS)):
        for seed, table in tables.items():
            seq = byte_sequence(seed, max(table) + 1)
            for index, expected in sorted(table.items()):
                if seq[index] != expected:
                    failures.append(f"[{label}] seed {seed:#09x} index {index:#x}: {seq[index]:#04x}, expected {expected:#04x}")
    return failures
