from __future__ import annotations

import unittest

from dprng.constants import MODULUS
from dprng.errors import InvalidArgument
from dprng.hashing import hash28, hash_trace
from dprng.sbox import SBOX, sbox
from dprng.vectors import HASH_TRACES, HASH_VECTORS


def _gf_mul(a: int, b: int) -> int:
    res = 0
    while b:
        if b & 1:
            res ^= a
        hi = a & 0x80
        a = (a << 1) & 0xFF
        if hi:
            a ^= 0x1B
        b >>= 1
    return res


def _rotl8(v: int, n: int) -> int:
    return ((v << n) | (v >> (8 - n))) & 0xFF


class SubstitutionTableTests(unittest.TestCase):
    def test_is_permutation(self):
        self.assertEqual(len(SBOX), 256)
        self.assertEqual(sorted(SBOX), list(range(256)))

    def test_matches_rijndael_construction(self):
        for x in range(256):
            inv = 0 if x == 0 else next(y for y in range(1, 256) if _gf_mul(x, y) == 1)
            expected = inv ^ _rotl8(inv, 1) ^ _rotl8(inv, 2) ^ _rotl8(inv, 3) ^ _rotl8(inv, 4) ^ 0x63
            self.assertEqual(sbox(x), expected, f"S-box mismatch at {x:#04x}")

    def test_known_entries(self):
        self.assertEqual(sbox(0x00), 0x63)
        self.assertEqual(sbox(0x53), 0xED)
        self.assertEqual(sbox(0xFF), 0x16)


class HashTests(unittest.TestCase):
    def test_anchor_vectors(self):
        self.assertEqual(hash28(0x0000000), 0x41272CC)
        self.assertEqual(hash28(0x35CF421), 0x0EF8959C)

    def test_vector_table(self):
        for x, expected in HASH_VECTORS.items():
            with self.subTest(x=hex(x)):
                self.assertEqual(hash28(x), expected)

    def test_round_traces(self):
        for x, rounds in HASH_TRACES.items():
            trace = hash_trace(x)
            self.assertEqual(len(trace), 5)
            self.assertEqual([(r.recombined, r.reduced) for r in trace], rounds)
            self.assertEqual(trace[-1].reduced, hash28(x))

    def test_first_round_of_zero(self):
        # All three bytes substitute to 0x63; the nibble passes through
        first = hash_trace(0)[0]
        self.assertEqual(first.recombined, 0x6363630)
        self.assertEqual(first.reduced, (0x6363630 * 7) % MODULUS)

    def test_output_stays_below_modulus(self):
        for x in list(range(0, 4096)) + [MODULUS, MODULUS - 1, 0x8000000]:
            self.assertLess(hash28(x), MODULUS)

    def test_rejects_out_of_range_input(self):
        for bad in (-1, MODULUS + 1, 1 << 40, 1.0, True):
            with self.assertRaises(InvalidArgument):
                hash28(bad)
            with self.assertRaises(InvalidArgument):
                hash_trace(bad)


if __name__ == "__main__":
    unittest.main()
