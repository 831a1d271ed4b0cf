from __future__ import annotations

import unittest
from unittest import mock

from dprng import entropy
from dprng.constants import MAX_SEED
from dprng.entropy import FallbackEntropy, cryptodome_bits, draw_seed, urandom_bits
from dprng.errors import EntropyUnavailable, InvalidArgument
from dprng.prng import DPRNG
from dprng.seeding import parse_seed, seed_from_passphrase


class _DeviceGone(Exception):
    pass


def _failing_source(n_bits: int) -> int:
    raise OSError("no entropy device")


class EntropySourceTests(unittest.TestCase):
    def test_builtin_sources_stay_in_width(self):
        for source in (cryptodome_bits, urandom_bits):
            for n in (1, 8, 28, 33):
                for _ in range(20):
                    v = source(n)
                    self.assertGreaterEqual(v, 0)
                    self.assertLess(v, 1 << n)

    def test_seedless_construction_uses_injected_source(self):
        calls = []

        def source(n_bits: int) -> int:
            calls.append(n_bits)
            return 0x0000000

        gen = DPRNG(entropy=source)
        self.assertEqual(calls, [28])
        self.assertEqual(gen.seed, 0)
        self.assertEqual(gen.next_int(0, 0xFF), 0xCC)

    def test_explicit_seed_skips_entropy(self):
        def source(n_bits: int) -> int:
            raise AssertionError("entropy should not be consulted")

        self.assertEqual(DPRNG(7, entropy=source).seed, 7)

    def test_default_source(self):
        gen = DPRNG()
        self.assertGreaterEqual(gen.seed, 0)
        self.assertLessEqual(gen.seed, MAX_SEED)

    def test_default_source_failure_surfaces(self):
        with mock.patch.object(entropy, "default_source", _failing_source):
            with self.assertRaises(EntropyUnavailable):
                DPRNG()

    def test_failure_is_not_silently_replaced(self):
        with self.assertRaises(EntropyUnavailable) as ctx:
            DPRNG(entropy=_failing_source)
        self.assertIsInstance(ctx.exception.__cause__, OSError)

    def test_unexpected_source_exception_is_wrapped(self):
        def source(n_bits: int) -> int:
            raise _DeviceGone("token unplugged")

        with self.assertRaises(EntropyUnavailable) as ctx:
            DPRNG(entropy=source)
        self.assertIsInstance(ctx.exception.__cause__, _DeviceGone)
        self.assertEqual(DPRNG(entropy=FallbackEntropy(source, lambda n: 3)).seed, 3)

    def test_out_of_range_values_rejected(self):
        for bad in (-1, 1 << 28, 1.0, None):
            with self.assertRaises(EntropyUnavailable):
                draw_seed(lambda n, v=bad: v)

    def test_explicit_fallback(self):
        src = FallbackEntropy(_failing_source, lambda n: 0x1520C5D)
        gen = DPRNG(entropy=src)
        self.assertEqual(gen.seed, 0x1520C5D)
        self.assertEqual(gen.next_int(0, 0xFF), 0x4A)

        both_fail = FallbackEntropy(_failing_source, _failing_source)
        with self.assertRaises(EntropyUnavailable):
            DPRNG(entropy=both_fail)


class SeedingTests(unittest.TestCase):
    def test_parse_seed(self):
        self.assertEqual(parse_seed("0x070554f"), 0x070554F)
        self.assertEqual(parse_seed(" 42 "), 42)
        self.assertEqual(parse_seed("0x0FFF_FFFF"), MAX_SEED)
        for bad in ("0x10000000", "-1", "seed", ""):
            with self.assertRaises(InvalidArgument):
                parse_seed(bad)

    def test_passphrase_seed_is_deterministic(self):
        salt = b"0123456789abcdef"
        a = seed_from_passphrase("correct horse", salt)
        b = seed_from_passphrase("correct horse", salt)
        self.assertEqual(a, b)
        self.assertGreaterEqual(a, 0)
        self.assertLessEqual(a, MAX_SEED)
        self.assertNotEqual(a, seed_from_passphrase("correct horse", b"fedcba9876543210"))
        self.assertEqual(DPRNG(a).next_bytes(16), DPRNG(b).next_bytes(16))

    def test_passphrase_short_salt(self):
        with self.assertRaises(InvalidArgument):
            seed_from_passphrase("x", b"short")


if __name__ == "__main__":
    unittest.main()
