from __future__ import annotations

import sys
import argparse
import json as _json
import getpass as _getpass

from typing import List, Optional

from dprng.prng import DPRNG
from dprng.hashing import hash28, hash_trace
from dprng.seeding import parse_seed, seed_from_passphrase
from dprng.vectors import verify_vectors
from dprng.errors import DPRNGError, EntropyUnavailable


def _check_count(count: int) -> None:
    if count < 1:
        raise ValueError(f"--count must be at least 1, got {count}")


def _make_generator(seed: Optional[int], quiet: bool = False) -> DPRNG:
    """Build a generator, announcing entropy-drawn seeds on stderr.

    Args:
        seed: Explicit seed, or None to draw one from the default entropy source.
        quiet: Suppress the seed announcement.
    """
    gen = DPRNG(seed)
    if seed is None and not quiet:
        print(f"Seed: {gen.seed:#09x}", file=sys.stderr)
    return gen


def cmd_hash(values: List[int], *, as_json: bool = False) -> bool:
    results = [(v, hash28(v)) for v in values]
    if as_json:
        print(_json.dumps({"hashes": [{"input": v, "output": h} for v, h in results]}))
    else:
        for v, h in results:
            print(f"{v:#09x}\t{h:#09x}")
    return True


def cmd_trace(value: int, *, as_json: bool = False) -> bool:
    rounds = hash_trace(value)
    if as_json:
        print(_json.dumps({
            "input": value,
            "rounds": [{"recombined": r.recombined, "reduced": r.reduced} for r in rounds],
            "output": rounds[-1].reduced,
        }))
        return True
    print(f"Input: {value:#09x}")
    for i, r in enumerate(rounds, start=1):
        print(f"  round {i}: recombined={r.recombined:#09x} reduced={r.reduced:#09x}")
    print(f"Output: {rounds[-1].reduced:#09x}")
    return True


def cmd_int(a: int, b: int, *, seed: Optional[int] = None, count: int = 1, as_json: bool = False) -> bool:
    _check_count(count)
    gen = _make_generator(seed, quiet=as_json)
    values = [gen.next_int(a, b) for _ in range(count)]
    if as_json:
        print(_json.dumps({"seed": gen.seed, "values": values}))
    else:
        for v in values:
            print(v)
    return True


def cmd_float(a: Optional[float], b: Optional[float], *, seed: Optional[int] = None, count: int = 1, as_json: bool = False) -> bool:
    if (a is None) != (b is None):
        raise ValueError("give both bounds or neither")
    _check_count(count)
    gen = _make_generator(seed, quiet=as_json)
    if a is None:
        values = [gen.next() for _ in range(count)]
    else:
        values = [gen.next_float(a, b) for _ in range(count)]
    if as_json:
        print(_json.dumps({"seed": gen.seed, "values": values}))
    else:
        for v in values:
            print(repr(v))
    return True


def cmd_bytes(n: int, *, seed: Optional[int] = None, fmt: str = "hex") -> bool:
    gen = _make_generator(seed, quiet=(fmt == "json"))
    data = gen.next_bytes(n)
    if fmt == "json":
        print(_json.dumps({"seed": gen.seed, "bytes": list(data)}))
    elif fmt == "list":
        print(",".join(f"{b:02x}" for b in data))
    else:
        print(data.hex())
    return True


def cmd_seed(*, passphrase: Optional[str] = None, salt_hex: str) -> bool:
    try:
        salt = bytes.fromhex(salt_hex)
    except ValueError as exc:
        raise ValueError(f"salt must be hexadecimal: {exc}") from exc
    if passphrase is None:
        passphrase = _getpass.getpass("Passphrase: ")
    print(f"{seed_from_passphrase(passphrase, salt):#09x}")
    return True


def cmd_verify(*, as_json: bool = False) -> bool:
    failures = verify_vectors()
    if as_json:
        print(_json.dumps({"ok": not failures, "failures": failures}))
    else:
        for line in failures:
            print(f"MISMATCH {line}")
        print("OK" if not failures else "FAIL")
    return not failures


def main(argv: List[str] | None = None):
    ap = argparse.ArgumentParser(prog="dprng", description="Deterministic, cross-language reproducible PRNG")
    sub = ap.add_subparsers(dest="cmd", required=True)

    ap_hash = sub.add_parser("hash", help="Hash 28-bit values")
    ap_hash.add_argument("values", nargs="+", type=parse_seed, help="28-bit inputs (decimal or 0x-hex)")
    ap_hash.add_argument("--json", action="store_true", help="Emit JSON")

    ap_trace = sub.add_parser("trace", help="Show per-round intermediate values of the hash")
    ap_trace.add_argument("value", type=parse_seed, help="28-bit input (decimal or 0x-hex)")
    ap_trace.add_argument("--json", action="store_true", help="Emit JSON")

    ap_int = sub.add_parser("int", help="Draw integers in [A, B] inclusive")
    ap_int.add_argument("a", type=int, help="Lower bound (inclusive)")
    ap_int.add_argument("b", type=int, help="Upper bound (inclusive)")
    ap_int.add_argument("--seed", type=parse_seed, help="28-bit seed; drawn from the OS if omitted")
    ap_int.add_argument("--count", "-n", type=int, default=1, help="Number of draws (default 1)")
    ap_int.add_argument("--json", action="store_true", help="Emit JSON")

    ap_float = sub.add_parser("float", help="Draw floats in [0, 1) or in [A, B)")
    ap_float.add_argument("a", type=float, nargs="?", help="Lower bound (inclusive)")
    ap_float.add_argument("b", type=float, nargs="?", help="Upper bound (exclusive)")
    ap_float.add_argument("--seed", type=parse_seed, help="28-bit seed; drawn from the OS if omitted")
    ap_float.add_argument("--count", "-n", type=int, default=1, help="Number of draws (default 1)")
    ap_float.add_argument("--json", action="store_true", help="Emit JSON")

    ap_bytes = sub.add_parser("bytes", help="Draw N bytes")
    ap_bytes.add_argument("n", type=int, help="Number of bytes")
    ap_bytes.add_argument("--seed", type=parse_seed, help="28-bit seed; drawn from the OS if omitted")
    ap_bytes.add_argument(
        "--format",
        choices=["hex", "list", "json"],
        default="hex",
        help="hex: contiguous hex string; list: comma-separated hex bytes; json: JSON object (default hex)",
    )

    ap_seed = sub.add_parser("seed", help="Derive a 28-bit seed from a passphrase and salt (Argon2id)")
    ap_seed.add_argument("--salt", required=True, help="Salt as hex (at least 8 bytes)")
    ap_seed.add_argument("--passphrase", help="Passphrase; prompted for if omitted")

    ap_verify = sub.add_parser("verify", help="Recompute the built-in reference vectors")
    ap_verify.add_argument("--json", action="store_true", help="Emit JSON")

    args = ap.parse_args(argv)
    try:
        if args.cmd == "hash":
            cmd_hash(args.values, as_json=args.json)
        elif args.cmd == "trace":
            cmd_trace(args.value, as_json=args.json)
        elif args.cmd == "int":
            cmd_int(args.a, args.b, seed=args.seed, count=args.count, as_json=args.json)
        elif args.cmd == "float":
            cmd_float(args.a, args.b, seed=args.seed, count=args.count, as_json=args.json)
        elif args.cmd == "bytes":
            cmd_bytes(args.n, seed=args.seed, fmt=args.format)
        elif args.cmd == "seed":
            cmd_seed(passphrase=args.passphrase, salt_hex=args.salt)
        elif args.cmd == "verify":
            ok = cmd_verify(as_json=args.json)
            sys.exit(0 if ok else 1)
        else:
            raise RuntimeError("Unknown command")
    except EntropyUnavailable as e:
        print(f"Error: {e}. Pass --seed to run without OS entropy.", file=sys.stderr)
        sys.exit(2)
    except (DPRNGError, ValueError, RuntimeError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
