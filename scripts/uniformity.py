#!/usr/bin/env python3
from __future__ import annotations

import argparse
import sys

from dprng.prng import DPRNG
from dprng.seeding import parse_seed
from dprng.uniformity import bucket_counts, chi_square


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Chi-square uniformity check of DPRNG.next()")
    ap.add_argument("--seed", type=parse_seed, default=None, help="28-bit seed (decimal or 0x-hex); random if omitted")
    ap.add_argument("--buckets", type=int, default=64, help="Number of equal-width buckets (default 64)")
    ap.add_argument("--draws", type=int, default=200_000, help="Number of samples (default 200000)")
    args = ap.parse_args(argv)

    if args.buckets < 2 or args.draws < args.buckets:
        print("Error: need at least 2 buckets and one draw per bucket", file=sys.stderr)
        return 2

    gen = DPRNG(args.seed)
    counts = bucket_counts(gen, args.buckets, args.draws)
    stat = chi_square(counts)
    dof = args.buckets - 1
    print(f"seed={gen.seed:#09x} draws={args.draws} buckets={args.buckets}")
    print(f"chi2={stat:.2f} dof={dof} min={min(counts)} max={max(counts)}")
    # Rough 3-sigma band of the chi-square distribution
    limit = dof + 3 * (2 * dof) ** 0.5
    if stat > limit:
        print(f"Warning: chi2 exceeds {limit:.2f}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
