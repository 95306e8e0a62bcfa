#!/usr/bin/env python3
"""Smoke test for the hand rank tables.

This script builds an Evaluator and checks it against random hands:
- Tables build with the expected sizes
- Suit flag layout and flush discriminant behave as documented
- Batched (numpy and torch) lookups agree with scalar lookups
- Every random hand resolves to a rank in [1, 7462]

Usage:
    python -m poker_rank.scripts.smoke_eval --hands 100000
    python -m poker_rank.scripts.smoke_eval --hands 1000 --seed 42 --log-level DEBUG
"""

import argparse
import logging
import sys
import time
from collections import Counter

import numpy as np
import torch

from poker_rank.engine import Evaluator, GPURankLookup
from poker_rank.rules import RANK_PRIMES, SUIT_SHIFT, Rank
from poker_rank.tables import CATEGORY_NAMES, CATEGORY_SIZES, TOTAL_RANKS, HandCategory
from poker_rank.utils.deal import random_hand_keys
from poker_rank.utils.seeding import set_seed


def show_key_layout() -> None:
    """Print the suit flag layout and a few flush checks."""
    all_suits = 0b1111 << SUIT_SHIFT
    quad_aces = RANK_PRIMES[Rank.ACE] ** 4 * RANK_PRIMES[Rank.KING]
    print(f"  all suit flags:      {all_suits:032b}")
    print(f"  + A-A-A-A-K product: {all_suits | quad_aces:032b}")
    for bits in (0b1010, 0b1111, 0b0001):
        print(f"  is_flush({bits:04b} << {SUIT_SHIFT}) = {Evaluator.is_flush(bits << SUIT_SHIFT)}")


def check_tables(evaluator: Evaluator) -> int:
    """Compare table sizes and category bounds with the expected counts."""
    errors = 0
    if evaluator.num_ranks != TOTAL_RANKS:
        print(f"  Expected {TOTAL_RANKS} ranks, got {evaluator.num_ranks}")
        errors += 1
    for category in HandCategory:
        first, last = evaluator.tables.category_bounds[category]
        if last - first + 1 != CATEGORY_SIZES[category]:
            print(f"  {CATEGORY_NAMES[category]}: {last - first + 1} ranks")
            errors += 1
    return errors


def check_random_hands(
    evaluator: Evaluator,
    num_hands: int,
    seed: int,
    device: str,
) -> dict:
    """Rank random hands three ways and compare.

    Returns:
        Dict with category counts and mismatch counts
    """
    rng = np.random.default_rng(seed)
    keys = random_hand_keys(num_hands, rng)

    start = time.perf_counter()
    ranks = evaluator.get_hand_ranks(keys)
    batch_elapsed = time.perf_counter() - start

    lookup = GPURankLookup(evaluator, device=device)
    tensor_ranks = lookup(torch.from_numpy(keys)).cpu().numpy()

    sample = min(num_hands, 10_000)
    start = time.perf_counter()
    scalar_ranks = np.array([evaluator.get_hand_rank(int(k)) for k in keys[:sample]])
    scalar_elapsed = time.perf_counter() - start

    categories = Counter(evaluator.hand_category(int(r)) for r in ranks)

    return {
        "batch_elapsed": batch_elapsed,
        "scalar_elapsed": scalar_elapsed,
        "scalar_sample": sample,
        "out_of_range": int(((ranks < 1) | (ranks > TOTAL_RANKS)).sum()),
        "tensor_mismatches": int((tensor_ranks != ranks).sum()),
        "scalar_mismatches": int((scalar_ranks != ranks[:sample]).sum()),
        "categories": categories,
    }


def main():
    parser = argparse.ArgumentParser(description="Smoke test for the hand rank tables")
    parser.add_argument("--hands", type=int, default=100_000, help="Number of random hands")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--device", type=str, default="cpu", help="Torch device for batched lookup")
    parser.add_argument("--log-level", type=str, default="INFO", help="Logging level")
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    seed = set_seed(args.seed)
    print(f"Seed: {seed}")

    start = time.perf_counter()
    evaluator = Evaluator()
    build_elapsed = time.perf_counter() - start
    print(f"Built tables in {build_elapsed:.3f}s")

    print("\nKey layout:")
    show_key_layout()

    print("\nValidating tables...")
    errors = check_tables(evaluator)
    if errors == 0:
        print("  OK: Table sizes match")

    print(f"\nRanking {args.hands} random hand(s)...")
    stats = check_random_hands(evaluator, args.hands, seed, args.device)

    print(f"\n=== Summary ===")
    print(f"  Batch lookup: {stats['batch_elapsed']:.3f}s for {args.hands} hands")
    print(
        f"  Scalar lookup: {stats['scalar_elapsed']:.3f}s "
        f"for {stats['scalar_sample']} hands"
    )
    for category in HandCategory:
        count = stats["categories"].get(category, 0)
        share = count / args.hands if args.hands else 0.0
        print(f"  {CATEGORY_NAMES[category]:<16} {count:>8} ({share:.4%})")
    print(f"  Out of range: {stats['out_of_range']}")
    print(f"  Tensor mismatches: {stats['tensor_mismatches']}")
    print(f"  Scalar mismatches: {stats['scalar_mismatches']}")

    errors += stats["out_of_range"] + stats["tensor_mismatches"] + stats["scalar_mismatches"]

    if errors > 0:
        print(f"\nFAILED: {errors} error(s) detected")
        sys.exit(1)

    print("\nPASSED: All hands ranked consistently")
    sys.exit(0)


if __name__ == "__main__":
    main()
