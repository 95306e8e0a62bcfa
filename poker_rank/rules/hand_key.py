"""Hand key encoding.

A hand key is a 32-bit integer:

    bit 31   bits 27-30        bits 0-26
    unused   suit flags c/d/h/s   product of the five rank primes

Exactly one suit flag set means all five cards share that suit (a flush).
More than one flag means the suits are mixed. The rank product occupies
the low 27 bits either way; the largest one, A-A-A-A-K, is 104,553,157.
"""

from typing import Iterable, Sequence

from .ranks import RANK_PRIMES, SUIT_BITS, SUIT_SHIFT, Rank, Suit

HAND_SIZE = 5

SUIT_MASK = 0b1111 << SUIT_SHIFT
RANK_MASK = (1 << SUIT_SHIFT) - 1

MAX_RANK_PRODUCT = RANK_PRIMES[Rank.ACE] ** 4 * RANK_PRIMES[Rank.KING]

assert MAX_RANK_PRODUCT <= RANK_MASK


def encode(ranks: Sequence[Rank]) -> int:
    """Product of the primes of five ranks.

    Card order does not change the result.

    Raises:
        ValueError: If ranks does not hold exactly five ranks
    """
    if len(ranks) != HAND_SIZE:
        raise ValueError(f"Expected {HAND_SIZE} ranks, got {len(ranks)}")

    product = 1
    for rank in ranks:
        product *= RANK_PRIMES[rank]
    return product


def suit_pattern(suits: Iterable[Suit]) -> int:
    """OR of the suit flags of the given suits."""
    pattern = 0
    for suit in suits:
        pattern |= SUIT_BITS[suit]
    return pattern


def make_key(ranks: Sequence[Rank], suits: Iterable[Suit]) -> int:
    """Build a hand key from five ranks and the suits of the cards."""
    return suit_pattern(suits) | encode(ranks)


def is_flush(key: int) -> bool:
    """True iff exactly one of the four suit flags is set.

    Two or four flags set is a mixed-suit hand; a parity check over the
    flags would call those flushes.
    """
    bits = (key & SUIT_MASK) >> SUIT_SHIFT
    return bits != 0 and bits & (bits - 1) == 0


def rank_key(key: int) -> int:
    """Strip the suit flags, leaving the rank product used for lookup."""
    return key & RANK_MASK


def contains_pair(ranks: Sequence[Rank]) -> bool:
    """True if any rank appears more than once."""
    return len(set(ranks)) != len(ranks)
