"""Enumeration of every distinct 5-card strength class.

Number of distinct patterns per category:

    Straight flush    10
    Four of a kind    156    13 quad ranks x 12 kickers
    Full house        156    13 trip ranks x 12 pair ranks
    Flush             1277   C(13,5) - 10 straights
    Straight          10
    Three of a kind   858    13 trip ranks x C(12,2) kickers
    Two pair          858    C(13,2) pair ranks x 11 kickers
    One pair          2860   13 pair ranks x C(12,3) kickers
    High card         1277   C(13,5) - 10 straights
    ------------------------
    Total             7462

Every generator yields patterns strongest first. Straight flushes and
straights share one generator, as do flushes and high cards: the rank
multisets are the same and only the suits tell them apart.
"""

from enum import IntEnum
from itertools import combinations
from typing import Callable, Dict, Iterator, List, Tuple

from poker_rank.rules.ranks import RANKS_DESCENDING, Rank

Pattern = Tuple[Rank, Rank, Rank, Rank, Rank]


class HandCategory(IntEnum):
    """Hand categories, strongest first."""

    STRAIGHT_FLUSH = 1
    FOUR_OF_A_KIND = 2
    FULL_HOUSE = 3
    FLUSH = 4
    STRAIGHT = 5
    THREE_OF_A_KIND = 6
    TWO_PAIR = 7
    ONE_PAIR = 8
    HIGH_CARD = 9


CATEGORY_NAMES = {
    HandCategory.STRAIGHT_FLUSH: "Straight Flush",
    HandCategory.FOUR_OF_A_KIND: "Four of a Kind",
    HandCategory.FULL_HOUSE: "Full House",
    HandCategory.FLUSH: "Flush",
    HandCategory.STRAIGHT: "Straight",
    HandCategory.THREE_OF_A_KIND: "Three of a Kind",
    HandCategory.TWO_PAIR: "Two Pair",
    HandCategory.ONE_PAIR: "One Pair",
    HandCategory.HIGH_CARD: "High Card",
}

WHEEL: Pattern = (Rank.FIVE, Rank.FOUR, Rank.THREE, Rank.TWO, Rank.ACE)


# ============================================================================
# Patterns without a repeated rank
# ============================================================================


def straights() -> Iterator[Pattern]:
    """A-high down to 6-high, then the wheel (5-4-3-2-A) as the weakest."""
    for top in range(len(RANKS_DESCENDING) - 4):
        yield RANKS_DESCENDING[top : top + 5]
    yield WHEEL


def non_paired_sets() -> Iterator[Pattern]:
    """Every set of five distinct ranks that is not a straight.

    combinations() over the descending ranks emits sets in high-card
    order: highest top card first, ties broken by the next card down.
    """
    straight_sets = {frozenset(s) for s in straights()}
    for ranks in combinations(RANKS_DESCENDING, 5):
        if frozenset(ranks) not in straight_sets:
            yield ranks


# ============================================================================
# Patterns with a repeated rank
# ============================================================================


def _others(*excluded: Rank) -> List[Rank]:
    return [r for r in RANKS_DESCENDING if r not in excluded]


def four_of_a_kinds() -> Iterator[Pattern]:
    for quad in RANKS_DESCENDING:
        for kicker in _others(quad):
            yield (quad, quad, quad, quad, kicker)


def full_houses() -> Iterator[Pattern]:
    for trips in RANKS_DESCENDING:
        for pair in _others(trips):
            yield (trips, trips, trips, pair, pair)


def three_of_a_kinds() -> Iterator[Pattern]:
    for trips in RANKS_DESCENDING:
        for k1, k2 in combinations(_others(trips), 2):
            yield (trips, trips, trips, k1, k2)


def two_pairs() -> Iterator[Pattern]:
    """High pair, then low pair, then kicker; each pair of ranks once."""
    for high, low in combinations(RANKS_DESCENDING, 2):
        for kicker in _others(high, low):
            yield (high, high, low, low, kicker)


def one_pairs() -> Iterator[Pattern]:
    for pair in RANKS_DESCENDING:
        for k1, k2, k3 in combinations(_others(pair), 3):
            yield (pair, pair, k1, k2, k3)


# ============================================================================
# Category order
# ============================================================================


# Strongest category first. Rank numbers are handed out in this order.
CATEGORY_ORDER: List[Tuple[HandCategory, Callable[[], Iterator[Pattern]]]] = [
    (HandCategory.STRAIGHT_FLUSH, straights),
    (HandCategory.FOUR_OF_A_KIND, four_of_a_kinds),
    (HandCategory.FULL_HOUSE, full_houses),
    (HandCategory.FLUSH, non_paired_sets),
    (HandCategory.STRAIGHT, straights),
    (HandCategory.THREE_OF_A_KIND, three_of_a_kinds),
    (HandCategory.TWO_PAIR, two_pairs),
    (HandCategory.ONE_PAIR, one_pairs),
    (HandCategory.HIGH_CARD, non_paired_sets),
]

CATEGORY_SIZES: Dict[HandCategory, int] = {
    HandCategory.STRAIGHT_FLUSH: 10,
    HandCategory.FOUR_OF_A_KIND: 156,
    HandCategory.FULL_HOUSE: 156,
    HandCategory.FLUSH: 1277,
    HandCategory.STRAIGHT: 10,
    HandCategory.THREE_OF_A_KIND: 858,
    HandCategory.TWO_PAIR: 858,
    HandCategory.ONE_PAIR: 2860,
    HandCategory.HIGH_CARD: 1277,
}

TOTAL_RANKS = sum(CATEGORY_SIZES.values())

# Patterns up to and including the weakest flush
FLUSH_SPAN = (
    CATEGORY_SIZES[HandCategory.STRAIGHT_FLUSH]
    + CATEGORY_SIZES[HandCategory.FOUR_OF_A_KIND]
    + CATEGORY_SIZES[HandCategory.FULL_HOUSE]
    + CATEGORY_SIZES[HandCategory.FLUSH]
)

assert TOTAL_RANKS == 7462
assert FLUSH_SPAN == 1599
