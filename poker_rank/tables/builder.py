"""Rank table construction.

Walks the categories strongest first, numbers every pattern 1..7462 and
files each one under its rank product in either the flush table or the
non-flush table:

- Straight flushes and flushes (unpaired, inside the flush span) go to
  the flush table.
- Everything with a repeated rank, and every unpaired pattern after the
  flush span (straights, high cards), goes to the non-flush table.

The same rank product therefore appears in both tables for unpaired
hands, once with its suited strength and once with its off-suit one.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Tuple

from poker_rank.rules.hand_key import contains_pair, encode
from .categories import (
    CATEGORY_ORDER,
    CATEGORY_SIZES,
    FLUSH_SPAN,
    TOTAL_RANKS,
    HandCategory,
    Pattern,
)

logger = logging.getLogger(__name__)


class TableBuildError(Exception):
    """Raised when the enumeration does not produce a consistent table."""

    pass


@dataclass(frozen=True)
class Hand:
    """One numbered strength class.

    Attributes:
        has_pair: Whether the pattern repeats a rank
        encoded_value: Rank product of the pattern
        assigned_rank: 1-based strength, 1 = best
    """

    has_pair: bool
    encoded_value: int
    assigned_rank: int


@dataclass(frozen=True)
class RankTables:
    """Finished lookup tables. Read-only once built.

    Attributes:
        flush: Rank product -> strength for five cards of one suit
        non_flush: Rank product -> strength for mixed suits
        category_bounds: Category -> (best rank, worst rank), inclusive
    """

    flush: Mapping[int, int]
    non_flush: Mapping[int, int]
    category_bounds: Mapping[HandCategory, Tuple[int, int]]

    @property
    def num_ranks(self) -> int:
        return len(self.flush) + len(self.non_flush)


def iter_hands() -> Iterator[Tuple[HandCategory, Pattern, Hand]]:
    """Yield every pattern in strength order with its numbered Hand."""
    rank = 1
    for category, generate in CATEGORY_ORDER:
        for pattern in generate():
            hand = Hand(
                has_pair=contains_pair(pattern),
                encoded_value=encode(pattern),
                assigned_rank=rank,
            )
            yield category, pattern, hand
            rank += 1


class TableBuilder:
    """Accumulates the two tables and freezes them in build().

    A builder is single use: once build() returns, the tables are shared
    with the returned RankTables and the builder refuses further hands.
    """

    def __init__(self):
        self._flush: Dict[int, int] = {}
        self._non_flush: Dict[int, int] = {}
        self._bounds: Dict[HandCategory, List[int]] = {}
        self._frozen = False

    def add(self, category: HandCategory, hand: Hand) -> None:
        """File one numbered hand into its table.

        Raises:
            TableBuildError: If the rank product is already in that table
        """
        if self._frozen:
            raise TableBuildError("Tables are frozen; use a new TableBuilder")

        if hand.has_pair or hand.assigned_rank > FLUSH_SPAN:
            table, name = self._non_flush, "non-flush"
        else:
            table, name = self._flush, "flush"

        if hand.encoded_value in table:
            raise TableBuildError(
                f"Rank product {hand.encoded_value} ({category.name}, rank "
                f"{hand.assigned_rank}) already in {name} table with rank "
                f"{table[hand.encoded_value]}"
            )
        table[hand.encoded_value] = hand.assigned_rank

        bounds = self._bounds.setdefault(category, [hand.assigned_rank, hand.assigned_rank])
        bounds[1] = hand.assigned_rank

    def build(self) -> RankTables:
        """Enumerate every category and return the frozen tables.

        Raises:
            TableBuildError: On a duplicate rank product, a category of the
                wrong size, or a total other than 7462
        """
        for category, _pattern, hand in iter_hands():
            self.add(category, hand)

        for category, (first, last) in self._bounds.items():
            count = last - first + 1
            logger.debug("%s: ranks %d-%d (%d)", category.name, first, last, count)
            if count != CATEGORY_SIZES[category]:
                raise TableBuildError(
                    f"{category.name} has {count} patterns, "
                    f"expected {CATEGORY_SIZES[category]}"
                )

        total = len(self._flush) + len(self._non_flush)
        if total != TOTAL_RANKS:
            raise TableBuildError(f"Built {total} ranks, expected {TOTAL_RANKS}")

        logger.debug(
            "Built rank tables: %d flush, %d non-flush",
            len(self._flush),
            len(self._non_flush),
        )
        self._frozen = True

        return RankTables(
            flush=MappingProxyType(self._flush),
            non_flush=MappingProxyType(self._non_flush),
            category_bounds=MappingProxyType(
                {c: (b[0], b[1]) for c, b in self._bounds.items()}
            ),
        )


def build_tables() -> RankTables:
    """Build a fresh pair of rank tables."""
    return TableBuilder().build()
