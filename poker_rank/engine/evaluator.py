"""5-card hand strength lookup.

This module provides:
- Evaluator: builds the rank tables once and answers rank queries
- LookupMissError: raised for keys that are not a real 5-card hand

Usage:
    >>> from poker_rank import Evaluator, Rank, Suit, make_key
    >>> evaluator = Evaluator()
    >>> royal = [Rank.ACE, Rank.KING, Rank.QUEEN, Rank.JACK, Rank.TEN]
    >>> evaluator.get_hand_rank(make_key(royal, [Suit.HEART] * 5))
    1

Lower ranks are stronger. Once constructed an Evaluator is never
mutated, so it can be shared across threads without locking.
"""

import bisect
import logging
import time
from typing import List, Mapping, Tuple

import numpy as np

from poker_rank.rules.hand_key import RANK_MASK, SUIT_MASK, SUIT_SHIFT, is_flush, rank_key
from poker_rank.tables.builder import RankTables, build_tables
from poker_rank.tables.categories import CATEGORY_NAMES, HandCategory

logger = logging.getLogger(__name__)


class LookupMissError(KeyError):
    """Raised when a key's rank product is not in the table its suits select.

    Attributes:
        key: The hand key that was looked up
        flush: Whether the flush table was searched
    """

    def __init__(self, key: int, flush: bool):
        self.key = key
        self.flush = flush
        table = "flush" if flush else "non-flush"
        super().__init__(
            f"Hand key {key:#010x} (rank product {key & RANK_MASK}) "
            f"not found in {table} table"
        )

    def __str__(self) -> str:
        return self.args[0]


def _sorted_arrays(table: Mapping[int, int]) -> Tuple[np.ndarray, np.ndarray]:
    """Table as (sorted keys, ranks) arrays, both read-only."""
    keys = np.fromiter(table.keys(), dtype=np.int64, count=len(table))
    ranks = np.fromiter(table.values(), dtype=np.int64, count=len(table))
    order = np.argsort(keys)
    keys, ranks = keys[order], ranks[order]
    keys.setflags(write=False)
    ranks.setflags(write=False)
    return keys, ranks


def flush_mask(keys: np.ndarray) -> np.ndarray:
    """Elementwise is_flush over an array of hand keys."""
    bits = (keys & SUIT_MASK) >> SUIT_SHIFT
    return (bits != 0) & ((bits & (bits - 1)) == 0)


class Evaluator:
    """Strength ranks for 5-card hand keys.

    Attributes:
        tables: The frozen flush / non-flush tables
    """

    def __init__(self):
        start = time.perf_counter()
        self.tables: RankTables = build_tables()

        self._flush_arrays = _sorted_arrays(self.tables.flush)
        self._non_flush_arrays = _sorted_arrays(self.tables.non_flush)

        # (worst rank, category) pairs, ascending, for category lookups
        ordered = sorted(self.tables.category_bounds.items(), key=lambda item: item[1])
        self._category_limits: List[int] = [last for _c, (_first, last) in ordered]
        self._categories: List[HandCategory] = [c for c, _bounds in ordered]

        logger.info(
            "Evaluator ready: %d ranks in %.3fs",
            self.num_ranks,
            time.perf_counter() - start,
        )

    @staticmethod
    def is_flush(key: int) -> bool:
        """Checks if the hand key has exactly one suit flag set."""
        return is_flush(key)

    @property
    def flush_table(self) -> Mapping[int, int]:
        return self.tables.flush

    @property
    def non_flush_table(self) -> Mapping[int, int]:
        return self.tables.non_flush

    @property
    def num_ranks(self) -> int:
        """Number of distinct strength classes (7462)."""
        return self.tables.num_ranks

    def get_hand_rank(self, key: int) -> int:
        """Get the strength rank of a hand key, lower is better.

        Args:
            key: Suit flags OR-ed with the rank product of five ranks

        Returns:
            Rank in [1, 7462]

        Raises:
            LookupMissError: If the rank product is not in the selected table
        """
        flush = is_flush(key)
        table = self.tables.flush if flush else self.tables.non_flush
        try:
            return table[rank_key(key)]
        except KeyError:
            raise LookupMissError(key, flush) from None

    def get_hand_ranks(self, keys) -> np.ndarray:
        """Vectorised get_hand_rank over an array of hand keys.

        Args:
            keys: Array-like of hand keys, any shape

        Returns:
            int64 array of ranks with the same shape as keys

        Raises:
            LookupMissError: For the first key whose rank product is missing
        """
        keys = np.asarray(keys, dtype=np.int64)
        flat = keys.reshape(-1)
        flush = flush_mask(flat)
        products = flat & RANK_MASK

        ranks = np.zeros(flat.shape, dtype=np.int64)
        for selected, (table_keys, table_ranks), is_flush_table in (
            (flush, self._flush_arrays, True),
            (~flush, self._non_flush_arrays, False),
        ):
            wanted = products[selected]
            idx = np.searchsorted(table_keys, wanted)
            idx = np.minimum(idx, len(table_keys) - 1)
            hit = table_keys[idx] == wanted
            if not hit.all():
                missing = flat[selected][~hit][0]
                raise LookupMissError(int(missing), is_flush_table)
            ranks[selected] = table_ranks[idx]

        return ranks.reshape(keys.shape)

    def hand_category(self, rank: int) -> HandCategory:
        """Category a strength rank falls in.

        Raises:
            ValueError: If rank is outside [1, num_ranks]
        """
        if not 1 <= rank <= self.num_ranks:
            raise ValueError(f"Rank {rank} out of range [1, {self.num_ranks}]")
        return self._categories[bisect.bisect_left(self._category_limits, rank)]

    def category_name(self, rank: int) -> str:
        """Display name of the category a strength rank falls in."""
        return CATEGORY_NAMES[self.hand_category(rank)]

    def sorted_tables(self) -> Tuple[Tuple[np.ndarray, np.ndarray], Tuple[np.ndarray, np.ndarray]]:
        """Read-only (keys, ranks) arrays for the flush and non-flush tables."""
        return self._flush_arrays, self._non_flush_arrays
