"""Strength class enumeration and rank table construction.

This module provides:
- Category patterns in strength order (categories.py)
- TableBuilder and the frozen RankTables it returns (builder.py)
"""

from .categories import (
    HandCategory,
    Pattern,
    CATEGORY_NAMES,
    CATEGORY_ORDER,
    CATEGORY_SIZES,
    TOTAL_RANKS,
    FLUSH_SPAN,
    straights,
    four_of_a_kinds,
    full_houses,
    non_paired_sets,
    three_of_a_kinds,
    two_pairs,
    one_pairs,
)

from .builder import (
    Hand,
    RankTables,
    TableBuilder,
    TableBuildError,
    iter_hands,
    build_tables,
)

__all__ = [
    # Categories
    "HandCategory",
    "Pattern",
    "CATEGORY_NAMES",
    "CATEGORY_ORDER",
    "CATEGORY_SIZES",
    "TOTAL_RANKS",
    "FLUSH_SPAN",
    "straights",
    "four_of_a_kinds",
    "full_houses",
    "non_paired_sets",
    "three_of_a_kinds",
    "two_pairs",
    "one_pairs",
    # Builder
    "Hand",
    "RankTables",
    "TableBuilder",
    "TableBuildError",
    "iter_hands",
    "build_tables",
]
