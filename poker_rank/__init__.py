"""Poker Rank - 5-card hand strength lookup.

Every 5-card hand maps to one of 7462 strength ranks (1 = royal flush,
7462 = 7-5-4-3-2 off-suit) through two prime-product lookup tables.
"""

__version__ = "0.1.0"
__author__ = "Poker Rank Team"

from poker_rank.rules import Rank, Suit, InvalidSymbolError, encode, make_key, is_flush, rank_key
from poker_rank.tables import HandCategory, TableBuildError
from poker_rank.engine import Evaluator, LookupMissError
from poker_rank.utils.seeding import set_seed

__all__ = [
    "__version__",
    "Rank",
    "Suit",
    "InvalidSymbolError",
    "encode",
    "make_key",
    "is_flush",
    "rank_key",
    "HandCategory",
    "TableBuildError",
    "Evaluator",
    "LookupMissError",
    "set_seed",
]
