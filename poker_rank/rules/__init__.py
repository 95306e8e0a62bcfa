"""Card codes and hand key encoding.

This module provides:
- Rank and suit definitions with their prime / bit codes (ranks.py)
- Hand key encoding and the flush discriminant (hand_key.py)
"""

from .ranks import (
    Rank,
    Suit,
    InvalidSymbolError,
    RANK_SYMBOLS,
    SUIT_SYMBOLS,
    RANK_PRIMES,
    SUIT_BITS,
    SUIT_SHIFT,
    RANKS_DESCENDING,
    rank_from_symbol,
    suit_from_symbol,
    rank_prime,
    suit_bit,
)

from .hand_key import (
    HAND_SIZE,
    SUIT_MASK,
    RANK_MASK,
    MAX_RANK_PRODUCT,
    encode,
    suit_pattern,
    make_key,
    is_flush,
    rank_key,
    contains_pair,
)

__all__ = [
    # Ranks
    "Rank",
    "Suit",
    "InvalidSymbolError",
    "RANK_SYMBOLS",
    "SUIT_SYMBOLS",
    "RANK_PRIMES",
    "SUIT_BITS",
    "SUIT_SHIFT",
    "RANKS_DESCENDING",
    "rank_from_symbol",
    "suit_from_symbol",
    "rank_prime",
    "suit_bit",
    # Hand keys
    "HAND_SIZE",
    "SUIT_MASK",
    "RANK_MASK",
    "MAX_RANK_PRODUCT",
    "encode",
    "suit_pattern",
    "make_key",
    "is_flush",
    "rank_key",
    "contains_pair",
]
