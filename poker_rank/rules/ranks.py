"""Card rank and suit codes.

Rank order (high to low): A > K > Q > J > T > 9 > 8 > 7 > 6 > 5 > 4 > 3 > 2

This module provides:
- Rank and Suit enums
- Rank -> prime mapping (RANK_PRIMES)
- Suit -> bit flag mapping (SUIT_BITS)
- Symbol lookups that reject anything outside the 13 ranks / 4 suits
"""

from enum import IntEnum
from typing import Dict, Tuple, Union


class Rank(IntEnum):
    """Card ranks ordered by strength (higher value = stronger rank)."""

    TWO = 0
    THREE = 1
    FOUR = 2
    FIVE = 3
    SIX = 4
    SEVEN = 5
    EIGHT = 6
    NINE = 7
    TEN = 8
    JACK = 9
    QUEEN = 10
    KING = 11
    ACE = 12  # Highest rank


class Suit(IntEnum):
    """Card suits. Order fixes which bit each suit occupies in a hand key."""

    CLUB = 0
    DIAMOND = 1
    HEART = 2
    SPADE = 3


class InvalidSymbolError(ValueError):
    """Raised when a rank or suit symbol is not one of the known symbols."""

    pass


# Rank symbols for display and lookup
RANK_SYMBOLS = {
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "T",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
}

# Suit symbols for display and lookup
SUIT_SYMBOLS = {
    Suit.CLUB: "c",
    Suit.DIAMOND: "d",
    Suit.HEART: "h",
    Suit.SPADE: "s",
}

SYMBOL_TO_RANK = {v: k for k, v in RANK_SYMBOLS.items()}
SYMBOL_TO_SUIT = {v: k for k, v in SUIT_SYMBOLS.items()}

# One prime per rank. The product of any five (with repetition) is unique
# to that multiset of ranks.
RANK_PRIMES: Dict[Rank, int] = {
    Rank.TWO: 2,
    Rank.THREE: 3,
    Rank.FOUR: 5,
    Rank.FIVE: 7,
    Rank.SIX: 11,
    Rank.SEVEN: 13,
    Rank.EIGHT: 17,
    Rank.NINE: 19,
    Rank.TEN: 23,
    Rank.JACK: 29,
    Rank.QUEEN: 31,
    Rank.KING: 37,
    Rank.ACE: 41,
}

# Suits live above the 27 bits reserved for the rank product
SUIT_SHIFT = 27

SUIT_BITS: Dict[Suit, int] = {suit: 1 << (SUIT_SHIFT + suit.value) for suit in Suit}

# Ranks from strongest to weakest, the order every category is enumerated in
RANKS_DESCENDING: Tuple[Rank, ...] = tuple(sorted(Rank, reverse=True))

N_RANKS = 13
N_SUITS = 4

assert len(RANK_PRIMES) == N_RANKS
assert len(SUIT_BITS) == N_SUITS


def rank_from_symbol(symbol: str) -> Rank:
    """Look up a rank by its symbol ('2'..'9', 'T', 'J', 'Q', 'K', 'A').

    Raises:
        InvalidSymbolError: If the symbol is not a rank symbol
    """
    try:
        return SYMBOL_TO_RANK[symbol]
    except (KeyError, TypeError):
        raise InvalidSymbolError(f"Invalid rank symbol: {symbol!r}") from None


def suit_from_symbol(symbol: str) -> Suit:
    """Look up a suit by its symbol ('c', 'd', 'h', 's').

    Raises:
        InvalidSymbolError: If the symbol is not a suit symbol
    """
    try:
        return SYMBOL_TO_SUIT[symbol]
    except (KeyError, TypeError):
        raise InvalidSymbolError(f"Invalid suit symbol: {symbol!r}") from None


def rank_prime(rank: Union[Rank, str]) -> int:
    """Prime assigned to a rank, given as a Rank or a rank symbol."""
    if not isinstance(rank, Rank):
        rank = rank_from_symbol(rank)
    return RANK_PRIMES[rank]


def suit_bit(suit: Union[Suit, str]) -> int:
    """Bit flag assigned to a suit, given as a Suit or a suit symbol."""
    if not isinstance(suit, Suit):
        suit = suit_from_symbol(suit)
    return SUIT_BITS[suit]
