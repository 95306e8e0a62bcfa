"""Random 5-card hands as hand keys.

Cards are numbered 0-51 as suit * 13 + rank, using the Suit and Rank
enum values.
"""

import numpy as np

from poker_rank.rules.ranks import RANK_PRIMES, SUIT_BITS, Rank, Suit

NUM_CARDS = 52

_PRIMES = np.array([RANK_PRIMES[r] for r in Rank], dtype=np.int64)
_SUIT_BITS = np.array([SUIT_BITS[s] for s in Suit], dtype=np.int64)


def deal_cards(count: int, rng: np.random.Generator) -> np.ndarray:
    """Deal `count` independent 5-card hands, each from a fresh deck.

    Returns:
        int64 array of card indices, shape (count, 5)
    """
    # argsort of uniform noise gives an independent permutation per row
    return np.argsort(rng.random((count, NUM_CARDS)), axis=1)[:, :5]


def cards_to_keys(cards: np.ndarray) -> np.ndarray:
    """Hand keys for an (N, 5) array of card indices."""
    cards = np.asarray(cards, dtype=np.int64)
    ranks = cards % 13
    suits = cards // 13
    products = np.prod(_PRIMES[ranks], axis=-1)
    pattern = np.bitwise_or.reduce(_SUIT_BITS[suits], axis=-1)
    return pattern | products


def random_hand_keys(count: int, rng: np.random.Generator) -> np.ndarray:
    """Hand keys for `count` random 5-card hands, shape (count,)."""
    return cards_to_keys(deal_cards(count, rng))
