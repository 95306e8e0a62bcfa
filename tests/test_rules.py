"""Tests for rank / suit codes and hand key encoding.

Test coverage:
- Rank ordering: A > K > Q > J > T > 9 > 8 > 7 > 6 > 5 > 4 > 3 > 2
- Prime and suit-bit tables
- Symbol lookups and InvalidSymbolError
- encode / make_key / rank_key
- Flush discriminant: exactly one suit flag, never parity
"""

from itertools import combinations_with_replacement, permutations

import pytest
from poker_rank.rules import (
    Rank,
    Suit,
    InvalidSymbolError,
    RANK_PRIMES,
    SUIT_BITS,
    SUIT_SHIFT,
    RANKS_DESCENDING,
    RANK_MASK,
    SUIT_MASK,
    MAX_RANK_PRODUCT,
    rank_from_symbol,
    suit_from_symbol,
    rank_prime,
    suit_bit,
    encode,
    suit_pattern,
    make_key,
    is_flush,
    rank_key,
    contains_pair,
)


def _ranks(symbols: str):
    return [rank_from_symbol(s) for s in symbols]


class TestRankCodes:
    """Rank enum, symbols and primes."""

    def test_ace_is_highest(self):
        assert Rank.ACE > Rank.KING
        assert Rank.ACE == max(Rank)
        assert Rank.TWO == min(Rank)

    def test_ranks_descending(self):
        assert RANKS_DESCENDING[0] == Rank.ACE
        assert RANKS_DESCENDING[-1] == Rank.TWO
        assert len(RANKS_DESCENDING) == 13
        for higher, lower in zip(RANKS_DESCENDING, RANKS_DESCENDING[1:]):
            assert higher > lower

    def test_primes(self):
        assert [RANK_PRIMES[r] for r in Rank] == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41]

    def test_rank_from_symbol(self):
        assert rank_from_symbol("2") == Rank.TWO
        assert rank_from_symbol("T") == Rank.TEN
        assert rank_from_symbol("A") == Rank.ACE

    def test_rank_prime_accepts_symbol_or_rank(self):
        assert rank_prime("A") == 41
        assert rank_prime(Rank.ACE) == 41
        assert rank_prime("4") == 5

    @pytest.mark.parametrize("symbol", ["1", "10", "a", "X", "", "s"])
    def test_invalid_rank_symbol(self, symbol):
        with pytest.raises(InvalidSymbolError):
            rank_from_symbol(symbol)
        with pytest.raises(InvalidSymbolError):
            rank_prime(symbol)

    def test_invalid_symbol_is_value_error(self):
        with pytest.raises(ValueError):
            rank_from_symbol("Z")


class TestSuitCodes:
    """Suit enum, symbols and bit flags."""

    def test_suit_bits(self):
        assert SUIT_BITS[Suit.CLUB] == 1 << 27
        assert SUIT_BITS[Suit.DIAMOND] == 1 << 28
        assert SUIT_BITS[Suit.HEART] == 1 << 29
        assert SUIT_BITS[Suit.SPADE] == 1 << 30

    def test_suit_bits_are_distinct_single_bits(self):
        combined = 0
        for bit in SUIT_BITS.values():
            assert bit & (bit - 1) == 0
            assert combined & bit == 0
            combined |= bit
        assert combined == SUIT_MASK

    def test_suit_from_symbol(self):
        assert suit_from_symbol("c") == Suit.CLUB
        assert suit_from_symbol("d") == Suit.DIAMOND
        assert suit_from_symbol("h") == Suit.HEART
        assert suit_from_symbol("s") == Suit.SPADE
        assert suit_bit("h") == 1 << 29
        assert suit_bit(Suit.SPADE) == 1 << 30

    @pytest.mark.parametrize("symbol", ["C", "x", "A", "", "hh"])
    def test_invalid_suit_symbol(self, symbol):
        with pytest.raises(InvalidSymbolError):
            suit_from_symbol(symbol)
        with pytest.raises(InvalidSymbolError):
            suit_bit(symbol)


class TestEncode:
    """Rank products."""

    def test_known_products(self):
        assert encode(_ranks("AAAAK")) == 104_553_157
        assert encode(_ranks("AKQJT")) == 31_367_009
        assert encode(_ranks("23345")) == 630
        assert encode(_ranks("5Q3K9")) == 457_653
        assert encode(_ranks("9KQJT")) == 14_535_931

    def test_largest_product_fits_rank_bits(self):
        assert MAX_RANK_PRODUCT == 104_553_157
        assert MAX_RANK_PRODUCT <= RANK_MASK
        assert MAX_RANK_PRODUCT & SUIT_MASK == 0

    def test_order_independent(self):
        ranks = _ranks("AKQJ9")
        expected = encode(ranks)
        for perm in permutations(ranks):
            assert encode(list(perm)) == expected

    def test_products_are_collision_free(self):
        """No two rank multisets of size five share a product."""
        seen = {}
        for multiset in combinations_with_replacement(Rank, 5):
            if any(multiset.count(r) > 4 for r in multiset):
                continue
            product = encode(multiset)
            assert product not in seen, (multiset, seen.get(product))
            seen[product] = multiset
        assert len(seen) == 6175

    def test_wrong_length_raises(self):
        with pytest.raises(ValueError):
            encode(_ranks("AKQJ"))
        with pytest.raises(ValueError):
            encode(_ranks("AKQJT9"))


class TestHandKey:
    """make_key / rank_key / suit_pattern."""

    def test_suit_pattern_collapses_duplicates(self):
        assert suit_pattern([Suit.HEART] * 5) == SUIT_BITS[Suit.HEART]
        assert suit_pattern([Suit.CLUB, Suit.DIAMOND, Suit.CLUB]) == 0b0011 << SUIT_SHIFT

    def test_make_key(self):
        ranks = _ranks("AKQJT")
        key = make_key(ranks, [Suit.HEART] * 5)
        assert key == SUIT_BITS[Suit.HEART] | 31_367_009

    def test_rank_key_strips_suits(self):
        ranks = _ranks("AKQJT")
        for pattern in range(16):
            key = (pattern << SUIT_SHIFT) | encode(ranks)
            assert rank_key(key) == encode(ranks)

    def test_rank_key_suit_independent(self):
        ranks = _ranks("AKQJT")
        hearts = make_key(ranks, [Suit.HEART] * 5)
        diamonds = make_key(ranks, [Suit.DIAMOND] * 5)
        assert hearts != diamonds
        assert rank_key(hearts) == rank_key(diamonds)

    def test_contains_pair(self):
        assert contains_pair(_ranks("AAAAK"))
        assert contains_pair(_ranks("23345"))
        assert not contains_pair(_ranks("5Q3K9"))


class TestIsFlush:
    """Exactly one suit flag means flush; zero, two, three or four do not."""

    def test_single_flag_is_flush(self):
        for bits in (0b0001, 0b0010, 0b0100, 0b1000):
            assert is_flush(bits << SUIT_SHIFT)
        for suit in Suit:
            assert is_flush(SUIT_BITS[suit])

    def test_no_flags_is_not_flush(self):
        assert not is_flush(0)
        assert not is_flush(encode(_ranks("AKQJT")))

    @pytest.mark.parametrize("bits", [0b0011, 0b0101, 0b0110, 0b1001, 0b1010, 0b1100])
    def test_two_flags_is_not_flush(self, bits):
        """Parity over the flags would be even here; still not a flush."""
        assert not is_flush(bits << SUIT_SHIFT)

    @pytest.mark.parametrize("bits", [0b0111, 0b1011, 0b1101, 0b1110])
    def test_three_flags_is_not_flush(self, bits):
        """Parity over the flags would be odd here; still not a flush."""
        assert not is_flush(bits << SUIT_SHIFT)

    def test_four_flags_is_not_flush(self):
        assert not is_flush(0b1111 << SUIT_SHIFT)
        assert not is_flush(0b1111 << SUIT_SHIFT | encode(_ranks("AAAAK")))

    def test_rank_bits_do_not_affect_flush(self):
        quads = encode(_ranks("AAAAK"))
        assert is_flush(0b1000 << SUIT_SHIFT | quads)
        assert is_flush(0b0001 << SUIT_SHIFT | quads)
        assert is_flush(SUIT_BITS[Suit.CLUB] | encode(_ranks("9KQJT")))

    def test_every_flag_pattern(self):
        for bits in range(16):
            expected = bin(bits).count("1") == 1
            assert is_flush(bits << SUIT_SHIFT) == expected, bin(bits)
