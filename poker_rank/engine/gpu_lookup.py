"""Batched rank lookup on torch tensors.

This module provides:
- GPURankLookup: the evaluator's tables copied to a device, queried with
  torch.searchsorted so a whole batch of hand keys is ranked at once

Key insight: both tables are sorted by rank product once on the host.
A batch lookup is then one flush mask plus two binary searches, with no
per-key Python work.

Usage:
    lookup = GPURankLookup(Evaluator(), device="cuda")
    ranks = lookup(keys)  # keys: int64 tensor of hand keys
"""

from typing import Union

import torch

from poker_rank.rules.hand_key import RANK_MASK, SUIT_MASK, SUIT_SHIFT
from .evaluator import Evaluator, LookupMissError


class GPURankLookup:
    """Evaluator tables as device tensors for batched queries."""

    def __init__(self, evaluator: Evaluator, device: Union[str, torch.device] = "cpu"):
        self.device = torch.device(device)
        (flush_keys, flush_ranks), (non_flush_keys, non_flush_ranks) = evaluator.sorted_tables()

        self.flush_keys = torch.tensor(flush_keys.copy(), dtype=torch.int64, device=self.device)
        self.flush_ranks = torch.tensor(flush_ranks.copy(), dtype=torch.int64, device=self.device)
        self.non_flush_keys = torch.tensor(non_flush_keys.copy(), dtype=torch.int64, device=self.device)
        self.non_flush_ranks = torch.tensor(
            non_flush_ranks.copy(), dtype=torch.int64, device=self.device
        )

    @staticmethod
    def flush_mask(keys: torch.Tensor) -> torch.Tensor:
        """Elementwise exactly-one-suit-flag test."""
        bits = (keys & SUIT_MASK) >> SUIT_SHIFT
        return (bits != 0) & ((bits & (bits - 1)) == 0)

    def _search(
        self,
        table_keys: torch.Tensor,
        table_ranks: torch.Tensor,
        keys: torch.Tensor,
        flush: bool,
    ) -> torch.Tensor:
        products = keys & RANK_MASK
        idx = torch.searchsorted(table_keys, products)
        idx = idx.clamp_max(table_keys.shape[0] - 1)
        hit = table_keys[idx] == products
        if not bool(hit.all()):
            missing = keys[~hit][0]
            raise LookupMissError(int(missing.item()), flush)
        return table_ranks[idx]

    def lookup(self, keys: torch.Tensor) -> torch.Tensor:
        """Ranks for a tensor of hand keys (any shape).

        Raises:
            LookupMissError: For the first key whose rank product is missing
        """
        keys = keys.to(device=self.device, dtype=torch.int64)
        flat = keys.reshape(-1)
        flush = self.flush_mask(flat)

        ranks = torch.zeros_like(flat)
        ranks[flush] = self._search(self.flush_keys, self.flush_ranks, flat[flush], True)
        ranks[~flush] = self._search(
            self.non_flush_keys, self.non_flush_ranks, flat[~flush], False
        )
        return ranks.reshape(keys.shape)

    def __call__(self, keys: torch.Tensor) -> torch.Tensor:
        return self.lookup(keys)
