"""Hand rank query engine.

This module provides:
- Evaluator: scalar and numpy-batched rank lookups
- LookupMissError: raised for keys that are not a real 5-card hand
- GPURankLookup: batched lookups on torch tensors
"""

from .evaluator import (
    Evaluator,
    LookupMissError,
    flush_mask,
)
from .gpu_lookup import GPURankLookup

__all__ = [
    "Evaluator",
    "LookupMissError",
    "flush_mask",
    "GPURankLookup",
]
