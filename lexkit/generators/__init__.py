#!/usr/bin/env python3
"""
Word Generators
===============
Phonotactic word generation and completion:
- generate_word: Random legal word, up to 50 attempts
- complete_word: Single-attempt completion of a partial word
- PhonotacticSampler: Both, bound to an inventory and random source
"""

from .entropy import TrueRandom, get_rng
from .phonotactics import PhonotacticInventory, split_graphemes
from .sampler import (
    MAX_ATTEMPTS,
    PhonotacticSampler,
    complete_word,
    generate_word,
)

__all__ = [
    # Random source
    'TrueRandom',
    'get_rng',
    # Inventory
    'PhonotacticInventory',
    'split_graphemes',
    # Sampling
    'MAX_ATTEMPTS',
    'PhonotacticSampler',
    'generate_word',
    'complete_word',
]
