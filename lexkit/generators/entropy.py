#!/usr/bin/env python3
"""
Entropy Module for Word Generation
==================================
Uniform random source for the phonotactic sampler.

Unseeded sources draw from the operating system CSPRNG via
secrets.SystemRandom(). Passing a seed gives a reproducible
random.Random-backed stream, which is what tests and `--seed` use.
"""

import random as _random
import secrets
from typing import Any, Optional, Sequence


class TrueRandom:
    """
    Random number source used by the sampler.

    Examples
    --------
        >>> rng = TrueRandom(seed=42)
        >>> rng.choice(['a', 'e', 'i']) in ('a', 'e', 'i')
        True
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        if seed is None:
            self._rng = secrets.SystemRandom()
        else:
            self._rng = _random.Random(seed)

    def random(self) -> float:
        """Return random float in [0.0, 1.0)."""
        return self._rng.random()

    def randint(self, a: int, b: int) -> int:
        """Return random integer N such that a <= N <= b."""
        return self._rng.randint(a, b)

    def coin(self) -> bool:
        """Fair coin flip."""
        return self._rng.randint(0, 1) == 0

    def choice(self, seq: Sequence) -> Any:
        """Return a random element from non-empty sequence."""
        if not seq:
            raise IndexError("Cannot choose from empty sequence")
        return self._rng.choice(seq)

    def __repr__(self) -> str:
        source = 'system' if self.seed is None else f'seed={self.seed}'
        return f"TrueRandom({source})"


# Global instance
_true_random = TrueRandom()


def get_rng(seed: Optional[int] = None) -> TrueRandom:
    """Get the global random source, or a fresh seeded one."""
    if seed is not None:
        return TrueRandom(seed)
    return _true_random
