#!/usr/bin/env python3
"""
Rule Data Classes
=================
Author-written rules, their concrete expansions, and the length-bucketed
table the transducer consumes.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Tuple


# Sentinel delimiting word start/end during transduction
BOUNDARY = '^'

# Deletion marker, stripped from the final transcription
NULL = '∅'


@dataclass(frozen=True)
class RawRule:
    """A `pattern>substitution` rule as written, possibly with category symbols."""
    pattern: str
    substitution: str

    def __str__(self) -> str:
        return f"{self.pattern}>{self.substitution}"


@dataclass(frozen=True)
class CompiledRule:
    """A concrete, category-free rule."""
    pattern: str
    substitution: str

    @property
    def length(self) -> int:
        return len(self.pattern)


class CompiledRuleSet:
    """
    Compiled rules bucketed by pattern length.

    Within a bucket patterns are unique. Adding a pattern twice keeps the
    latest substitution at the pattern's original position, so iteration
    order is the order patterns were first compiled.

    Examples
    --------
        >>> rs = CompiledRuleSet([CompiledRule('a', 'X'), CompiledRule('ab', 'Y')])
        >>> rs.lengths
        [2, 1]
        >>> rs.bucket(2)
        {'ab': 'Y'}
    """

    def __init__(self, rules: Iterable[CompiledRule] = ()):
        self._buckets: Dict[int, Dict[str, str]] = {}
        for rule in rules:
            self.add(rule)

    def add(self, rule: CompiledRule):
        self._buckets.setdefault(rule.length, {})[rule.pattern] = rule.substitution

    @property
    def lengths(self) -> List[int]:
        """Distinct pattern lengths, longest first."""
        return sorted(self._buckets, reverse=True)

    def bucket(self, length: int) -> Dict[str, str]:
        return self._buckets.get(length, {})

    def as_dict(self) -> Dict[str, str]:
        """Flat pattern -> substitution table, longest patterns first."""
        table = {}
        for length in self.lengths:
            table.update(self._buckets[length])
        return table

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        for length in self.lengths:
            yield from self._buckets[length].items()

    def __len__(self) -> int:
        return sum(len(b) for b in self._buckets.values())

    def __contains__(self, pattern: str) -> bool:
        return pattern in self.bucket(len(pattern))

    def __bool__(self) -> bool:
        return bool(self._buckets)

    def __repr__(self) -> str:
        return f"CompiledRuleSet({len(self)} rules, lengths={self.lengths})"
