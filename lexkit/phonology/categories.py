#!/usr/bin/env python3
"""
Category Table
==============
Named classes of interchangeable graphemes used to parametrize rules.

A category symbol is a single character. Its items are kept in the order the
author wrote them, since rule expansion and substitution correspondence both
depend on item position.
"""

from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

# Reserved for positional echo in patterns and substitutions
WILDCARD = '_'


class CategoryTable(Mapping):
    """
    Read-only mapping of category symbol -> tuple of grapheme strings.

    Examples
    --------
        >>> cats = CategoryTable({'V': ['a', 'e'], 'C': ['p', 't', 'k']})
        >>> cats['C']
        ('p', 't', 'k')
        >>> 'V' in cats
        True
    """

    def __init__(self, categories: Optional[Mapping[str, Iterable[str]]] = None):
        self._items: Dict[str, Tuple[str, ...]] = {}
        for symbol, items in (categories or {}).items():
            if len(symbol) != 1:
                raise ValueError(f"Category symbol must be a single character: {symbol!r}")
            if symbol == WILDCARD:
                raise ValueError(f"'{WILDCARD}' is reserved for wildcards")
            self._items[symbol] = tuple(items)

    def __getitem__(self, symbol: str) -> Tuple[str, ...]:
        return self._items[symbol]

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"CategoryTable({self._items!r})"

    def symbols_in(self, text: str) -> List[str]:
        """Distinct category symbols occurring in text, in first-occurrence order."""
        seen = []
        for char in text:
            if char in self._items and char not in seen:
                seen.append(char)
        return seen
