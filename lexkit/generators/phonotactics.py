#!/usr/bin/env python3
"""
Phonotactic Inventory
=====================
Syllable-part inventories for one lect.

Inventories come from the language document either as lists or as
whitespace-delimited strings:

    Onsets: "p t k pr tr"
    Medials: [m, n, l]
    Codas: "n s"
    Vowels: "a e i o u"
    Illegals: "^n ii"

An illegal is a substring that disqualifies a word wherever it occurs in the
boundary-delimited form `^word^`, so `^n` forbids a word-initial `n`.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Mapping, Tuple, Union

from ..errors import InventoryError

# Document key -> attribute name
FIELDS = {
    'Onsets': 'onsets',
    'Medials': 'medials',
    'Codas': 'codas',
    'Vowels': 'vowels',
    'Illegals': 'illegals',
}

GraphemeList = Union[str, Iterable[str], None]


def split_graphemes(value: GraphemeList) -> Tuple[str, ...]:
    """Normalize a whitespace-delimited string or a list to a tuple without empty entries."""
    if value is None:
        return ()
    if isinstance(value, str):
        return tuple(value.split())
    return tuple(str(v).strip() for v in value if str(v).strip())


@dataclass(frozen=True)
class PhonotacticInventory:
    """Onset, medial, coda and vowel inventories plus illegal sequences."""
    onsets: Tuple[str, ...] = ()
    medials: Tuple[str, ...] = ()
    codas: Tuple[str, ...] = ()
    vowels: Tuple[str, ...] = ()
    illegals: Tuple[str, ...] = ()

    def __post_init__(self):
        for name in FIELDS.values():
            object.__setattr__(self, name, split_graphemes(getattr(self, name)))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'PhonotacticInventory':
        """Build from document keys (`Onsets`, ...) or attribute names (`onsets`, ...)."""
        kwargs = {}
        for key, name in FIELDS.items():
            if key in data:
                kwargs[name] = data[key]
            elif name in data:
                kwargs[name] = data[name]
        return cls(**kwargs)

    def to_dict(self) -> Dict[str, list]:
        return {key: list(getattr(self, name)) for key, name in FIELDS.items()}

    def validate(self) -> 'PhonotacticInventory':
        """Raise InventoryError if words cannot be built from this inventory."""
        if not self.vowels:
            raise InventoryError("Phonotactic inventory has no vowels")
        return self

    def is_legal(self, word: str) -> bool:
        """True if no illegal sequence occurs in a boundary-delimited word."""
        return not any(illegal in word for illegal in self.illegals)
