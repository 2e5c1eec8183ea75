#!/usr/bin/env python3
"""
Transducer
==========
Applies a compiled rule set to text, producing its transcription.

The scan runs once, left to right. At each position the longest pattern
that matches is replaced and the scan resumes after the inserted text, so a
substitution is never rewritten by a later rule in the same call.

Patterns may contain the wildcard `_`, which matches any character except
the word boundary `^`. A `_` in a substitution echoes the character the
pattern matched at that position:

    _a>_e   applied to "ba"   gives "be"
    ^h>∅    applied to "hat"  gives "at"

Line breaks count as word boundaries and are not kept: "ab\\ncd" comes
out as "ab cd".
"""

import logging
import re
from typing import Iterable, List, Optional, Tuple

from .categories import WILDCARD
from .rules import BOUNDARY, NULL, CompiledRuleSet

logger = logging.getLogger(__name__)

_SEPARATORS = re.compile(r'[^\S\n]+|\n')


def normalize(word: str) -> str:
    """Anchor every whitespace-delimited token with boundary markers."""
    return f"{BOUNDARY}{_SEPARATORS.sub(BOUNDARY, word)}{BOUNDARY}"


def finalize(word: str) -> str:
    """Turn boundaries back into spaces, trim, and apply deletions."""
    return word.replace(BOUNDARY, ' ').strip().replace(NULL, '')


def wildcard_match(pattern: str, substring: str) -> bool:
    """True if pattern matches substring, `_` standing for any non-boundary character."""
    if len(pattern) != len(substring):
        return False
    return all(
        p == s or (p == WILDCARD and s != BOUNDARY)
        for p, s in zip(pattern, substring)
    )


def echo(substitution: str, substring: str) -> str:
    """Fill `_` slots of a substitution with the matched characters."""
    chars = []
    for i, char in enumerate(substitution):
        if char == WILDCARD and i < len(substring) and substring[i] != BOUNDARY:
            chars.append(substring[i])
        else:
            chars.append(char)
    return ''.join(chars)


class Transducer:
    """
    Transcribes text with one compiled rule set.

    Examples
    --------
        >>> from lexkit.phonology import compile_rules
        >>> t = Transducer(compile_rules([('a', 'X'), ('ab', 'Y')]))
        >>> t.transcribe('ab')
        'Y'
    """

    def __init__(self, ruleset: CompiledRuleSet, case_sensitive: bool = False):
        self.ruleset = ruleset
        self.case_sensitive = case_sensitive
        # length -> (exact table, wildcard patterns in compiled order)
        self._plan: List[Tuple[int, dict, List[Tuple[str, str]]]] = []
        for length in ruleset.lengths:
            bucket = ruleset.bucket(length)
            wildcards = [(p, s) for p, s in bucket.items() if WILDCARD in p]
            self._plan.append((length, bucket, wildcards))

    def _match(self, substring: str, exact: dict,
               wildcards: List[Tuple[str, str]]) -> Optional[str]:
        # An exact pattern wins; otherwise the first wildcard pattern compiled
        if substring in exact:
            return echo(exact[substring], substring)
        for pattern, substitution in wildcards:
            if wildcard_match(pattern, substring):
                return echo(substitution, substring)
        return None

    def transcribe(self, word: str) -> str:
        """
        Transcribe a word or phrase.

        Parameters
        ----------
        word : str
            Orthographic input; whitespace separates independently anchored
            tokens

        Returns
        -------
        str
            Transcription with boundaries removed and deletions applied
        """
        text = normalize(word)
        if not self.case_sensitive:
            text = text.lower()

        i = 0
        while i < len(text):
            for length, exact, wildcards in self._plan:
                substring = text[i:i + length]
                if len(substring) < length:
                    continue
                substitute = self._match(substring, exact, wildcards)
                if substitute is None:
                    continue
                text = text[:i] + substitute + text[i + length:]
                i += len(substitute) - 1
                break
            i += 1

        return finalize(text)

    def transcribe_many(self, words: Iterable[str]) -> List[str]:
        """Transcribe each word independently."""
        return [self.transcribe(w) for w in words]


def transcribe(word: str, ruleset: CompiledRuleSet, case_sensitive: bool = False) -> str:
    """Transcribe a word with a compiled rule set."""
    return Transducer(ruleset, case_sensitive).transcribe(word)
