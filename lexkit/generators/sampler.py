#!/usr/bin/env python3
"""
Phonotactic Sampler
===================
Builds random words from a phonotactic inventory, or completes a partial
word, rejecting any result that contains an illegal sequence.

Both operations return an empty string when no legal word was produced.
An empty string is never a valid word, so callers decide whether to retry.
"""

import logging
from typing import List, Optional, Sequence

from ..phonology.rules import BOUNDARY
from .entropy import TrueRandom, get_rng
from .phonotactics import PhonotacticInventory

logger = logging.getLogger(__name__)

# Attempts made by generate_word before giving up
MAX_ATTEMPTS = 50


def _pick(rng: TrueRandom, graphemes: Sequence[str]) -> str:
    # An empty onset, medial or coda inventory contributes nothing
    return rng.choice(graphemes) if graphemes else ''


def _finalize(word: str, inventory: PhonotacticInventory) -> str:
    word += BOUNDARY
    if not inventory.is_legal(word):
        logger.debug(f"Rejected '{word}': contains an illegal sequence")
        return ''
    return word.replace(BOUNDARY, '')


def _attempt(inventory: PhonotacticInventory, rng: TrueRandom) -> str:
    word = BOUNDARY
    if rng.coin():
        word += rng.choice(inventory.vowels)
    else:
        word += _pick(rng, inventory.onsets) + rng.choice(inventory.vowels)
    lone_vowel = word[len(BOUNDARY):] in inventory.vowels

    for round_ in range(2):
        # A word that is only a vowel always gets a second syllable
        if rng.coin() or (round_ == 0 and lone_vowel):
            word += _pick(rng, inventory.medials) + rng.choice(inventory.vowels)

    if rng.coin():
        word += _pick(rng, inventory.codas)

    return _finalize(word, inventory)


def generate_word(inventory: PhonotacticInventory, rng: Optional[TrueRandom] = None) -> str:
    """
    Generate a random legal word.

    Parameters
    ----------
    inventory : PhonotacticInventory
        Syllable-part inventories; must contain at least one vowel
    rng : TrueRandom, optional
        Random source (default: global source)

    Returns
    -------
    str
        A word containing no illegal sequence, or '' if none was found in
        MAX_ATTEMPTS attempts

    Raises
    ------
    InventoryError
        If the inventory has no vowels
    """
    inventory.validate()
    rng = rng or get_rng()

    for _ in range(MAX_ATTEMPTS):
        word = _attempt(inventory, rng)
        if word:
            return word
    logger.info(f"No legal word found in {MAX_ATTEMPTS} attempts")
    return ''


def complete_word(trial: str, inventory: PhonotacticInventory,
                  rng: Optional[TrueRandom] = None) -> str:
    """
    Complete a partial word in a single attempt.

    A trial ending in a vowel either gains a medial and vowel or is closed
    with a coda. Any other trial gains a vowel first and may stop there.

    Parameters
    ----------
    trial : str
        Start of the word
    inventory : PhonotacticInventory
        Syllable-part inventories; must contain at least one vowel
    rng : TrueRandom, optional
        Random source (default: global source)

    Returns
    -------
    str
        The completed word, or '' if it contains an illegal sequence

    Raises
    ------
    InventoryError
        If the inventory has no vowels
    """
    inventory.validate()
    rng = rng or get_rng()
    word = BOUNDARY + trial

    # First vowel in inventory order that the word ends with
    final_vowel = next((v for v in inventory.vowels if word.endswith(v)), None)

    if final_vowel is not None:
        if rng.coin():
            word += _pick(rng, inventory.medials) + rng.choice(inventory.vowels)
        else:
            return _finalize(word + _pick(rng, inventory.codas), inventory)
    else:
        word += rng.choice(inventory.vowels)
        if rng.coin():
            if rng.coin():
                word += _pick(rng, inventory.codas)
            return _finalize(word, inventory)

    if rng.coin():
        word += _pick(rng, inventory.codas)
    else:
        word += _pick(rng, inventory.medials) + rng.choice(inventory.vowels)
        if rng.coin():
            word += _pick(rng, inventory.codas)
    return _finalize(word, inventory)


class PhonotacticSampler:
    """
    Generator bound to one inventory and random source.

    Examples
    --------
        >>> inv = PhonotacticInventory(onsets='p t', medials='m', codas='n', vowels='a i')
        >>> sampler = PhonotacticSampler(inv, rng=TrueRandom(seed=7))
        >>> word = sampler.generate()
    """

    def __init__(self, inventory: PhonotacticInventory, rng: Optional[TrueRandom] = None):
        self.inventory = inventory.validate()
        self.rng = rng or get_rng()

    def generate(self) -> str:
        return generate_word(self.inventory, self.rng)

    def complete(self, trial: str) -> str:
        return complete_word(trial, self.inventory, self.rng)

    def generate_batch(self, count: int) -> List[str]:
        """Generate up to `count` words; failed generations are left out."""
        words = []
        for _ in range(count):
            word = self.generate()
            if word:
                words.append(word)
        return words
