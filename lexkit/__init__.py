#!/usr/bin/env python3
"""
Lexkit - Conlang Phonology Toolkit
==================================

Transcription rules and phonotactic word generation for constructed
languages.

Quick Start
-----------
    from lexkit import LexKit, load_language

    kit = LexKit(load_language("tokiri.yaml"))

    # Transcribe with a lect's rules
    kit.transcribe("chato", lect="General")

    # Generate and complete words
    words = kit.generate(count=10)
    kit.complete("ta")

    # Refresh every regular pronunciation after a rule edit
    updated = kit.retranscribe("General")

Modules
-------
    lexkit.phonology  - Rule parsing, compilation and transduction
    lexkit.generators - Phonotactic word generation
    lexkit.language   - Language snapshot data
    lexkit.config     - Configuration

CLI Usage
---------
    python -m lexkit transcribe "chato yoru"
    python -m lexkit generate -n 10 --seed 42
    python -m lexkit complete ta
"""

__version__ = "0.4.0"
__author__ = "Lexkit"

import logging
from dataclasses import replace
from typing import Dict, Iterable, List, Optional

from . import generators
from . import phonology
from . import language

from .errors import InventoryError, LanguageError, LexkitError
from .config import Config, config, get_config, load_env
from .generators import (
    MAX_ATTEMPTS,
    PhonotacticInventory,
    PhonotacticSampler,
    TrueRandom,
    complete_word,
    generate_word,
    get_rng,
)
from .language import (
    GENERAL,
    Language,
    load_language,
    retranscribe_lexicon,
    retranscribe_phrasebook,
)
from .phonology import (
    CategoryTable,
    CompiledRuleSet,
    RawRule,
    RuleCompiler,
    Transducer,
    compile_rule_text,
    compile_rules,
    parse_rule_text,
    transcribe,
)

logger = logging.getLogger(__name__)


# =============================================================================
# LexKit Main Class
# =============================================================================

class LexKit:
    """
    Main interface over a language snapshot.

    Compiled rule tables are cached per lect and reused across transcription
    calls. After editing a lect's rules, build a new LexKit from the new
    snapshot or call `invalidate`.

    Examples
    --------
        >>> kit = LexKit(load_language("tokiri.yaml"), rng=TrueRandom(seed=1))
        >>> kit.transcribe("chato")
        'tʃato'
    """

    def __init__(self, language: Language, rng: Optional[TrueRandom] = None):
        """
        Parameters
        ----------
        language : Language
            Snapshot to read rules and phonotactics from
        rng : TrueRandom, optional
            Random source for generation (default: global source)
        """
        self._language = language
        self._rng = rng or get_rng()
        self._rules: Dict[str, CompiledRuleSet] = {}
        self._transducers: Dict[str, Transducer] = {}

    @property
    def language(self) -> Language:
        return self._language

    @property
    def lects(self) -> List[str]:
        return list(self._language.lects)

    # -------------------------------------------------------------------------
    # Transcription
    # -------------------------------------------------------------------------

    def rules(self, lect: str = GENERAL) -> CompiledRuleSet:
        """Compiled rule table of a lect."""
        if lect in self._rules:
            logger.debug(f"Using cached rules for lect '{lect}'")
            return self._rules[lect]
        ruleset = compile_rule_text(self._language.rule_text(lect))
        logger.debug(f"Compiled {len(ruleset)} rules for lect '{lect}'")
        self._rules[lect] = ruleset
        return ruleset

    def transducer(self, lect: str = GENERAL) -> Transducer:
        if lect not in self._transducers:
            self._transducers[lect] = Transducer(
                self.rules(lect), case_sensitive=self._language.case_sensitive
            )
        return self._transducers[lect]

    def invalidate(self, lect: Optional[str] = None):
        """Drop cached rule tables for one lect, or for all."""
        if lect is None:
            self._rules.clear()
            self._transducers.clear()
        else:
            self._rules.pop(lect, None)
            self._transducers.pop(lect, None)

    def transcribe(self, text: str, lect: str = GENERAL) -> str:
        return self.transducer(lect).transcribe(text)

    def transcribe_many(self, texts: Iterable[str], lect: str = GENERAL) -> List[str]:
        return self.transducer(lect).transcribe_many(texts)

    def retranscribe(self, lect: str = GENERAL) -> Language:
        """
        Re-transcribe every regular lexicon and phrasebook entry of a lect.

        Returns
        -------
        Language
            New snapshot; entries marked irregular keep their pronunciation
        """
        transducer = self.transducer(lect)
        return replace(
            self._language,
            lexicon=retranscribe_lexicon(self._language.lexicon, lect, transducer),
            phrasebook=retranscribe_phrasebook(self._language.phrasebook, lect, transducer),
        )

    # -------------------------------------------------------------------------
    # Generation
    # -------------------------------------------------------------------------

    def inventory(self, lect: str = GENERAL) -> PhonotacticInventory:
        return self._language.inventory(lect)

    def sampler(self, lect: str = GENERAL) -> PhonotacticSampler:
        return PhonotacticSampler(self.inventory(lect), rng=self._rng)

    def generate_word(self, lect: str = GENERAL) -> str:
        """One generated word, or '' if generation failed."""
        return generate_word(self.inventory(lect), self._rng)

    def generate(self, count: int = 10, lect: str = GENERAL) -> List[str]:
        """Up to `count` generated words."""
        return self.sampler(lect).generate_batch(count)

    def complete(self, trial: str, lect: str = GENERAL) -> str:
        """Single completion attempt, or '' if it was rejected."""
        return complete_word(trial, self.inventory(lect), self._rng)


__all__ = [
    '__version__',
    'LexKit',
    # Errors
    'LexkitError',
    'InventoryError',
    'LanguageError',
    # Config
    'Config',
    'config',
    'get_config',
    'load_env',
    # Language
    'GENERAL',
    'Language',
    'load_language',
    'retranscribe_lexicon',
    'retranscribe_phrasebook',
    # Phonology
    'CategoryTable',
    'CompiledRuleSet',
    'RawRule',
    'RuleCompiler',
    'Transducer',
    'compile_rules',
    'compile_rule_text',
    'parse_rule_text',
    'transcribe',
    # Generation
    'MAX_ATTEMPTS',
    'PhonotacticInventory',
    'PhonotacticSampler',
    'TrueRandom',
    'generate_word',
    'complete_word',
]
