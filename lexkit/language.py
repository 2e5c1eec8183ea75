#!/usr/bin/env python3
"""
Language Snapshot
=================
Plain data read from a language document: lects, rule text and phonotactics
per lect, the lexicon, and the phrasebook.

Documents use the keys of the editor's save format:

    Name: Tokiri
    CaseSensitive: false
    Lects: [General, Coastal]
    Pronunciations:
      General: |
        V::a,e,i,o,u
        ch>tʃ
    Phonotactics:
      General:
        Onsets: "p t k ch"
        Medials: "m n l"
        Codas: "n s"
        Vowels: "a e i o u"
        Illegals: ""
    Lexicon:
      chato:
        pronunciations:
          General: {ipa: tʃato, irregular: false}
        Senses:
          - {definition: "bird", lects: [General], tags: [animal]}
    Phrasebook: {}

Snapshots are never modified in place. Re-transcription returns new objects
and leaves writing them back to the caller.
"""

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import yaml

from .errors import LanguageError
from .generators.phonotactics import PhonotacticInventory
from .phonology.transducer import Transducer

GENERAL = 'General'


# =============================================================================
# Data Classes
# =============================================================================

@dataclass(frozen=True)
class EntryPronunciation:
    """Transcription of an entry in one lect."""
    ipa: str = ''
    irregular: bool = False


def _mapping(value: Any, where: str) -> Mapping:
    """A document section as a mapping; null counts as empty."""
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise LanguageError(f"{where} must be a mapping, got {type(value).__name__}")
    return value


def _items(value: Any, where: str) -> list:
    """A document list; null counts as empty."""
    if value is None:
        return []
    if isinstance(value, (str, Mapping)) or not isinstance(value, (list, tuple)):
        raise LanguageError(f"{where} must be a list, got {type(value).__name__}")
    return list(value)


def _pronunciations(data: Any, where: str = 'pronunciations') -> Dict[str, EntryPronunciation]:
    result = {}
    for lect, value in _mapping(data, where).items():
        if isinstance(value, str):
            value = {'ipa': value}
        value = _mapping(value, f"{where}.{lect}")
        result[lect] = EntryPronunciation(
            ipa=value.get('ipa', '') or '',
            irregular=bool(value.get('irregular', False)),
        )
    return result


def _pronunciations_dict(pronunciations: Mapping[str, EntryPronunciation]) -> dict:
    return {lect: {'ipa': p.ipa, 'irregular': p.irregular} for lect, p in pronunciations.items()}


@dataclass(frozen=True)
class Sense:
    """One sense of a word."""
    definition: str = ''
    lects: List[str] = field(default_factory=list)
    tags: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class Word:
    """A lexicon entry."""
    pronunciations: Dict[str, EntryPronunciation] = field(default_factory=dict)
    senses: List[Sense] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], where: str = 'word') -> 'Word':
        data = _mapping(data, where)
        senses = []
        for s in _items(data.get('Senses'), f"{where}.Senses"):
            s = _mapping(s, f"{where}.Senses")
            senses.append(Sense(
                definition=s.get('definition') or '',
                lects=_items(s.get('lects'), f"{where}.Senses.lects"),
                tags=_items(s.get('tags'), f"{where}.Senses.tags"),
            ))
        return cls(
            pronunciations=_pronunciations(data.get('pronunciations'), f"{where}.pronunciations"),
            senses=senses,
        )

    def to_dict(self) -> dict:
        return {
            'pronunciations': _pronunciations_dict(self.pronunciations),
            'Senses': [
                {'definition': s.definition, 'lects': list(s.lects), 'tags': list(s.tags)}
                for s in self.senses
            ],
        }


@dataclass(frozen=True)
class Variant:
    """An alternative form of a phrase."""
    pronunciations: Dict[str, EntryPronunciation] = field(default_factory=dict)
    description: str = ''


@dataclass(frozen=True)
class Phrase:
    """A phrasebook entry."""
    pronunciations: Dict[str, EntryPronunciation] = field(default_factory=dict)
    description: str = ''
    lects: List[str] = field(default_factory=list)
    tags: List[str] = field(default_factory=list)
    variants: Dict[str, Variant] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], where: str = 'phrase') -> 'Phrase':
        data = _mapping(data, where)
        variants = {}
        for text, v in _mapping(data.get('variants'), f"{where}.variants").items():
            v = _mapping(v, f"{where}.variants.{text}")
            variants[text] = Variant(
                pronunciations=_pronunciations(
                    v.get('pronunciations'), f"{where}.variants.{text}.pronunciations"),
                description=v.get('description') or '',
            )
        return cls(
            pronunciations=_pronunciations(data.get('pronunciations'), f"{where}.pronunciations"),
            description=data.get('description') or '',
            lects=_items(data.get('lects'), f"{where}.lects"),
            tags=_items(data.get('tags'), f"{where}.tags"),
            variants=variants,
        )

    def to_dict(self) -> dict:
        return {
            'pronunciations': _pronunciations_dict(self.pronunciations),
            'description': self.description,
            'lects': list(self.lects),
            'tags': list(self.tags),
            'variants': {
                text: {
                    'pronunciations': _pronunciations_dict(v.pronunciations),
                    'description': v.description,
                }
                for text, v in self.variants.items()
            },
        }


Lexicon = Dict[str, Word]
Phrasebook = Dict[str, Dict[str, Phrase]]


@dataclass(frozen=True)
class Language:
    """Snapshot of a language document."""
    name: str = ''
    case_sensitive: bool = False
    lects: List[str] = field(default_factory=lambda: [GENERAL])
    pronunciations: Dict[str, str] = field(default_factory=dict)
    phonotactics: Dict[str, PhonotacticInventory] = field(default_factory=dict)
    lexicon: Lexicon = field(default_factory=dict)
    phrasebook: Phrasebook = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'Language':
        """
        Build a snapshot from a parsed document.

        Raises
        ------
        LanguageError
            If the document is not a mapping or lacks General phonotactics
        """
        if not isinstance(data, Mapping):
            raise LanguageError("Language document must be a mapping")

        phonotactics = {
            lect: PhonotacticInventory.from_dict(_mapping(inv, f"Phonotactics.{lect}"))
            for lect, inv in _mapping(data.get('Phonotactics'), 'Phonotactics').items()
        }
        if GENERAL not in phonotactics:
            raise LanguageError(f"Language document has no '{GENERAL}' phonotactics")

        lects = _items(data.get('Lects'), 'Lects') or [GENERAL]
        if GENERAL not in lects:
            lects.insert(0, GENERAL)

        pronunciations = {}
        for lect, text in _mapping(data.get('Pronunciations'), 'Pronunciations').items():
            if text is not None and not isinstance(text, str):
                raise LanguageError(f"Pronunciations.{lect} must be rule text")
            pronunciations[lect] = text or ''

        return cls(
            name=data.get('Name') or '',
            case_sensitive=bool(data.get('CaseSensitive', False)),
            lects=lects,
            pronunciations=pronunciations,
            phonotactics=phonotactics,
            lexicon={
                word: Word.from_dict(entry, f"Lexicon.{word}")
                for word, entry in _mapping(data.get('Lexicon'), 'Lexicon').items()
            },
            phrasebook={
                category: {
                    text: Phrase.from_dict(p, f"Phrasebook.{category}.{text}")
                    for text, p in _mapping(phrases, f"Phrasebook.{category}").items()
                }
                for category, phrases in _mapping(data.get('Phrasebook'), 'Phrasebook').items()
            },
        )

    def to_dict(self) -> dict:
        return {
            'Name': self.name,
            'CaseSensitive': self.case_sensitive,
            'Lects': list(self.lects),
            'Pronunciations': dict(self.pronunciations),
            'Phonotactics': {lect: inv.to_dict() for lect, inv in self.phonotactics.items()},
            'Lexicon': {word: entry.to_dict() for word, entry in self.lexicon.items()},
            'Phrasebook': {
                category: {text: p.to_dict() for text, p in phrases.items()}
                for category, phrases in self.phrasebook.items()
            },
        }

    def rule_text(self, lect: str) -> str:
        """Rule text of a lect."""
        self.require_lect(lect)
        return self.pronunciations.get(lect, '')

    def inventory(self, lect: str = GENERAL) -> PhonotacticInventory:
        """Phonotactics of a lect, falling back to General."""
        self.require_lect(lect)
        return self.phonotactics.get(lect, self.phonotactics[GENERAL])

    def require_lect(self, lect: str):
        if lect not in self.lects and lect not in self.pronunciations:
            available = ', '.join(self.lects)
            raise LanguageError(f"Unknown lect '{lect}'. Available lects: {available}")


def load_language(path) -> Language:
    """
    Load a language document from a YAML or JSON file.

    Raises
    ------
    LanguageError
        If the file is missing or cannot be parsed
    """
    path = Path(path)
    if not path.exists():
        raise LanguageError(f"Language file not found: {path}")
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise LanguageError(f"Cannot parse {path}: {e}") from e
    return Language.from_dict(data or {})


# =============================================================================
# Re-transcription
# =============================================================================

def _refresh(pronunciations: Mapping[str, EntryPronunciation], text: str,
             lect: str, transducer: Transducer) -> Optional[Dict[str, EntryPronunciation]]:
    current = pronunciations.get(lect)
    if current is None or current.irregular:
        return None
    updated = dict(pronunciations)
    updated[lect] = replace(current, ipa=transducer.transcribe(text))
    return updated


def retranscribe_lexicon(lexicon: Lexicon, lect: str, transducer: Transducer) -> Lexicon:
    """
    Re-transcribe every regular entry that has a pronunciation in `lect`.

    Irregular entries and entries without the lect are returned unchanged.
    """
    result = {}
    for text, entry in lexicon.items():
        updated = _refresh(entry.pronunciations, text, lect, transducer)
        result[text] = entry if updated is None else replace(entry, pronunciations=updated)
    return result


def retranscribe_phrasebook(phrasebook: Phrasebook, lect: str,
                            transducer: Transducer) -> Phrasebook:
    """Re-transcribe regular phrases and variants that have a pronunciation in `lect`."""
    result = {}
    for category, phrases in phrasebook.items():
        result[category] = {}
        for text, phrase in phrases.items():
            variants = {}
            for variant_text, variant in phrase.variants.items():
                updated = _refresh(variant.pronunciations, variant_text, lect, transducer)
                variants[variant_text] = (
                    variant if updated is None else replace(variant, pronunciations=updated)
                )
            updated = _refresh(phrase.pronunciations, text, lect, transducer)
            result[category][text] = replace(
                phrase,
                pronunciations=phrase.pronunciations if updated is None else updated,
                variants=variants,
            )
    return result
