"""
Tests for LexKit Main Class
===========================
Tests for the LexKit facade: rule caching, transcription per lect,
generation and re-transcription.
"""

import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from lexkit import LanguageError, LexKit, TrueRandom, load_language

SAMPLE = ROOT / 'lexkit' / 'configs' / 'sample_language.yaml'


@pytest.fixture
def kit():
    return LexKit(load_language(SAMPLE), rng=TrueRandom(seed=42))


class TestLexKitTranscribe:
    """Tests for transcription through LexKit."""

    def test_general(self, kit):
        assert kit.transcribe('chato') == 'tʃato'
        assert kit.transcribe('shikah') == 'ʃika'

    def test_intervocalic_voicing(self, kit):
        assert kit.transcribe('tata') == 'tada'

    def test_phrase(self, kit):
        assert kit.transcribe('chato yoru') == 'tʃato joru'

    def test_word_final_deletion_keeps_word_break(self, kit):
        assert kit.transcribe('shikah apa') == 'ʃika aba'

    def test_case_insensitive_language(self, kit):
        assert kit.transcribe('Chato') == kit.transcribe('chato')

    def test_coastal(self, kit):
        assert kit.transcribe('chato', lect='Coastal') == 'ʃatoː'
        assert kit.transcribe('yoru', lect='Coastal') == 'yoɾuː'

    def test_transcribe_many(self, kit):
        assert kit.transcribe_many(['chato', 'yoru']) == ['tʃato', 'joru']

    def test_unknown_lect(self, kit):
        with pytest.raises(LanguageError):
            kit.transcribe('chato', lect='Nowhere')


class TestLexKitRules:
    """Tests for the per-lect rule cache."""

    def test_rules_cached(self, kit):
        assert kit.rules('General') is kit.rules('General')

    def test_rule_count(self, kit):
        # ch, sh, y, h^ plus 3 x 5 VCV expansions
        assert len(kit.rules('General')) == 19

    def test_invalidate_one(self, kit):
        first = kit.rules('General')
        coastal = kit.rules('Coastal')
        kit.invalidate('General')
        assert kit.rules('General') is not first
        assert kit.rules('Coastal') is coastal

    def test_invalidate_all(self, kit):
        first = kit.rules('Coastal')
        kit.invalidate()
        assert kit.rules('Coastal') is not first


class TestLexKitGenerate:
    """Tests for generation through LexKit."""

    def test_generate(self, kit):
        words = kit.generate(count=10)
        assert len(words) <= 10
        illegals = kit.inventory('General').illegals
        for word in words:
            assert not any(ill in f'^{word}^' for ill in illegals)

    def test_generate_word(self, kit):
        word = kit.generate_word('Coastal')
        assert isinstance(word, str)

    def test_seeded_generation_reproducible(self):
        language = load_language(SAMPLE)
        a = LexKit(language, rng=TrueRandom(seed=3)).generate(count=5)
        b = LexKit(language, rng=TrueRandom(seed=3)).generate(count=5)
        assert a == b

    def test_complete(self, kit):
        word = kit.complete('ta')
        assert word == '' or word.startswith('ta')


class TestLexKitRetranscribe:
    """Tests for LexKit.retranscribe()."""

    def test_returns_new_language(self, kit):
        updated = kit.retranscribe('General')
        assert updated is not kit.language
        assert updated.lexicon['chato'].pronunciations['General'].ipa == 'tʃato'
        assert kit.language.lexicon['chato'].pronunciations['General'].ipa == ''

    def test_irregular_kept(self, kit):
        updated = kit.retranscribe('General')
        assert updated.lexicon['yoru'].pronunciations['General'].ipa == 'jolu'

    def test_phrasebook(self, kit):
        updated = kit.retranscribe('General')
        phrase = updated.phrasebook['Greetings']['chato yoru']
        assert phrase.pronunciations['General'].ipa == 'tʃato joru'

    def test_coastal(self, kit):
        updated = kit.retranscribe('Coastal')
        assert updated.lexicon['chato'].pronunciations['Coastal'].ipa == 'ʃatoː'
        assert updated.lexicon['chato'].pronunciations['General'].ipa == ''
