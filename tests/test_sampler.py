"""
Tests for Phonotactic Sampling
==============================
Tests for generate_word(), complete_word(), PhonotacticSampler and the
inventory and random source they use.
"""

import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from lexkit.errors import InventoryError
from lexkit.generators import (
    MAX_ATTEMPTS,
    PhonotacticInventory,
    PhonotacticSampler,
    TrueRandom,
    complete_word,
    generate_word,
    split_graphemes,
)


class ScriptedRandom:
    """Random source with scripted coin flips; choice() takes the first item."""

    def __init__(self, coins):
        self.coins = list(coins)

    def coin(self):
        return self.coins.pop(0)

    def choice(self, seq):
        return seq[0]


class CountingRandom(TrueRandom):
    """Seeded source that counts coin flips."""

    def __init__(self, seed):
        super().__init__(seed)
        self.flips = 0

    def coin(self):
        self.flips += 1
        return super().coin()


@pytest.fixture
def simple():
    return PhonotacticInventory(onsets='t', medials='m', codas='n', vowels='a')


@pytest.fixture
def rich_inventory():
    return PhonotacticInventory(
        onsets='p t k ch sh m n l r y',
        medials='p t k m n l r',
        codas='n s h',
        vowels='a e i o u',
        illegals='^n ii uu yi',
    )


class TestInventory:
    """Tests for PhonotacticInventory."""

    def test_split_whitespace_string(self):
        assert split_graphemes(' p  t\tk ') == ('p', 't', 'k')

    def test_split_list_drops_empty(self):
        assert split_graphemes(['a', '', ' e ']) == ('a', 'e')

    def test_split_none(self):
        assert split_graphemes(None) == ()

    def test_from_dict_document_keys(self):
        inv = PhonotacticInventory.from_dict({'Onsets': 'p t', 'Vowels': ['a']})
        assert inv.onsets == ('p', 't')
        assert inv.vowels == ('a',)
        assert inv.illegals == ()

    def test_from_dict_attribute_names(self):
        inv = PhonotacticInventory.from_dict({'codas': 'n', 'vowels': 'a'})
        assert inv.codas == ('n',)

    def test_empty_illegal_string_is_no_illegal(self):
        inv = PhonotacticInventory(vowels='a', illegals='')
        assert inv.is_legal('^a^')

    def test_is_legal(self, rich_inventory):
        assert rich_inventory.is_legal('^ta^')
        assert not rich_inventory.is_legal('^na^')

    def test_validate_requires_vowels(self):
        with pytest.raises(InventoryError):
            PhonotacticInventory(onsets='p').validate()

    def test_to_dict(self, simple):
        assert simple.to_dict()['Vowels'] == ['a']


class TestTrueRandom:
    """Tests for the random source."""

    def test_seed_reproducibility(self):
        a, b = TrueRandom(seed=5), TrueRandom(seed=5)
        assert [a.coin() for _ in range(20)] == [b.coin() for _ in range(20)]

    def test_choice_empty_raises(self):
        with pytest.raises(IndexError):
            TrueRandom().choice([])

    def test_unseeded(self):
        rng = TrueRandom()
        assert 0.0 <= rng.random() < 1.0
        assert rng.randint(1, 3) in (1, 2, 3)


class TestGenerateWord:
    """Tests for generate_word()."""

    def test_vowel_start_forces_second_syllable(self, simple):
        assert generate_word(simple, ScriptedRandom([True, False, False, False])) == 'ama'

    def test_onset_start(self, simple):
        assert generate_word(simple, ScriptedRandom([False, False, False, True])) == 'tan'

    def test_longest_shape(self, simple):
        assert generate_word(simple, ScriptedRandom([True, True, True, True])) == 'amaman'

    def test_retries_after_illegal(self):
        inv = PhonotacticInventory(onsets='t', medials='m', codas='n', vowels='a', illegals='n^')
        rng = ScriptedRandom([False, False, False, True, False, False, False, False])
        assert generate_word(inv, rng) == 'ta'
        assert rng.coins == []

    def test_exhaustion_returns_empty(self):
        inv = PhonotacticInventory(onsets='t', medials='m', codas='n', vowels='a', illegals='a')
        rng = CountingRandom(seed=3)
        assert generate_word(inv, rng) == ''
        # Four flips per attempt
        assert rng.flips == 4 * MAX_ATTEMPTS

    def test_max_attempts(self):
        assert MAX_ATTEMPTS == 50

    def test_never_contains_illegals(self, rich_inventory):
        rng = TrueRandom(seed=42)
        for _ in range(300):
            word = generate_word(rich_inventory, rng)
            bounded = f'^{word}^'
            assert word == '' or not any(ill in bounded for ill in rich_inventory.illegals)

    def test_words_use_inventory_vowels(self, rich_inventory):
        rng = TrueRandom(seed=1)
        for _ in range(50):
            word = generate_word(rich_inventory, rng)
            if word:
                assert any(v in word for v in rich_inventory.vowels)

    def test_empty_vowels_raises(self):
        with pytest.raises(InventoryError):
            generate_word(PhonotacticInventory(onsets='p'), TrueRandom(seed=1))

    def test_empty_onsets_and_codas(self):
        inv = PhonotacticInventory(vowels='a', medials='m')
        rng = TrueRandom(seed=9)
        for _ in range(20):
            word = generate_word(inv, rng)
            assert set(word) <= {'a', 'm'}


class TestCompleteWord:
    """Tests for complete_word()."""

    def test_vowel_ending_extends_then_coda(self, simple):
        assert complete_word('ta', simple, ScriptedRandom([True, True])) == 'taman'

    def test_vowel_ending_closes_with_coda(self, simple):
        assert complete_word('ta', simple, ScriptedRandom([False])) == 'tan'

    def test_consonant_ending_vowel_only(self, simple):
        assert complete_word('t', simple, ScriptedRandom([True, False])) == 'ta'

    def test_consonant_ending_vowel_and_coda(self, simple):
        assert complete_word('t', simple, ScriptedRandom([True, True])) == 'tan'

    def test_consonant_ending_generic_coda(self, simple):
        assert complete_word('t', simple, ScriptedRandom([False, True])) == 'tan'

    def test_consonant_ending_generic_syllable(self, simple):
        assert complete_word('t', simple, ScriptedRandom([False, False, False])) == 'tama'

    def test_consonant_ending_generic_syllable_and_coda(self, simple):
        assert complete_word('t', simple, ScriptedRandom([False, False, True])) == 'taman'

    def test_rejection_returns_empty(self):
        inv = PhonotacticInventory(medials='m', codas='n', vowels='a', illegals='n^')
        assert complete_word('ta', inv, ScriptedRandom([False])) == ''

    def test_trial_counts_toward_illegals(self):
        inv = PhonotacticInventory(medials='m', codas='n', vowels='a', illegals='^x')
        assert complete_word('xa', inv, ScriptedRandom([False])) == ''

    def test_no_illegals_never_empty(self, simple):
        rng = TrueRandom(seed=11)
        for _ in range(200):
            assert complete_word('ta', simple, rng) != ''

    def test_result_starts_with_trial(self, rich_inventory):
        rng = TrueRandom(seed=4)
        for _ in range(100):
            word = complete_word('ka', rich_inventory, rng)
            assert word == '' or word.startswith('ka')

    def test_empty_vowels_raises(self):
        with pytest.raises(InventoryError):
            complete_word('ta', PhonotacticInventory(codas='n'))


class TestPhonotacticSampler:
    """Tests for PhonotacticSampler."""

    def test_generate_batch(self, rich_inventory):
        sampler = PhonotacticSampler(rich_inventory, rng=TrueRandom(seed=42))
        words = sampler.generate_batch(20)
        assert len(words) <= 20
        assert all(words)

    def test_seeded_batches_match(self, rich_inventory):
        a = PhonotacticSampler(rich_inventory, rng=TrueRandom(seed=8)).generate_batch(10)
        b = PhonotacticSampler(rich_inventory, rng=TrueRandom(seed=8)).generate_batch(10)
        assert a == b

    def test_complete(self, simple):
        sampler = PhonotacticSampler(simple, rng=ScriptedRandom([False]))
        assert sampler.complete('ta') == 'tan'

    def test_requires_vowels(self):
        with pytest.raises(InventoryError):
            PhonotacticSampler(PhonotacticInventory())
