#!/usr/bin/env python3
"""
Phonology
=========
Rule-based orthography -> transcription engine.

Usage:
    from lexkit.phonology import parse_rule_text, compile_rules, Transducer

    text = parse_rule_text("V::a,e\\nch>tʃ\\nV>V:")
    ruleset = compile_rules(text.rules, text.categories)
    Transducer(ruleset).transcribe("chae")
"""

from .categories import WILDCARD, CategoryTable
from .rules import BOUNDARY, NULL, RawRule, CompiledRule, CompiledRuleSet
from .compiler import RuleCompiler, compile_rules, expand_rule
from .parser import RuleText, parse_rule_text
from .transducer import Transducer, normalize, transcribe


def compile_rule_text(text: str) -> CompiledRuleSet:
    """Parse and compile author rule text in one step."""
    parsed = parse_rule_text(text)
    return compile_rules(parsed.rules, parsed.categories)


__all__ = [
    # Symbols
    'WILDCARD',
    'BOUNDARY',
    'NULL',
    # Data
    'CategoryTable',
    'RawRule',
    'CompiledRule',
    'CompiledRuleSet',
    'RuleText',
    # Compilation
    'RuleCompiler',
    'compile_rules',
    'compile_rule_text',
    'expand_rule',
    'parse_rule_text',
    # Transduction
    'Transducer',
    'normalize',
    'transcribe',
]
