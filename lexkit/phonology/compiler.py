#!/usr/bin/env python3
"""
Rule Compiler
=============
Expands parameterized rules into concrete pattern -> substitution pairs.

A rule such as `CV>C_` with `C::p,t` and `V::a,i` expands to one rule per
combination of category items: `pa>p_`, `pi>p_`, `ta>t_`, `ti>t_`. The
first category referenced in the pattern is the outermost (slowest varying)
dimension of the expansion.

Category symbols in the substitution resolve in one of two ways:

- Symbol also in the pattern: the item chosen for that symbol.
- Symbol only in the substitution: the item at the same index as the item
  chosen for whatever category sits at the same character position in the
  pattern. `C>D` with `C::p,t,k` and `D::b,d,g` yields `p>b`, `t>d`, `k>g`.

Undefined symbols are literal characters. A symbol defined with no items
yields no rules at all.
"""

import logging
from itertools import product
from typing import Dict, Iterable, List, Mapping, Sequence, Union

from .categories import CategoryTable
from .rules import CompiledRule, CompiledRuleSet, RawRule

logger = logging.getLogger(__name__)


def _as_table(categories) -> CategoryTable:
    if isinstance(categories, CategoryTable):
        return categories
    return CategoryTable(categories or {})


def expand_rule(rule: RawRule, categories: CategoryTable) -> List[CompiledRule]:
    """
    Expand one rule over every combination of its pattern's categories.

    Parameters
    ----------
    rule : RawRule
        Rule as written by the author
    categories : CategoryTable
        Category definitions

    Returns
    -------
    list
        Concrete rules in expansion order
    """
    symbols = categories.symbols_in(rule.pattern)
    if not symbols:
        return [CompiledRule(rule.pattern, rule.substitution)]

    # Pattern character index -> position of its category in `symbols`
    slots: Dict[int, int] = {
        index: symbols.index(char)
        for index, char in enumerate(rule.pattern)
        if char in categories
    }

    expanded = []
    for combo in product(*(range(len(categories[s])) for s in symbols)):
        chosen = [categories[s][k] for s, k in zip(symbols, combo)]

        pattern = ''.join(
            chosen[slots[i]] if i in slots else char
            for i, char in enumerate(rule.pattern)
        )
        substitution = ''.join(
            _resolve_substitution(char, index, symbols, chosen, combo, slots, categories)
            for index, char in enumerate(rule.substitution)
        )
        expanded.append(CompiledRule(pattern, substitution))

    return expanded


def _resolve_substitution(char: str,
                          index: int,
                          symbols: Sequence[str],
                          chosen: Sequence[str],
                          combo: Sequence[int],
                          slots: Mapping[int, int],
                          categories: CategoryTable) -> str:
    if char in symbols:
        return chosen[symbols.index(char)]
    if char not in categories:
        return char
    if index not in slots:
        # No pattern category at this offset to correspond with
        return char
    item_index = combo[slots[index]]
    items = categories[char]
    if item_index >= len(items):
        return ''
    return items[item_index]


def compile_rules(rules: Iterable[Union[RawRule, tuple]],
                  categories=None) -> CompiledRuleSet:
    """
    Compile rules into a length-bucketed rule set.

    Parameters
    ----------
    rules : iterable
        RawRule objects or (pattern, substitution) tuples, in author order
    categories : CategoryTable or dict, optional
        Category definitions

    Returns
    -------
    CompiledRuleSet
        Concrete rules; a later duplicate pattern overrides an earlier one
    """
    table = _as_table(categories)
    ruleset = CompiledRuleSet()

    for rule in rules:
        if not isinstance(rule, RawRule):
            rule = RawRule(*rule)
        expanded = expand_rule(rule, table)
        logger.debug(f"Rule {rule} expanded to {len(expanded)} concrete rules")
        for compiled in expanded:
            if not compiled.pattern:
                logger.warning(f"Skipping rule with empty pattern: {rule}")
                continue
            if compiled.pattern in ruleset:
                logger.debug(f"Pattern '{compiled.pattern}' redefined by {rule}")
            ruleset.add(compiled)

    return ruleset


class RuleCompiler:
    """
    Compiles rules against a fixed category table.

    Examples
    --------
        >>> compiler = RuleCompiler({'V': ['a', 'e']})
        >>> ruleset = compiler.compile([RawRule('V', 'V:')])
        >>> ruleset.as_dict()
        {'a': 'a:', 'e': 'e:'}
    """

    def __init__(self, categories=None):
        self.categories = _as_table(categories)

    def expand(self, rule: RawRule) -> List[CompiledRule]:
        return expand_rule(rule, self.categories)

    def compile(self, rules: Iterable[Union[RawRule, tuple]]) -> CompiledRuleSet:
        ruleset = compile_rules(rules, self.categories)
        logger.debug(f"Compiled {len(ruleset)} rules across lengths {ruleset.lengths}")
        return ruleset
