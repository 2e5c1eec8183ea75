#!/usr/bin/env python3
"""
Rule Text Parser
================
Reads the author-facing rule format:

    C::p,t,k
    V::a,e,i,o,u
    ph>f
    x>ks
    CV>C_

A line containing `::` defines a category; otherwise a line containing `>`
is a rule. All whitespace is ignored and other lines are skipped.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from .categories import WILDCARD, CategoryTable
from .rules import RawRule

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r'\s+')


@dataclass
class RuleText:
    """Parsed rule text."""
    categories: CategoryTable = field(default_factory=CategoryTable)
    rules: List[RawRule] = field(default_factory=list)


def parse_category(line: str) -> Tuple[str, List[str]]:
    """Split `symbol::a,b,c` into its symbol and non-empty items."""
    symbol, items = line.split('::', 1)
    return symbol, [item for item in items.split(',') if item]


def parse_rule(line: str) -> RawRule:
    """Split `pattern>substitution`; anything after a second `>` is ignored."""
    parts = line.split('>')
    return RawRule(parts[0], parts[1])


def parse_rule_text(text: str) -> RuleText:
    """
    Parse newline-delimited rule text.

    Parameters
    ----------
    text : str
        Author rule text

    Returns
    -------
    RuleText
        Categories and rules in the order written. A category defined twice
        keeps its last definition.
    """
    categories: Dict[str, List[str]] = {}
    rules = []

    for number, raw in enumerate((text or '').splitlines(), 1):
        line = _WHITESPACE.sub('', raw)
        if not line:
            continue
        if '::' in line:
            symbol, items = parse_category(line)
            if len(symbol) != 1:
                logger.warning(f"Line {number}: category symbol must be one character, got '{symbol}'")
                continue
            if symbol == WILDCARD:
                logger.warning(f"Line {number}: '{WILDCARD}' is reserved and cannot name a category")
                continue
            categories[symbol] = items
        elif '>' in line:
            rules.append(parse_rule(line))

    return RuleText(categories=CategoryTable(categories), rules=rules)
