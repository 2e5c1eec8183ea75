#!/usr/bin/env python3
"""
Terminal Output
===============
Rich-based rendering of rule tables, generated words and transcriptions for
the CLI.

Usage:
    from lexkit.ui import ResultsUI

    ui = ResultsUI()
    ui.print_rules(ruleset, lect="General")
    ui.print_words(["tako", "imen"], title="Generated")
"""

from typing import Iterable, List, Optional, Tuple

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from .phonology import CompiledRuleSet


class ResultsUI:
    """Renders CLI results; prints nothing in quiet mode."""

    def __init__(self, quiet: bool = False, console: Optional[Console] = None):
        self.quiet = quiet
        self.console = console or Console()
        self.error_console = Console(stderr=True)

    def print(self, *args, **kwargs):
        if not self.quiet:
            self.console.print(*args, **kwargs)

    def error(self, msg: str):
        self.error_console.print(f"Error: {msg}", style="red", markup=False, highlight=False)

    def header(self, title: str):
        self.print(title, style="bold")
        self.print("=" * 50, style="bold")

    def table(self, headers: List[str], rows: Iterable[Iterable], title: str = None):
        """Print a simple table."""
        table = Table(title=title, box=box.SIMPLE, show_header=True)
        for i, name in enumerate(headers):
            table.add_column(name, style="bold" if i == 1 else None, no_wrap=True)
        for row in rows:
            table.add_row(*(Text(str(c)) for c in row))
        self.print(table)

    def print_rules(self, ruleset: CompiledRuleSet, lect: str):
        """Print a compiled rule table, longest patterns first."""
        self.header(f"Rules for {lect}: {len(ruleset)} compiled")
        rows = [
            (length, pattern, substitution)
            for length in ruleset.lengths
            for pattern, substitution in ruleset.bucket(length).items()
        ]
        self.table(['Len', 'Pattern', 'Substitution'], rows)

    def print_words(self, words: List[str], title: str):
        self.header(title)
        if not words:
            self.print("No words generated.", style="yellow")
            return
        self.table(['#', 'Word'], enumerate(words, 1))

    def print_transcriptions(self, pairs: List[Tuple[str, str]], lect: str):
        self.table(['Text', lect], pairs)

    def print_changes(self, changes: List[Tuple[str, str, str]], lect: str):
        """Print (entry, old, new) pronunciation changes."""
        self.header(f"Re-transcribed {lect}: {len(changes)} changed")
        if changes:
            self.table(['Entry', 'Old', 'New'], changes)
