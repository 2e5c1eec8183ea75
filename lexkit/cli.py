#!/usr/bin/env python3
"""
Lexkit CLI
==========
Command-line interface for transcription and word generation.

Usage:
    lexkit transcribe "chato yoru" --lect Coastal
    lexkit rules --lect General
    lexkit generate -n 10 --seed 42
    lexkit complete ta
    lexkit retranscribe --json
    lexkit lects
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from lexkit import __version__

logger = logging.getLogger('lexkit.cli')

# =============================================================================
# Utilities
# =============================================================================

def setup_logging(level: str = None):
    """Configure root logging once for the CLI process."""
    from lexkit.config import config
    from lexkit.settings import get_setting

    level_name = (level or config().log_level or 'WARNING').upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format=get_setting('logging.format', '%(levelname)s %(name)s: %(message)s'),
    )


def open_kit(args):
    """Build a LexKit from --language, LEXKIT_LANGUAGE or the packaged default."""
    from lexkit import LexKit, TrueRandom, load_language
    from lexkit.config import config

    cfg = config()
    path = Path(args.language) if args.language else cfg.resolved_language_path()
    language = load_language(path)

    seed = getattr(args, 'seed', None)
    if seed is None:
        seed = cfg.seed
    rng = TrueRandom(seed) if seed is not None else None
    logger.debug(f"Loaded '{language.name}' from {path}")
    return LexKit(language, rng=rng)


def default_lect(args) -> str:
    from lexkit.config import config
    return args.lect or config().lect


# =============================================================================
# Commands
# =============================================================================

def cmd_transcribe(args, out):
    """Transcribe text with a lect's rules."""
    from lexkit import Transducer, compile_rule_text

    if args.rules:
        rule_text = Path(args.rules).read_text(encoding='utf-8')
        transducer = Transducer(compile_rule_text(rule_text), case_sensitive=args.case_sensitive)
        lect = Path(args.rules).stem
    else:
        kit = open_kit(args)
        lect = default_lect(args)
        transducer = kit.transducer(lect)
        if args.case_sensitive:
            transducer = Transducer(transducer.ruleset, case_sensitive=True)

    results = transducer.transcribe_many(args.text)

    if args.verbose:
        out.print_transcriptions(list(zip(args.text, results)), lect)
    else:
        for result in results:
            print(result)
    return 0


def cmd_rules(args, out):
    """Show a lect's compiled rule table."""
    kit = open_kit(args)
    lect = default_lect(args)
    ruleset = kit.rules(lect)

    if args.json:
        print(json.dumps(ruleset.as_dict(), ensure_ascii=False, indent=2))
    else:
        out.print_rules(ruleset, lect)
    return 0


def cmd_generate(args, out):
    """Generate words from a lect's phonotactics."""
    from lexkit.settings import get_setting

    kit = open_kit(args)
    lect = default_lect(args)
    count = args.count if args.count is not None else get_setting('generation.count', 10)

    words = kit.generate(count=count, lect=lect)
    if len(words) < count:
        logger.info(f"{count - len(words)} of {count} generations failed")

    if args.json:
        print(json.dumps(words, ensure_ascii=False))
    elif out.quiet:
        for word in words:
            print(word)
    else:
        out.print_words(words, title=f"Generated {len(words)} words ({lect})")
    return 0 if words or count == 0 else 1


def cmd_complete(args, out):
    """Complete a partial word, retrying rejected completions."""
    from lexkit.settings import get_setting

    kit = open_kit(args)
    lect = default_lect(args)
    tries = args.tries if args.tries is not None else get_setting('generation.complete_tries', 10)

    for attempt in range(1, tries + 1):
        word = kit.complete(args.trial, lect=lect)
        if word:
            logger.debug(f"Completed '{args.trial}' on attempt {attempt}")
            print(word)
            return 0

    out.error(f"Could not complete '{args.trial}' in {tries} tries")
    return 1


def cmd_retranscribe(args, out):
    """Re-transcribe all regular lexicon and phrasebook entries of a lect."""
    kit = open_kit(args)
    lect = default_lect(args)
    updated = kit.retranscribe(lect)

    if args.json:
        data = {
            'Lexicon': {w: e.to_dict() for w, e in updated.lexicon.items()},
            'Phrasebook': {
                c: {t: p.to_dict() for t, p in phrases.items()}
                for c, phrases in updated.phrasebook.items()
            },
        }
        print(json.dumps(data, ensure_ascii=False, indent=2))
        return 0

    out.print_changes(pronunciation_changes(kit.language, updated, lect), lect)
    return 0


def pronunciation_changes(before, after, lect: str) -> list:
    """(entry, old ipa, new ipa) for every entry whose `lect` pronunciation changed."""
    changes = []

    def compare(label, old_prons, new_prons):
        old, new = old_prons.get(lect), new_prons.get(lect)
        if old is not None and new is not None and old.ipa != new.ipa:
            changes.append((label, old.ipa, new.ipa))

    for word, entry in after.lexicon.items():
        compare(word, before.lexicon[word].pronunciations, entry.pronunciations)
    for category, phrases in after.phrasebook.items():
        for text, phrase in phrases.items():
            original = before.phrasebook[category][text]
            compare(text, original.pronunciations, phrase.pronunciations)
            for variant_text, variant in phrase.variants.items():
                compare(f"{text} / {variant_text}",
                        original.variants[variant_text].pronunciations,
                        variant.pronunciations)
    return changes


def cmd_lects(args, out):
    """List lects and their rule and inventory sizes."""
    kit = open_kit(args)
    rows = []
    for lect in kit.lects:
        inventory = kit.inventory(lect)
        rows.append([lect, len(kit.rules(lect)), len(inventory.vowels), len(inventory.illegals)])

    if out.quiet:
        for row in rows:
            print(row[0])
    else:
        out.header(f"{kit.language.name or 'Language'}: {len(rows)} lects")
        out.table(['Lect', 'Rules', 'Vowels', 'Illegals'], rows)
    return 0


# =============================================================================
# Main
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='lexkit',
        description='Lexkit - Conlang Transcription & Word Generation',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s transcribe "chato yoru"
  %(prog)s transcribe shikah --lect Coastal -v
  %(prog)s transcribe word --rules rules.txt
  %(prog)s rules --lect General
  %(prog)s generate -n 20 --seed 42
  %(prog)s complete ta --tries 5
  %(prog)s retranscribe --lect General --json
  %(prog)s lects --language tokiri.yaml
"""
    )

    parser.add_argument('--version', '-V', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--quiet', '-q', action='store_true', help='Suppress non-essential output')
    parser.add_argument('--language', '-L', help='Language document (YAML or JSON)')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging level (default: from config)')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # --- transcribe ---
    p = subparsers.add_parser('transcribe', aliases=['tr', 't'], help='Transcribe text')
    p.add_argument('text', nargs='+', help='Words or phrases to transcribe')
    p.add_argument('--lect', '-l', help='Lect whose rules to apply')
    p.add_argument('--rules', '-r', help='Rule text file to use instead of the language document')
    p.add_argument('--case-sensitive', '-c', action='store_true',
                   help='Do not lowercase input before applying rules')
    p.add_argument('--verbose', '-v', action='store_true', help='Show a table of inputs and results')

    # --- rules ---
    p = subparsers.add_parser('rules', help='Show compiled rule table')
    p.add_argument('--lect', '-l', help='Lect to compile')
    p.add_argument('--json', '-j', action='store_true', help='Output as JSON')

    # --- generate ---
    p = subparsers.add_parser('generate', aliases=['gen', 'g'], help='Generate words')
    p.add_argument('-n', '--count', type=int, help='Number of words (default: from config)')
    p.add_argument('--lect', '-l', help='Lect whose phonotactics to use')
    p.add_argument('--seed', type=int, help='Seed for reproducible output')
    p.add_argument('--json', '-j', action='store_true', help='Output as JSON')

    # --- complete ---
    p = subparsers.add_parser('complete', aliases=['comp', 'c'], help='Complete a partial word')
    p.add_argument('trial', help='Start of the word')
    p.add_argument('--lect', '-l', help='Lect whose phonotactics to use')
    p.add_argument('--seed', type=int, help='Seed for reproducible output')
    p.add_argument('--tries', type=int, help='Completion attempts before giving up')

    # --- retranscribe ---
    p = subparsers.add_parser('retranscribe', aliases=['re'], help='Re-transcribe lexicon and phrasebook')
    p.add_argument('--lect', '-l', help='Lect to re-transcribe')
    p.add_argument('--json', '-j', action='store_true', help='Output updated entries as JSON')

    # --- lects ---
    subparsers.add_parser('lects', help='List lects')

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    # Handle aliases
    cmd_map = {
        'tr': 'transcribe', 't': 'transcribe',
        'gen': 'generate', 'g': 'generate',
        'comp': 'complete', 'c': 'complete',
        're': 'retranscribe',
    }
    command = cmd_map.get(args.command, args.command)

    from lexkit.ui import ResultsUI
    out = ResultsUI(quiet=getattr(args, 'quiet', False))

    # Dispatch
    commands = {
        'transcribe': cmd_transcribe,
        'rules': cmd_rules,
        'generate': cmd_generate,
        'complete': cmd_complete,
        'retranscribe': cmd_retranscribe,
        'lects': cmd_lects,
    }

    handler = commands.get(command)
    if handler:
        try:
            setup_logging(args.log_level)
            return handler(args, out)
        except KeyboardInterrupt:
            out.print("\nCancelled.")
            return 130
        except Exception as e:
            out.error(str(e))
            if args.log_level == 'DEBUG':
                import traceback
                traceback.print_exc()
            return 1

    parser.print_help()
    return 0


if __name__ == '__main__':
    sys.exit(main())
