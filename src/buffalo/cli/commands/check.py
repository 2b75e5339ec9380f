"""
Validate a .grammar or .lex file locally.
"""

import sys
from pathlib import Path

from buffalo.core.grammar_lang import GrammarParseError, parse_grammar, validate_grammar
from buffalo.core.lexicon_lang import LexiconParseError, parse_lexicon


def add_subparser(subparsers):
    parser = subparsers.add_parser("check", help="Validate a .grammar or .lex file")
    parser.add_argument("file", help="Path to .grammar or .lex file")
    parser.set_defaults(func=run)


def run(args):
    path = Path(args.file)
    if not path.exists():
        print(f"✗ File not found: {args.file}")
        sys.exit(1)

    text = path.read_text()

    try:
        if path.suffix == ".lex":
            lexicon = parse_lexicon(text)
            print(f"✓ {args.file} is valid")
            print(f"  {len(lexicon.words())} words, {lexicon.size} entries")
            return

        grammar = parse_grammar(text)
    except (GrammarParseError, LexiconParseError) as e:
        print(f"Parse error: {e}")
        sys.exit(1)

    warnings = validate_grammar(grammar)
    if warnings:
        print(f"❌ Validation failed for {args.file}:")
        for warning in warnings:
            print(f"  - {warning}")
        sys.exit(1)

    print(f"✓ {args.file} is valid")
    print(f"  {len(grammar)} rules, {len(grammar.nonterminals())} non-terminals")
