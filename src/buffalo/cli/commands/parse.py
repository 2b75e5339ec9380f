"""
Parse a sentence, locally or through the API.

    buffalo parse the dog chased the cat
    buffalo parse Buffalo buffalo Buffalo buffalo buffalo buffalo Buffalo buffalo --lexicon buffalo
    buffalo parse the dog ran --lexicon-file words.lex --json
"""

import sys
from pathlib import Path

from rich import print_json

from buffalo.cli import client
from buffalo.core.earley import EarleyParser
from buffalo.core.english import BUILTIN_GRAMMARS, BUILTIN_LEXICONS
from buffalo.core.forest import MAX_TREES
from buffalo.core.grammar_lang import parse_grammar
from buffalo.core.lexicon_lang import parse_lexicon
from buffalo.core.tokenize import words


def add_subparser(subparsers):
    parser = subparsers.add_parser("parse", help="Parse a sentence")
    parser.add_argument("words", nargs="+", help="Sentence words")
    parser.add_argument("--grammar", default="english", help="Grammar name (default: english)")
    parser.add_argument("--lexicon", default="english", help="Lexicon name (default: english)")
    parser.add_argument("--grammar-file", help="Path to a .grammar file")
    parser.add_argument("--lexicon-file", help="Path to a .lex file")
    parser.add_argument("--max-trees", type=int, default=MAX_TREES)
    parser.add_argument("--remote", action="store_true", help="Parse through the API server")
    parser.add_argument("--json", action="store_true", help="Print the full result as JSON")
    parser.set_defaults(func=run)


def load_local(args):
    if args.grammar_file:
        grammar = parse_grammar(Path(args.grammar_file).read_text())
    elif args.grammar in BUILTIN_GRAMMARS:
        grammar = BUILTIN_GRAMMARS[args.grammar]()
    else:
        raise ValueError(f"Unknown grammar: {args.grammar} (use --remote for stored grammars)")

    if args.lexicon_file:
        lexicon = parse_lexicon(Path(args.lexicon_file).read_text())
    elif args.lexicon in BUILTIN_LEXICONS:
        lexicon = BUILTIN_LEXICONS[args.lexicon]()
    else:
        raise ValueError(f"Unknown lexicon: {args.lexicon} (use --remote for stored lexicons)")

    return grammar, lexicon


def parse_tokens(args, tokens: list[str]) -> dict:
    if args.remote:
        return client.parse(tokens, args.grammar, args.lexicon, args.max_trees)

    grammar, lexicon = load_local(args)
    parser = EarleyParser(grammar, lexicon, max_trees=args.max_trees)
    return parser.parse(tokens).to_dict()


def run(args):
    tokens = words(" ".join(args.words))

    try:
        result = parse_tokens(args, tokens)
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)

    if args.json:
        print_json(data=result)
    else:
        print_result(result)

    if not result["trees"]:
        sys.exit(1)


def print_result(result: dict):
    print(f"Input: {' '.join(result['input'])}")

    if result["errors"]:
        for err in result["errors"]:
            print(f"✗ {err}")
        return

    print(f"✓ {result['count']} parse(s)\n")
    for i, tree in enumerate(result["trees"], 1):
        print(f"{i:3d}. {tree['bracketed']}")
