"""
Stored lexicon commands.
"""

import sys
from pathlib import Path
from rich import print_json
from buffalo.cli import client


def add_subparser(subparsers):
    parser = subparsers.add_parser("lexicon", help="Stored lexicon management")
    lex_sub = parser.add_subparsers(dest="lexicon_command", required=True)

    add_p = lex_sub.add_parser("add", help="Add lexicon from .lex file")
    add_p.add_argument("file", help="Path to .lex file")
    add_p.add_argument("--name", help="Lexicon name (default: filename)")
    add_p.set_defaults(func=lexicon_add)

    list_p = lex_sub.add_parser("list", help="List stored lexicons")
    list_p.set_defaults(func=lexicon_list)

    show_p = lex_sub.add_parser("show", help="Show lexicon entries as JSON")
    show_p.add_argument("lexicon_id", help="Lexicon ID")
    show_p.set_defaults(func=lexicon_show)

    dsl_p = lex_sub.add_parser("dsl", help="Show lexicon as DSL")
    dsl_p.add_argument("lexicon_id", help="Lexicon ID")
    dsl_p.set_defaults(func=lexicon_dsl)

    del_p = lex_sub.add_parser("delete", help="Delete a stored lexicon")
    del_p.add_argument("lexicon_id", help="Lexicon ID")
    del_p.set_defaults(func=lexicon_delete)


def lexicon_add(args):
    path = Path(args.file)
    if not path.exists():
        print(f"✗ File not found: {args.file}")
        sys.exit(1)

    try:
        result = client.create_lexicon(args.name or path.stem, path.read_text())
        print(f"✓ Created lexicon: {result['id']}")
        print(f"  name: {result['name']}")
        print(f"  entries: {result['entry_count']}")
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)


def lexicon_list(args):
    try:
        lexicons = client.list_lexicons()
        if not lexicons:
            print("No lexicons.")
            return
        for lx in lexicons:
            print(f"{lx['id']}  {lx['name']:20} ({lx['entry_count']} entries)")
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)


def lexicon_show(args):
    try:
        print_json(data=client.get_lexicon(args.lexicon_id))
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)


def lexicon_dsl(args):
    try:
        result = client.get_lexicon_dsl(args.lexicon_id)
        print(f"# {result['name']} ({args.lexicon_id})")
        print()
        print(result["dsl"])
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)


def lexicon_delete(args):
    try:
        client.delete_lexicon(args.lexicon_id)
        print(f"✓ Deleted: {args.lexicon_id}")
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)
