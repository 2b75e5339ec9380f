"""
Stored grammar commands.
"""

import sys
from pathlib import Path
from buffalo.cli import client


def add_subparser(subparsers):
    parser = subparsers.add_parser("grammar", help="Stored grammar management")
    g_sub = parser.add_subparsers(dest="grammar_command", required=True)

    # add (from file)
    add_p = g_sub.add_parser("add", help="Add grammar from .grammar file")
    add_p.add_argument("file", help="Path to .grammar file")
    add_p.add_argument("--name", help="Grammar name (default: filename)")
    add_p.set_defaults(func=grammar_add)

    # list
    list_p = g_sub.add_parser("list", help="List stored grammars")
    list_p.set_defaults(func=grammar_list)

    # show
    show_p = g_sub.add_parser("show", help="Show grammar rules")
    show_p.add_argument("grammar_id", help="Grammar ID")
    show_p.set_defaults(func=grammar_show)

    # dsl
    dsl_p = g_sub.add_parser("dsl", help="Show grammar as DSL")
    dsl_p.add_argument("grammar_id", help="Grammar ID")
    dsl_p.set_defaults(func=grammar_dsl)

    # delete
    del_p = g_sub.add_parser("delete", help="Delete a stored grammar")
    del_p.add_argument("grammar_id", help="Grammar ID")
    del_p.set_defaults(func=grammar_delete)


def grammar_add(args):
    path = Path(args.file)
    if not path.exists():
        print(f"✗ File not found: {args.file}")
        sys.exit(1)

    dsl = path.read_text()
    name = args.name or path.stem

    try:
        result = client.create_grammar(name, dsl)
        print(f"✓ Created grammar: {result['id']}")
        print(f"  name: {result['name']}")
        print(f"  rules: {result['rule_count']}")
        for warning in result.get("warnings", []):
            print(f"  ! {warning}")
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)


def grammar_list(args):
    try:
        grammars = client.list_grammars()
        if not grammars:
            print("No grammars.")
            return
        for g in grammars:
            print(f"{g['id']}  {g['name']:20} ({g['rule_count']} rules)")
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)


def grammar_show(args):
    try:
        g = client.get_grammar(args.grammar_id)
        print(f"ID: {g['id']}")
        print(f"Name: {g['name']}")
        print(f"Created: {g['created_at']}")
        print()
        print(f"Rules ({len(g['rules'])}):")
        for rule in g["rules"]:
            print(f"  {rule['lhs']} -> {' '.join(rule['rhs'])}  [{rule['weight']}]")
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)


def grammar_dsl(args):
    try:
        result = client.get_grammar_dsl(args.grammar_id)
        print(f"# {result['name']} ({args.grammar_id})")
        print()
        print(result["dsl"])
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)


def grammar_delete(args):
    try:
        client.delete_grammar(args.grammar_id)
        print(f"✓ Deleted: {args.grammar_id}")
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)
