"""
Buffalo CLI.
"""

import argparse
from buffalo.cli.commands import check, grammar, lexicon, parse


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="buffalo", description="Buffalo chart parser CLI")
    subparsers = parser.add_subparsers(dest="command")

    parse.add_subparser(subparsers)
    check.add_subparser(subparsers)
    grammar.add_subparser(subparsers)
    lexicon.add_subparser(subparsers)

    return parser


def main(argv: list[str] | None = None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
