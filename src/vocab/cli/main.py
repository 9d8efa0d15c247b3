"""
Vocab CLI.
"""

import argparse
import logging

from vocab.cli.commands import add, check, list_words, lookup, reformat, remove
from vocab.core.config import OnError


def main(argv=None):
    parser = argparse.ArgumentParser(prog="vocab", description="Personal vocabulary dictionary")
    parser.add_argument("-f", "--file", help="Dictionary file (default: $VOCAB_FILE or vocabulary.txt)")
    parser.add_argument(
        "--on-error",
        choices=[p.value for p in OnError],
        help="Stop at the first bad record, or skip it and continue",
    )
    parser.add_argument(
        "--log-level",
        default="ERROR",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
    )
    subparsers = parser.add_subparsers(dest="command")

    lookup.add_subparser(subparsers)
    add.add_subparser(subparsers)
    remove.add_subparser(subparsers)
    list_words.add_subparser(subparsers)
    check.add_subparser(subparsers)
    reformat.add_subparser(subparsers)

    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(message)s")

    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
