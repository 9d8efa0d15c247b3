"""
Read the dictionary and report every problem found.
"""

import sys

from vocab.cli.dictionary import config_from_args, console, open_store_or_exit, report
from vocab.core.diagnostics import errors


def add_subparser(subparsers):
    parser = subparsers.add_parser("check", help="Check the dictionary file for problems")
    parser.set_defaults(func=run)


def run(args):
    config = config_from_args(args)
    store, diagnostics = open_store_or_exit(config)

    report(diagnostics)

    failed = errors(diagnostics)
    warnings = len(diagnostics) - len(failed)
    console.print(f"{len(store)} words, {warnings} warning(s), {len(failed)} error(s)")
    if failed:
        sys.exit(1)
