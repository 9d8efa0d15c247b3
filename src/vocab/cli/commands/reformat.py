"""
Rewrite the dictionary file in canonical form.
"""

from rich.markup import escape

from vocab.cli.dictionary import (
    add_force_argument, config_from_args, console, guard_save, note_problems,
    open_store_or_exit, save_store,
)


def add_subparser(subparsers):
    parser = subparsers.add_parser("format", help="Rewrite the file in canonical form (merges duplicates)")
    add_force_argument(parser)
    parser.set_defaults(func=run)


def run(args):
    config = config_from_args(args)
    store, diagnostics = open_store_or_exit(config)
    note_problems(diagnostics)

    guard_save(diagnostics, args.force)
    count = save_store(store, config)
    console.print(f"✓ Wrote {count} words to {escape(str(config.dictionary_path))}")
