"""
Remove a word.
"""

from rich.markup import escape

from vocab.cli.dictionary import (
    add_force_argument, config_from_args, console, guard_save, note_problems,
    open_store_or_exit, save_store,
)


def add_subparser(subparsers):
    parser = subparsers.add_parser("remove", help="Remove a word")
    parser.add_argument("word", help="Exact word to remove")
    add_force_argument(parser)
    parser.set_defaults(func=run)


def run(args):
    config = config_from_args(args)
    store, diagnostics = open_store_or_exit(config)
    note_problems(diagnostics)

    if not store.remove(args.word):
        console.print(f"No entry for '{escape(args.word)}'")
        return

    guard_save(diagnostics, args.force)
    save_store(store, config)
    console.print(f"✓ Removed {escape(args.word)}")
