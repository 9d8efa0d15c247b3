"""
List words, optionally only those with a given prefix.
"""

from rich.markup import escape

from vocab.cli.dictionary import config_from_args, console, note_problems, open_store_or_exit


def add_subparser(subparsers):
    parser = subparsers.add_parser("list", help="List words")
    parser.add_argument("prefix", nargs="?", default="", help="Only words starting with this")
    parser.set_defaults(func=run)


def run(args):
    config = config_from_args(args)
    store, diagnostics = open_store_or_exit(config)
    note_problems(diagnostics)

    keys = store.prefixed(args.prefix)
    if not keys:
        console.print("No words.")
        return

    for key in keys:
        word = store.get(key)
        console.print(f"{escape(key):20} ({len(word.definitions)} defi, {len(word.collocations)} coll, "
                      f"{len(word.examples)} exam, {len(word.categories)} cate)")
