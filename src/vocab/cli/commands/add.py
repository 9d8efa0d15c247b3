"""
Add definitions, collocations, examples or categories to a word.
"""

import sys

from rich.markup import escape

from vocab.cli.dictionary import (
    add_force_argument, config_from_args, console, guard_save, note_problems,
    open_store_or_exit, save_store,
)
from vocab.core.store import Edit, is_valid_key


def add_subparser(subparsers):
    parser = subparsers.add_parser("add", help="Add content to a word (creates it if needed)")
    parser.add_argument("word", help="The word")
    parser.add_argument("--defi", action="append", default=[], help="Definition, e.g. '(n)a small star'")
    parser.add_argument("--coll", action="append", default=[], help="Collocation")
    parser.add_argument("--exam", action="append", default=[], help="Example sentence")
    parser.add_argument("--cate", action="append", default=[], help="Category")
    add_force_argument(parser)
    parser.set_defaults(func=run)


def run(args):
    edits = (
        [Edit.definition(t) for t in args.defi]
        + [Edit.collocation(t) for t in args.coll]
        + [Edit.example(t) for t in args.exam]
        + [Edit.category(t) for t in args.cate]
    )
    if not edits:
        console.print("[red]✗ Nothing to add (use --defi, --coll, --exam or --cate)[/red]")
        sys.exit(1)

    if not is_valid_key(args.word):
        console.print(f"[red]✗ Invalid word: {escape(args.word)} (letters only)[/red]")
        sys.exit(1)

    try:
        fragments = [edit.to_fragment(args.word) for edit in edits]
    except ValueError as e:
        console.print(f"[red]✗ Error: {escape(str(e))}[/red]")
        sys.exit(1)

    config = config_from_args(args)
    store, diagnostics = open_store_or_exit(config)
    note_problems(diagnostics)

    guard_save(diagnostics, args.force)
    for fragment in fragments:
        store.add(fragment)
    save_store(store, config)
    console.print(f"✓ Added {len(edits)} item(s) to {escape(args.word)}")
