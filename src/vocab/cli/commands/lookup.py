"""
Look up a word, completing unambiguous prefixes.
"""

from rich.markup import escape

from vocab.cli.dictionary import config_from_args, console, note_problems, open_store_or_exit
from vocab.core.record_lang import format_display
from vocab.core.store import LookupKind


def add_subparser(subparsers):
    parser = subparsers.add_parser("lookup", help="Show a word (a unique prefix is enough)")
    parser.add_argument("word", help="Word or word prefix")
    parser.set_defaults(func=run)


def run(args):
    config = config_from_args(args)
    store, diagnostics = open_store_or_exit(config)
    note_problems(diagnostics)

    result = store.lookup(args.word)

    if result.found:
        if result.inferred:
            console.print(f"[dim]→ {escape(result.word.key)} (inferred from '{escape(args.word)}')[/dim]")
        console.print(escape(format_display(result.word)))
        return

    if result.kind is LookupKind.AMBIGUOUS:
        console.print(f"{len(result.candidates)} words start with '{escape(args.word)}':")
        for key in result.candidates:
            console.print(f"  {escape(key)}")
        return

    console.print(f"Not found: {escape(args.word)}")
