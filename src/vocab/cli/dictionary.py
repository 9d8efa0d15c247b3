# src/vocab/cli/dictionary.py
"""
Opening and saving the dictionary file for CLI commands.
"""

import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from vocab.core.config import VocabConfig
from vocab.core.diagnostics import Diagnostic, Severity, errors
from vocab.core.record_lang import ParseError
from vocab.core.store import Store

console = Console()
err_console = Console(stderr=True)


def config_from_args(args) -> VocabConfig:
    """Environment settings, overridden by --file / --on-error."""
    values = VocabConfig.from_env().model_dump()
    if getattr(args, "file", None):
        values["dictionary_path"] = Path(args.file)
    if getattr(args, "on_error", None):
        values["on_error"] = args.on_error
    return VocabConfig(**values)


def open_store(config: VocabConfig) -> tuple[Store, list[Diagnostic]]:
    path = config.dictionary_path
    if not path.exists():
        return Store(), []
    with path.open(encoding=config.encoding) as f:
        return Store.load(f, config.on_error)


def open_store_or_exit(config: VocabConfig) -> tuple[Store, list[Diagnostic]]:
    try:
        return open_store(config)
    except ParseError as e:
        console.print(f"[red]✗ Cannot read {escape(str(config.dictionary_path))}: {escape(str(e))}[/red]")
        sys.exit(1)


def save_store(store: Store, config: VocabConfig) -> int:
    path = config.dictionary_path
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding=config.encoding) as f:
        return store.save(f)


def report(diagnostics: list[Diagnostic]) -> None:
    for d in diagnostics:
        style = "red" if d.severity is Severity.ERROR else "yellow"
        err_console.print(escape(str(d)), style=style)


def note_problems(diagnostics: list[Diagnostic]) -> None:
    if diagnostics:
        console.print(f"[dim]{len(diagnostics)} problem(s) while reading; run `vocab check` for details[/dim]")


def add_force_argument(parser) -> None:
    parser.add_argument("--force", action="store_true",
                        help="Save even if some records could not be read (they are dropped)")


def guard_save(diagnostics: list[Diagnostic], force: bool) -> None:
    """Exit instead of saving over records that were skipped while reading."""
    skipped = errors(diagnostics)
    if not skipped or force:
        return
    report(skipped)
    console.print(f"[red]✗ {len(skipped)} record(s) could not be read and would be lost on save. "
                  f"Fix them (see `vocab check`) or pass --force[/red]")
    sys.exit(1)
