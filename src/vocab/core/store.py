# src/vocab/core/store.py
"""
The dictionary: Words kept by key, keys kept sorted for prefix lookup.
"""

import logging
from bisect import bisect_left, insort
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, TextIO

from vocab.core.config import OnError
from vocab.core.diagnostics import Diagnostic, DiagnosticKind, Severity
from vocab.core.record_lang import (
    TITLES, WHITESPACE, CharCursor, ParseError,
    apply_item, as_cursor, format_store, iter_records, skip_to_next_record,
)
from vocab.core.word import Word, merge

logger = logging.getLogger(__name__)

# characters that would end or split a content token
_RESERVED = ".:]\r\n"


def is_valid_key(key: str) -> bool:
    return bool(key) and key.isalpha()


class LookupKind(str, Enum):
    EXACT = "exact"
    INFERRED = "inferred"
    AMBIGUOUS = "ambiguous"
    NOT_FOUND = "not_found"


@dataclass
class LookupResult:
    kind: LookupKind
    word: Word | None = None
    candidates: list[str] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return self.word is not None

    @property
    def inferred(self) -> bool:
        return self.kind is LookupKind.INFERRED


@dataclass
class Edit:
    """One piece of content to add to a word, written as in a record.

    Edit("defi", "(n)a small star") adds a noun definition.
    """
    title: str
    content: str

    @classmethod
    def definition(cls, content: str) -> "Edit":
        return cls("defi", content)

    @classmethod
    def collocation(cls, content: str) -> "Edit":
        return cls("coll", content)

    @classmethod
    def example(cls, content: str) -> "Edit":
        return cls("exam", content)

    @classmethod
    def category(cls, content: str) -> "Edit":
        return cls("cate", content)

    def to_fragment(self, key: str) -> Word:
        if self.title not in TITLES:
            raise ValueError(f"Unknown item title: {self.title!r}. Available: {list(TITLES)}")

        # leading whitespace never reaches a content token
        content = self.content.lstrip(WHITESPACE)
        if not content:
            raise ValueError("Content is empty")
        bad = sorted({c for c in content if c in _RESERVED})
        if bad:
            raise ValueError(f"Content may not contain {bad!r}: {content!r}")

        fragment = Word(key=key)
        apply_item(fragment, self.title, content)
        return fragment


class Store:
    def __init__(self):
        self._words: dict[str, Word] = {}
        self._keys: list[str] = []  # sorted

    @classmethod
    def load(cls, stream: CharCursor | TextIO | str,
             on_error: OnError | str = OnError.RESYNC) -> tuple["Store", list[Diagnostic]]:
        """Build a store from every record in stream.

        Records for the same key are merged in the order they appear.
        """
        on_error = OnError(on_error)
        store = cls()
        diagnostics: list[Diagnostic] = []
        cursor = as_cursor(stream)

        while True:
            try:
                for word in iter_records(cursor, diagnostics):
                    store.add(word)
                break
            except ParseError as e:
                if on_error is OnError.ABORT:
                    raise
                skipped = skip_to_next_record(cursor)
                diagnostic = Diagnostic(
                    Severity.ERROR,
                    DiagnosticKind.SKIPPED_RECORD,
                    f"{e}; skipped {skipped} characters",
                    e.position,
                )
                logger.error("%s", diagnostic)
                diagnostics.append(diagnostic)

        logger.info("Loaded %d words (%d diagnostics)", len(store), len(diagnostics))
        return store, diagnostics

    def save(self, stream: TextIO) -> int:
        """Write every word in key order. Returns the number written."""
        stream.write(format_store(self))
        return len(self)

    def add(self, word: Word) -> Word:
        """Add a word, merging it into an existing entry with the same key."""
        if not is_valid_key(word.key):
            raise ValueError(f"Invalid word: {word.key!r} (letters only)")

        existing = self._words.get(word.key)
        if existing is None:
            entry = word.copy()
            self._words[word.key] = entry
            insort(self._keys, word.key)
            return entry
        return merge(existing, word)

    def upsert(self, key: str, edit: Edit) -> Word:
        """Apply one edit to key, creating the word if needed."""
        if not is_valid_key(key):
            raise ValueError(f"Invalid word: {key!r} (letters only)")
        return self.add(edit.to_fragment(key))

    def remove(self, key: str) -> bool:
        if key not in self._words:
            return False
        del self._words[key]
        self._keys.pop(bisect_left(self._keys, key))
        return True

    def get(self, key: str) -> Word | None:
        return self._words.get(key)

    def prefixed(self, prefix: str) -> list[str]:
        """Keys that start with prefix, in sorted order."""
        matches = []
        for key in self._keys[bisect_left(self._keys, prefix):]:
            if not key.startswith(prefix):
                break
            matches.append(key)
        return matches

    def lookup(self, query: str) -> LookupResult:
        if not query:
            return LookupResult(LookupKind.NOT_FOUND)

        word = self._words.get(query)
        if word is not None:
            return LookupResult(LookupKind.EXACT, word, [query])

        candidates = self.prefixed(query)
        if len(candidates) == 1:
            return LookupResult(LookupKind.INFERRED, self._words[candidates[0]], candidates)
        if not candidates:
            return LookupResult(LookupKind.NOT_FOUND)
        return LookupResult(LookupKind.AMBIGUOUS, candidates=candidates)

    def keys(self) -> list[str]:
        return list(self._keys)

    def __iter__(self) -> Iterator[Word]:
        for key in self._keys:
            yield self._words[key]

    def __len__(self) -> int:
        return len(self._keys)

    def __contains__(self, key: str) -> bool:
        return key in self._words
