# src/vocab/core/record_lang.py
"""
The word record format: a character scanner that reads records into Words,
and the writer that produces the canonical text.

Syntax:
  [ word
    :defi: (n)a definition. (v)another definition.
    :coll: a collocation.
    :exam: an example sentence.
    :cate: a category.
  ]

Whitespace is ignored everywhere except inside content, where line breaks
are dropped and everything else is kept. Content ends at '.'.
"""

import io
import logging
from enum import Enum
from typing import Iterator, TextIO

from vocab.core.diagnostics import Diagnostic, DiagnosticKind, Severity
from vocab.core.word import Definition, Word, merge
from vocab.core.wordclass import UNKNOWN, classify

logger = logging.getLogger(__name__)

WHITESPACE = " \t\r\n"
LINE_BREAKS = "\r\n"

DEFI = "defi"
COLL = "coll"
EXAM = "exam"
CATE = "cate"
TITLES = (DEFI, COLL, EXAM, CATE)

SET_FIELDS = {COLL: "collocations", EXAM: "examples", CATE: "categories"}


class State(str, Enum):
    SEEK_BLOCK = "seek_block"
    SEEK_WORD = "seek_word"
    READ_WORD = "read_word"
    SEEK_ITEM = "seek_item"
    BEGIN_TITLE = "begin_title"
    READ_TITLE = "read_title"
    SEEK_TITLE_END = "seek_title_end"
    SEEK_CONTENT = "seek_content"
    READ_CONTENT = "read_content"
    DONE = "done"


class ParseError(Exception):
    def __init__(self, message: str, state: State, position: int):
        self.state = state
        self.position = position
        super().__init__(f"Position {position} ({state.value}): {message}")


class UnexpectedCharacter(ParseError):
    def __init__(self, state: State, char: str, position: int):
        self.char = char
        super().__init__(f"unexpected character {char!r}", state, position)


class UnterminatedRecord(ParseError):
    def __init__(self, state: State, position: int):
        super().__init__("input ended before the record was closed", state, position)


class WordMismatch(ParseError):
    def __init__(self, expected: str, found: str, state: State, position: int):
        self.expected = expected
        self.found = found
        super().__init__(f"record is for {found!r}, expected {expected!r}", state, position)


def _is_space(ch: str) -> bool:
    return ch != "" and ch in WHITESPACE


class CharCursor:
    """One character of lookahead over a text stream.

    `position` counts the characters consumed so far, which is also the
    offset of the lookahead character.
    """

    def __init__(self, stream: TextIO | str):
        if isinstance(stream, str):
            stream = io.StringIO(stream)
        self.stream = stream
        self.position = 0
        self._lookahead: str | None = None

    def peek(self) -> str:
        """Next character without consuming it; "" at end of input."""
        if self._lookahead is None:
            self._lookahead = self.stream.read(1)
        return self._lookahead

    def advance(self) -> str:
        ch = self.peek()
        if ch:
            self.position += 1
        self._lookahead = None
        return ch

    def at_end(self) -> bool:
        return self.peek() == ""

    def skip_whitespace(self) -> None:
        while _is_space(self.peek()):
            self.advance()


def as_cursor(stream: "CharCursor | TextIO | str") -> CharCursor:
    if isinstance(stream, CharCursor):
        return stream
    return CharCursor(stream)


# === Item handling ===

def split_definition(token: str) -> tuple[Definition, DiagnosticKind | None]:
    """Split "(n)text" into (class, text).

    Missing or reversed brackets give class "unknown" and the token as-is.
    """
    start = token.find("(")
    end = token.find(")")
    if start == -1 or end == -1:
        return Definition(UNKNOWN, token), DiagnosticKind.MALFORMED_BRACKETS
    if start > end:
        return Definition(UNKNOWN, token), DiagnosticKind.REVERSED_BRACKETS
    return Definition(classify(token[start + 1:end]), token[end + 1:]), None


_WARNINGS = {
    DiagnosticKind.MALFORMED_BRACKETS: "bracket not properly closed, treated as unknown class",
    DiagnosticKind.REVERSED_BRACKETS: "wrong bracket order, treated as unknown class",
}


def warn(diagnostics: list[Diagnostic] | None, kind: DiagnosticKind, message: str,
         position: int | None = None, key: str = "") -> None:
    diagnostic = Diagnostic(Severity.WARNING, kind, message, position, key)
    logger.warning("%s", diagnostic)
    if diagnostics is not None:
        diagnostics.append(diagnostic)


def apply_item(word: Word, title: str, token: str,
               diagnostics: list[Diagnostic] | None = None,
               position: int | None = None) -> None:
    """Store one content token under its title."""
    if title == DEFI:
        definition, problem = split_definition(token)
        if problem is not None:
            warn(diagnostics, problem, _WARNINGS[problem], position, word.key)
        word.definitions.append(definition)
    elif title in SET_FIELDS:
        getattr(word, SET_FIELDS[title]).add(token)
    else:
        warn(diagnostics, DiagnosticKind.UNKNOWN_TITLE,
             f"unrecognized item {title!r}, ignored", position, word.key)


# === Scanner ===

class RecordScanner:
    """Reads one record per scan() call.

    Each state has a handler in a transition table. A handler looks at the
    lookahead character, consumes it if it belongs to the current state, and
    returns the next state. A character left unconsumed is handed to the
    next state.
    """

    def __init__(self, cursor: CharCursor, diagnostics: list[Diagnostic] | None = None):
        self.cursor = cursor
        self.diagnostics = diagnostics if diagnostics is not None else []
        self.transitions = {
            State.SEEK_BLOCK: self.seek_block,
            State.SEEK_WORD: self.seek_word,
            State.READ_WORD: self.read_word,
            State.SEEK_ITEM: self.seek_item,
            State.BEGIN_TITLE: self.begin_title,
            State.READ_TITLE: self.read_title,
            State.SEEK_TITLE_END: self.seek_title_end,
            State.SEEK_CONTENT: self.seek_content,
            State.READ_CONTENT: self.read_content,
        }
        self._reset("")

    def _reset(self, expected_key: str) -> None:
        self.word = Word()
        self.expected_key = expected_key
        self.buffer: list[str] = []
        self.title = ""

    def scan(self, into: Word | None = None) -> Word:
        """Read one record. With `into`, the record is merged into it."""
        self._reset(into.key if into is not None else "")

        state = State.SEEK_BLOCK
        while state is not State.DONE:
            ch = self.cursor.peek()
            if not ch:
                raise UnterminatedRecord(state, self.cursor.position)
            state = self.transitions[state](ch)

        if into is None:
            return self.word
        if not into.key:
            into.key = self.word.key
        return merge(into, self.word)

    def step(self, state: State, ch: str) -> State:
        """Run a single transition. Used to test states one at a time."""
        return self.transitions[state](ch)

    def unexpected(self, state: State, ch: str) -> UnexpectedCharacter:
        return UnexpectedCharacter(state, ch, self.cursor.position)

    def _take(self) -> str:
        return self.cursor.advance()

    def _token(self) -> str:
        token = "".join(self.buffer)
        self.buffer = []
        return token

    # --- states ---

    def seek_block(self, ch: str) -> State:
        if _is_space(ch):
            self._take()
            return State.SEEK_BLOCK
        if ch == "[":
            self._take()
            return State.SEEK_WORD
        raise self.unexpected(State.SEEK_BLOCK, ch)

    def seek_word(self, ch: str) -> State:
        if _is_space(ch):
            self._take()
            return State.SEEK_WORD
        if ch.isalpha():
            self.buffer = [self._take()]
            return State.READ_WORD
        raise self.unexpected(State.SEEK_WORD, ch)

    def read_word(self, ch: str) -> State:
        if ch.isalpha():
            self.buffer.append(self._take())
            return State.READ_WORD
        key = self._token()
        if self.expected_key and key != self.expected_key:
            raise WordMismatch(self.expected_key, key, State.READ_WORD, self.cursor.position)
        self.word.key = key
        return State.SEEK_ITEM

    def seek_item(self, ch: str) -> State:
        if _is_space(ch):
            self._take()
            return State.SEEK_ITEM
        if ch == ":":
            self._take()
            return State.BEGIN_TITLE
        if ch == "]":
            self._take()
            return State.DONE
        raise self.unexpected(State.SEEK_ITEM, ch)

    def begin_title(self, ch: str) -> State:
        if _is_space(ch):
            self._take()
            return State.BEGIN_TITLE
        if ch.isalpha():
            self.buffer = [self._take()]
            return State.READ_TITLE
        raise self.unexpected(State.BEGIN_TITLE, ch)

    def read_title(self, ch: str) -> State:
        if ch.isalpha():
            self.buffer.append(self._take())
            return State.READ_TITLE
        if _is_space(ch):
            self.title = self._token()
            self._take()
            return State.SEEK_TITLE_END
        if ch == ":":
            self.title = self._token()
            self._take()
            return State.SEEK_CONTENT
        raise self.unexpected(State.READ_TITLE, ch)

    def seek_title_end(self, ch: str) -> State:
        if _is_space(ch):
            self._take()
            return State.SEEK_TITLE_END
        if ch == ":":
            self._take()
            return State.SEEK_CONTENT
        raise self.unexpected(State.SEEK_TITLE_END, ch)

    def seek_content(self, ch: str) -> State:
        if _is_space(ch):
            self._take()
            return State.SEEK_CONTENT
        if ch == ".":
            warn(self.diagnostics, DiagnosticKind.BLANK_CONTENT,
                 f"blank content under {self.title!r}", self.cursor.position, self.word.key)
            self._take()
            return State.SEEK_CONTENT
        if ch == ":":
            self._take()
            return State.BEGIN_TITLE
        if ch == "]":
            self._take()
            return State.DONE
        self.buffer = [self._take()]
        return State.READ_CONTENT

    def read_content(self, ch: str) -> State:
        if ch == ".":
            apply_item(self.word, self.title, self._token(),
                       self.diagnostics, self.cursor.position)
            self._take()
            return State.SEEK_CONTENT
        if ch in (":", "]"):
            warn(self.diagnostics, DiagnosticKind.TRUNCATED_CONTENT,
                 f"content ended with {ch!r} before '.', discarded: {self._token()!r}",
                 self.cursor.position, self.word.key)
            return State.SEEK_CONTENT
        self._take()
        if ch not in LINE_BREAKS:
            self.buffer.append(ch)
        return State.READ_CONTENT


def parse_one(stream: "CharCursor | TextIO | str", into: Word | None = None,
              diagnostics: list[Diagnostic] | None = None) -> Word:
    """Parse exactly one record from stream.

    Pass a CharCursor to keep the lookahead character between calls.
    """
    scanner = RecordScanner(as_cursor(stream), diagnostics)
    return scanner.scan(into)


def iter_records(stream: "CharCursor | TextIO | str",
                 diagnostics: list[Diagnostic] | None = None) -> Iterator[Word]:
    """Yield records until only whitespace is left."""
    cursor = as_cursor(stream)
    while True:
        cursor.skip_whitespace()
        if cursor.at_end():
            return
        yield parse_one(cursor, diagnostics=diagnostics)


def skip_to_next_record(cursor: CharCursor) -> int:
    """Advance to the next '[' (left unconsumed). Returns characters skipped."""
    skipped = 0
    while not cursor.at_end() and cursor.peek() != "[":
        cursor.advance()
        skipped += 1
    return skipped


# === Writer ===

def format_word(word: Word) -> str:
    """Canonical text for one word. parse_one() reads it back unchanged."""
    lines = ["[", word.key]

    if word.definitions:
        lines.append(f":{DEFI}:")
        for d in word.sorted_definitions():
            # the reader applies classify() to the bracket text
            lines.append(f"({classify(d.word_class)}){d.text}.")

    for title, attr in SET_FIELDS.items():
        values = getattr(word, attr)
        if values:
            lines.append(f":{title}:")
            lines.extend(f"{value}." for value in sorted(values))

    lines.append("]")
    return "\n".join(lines) + "\n"


def format_store(words) -> str:
    return "\n".join(format_word(w) for w in words)


def format_display(word: Word) -> str:
    """Human-readable listing of a word."""
    lines = [word.key]

    if word.definitions:
        lines.append("[definitions]")
        for d in word.sorted_definitions():
            lines.append(f"{d.word_class}: {d.text}")
    else:
        lines.append("<no definitions>")

    sections = (
        ("collocations", word.collocations, "<no collocations>"),
        ("examples", word.examples, "<no examples>"),
        ("categories", word.categories, "<uncategorized>"),
    )
    for name, values, empty in sections:
        if values:
            lines.append(f"[{name}]")
            lines.extend(sorted(values))
        else:
            lines.append(empty)

    return "\n".join(lines)
