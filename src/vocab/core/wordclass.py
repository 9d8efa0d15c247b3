# src/vocab/core/wordclass.py
"""
Word classes used in definitions.

Each entry pairs an abbreviation with its full form:
  "n" <-> "noun", "v" <-> "verb", ...

classify() maps one member of a pair to the *other* member, so
classify("n") == "noun" and classify("noun") == "n".
"""

UNKNOWN = "unknown"

WORD_CLASSES: tuple[tuple[str, str], ...] = (
    ("n", "noun"),
    ("pron", "pronoun"),
    ("v", "verb"),
    ("adj", "adjective"),
    ("adv", "adverb"),
    ("prep", "preposition"),
    ("conj", "conjunction"),
)


def classify(token: str) -> str:
    """Return the paired form of a word class, or "unknown"."""
    for abbreviation, full in WORD_CLASSES:
        if token == abbreviation:
            return full
        if token == full:
            return abbreviation
    return UNKNOWN