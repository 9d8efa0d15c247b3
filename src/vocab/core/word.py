# src/vocab/core/word.py
"""
The Word entity and the merge rule used to combine records for one key.

A word has two kinds of content:
  definitions                         - duplicates kept, order kept
  collocations, examples, categories  - sets, duplicates dropped

Merging the same record twice therefore doubles its definitions while
leaving the three sets unchanged.
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, NamedTuple


class KeyMismatch(ValueError):
    def __init__(self, expected: str, found: str):
        self.expected = expected
        self.found = found
        super().__init__(f"Key mismatch: expected {expected!r}, got {found!r}")


class Definition(NamedTuple):
    word_class: str  # "noun", "verb", ... or "unknown"
    text: str


class DefinitionList:
    """Ordered collection of definitions that keeps duplicates.

    Equality compares the definitions as a multiset: the same pairs with the
    same counts, regardless of order.
    """

    def __init__(self, items: Iterable[tuple[str, str]] = ()):
        self._items: list[Definition] = []
        self.extend(items)

    def append(self, definition: tuple[str, str]) -> None:
        self._items.append(Definition(*definition))

    def extend(self, items: Iterable[tuple[str, str]]) -> None:
        for item in items:
            self.append(item)

    def sorted(self) -> list[Definition]:
        """Sorted by class; definitions of one class keep insertion order."""
        return sorted(self._items, key=lambda d: d.word_class)

    def __iter__(self):
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Definition:
        return self._items[index]

    def __eq__(self, other) -> bool:
        if not isinstance(other, (DefinitionList, list, tuple)):
            return NotImplemented
        return Counter(self._items) == Counter(Definition(*d) for d in other)

    __hash__ = None

    def __repr__(self) -> str:
        return f"DefinitionList({self._items!r})"


_SET_FIELDS = ("collocations", "examples", "categories")


@dataclass(eq=False)
class Word:
    """One dictionary entry. The key cannot change once it is set."""
    key: str = ""
    definitions: DefinitionList = field(default_factory=DefinitionList)
    collocations: set[str] = field(default_factory=set)
    examples: set[str] = field(default_factory=set)
    categories: set[str] = field(default_factory=set)

    def __setattr__(self, name, value):
        if name == "key":
            current = self.__dict__.get("key", "")
            if current and value != current:
                raise KeyMismatch(current, value)
        elif name == "definitions" and not isinstance(value, DefinitionList):
            value = DefinitionList(value)
        elif name in _SET_FIELDS and not isinstance(value, set):
            value = set(value)
        super().__setattr__(name, value)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Word):
            return NotImplemented
        return (
            self.key == other.key
            and self.definitions == other.definitions
            and self.collocations == other.collocations
            and self.examples == other.examples
            and self.categories == other.categories
        )

    __hash__ = None

    def sorted_definitions(self) -> list[Definition]:
        return self.definitions.sorted()

    def copy(self) -> "Word":
        return Word(
            key=self.key,
            definitions=DefinitionList(self.definitions),
            collocations=set(self.collocations),
            examples=set(self.examples),
            categories=set(self.categories),
        )


def merge(target: Word, incoming: Word) -> Word:
    """Merge incoming into target and return target.

    Definitions are concatenated, the three sets are unioned. A key mismatch
    raises KeyMismatch before target is touched.
    """
    if target.key != incoming.key:
        raise KeyMismatch(target.key, incoming.key)

    definitions = DefinitionList(target.definitions)
    definitions.extend(incoming.definitions)
    collocations = target.collocations | incoming.collocations
    examples = target.examples | incoming.examples
    categories = target.categories | incoming.categories

    target.definitions = definitions
    target.collocations = collocations
    target.examples = examples
    target.categories = categories
    return target
