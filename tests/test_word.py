# tests/test_word.py
"""Tests for the Word entity and merging."""

import pytest

from vocab.core.word import Definition, DefinitionList, KeyMismatch, Word, merge


def make_a() -> Word:
    return Word(
        key="sun",
        definitions=[("noun", "the star")],
        collocations={"hot sun"},
        categories={"sky"},
    )


def make_b() -> Word:
    return Word(
        key="sun",
        definitions=[("verb", "to bask")],
        collocations={"sun hat"},
        examples={"sun yourself"},
    )


# === DefinitionList ===

def test_definition_list_keeps_duplicates():
    defs = DefinitionList()
    defs.append(("noun", "a"))
    defs.append(("noun", "a"))
    assert len(defs) == 2


def test_definition_list_equality_is_multiset():
    defs = DefinitionList([("noun", "a"), ("verb", "b")])
    assert defs == [("verb", "b"), ("noun", "a")]
    assert defs != [("noun", "a")]
    assert defs != [("noun", "a"), ("verb", "b"), ("verb", "b")]


def test_definition_list_sorted_is_stable_within_class():
    defs = DefinitionList([("verb", "x"), ("noun", "b"), ("noun", "a")])
    assert defs.sorted() == [
        Definition("noun", "b"),
        Definition("noun", "a"),
        Definition("verb", "x"),
    ]


# === Word ===

def test_word_converts_fields():
    word = Word(key="w", definitions=[("noun", "x")], collocations=["a", "a"])
    assert isinstance(word.definitions, DefinitionList)
    assert word.collocations == {"a"}


def test_word_key_cannot_change():
    word = Word(key="sun")
    with pytest.raises(KeyMismatch):
        word.key = "moon"
    word.key = "sun"
    assert word.key == "sun"


def test_word_key_set_once():
    word = Word()
    word.key = "sun"
    assert word.key == "sun"


def test_word_equality():
    assert make_a() == make_a()
    assert make_a() != make_b()


def test_word_copy_is_independent():
    original = make_a()
    copy = original.copy()
    copy.collocations.add("new")
    copy.definitions.append(("verb", "x"))
    assert original == make_a()


# === Merge ===

def test_merge_combines_fields():
    merged = merge(make_a(), make_b())

    assert merged.definitions == [("noun", "the star"), ("verb", "to bask")]
    assert merged.collocations == {"hot sun", "sun hat"}
    assert merged.examples == {"sun yourself"}
    assert merged.categories == {"sky"}


def test_merge_returns_target():
    target = make_a()
    assert merge(target, make_b()) is target


def test_merge_twice_doubles_definitions_only():
    once = merge(make_a(), make_b())
    twice = merge(merge(make_a(), make_b()), make_b())

    assert twice.collocations == once.collocations
    assert twice.examples == once.examples
    assert twice.categories == once.categories
    assert len(twice.definitions) == len(once.definitions) + 1
    assert twice.definitions == [
        ("noun", "the star"),
        ("verb", "to bask"),
        ("verb", "to bask"),
    ]


def test_merge_key_mismatch_leaves_target_unchanged():
    target = make_a()
    other = Word(key="moon", definitions=[("noun", "satellite")], collocations={"full moon"})

    with pytest.raises(KeyMismatch) as exc:
        merge(target, other)

    assert exc.value.expected == "sun"
    assert exc.value.found == "moon"
    assert target == make_a()


def test_key_mismatch_is_value_error():
    with pytest.raises(ValueError):
        merge(Word(key="a"), Word(key="b"))
