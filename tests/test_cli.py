# tests/test_cli.py
"""Tests for the vocab command line."""

import pytest

from vocab.cli.main import main


@pytest.fixture
def dictionary(tmp_path, monkeypatch):
    monkeypatch.delenv("VOCAB_FILE", raising=False)
    monkeypatch.delenv("VOCAB_ON_ERROR", raising=False)
    path = tmp_path / "words.txt"
    path.write_text(
        "[ sun :defi:(n)the star. ]\n"
        "[ sunny :defi:(adj)full of sun. ]\n"
        "[ sunset :cate:sky. ]\n"
    )
    return path


def vocab(path, *args):
    main(["--file", str(path), *args])


def test_add_creates_file(tmp_path, capsys):
    path = tmp_path / "new.txt"
    vocab(path, "add", "star", "--defi", "(n)a ball of gas", "--coll", "shooting star")

    assert path.read_text() == (
        "[\n"
        "star\n"
        ":defi:\n"
        "(n)a ball of gas.\n"
        ":coll:\n"
        "shooting star.\n"
        "]\n"
    )
    assert "Added 2 item(s) to star" in capsys.readouterr().out


def test_add_requires_content(dictionary, capsys):
    with pytest.raises(SystemExit) as exc:
        vocab(dictionary, "add", "star")
    assert exc.value.code == 1


def test_add_rejects_bad_content(dictionary, capsys):
    before = dictionary.read_text()
    with pytest.raises(SystemExit):
        vocab(dictionary, "add", "star", "--exam", "one. two")
    assert dictionary.read_text() == before
    assert "Error" in capsys.readouterr().out


def test_add_rejects_bad_word(dictionary, capsys):
    with pytest.raises(SystemExit):
        vocab(dictionary, "add", "two words", "--cate", "x")
    assert "Invalid word" in capsys.readouterr().out


def test_lookup_exact(dictionary, capsys):
    vocab(dictionary, "lookup", "sun")
    out = capsys.readouterr().out

    assert "noun: the star" in out
    assert "inferred" not in out


def test_lookup_inferred(dictionary, capsys):
    vocab(dictionary, "lookup", "sunn")
    out = capsys.readouterr().out

    assert "inferred" in out
    assert "adjective: full of sun" in out


def test_lookup_ambiguous(dictionary, capsys):
    vocab(dictionary, "lookup", "su")
    out = capsys.readouterr().out

    assert "3 words start with 'su'" in out
    assert "sunset" in out


def test_lookup_not_found(dictionary, capsys):
    vocab(dictionary, "lookup", "moon")
    assert "Not found: moon" in capsys.readouterr().out


def test_remove(dictionary, capsys):
    vocab(dictionary, "remove", "sunny")

    assert "Removed sunny" in capsys.readouterr().out
    assert "sunny" not in dictionary.read_text()


def test_remove_absent(dictionary, capsys):
    before = dictionary.read_text()
    vocab(dictionary, "remove", "moon")

    assert "No entry for 'moon'" in capsys.readouterr().out
    assert dictionary.read_text() == before


def test_list_prefix(dictionary, capsys):
    vocab(dictionary, "list", "suns")
    out = capsys.readouterr().out

    assert "sunset" in out
    assert "sunny" not in out


def test_format_rewrites_canonical(dictionary, capsys):
    vocab(dictionary, "format")

    assert dictionary.read_text().startswith("[\nsun\n:defi:\n(n)the star.\n]\n")
    assert "Wrote 3 words" in capsys.readouterr().out


def test_check_clean(dictionary, capsys):
    vocab(dictionary, "check")
    assert "3 words, 0 warning(s), 0 error(s)" in capsys.readouterr().out


def test_check_reports_problems(tmp_path, capsys):
    path = tmp_path / "bad.txt"
    path.write_text("[ a :note:x. ] [ 1 ] [ b ]")

    with pytest.raises(SystemExit) as exc:
        vocab(path, "check")

    captured = capsys.readouterr()
    assert exc.value.code == 1
    assert "2 words, 1 warning(s), 1 error(s)" in captured.out
    assert "unrecognized item" in captured.err


def test_check_abort_policy(tmp_path, capsys):
    path = tmp_path / "bad.txt"
    path.write_text("[ a ] [ 1 ]")

    with pytest.raises(SystemExit):
        vocab(path, "--on-error", "abort", "check")
    assert "Cannot read" in capsys.readouterr().out


# === unreadable records are never saved over ===

@pytest.fixture
def damaged(tmp_path, monkeypatch):
    monkeypatch.delenv("VOCAB_FILE", raising=False)
    monkeypatch.delenv("VOCAB_ON_ERROR", raising=False)
    path = tmp_path / "damaged.txt"
    path.write_text(
        "[ good :defi:(n)fine. ]\n"
        "[ bad :de-fi:(n)keep me. ]\n"
        "[ other :cate:x. ]\n"
    )
    return path


@pytest.mark.parametrize("args", [
    ("add", "good", "--coll", "x"),
    ("remove", "other"),
    ("format",),
])
def test_write_commands_keep_unreadable_records(damaged, capsys, args):
    before = damaged.read_text()

    with pytest.raises(SystemExit) as exc:
        vocab(damaged, *args)

    captured = capsys.readouterr()
    assert exc.value.code == 1
    assert damaged.read_text() == before
    assert "could not be read" in captured.out
    assert "Added" not in captured.out
    assert "Removed" not in captured.out


def test_force_saves_without_unreadable_records(damaged, capsys):
    vocab(damaged, "add", "good", "--coll", "x", "--force")

    text = damaged.read_text()
    assert "Added 1 item(s) to good" in capsys.readouterr().out
    assert "keep me" not in text
    assert "other" in text


def test_no_command_prints_help(capsys):
    main([])
    assert "usage: vocab" in capsys.readouterr().out
