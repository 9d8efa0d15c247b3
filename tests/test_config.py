# tests/test_config.py
"""Tests for settings."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from vocab.core.config import OnError, VocabConfig


def test_defaults():
    config = VocabConfig.from_env({})

    assert config.dictionary_path == Path("vocabulary.txt")
    assert config.on_error is OnError.RESYNC
    assert config.encoding == "utf-8"


def test_from_env():
    config = VocabConfig.from_env({
        "VOCAB_FILE": "/tmp/words.txt",
        "VOCAB_ON_ERROR": "ABORT",
        "VOCAB_ENCODING": "latin-1",
    })

    assert config.dictionary_path == Path("/tmp/words.txt")
    assert config.on_error is OnError.ABORT
    assert config.encoding == "latin-1"


def test_from_env_rejects_bad_policy():
    with pytest.raises(ValidationError):
        VocabConfig.from_env({"VOCAB_ON_ERROR": "maybe"})
