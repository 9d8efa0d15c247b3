# src/vocab/core/config.py
"""
Settings for reading and writing a dictionary file.

Defaults can be overridden from the environment:
  VOCAB_FILE       dictionary path       (vocabulary.txt)
  VOCAB_ON_ERROR   abort | resync        (resync)
  VOCAB_ENCODING   file encoding         (utf-8)
"""

import os
from enum import Enum
from pathlib import Path

from pydantic import BaseModel


class OnError(str, Enum):
    """What Store.load does when a record cannot be parsed.

    ABORT  - raise the first ParseError, nothing is loaded.
    RESYNC - record the error, skip to the next '[' and keep going.
    """
    ABORT = "abort"
    RESYNC = "resync"


DEFAULT_PATH = Path("vocabulary.txt")


class VocabConfig(BaseModel):
    dictionary_path: Path = DEFAULT_PATH
    on_error: OnError = OnError.RESYNC
    encoding: str = "utf-8"

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "VocabConfig":
        environ = os.environ if environ is None else environ
        values = {}
        if environ.get("VOCAB_FILE"):
            values["dictionary_path"] = environ["VOCAB_FILE"]
        if environ.get("VOCAB_ON_ERROR"):
            values["on_error"] = environ["VOCAB_ON_ERROR"].lower()
        if environ.get("VOCAB_ENCODING"):
            values["encoding"] = environ["VOCAB_ENCODING"]
        return cls(**values)
