"""Stopset: thread-safe stop word dictionary for segmentation pipelines."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ._errors import (
    DictionaryDecodeError,
    DictionaryReadError,
    StopsetError,
    TooManyDictionariesError,
)
from ._loader import parse_dictionary, read_dictionary
from ._stop_words import DEFAULT_STOP_WORDS
from ._store import StopWords
from ._types import Segment, SegmentLike, Token, TokenLike

if TYPE_CHECKING:
    from pathlib import Path

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "load",
    "DEFAULT_STOP_WORDS",
    "DictionaryDecodeError",
    "DictionaryReadError",
    "Segment",
    "SegmentLike",
    "StopWords",
    "StopsetError",
    "Token",
    "TokenLike",
    "TooManyDictionariesError",
    "parse_dictionary",
    "read_dictionary",
]


def load(*paths: Path | str) -> StopWords:
    """Create a StopWords store.

    With no arguments the builtin stop words are used. With one path the
    dictionary file at that path is loaded. At most one dictionary may be
    given.

    Raises:
        TooManyDictionariesError: More than one path was given.
        DictionaryReadError: The dictionary file could not be read.
    """
    if len(paths) > 1:
        raise TooManyDictionariesError(
            f"Only one stop words dictionary may be loaded, got {len(paths)}"
        )
    if not paths:
        return StopWords.default()
    return StopWords.from_file(paths[0])
