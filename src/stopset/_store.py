"""StopWords: thread-safe stop word set with atomic dictionary reload."""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from ._loader import read_dictionary
from ._stop_words import DEFAULT_STOP_WORDS

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from pathlib import Path

    from ._types import SegmentLike

logger = logging.getLogger(__name__)


def _is_stop_word(word: str, words: frozenset[str]) -> bool:
    # Empty and 1-byte strings are always stop words. Length is UTF-8
    # bytes: only code points below U+0080 encode to a single byte, so a
    # single multi-byte character is not covered.
    n = len(word)
    if n == 0 or (n == 1 and word < "\x80"):
        return True
    return word in words


class StopWords:
    """Stop word dictionary shared between threads.

    The live set is an immutable frozenset held in one attribute. Readers
    take a reference to it without locking; writers serialize on a lock
    and publish a replacement set by rebinding the attribute, so a reader
    sees either the whole old set or the whole new one.
    """

    __slots__ = ("_words", "_write_lock", "_source")

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._words: frozenset[str] = frozenset(words)
        self._write_lock = threading.Lock()
        self._source: Path | str | None = None

    @classmethod
    def default(cls) -> StopWords:
        """Create a store seeded with the builtin stop words.

        Each store gets its own set. Adding to one default store never
        shows up in another or in DEFAULT_STOP_WORDS.
        """
        return cls(DEFAULT_STOP_WORDS)

    @classmethod
    def from_file(cls, path: Path | str) -> StopWords:
        """Create a store from a dictionary file, one word per line.

        Raises:
            DictionaryReadError: The file could not be read.
            DictionaryDecodeError: The file is not valid UTF-8.
        """
        store = cls(read_dictionary(path))
        store._source = path
        logger.info(f"Loaded {len(store._words)} stop words from {path}")
        return store

    # -- Queries --

    @property
    def source(self) -> Path | str | None:
        """Path of the most recently loaded dictionary, if any."""
        return self._source

    def is_stop_word(self, word: str) -> bool:
        return _is_stop_word(word, self._words)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and _is_stop_word(word, self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __repr__(self) -> str:
        return f"StopWords(n_words={len(self._words)}, source={self._source!r})"

    def snapshot(self) -> frozenset[str]:
        """Return the current stop word set."""
        return self._words

    def filter_segments(self, segments: Iterable[SegmentLike]) -> list[SegmentLike]:
        """Return the segments whose token text is not a stop word.

        Order is preserved and the input is left untouched. All segments
        are checked against the set as it was when the call started.
        """
        words = self._words
        return [
            seg for seg in segments
            if not _is_stop_word(seg.token.text, words)
        ]

    def filter_words(self, words: Iterable[str]) -> list[str]:
        """Return the words that are not stop words, in input order."""
        current = self._words
        return [w for w in words if not _is_stop_word(w, current)]

    # -- Mutation --

    def add(self, word: str) -> None:
        """Add a stop word. Adding an existing word does nothing."""
        with self._write_lock:
            if word in self._words:
                return
            self._words = self._words | {word}
        logger.debug(f"Added stop word {word!r}")

    def load_dictionary(self, path: Path | str) -> None:
        """Replace every stop word with the contents of a dictionary file.

        The new set is built in full before it replaces the live one. If
        reading or parsing fails the current words are kept and the error
        propagates.

        Raises:
            DictionaryReadError: The file could not be read.
            DictionaryDecodeError: The file is not valid UTF-8.
        """
        words = read_dictionary(path)

        with self._write_lock:
            old_size = len(self._words)
            self._words = words
            self._source = path

        logger.info(
            f"Reloaded stop words from {path}: {old_size} -> {len(words)} words"
        )
