"""Stop words dictionary parsing and file loading."""

from __future__ import annotations

import logging
from pathlib import Path

from ._errors import DictionaryDecodeError, DictionaryReadError

logger = logging.getLogger(__name__)


def parse_dictionary(raw: bytes | str) -> frozenset[str]:
    """Parse dictionary content into a fresh set of stop words.

    One word per line. Lines are split on ``\\n`` only and stripped of
    surrounding whitespace; lines left empty are skipped. There is no
    comment syntax, so every remaining line is taken verbatim.

    Bytes must be valid UTF-8. Undecodable content raises
    DictionaryDecodeError rather than being loaded as-is; through
    read_dictionary this is the one failure that is not a read error.
    """
    if isinstance(raw, bytes):
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DictionaryDecodeError(
                f"Stop words dictionary is not valid UTF-8: {e}"
            ) from e
    else:
        text = raw

    words: set[str] = set()
    for line in text.split("\n"):
        word = line.strip()
        if word:
            words.add(word)

    return frozenset(words)


def read_dictionary(path: Path | str) -> frozenset[str]:
    """Read and parse a dictionary file in a single read."""
    path = Path(path)
    try:
        with open(path, "rb") as f:
            raw = f.read()
    except OSError as e:
        raise DictionaryReadError(
            f"Cannot read stop words dictionary {path}: {e.strerror or e}"
        ) from e

    words = parse_dictionary(raw)
    if not words:
        logger.warning(f"Stop words dictionary {path} contains no words")
    else:
        logger.debug(f"Parsed {len(words)} stop words from {path}")
    return words
