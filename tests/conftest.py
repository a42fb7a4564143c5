"""Shared fixtures for stopset tests."""

import pytest

import stopset


@pytest.fixture
def store():
    """A fresh store seeded with the builtin stop words."""
    return stopset.load()


@pytest.fixture
def write_dictionary(tmp_path):
    """Write lines to a dictionary file and return its path."""
    counter = {"n": 0}

    def write(lines, encoding="utf-8"):
        counter["n"] += 1
        path = tmp_path / f"stop_words_{counter['n']}.txt"
        path.write_bytes("\n".join(lines).encode(encoding))
        return path

    return write
