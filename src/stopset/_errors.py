"""Stopset error types."""


class StopsetError(Exception):
    """Base error for all stopset failures."""


class DictionaryReadError(StopsetError, OSError):
    """Stop words dictionary file could not be read."""


class DictionaryDecodeError(StopsetError, ValueError):
    """Stop words dictionary content is not valid UTF-8."""


class TooManyDictionariesError(StopsetError, ValueError):
    """More than one dictionary path given to a constructor."""
