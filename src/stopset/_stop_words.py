"""Builtin default stop words."""

DEFAULT_STOP_WORDS: frozenset[str] = frozenset({
    # Determiners and articles
    "the", "an", "this", "all", "one",
    # Conjunctions and prepositions
    "of", "and", "to", "in", "for", "by", "as", "on", "with",
    "if", "from", "at", "or", "then",
    # Pronouns
    "that", "we", "which", "you", "it",
    # Be/have forms
    "is", "are", "be", "have", "has",
    # Modals and negation
    "can", "not",
})
