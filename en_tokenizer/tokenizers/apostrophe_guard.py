"""
The delimiter splitter treats both apostrophes as delimiters, but English words keep theirs
("don't", "o'clock").  Before splitting we swap each apostrophe for a sentinel made of characters
that are never delimiters, and we swap them back in every segment the splitter hands us.
"""
TYPEWRITER_APOSTROPHE = "'"
TYPOGRAPHIC_APOSTROPHE = "’"
APOSTROPHES = TYPEWRITER_APOSTROPHE + TYPOGRAPHIC_APOSTROPHE

TYPEWRITER_SENTINEL = "\u0001\u0001APOSTYPEW\u0001\u0001"
TYPOGRAPHIC_SENTINEL = "\u0001\u0001APOSTYPOG\u0001\u0001"


def guard(text: str) -> str:
    return (text.replace(TYPEWRITER_APOSTROPHE, TYPEWRITER_SENTINEL)
            .replace(TYPOGRAPHIC_APOSTROPHE, TYPOGRAPHIC_SENTINEL))


def unguard(fragment: str) -> str:
    return (fragment.replace(TYPEWRITER_SENTINEL, TYPEWRITER_APOSTROPHE)
            .replace(TYPOGRAPHIC_SENTINEL, TYPOGRAPHIC_APOSTROPHE))


def normalize_apostrophes(word: str) -> str:
    """
    Dictionary lookups only ever see the typewriter apostrophe.
    """
    return word.replace(TYPOGRAPHIC_APOSTROPHE, TYPEWRITER_APOSTROPHE)
