"""
Classify single characters (code points) for word boundary detection.
"""

# std
import unicodedata

# relative
from ..config import section


# ---------------------------------------------------------------------------- #
# ASCII apostrophe and right single quotation mark
APOSTROPHES = frozenset("'’")

# punctuation that always ends a word
SEPARATORS = frozenset(section('words')['separators'])


# ---------------------------------------------------------------------------- #

def is_letter(char):
    return unicodedata.category(char).startswith('L')


def is_digit(char):
    # decimal digits only, so superscripts, fractions etc. are not digits
    return unicodedata.category(char) == 'Nd'


def is_upper(char):
    return unicodedata.category(char) == 'Lu'


def is_lower(char):
    return unicodedata.category(char) == 'Ll'


def lower(char):
    """
    Lower case a single character, keeping a single code point.

    >>> lower('İ')
    'i'
    """
    # 'İ'.lower() is 'i' followed by a combining dot above
    return char.lower()[:1]


def is_separator(char):
    """Whitespace or one of the word-ending punctuation characters."""
    return char.isspace() or char in SEPARATORS


def is_word_char(char):
    """Characters that may appear in a token."""
    return is_letter(char) or is_digit(char) or char in APOSTROPHES
