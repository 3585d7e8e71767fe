"""
Split identifiers and free text into lowercase word tokens.

Words end at whitespace and punctuation, and at the transitions found in
identifiers:

    letter -> digit     Int8        -> int | 8
    digit -> letter     8Value      -> 8 | value
    lower -> upper      camelCase   -> camel | case
    acronym -> word     XMLHttp     -> xml | http
"""

# std
import re

# third-party
import more_itertools as mit
from loguru import logger

# relative
from .utils import check_text
from .unicode import (is_digit, is_letter, is_lower, is_separator, is_upper,
                      is_word_char, lower)


# ---------------------------------------------------------------------------- #

def is_valid_word(word):
    """
    Check that `word` is non-empty and contains only letters, decimal digits or
    apostrophes.

    Examples
    --------
    >>> is_valid_word("don't")
    True
    >>> is_valid_word('hello!')
    False
    """
    return bool(word) and all(map(is_word_char, word))


def is_boundary(prev, curr, position, chars):
    """
    Decide whether a word boundary lies between `prev` and `curr`.

    Parameters
    ----------
    prev, curr : str
        Adjacent characters. `curr` is at index `position` in `chars`.
    position : int
        Index of `curr` in `chars`.
    chars : sequence of str
        The characters being scanned, used for one character of lookahead.

    Examples
    --------
    >>> is_boundary('t', '8', 3, 'Int8')
    True
    >>> is_boundary('M', 'L', 2, 'XMLHttp')
    False
    >>> is_boundary('L', 'H', 3, 'XMLHttp')
    True

    Returns
    -------
    bool
    """
    if is_letter(prev) and is_digit(curr):
        return True

    if is_digit(prev) and is_letter(curr):
        return True

    if is_lower(prev) and is_upper(curr):
        return True

    # last capital of an acronym starts the next word: XMLHttp -> XML|Http
    return (is_upper(prev) and is_upper(curr)
            and position + 1 < len(chars)
            and is_lower(chars[position + 1]))


def _split_chunk(chars):
    # split a run of non-separator characters at word boundaries
    start = 0
    for i in range(1, len(chars)):
        if is_boundary(chars[i - 1], chars[i], i, chars):
            yield chars[start:i]
            start = i

    if chars:
        yield chars[start:]


def _iter_words(text):
    for chunk in mit.split_at(text, is_separator):
        for fragment in _split_chunk(chunk):
            word = ''.join(map(lower, fragment))
            if is_valid_word(word):
                yield word
            else:
                logger.debug('Dropping invalid fragment {!r} from {!r}.',
                             word, text)


def tokenize(text):
    """
    Split `text` into a list of lowercase words.

    Whitespace and the punctuation characters listed in the package config
    separate words, and are never part of a word. Within a run of other
    characters, words are split at letter/digit transitions, lower to upper
    case transitions, and before the last capital of an acronym that is
    followed by a lowercase letter. Fragments containing anything other than
    letters, digits and apostrophes are dropped.

    Parameters
    ----------
    text : str
        Identifier or natural language text.

    Examples
    --------
    >>> tokenize('XMLHttpRequest')
    ['xml', 'http', 'request']
    >>> tokenize('Int8Value')
    ['int', '8', 'value']
    >>> tokenize('  snake_case and-kebab  ')
    ['snake', 'case', 'and', 'kebab']

    Returns
    -------
    list of str
    """
    check_text(text)

    if text := text.strip():
        return list(_iter_words(text))

    return []


# alias
words = tokenize


def split_words(text, pattern):
    """
    Split `text` on the regular expression `pattern`, returning the stripped,
    lowercase, non-empty pieces. If the pattern does not compile, the default
    tokenizer is used instead.

    Parameters
    ----------
    text : str
        Text to split.
    pattern : str or re.Pattern
        Separator pattern.

    Examples
    --------
    >>> split_words('hello-world_test', r'[\\-_]+')
    ['hello', 'world', 'test']
    >>> split_words('camelCase', '(?=[A-Z])')
    ['camel', 'case']

    Returns
    -------
    list of str
    """
    check_text(text)

    if not text:
        return []

    try:
        regex = re.compile(pattern)
    except re.error as err:
        logger.warning('Invalid split pattern {!r}: {}. Falling back to the '
                       'default tokenizer.', pattern, err)
        return tokenize(text)

    parts = (part.strip() for part in _split_between(regex, text))
    return [part.lower() for part in parts if part]


def _split_between(regex, text):
    # text between matches only, so captured separators are never returned
    start = 0
    for match in regex.finditer(text):
        yield text[start:match.start()]
        start = match.end()

    yield text[start:]


def change_separator(text, separator):
    """
    Tokenize `text` and join the words with `separator`.

    Examples
    --------
    >>> change_separator('HelloWorld', '.')
    'hello.world'
    """
    return separator.join(tokenize(text))
