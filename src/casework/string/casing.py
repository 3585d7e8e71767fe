"""
Special casing for strings.
"""

# std
import re
from enum import Enum

# relative
from .words import tokenize


# ---------------------------------------------------------------------------- #
# characters that may not appear in kebab / snake case output, and runs of the
# separator to collapse
REGEX_INVALID = {'-': re.compile('[^a-z0-9-]'),
                 '_': re.compile('[^a-z0-9_]')}
REGEX_REPEATS = {'-': re.compile('-+'),
                 '_': re.compile('_+')}


# ---------------------------------------------------------------------------- #

def capitalize(word):
    """
    Upper case the first character of `word`, leaving the rest unchanged.
    Unlike `str.capitalize`, the tail is not lower cased.

    Examples
    --------
    >>> capitalize('fred')
    'Fred'
    >>> capitalize('fRED')
    'FRED'
    """
    return word[:1].upper() + word[1:]


def decapitalize(word):
    """Lower case the first character of `word`, leaving the rest unchanged."""
    return word[:1].lower() + word[1:]


# ---------------------------------------------------------------------------- #

def camel_case(text):
    """
    Convert to camelCase.

    Examples
    --------
    >>> camel_case('foo bar baz')
    'fooBarBaz'
    """
    first, *rest = tokenize(text) or ('', )
    return first + ''.join(map(capitalize, rest))


def pascal_case(text):
    """
    Convert to PascalCase.

    Examples
    --------
    >>> pascal_case('hello_world')
    'HelloWorld'
    """
    return ''.join(map(capitalize, tokenize(text)))


def headline(text):
    """
    Convert to space separated Headline Case.

    Examples
    --------
    >>> headline('EmailNotificationSent')
    'Email Notification Sent'
    """
    return ' '.join(map(capitalize, tokenize(text)))


def kebab_case(text):
    """
    Convert to kebab-case. The result contains only lowercase ASCII letters,
    digits and single hyphens between words.

    Examples
    --------
    >>> kebab_case('HelloWorld')
    'hello-world'
    """
    return _delimited(text, '-')


def snake_case(text):
    """
    Convert to snake_case. The result contains only lowercase ASCII letters,
    digits and single underscores between words.

    Examples
    --------
    >>> snake_case('HELLO-WORLD')
    'hello_world'
    """
    return _delimited(text, '_')


def _delimited(text, sep):
    invalid = REGEX_INVALID[sep]

    # Removing characters can leave a letter next to a digit (eg: "x'1" ->
    # "x1"), so tokenize again to keep the output stable under re-conversion
    words = tokenize(' '.join(invalid.sub('', word) for word in tokenize(text)))
    new = invalid.sub('', sep.join(words))
    return REGEX_REPEATS[sep].sub(sep, new).strip(sep)


# ---------------------------------------------------------------------------- #

class Case(str, Enum):
    """Naming conventions understood by `convert`."""

    CAMEL = 'camel'
    KEBAB = 'kebab'
    SNAKE = 'snake'
    PASCAL = 'pascal'
    HEADLINE = 'headline'

    # aliases
    STUDLY = 'pascal'
    TITLE = 'headline'

    @classmethod
    def _missing_(cls, value):
        # allow eg: 'Camel', 'kebab-case', 'snake_case', 'PascalCase', 'title'
        if isinstance(value, str):
            name = value.lower().removesuffix('case').strip(' -_').upper()
            return cls.__members__.get(name)


CONVERTERS = {
    Case.CAMEL:     camel_case,
    Case.KEBAB:     kebab_case,
    Case.SNAKE:     snake_case,
    Case.PASCAL:    pascal_case,
    Case.HEADLINE:  headline
}


def convert(text, convention):
    """
    Convert `text` to the naming `convention`.

    Parameters
    ----------
    text : str
        The text to convert.
    convention : str or Case
        One of 'camel', 'kebab', 'snake', 'pascal' or 'headline'. Variants like
        'snake_case' or 'PascalCase', and the aliases 'studly' (pascal) and
        'title' (headline) are also accepted.

    Examples
    --------
    >>> convert('foo bar', 'kebab')
    'foo-bar'

    Returns
    -------
    str

    Raises
    ------
    ValueError
        If the convention is not known.
    """
    try:
        case = Case(convention)
    except ValueError:
        raise ValueError(
            f'Invalid case convention: {convention!r}. Valid options are: '
            f'{", ".join(repr(case.value) for case in CONVERTERS)}.'
        ) from None

    return CONVERTERS[case](text)


# aliases
to_camel_case = camel_case
to_kebab_case = kebab_case
to_snake_case = snake_case
to_pascal_case = pascal_case
to_headline = headline
