"""
English pluralization and singularization of single words.

Lookups are case insensitive. Results follow the case of the input word where
possible: 'Child' -> 'Children', 'CITY' -> 'CITIES'.
"""


# std
import numbers
from collections import abc
from types import MappingProxyType

# relative
from ..config import section
from .utils import check_text
from .casing import capitalize
from .affixes import append_suffix, has_suffix, replace_suffix


# ---------------------------------------------------------------------------- #
_TABLES = section('plurals')

# unchanging / context dependent
UNCHANGING = frozenset(map(str.lower, _TABLES['unchanging']))

# singular -> plural
IRREGULAR = MappingProxyType({singular.lower(): plural.lower()
                              for singular, plural in _TABLES['irregular'].items()})
# plural -> singular
SINGULAR = MappingProxyType({plural: singular
                             for singular, plural in IRREGULAR.items()})

# ...ves -> ...fe for these stems
FE_STEMS = tuple(_TABLES['fe_stems'])

VOWELS = 'aeiou'
SIBILANTS = ('s', 'x', 'z', 'ch', 'sh')

_PLURAL_SUFFIX_MAP = {
    # eg:   knife -> knives
    #       wolf -> wolves
    #       roof -> rooves (sic)
    'f':
        'ves',
    'fe':
        'ves',
}


# ---------------------------------------------------------------------------- #

def _match_case(word, new):
    # give a table lookup result the case of the input word
    if len(word) > 1 and word.isupper():
        return new.upper()

    if word[:1].isupper():
        return capitalize(new)

    return new


def _follows_consonant(word, suffix):
    # eg: city (True), day (False)
    if len(word) <= len(suffix) or not has_suffix(word, suffix):
        return False

    letter = word[-len(suffix) - 1].lower()
    return letter.isalpha() and letter not in VOWELS


def naive_english_plural(word):
    """
    Plural of a single English word from a few lookup tables and suffix rules.
    """

    lower = word.lower()
    if not word or lower in UNCHANGING:
        return word

    if lower in IRREGULAR:
        return _match_case(word, IRREGULAR[lower])

    # eg: agency -> agencies
    if _follows_consonant(word, 'y'):
        return replace_suffix(word, 'y', 'ies')

    # eg:   success -> successes,
    #       watch -> watches
    #       hero -> heroes
    if has_suffix(word, *SIBILANTS) or _follows_consonant(word, 'o'):
        return append_suffix(word, 'es')

    return next(
        (
            replace_suffix(word, end, suffix)
            for end, suffix in _PLURAL_SUFFIX_MAP.items()
            if has_suffix(word, end)
        ),
        # everything else
        append_suffix(word, 's')
    )


def naive_english_singular(word):
    """
    Singular of a single English word from a few lookup tables and suffix rules.
    """

    lower = word.lower()
    if not word or lower in UNCHANGING:
        return word

    if lower in SINGULAR:
        return _match_case(word, SINGULAR[lower])

    # eg:   knives -> knife
    #       shelves -> shelf
    if lower.endswith('ves'):
        return replace_suffix(
            word, 'ves', 'fe' if lower[:-3].endswith(FE_STEMS) else 'f'
        )

    # eg: cities -> city
    if lower.endswith('ies'):
        return replace_suffix(word, 'ies', 'y')

    # eg: boxes -> box, but not: bikes -> bik
    if lower.endswith('es') and lower[:-2].endswith(SIBILANTS):
        return replace_suffix(word, 'es', '')

    # eg: days -> day
    if lower.endswith('s'):
        return replace_suffix(word, 's', '')

    return word


# ---------------------------------------------------------------------------- #

def pluralise(word, items=(()), plural=None, n=None):
    """
    Plural form of `word`, conditional on the size of `items`, or the count `n`.

    Parameters
    ----------
    word : str
        Singular word.
    items : collection, optional
        The plural is returned unless this contains exactly one item. By
        default, an empty collection, so the plural is always returned.
    plural : str, optional
        Explicit plural form, overriding the computed one.
    n : int, optional
        Count to use instead of the size of `items`.

    Examples
    --------
    >>> pluralise('city')
    'cities'
    >>> pluralise('child', n=1)
    'child'
    >>> pluralise('Box', [1, 2])
    'Boxes'

    Returns
    -------
    str
    """
    check_text(word, 'word')

    return ((plural or naive_english_plural(word))
            if _is_plural(items, n)
            else word)


def singularise(word):
    """
    Singular form of `word`.

    Examples
    --------
    >>> singularise('matrices')
    'matrix'
    >>> singularise('days')
    'day'

    Returns
    -------
    str
    """
    return naive_english_singular(check_text(word, 'word'))


def _is_plural(items=(()), n=None):
    return _many(items) if n is None else n != 1


def _many(obj):
    return isinstance(obj, abc.Collection) and (len(obj) != 1)


# alias
pluralize = pluralise
singularize = singularise


def numbered(items, word, plural=None):
    """
    Prefix the count to the (conditionally) pluralised `word`.

    Examples
    --------
    >>> numbered([1, 2, 3], 'city')
    '3 cities'
    >>> numbered(1, 'child')
    '1 child'
    """
    n = items if isinstance(items, numbers.Integral) else len(items)
    return f'{n:d} {pluralise(word, plural=plural, n=n)}'
