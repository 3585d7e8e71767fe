# third-party
import pytest

# local
from casework.testing import Expected, Throws, mock
from casework.string.plurals import (FE_STEMS, IRREGULAR, SINGULAR, UNCHANGING,
                                     numbered, pluralize, singularize)


# ---------------------------------------------------------------------------- #
test_pluralize = Expected(pluralize)({
    # regular
    'book':         'books',
    'day':          'days',
    'key':          'keys',
    'zoo':          'zoos',

    # ...(consonant)y -> ...ies
    'city':         'cities',
    'agency':       'agencies',

    # ...(s/x/z/ch/sh) ->  ...es
    'box':          'boxes',
    'bus':          'buses',
    'status':       'statuses',
    'virus':        'viruses',
    'buzz':         'buzzes',
    'church':       'churches',
    'radish':       'radishes',
    'success':      'successes',

    # ...(consonant)o -> ...oes
    'hero':         'heroes',
    'potato':       'potatoes',
    'radio':        'radios',

    # ...(f/fe) -> ...ves
    'knife':        'knives',
    'life':         'lives',
    'wife':         'wives',
    'shelf':        'shelves',
    'wolf':         'wolves',
    'half':         'halves',

    # irregular
    'child':        'children',
    'man':          'men',
    'woman':        'women',
    'tooth':        'teeth',
    'foot':         'feet',
    'mouse':        'mice',
    'goose':        'geese',
    'person':       'people',
    'ox':           'oxen',
    'octopus':      'octopi',
    'quiz':         'quizzes',
    'matrix':       'matrices',
    'analysis':     'analyses',
    'diagnosis':    'diagnoses',
    'basis':        'bases',
    'crisis':       'crises',
    'medium':       'media',
    'index':        'indices',
    'vertex':       'vertices',
    'vortex':       'vortices',
    'criterion':    'criteria',

    # unchanging
    'aircraft':     'aircraft',
    'data':         'data',
    'deer':         'deer',
    'fish':         'fish',
    'moose':        'moose',
    'series':       'series',
    'sheep':        'sheep',
    'species':      'species',

    # case follows the input
    'Child':        'Children',
    'Matrix':       'Matrices',
    'OX':           'OXEN',
    'CITY':         'CITIES',
    'City':         'Cities',
    'BOX':          'BOXES',
    'Sheep':        'Sheep',

    '':             '',

    # conditional on count
    mock.pluralize('child', n=1):                   'child',
    mock.pluralize('child', n=0):                   'children',
    mock.pluralize('child', [1]):                   'child',
    mock.pluralize('child', [1, 2]):                'children',
    mock.pluralize('cactus', plural='cacti'):       'cacti',
    mock.pluralize('cactus', plural='cacti', n=1):  'cactus',

    mock(None):     Throws(TypeError),
})


test_singularize = Expected(singularize)({
    # regular
    'books':        'book',
    'days':         'day',
    'cities':       'city',
    'boxes':        'box',
    'buses':        'bus',
    'statuses':     'status',
    'viruses':      'virus',
    'churches':     'church',
    'dishes':       'dish',
    'bikes':        'bike',

    # ...ves
    'knives':       'knife',
    'lives':        'life',
    'wives':        'wife',
    'shelves':      'shelf',
    'wolves':       'wolf',
    'leaves':       'leaf',

    # irregular
    'children':     'child',
    'men':          'man',
    'women':        'woman',
    'teeth':        'tooth',
    'feet':         'foot',
    'mice':         'mouse',
    'people':       'person',
    'oxen':         'ox',
    'quizzes':      'quiz',
    'matrices':     'matrix',
    'analyses':     'analysis',
    'indices':      'index',
    'octopi':       'octopus',
    'criteria':     'criterion',
    'vertices':     'vertex',

    # unchanging
    'fish':         'fish',
    'deer':         'deer',
    'data':         'data',
    'series':       'series',
    'species':      'species',

    # nothing to do
    'book':         'book',
    'already singular': 'already singular',
    '':             '',

    # case follows the input
    'Children':     'Child',
    'CITIES':       'CITY',
    'Boxes':        'Box',

    mock(None):     Throws(TypeError),
})


test_numbered = Expected(numbered)({
    mock.numbered([1, 2, 3], 'city'):   '3 cities',
    mock.numbered(1, 'child'):          '1 child',
    mock.numbered(0, 'box'):            '0 boxes',
    mock.numbered([], 'mouse'):         '0 mice',
    mock.numbered(2, 'cactus', 'cacti'): '2 cacti',
})


# ---------------------------------------------------------------------------- #
@pytest.mark.parametrize(
    'word',
    ['book', 'city', 'box', 'church', 'dish', 'knife', 'wife', 'shelf', 'wolf',
     'half', 'day', 'key', 'bus', 'status', 'quiz', 'child', 'man', 'octopus',
     'matrix', 'index', 'crisis', 'sheep', 'series', 'Person', 'CITY']
)
def test_round_trip(word):
    assert singularize(pluralize(word)) == word


def test_tables_read_only():
    with pytest.raises(TypeError):
        IRREGULAR['cactus'] = 'cacti'

    with pytest.raises(AttributeError):
        UNCHANGING.add('pokemon')


def test_singular_is_inverse():
    assert len(SINGULAR) == len(IRREGULAR)
    for singular, plural in IRREGULAR.items():
        assert SINGULAR[plural] == singular


def test_tables_lowercase():
    assert all(word == word.lower() for word in UNCHANGING)
    assert all(word == word.lower() for word in (*IRREGULAR, *SINGULAR))
    assert set(FE_STEMS) == {'kni', 'li', 'wi'}
