# local
from casework.testing import Expected, mock
from casework.string.affixes import (append_suffix, has_suffix, remove_suffix,
                                     replace_suffix)


test_has_suffix = Expected(has_suffix)({
    mock.has_suffix('watch', 'ch'):             True,
    mock.has_suffix('WATCH', 'ch'):             True,
    mock.has_suffix('watch', 'sh', 'ch'):       True,
    mock.has_suffix('watch', 'sh', 'x'):        False,
    mock.has_suffix('', 'x'):                   False,
    mock.has_suffix('anything', ''):            True,
})

test_replace_suffix = Expected(replace_suffix)({
    mock.replace_suffix('city', 'y', 'ies'):    'cities',
    mock.replace_suffix('City', 'Y', 'ies'):    'Cities',
    mock.replace_suffix('CITY', 'y', 'ies'):    'CITIES',
    mock.replace_suffix('city', 'x', 'ces'):    'city',
    mock.replace_suffix('knife', 'fe', 'ves'):  'knives',
})

test_remove_suffix = Expected(remove_suffix)({
    mock.remove_suffix('Days', 's'):            'Day',
    mock.remove_suffix('boxes', 'es'):          'box',
    mock.remove_suffix('box', 'es'):            'box',
})

test_append_suffix = Expected(append_suffix)({
    mock.append_suffix('box', 'es'):            'boxes',
    mock.append_suffix('BOX', 'es'):            'BOXES',
    mock.append_suffix('', 's'):                's',
})
