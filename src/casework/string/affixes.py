"""
Manipulating word suffixes.
"""


def has_suffix(string, *suffixes):
    """Case insensitive check whether `string` ends with any of `suffixes`."""
    return string.lower().endswith(suffixes)


def replace_suffix(string, old, new):
    """
    Substitute a suffix, matched case insensitively. The new suffix is upper
    cased if `string` is all upper case.

    Parameters
    ----------
    string : str
        String to modify.
    old : str
        Suffix to replace. An empty string simply appends `new`.
    new : str
        New suffix to substitute.

    Examples
    --------
    >>> replace_suffix('City', 'y', 'ies')
    'Cities'
    >>> replace_suffix('CITY', 'y', 'ies')
    'CITIES'
    >>> replace_suffix('city', 'x', 'ces')
    'city'

    Returns
    -------
    str
        String will be modified if it originally ended with the `old` suffix.
    """
    if not has_suffix(string, old):
        return string

    if string.isupper():
        new = new.upper()

    return string[:len(string) - len(old)] + new


def remove_suffix(string, suffix):
    return replace_suffix(string, suffix, '')


def append_suffix(string, suffix):
    return replace_suffix(string, '', suffix)
