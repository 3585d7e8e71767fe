"""
Utilities shared by the string modules.
"""


def check_text(obj, name='text'):
    """Return `obj` unchanged if it is a `str`, otherwise raise TypeError."""
    if isinstance(obj, str):
        return obj

    raise TypeError(
        f'Invalid object of type {type(obj).__name__!r} for `{name}`: {obj!r}.'
    )
