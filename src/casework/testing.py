# Flexibly parametrize functional tests

"""
Tools to help building parametrized unit tests

Examples
--------
To generate a bunch of tests with various call signatures of the function
`pluralize`, use
>>> from casework.testing import Expected, mock
>>> test_pluralize = Expected(pluralize)(
...     {'city':                        'cities',
...      mock.pluralize('child', n=1):  'child',
...      mock.pluralize('Box', [1, 2]): 'Boxes'}
... )

This will generate the same tests as the following code block, but is arguably
much neater
>>> @pytest.mark.parametrize(
...     'word, items, plural, n, expected',
...     [('city',  (), None, None, 'cities'),
...      ('child', (), None, 1,    'child'),
...      ('Box',   [1, 2], None, None, 'Boxes')]
... )
... def test_pluralize(word, items, plural, n, expected):
...     assert pluralize(word, items, plural, n) == expected
"""

# std
import difflib
from contextlib import nullcontext
from collections import abc, defaultdict
from inspect import Parameter, Signature, _ParameterKind, signature

# third-party
import pytest

# relative
from .logging import LoggingMixin


# ---------------------------------------------------------------------------- #
POS, PKW, VAR, KWO, VKW = _ParameterKind


# ---------------------------------------------------------------------------- #

def echo(obj):
    return obj


def to_tuple(obj):
    return obj if isinstance(obj, tuple) else (obj, )


def get_hashable_args(*args, **kws):
    return args, tuple(kws.items())


def show_diff(actual, expected):
    """
    Diff helper function. Returns a string containing the unified diff of two
    multiline strings.
    """

    return '\n'.join(difflib.ndiff(actual.splitlines(True),
                                   expected.splitlines(True)))


def get_transforms(main, left, right):
    if main is not None:
        assert callable(main)
        left = right = main

    assert callable(left) and callable(right)
    return left, right


# ---------------------------------------------------------------------------- #

class WrapArgs:
    def __init__(self, *args, **kws):
        self.args, self.kws = get_hashable_args(*args, **kws)

    def __iter__(self):
        return iter((self.args, self.kws))

    def __str__(self) -> str:
        return str((self.args, dict(self.kws)))


class Mock:
    def __getattr__(self, _):
        return WrapArgs

    def __call__(self, *args, **kws):
        return WrapArgs(*args, **kws)


mock = Mock()


class Throws:
    def __init__(self, error=Exception):
        self.error = error


class ECHO:
    """Echo sentinel: the expected result is the (first) input argument."""


# ---------------------------------------------------------------------------- #

class Expected(LoggingMixin):
    """
    Testing helper for checking expected return values for functions. Allows
    one to build simple parametrized tests of a function without needing to
    explicitly type out every parameter of every call.

    >>> test_snake_case = Expected(snake_case)({
    ...     'foo bar':      'foo_bar',
    ...     'HELLO-WORLD':  'hello_world',
    ...     mock(None):     Throws(TypeError)
    ... })

    This constructs a test function with the same parameters as `snake_case`,
    plus a keyword-only `expected` parameter, and parametrizes it with the
    input-output pairs. Assigning the result to a name starting with 'test_'
    is needed for pytest to collect it.
    """

    def __init__(self, func,
                 left_transform=echo, right_transform=echo, transform=None,
                 **kws):
        #
        self.func = func
        self.kws = kws
        # whether it's intended to be a test already
        self.is_test = func.__name__.startswith('test_')

        # get func signature
        self.sig = signature(self.func)
        self.vkw = self.var = None
        self.pnames = params = ()
        if self.sig.parameters:
            self.pnames, params = zip(*self.sig.parameters.items())
        self.pkinds = kinds = [p.kind for p in params]
        for k, v in dict(vkw=VKW, var=VAR).items():
            if v in kinds:
                setattr(self, k, self.pnames[kinds.index(v)])

        self.left_transform, self.right_transform = \
            get_transforms(transform, left_transform, right_transform)

    def __call__(self, cases, *args,
                 left_transform=None, right_transform=None, transform=None,
                 **kws):
        """
        Create the test function and parametrize it with `cases`.

        Parameters
        ----------
        cases : dict or iterable of 2-tuples
            Mapping of call arguments to expected results. Keys can be a single
            argument, a tuple of positional arguments, or a `mock` call.

        Returns
        -------
        function
            The parametrized test.
        """

        left_transform, right_transform = get_transforms(
            transform,
            left_transform or self.left_transform,
            right_transform or self.right_transform
        )

        if isinstance(cases, abc.Mapping):
            cases = cases.items()

        # create the test, unless we already have one
        test = (self.func if self.is_test else
                self.make_test(left_transform, right_transform))
        argspecs = self.get_args(cases)
        names = list(argspecs.keys())
        values = list(zip(*argspecs.values()))

        return pytest.mark.parametrize(names, values, *args, **kws)(test)

    def bind(self, *args, **kws):
        bound = self.sig.bind(*args, **kws)
        bound.apply_defaults()
        return bound.arguments

    def get_args(self, items):
        # loop through the input argument list (items) and create the full
        # parameter spec for the function by binding each call pattern
        # to the function signature. Return a dict keyed on parameter names
        # containing lists of parameter values for each call.

        values = defaultdict(list)
        for spec, expected in items:
            # call signature emulation via mock handled here
            if not isinstance(spec, WrapArgs):
                # simple construction without use of mock function.
                # ==> No keyword values in arg spec
                spec = WrapArgs(*to_tuple(spec))

            args, kws = spec
            kws = {**self.kws, **dict(kws)}
            if self.is_test and 'expected' in self.sig.parameters:
                kws['expected'] = expected

            bound = self.bind(*args, **kws)
            if expected is ECHO:
                # input same as expected
                expected = next(iter(bound.values()))

            for name, val in bound.items():
                values[name].append(val)

            if not self.is_test:
                # signature of created test function has 1 extra parameter
                values['expected'].append(expected)

        return values

    def make_test(self, left_transform, right_transform):
        # -------------------------------------------------------------------- #
        def test(*args, **kws):
            #
            self.logger.debug('test received: {!s}, {!s}', args, kws)

            # pop expected answer from kws dict
            expected = kws.pop('expected')

            # unpack variadic keywords
            if self.vkw:
                extra = kws.pop(self.vkw)
                kws = {**kws, **extra}

            # parameters before *args have to be passed by position
            if self.var:
                args = (*(kws.pop(name) for name in
                          self.pnames[:self.pkinds.index(VAR)]),
                        *kws.pop(self.var))

            self.logger.debug('passing to {:s}: {!s}; {!s}',
                              self.func.__name__, args, kws)

            ctx = nullcontext()
            if isinstance(expected, Throws):
                ctx = pytest.raises(expected.error)

            with ctx:
                answer = left_transform(self.func(*args, **kws))

            if not isinstance(ctx, nullcontext):
                return

            expected = right_transform(expected)
            # NOTE: explicitly assigning answer here so that pytest
            # introspection of locals in this scope works when producing the
            # failure report
            if answer == expected:
                return

            message = (f'Result from function {self.func.__name__!r} is not '
                       f'equal to expected answer!'
                       f'\nRESULT:  \n{answer!r}'
                       f'\nEXPECTED:\n{expected!r}')
            if isinstance(answer, str) and isinstance(expected, str):
                diff_string = show_diff(repr(answer), repr(expected))
                message += f'\nDIFF\n{diff_string}'

            raise AssertionError(message)

        # -------------------------------------------------------------------- #
        # Override signature to add `expected` parameter
        params = [par.replace(default=par.empty, kind=PKW)
                  for par in self.sig.parameters.values()]
        params.append(Parameter('expected', KWO))
        test.__signature__ = Signature(params)

        self.logger.debug('Created test for function {!r}.', self.func.__name__)

        return test


class expected:
    """
    Decorator to parametrize a test function with `cases`. The test receives
    the expected result through its `expected` parameter.

    Examples
    --------
    >>> @expected({
    ...     'XMLHttpRequest': ['xml', 'http', 'request'],
    ... })
    ... def test_tokenize(text, expected):
    ...     assert tokenize(text) == expected
    """

    def __init__(self, cases, *args, **kws):
        self.cases = cases
        self.args = args
        self.kws = kws

    def __call__(self, func):
        return Expected(func, **self.kws)(self.cases, *self.args)
