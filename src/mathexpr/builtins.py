'''
Functions and constants every evaluator knows about.

Every function takes the list of evaluated arguments. All arithmetic is
numpy.float64 so that domain errors and overflow come out as nan/inf rather
than exceptions; callers are expected to run inside numpy.errstate.
'''

from collections import namedtuple
import math
import sys

import numpy


# Arity of a function accepting one or more arguments.
VARIADIC = None

Function = namedtuple('Function', ['callback', 'arity'])


def _unary(f):
    '''
    Wrap a one argument function to take the argument list.
    '''
    def wrapped(args):
        return f(args[0])
    wrapped.__doc__ = f.__doc__
    wrapped.__name__ = getattr(f, '__name__', 'unary')
    return Function(wrapped, 1)


def _binary(f):
    '''
    Wrap a two argument function to take the argument list.
    '''
    def wrapped(args):
        return f(args[0], args[1])
    wrapped.__doc__ = f.__doc__
    wrapped.__name__ = getattr(f, '__name__', 'binary')
    return Function(wrapped, 2)


def _variadic(f):
    return Function(f, VARIADIC)


def _as_float(n):
    '''
    Python int to float64, saturating to inf instead of raising.
    '''
    try:
        return numpy.float64(float(n))
    except OverflowError:
        return numpy.float64(math.inf)


def _integral(x):
    '''
    Truncate to int. None when x isn't finite.
    '''
    if not numpy.isfinite(x):
        return None
    return int(x)


# Anything past this overflows a double anyway.
_MAX_FACTORIAL = 170
_MAX_LOG = math.log(sys.float_info.max)


def _overflows(*log_sizes):
    '''
    True if any estimate of a natural log is past the largest double.

    Checked before building exact integers, which for something like
    ncr(1e8, 5e7) would run for ages only to overflow anyway.
    '''
    return any(size > _MAX_LOG for size in log_sizes)


def factorial(x):
    '''
    Factorial of x truncated towards zero. nan for negatives.
    '''
    if x == math.inf:
        return numpy.float64(math.inf)
    n = _integral(x)
    if n is None or n < 0:
        return numpy.float64(math.nan)
    if n > _MAX_FACTORIAL:
        return numpy.float64(math.inf)
    return _as_float(math.factorial(n))


def binomial(x, y):
    '''
    Number of y element subsets of x elements, arguments truncated.
    '''
    n, k = _integral(x), _integral(y)
    if n is None or k is None or n < 0 or k < 0:
        return numpy.float64(math.nan)
    if k > n:
        return numpy.float64(0)
    k = min(k, n - k)
    # (n/k)^k bounds from below where lgamma cancels out for huge n
    if k and _overflows(k * math.log(n / k),
                        math.lgamma(n + 1) - math.lgamma(n - k + 1) -
                        math.lgamma(k + 1)):
        return numpy.float64(math.inf)
    return _as_float(math.comb(n, k))


def permutations(x, y):
    '''
    Number of ordered y element subsets of x elements: binom(x, y) * y!.
    '''
    n, k = _integral(x), _integral(y)
    if n is None or k is None or n < 0 or k < 0:
        return numpy.float64(math.nan)
    if k > n:
        return numpy.float64(0)
    if k and _overflows(k * math.log(n - k + 1),
                        math.lgamma(n + 1) - math.lgamma(n - k + 1)):
        return numpy.float64(math.inf)
    return _as_float(math.perm(n, k))


CONSTANTS = {
    'pi': numpy.float64(math.pi),
    'tau': numpy.float64(math.tau),
    'e': numpy.float64(math.e),
}

FUNCTIONS = {
    'abs': _unary(numpy.abs),
    'acos': _unary(numpy.arccos),
    'asin': _unary(numpy.arcsin),
    'atan': _unary(numpy.arctan),
    'atan2': _binary(numpy.arctan2),
    'ceil': _unary(numpy.ceil),
    'cos': _unary(numpy.cos),
    'cosh': _unary(numpy.cosh),
    # Radians to degrees
    'deg': _unary(numpy.degrees),
    'exp': _unary(numpy.exp),
    'sgn': _unary(numpy.sign),
    'sqrt': _unary(numpy.sqrt),
    'sum': _variadic(lambda args: numpy.sum(args, dtype=numpy.float64)),
    'fac': _unary(factorial),
    'floor': _unary(numpy.floor),
    'ln': _unary(numpy.log),
    'log': _unary(numpy.log10),
    'log2': _unary(numpy.log2),
    'max': _variadic(lambda args: numpy.max(args)),
    'min': _variadic(lambda args: numpy.min(args)),
    'ncr': _binary(binomial),
    'npr': _binary(permutations),
    # Degrees to radians
    'rad': _unary(numpy.radians),
    'pow': _binary(numpy.power),
    'sin': _unary(numpy.sin),
    'sinh': _unary(numpy.sinh),
    'tan': _unary(numpy.tan),
    'tanh': _unary(numpy.tanh),
}

ALIASES = {
    'arccos': 'acos',
    'arcsin': 'asin',
    'arctan': 'atan',
    'arctg': 'atan',
    'arctan2': 'atan2',
    'log10': 'log',
    'binom': 'ncr',
    'tg': 'tan',
}
for alias, name in ALIASES.items():
    FUNCTIONS[alias] = FUNCTIONS[name]
del alias, name


def lookup_constant(name):
    return CONSTANTS.get(name)


def lookup_function(name):
    return FUNCTIONS.get(name)
