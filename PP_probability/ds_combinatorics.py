# Combinatorics Utilities
# This module provides exact counting functions and the combination generator
# used to build sample spaces (hands of cards, draws from an urn).
import warnings
from fractions import Fraction
from itertools import combinations
from numbers import Integral

# combos() warns above this many outcomes; millions are fine, trillions are not
LARGE_SPACE_WARNING = 10_000_000


def _check_int(name, value):
    # bool is an Integral too; reject it
    if not isinstance(value, Integral) or isinstance(value, bool):
        raise TypeError(f'{name} must be an integer, got {value!r}')
    return int(value)


# Function to calculate factorial
def factorial(n):
    '''exact factorial of a non-negative integer, n! = n * (n-1) * ... * 1'''
    n = _check_int('n', n)
    if n < 0:
        raise ValueError(f'factorial is not defined for negative n={n}')
    final_product = 1
    for i in range(n, 0, -1):
        final_product *= i
    return final_product


# Function to calculate combinations
def choose(n, k):
    '''number of ways of choosing k out of n items, n! / ((n - k)! * k!)
    Python ints are arbitrary precision, so 52! and friends never overflow.
    Floor division keeps the result an exact int.'''
    n = _check_int('n', n)
    k = _check_int('k', k)
    if k < 0 or n < k:
        raise ValueError(f'choose requires n >= k >= 0, got n={n}, k={k}')
    return factorial(n) // (factorial(n - k) * factorial(k))


def join_labels(items):
    '''one composite label for a combination, e.g. ("A♥", "K♥") -> "A♥ K♥"'''
    return ' '.join(map(str, items))


def combos(items, k, joiner=join_labels):
    """ Sample space of all unordered k-combinations of items.

    itertools.combinations walks the items in their given order and never
    revisits a permutation, so exactly choose(len(items), k) tuples are produced.
    Each tuple is turned into one composite outcome by `joiner`.

    Parameters
    ----------
    items : iterable of distinct, hashable items (cards, ball labels, ...)
    k : int
        size of each combination, 0 <= k <= len(items)
    joiner : callable
        turns a tuple of items into one hashable outcome. The default (join_labels) joins the
        str() of each item with a space, e.g. 'A♥ K♥ Q♥ J♥ T♥'.
        Use frozenset or tuple to keep the items structured.

    Returns
    -------
    space : set of outcomes, one per combination

    Raises ValueError for k out of range, repeated items, or a joiner that
    maps two different combinations to the same outcome.
    """
    items = list(items)
    k = _check_int('k', k)
    if k < 0 or k > len(items):
        raise ValueError(f'combination size k={k} is outside [0, {len(items)}]')
    if len(set(items)) != len(items):
        raise ValueError('items must be distinct; duplicates would produce the same combination twice')

    n_outcomes = choose(len(items), k)
    if n_outcomes > LARGE_SPACE_WARNING:
        warnings.warn(f'combos will build {n_outcomes:,} outcomes in memory', RuntimeWarning, stacklevel=2)

    space = {joiner(c) for c in combinations(items, k)}
    if len(space) != n_outcomes:
        raise ValueError(f'joiner is not injective for these items: {n_outcomes} combinations '
                         f'gave only {len(space)} distinct outcomes')
    return space


def urn_count(urn, draw, size):
    """ Closed-form number of ways to draw `size` balls from an urn so that
    exactly draw[color] balls of each named color are chosen; the rest of the
    draw comes from the colors not named in `draw`.

    urn : mapping color -> number of balls of that color
    draw : mapping color -> exact number wanted of that color
    size : total number of balls drawn

    An impossible draw (more balls than the urn holds of a color, or more
    named balls than `size`) counts 0.

    e.g. urn_count({'B': 6, 'R': 9, 'W': 8}, {'W': 4}, 6) == choose(8, 4) * choose(6 + 9, 2)
    """
    size = _check_int('size', size)
    unknown = set(draw) - set(urn)
    if unknown:
        raise ValueError(f'colors {sorted(unknown)} are not in the urn')
    negative = sorted(color for color, wanted in draw.items() if wanted < 0)
    if negative:
        raise ValueError(f'draw asks for a negative number of {negative} balls')
    named = sum(draw.values())
    # more named balls than balls drawn is an impossible event, not an error
    if named > size:
        return 0
    others = sum(n for color, n in urn.items() if color not in draw)

    count = 1
    for color, wanted in draw.items():
        available = urn[color]
        if wanted > available:
            return 0
        count *= choose(available, wanted)
    if size - named > others:
        return 0
    return count * choose(others, size - named)


def urn_probability(urn, draw, size):
    '''exact probability of urn_count's event when every size-ball draw is equally likely'''
    total = sum(urn.values())
    if size > total:
        raise ValueError(f'cannot draw {size} balls from an urn of {total}')
    return Fraction(urn_count(urn, draw, size), choose(total, size))
