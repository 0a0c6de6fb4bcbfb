# Probability Utilities
# This module provides utility functions for probability calculation tasks:
# the probability of an event over a finite sample space, event selection,
# frequency distributions and sampling.
#
# A sample space is either
#   - a set of outcomes, each equally likely, or
#   - a distribution: a mapping (Dist/Counter/dict or pandas Series) from
#     outcome to a non-negative frequency. Frequencies need not sum to 1.
# An event is a set of outcomes (a mapping's keys are used if one is given;
# a bare str is a single outcome, so P('heads', space) == P({'heads'}, space)).
import math
from collections import Counter
from collections.abc import Mapping
from fractions import Fraction
from numbers import Integral, Rational

import numpy as np
import pandas as pd

# A distribution maps outcome -> frequency, and Counter already accepts every
# form we want: Dist({1, 2, 3}), Dist('THHHTTHHT'), Dist(H=50, T=50)
Dist = Counter


def is_distribution(space):
    return isinstance(space, (Mapping, pd.Series))


def _weight(outcome, frequency):
    # ints and rationals stay exact, anything else becomes a float
    if isinstance(frequency, Integral):
        frequency = int(frequency)
    elif isinstance(frequency, Rational):
        frequency = Fraction(frequency)
    else:
        frequency = float(frequency)
        if math.isnan(frequency):
            raise ValueError(f'frequency of {outcome!r} is NaN')
    if frequency < 0:
        raise ValueError(f'frequency of {outcome!r} is negative ({frequency})')
    return frequency


def _weights(space):
    '''outcome -> frequency for a distribution; repeated Series labels are summed'''
    weights = {}
    for outcome, frequency in space.items():
        weights[outcome] = weights.get(outcome, 0) + _weight(outcome, frequency)
    return weights


def frequencies(space):
    '''outcome -> frequency for any sample space; each outcome of a uniform space has frequency 1'''
    if is_distribution(space):
        return _weights(space)
    return dict.fromkeys(_as_set(space), 1)


def _as_set(collection):
    if isinstance(collection, (set, frozenset)):
        return collection
    if is_distribution(collection):
        return set(collection.keys())
    return set(collection)


def _as_event(event):
    # a bare str is one outcome, not a collection of characters
    if isinstance(event, str):
        return {event}
    return _as_set(event)


def _ratio(num, den):
    if isinstance(num, float) or isinstance(den, float):
        return num / den
    return Fraction(num, den)


def cases(space):
    '''number of cases in the sample space: its size, or the sum of its frequencies'''
    if is_distribution(space):
        return sum(_weights(space).values())
    return len(_as_set(space))


def favorable(event, space):
    '''outcomes of the sample space that are in the event.
    Returns a set for a uniform space, a Dist (with frequencies) for a distribution.'''
    event = _as_event(event)
    if is_distribution(space):
        return Dist({outcome: w for outcome, w in _weights(space).items() if outcome in event})
    return _as_set(space) & event


def P(event, space):
    """ The probability of an event, given a sample space.

    Laplace: the number of favorable cases divided by the number of all cases.
    For a uniform (set) space this is |event ∩ space| / |space| as an exact Fraction.
    For a distribution it is the summed frequency of the outcomes in both the
    event and the space over the summed frequency of the space. The result is a
    Fraction when every frequency is an int or rational, and a float otherwise.

    Outcomes of the event that are not in the space count as zero. An event
    is a property of outcomes in general, not a subset of this particular space.

    Raises ZeroDivisionError for an empty space or one whose frequencies total zero.
    """
    if is_distribution(space):
        weights = _weights(space)
        total = sum(weights.values())
        if total == 0:
            raise ZeroDivisionError('probability is undefined: sample space has zero total frequency')
        event = _as_event(event)
        num = sum(w for outcome, w in weights.items() if outcome in event)
        return _ratio(num, total)

    space = _as_set(space)
    if not space:
        raise ZeroDivisionError('probability is undefined: sample space is empty')
    return Fraction(len(_as_event(event) & space), len(space))


def select(space, predicate):
    '''the event: the set of outcomes in the space for which predicate(outcome) is true'''
    return {outcome for outcome in _as_set(space) if predicate(outcome)}


def such_that(predicate, space):
    '''like select, but keeps the type of the space: a distribution gives back a
    Dist holding the frequencies of the matching outcomes'''
    if is_distribution(space):
        return Dist({outcome: w for outcome, w in _weights(space).items() if predicate(outcome)})
    return select(space, predicate)


def count_token(outcome, token):
    '''how many times token occurs in a composite outcome.
    'R1 R2 B3' and ('R1', 'R2', 'B3') both count 2 for token 'R'.
    This is plain substring counting: with colors 'R' and 'BR' the
    outcome 'R1 BR1' counts 2 for 'R'. Pick labels where no token is
    part of another, or pass a custom predicate to select().'''
    if isinstance(outcome, str):
        return outcome.count(token)
    if isinstance(outcome, (tuple, list, set, frozenset)):
        return sum(str(item).count(token) for item in outcome)
    return str(outcome).count(token)


def exactly(n, token):
    '''predicate: outcome contains token exactly n times'''
    def predicate(outcome):
        return count_token(outcome, token) == n
    predicate.__name__ = f'exactly_{n}_{token}'
    return predicate


def sample(space, n=1, random_state=None):
    """ Draw n outcomes from the sample space, with replacement.

    A uniform space is sampled uniformly, a distribution in proportion to the
    frequencies. Outcomes are put in str() order first so a given random_state
    (seed or numpy Generator) always reproduces the same draw.
    """
    rng = np.random.default_rng(random_state)
    if is_distribution(space):
        weights = _weights(space)
        outcomes = sorted(weights, key=str)
        p = np.array([float(weights[outcome]) for outcome in outcomes])
        if p.sum() == 0:
            raise ValueError('cannot sample from a sample space with zero total frequency')
        index = rng.choice(len(outcomes), size=n, p=p / p.sum())
    else:
        outcomes = sorted(_as_set(space), key=str)
        if not outcomes:
            raise ValueError('cannot sample from an empty sample space')
        index = rng.integers(0, len(outcomes), size=n)
    return [outcomes[i] for i in index]
