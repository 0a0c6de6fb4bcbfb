""" Reporting and cross-check utilities for finite probability problems"""
from collections import namedtuple

import pandas as pd
from scipy.special import comb
from scipy.stats import hypergeom, multivariate_hypergeom
from tabulate import tabulate

from PP_probability import ds_combinatorics
from PP_probability import ds_probability

# one row of a cross_check: an enumerated answer against a closed-form one
Check = namedtuple('Check', ['name', 'enumerated', 'analytic'])


def probability_table(events, space, decimals=6):
    """ Probability of several named events over one sample space.

    Parameters
    ----------
    events : dict of event name -> event (set of outcomes)
    space : sample space (set or distribution)
    decimals : int, rounding of the decimal column

    Returns
    -------
    df : pd.DataFrame indexed by event name with columns
        favorable, cases, probability (exact, as str) and decimal
    """
    total = ds_probability.cases(space)
    rows = []
    for name, event in events.items():
        p = ds_probability.P(event, space)
        rows.append({'event': name,
                     'favorable': ds_probability.cases(ds_probability.favorable(event, space)),
                     'cases': total,
                     'probability': str(p),
                     'decimal': round(float(p), decimals)})
    return pd.DataFrame(rows, columns=['event', 'favorable', 'cases', 'probability', 'decimal']).set_index('event')


def print_probability_report(events, space, decimals=6):
    '''print the probability_table of the events using tabulate library'''
    df = probability_table(events, space, decimals=decimals)
    print(tabulate(df.reset_index(), headers=['event', 'favorable', 'cases', 'P (exact)', 'P (decimal)'],
                   showindex=False, floatfmt=f'.{decimals}f'))
    return df


def verify_count(event, space, expected_count):
    '''cases(space) * P(event, space) == expected_count
    Since P computes a ratio and a closed form computes a count, multiply the
    ratio back out by the size of the sample space so both sides are counts.'''
    return ds_probability.cases(space) * ds_probability.P(event, space) == expected_count


def pass_fail(checks):
    '''decide for each Check whether the enumerated and the analytic answers agree'''
    return ['agree' if check.enumerated == check.analytic else 'DISAGREE' for check in checks]


def cross_check(checks):
    '''print the checks (a list of Check) using tabulate library.
       Enumerated answers come from P over an explicit sample space, analytic
       ones from choose() arithmetic; both are exact so they must be equal.
       returns list of bool, one per check'''
    result = pass_fail(checks)
    array = []
    for check, verdict in zip(checks, result):
        array.append([f'{check.name:30}', str(check.enumerated), str(check.analytic), verdict])
    print(tabulate(array, headers=['check', 'enumerated', 'analytic', 'result']))
    return [verdict == 'agree' for verdict in result]


def choose_scipy(n, k):
    '''independent count from scipy.special.comb with exact integer arithmetic'''
    return int(comb(n, k, exact=True))


def urn_probability_scipy(urn, draw, size):
    """ Float probability of the urn_count event computed by scipy's
    hypergeometric distributions, as a cross-check of the exact Fraction.

    With one named color this is scipy.stats.hypergeom; with several the
    colors not in `draw` are pooled into one 'other' category and the
    multivariate hypergeometric pmf is used.
    """
    total = sum(urn.values())
    if size > total:
        raise ValueError(f'cannot draw {size} balls from an urn of {total}')
    unknown = set(draw) - set(urn)
    if unknown:
        raise ValueError(f'colors {sorted(unknown)} are not in the urn')
    negative = sorted(color for color, wanted in draw.items() if wanted < 0)
    if negative:
        raise ValueError(f'draw asks for a negative number of {negative} balls')
    named = list(draw)
    others = total - sum(urn[color] for color in named)
    m = [urn[color] for color in named] + [others]
    x = [draw[color] for color in named] + [size - sum(draw.values())]
    # impossible draws count 0, as in urn_count
    if any(xi < 0 or xi > mi for xi, mi in zip(x, m)):
        return 0.0
    if len(named) == 1:
        color = named[0]
        # hypergeom(M=population, n=successes, N=draws)
        return float(hypergeom(total, urn[color], size).pmf(draw[color]))
    return float(multivariate_hypergeom.pmf(x=x, m=m, n=size))


def urn_checks(space, urn, draws, size):
    """ Build Checks comparing P over an enumerated urn sample space with
    ds_combinatorics.urn_probability for each draw.

    space : enumerated sample space, e.g. combos(make_urn(B=6, R=9, W=8), 6)
    urn : mapping color -> count
    draws : dict of check name -> draw mapping (color -> exact count)
    """
    checks = []
    for name, draw in draws.items():
        event = space
        for color, wanted in draw.items():
            event = ds_probability.select(event, ds_probability.exactly(wanted, color))
        checks.append(Check(name, ds_probability.P(event, space),
                            ds_combinatorics.urn_probability(urn, draw, size)))
    return checks

