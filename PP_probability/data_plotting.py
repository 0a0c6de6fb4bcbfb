import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import seaborn as sns

from PP_probability import ds_probability

dlblue = '#0096ff'; dlorange = '#FF9300'; dlpurple='#7030A0'


def distribution_frame(space):
    '''outcomes of a sample space with their normalized frequencies, as a DataFrame
    sorted by outcome label; a uniform space gives every outcome the same probability'''
    weights = ds_probability.frequencies(space)
    total = sum(weights.values())
    if total == 0:
        raise ZeroDivisionError('cannot normalize a sample space with zero total frequency')
    outcomes = sorted(weights, key=str)
    frequency = np.array([float(weights[outcome]) for outcome in outcomes])
    return pd.DataFrame({'outcome': [str(outcome) for outcome in outcomes],
                         'frequency': frequency,
                         'probability': frequency / frequency.sum()})


def plot_distribution(space, title='', figsize=(10,4), ax=None, show=False):
    ''' bar plot of the probability of every outcome in the sample space.
    Meant for small spaces (dice, coins, sums of dice), not for millions of hands.
    returns the matplotlib Axes'''
    df = distribution_frame(space)
    if ax is None:
        _, ax = plt.subplots(figsize=figsize, layout='constrained')
    sns.barplot(data=df, x='outcome', y='probability', color=dlblue, ax=ax)
    # reference line for a uniform distribution over the same outcomes
    ax.axhline(1 / len(df), color=dlorange, linestyle='--', label='uniform')
    ax.set_title(title if title else 'Distribution of outcomes')
    ax.set_ylabel('P(outcome)')
    ax.legend()
    if show:
        plt.show()
    return ax


def plot_event_probabilities(events, space, title='', figsize=(8,4), ax=None, show=False):
    ''' horizontal bar plot of P(event, space) for a dict of named events
    returns the matplotlib Axes'''
    df = pd.DataFrame({'event': list(events),
                       'probability': [float(ds_probability.P(event, space)) for event in events.values()]})
    if ax is None:
        _, ax = plt.subplots(figsize=figsize, layout='constrained')
    sns.barplot(data=df, y='event', x='probability', color=dlpurple, ax=ax)
    ax.set_xlim(0, 1)
    for container in ax.containers:
        ax.bar_label(container, fmt='%.4f')
    ax.set_title(title if title else 'Probability of events')
    if show:
        plt.show()
    return ax
