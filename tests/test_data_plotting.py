"""Tests for the distribution plots (Agg backend, see conftest)."""

import matplotlib.pyplot as plt
import pytest

from PP_probability.data_plotting import distribution_frame, plot_distribution, plot_event_probabilities
from PP_probability.ds_probability import Dist


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close('all')


def test_distribution_frame_uniform(D):
    df = distribution_frame(D)
    assert list(df['outcome']) == ['1', '2', '3', '4', '5', '6']
    assert df['probability'].sum() == pytest.approx(1.0)
    assert df['probability'].nunique() == 1


def test_distribution_frame_weighted():
    df = distribution_frame(Dist(H=3, T=1))
    assert list(df['probability']) == pytest.approx([0.75, 0.25])


def test_distribution_frame_zero_total():
    with pytest.raises(ZeroDivisionError):
        distribution_frame({'H': 0})


def test_plot_distribution(D):
    ax = plot_distribution(D, title='fair die')
    assert ax.get_title() == 'fair die'
    assert len(ax.patches) == 6


def test_plot_event_probabilities(D):
    ax = plot_event_probabilities({'even': {2, 4, 6}, 'six': {6}}, D)
    assert ax.get_title() == 'Probability of events'
    assert ax.get_xlim() == (0, 1)
    assert len(ax.patches) == 2
