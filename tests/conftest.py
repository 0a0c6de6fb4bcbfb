import matplotlib

matplotlib.use('Agg')

import pytest

from PP_probability import ds_combinatorics
from PP_probability import ds_outcomes


@pytest.fixture
def D():
    return ds_outcomes.die(6)


@pytest.fixture(scope='session')
def urn():
    return ds_outcomes.make_urn(B=6, R=9, W=8)


@pytest.fixture(scope='session')
def U6(urn):
    return ds_combinatorics.combos(urn, 6)


@pytest.fixture(scope='session')
def Hands():
    # tuples of 'A♥'-style cards: rank is card[0], suit is card[1]
    return ds_combinatorics.combos(ds_outcomes.make_deck(), 5, joiner=tuple)
