"""Tests for the outcome builders."""

import pytest

from PP_probability.ds_outcomes import RANKS, SUITS, balls, die, make_deck, make_urn


def test_die():
    assert die() == {1, 2, 3, 4, 5, 6}
    assert die(4) == {1, 2, 3, 4}
    with pytest.raises(ValueError):
        die(0)


def test_deck_has_52_distinct_cards():
    deck = make_deck()
    assert len(deck) == len(set(deck)) == 52
    assert 'J♥' in deck
    assert 'T♣' in deck


def test_deck_from_custom_ranks_and_suits():
    assert make_deck('AK', 'xy') == ['Ax', 'Kx', 'Ay', 'Ky']


def test_every_rank_and_suit_is_one_character():
    assert len(RANKS) == 13
    assert len(SUITS) == 4


def test_balls_are_distinctly_labeled():
    assert balls('B', 3) == ['B1', 'B2', 'B3']
    assert balls('R', 0) == []
    with pytest.raises(ValueError):
        balls('R', -1)


def test_make_urn():
    urn = make_urn(B=6, R=9, W=8)
    assert len(urn) == len(set(urn)) == 23
    assert urn[:2] == ['B1', 'B2']
    assert urn[-1] == 'W8'
