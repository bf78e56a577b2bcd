"""Shared fixtures for voting system tests."""

import pytest

from tests.conftest import ALLY, BOB, CHARLIE


@pytest.fixture
def three_voters():
    """Three ballots, three candidates.

    First preferences: Ally 2, Bob 1.
    Approvals: Charlie 3, Ally 2, Bob 2.
    """
    return [
        [ALLY, BOB, CHARLIE],
        [ALLY, CHARLIE],
        [BOB, CHARLIE],
    ]


@pytest.fixture
def five_voters():
    """Five ballots where transfers decide the STV winner.

    Round 1: Ally 2, Charlie 2, Bob 1. Eliminate Bob.
    Bob's ballot moves to Charlie. Round 2: Charlie 3, Ally 2 → Charlie.
    """
    return [
        [ALLY, BOB, CHARLIE],
        [ALLY, CHARLIE],
        [BOB, CHARLIE],
        [CHARLIE, BOB],
        [CHARLIE, BOB],
    ]


@pytest.fixture
def two_way_tie():
    """Ally and Bob each have two first preferences and two approvals."""
    return [
        [ALLY],
        [BOB],
        [ALLY],
        [BOB],
    ]
