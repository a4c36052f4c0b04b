"""Shared fixtures for tally method tests."""

import pytest


@pytest.fixture
def descending_then_rise():
    """Counts [3, 1, 2].

    Index 0 has the most votes, but index 2 beats its neighbour. The
    adjacent scan picks 2; a plurality count picks 0.
    """
    return [3, 1, 2]


@pytest.fixture
def clear_winner():
    """Counts [0, 2, 5, 1]. Every method picks index 2."""
    return [0, 2, 5, 1]


@pytest.fixture
def all_tied():
    """Counts [2, 2, 2]. No proposal beats another; index 0 wins."""
    return [2, 2, 2]


@pytest.fixture
def late_tie():
    """Counts [1, 4, 0, 4].

    Index 3 beats its neighbour (0), so the adjacent scan picks 3. Plurality
    keeps the first of the two proposals with 4 votes (index 1).
    """
    return [1, 4, 0, 4]
