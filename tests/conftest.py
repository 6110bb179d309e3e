"""Pytest configuration and fixtures for the 8-puzzle tests."""

from collections import deque

import pytest

from eightpuzzle.domains.puzzle8 import GOAL, successors


@pytest.fixture(scope="session")
def true_distances():
    """Exact move counts to GOAL for every solvable board (reverse BFS)."""
    dist = {GOAL: 0}
    q = deque([GOAL])
    while q:
        s = q.popleft()
        for _, s2 in successors(s):
            if s2 not in dist:
                dist[s2] = dist[s] + 1
                q.append(s2)
    return dist


@pytest.fixture
def one_move_board():
    """Goal with the blank and the 6 swapped."""
    return (1, 2, 3, 4, 5, 0, 7, 8, 6)


@pytest.fixture
def classic_board():
    return (8, 1, 3, 4, 0, 2, 7, 6, 5)


@pytest.fixture
def unsolvable_board():
    """Goal with tiles 1 and 2 swapped; odd parity."""
    return (2, 1, 3, 4, 5, 6, 7, 8, 0)
