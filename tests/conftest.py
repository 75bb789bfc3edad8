"""Shared fixtures for the 8-puzzle tests."""

from collections import deque

import pytest

from eightpuzzle.domains.puzzle8 import GOAL, neighbors


@pytest.fixture(scope="session")
def goal_distances():
    """Exact move distance to GOAL for every solvable configuration (plain BFS)."""
    dist = {GOAL: 0}
    q = deque([GOAL])
    while q:
        s = q.popleft()
        for s2, _ in neighbors(s):
            if s2 not in dist:
                dist[s2] = dist[s] + 1
                q.append(s2)
    return dist


def is_adjacent_swap(a, b):
    """True when b is a with the blank swapped with one orthogonal neighbour."""
    diff = [i for i in range(9) if a[i] != b[i]]
    if len(diff) != 2:
        return False
    i, j = diff
    if 0 not in (a[i], a[j]) or a[i] != b[j] or a[j] != b[i]:
        return False
    (ri, ci), (rj, cj) = divmod(i, 3), divmod(j, 3)
    return abs(ri - rj) + abs(ci - cj) == 1
