from typing import Dict, Tuple

from eightpuzzle.domains.puzzle8 import GOAL, N, State

_goal_pos: Dict[int, Tuple[int, int]] = {GOAL[i]: divmod(i, N) for i in range(N * N)}


def manhattan(s: State) -> int:
    """Sum of Manhattan distances to goal positions (blank ignored)."""
    dist = 0
    for idx, tile in enumerate(s):
        if tile == 0:
            continue
        r, c = divmod(idx, N)
        gr, gc = _goal_pos[tile]  # ((tile-1)//3, (tile-1)%3)
        dist += abs(r - gr) + abs(c - gc)
    return dist
