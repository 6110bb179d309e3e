from __future__ import annotations
from typing import Dict, Iterable, List, Tuple
import random

State = Tuple[int, ...]  # 9-length tuple, row-major, 0 is blank
GOAL: State = (1,2,3,4,5,6,7,8,0)
N = 3

# Blank displacement per move label, in generation order
DIRECTIONS: Dict[str, Tuple[int, int]] = {
    "Up":    (-1, 0),
    "Down":  ( 1, 0),
    "Left":  ( 0, -1),
    "Right": ( 0, 1),
}

# Precomputed legal moves (label, target index) for each blank position
_MOVES: Dict[int, Tuple[Tuple[str, int], ...]] = {}
for _i in range(N * N):
    _r, _c = divmod(_i, N)
    _MOVES[_i] = tuple(
        (name, (_r + dr) * N + (_c + dc))
        for name, (dr, dc) in DIRECTIONS.items()
        if 0 <= _r + dr < N and 0 <= _c + dc < N
    )


class InvalidBoardError(ValueError):
    """Raised when a board is not a permutation of 0..8 laid out 3x3."""


def validate_board(cells: Iterable) -> State:
    """Turn a flat 9-sequence or a 3x3 grid into a State, or raise InvalidBoardError."""
    items = list(cells)
    is_row = [isinstance(item, (list, tuple)) for item in items]
    if any(is_row):
        if not all(is_row):
            raise InvalidBoardError("board mixes rows and single values")
        if len(items) != N:
            raise InvalidBoardError(f"grid needs {N} rows, got {len(items)}")
        flat: List = []
        for row in items:
            if len(row) != N:
                raise InvalidBoardError(f"each row needs {N} values, got {len(row)}")
            flat.extend(row)
    else:
        flat = items
    if len(flat) != N * N:
        raise InvalidBoardError(f"board needs {N * N} values, got {len(flat)}")
    out: List[int] = []
    for v in flat:
        if isinstance(v, bool) or not isinstance(v, int):
            try:
                v = int(str(v).strip())
            except ValueError:
                raise InvalidBoardError(f"not an integer: {v!r}") from None
        if not 0 <= v <= 8:
            raise InvalidBoardError(f"value out of range 0-8: {v}")
        out.append(v)
    dupes = sorted({v for v in out if out.count(v) > 1})
    if dupes:
        raise InvalidBoardError(f"duplicate values: {dupes}")
    return tuple(out)


def locate_blank(s: State) -> Tuple[int, int]:
    return divmod(s.index(0), N)


def apply_move(s: State, direction: str) -> State:
    """Swap the blank with its neighbor in `direction`. The neighbor must exist."""
    r, c = locate_blank(s)
    dr, dc = DIRECTIONS[direction]
    i, j = r * N + c, (r + dr) * N + (c + dc)
    lst = list(s)
    lst[i], lst[j] = lst[j], lst[i]
    return tuple(lst)


def legal_moves(s: State) -> List[str]:
    return [name for name, _ in _MOVES[s.index(0)]]


def successors(s: State) -> List[Tuple[str, State]]:
    """Return (move, next_state) pairs, Up/Down/Left/Right order, unit cost."""
    z = s.index(0)
    out: List[Tuple[str, State]] = []
    for name, j in _MOVES[z]:
        lst = list(s)
        lst[z], lst[j] = lst[j], lst[z]
        out.append((name, tuple(lst)))
    return out


def canonical_key(s: State) -> str:
    return "".join(str(v) for v in s)


_GOAL_KEY = canonical_key(GOAL)


def is_goal(s: State) -> bool:
    return canonical_key(s) == _GOAL_KEY


def is_solvable(s: State) -> bool:
    """8-puzzle solvability: parity of inversions must be even."""
    arr = [x for x in s if x != 0]
    inv = 0
    for i in range(len(arr)):
        for j in range(i+1, len(arr)):
            if arr[i] > arr[j]:
                inv += 1
    return (inv % 2) == 0


def scramble(depth: int, seed: int) -> State:
    """Scramble GOAL by performing 'depth' random legal blank moves (no immediate backtracks)."""
    rng = random.Random(seed)
    s = GOAL
    last_blank = None
    for _ in range(depth):
        z = s.index(0)
        cand = [j for _, j in _MOVES[z]]
        if last_blank in cand and len(cand) > 1:
            cand.remove(last_blank)
        j = rng.choice(cand)
        lst = list(s)
        lst[z], lst[j] = lst[j], lst[z]
        last_blank = z
        s = tuple(lst)
    return s


def make_unsolvable_variant(s: State) -> State:
    """Swap the first two non-blank tiles, flipping inversion parity."""
    lst = list(s)
    i = next(k for k, v in enumerate(lst) if v != 0)
    j = next(k for k, v in enumerate(lst[i + 1 :], start=i + 1) if v != 0)
    lst[i], lst[j] = lst[j], lst[i]
    return tuple(lst)


def format_board(s: State) -> str:
    return "\n".join(" ".join(str(v) for v in s[r*N:(r+1)*N]) for r in range(N))
