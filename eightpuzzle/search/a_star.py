from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set, Tuple
import heapq
from time import perf_counter
import itertools

from eightpuzzle.domains.puzzle8 import State, canonical_key, is_goal, successors
from eightpuzzle.heuristics.manhattan import manhattan


@dataclass(frozen=True)
class SearchNode:
    state: State
    g: int
    h: int
    parent: Optional["SearchNode"] = field(default=None, repr=False, compare=False)
    move: str = ""  # direction the blank moved to reach this node; "" for the root

    @property
    def f(self) -> int:
        return self.g + self.h


def reconstruct_path(node: Optional[SearchNode]) -> List[SearchNode]:
    path: List[SearchNode] = []
    while node is not None:
        path.append(node)
        node = node.parent
    path.reverse()
    return path


def path_steps(path: List[SearchNode]) -> List[Tuple[str, State]]:
    """(move, board) pairs from the initial board to the goal."""
    return [(n.move, n.state) for n in path]


def a_star(start: State, reopen: bool = False, return_path: bool = True):
    """
    Best-first search on f = g + manhattan, ties broken by insertion order.

    reopen=False keeps every expanded board closed for good, even if a cheaper
    path to it shows up later. reopen=True moves such a board back to the open
    set when the new g is strictly smaller (textbook A*).

    Returns a dict with the path (or None), its cost and search counters;
    termination is "ok" or "exhausted".
    """
    t0 = perf_counter()

    open_heap: List[Tuple[int, int, SearchNode]] = []
    counter = itertools.count()
    open_best: Dict[str, int] = {}  # key -> lowest f among live open entries
    closed: Dict[str, int] = {}     # key -> g at expansion

    h0 = manhattan(start)
    root = SearchNode(state=start, g=0, h=h0)
    heapq.heappush(open_heap, (root.f, next(counter), root))
    open_best[canonical_key(start)] = root.f

    expanded = 0
    generated = 0
    duplicates = 0
    reopened = 0
    seen_ever: Set[str] = {canonical_key(start)}

    peak_open = 1
    peak_closed = 0

    def result(node: Optional[SearchNode], termination: str):
        return {
            "path": reconstruct_path(node) if (node is not None and return_path) else None,
            "g": node.g if node is not None else None,
            "expanded": expanded,
            "generated": generated,
            "duplicates": duplicates,
            "reopened": reopened,
            "peak_open": peak_open,
            "peak_closed": peak_closed,
            "time": perf_counter() - t0,
            "algorithm": "A*",
            "policy": "reopen" if reopen else "closed",
            "termination": termination,
        }

    while open_heap:
        peak_open = max(peak_open, len(open_heap))
        _, _, node = heapq.heappop(open_heap)
        key = canonical_key(node.state)
        # stale entry: a copy of this board was already expanded at g <= node.g
        if key in closed and node.g >= closed[key]:
            continue
        open_best.pop(key, None)
        closed[key] = node.g
        peak_closed = max(peak_closed, len(closed))

        if is_goal(node.state):
            return result(node, "ok")

        expanded += 1
        for move, s2 in successors(node.state):
            k2 = canonical_key(s2)
            generated += 1
            if k2 in seen_ever:
                duplicates += 1
            else:
                seen_ever.add(k2)

            g2 = node.g + 1
            if k2 in closed:
                if not reopen or g2 >= closed[k2]:
                    continue
                del closed[k2]
                reopened += 1

            h2 = manhattan(s2)
            f2 = g2 + h2
            if k2 in open_best and open_best[k2] <= f2:
                continue

            child = SearchNode(state=s2, g=g2, h=h2, parent=node, move=move)
            heapq.heappush(open_heap, (f2, next(counter), child))
            open_best[k2] = f2

    # Open exhausted without finding goal
    return result(None, "exhausted")


def solve(start: State, reopen: bool = False) -> Optional[List[SearchNode]]:
    """Nodes from the initial board to the goal, or None if the goal is unreachable."""
    return a_star(start, reopen=reopen, return_path=True)["path"]
