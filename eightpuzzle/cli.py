#!/usr/bin/env python3
"""Terminal front end: read a board, solve it, print every step."""
from __future__ import annotations
import argparse, sys
from typing import Callable, List, Optional

from eightpuzzle.domains.puzzle8 import (
    GOAL, N, State, InvalidBoardError, validate_board, format_board, is_solvable,
)
from eightpuzzle.search.a_star import solve, path_steps


def read_board_interactive(input_fn: Callable[[str], str] = input,
                           print_fn: Callable[..., None] = print) -> State:
    """Prompt cell by cell; re-ask on anything that is not an unused integer 0-8.

    Raises InvalidBoardError if the input runs out before the board is full.
    """
    print_fn("Enter the initial board configuration (0-8):")
    cells: List[int] = []
    for i in range(N):
        j = 0
        while j < N:
            try:
                raw = input_fn(f"Enter number at position [{i},{j}]: ")
            except EOFError:
                raise InvalidBoardError(f"input ended after {len(cells)} of {N * N} values") from None
            try:
                v = int(raw.strip())
            except ValueError:
                v = -1
            if not 0 <= v <= 8:
                print_fn("Invalid input. Please enter a number between 0 and 8.")
                continue
            if v in cells:
                print_fn(f"Invalid input. {v} is already on the board.")
                continue
            cells.append(v)
            j += 1
    return validate_board(cells)


def print_solution(start: State, reopen: bool = False, check_solvable: bool = False,
                   print_fn: Callable[..., None] = print) -> int:
    print_fn("Initial Board:")
    print_fn(format_board(start))
    print_fn("Final Board:")
    print_fn(format_board(GOAL))
    print_fn("Step-by-Step Transformation:")

    if check_solvable and not is_solvable(start):
        print_fn("No solution found.")
        return 1
    path = solve(start, reopen=reopen)
    if path is None:
        print_fn("No solution found.")
        return 1
    for move, board in path_steps(path):
        print_fn("Move: " + move)
        print_fn(format_board(board))
        print_fn()
    print_fn(f"Solved in {len(path) - 1} moves.")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Solve a 3x3 sliding-tile puzzle with best-first search")
    ap.add_argument("cells", nargs="*", help="9 values 0-8, row-major (prompted if omitted)")
    ap.add_argument("--reopen", action="store_true",
                    help="Reopen expanded boards when a cheaper path is found")
    ap.add_argument("--check-solvable", action="store_true",
                    help="Report odd-parity boards as unsolvable without searching")
    args = ap.parse_args(argv)

    if args.cells:
        try:
            start = validate_board(args.cells)
        except InvalidBoardError as e:
            ap.error(str(e))
    else:
        try:
            start = read_board_interactive()
        except InvalidBoardError as e:
            ap.error(str(e))

    return print_solution(start, reopen=args.reopen, check_solvable=args.check_solvable)


if __name__ == "__main__":
    sys.exit(main())
