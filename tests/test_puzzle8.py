import pytest

from eightpuzzle.domains.puzzle8 import (
    GOAL,
    InvalidBoardError,
    apply_move,
    canonical_key,
    format_board,
    is_goal,
    is_solvable,
    legal_moves,
    locate_blank,
    make_unsolvable_variant,
    scramble,
    successors,
    validate_board,
)


def test_locate_blank():
    assert locate_blank(GOAL) == (2, 2)
    assert locate_blank((0, 1, 2, 3, 4, 5, 6, 7, 8)) == (0, 0)
    assert locate_blank((1, 2, 3, 4, 0, 5, 6, 7, 8)) == (1, 1)


def test_apply_move_directions():
    center = (1, 2, 3, 4, 0, 5, 6, 7, 8)
    assert apply_move(center, "Up") == (1, 0, 3, 4, 2, 5, 6, 7, 8)
    assert apply_move(center, "Down") == (1, 2, 3, 4, 7, 5, 6, 0, 8)
    assert apply_move(center, "Left") == (1, 2, 3, 0, 4, 5, 6, 7, 8)
    assert apply_move(center, "Right") == (1, 2, 3, 4, 5, 0, 6, 7, 8)


def test_apply_move_does_not_mutate():
    before = (1, 2, 3, 4, 0, 5, 6, 7, 8)
    after = apply_move(before, "Up")
    assert before == (1, 2, 3, 4, 0, 5, 6, 7, 8)
    assert after is not before


@pytest.mark.parametrize("blank, expected", [
    (0, ["Down", "Right"]),
    (1, ["Down", "Left", "Right"]),
    (4, ["Up", "Down", "Left", "Right"]),
    (8, ["Up", "Left"]),
])
def test_legal_moves_stay_on_grid(blank, expected):
    tiles = [t for t in range(1, 9)]
    tiles.insert(blank, 0)
    assert legal_moves(tuple(tiles)) == expected


def test_successors_are_permutations(true_distances):
    for s in list(true_distances)[:2000]:
        succ = successors(s)
        assert 2 <= len(succ) <= 4
        for move, s2 in succ:
            assert sorted(s2) == list(range(9))
            assert apply_move(s, move) == s2


def test_canonical_key():
    assert canonical_key(GOAL) == "123456780"
    assert canonical_key(GOAL) == canonical_key(tuple(GOAL))


def test_canonical_key_injective(true_distances):
    keys = {canonical_key(s) for s in true_distances}
    assert len(keys) == len(true_distances)


def test_is_goal():
    assert is_goal(GOAL)
    assert not is_goal((1, 2, 3, 4, 5, 6, 7, 0, 8))


def test_is_solvable(one_move_board, unsolvable_board):
    assert is_solvable(GOAL)
    assert is_solvable(one_move_board)
    assert not is_solvable(unsolvable_board)
    assert not is_solvable(make_unsolvable_variant(one_move_board))


def test_scramble_is_seeded_and_solvable():
    assert scramble(20, 7) == scramble(20, 7)
    for seed in range(20):
        s = scramble(15, seed)
        assert sorted(s) == list(range(9))
        assert is_solvable(s)
    assert scramble(0, 3) == GOAL


def test_validate_board_accepts_grid_and_strings():
    assert validate_board([[1, 2, 3], [4, 5, 6], [7, 8, 0]]) == GOAL
    assert validate_board(["1", "2", "3", "4", "5", "6", "7", "8", "0"]) == GOAL


@pytest.mark.parametrize("cells, fragment", [
    ([1, 2, 3], "needs 9"),
    ([1, 2, 3, 4, 5, 6, 7, 8, 9], "out of range"),
    ([1, 1, 3, 4, 5, 6, 7, 8, 0], "duplicate"),
    (["a", 2, 3, 4, 5, 6, 7, 8, 0], "not an integer"),
    ([[1, 2], [3, 4, 5], [6, 7, 8]], "each row"),
    ([1, 2, 3, [4, 5, 6], 7, 8, 0], "mixes rows"),
    ([[1, 2, 3], [4, 5, 6]], "needs 3 rows"),
])
def test_validate_board_rejects(cells, fragment):
    with pytest.raises(InvalidBoardError, match=fragment):
        validate_board(cells)


def test_format_board():
    assert format_board(GOAL) == "1 2 3\n4 5 6\n7 8 0"
