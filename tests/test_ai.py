"""Unit tests for the scripted classic opponent."""
import random

from conftest import board_from
from tictactoe.ai import choose_move, find_winning_move, take_random_corner


def test_takes_win():
    assert choose_move(board_from("XX_OO____"), "X", "O") == 2


def test_win_beats_block():
    # O threatens the top row (checked first) but X can finish the bottom row.
    assert choose_move(board_from("OO____XX_"), "X", "O") == 8


def test_blocks_opponent_top_row():
    assert choose_move(board_from("OO_X_____"), "X", "O") == 2


def test_blocks_opponent_middle_row():
    assert choose_move(board_from("___OO_X__"), "X", "O") == 5


def test_takes_center_when_nothing_urgent():
    assert choose_move(board_from("O________"), "X", "O") == 4


def test_takes_a_free_corner(rng):
    board = board_from("O___X____")
    for _ in range(20):
        assert choose_move(board, "X", "O", rng=rng) in (2, 6, 8)


def test_corner_choice_follows_injected_rng():
    board = board_from("____O____")
    picks = {take_random_corner(board, random.Random(seed)) for seed in range(50)}
    assert picks == {0, 2, 6, 8}
    assert take_random_corner(board, random.Random(7)) == take_random_corner(board, random.Random(7))


def test_falls_back_to_lowest_open_cell():
    # Centre and corners taken, no line to win or block.
    assert choose_move(board_from("X_OOXXX_O"), "X", "O") == 1


def test_full_board_has_no_move():
    assert choose_move(board_from("OXOOXXXOO"), "X", "O") is None


def test_find_winning_move_uses_line_order():
    # O threatens both the top row (at 2) and the left column (at 6).
    assert find_winning_move(board_from("OO_O_____"), "O") == 2
    assert find_winning_move(board_from("OO_O_____"), "X") is None
