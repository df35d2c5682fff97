"""Tests for Numerical Tic-Tac-Toe."""

from game import Move, Player, PlayerType
from tests.helpers import make_player, make_ui
from variants.numerical import NumericalBoard, NumericalUI

FIRST = Player("A", 'O')
SECOND = Player("B", 'X')


def test_first_player_must_write_odd_digit():
    board = NumericalBoard()
    assert not board.update_board(Move(0, 0, '2'))
    assert board.update_board(Move(0, 0, '5'))
    assert board.allowed_digits() == ['2', '4', '6', '8']


def test_second_player_must_write_even_digit():
    board = NumericalBoard()
    board.update_board(Move(0, 0, '5'))
    assert not board.update_board(Move(1, 1, '3'))
    assert board.update_board(Move(1, 1, '4'))


def test_digit_used_only_once():
    board = NumericalBoard()
    board.update_board(Move(0, 1, '5'))
    board.update_board(Move(0, 0, '4'))
    assert not board.update_board(Move(1, 1, '5'))
    assert board.move_count == 2
    assert board.used_digits() == {'4', '5'}


def test_non_digit_rejected():
    board = NumericalBoard()
    assert not board.update_board(Move(0, 0, 'X'))
    assert board.move_count == 0


def test_line_summing_to_fifteen_wins():
    board = NumericalBoard()
    for row, col, digit in [(0, 1, '5'), (0, 0, '4'), (2, 2, '1')]:
        assert board.update_board(Move(row, col, digit))
        assert not board.is_win(FIRST)
    assert board.update_board(Move(0, 2, '6'))
    assert board.is_win(SECOND)
    assert not board.is_draw(SECOND)


def test_full_line_with_other_sum_does_not_win():
    board = NumericalBoard()
    for row, col, digit in [(0, 0, '1'), (0, 1, '2'), (0, 2, '3')]:
        board.update_board(Move(row, col, digit))
    assert not board.is_win(FIRST)


def test_undo_frees_digit():
    board = NumericalBoard()
    board.update_board(Move(1, 1, '5'))
    assert board.update_board(Move.undo(1, 1))
    assert board.move_count == 0
    assert '5' in board.allowed_digits()


def test_available_moves_pair_cells_with_digits():
    board = NumericalBoard()
    moves = board.available_moves(FIRST.symbol)
    assert len(moves) == 9 * 5
    assert {m.symbol for m in moves} == set("13579")


def test_human_enters_cell_then_digit():
    board = NumericalBoard()
    board.update_board(Move(1, 1, '5'))
    board.update_board(Move(0, 0, '2'))
    ui = make_ui(NumericalUI, "0 1\n4\n5\n3\n")
    move = ui.get_move(make_player(board, 'O'))
    assert move == Move(0, 1, '3')
    assert ui.used_digits == {'2', '5'}
    assert ui.output_stream.getvalue().count("Please enter a valid input.") == 2


def test_computer_writes_allowed_digit():
    board = NumericalBoard()
    board.update_board(Move(1, 1, '5'))
    ui = make_ui(NumericalUI)
    move = ui.get_move(make_player(board, 'X', player_type=PlayerType.COMPUTER))
    assert move.symbol in "2468"
    assert board.update_board(move)
