"""Tests for Diamond Tic-Tac-Toe."""

import pytest

from game import VOID, Move, Player
from tests.helpers import make_ui, place
from variants.diamond import DiamondBoard, DiamondUI, is_diamond_cell

X = Player("A", 'X')
O = Player("B", 'O')


def test_shape():
    board = DiamondBoard()
    assert board.valid_cell_count == 13
    assert board.get_cell(0, 0) == VOID
    assert board.get_cell(0, 2) == '.'
    assert is_diamond_cell(2, 4)
    assert not is_diamond_cell(1, 4)


@pytest.mark.parametrize("cell", [(0, 0), (0, 1), (1, 4), (4, 3), (5, 2)])
def test_cells_outside_diamond_rejected(cell):
    board = DiamondBoard()
    assert not board.update_board(Move(*cell, 'X'))
    assert board.move_count == 0


def test_lines_are_unique_and_inside():
    board = DiamondBoard()
    for lines in (board.lines3, board.lines4):
        assert len(set(lines)) == len(lines)
        assert all(is_diamond_cell(r, c) for line in lines for r, c in line.coords)
    # Row 2 holds the only two horizontal lines of four
    assert sorted(line.coords[0] for line in board.lines4 if line.direction == 0) == [(2, 0), (2, 1)]


def test_three_and_four_in_different_directions_win():
    board = DiamondBoard()
    # Horizontal four plus a vertical three sharing (2, 1)
    place(board, 'X', (2, 0), (2, 1), (2, 2), (2, 3), (1, 1), (3, 1))
    assert board.is_win(X)
    assert not board.is_win(O)


def test_same_direction_does_not_win():
    board = DiamondBoard()
    place(board, 'X', (2, 0), (2, 1), (2, 2), (2, 3), (1, 1), (1, 2), (1, 3))
    assert not board.is_win(X)


def test_four_alone_does_not_win():
    board = DiamondBoard()
    place(board, 'O', (0, 2), (1, 2), (2, 2), (3, 2))
    assert not board.is_win(O)


def test_draw_after_every_cell_is_played():
    board = DiamondBoard()
    board.move_count = 12
    assert not board.is_draw(X)
    board.move_count = 13
    assert board.is_draw(X)


def test_undo():
    board = DiamondBoard()
    place(board, 'X', (2, 2))
    assert board.update_board(Move.undo(2, 2))
    assert board.move_count == 0


def test_display_keeps_void_corners_blank():
    board = DiamondBoard()
    ui = make_ui(DiamondUI)
    ui.display_board(board)
    lines = ui.output_stream.getvalue().splitlines()
    assert '|' not in "".join(lines)
    assert lines[2].split() == ['0', '.']
