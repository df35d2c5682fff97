"""Tests for Obstacles Tic-Tac-Toe."""

from game import GameManager, Move, Player, PlayerType, RandomSource
from tests.helpers import ScriptedRandom, make_player, make_ui, place
from variants.obstacles import OBSTACLE, ObstaclesBoard, ObstaclesUI

X = Player("A", 'X')
O = Player("B", 'O')


def count_obstacles(board):
    return int((board.grid == OBSTACLE).sum())


def test_two_obstacles_per_placement():
    board = ObstaclesBoard(ScriptedRandom())
    place(board, 'X', (5, 5))

    assert count_obstacles(board) == 2
    # Scripted source always picks the first free cell
    assert board.get_cell(0, 0) == OBSTACLE
    assert board.get_cell(0, 1) == OBSTACLE
    assert len(board.available) == 33
    assert board.move_count == 1


def test_obstacle_cells_cannot_be_played():
    board = ObstaclesBoard(ScriptedRandom())
    place(board, 'X', (5, 5))
    assert not board.update_board(Move(0, 0, 'O'))
    assert board.move_count == 1


def test_obstacles_per_move_is_configurable():
    board = ObstaclesBoard(ScriptedRandom(), obstacles_per_move=1)
    place(board, 'X', (3, 3))
    assert count_obstacles(board) == 1


def test_obstacles_stop_when_board_fills():
    board = ObstaclesBoard(ScriptedRandom())
    for _ in range(12):
        row, col = board.empty_cells()[-1]
        place(board, 'X' if board.move_count % 2 == 0 else 'O', (row, col))
    assert board.is_full()
    assert count_obstacles(board) == 24


def test_four_in_a_row_through_last_move():
    board = ObstaclesBoard(ScriptedRandom())
    place(board, 'X', (5, 0), (5, 1), (5, 2))
    assert not board.is_win(X)
    place(board, 'X', (5, 3))
    assert board.is_win(X)
    assert not board.is_win(O)


def test_diagonal_win():
    board = ObstaclesBoard(ScriptedRandom())
    place(board, 'O', (2, 2), (3, 3), (5, 5), (4, 4))
    assert board.is_win(O)


def test_only_last_move_is_checked():
    board = ObstaclesBoard(ScriptedRandom())
    place(board, 'X', (5, 0), (5, 1), (5, 2), (5, 3))
    place(board, 'O', (4, 5))
    assert not board.is_win(X)


def test_undo_is_rejected():
    board = ObstaclesBoard(ScriptedRandom())
    place(board, 'X', (5, 5))
    assert not board.update_board(Move.undo(5, 5))


def test_random_game_terminates():
    board = ObstaclesBoard(RandomSource(11))
    ui = make_ui(ObstaclesUI, rng=RandomSource(12))
    players = [Player("A", 'X', PlayerType.COMPUTER), Player("B", 'O', PlayerType.COMPUTER)]
    result = GameManager(board, players, ui).run()
    assert result['moves'] <= 12
    assert result['draw'] or board.get_cell(*board.last_move) == result['symbol']


def test_human_prompt_range():
    board = ObstaclesBoard(ScriptedRandom())
    ui = make_ui(ObstaclesUI, "4 5\n")
    assert ui.get_move(make_player(board, 'X')) == Move(4, 5, 'X')
    assert "(0 to 5)" in ui.output_stream.getvalue()
