"""Tests for Word Tic-Tac-Toe."""

import pytest

from dictionary import DictionaryLoadError, WordDictionary
from game import Move, Player
from tests.helpers import make_player, make_ui
from variants.word import WordBoard, WordUI

PLAYER = Player("A", '-')


@pytest.fixture
def board():
    return WordBoard(WordDictionary(["CAT", "SUN"]))


def write(board, *letters):
    for (row, col), letter in letters:
        assert board.update_board(Move(row, col, letter))


def test_row_spelling_word_wins(board):
    write(board, ((0, 0), 'c'), ((0, 1), 'a'))
    assert not board.is_win(PLAYER)
    write(board, ((0, 2), 't'))
    assert board.is_win(PLAYER)
    assert board.get_cell(0, 0) == 'C'


def test_reversed_diagonal_wins(board):
    write(board, ((0, 0), 'N'), ((1, 1), 'U'), ((2, 2), 'S'))
    assert board.is_win(PLAYER)


def test_non_word_line(board):
    write(board, ((1, 0), 'D'), ((1, 1), 'O'), ((1, 2), 'G'))
    assert board.completed_words() == ["DOG"]
    assert not board.is_win(PLAYER)


@pytest.mark.parametrize("symbol", ['1', 'AB', '-', ''])
def test_only_single_letters(board, symbol):
    assert not board.update_board(Move(0, 0, symbol))
    assert board.move_count == 0


def test_draw_when_full_without_word(board):
    for row in range(3):
        for col in range(3):
            write(board, ((row, col), 'Z'))
    assert board.is_draw(PLAYER)


def test_undo(board):
    write(board, ((2, 2), 'Q'))
    assert board.update_board(Move.undo(2, 2))
    assert board.is_empty(2, 2)


def test_missing_dictionary_fails_at_construction(tmp_path):
    with pytest.raises(DictionaryLoadError):
        WordBoard.from_file(tmp_path / "missing.txt")


def test_human_enters_cell_then_letter(board):
    ui = make_ui(WordUI, "1 1\n7\nk\n")
    assert ui.get_move(make_player(board, '-')) == Move(1, 1, 'K')


def test_players_share_dash_symbol():
    ui = make_ui(WordUI, "A\n1\nB\n1\n")
    players = ui.setup_players()
    assert [p.symbol for p in players] == ['-', '-']
    assert "Creating human player: A\n" in ui.output_stream.getvalue()
