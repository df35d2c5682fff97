"""Tests for console input handling and player setup."""

import pytest

from game import Move, PlayerType
from tests.helpers import ScriptedRandom, make_player, make_ui, place
from variants.classic import ClassicBoard, ClassicUI


class TestReading:

    def test_read_ints_reprompts_on_garbage(self):
        ui = make_ui(ClassicUI, "a b\n1\n1 2\n")
        assert ui.read_ints("> ") == (1, 2)
        assert ui.output_stream.getvalue().count("Invalid input! Please enter 2 numbers.") == 2

    def test_read_ints_ignores_extra_tokens(self):
        ui = make_ui(ClassicUI, "0 1 2\n")
        assert ui.read_ints("> ") == (0, 1)

    def test_read_single_int(self):
        ui = make_ui(ClassicUI, "x\n4\n")
        assert ui.read_ints("> ", 1) == (4,)
        assert "Please enter a number." in ui.output_stream.getvalue()

    def test_end_of_input_raises(self):
        ui = make_ui(ClassicUI, "")
        with pytest.raises(EOFError):
            ui.read_ints("> ")

    def test_read_token(self):
        ui = make_ui(ClassicUI, "xy\n7\nq\n")
        assert ui.read_token("> ", "ABCDEFGHIJKLMNOPQRSTUVWXYZ") == 'Q'
        assert ui.output_stream.getvalue().count("Please enter a valid input.") == 2


class TestPlayerSetup:

    def test_type_choice_reprompts(self):
        ui = make_ui(ClassicUI, "3\n2\n")
        assert ui.get_player_type_choice("Player 1") == PlayerType.COMPUTER
        assert "Invalid choice. Try again." in ui.output_stream.getvalue()

    def test_setup_players(self):
        ui = make_ui(ClassicUI, "Alice\n1\n\n2\n")
        alice, second = ui.setup_players()

        assert (alice.name, alice.symbol, alice.player_type) == ("Alice", 'X', PlayerType.HUMAN)
        # Blank name falls back to the label
        assert (second.name, second.symbol, second.player_type) == ("Player 2", 'O', PlayerType.COMPUTER)
        assert "Creating computer player: Player 2 (O)" in ui.output_stream.getvalue()


class TestMoves:

    def test_human_move_from_coordinates(self):
        board = ClassicBoard()
        ui = make_ui(ClassicUI, "2 1\n")
        assert ui.get_move(make_player(board, 'X')) == Move(2, 1, 'X')

    def test_random_move_uses_injected_source(self):
        board = ClassicBoard()
        place(board, 'O', (0, 0))
        rng = ScriptedRandom([0, 7])
        ui = make_ui(ClassicUI, rng=rng)
        computer = make_player(board, 'X', player_type=PlayerType.COMPUTER)

        assert ui.get_move(computer) == Move(0, 1, 'X')
        assert ui.get_move(computer) == Move(2, 2, 'X')
        assert rng.calls == [8, 8]

    def test_random_move_without_legal_moves(self):
        board = ClassicBoard()
        for r in range(3):
            for c in range(3):
                place(board, 'X', (r, c))
        ui = make_ui(ClassicUI)
        with pytest.raises(RuntimeError):
            ui.random_move(make_player(board, 'O', player_type=PlayerType.COMPUTER))


class TestDisplay:

    def test_board_shows_indices_and_marks(self):
        board = ClassicBoard()
        place(board, 'X', (1, 2))
        ui = make_ui(ClassicUI)
        ui.display_board(board)
        lines = ui.output_stream.getvalue().splitlines()

        assert lines[1].split() == ['0', '1', '2']
        assert lines[5].startswith(" 1 |")
        assert " X |" in lines[5]
