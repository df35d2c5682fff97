"""Shared helpers for hub tests."""

import io
from typing import Iterable, List, Sequence, Tuple

import numpy as np

from game import Board, Move, Player, PlayerType, RandomSource
from ui import UI


class ScriptedRandom(RandomSource):
    """Returns queued values (modulo ``upper``), then 0 once the queue runs dry."""

    def __init__(self, values: Iterable[int] = ()):
        super().__init__(0)
        self.values = list(values)
        self.calls: List[int] = []

    def next_in_range(self, upper: int) -> int:
        if upper <= 0:
            raise ValueError(f"upper must be positive, got {upper}")
        self.calls.append(upper)
        value = self.values.pop(0) if self.values else 0
        return value % upper


class ScriptedUI(UI):
    """Feeds a fixed list of moves to the GameManager, whoever is asking."""

    def __init__(self, moves: Sequence[Move] = (), input_text: str = ""):
        super().__init__("Scripted game", 3,
                         input_stream=io.StringIO(input_text),
                         output_stream=io.StringIO())
        self.moves = list(moves)
        self.asked: List[str] = []

    def get_move(self, player: Player) -> Move:
        self.asked.append(player.name)
        return self.moves.pop(0)

    @property
    def output(self) -> str:
        return self.output_stream.getvalue()


def make_ui(ui_class, input_text: str = "", rng: RandomSource = None) -> UI:
    return ui_class(rng=rng or ScriptedRandom(),
                    input_stream=io.StringIO(input_text),
                    output_stream=io.StringIO())


def make_player(board: Board, symbol: str, name: str = None,
                player_type: PlayerType = PlayerType.HUMAN) -> Player:
    player = Player(name or f"Player {symbol}", symbol, player_type)
    player.board = board
    return player


def place(board: Board, symbol: str, *cells: Tuple[int, int]):
    """Apply placements that are expected to be legal"""
    for row, col in cells:
        assert board.update_board(Move(row, col, symbol)), f"{symbol} at ({row}, {col}) rejected"


def set_grid(board: Board, rows: Sequence[str]):
    """Overwrite the grid from strings, one per row"""
    board.grid[:] = np.array([list(row) for row in rows], dtype='<U1')
