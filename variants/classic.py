"""
Classic 3x3 Tic-Tac-Toe.
"""

from game import Board, Move, Player, has_run
from ui import UI


class ClassicBoard(Board):
    """Three in a row on a 3x3 grid. Supports undo."""

    def __init__(self):
        super().__init__(3, 3)

    def update_board(self, move: Move) -> bool:
        return self.place_or_undo(move)

    def is_win(self, player: Player) -> bool:
        return has_run(self.grid, player.symbol, 3)

    def is_draw(self, player: Player) -> bool:
        return self.move_count == 9 and not self.is_win(player)


class ClassicUI(UI):

    def __init__(self, **kwargs):
        super().__init__("Welcome to Classic Tic-Tac-Toe", 3, **kwargs)

    def get_move(self, player: Player) -> Move:
        if player.is_human:
            row, col = self.ask_coordinates(player, 2)
            return Move(row, col, player.symbol)
        return self.random_move(player)
