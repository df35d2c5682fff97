"""
Pyramid Tic-Tac-Toe.

A 3x5 grid of which nine cells form a pyramid: the apex (0, 2), three cells in
row 1 and the whole of row 2. Cells outside the pyramid hold the void marker.
"""

from game import VOID, Board, Move, Player
from ui import UI

PYRAMID_CELLS = frozenset(
    [(0, 2)] + [(1, c) for c in range(1, 4)] + [(2, c) for c in range(5)])

WINNING_LINES = [
    # Row 1
    [(1, 1), (1, 2), (1, 3)],
    # Column 2
    [(0, 2), (1, 2), (2, 2)],
    # Row 2 windows
    [(2, 0), (2, 1), (2, 2)],
    [(2, 1), (2, 2), (2, 3)],
    [(2, 2), (2, 3), (2, 4)],
    # Diagonals from the apex
    [(0, 2), (1, 3), (2, 4)],
    [(0, 2), (1, 1), (2, 0)],
]


class PyramidBoard(Board):

    def __init__(self):
        super().__init__(3, 5)
        for r in range(self.rows):
            for c in range(self.cols):
                if (r, c) not in PYRAMID_CELLS:
                    self.grid[r, c] = VOID

    def is_playable(self, row: int, col: int) -> bool:
        return (row, col) in PYRAMID_CELLS

    def update_board(self, move: Move) -> bool:
        return self.place_or_undo(move)

    def is_win(self, player: Player) -> bool:
        return any(all(self.grid[r, c] == player.symbol for r, c in line)
                   for line in WINNING_LINES)

    def is_draw(self, player: Player) -> bool:
        return self.move_count == len(PYRAMID_CELLS) and not self.is_win(player)


class PyramidUI(UI):

    def __init__(self, **kwargs):
        super().__init__("Welcome to Pyramid Tic-Tac-Toe", 3, **kwargs)

    def get_move(self, player: Player) -> Move:
        if not player.is_human:
            return self.random_move(player)
        board = player.board
        while True:
            row, col = self.ask_coordinates(player, 4)
            if board.is_playable(row, col):
                return Move(row, col, player.symbol)
            self.display_message("Invalid Move! That cell is not part of the pyramid.")
