"""
Memory Tic-Tac-Toe: classic rules, but the board never shows whose mark is where.
"""

from game import Board, Move, Player, has_run
from ui import UI

HIDDEN = '#'


class MemoryBoard(Board):

    def __init__(self):
        super().__init__(3, 3)

    def update_board(self, move: Move) -> bool:
        return self.place_or_undo(move)

    def is_win(self, player: Player) -> bool:
        return has_run(self.grid, player.symbol, 3)

    def is_draw(self, player: Player) -> bool:
        return self.move_count == 9 and not self.is_win(player)


class MemoryUI(UI):

    def __init__(self, **kwargs):
        super().__init__("Welcome to Memory Tic-Tac-Toe", 3, **kwargs)

    def display_board(self, board: Board):
        # Occupied cells are masked
        self.display_matrix([[HIDDEN if cell != board.blank else cell for cell in row]
                             for row in board.cells()])

    def get_move(self, player: Player) -> Move:
        if player.is_human:
            row, col = self.read_ints("\nPlease enter your move x and y (0 to 2): ")
            return Move(row, col, player.symbol)
        return self.random_move(player)
