"""
Connect 4 on a 6x7 grid. The UI turns a chosen column into the lowest free row.
"""

from typing import List, Optional

from game import Board, Move, Player, has_run
from ui import UI

ROWS = 6
COLS = 7


class ConnectFourBoard(Board):

    def __init__(self):
        super().__init__(ROWS, COLS)

    def drop_row(self, col: int) -> Optional[int]:
        """Lowest empty row in ``col``, or None when the column is full or out of range"""
        if not 0 <= col < self.cols:
            return None
        for row in range(self.rows - 1, -1, -1):
            if self.grid[row, col] == self.blank:
                return row
        return None

    def top_row(self, col: int) -> Optional[int]:
        """Highest occupied row in ``col``"""
        for row in range(self.rows):
            if self.grid[row, col] != self.blank:
                return row
        return None

    def update_board(self, move: Move) -> bool:
        if not self.in_bounds(move.row, move.col):
            return False
        # Pieces rest on the bottom or on another piece; only the top piece can be undone
        if move.is_undo:
            if move.row != self.top_row(move.col):
                return False
        elif move.row != self.drop_row(move.col):
            return False
        return self.place_or_undo(move)

    def available_moves(self, symbol: str) -> List[Move]:
        moves = []
        for col in range(self.cols):
            row = self.drop_row(col)
            if row is not None:
                moves.append(Move(row, col, symbol))
        return moves

    def is_win(self, player: Player) -> bool:
        return has_run(self.grid, player.symbol, 4)

    def is_draw(self, player: Player) -> bool:
        return self.move_count == self.rows * self.cols and not self.is_win(player)


class ConnectFourUI(UI):

    def __init__(self, **kwargs):
        super().__init__("Welcome to Connect 4", 3, **kwargs)

    def get_move(self, player: Player) -> Move:
        board = player.board
        if not player.is_human:
            return self.random_move(player)

        while True:
            (col,) = self.read_ints(
                f"\n{player.name} ({player.symbol}), enter column number (0-{board.cols - 1}): ", 1)
            row = board.drop_row(col)
            if row is not None:
                return Move(row, col, player.symbol)
            if 0 <= col < board.cols:
                self.display_message(f"Column {col} is full! Please choose another column.")
            else:
                self.display_message(f"Please enter a column number between 0 and {board.cols - 1}.")
