"""
4x4 slide Tic-Tac-Toe.

Both players start with four pieces on the outer rows and move by sliding one of
their own pieces to an orthogonally adjacent empty cell. A slide is a ``select``
of the player's own piece followed by ``update_board`` with the destination;
only the completed slide counts as a move. Three in a row anywhere on the grid wins.
"""

from typing import List, Optional, Tuple

from game import Board, Move, Player, has_run
from ui import UI

ORTHOGONAL = ((-1, 0), (1, 0), (0, -1), (0, 1))


class FourByFourBoard(Board):

    def __init__(self):
        super().__init__(4, 4)
        self.grid[0] = ['O', 'X', 'O', 'X']
        self.grid[3] = ['X', 'O', 'X', 'O']
        self.selected: Optional[Tuple[int, int]] = None

    def select(self, row: int, col: int, symbol: str) -> bool:
        """Pick the piece to slide. Only ``symbol``'s own pieces can be picked."""
        if not self.in_bounds(row, col) or self.grid[row, col] != symbol.upper():
            return False
        self.selected = (row, col)
        return True

    def update_board(self, move: Move) -> bool:
        if move.is_undo or not self.is_empty(move.row, move.col):
            return False
        if self.selected is None:
            return False

        symbol = move.symbol.upper()
        src_row, src_col = self.selected
        if self.grid[src_row, src_col] != symbol:
            return False
        if abs(src_row - move.row) + abs(src_col - move.col) != 1:
            return False

        self.grid[src_row, src_col] = self.blank
        self.grid[move.row, move.col] = symbol
        self.selected = None
        self.move_count += 1
        return True

    def slides(self, symbol: str) -> List[Tuple[Tuple[int, int], Tuple[int, int]]]:
        """Every (source, destination) slide available to ``symbol``"""
        result = []
        for r in range(self.rows):
            for c in range(self.cols):
                if self.grid[r, c] != symbol:
                    continue
                for dr, dc in ORTHOGONAL:
                    if self.is_empty(r + dr, c + dc):
                        result.append(((r, c), (r + dr, c + dc)))
        return result

    def available_moves(self, symbol: str) -> List[Move]:
        """Destinations reachable from the current selection"""
        if self.selected is None:
            return []
        return [Move(dst[0], dst[1], symbol)
                for src, dst in self.slides(symbol) if src == self.selected]

    def is_win(self, player: Player) -> bool:
        return has_run(self.grid, player.symbol, 3)

    def is_draw(self, player: Player) -> bool:
        """Stalemate: the opponent has no slide left"""
        opponent = 'O' if player.symbol == 'X' else 'X'
        return not self.is_win(player) and not self.slides(opponent)


class FourByFourUI(UI):

    def __init__(self, **kwargs):
        super().__init__("Welcome to 4x4 Tic-Tac-Toe", 3, **kwargs)

    def get_move(self, player: Player) -> Move:
        board = player.board
        if not player.is_human:
            (src_row, src_col), (dst_row, dst_col) = self.rng.choice(board.slides(player.symbol))
            board.select(src_row, src_col, player.symbol)
            return Move(dst_row, dst_col, player.symbol)

        while True:
            row, col = self.read_ints("\nPlease enter x and y you move from (0 to 3): ")
            if board.select(row, col, player.symbol):
                break
            self.display_message("You can only move your own pieces.")
        row, col = self.read_ints("Please enter your move x and y (0 to 3): ")
        return Move(row, col, player.symbol)
