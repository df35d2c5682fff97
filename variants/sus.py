"""
SUS game: player 1 writes S, player 2 writes U.

Each time a move completes "SUS" in the row, column or diagonal through the
played cell (read left to right / top to bottom only), the mover scores a point.
After nine moves the higher score wins.
"""

from typing import Dict, List

from game import Board, Move, Player
from ui import UI

WORD = "SUS"
SYMBOLS = ('S', 'U')


class SUSBoard(Board):

    def __init__(self):
        super().__init__(3, 3)
        self.scores: Dict[str, int] = {symbol: 0 for symbol in SYMBOLS}

    def update_board(self, move: Move) -> bool:
        if move.is_undo or move.symbol.upper() not in SYMBOLS:
            return False
        if not self.is_empty(move.row, move.col):
            return False

        symbol = move.symbol.upper()
        self.grid[move.row, move.col] = symbol
        self.move_count += 1
        self.scores[symbol] += self.count_words(move.row, move.col)
        return True

    def lines_through(self, row: int, col: int) -> List[str]:
        """Row, column and any diagonals passing through (row, col), as strings"""
        lines = [''.join(self.grid[row, :]), ''.join(self.grid[:, col])]
        if row == col:
            lines.append(''.join(self.grid.diagonal()))
        if row + col == self.cols - 1:
            lines.append(''.join(self.grid[i, self.cols - 1 - i] for i in range(self.rows)))
        return lines

    def count_words(self, row: int, col: int) -> int:
        return sum(1 for line in self.lines_through(row, col) if line == WORD)

    def _opponent(self, symbol: str) -> str:
        return 'U' if symbol == 'S' else 'S'

    def is_win(self, player: Player) -> bool:
        if self.move_count < 9:
            return False
        return self.scores[player.symbol] > self.scores[self._opponent(player.symbol)]

    def is_lose(self, player: Player) -> bool:
        if self.move_count < 9:
            return False
        return self.scores[player.symbol] < self.scores[self._opponent(player.symbol)]

    def is_draw(self, player: Player) -> bool:
        return self.move_count == 9 and self.scores['S'] == self.scores['U']


class SUSUI(UI):

    player_symbols = SYMBOLS

    def __init__(self, **kwargs):
        super().__init__("Welcome to SUS Game", 3, **kwargs)

    def display_board(self, board: Board):
        super().display_board(board)
        self.display_message(f"Score  S: {board.scores['S']}  U: {board.scores['U']}")

    def get_move(self, player: Player) -> Move:
        if player.is_human:
            row, col = self.ask_coordinates(player, 2)
            return Move(row, col, player.symbol)
        return self.random_move(player)
